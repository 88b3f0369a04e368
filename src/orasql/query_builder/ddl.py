"""Schema, sequence and session statements for Oracle.

Statements are only generated here; executing them is the job of
:class:`orasql.operations.adapter.OracleAdapter` and
:class:`orasql.operations.sequences.SequenceManager`.
"""

import re
from typing import Any, Iterable, List, Mapping, Optional, Union

from orasql.common.exceptions import validation_error
from orasql.constants import IDENTIFIER_LENGTH, IN_CLAUSE_LENGTH, ColumnType
from orasql.query_builder.quoting import IdentifierQuoter
from orasql.query_builder.type_mapper import TypeMapper, coerce_column_type
from orasql.query_builder.values import ValueQuoter
from orasql.types.columns import ColumnDescriptor

CURRENT_USER_SQL = "SELECT sys_context('userenv', 'session_user') su FROM dual"
CURRENT_DATABASE_SQL = "SELECT sys_context('userenv', 'db_name') db FROM dual"
CURRENT_SCHEMA_SQL = "SELECT sys_context('userenv', 'current_schema') schema FROM dual"
DATABASE_PARAMETERS_SQL = "SELECT * FROM NLS_DATABASE_PARAMETERS"
EXPLAIN_DISPLAY_SQL = "SELECT * FROM TABLE(DBMS_XPLAN.DISPLAY)"

# EXPLAIN PLAN fails on the data dictionary views
_DICTIONARY_QUERY = re.compile(r"FROM all_")


class SchemaStatementBuilder:
    """Generates DDL, sequence and session statements.

    Args:
        identifier_quoter: Quoter for table, column and index names
        value_quoter: Quoter for DEFAULT values
        type_mapper: Mapper for column type declarations
    """

    # ORA-01795: maximum number of expressions in a list is 1000
    in_clause_length = IN_CLAUSE_LENGTH
    table_alias_length = IDENTIFIER_LENGTH
    table_name_length = IDENTIFIER_LENGTH
    index_name_length = IDENTIFIER_LENGTH
    column_name_length = IDENTIFIER_LENGTH

    def __init__(
        self,
        identifier_quoter: Optional[IdentifierQuoter] = None,
        value_quoter: Optional[ValueQuoter] = None,
        type_mapper: Optional[TypeMapper] = None,
    ):
        self.identifiers = identifier_quoter or IdentifierQuoter()
        self.values = value_quoter or ValueQuoter()
        self.types = type_mapper or TypeMapper()

    # Tables and columns

    def create_table(self, table_name: str, body: str) -> str:
        """``CREATE TABLE`` with the column definitions given in ``body``."""
        return f"CREATE TABLE {self.identifiers.quote_table_name(table_name)} ({body})"

    def drop_table(self, table_name: str) -> str:
        return f"DROP TABLE {self.identifiers.quote_table_name(table_name)}"

    def rename_table(self, table_name: str, new_name: str) -> str:
        return f"RENAME {table_name} TO {new_name}"

    def change_column_default(self, table_name: str, column_name: str, default: Any) -> str:
        return (
            f"ALTER TABLE {self.identifiers.quote_table_name(table_name)} "
            f"MODIFY {self.identifiers.quote_column_name(column_name)} "
            f"DEFAULT {self.values.quote(default)}"
        )

    def add_column_options(self, sql: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """Append DEFAULT and NULL/NOT NULL clauses to a column definition.

        Recognized options: ``default`` (present even when None), ``null``
        and ``column``, the ColumnDescriptor the default is quoted for. A
        CLOB default is quoted as plain text since quoting it for the
        column would produce ``empty_clob()``.
        """
        options = options or {}
        if "default" in options:
            column: Optional[ColumnDescriptor] = options.get("column")
            if column is not None and coerce_column_type(column.type) == ColumnType.TEXT:
                sql += f" DEFAULT {self.values.quote(options['default'])}"
            else:
                sql += f" DEFAULT {self.values.quote(options['default'], column)}"

        null = options.get("null")
        if null is False:
            sql += " NOT NULL"
        elif null is True:
            sql += " NULL"
        return sql

    def change_column(
        self,
        table_name: str,
        column_name: str,
        type_: Union[ColumnType, str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        options = options or {}
        sql = (
            f"ALTER TABLE {self.identifiers.quote_table_name(table_name)} "
            f"MODIFY {self.identifiers.quote_column_name(column_name)} "
            f"{self.types.type_to_sql(type_, options.get('limit'), options.get('precision'), options.get('scale'))}"
        )
        return self.add_column_options(sql, options)

    def rename_column(self, table_name: str, column_name: str, new_column_name: str) -> str:
        return (
            f"ALTER TABLE {self.identifiers.quote_table_name(table_name)} "
            f"RENAME COLUMN {self.identifiers.quote_column_name(column_name)} "
            f"TO {self.identifiers.quote_column_name(new_column_name)}"
        )

    def remove_columns(self, table_name: str, *column_names: Union[str, Iterable[str]]) -> List[str]:
        """One ``ALTER TABLE ... DROP COLUMN`` per column; nested lists are flattened."""
        table = self.identifiers.quote_table_name(table_name)
        return [
            f"ALTER TABLE {table} DROP COLUMN {self.identifiers.quote_column_name(name)}"
            for name in _flatten(column_names)
        ]

    def index_name(self, table_name: str, column: Union[str, Iterable[str]]) -> str:
        """Conventional index name, ``index_<table>_on_<col>[_and_<col>...]``."""
        columns = [column] if isinstance(column, str) else list(column)
        return f"index_{table_name}_on_{'_and_'.join(columns)}"

    def remove_index(
        self,
        table_name: str,
        name: Optional[str] = None,
        column: Union[str, Iterable[str], None] = None,
    ) -> str:
        """``DROP INDEX`` by explicit name, or by the conventional name for ``column``."""
        if name is None:
            if column is None:
                raise validation_error("remove_index requires an index name or a column", field="name")
            name = self.index_name(table_name, column)
        return f"DROP INDEX {self.identifiers.quote_column_name(name)}"

    # Sequences

    def create_sequence(self, sequence_name: str, start_value: int) -> str:
        return f"CREATE SEQUENCE {sequence_name} START WITH {start_value}"

    def drop_sequence(self, sequence_name: str) -> str:
        return f"DROP SEQUENCE {sequence_name}"

    def rename_sequence(self, table_name: str, new_name: str) -> str:
        return f"RENAME {table_name}_seq TO {new_name}_seq"

    def next_sequence_value(self, sequence_name: str) -> str:
        return f"SELECT {self.identifiers.quote_table_name(sequence_name)}.nextval id FROM dual"

    # Session and dictionary

    def current_user(self) -> str:
        return CURRENT_USER_SQL

    def current_database(self) -> str:
        return CURRENT_DATABASE_SQL

    def current_schema(self) -> str:
        return CURRENT_SCHEMA_SQL

    def set_current_schema(self, schema_owner: str) -> str:
        return f"ALTER SESSION SET current_schema={schema_owner}"

    def temporary_table(self, table_name: str) -> str:
        name = self.values.quote_string(str(table_name).upper())
        return f"SELECT temporary FROM user_tables WHERE table_name = '{name}'"

    def tablespace(self, table_name: str) -> str:
        name = self.values.quote_string(str(table_name).upper())
        return f"SELECT tablespace_name FROM user_tables WHERE table_name='{name}'"

    def database_parameters(self) -> str:
        return DATABASE_PARAMETERS_SQL

    def explain(self, sql: str) -> Optional[str]:
        """``EXPLAIN PLAN FOR`` statement, None for data dictionary queries."""
        statement = f"EXPLAIN PLAN FOR {sql}"
        if _DICTIONARY_QUERY.search(statement):
            return None
        return statement


def _flatten(items: Iterable[Any]) -> List[str]:
    flat: List[str] = []
    for item in items:
        if isinstance(item, (list, tuple, set)):
            flat.extend(_flatten(item))
        else:
            flat.append(str(item))
    return flat
