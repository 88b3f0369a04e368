"""Oracle adapter.

Connects the SQL generation of :class:`OracleQueryBuilder` to a statement
executor and a schema introspector: paginated selects, sequence-backed
inserts, LOB writes, schema changes and session queries.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from orasql.common.exceptions import configuration_error
from orasql.constants import ColumnType, QueryType
from orasql.logging import get_logger
from orasql.operations.inserts import InsertExecutor
from orasql.operations.lob import LobWriter
from orasql.operations.sequences import OptionsLike, SequenceManager
from orasql.protocols import Executor, SchemaIntrospector
from orasql.query_builder.builder import OracleQueryBuilder
from orasql.query_builder.ddl import EXPLAIN_DISPLAY_SQL
from orasql.settings import DialectSettings
from orasql.types.columns import ColumnDescriptor
from orasql.types.pagination import PaginationSpec
from orasql.types.sequences import SequenceDescriptor

logger = get_logger(__name__)


def _first_value(row: Mapping[str, Any]) -> Any:
    return next(iter(row.values()), None)


def _get(row: Mapping[str, Any], key: str) -> Any:
    # drivers differ in the case of returned column names
    if key in row:
        return row[key]
    return row.get(key.upper())


class OracleAdapter:
    """Oracle database adapter.

    Args:
        executor: Statement executor
        introspector: Schema metadata source, needed for :meth:`columns`,
            :meth:`tables` and :meth:`prefetch_primary_key`
        settings: Dialect settings; defaults are used when omitted
        query_builder: Builder to generate SQL with; built from ``settings``
            when omitted

    Example:
        >>> adapter = OracleAdapter(engine, SQLAlchemyIntrospector(engine.engine))
        >>> adapter.select("SELECT * FROM posts ORDER BY id", limit=10, offset=20)
        [{'id': 21, 'title': '...'}, ...]
        >>> adapter.insert("INSERT INTO posts (id, title) VALUES (:id, :title)", pk="id", binds={"title": "Hi"})
        10000
    """

    def __init__(
        self,
        executor: Executor,
        introspector: Optional[SchemaIntrospector] = None,
        settings: Optional[DialectSettings] = None,
        query_builder: Optional[OracleQueryBuilder] = None,
    ):
        self.executor = executor
        self.introspector = introspector
        if query_builder is not None:
            self.query_builder = query_builder
            self.settings = settings or query_builder.settings
        else:
            self.settings = settings or DialectSettings()
            self.query_builder = OracleQueryBuilder(self.settings)

        self.sequences = SequenceManager(executor, self.query_builder, self.settings.sequence_start_value)
        self.inserts = InsertExecutor(executor, self.sequences)
        self.lobs = LobWriter(executor, self.query_builder.identifiers)

        self._current_user: Optional[str] = None
        self._current_database: Optional[str] = None
        self._database_parameters: Dict[str, Any] = {}

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        executor: Executor,
        introspector: Optional[SchemaIntrospector] = None,
    ) -> "OracleAdapter":
        """Build an adapter from a connection configuration mapping (``schema``, ``username``...)."""
        return cls(executor, introspector, settings=DialectSettings.from_config(config))

    def _execute(self, sql: str, query_type: QueryType) -> List[Dict[str, Any]]:
        logger.debug("Executing statement", extra={"query_type": query_type.value, "sql": sql})
        return self.executor.execute(sql)

    def _select_value(self, sql: str) -> Any:
        rows = self._execute(sql, QueryType.SELECT)
        return _first_value(rows[0]) if rows else None

    # Schema metadata

    @property
    def oracle_schema(self) -> Optional[str]:
        """Configured schema, else the username."""
        return self.settings.oracle_schema

    def _require_introspector(self) -> SchemaIntrospector:
        if self.introspector is None:
            raise configuration_error(
                "Schema introspection requires a SchemaIntrospector",
                config_key="introspector",
            )
        return self.introspector

    def columns(self, table_name: str) -> List[ColumnDescriptor]:
        return self._require_introspector().columns(str(table_name), self.oracle_schema)

    def tables(self) -> List[str]:
        return self._require_introspector().tables(self.oracle_schema)

    def prefetch_primary_key(self, table_name: Optional[str] = None) -> Optional[ColumnDescriptor]:
        """The primary key column of ``table_name`` when ids are fetched from a sequence before insert."""
        if not table_name:
            return None
        return next((column for column in self.columns(table_name) if column.primary), None)

    # Queries

    def select(
        self,
        sql: str,
        limit: Union[int, PaginationSpec, None] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Run a query, optionally paginated, and return its rows.

        The row number column added for pagination is removed from every row.
        """
        rows = self._execute(self.query_builder.add_limit_offset(sql, limit, offset), QueryType.SELECT)
        columns = list(rows[0].keys()) if rows else []
        _, rows = self.query_builder.strip_row_number(columns, rows)
        return rows

    def insert(
        self,
        sql: str,
        pk: Optional[str] = None,
        id_value: Any = None,
        sequence_name: Optional[str] = None,
        binds: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Insert a row, drawing its id from the table sequence; see :class:`InsertExecutor`."""
        return self.inserts.insert(sql, pk=pk, id_value=id_value, sequence_name=sequence_name, binds=binds)

    def after_save(
        self,
        table_name: str,
        row: Mapping[str, Any],
        columns: Optional[Iterable[ColumnDescriptor]] = None,
        pk: str = "id",
    ) -> List[str]:
        """Write LOB content of a saved row; columns are introspected when not given."""
        if columns is None:
            columns = self.columns(table_name)
        return self.lobs.after_save(table_name, row, columns, pk)

    def release_savepoint(self, name: Optional[str] = None) -> None:
        # Oracle has no RELEASE SAVEPOINT statement
        return None

    def explain(self, sql: str) -> Optional[str]:
        """Execution plan of ``sql`` as text, None for data dictionary queries."""
        statement = self.query_builder.explain(sql)
        if statement is None:
            return None
        self._execute(statement, QueryType.EXPLAIN)
        rows = self._execute(EXPLAIN_DISPLAY_SQL, QueryType.EXPLAIN)
        return "\n".join(str(_first_value(row)) for row in rows)

    # Session

    @property
    def current_user(self) -> Optional[str]:
        if self._current_user is None:
            rows = self._execute(self.query_builder.current_user(), QueryType.SESSION)
            self._current_user = _get(rows[0], "su") if rows else None
        return self._current_user

    @property
    def current_database(self) -> Optional[str]:
        if self._current_database is None:
            rows = self._execute(self.query_builder.current_database(), QueryType.SESSION)
            self._current_database = _get(rows[0], "db") if rows else None
        return self._current_database

    @property
    def current_schema(self) -> Optional[str]:
        rows = self._execute(self.query_builder.current_schema(), QueryType.SESSION)
        return _get(rows[0], "schema") if rows else None

    def set_current_schema(self, schema_owner: str) -> None:
        self._execute(self.query_builder.set_current_schema(schema_owner), QueryType.SESSION)
        logger.info("Current schema changed", extra={"schema": schema_owner})

    def temporary_table(self, table_name: str) -> bool:
        return self._select_value(self.query_builder.temporary_table(table_name)) == "Y"

    def tablespace(self, table_name: str) -> Optional[str]:
        return self._select_value(self.query_builder.tablespace(table_name))

    def database_parameters(self) -> Dict[str, Any]:
        """NLS database parameters, read once per adapter."""
        if not self._database_parameters:
            rows = self._execute(self.query_builder.database_parameters(), QueryType.SELECT)
            self._database_parameters = {_get(row, "parameter"): _get(row, "value") for row in rows}
        return self._database_parameters

    @property
    def charset(self) -> Optional[str]:
        return self.database_parameters().get("NLS_CHARACTERSET")

    @property
    def collation(self) -> Optional[str]:
        return self.database_parameters().get("NLS_COMP")

    # Schema changes

    def create_table(self, table_name: str, body: str, options: OptionsLike = None) -> Optional[SequenceDescriptor]:
        return self.sequences.create_table(table_name, body, options)

    def drop_table(self, table_name: str, options: OptionsLike = None) -> None:
        self.sequences.drop_table(table_name, options)

    def rename_table(self, table_name: str, new_name: str) -> None:
        self.sequences.rename_table(table_name, new_name)

    def create_sequence(self, table_name: str, options: OptionsLike = None) -> Optional[SequenceDescriptor]:
        return self.sequences.create_sequence(table_name, options)

    def drop_sequence(self, table_name: str, options: OptionsLike = None) -> bool:
        return self.sequences.drop_sequence(table_name, options)

    def next_sequence_value(self, sequence_name: str) -> int:
        return self.sequences.next_sequence_value(sequence_name)

    def default_sequence_name(self, table_name: str) -> str:
        return self.query_builder.default_sequence_name(table_name)

    def change_column_default(self, table_name: str, column_name: str, default: Any) -> None:
        self._execute(self.query_builder.change_column_default(table_name, column_name, default), QueryType.ALTER)
        logger.info("Column default changed", extra={"table": table_name, "column": column_name})

    def change_column(
        self,
        table_name: str,
        column_name: str,
        type_: Union[ColumnType, str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._execute(self.query_builder.change_column(table_name, column_name, type_, options), QueryType.ALTER)
        logger.info("Column changed", extra={"table": table_name, "column": column_name})

    def rename_column(self, table_name: str, column_name: str, new_column_name: str) -> None:
        self._execute(self.query_builder.rename_column(table_name, column_name, new_column_name), QueryType.ALTER)
        logger.info(
            "Column renamed",
            extra={"table": table_name, "column": column_name, "new_name": new_column_name},
        )

    def remove_columns(self, table_name: str, *column_names: Union[str, Iterable[str]]) -> None:
        for sql in self.query_builder.remove_columns(table_name, *column_names):
            self._execute(sql, QueryType.ALTER)
        logger.info("Columns removed", extra={"table": table_name})

    def remove_index(
        self,
        table_name: str,
        name: Optional[str] = None,
        column: Union[str, Iterable[str], None] = None,
    ) -> None:
        self._execute(self.query_builder.remove_index(table_name, name=name, column=column), QueryType.DROP_INDEX)
        logger.info("Index removed", extra={"table": table_name, "index": name})
