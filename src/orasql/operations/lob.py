"""Writing large object content after a row is saved.

INSERT and UPDATE statements only carry ``empty_clob()`` / ``empty_blob()``
for LOB columns. Once the row exists, :class:`LobWriter` writes the real
content with one bound UPDATE per column. The host persistence layer
registers :meth:`LobWriter.after_save` as its post-write callback.
"""

from typing import Any, Iterable, List, Mapping, Optional

from orasql.common.exceptions import validation_error
from orasql.constants import QueryType
from orasql.logging import get_logger
from orasql.protocols import Executor
from orasql.query_builder.quoting import IdentifierQuoter
from orasql.types.columns import ColumnDescriptor

logger = get_logger(__name__)


class LobWriter:
    """Post-save callback that fills LOB columns.

    Args:
        executor: Statement executor
        identifier_quoter: Quoter for the table, column and key names

    Example:
        >>> writer = LobWriter(executor)
        >>> writer.after_save("posts", {"id": 7, "body": "long text"}, columns, pk="id")
        ['body']
    """

    def __init__(self, executor: Executor, identifier_quoter: Optional[IdentifierQuoter] = None):
        self.executor = executor
        self.identifiers = identifier_quoter or IdentifierQuoter()

    def update_lob_sql(self, table_name: str, column_name: str, pk: str) -> str:
        return (
            f"UPDATE {self.identifiers.quote_table_name(table_name)} "
            f"SET {self.identifiers.quote_column_name(column_name)} = :value "
            f"WHERE {self.identifiers.quote_column_name(pk)} = :id"
        )

    def after_save(
        self,
        table_name: str,
        row: Mapping[str, Any],
        columns: Iterable[ColumnDescriptor],
        pk: str = "id",
    ) -> List[str]:
        """Write the LOB values of a saved row.

        Args:
            table_name: Table the row was saved to
            row: Saved values by column name, including the primary key
            columns: Column descriptors of the table
            pk: Primary key column

        Returns:
            Names of the columns that were written; None and empty values
            are skipped

        Raises:
            OraSQLError: VALIDATION_ERROR if a LOB must be written and the row
                has no primary key value
        """
        written: List[str] = []
        for column in columns:
            if not column.is_lob:
                continue
            value = row.get(column.name)
            if value is None or (isinstance(value, (str, bytes, bytearray)) and len(value) == 0):
                continue

            id_value = row.get(pk)
            if id_value is None:
                raise validation_error(
                    f"Cannot write {column.name} without a value for primary key {pk}",
                    field=pk,
                )

            sql = self.update_lob_sql(table_name, column.name, pk)
            logger.debug("Executing statement", extra={"query_type": QueryType.UPDATE.value, "sql": sql})
            self.executor.exec_insert(sql, {"value": value, "id": id_value})
            written.append(column.name)

        if written:
            logger.debug("LOB columns written", extra={"table": table_name, "columns": written})
        return written
