"""INSERT with sequence prefetch.

When a row has no pre-assigned id, the next value of the table's sequence
is fetched first and bound as the primary key, so the caller learns the id
without a RETURNING clause.
"""

from typing import Any, Dict, Mapping, Optional

from orasql.common.exceptions import validation_error
from orasql.constants import QueryType
from orasql.logging import get_logger
from orasql.operations.sequences import SequenceManager
from orasql.protocols import Executor
from orasql.types.sequences import default_sequence_name
from orasql.types.values import SqlLiteral

logger = get_logger(__name__)


def extract_table_ref_from_insert_sql(sql: str) -> str:
    """Best-effort table name of an ``INSERT INTO <table> ...`` statement.

    Takes the third whitespace separated token, removes double quotes and
    cuts it at the first ``(``. Only the simple shapes are supported:

        INSERT INTO posts (id, title) VALUES (...)   -> posts
        INSERT INTO posts(id, title) VALUES (...)    -> posts
        INSERT INTO "POSTS" (...)                    -> POSTS
        INSERT INTO hr.posts (...)                   -> hr.posts (schema kept)
        INSERT INTO "My Posts" (...)                 -> My (quoted names with spaces break)
        INSERT INTO posts SELECT ...                 -> posts
        INSERT /*+ APPEND */ INTO posts ...          -> APPEND (hints break)

    A wrong name surfaces later as a failing sequence lookup.

    Raises:
        OraSQLError: VALIDATION_ERROR when the statement has fewer than
            three tokens
    """
    tokens = sql.split(None, 3)
    if len(tokens) < 3:
        raise validation_error(
            "Cannot extract table name from INSERT statement",
            field="sql",
            value=sql[:100],
        )
    table = tokens[2].replace('"', "")
    return table.split("(", 1)[0]


class InsertExecutor:
    """Runs INSERT statements, generating primary keys from sequences.

    Args:
        executor: Statement executor
        sequences: Sequence manager sharing the executor
    """

    def __init__(self, executor: Executor, sequences: Optional[SequenceManager] = None):
        self.executor = executor
        self.sequences = sequences or SequenceManager(executor)

    def _exec_insert(self, sql: str, binds: Dict[str, Any]) -> Any:
        logger.debug("Executing statement", extra={"query_type": QueryType.INSERT.value, "sql": sql})
        return self.executor.exec_insert(sql, binds)

    def insert(
        self,
        sql: str,
        pk: Optional[str] = None,
        id_value: Any = None,
        sequence_name: Optional[str] = None,
        binds: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Execute an INSERT and return the row's id.

        With a pre-assigned ``id_value`` or without a primary key the
        statement runs as is. Otherwise the next sequence value is bound to
        the ``:<pk>`` placeholder that ``sql`` must contain.

        Args:
            sql: INSERT statement with named bind placeholders
            pk: Primary key column, None for tables without one
            id_value: Pre-assigned id; a SqlLiteral counts as not assigned
            sequence_name: Sequence to draw from; derived from the table otherwise
            binds: Other bind values

        Returns:
            The id used, or the executor's insert result when there is none
        """
        if (id_value is not None and not isinstance(id_value, SqlLiteral)) or pk is None:
            result = self._exec_insert(sql, dict(binds or {}))
            return id_value if id_value is not None else result

        if sequence_name is None:
            sequence_name = default_sequence_name(extract_table_ref_from_insert_sql(sql))

        id_value = self.sequences.next_sequence_value(sequence_name)
        bound: Dict[str, Any] = dict(binds or {})
        bound[pk] = id_value
        self._exec_insert(sql, bound)

        logger.debug("Inserted row with sequence id", extra={"sequence_name": sequence_name, "id": id_value})
        return id_value
