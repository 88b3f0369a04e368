"""Sequence-backed primary keys.

Oracle (before identity columns) generates surrogate keys from sequences.
Every table created with a generated id gets a ``<table>_seq`` sequence
that lives and dies with the table.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from orasql.common.exceptions import identifier_too_long_error, sequence_error
from orasql.constants import IDENTIFIER_LENGTH, QueryType
from orasql.logging import get_logger
from orasql.protocols import Executor
from orasql.query_builder.builder import OracleQueryBuilder
from orasql.types.sequences import SequenceDescriptor, TableOptions, default_sequence_name

logger = get_logger(__name__)

OptionsLike = Union[TableOptions, Mapping[str, Any], None]


class SequenceManager:
    """Creates, drops, renames and reads table sequences through an executor.

    Args:
        executor: Statement executor
        query_builder: Builder used to generate the statements
        default_start_value: START WITH value when the options carry none;
            taken from the builder's settings by default

    Example:
        >>> manager = SequenceManager(executor)
        >>> manager.create_table("posts", "id NUMBER(38) NOT NULL PRIMARY KEY, title VARCHAR2(255)")
        >>> manager.next_sequence_value("posts_seq")
        10000
    """

    def __init__(
        self,
        executor: Executor,
        query_builder: Optional[OracleQueryBuilder] = None,
        default_start_value: Optional[int] = None,
    ):
        self.executor = executor
        self.query_builder = query_builder or OracleQueryBuilder()
        self.default_start_value = default_start_value or self.query_builder.settings.sequence_start_value

    def _execute(self, sql: str, query_type: QueryType) -> List[Dict[str, Any]]:
        logger.debug("Executing statement", extra={"query_type": query_type.value, "sql": sql})
        return self.executor.execute(sql)

    def default_sequence_name(self, table_name: str) -> str:
        return default_sequence_name(table_name)

    def resolve(self, table_name: str, options: OptionsLike = None) -> SequenceDescriptor:
        """Sequence name and start value for ``table_name`` under ``options``."""
        return SequenceDescriptor.for_table(
            table_name,
            TableOptions.from_options(options),
            default_start_value=self.default_start_value,
        )

    def create_sequence(self, table_name: str, options: OptionsLike = None) -> Optional[SequenceDescriptor]:
        """Create the sequence backing ``table_name``.

        Args:
            table_name: Table the sequence belongs to
            options: ``id`` (False skips the sequence), ``sequence_name``
                and ``sequence_start_value``

        Returns:
            The created sequence, or None when key generation is disabled

        Raises:
            OraSQLError: INVALID_IDENTIFIER if the sequence name is longer
                than 30 characters
        """
        table_options = TableOptions.from_options(options)
        if not table_options.id:
            logger.debug("Primary key generation disabled, no sequence created", extra={"table": table_name})
            return None

        sequence = self.resolve(table_name, table_options)
        if not sequence.fits_identifier_limit:
            raise identifier_too_long_error(sequence.name, IDENTIFIER_LENGTH, identifier_type="sequence")

        self._execute(self.query_builder.create_sequence(sequence.name, sequence.start_value), QueryType.CREATE_SEQUENCE)
        logger.info(
            "Sequence created",
            extra={"table": table_name, "sequence_name": sequence.name, "start_value": sequence.start_value},
        )
        return sequence

    def drop_sequence(self, table_name: str, options: OptionsLike = None) -> bool:
        """Drop the sequence backing ``table_name``.

        Best effort: the table may have been created without a sequence, so
        a failure is logged and ignored.

        Returns:
            True if the DROP succeeded
        """
        sequence_name = self.resolve(table_name, options).name
        try:
            self._execute(self.query_builder.drop_sequence(sequence_name), QueryType.DROP_SEQUENCE)
        except Exception as exc:
            logger.debug(
                "Sequence drop failed, ignoring",
                extra={"table": table_name, "sequence_name": sequence_name, "error": str(exc)},
            )
            return False
        logger.info("Sequence dropped", extra={"table": table_name, "sequence_name": sequence_name})
        return True

    def create_table(self, table_name: str, body: str, options: OptionsLike = None) -> Optional[SequenceDescriptor]:
        """Create a table and, unless disabled, its sequence.

        Args:
            table_name: Table to create
            body: Column and constraint definitions between the parentheses
            options: Table options, see :meth:`create_sequence`

        Returns:
            The created sequence, or None
        """
        table_options = TableOptions.from_options(options)
        self._execute(self.query_builder.create_table(table_name, body), QueryType.CREATE_TABLE)
        logger.info("Table created", extra={"table": table_name})
        return self.create_sequence(table_name, table_options)

    def drop_table(self, table_name: str, options: OptionsLike = None) -> None:
        """Drop a table and its sequence, ignoring failures of either."""
        try:
            self._execute(self.query_builder.drop_table(table_name), QueryType.DROP_TABLE)
            logger.info("Table dropped", extra={"table": table_name})
        except Exception as exc:
            logger.debug("Table drop failed, ignoring", extra={"table": table_name, "error": str(exc)})
        self.drop_sequence(table_name, options)

    def rename_table(self, table_name: str, new_name: str) -> None:
        """Rename a table, then try to rename ``<table>_seq`` along with it.

        The sequence may not exist under the derived name, so its rename is
        best effort.
        """
        self._execute(self.query_builder.rename_table(table_name, new_name), QueryType.RENAME_TABLE)
        logger.info("Table renamed", extra={"table": table_name, "new_name": new_name})
        try:
            self._execute(self.query_builder.rename_sequence(table_name, new_name), QueryType.RENAME_SEQUENCE)
        except Exception as exc:
            logger.debug(
                "Sequence rename failed, ignoring",
                extra={"table": table_name, "new_name": new_name, "error": str(exc)},
            )

    def next_sequence_value(self, sequence_name: str) -> int:
        """Fetch the next value of ``sequence_name``.

        Always issued through :meth:`Executor.execute` so the value is never
        served from a statement result cache.

        Raises:
            OraSQLError: SEQUENCE_ERROR if the query returned no value
        """
        rows = self._execute(self.query_builder.next_sequence_value(sequence_name), QueryType.SELECT)
        if not rows:
            raise sequence_error(f"Sequence {sequence_name} returned no value", sequence_name=sequence_name)

        row = rows[0]
        value = row.get("id", row.get("ID"))
        if value is None:
            raise sequence_error(f"Sequence {sequence_name} returned no value", sequence_name=sequence_name)
        return int(value)
