from typing import Any, Mapping, Optional

from pydantic import Field

from orasql.constants import DEFAULT_SEQUENCE_START_VALUE, IDENTIFIER_LENGTH, SEQUENCE_SUFFIX
from orasql.types.base import OraSQLBaseModel


def default_sequence_name(table_name: str) -> str:
    """Sequence name derived from a table name, always within the identifier limit."""
    return f"{str(table_name)[:IDENTIFIER_LENGTH - len(SEQUENCE_SUFFIX)]}{SEQUENCE_SUFFIX}"


class TableOptions(OraSQLBaseModel):
    """Table lifecycle options that affect the backing sequence.

    Attributes:
        id: False disables primary-key generation (no sequence is created)
        sequence_name: Explicit sequence name, overrides the derived one
        sequence_start_value: Explicit START WITH value
    """

    id: bool = Field(default=True)
    sequence_name: Optional[str] = Field(default=None, min_length=1)
    sequence_start_value: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "TableOptions":
        if options is None:
            return cls()
        if isinstance(options, TableOptions):
            return options
        return cls(**{k: v for k, v in options.items() if k in cls.model_fields})


class SequenceDescriptor(OraSQLBaseModel):
    """A per-table sequence; its current value lives only in the database."""

    name: str = Field(..., min_length=1)
    start_value: int = Field(default=DEFAULT_SEQUENCE_START_VALUE, ge=1)

    @classmethod
    def for_table(
        cls,
        table_name: str,
        options: Optional[TableOptions] = None,
        default_start_value: int = DEFAULT_SEQUENCE_START_VALUE,
    ) -> "SequenceDescriptor":
        """Resolve the sequence for ``table_name``.

        The name is not validated against the identifier limit here so that
        callers can fail with a descriptive error instead of a pydantic one.
        """
        options = options or TableOptions()
        return cls(
            name=options.sequence_name or default_sequence_name(table_name),
            start_value=options.sequence_start_value or default_start_value,
        )

    @property
    def fits_identifier_limit(self) -> bool:
        return len(self.name) <= IDENTIFIER_LENGTH
