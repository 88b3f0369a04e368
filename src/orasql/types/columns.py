"""Column descriptors consumed by the quoting and DDL layers.

Descriptors are produced by schema introspection and are read-only to
the SQL generation core.
"""

import re
from typing import Any, Optional

from pydantic import ConfigDict, Field

from orasql.constants import ColumnType
from orasql.types.base import OraSQLBaseModel

_LIMIT_PATTERN = re.compile(r"\((\d+)\)")
_PRECISION_PATTERN = re.compile(r"^(?:numeric|decimal|number)\((\d+)(?:,\s*(-?\d+))?\)", re.IGNORECASE)
_SCALE_PATTERN = re.compile(r"\((\d+)\s*,\s*(-?\d+)\)")

# Key types rendered as quoted strings rather than plain integers
_TEXTUAL_TYPES = frozenset({
    ColumnType.STRING,
    ColumnType.TEXT,
    ColumnType.BINARY,
    ColumnType.RAW,
    ColumnType.XML,
})


def simplified_type(sql_type: str, emulate_booleans: bool = True) -> Optional[ColumnType]:
    """Derive the abstract column type from a native Oracle type declaration.

    Args:
        sql_type: Native declaration such as ``VARCHAR2(255)`` or ``NUMBER(10,2)``
        emulate_booleans: Treat ``NUMBER(1)`` as a boolean column

    Returns:
        The matching ColumnType, or None for types with no abstract counterpart
    """
    if not sql_type:
        return None

    upper = sql_type.strip().upper()

    if "CLOB" in upper:
        return ColumnType.TEXT
    if "BLOB" in upper:
        return ColumnType.BINARY
    if "XML" in upper:
        return ColumnType.XML
    if "RAW" in upper:
        return ColumnType.RAW
    if "CHAR" in upper:
        return ColumnType.STRING
    if "FLOAT" in upper or "DOUBLE" in upper:
        return ColumnType.FLOAT
    if "INT" in upper:
        return ColumnType.INTEGER
    if re.fullmatch(r"NUMBER\(1\)", upper):
        return ColumnType.BOOLEAN if emulate_booleans else ColumnType.INTEGER
    if upper.startswith("NUM") or "DEC" in upper or "REAL" in upper:
        return ColumnType.INTEGER if extract_scale(upper) == 0 else ColumnType.DECIMAL
    # TIMESTAMP keeps up to 9 digits of sub-second precision
    if "TIMESTAMP" in upper:
        return ColumnType.TIMESTAMP
    # DATE stores the date and time to the second
    if "DATE" in upper or "TIME" in upper:
        return ColumnType.DATETIME
    return None


def extract_limit(sql_type: str) -> Optional[int]:
    match = _LIMIT_PATTERN.search(sql_type or "")
    return int(match.group(1)) if match else None


def extract_precision(sql_type: str) -> Optional[int]:
    match = _PRECISION_PATTERN.match(sql_type or "")
    return int(match.group(1)) if match else None


def extract_scale(sql_type: str) -> Optional[int]:
    """Scale of a numeric declaration; ``NUMBER(p)`` has scale 0."""
    if _LIMIT_PATTERN.search(sql_type or ""):
        return 0
    match = _SCALE_PATTERN.search(sql_type or "")
    return int(match.group(2)) if match else None


class ColumnDescriptor(OraSQLBaseModel):
    """Describes a table column as seen by the quoting layer.

    Attributes:
        name: Column name as stored in the data dictionary
        type: Abstract type tag, None when the native type has no counterpart
        sql_type: Native type declaration (``CLOB``, ``VARCHAR2(255)``...)
        limit: Declared length
        precision: Declared numeric precision
        scale: Declared numeric scale
        primary: Whether the column is (part of) the primary key
        nullable: Whether NULL is accepted
        default: Column default value

    Examples:
        >>> ColumnDescriptor(name="body", type=ColumnType.TEXT, sql_type="CLOB")
        >>> ColumnDescriptor.from_sql_type("price", "NUMBER(10,2)")
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    type: Optional[ColumnType] = Field(default=None)
    sql_type: Optional[str] = Field(default=None)
    limit: Optional[int] = Field(default=None, ge=0)
    precision: Optional[int] = Field(default=None, ge=0)
    scale: Optional[int] = Field(default=None)
    primary: bool = Field(default=False)
    nullable: bool = Field(default=True)
    default: Optional[Any] = Field(default=None)

    @classmethod
    def from_sql_type(
        cls,
        name: str,
        sql_type: str,
        *,
        primary: bool = False,
        nullable: bool = True,
        default: Optional[Any] = None,
        emulate_booleans: bool = True,
    ) -> "ColumnDescriptor":
        """Build a descriptor from a native type declaration."""
        return cls(
            name=name,
            type=simplified_type(sql_type, emulate_booleans),
            sql_type=sql_type,
            limit=extract_limit(sql_type),
            precision=extract_precision(sql_type),
            scale=extract_scale(sql_type),
            primary=primary,
            nullable=nullable,
            default=default,
        )

    @property
    def is_numeric_key(self) -> bool:
        """True for primary keys whose values are numeric surrogates."""
        return self.primary and self.type is not None and self.type not in _TEXTUAL_TYPES

    @property
    def is_lob(self) -> bool:
        """True when the native type is a large object (CLOB, BLOB, NCLOB...)."""
        return bool(self.sql_type) and re.search(r"LOB\(|LOB$", self.sql_type, re.IGNORECASE) is not None
