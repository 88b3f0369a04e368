"""Abstract column type to native Oracle type declarations."""

import copy
from typing import Any, Dict, Optional, Union

from orasql.common.exceptions import validation_error
from orasql.constants import NATIVE_DATABASE_TYPES, ColumnType

# Oracle rejects explicit lengths on LOB columns (ORA-00907)
_LOB_TYPES = frozenset({ColumnType.BINARY, ColumnType.TEXT})


def coerce_column_type(type_: Union[ColumnType, str, None]) -> Optional[ColumnType]:
    """Return the ColumnType for ``type_`` or None when it is not an abstract type."""
    if type_ is None or isinstance(type_, ColumnType):
        return type_
    try:
        return ColumnType(str(type_).lower())
    except ValueError:
        return None


class TypeMapper:
    """Maps abstract column types to native type declarations.

    Example:
        >>> mapper = TypeMapper()
        >>> mapper.type_to_sql("string")
        'VARCHAR2(255)'
        >>> mapper.type_to_sql("decimal", precision=10, scale=2)
        'DECIMAL(10,2)'
        >>> mapper.type_to_sql("binary", limit=1024)
        'BLOB'
    """

    def __init__(self, native_types: Optional[Dict[ColumnType, Any]] = None):
        self._native_types = copy.deepcopy(native_types or NATIVE_DATABASE_TYPES)

    def native_database_types(self) -> Dict[ColumnType, Any]:
        """A copy of the abstract to native type table."""
        return copy.deepcopy(self._native_types)

    def type_to_sql(
        self,
        type_: Union[ColumnType, str],
        limit: Optional[int] = None,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> str:
        """Render the native declaration for an abstract type.

        Args:
            type_: Abstract type tag; unknown names are emitted verbatim
            limit: Length, falls back to the type's default
            precision: Numeric precision (decimal only)
            scale: Numeric scale (decimal only)

        Returns:
            Native type declaration such as ``NUMBER(38)``

        Raises:
            OraSQLError: If a decimal scale is given without a precision
        """
        column_type = coerce_column_type(type_)
        if column_type in _LOB_TYPES:
            limit = precision = scale = None
        return self._base_type_to_sql(type_, column_type, limit, precision, scale)

    def _base_type_to_sql(
        self,
        raw_type: Union[ColumnType, str],
        column_type: Optional[ColumnType],
        limit: Optional[int],
        precision: Optional[int],
        scale: Optional[int],
    ) -> str:
        native = self._native_types.get(column_type) if column_type is not None else None
        if native is None:
            return raw_type.value if isinstance(raw_type, ColumnType) else str(raw_type)

        if isinstance(native, str):
            return native

        name = native["name"]

        if column_type == ColumnType.DECIMAL:
            if precision is not None:
                if scale is not None:
                    return f"{name}({precision},{scale})"
                return f"{name}({precision})"
            if scale is not None:
                raise validation_error(
                    "Error adding decimal column: precision cannot be empty if scale is specified",
                    field="scale",
                    value=scale,
                )
            return name

        limit = limit if limit is not None else native.get("limit")
        if limit is not None:
            return f"{name}({limit})"
        return name
