"""Constants module for orasql.

This module contains all constant values and enumerations used throughout
the package. As Layer 0 in the architecture, this module has no
dependencies on other orasql modules.
"""

from orasql.constants.sql import (
    DEFAULT_SEQUENCE_START_VALUE,
    DISTINCT_ALIAS_TEMPLATE,
    IDENTIFIER_LENGTH,
    IN_CLAUSE_LENGTH,
    NATIVE_DATABASE_TYPES,
    ROW_NUMBER_ALIAS,
    SEQUENCE_SUFFIX,
    SUBQUERY_ALIAS,
    ColumnType,
    QueryType,
    ValueKind,
)

__all__ = [
    "ColumnType",
    "ValueKind",
    "QueryType",
    "IDENTIFIER_LENGTH",
    "IN_CLAUSE_LENGTH",
    "DEFAULT_SEQUENCE_START_VALUE",
    "SEQUENCE_SUFFIX",
    "ROW_NUMBER_ALIAS",
    "SUBQUERY_ALIAS",
    "DISTINCT_ALIAS_TEMPLATE",
    "NATIVE_DATABASE_TYPES",
]
