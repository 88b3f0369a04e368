"""Type definitions for orasql.

This module provides the data model shared by the SQL generation core:
column descriptors, typed values, pagination bounds and sequence
descriptors.
"""

from .base import OraSQLBaseModel
from .columns import ColumnDescriptor, simplified_type
from .pagination import PaginationSpec
from .sequences import SequenceDescriptor, TableOptions, default_sequence_name
from .values import SqlLiteral, TypedValue, value_kind

__all__ = [
    'OraSQLBaseModel',
    'ColumnDescriptor',
    'simplified_type',
    'PaginationSpec',
    'SequenceDescriptor',
    'TableOptions',
    'default_sequence_name',
    'SqlLiteral',
    'TypedValue',
    'value_kind',
]
