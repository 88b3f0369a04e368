from orasql.__version__ import __version__

from orasql.common.exceptions import OraSQLError, ErrorCode
from orasql.constants import ColumnType, ValueKind

from orasql.types import (
    ColumnDescriptor,
    PaginationSpec,
    SequenceDescriptor,
    SqlLiteral,
    TableOptions,
    TypedValue,
    default_sequence_name,
)

from orasql.query_builder import (
    OracleQueryBuilder,
    QuotedNameCache,
    get_query_builder,
)

from orasql.operations import (
    OracleAdapter,
    LobWriter,
    SequenceManager,
    extract_table_ref_from_insert_sql,
)

from orasql.protocols import Executor, SchemaIntrospector

from orasql.settings import configure_logging, get_settings, DialectSettings, EngineSettings


__all__ = [
    "__version__",

    # Exceptions (public API)
    "OraSQLError",
    "ErrorCode",

    # Data model
    "ColumnType",
    "ValueKind",
    "ColumnDescriptor",
    "PaginationSpec",
    "SequenceDescriptor",
    "SqlLiteral",
    "TableOptions",
    "TypedValue",
    "default_sequence_name",

    # SQL generation
    "OracleQueryBuilder",
    "QuotedNameCache",
    "get_query_builder",

    # Execution
    "OracleAdapter",
    "LobWriter",
    "SequenceManager",
    "extract_table_ref_from_insert_sql",
    "Executor",
    "SchemaIntrospector",

    # Settings
    "get_settings",
    "configure_logging",
    "DialectSettings",
    "EngineSettings",
]
