"""SQL and dialect-related constants.

This module contains the column type tags, value kinds and the fixed
limits of the Oracle dialect that are used across every layer of the
package.

These constants are in Layer 0 as they represent core dialect concepts
that can be used by any layer without creating circular dependencies.
"""

from enum import Enum
from typing import Any, Dict


class ColumnType(str, Enum):
    """Abstract column type tag.

    Every column handed to the quoting layer carries one of these tags.
    The tag decides which literal syntax a value is rendered with and
    which native type a column declaration maps to.

    Categories:
    - Character: STRING, TEXT (CLOB), XML
    - Numeric: INTEGER, FLOAT, DECIMAL, BOOLEAN (emulated), PRIMARY_KEY
    - Temporal: DATETIME, TIMESTAMP, TIME, DATE
    - Binary: BINARY (BLOB), RAW
    """

    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"
    BINARY = "binary"
    BOOLEAN = "boolean"
    RAW = "raw"
    XML = "xml"
    PRIMARY_KEY = "primary_key"


class ValueKind(str, Enum):
    """Kind of a value handed to the value quoter.

    Values:
        INSTANT: A point in time with a time-of-day component (datetime)
        CALENDAR_DATE: A pure calendar date without time-of-day
        PREFORMATTED: A string assumed to already be in the database format
        OTHER: Anything else (numbers, booleans, bytes, None)
    """

    INSTANT = "instant"
    CALENDAR_DATE = "calendar_date"
    PREFORMATTED = "preformatted"
    OTHER = "other"


class QueryType(str, Enum):
    """Statement type enumeration used for logging and telemetry."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    CREATE_TABLE = "CREATE_TABLE"
    DROP_TABLE = "DROP_TABLE"
    RENAME_TABLE = "RENAME_TABLE"
    ALTER = "ALTER"
    CREATE_SEQUENCE = "CREATE_SEQUENCE"
    DROP_SEQUENCE = "DROP_SEQUENCE"
    RENAME_SEQUENCE = "RENAME_SEQUENCE"
    DROP_INDEX = "DROP_INDEX"
    EXPLAIN = "EXPLAIN"
    SESSION = "SESSION"


# Maximum length of Oracle identifiers
IDENTIFIER_LENGTH = 30

# Prevents ORA-01795 for IN lists with more than 1000 expressions
IN_CLAUSE_LENGTH = 1000

DEFAULT_SEQUENCE_START_VALUE = 10000
SEQUENCE_SUFFIX = "_seq"

# Aliases injected by the pagination rewriter
ROW_NUMBER_ALIAS = "raw_rn"
SUBQUERY_ALIAS = "raw_sql_"

# Aliases generated by the DISTINCT rewriter are alias_<i>__
DISTINCT_ALIAS_TEMPLATE = "alias_{index}__"

NATIVE_DATABASE_TYPES: Dict[ColumnType, Any] = {
    ColumnType.PRIMARY_KEY: "NUMBER(38) NOT NULL PRIMARY KEY",
    ColumnType.STRING: {"name": "VARCHAR2", "limit": 255},
    ColumnType.TEXT: {"name": "CLOB"},
    ColumnType.INTEGER: {"name": "NUMBER", "limit": 38},
    ColumnType.FLOAT: {"name": "NUMBER"},
    ColumnType.DECIMAL: {"name": "DECIMAL"},
    ColumnType.DATETIME: {"name": "DATE"},
    ColumnType.TIMESTAMP: {"name": "TIMESTAMP"},
    ColumnType.TIME: {"name": "DATE"},
    ColumnType.DATE: {"name": "DATE"},
    ColumnType.BINARY: {"name": "BLOB"},
    ColumnType.BOOLEAN: {"name": "NUMBER", "limit": 1},
    ColumnType.RAW: {"name": "RAW", "limit": 2000},
    ColumnType.XML: {"name": "XMLTYPE"},
}
