"""Common exceptions for orasql.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions are OraSQLError
    instances and include structured error information.
"""

from orasql.common.exceptions import (
    OraSQLError,
    ErrorCode,
    # Helper functions
    configuration_error,
    validation_error,
    identifier_too_long_error,
    connection_error,
    query_execution_error,
    sequence_error,
)

__all__ = [
    # Base Exception and Error Codes
    "OraSQLError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "validation_error",
    "identifier_too_long_error",
    "connection_error",
    "query_execution_error",
    "sequence_error",
]
