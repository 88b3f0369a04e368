"""Unit tests for the error model."""

from orasql.common.exceptions import (
    ErrorCode,
    OraSQLError,
    configuration_error,
    connection_error,
    identifier_too_long_error,
    query_execution_error,
    sequence_error,
    validation_error,
)


class TestOraSQLError:

    def test_str_includes_code(self):
        error = OraSQLError("boom", ErrorCode.EXECUTION_ERROR)
        assert str(error) == "[EXECUTION_001] boom"

    def test_str_includes_cause(self):
        error = OraSQLError("boom", cause=ValueError("bad"))
        assert "caused by: ValueError: bad" in str(error)

    def test_to_dict(self):
        error = OraSQLError("boom", ErrorCode.CONFIG_ERROR, details={"key": "url"})
        assert error.to_dict() == {
            "type": "OraSQLError",
            "message": "boom",
            "error_code": "CONFIG_001",
            "error_name": "CONFIG_ERROR",
            "details": {"key": "url"},
            "is_retryable": False,
        }

    def test_from_error_code_marks_transient_errors(self):
        assert OraSQLError.from_error_code(ErrorCode.TIMEOUT_ERROR, "slow").is_retryable
        assert not OraSQLError.from_error_code(ErrorCode.TIMEOUT_ERROR, "slow", is_retryable=False).is_retryable
        assert not OraSQLError.from_error_code(ErrorCode.VALIDATION_ERROR, "bad").is_retryable


class TestErrorHelpers:

    def test_configuration_error(self):
        error = configuration_error("missing", config_key="url")
        assert error.error_code == ErrorCode.CONFIG_ERROR
        assert error.details == {"config_key": "url"}

    def test_validation_error(self):
        error = validation_error("bad", field="id", value=5)
        assert error.error_code == ErrorCode.VALIDATION_ERROR
        assert error.details == {"field": "id", "value": "5"}

    def test_identifier_too_long(self):
        name = "x" * 31
        error = identifier_too_long_error(name, 30, identifier_type="sequence")
        assert error.error_code == ErrorCode.INVALID_IDENTIFIER
        assert error.details["length"] == 31
        assert error.details["max_length"] == 30
        assert error.message.startswith("sequence name")

    def test_connection_error(self):
        error = connection_error("refused", service="oracle", host="db")
        assert error.error_code == ErrorCode.CONNECTION_ERROR
        assert error.details == {"service": "oracle", "host": "db"}

    def test_query_execution_error_truncates_query(self):
        error = query_execution_error("SELECT " + "x" * 600, RuntimeError("ORA-00942"), is_retryable=True)
        assert error.error_code == ErrorCode.QUERY_EXECUTION_ERROR
        assert error.details["query"].endswith("...")
        assert len(error.details["query"]) == 503
        assert error.is_retryable
        assert isinstance(error.cause, RuntimeError)

    def test_sequence_error(self):
        error = sequence_error("no value", sequence_name="posts_seq")
        assert error.error_code == ErrorCode.SEQUENCE_ERROR
        assert error.details == {"sequence_name": "posts_seq"}
