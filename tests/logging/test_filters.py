import json
import logging

from orasql.__version__ import __version__
from orasql.logging import filters
from orasql.logging.logger import CustomJsonFormatter

ContextFilter = filters.ContextFilter
set_logging_context = filters.set_logging_context
set_request_context = filters.set_request_context
clear_request_context = filters.clear_request_context


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="orasql.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="sample",
        args=(),
        exc_info=None,
    )


def test_context_filter_respects_static_environment():
    set_logging_context(environment="qa", extra={"region": "us-east"})
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert getattr(record, "environment") == "qa"
        assert getattr(record, "region") == "us-east"
    finally:
        set_logging_context(environment=None, extra=None)


def test_context_filter_uses_request_context():
    set_logging_context(environment=None, extra=None)
    set_request_context(request_id="req-1", user_id="user-7")
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert record.request_id == "req-1"
        assert record.user_id == "user-7"
    finally:
        clear_request_context()


def test_context_filter_no_config_is_graceful():
    set_logging_context(environment=None, extra=None)
    record = _record()
    assert ContextFilter().filter(record)
    assert not hasattr(record, "environment")
    assert record.request_id is None


def test_context_filter_stamps_sdk_identity():
    record = _record()
    ContextFilter().filter(record)
    assert record.sdk_name == "orasql"
    assert record.sdk_version == __version__


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.sequence_name = "posts_seq"
    payload = json.loads(CustomJsonFormatter().format(record))
    assert payload["message"] == "sample"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "orasql.test"
    assert payload["sequence_name"] == "posts_seq"
    assert "trace_id" not in payload
