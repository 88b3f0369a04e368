import io
import json
import logging

import pytest

from orasql.logging import ContextFilter, CustomJsonFormatter, get_logger, setup_logging
from orasql.settings import configure_logging
from orasql.settings.main import _Settings, _reload_settings


@pytest.fixture
def restore_orasql_logger():
    logger = logging.getLogger("orasql")
    state = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers, logger.level, logger.propagate = state[0], state[1], state[2]


def test_setup_logging_installs_json_handler(restore_orasql_logger):
    setup_logging(_Settings(log_level="debug").log_level)

    logger = restore_orasql_logger
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    (handler,) = logger.handlers
    assert isinstance(handler.formatter, CustomJsonFormatter)
    assert any(isinstance(f, ContextFilter) for f in handler.filters)


def test_child_loggers_emit_json(restore_orasql_logger):
    setup_logging("INFO")
    stream = io.StringIO()
    restore_orasql_logger.handlers[0].setStream(stream)

    get_logger("orasql.operations.sequences").info("Sequence created", extra={"sequence_name": "posts_seq"})

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "Sequence created"
    assert payload["sequence_name"] == "posts_seq"
    assert payload["sdk_name"] == "orasql"


def test_configure_logging_uses_explicit_settings(restore_orasql_logger):
    configure_logging(_Settings(log_level="warning"))

    assert restore_orasql_logger.level == logging.WARNING
    assert isinstance(restore_orasql_logger.handlers[0].formatter, CustomJsonFormatter)


def test_configure_logging_reads_environment(restore_orasql_logger, monkeypatch):
    monkeypatch.setenv("ORASQL_LOG_LEVEL", "debug")
    _reload_settings()
    try:
        configure_logging()
    finally:
        monkeypatch.delenv("ORASQL_LOG_LEVEL")
        _reload_settings()

    assert restore_orasql_logger.level == logging.DEBUG
