"""Structured Logging — JSONFormatter fields and setup_logging behaviour."""

import json
import sys
import logging

import pytest

from immutable_ops.infrastructure.observability import (
    LOGGER_NAME,
    JSONFormatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="immutable_ops.test", level=logging.WARNING, pathname=__file__,
        lineno=1, msg="example %s", args=("failed",), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def library_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


# ─── JSONFormatter ───────────────────────────────────────────────

def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "immutable_ops.test"
    assert payload["message"] == "example failed"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    record = _record(entry="Reverse", section="arrays", error_code="EXAMPLE_FAILED", other="x")
    payload = json.loads(JSONFormatter().format(record))
    assert payload["entry"] == "Reverse"
    assert payload["section"] == "arrays"
    assert payload["error_code"] == "EXAMPLE_FAILED"
    assert "other" not in payload


def test_json_formatter_keeps_zero_valued_extras():
    payload = json.loads(JSONFormatter().format(_record(failed=0)))
    assert payload["failed"] == 0


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


# ─── setup_logging ───────────────────────────────────────────────

def test_setup_logging_json(library_logger):
    logger = setup_logging("debug", "json")
    assert logger is library_logger
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[-1].formatter, JSONFormatter)


def test_setup_logging_text(library_logger):
    logger = setup_logging("WARNING", "text")
    assert logger.level == logging.WARNING
    assert not isinstance(logger.handlers[-1].formatter, JSONFormatter)


def test_setup_logging_is_idempotent(library_logger):
    before = len(library_logger.handlers)
    setup_logging()
    setup_logging()
    setup_logging("ERROR", "text")
    assert len(library_logger.handlers) == before + 1


def test_setup_logging_unknown_level_falls_back_to_info(library_logger):
    assert setup_logging("loud").level == logging.INFO


def test_setup_logging_leaves_root_logger_alone(library_logger):
    root_handlers = list(logging.root.handlers)
    setup_logging()
    assert logging.root.handlers == root_handlers


def test_setup_logging_defaults_come_from_settings(library_logger, monkeypatch):
    monkeypatch.setenv("IMMUTABLE_OPS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("IMMUTABLE_OPS_LOG_FORMAT", "text")
    logger = setup_logging()
    assert logger.level == logging.WARNING
    assert not isinstance(logger.handlers[-1].formatter, JSONFormatter)


def test_setup_logging_arguments_override_settings(library_logger, monkeypatch):
    monkeypatch.setenv("IMMUTABLE_OPS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("IMMUTABLE_OPS_LOG_FORMAT", "text")
    logger = setup_logging("ERROR", "json")
    assert logger.level == logging.ERROR
    assert isinstance(logger.handlers[-1].formatter, JSONFormatter)
