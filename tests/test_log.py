"""Tests for logging helpers."""

import logging

import pytest

from actionselect.utils.log import (
    LOGGER_NAME,
    StructuredFormatter,
    console_level,
    disable_file_logging,
    enable_file_logging,
    get_logger,
)


def _record(**fields) -> logging.LogRecord:
    record = logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.__dict__.update(fields)
    return record


@pytest.fixture
def log_file(tmp_path):
    path = enable_file_logging(tmp_path / "logs" / "select.log")
    yield path
    disable_file_logging()


def test_structured_formatter_appends_fields():
    formatter = StructuredFormatter("[%(levelname)s] %(message)s")
    line = formatter.format(_record(key="e", count=2))
    assert line == '[INFO] hello world | {"count": 2, "key": "e"}'


def test_structured_formatter_without_fields():
    formatter = StructuredFormatter("%(message)s")
    assert formatter.format(_record()) == "hello world"


def test_structured_formatter_uses_utc_timestamps():
    formatter = StructuredFormatter("%(asctime)s")
    record = _record()
    record.created = 0.0
    record.msecs = 0.0
    assert formatter.format(record) == "1970-01-01T00:00:00.000Z"


def test_component_tag_and_fields_reach_log_file(log_file):
    get_logger("select").debug("Prompt completed", active=3, action="e")
    disable_file_logging()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[-1].endswith('[DEBUG] [select] Prompt completed | {"action": "e", "active": 3}')


def test_enable_file_logging_keeps_one_handler(log_file):
    enable_file_logging(log_file)
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert sum(isinstance(h, logging.FileHandler) for h in handlers) == 1


def test_disable_file_logging_detaches_handler(log_file):
    disable_file_logging()
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert not any(isinstance(h, logging.FileHandler) for h in handlers)
    # A second call is a no-op.
    disable_file_logging()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), (" Info ", logging.INFO), ("bogus", logging.WARNING)],
)
def test_console_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("ACTIONSELECT_LOG_LEVEL", value)
    assert console_level() == expected


def test_console_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("ACTIONSELECT_LOG_LEVEL", raising=False)
    assert console_level() == logging.WARNING
