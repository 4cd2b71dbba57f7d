# ============================================================================
# FILE: tests/unit/test_logging.py
# ============================================================================
"""
Unit tests for logging helpers
"""

import json
import logging
import sys

import pytest

from thyroid_ingestion.utils.logging import (
    JsonFormatter,
    log_performance,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter():
    record = logging.LogRecord(
        name="thyroid_ingestion.core", level=logging.INFO, pathname=__file__,
        lineno=10, msg="Extracted %d indicators: %s", args=(1, "促甲状腺激素"),
        exc_info=None,
    )
    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["logger"] == "thyroid_ingestion.core"
    assert data["message"] == "Extracted 1 indicators: 促甲状腺激素"
    assert data["timestamp"].endswith("+00:00")


def test_json_formatter_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord(
            name="x", level=logging.ERROR, pathname=__file__, lineno=1,
            msg="failed", args=(), exc_info=sys.exc_info(),
        )
    data = json.loads(JsonFormatter().format(record))
    assert "ValueError: bad" in data["exception"]


def test_setup_logging_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "ingestion.log"
    setup_logging(level="debug", log_file=log_file, format_json=True)

    logging.getLogger("thyroid_ingestion.test").warning("written")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert json.loads(line)["message"] == "written"
    assert logging.getLogger().level == logging.DEBUG


def test_log_performance_success(caplog):
    logger = logging.getLogger("thyroid_ingestion.perf")

    @log_performance(logger, "Adding")
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="thyroid_ingestion.perf"):
        assert add(2, 3) == 5
    assert "Adding completed" in caplog.text
    assert add.__name__ == "add"


def test_log_performance_failure(caplog):
    logger = logging.getLogger("thyroid_ingestion.perf")

    @log_performance(logger, "Dividing")
    def divide(a, b):
        return a / b

    with caplog.at_level(logging.ERROR, logger="thyroid_ingestion.perf"):
        with pytest.raises(ZeroDivisionError):
            divide(1, 0)
    assert "Dividing failed" in caplog.text
