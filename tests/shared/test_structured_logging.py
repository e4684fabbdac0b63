"""Tests for structured logging system."""

from __future__ import annotations

import json
import logging

from rich.logging import RichHandler

from annovault.shared.errors import ErrorCode, ErrorContext, InfrastructureError
from annovault.shared.logging import (
    StructuredFormatter,
    log_operation_error,
    log_operation_start,
    log_operation_success,
    setup_structured_logger,
)


def _record(level: int = logging.INFO, msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test_logger",
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredFormatter:
    """Test StructuredFormatter JSON output."""

    def test_format_basic_log(self):
        """Test basic log record formatting to JSON."""
        log_data = json.loads(StructuredFormatter().format(_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test_logger"
        assert log_data["message"] == "Test message"
        assert "timestamp" in log_data

    def test_format_log_with_context(self):
        """Test log record with extra context fields."""
        record = _record(logging.ERROR, "Error occurred")
        record.error_code = "CACHE_READ_FAILED"
        record.context = {"cache_key": "app.Controller"}
        record.operation = "cache_fetch"
        record.duration_ms = 1.5

        log_data = json.loads(StructuredFormatter().format(record))

        assert log_data["error_code"] == "CACHE_READ_FAILED"
        assert log_data["context"] == {"cache_key": "app.Controller"}
        assert log_data["operation"] == "cache_fetch"
        assert log_data["duration_ms"] == 1.5

    def test_unrelated_extras_are_ignored(self):
        """Test that only known extra fields are exported."""
        record = _record()
        record.password = "secret"  # pragma: allowlist secret

        assert "password" not in json.loads(StructuredFormatter().format(record))


class TestSetupStructuredLogger:
    """Test structured logger setup."""

    def test_rich_console_handler(self):
        """Test that the default console handler is Rich."""
        logger = setup_structured_logger(name="test_structured_rich")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_json_console_handler(self):
        """Test JSON lines on the console."""
        logger = setup_structured_logger(name="test_structured_json", level="debug", use_rich_console=False)

        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_reconfigure_does_not_stack_handlers(self):
        """Test that repeated setup replaces the handlers."""
        setup_structured_logger(name="test_structured_repeat")
        logger = setup_structured_logger(name="test_structured_repeat")

        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test that a log file receives JSON lines."""
        log_file = tmp_path / "annovault.log"
        logger = setup_structured_logger(
            name="test_structured_file",
            log_file=str(log_file),
            use_rich_console=False,
        )

        logger.info("written", extra={"operation": "read_annotations"})
        for handler in logger.handlers:
            handler.flush()
            handler.close()
        logger.handlers.clear()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "written"
        assert entry["operation"] == "read_annotations"


class TestOperationHelpers:
    """Test the log_operation_* helpers."""

    def test_log_operation_error(self, caplog):
        """Test that an error is logged with its code and context."""
        logger = logging.getLogger("test_ops_error")
        error = InfrastructureError(
            ErrorCode.CACHE_WRITE_FAILED,
            "Failed to write cache entry",
            ErrorContext(operation="cache_save", file_path="/tmp/x.cache"),
        )

        with caplog.at_level(logging.ERROR, logger="test_ops_error"):
            log_operation_error(logger, error, additional_context={"key": "app:Controller"})

        record = caplog.records[-1]
        assert record.getMessage() == "Failed to write cache entry"
        assert record.error_code == "CACHE_WRITE_FAILED"
        assert record.operation == "cache_save"
        assert record.context["file_path"] == "/tmp/x.cache"
        assert record.context["key"] == "app:Controller"

    def test_log_operation_success(self, caplog):
        """Test that a success is logged at debug level with its duration."""
        logger = logging.getLogger("test_ops_success")

        with caplog.at_level(logging.DEBUG, logger="test_ops_success"):
            log_operation_success(
                logger,
                "read_annotations",
                12.5,
                result_info={"annotations": 2},
                context={"cache_key": "app.Controller"},
            )

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.duration_ms == 12.5
        assert record.result_info == {"annotations": 2}
        assert record.context == {"cache_key": "app.Controller"}

    def test_log_operation_start(self, caplog):
        """Test that the start of an operation is logged."""
        logger = logging.getLogger("test_ops_start")

        with caplog.at_level(logging.DEBUG, logger="test_ops_start"):
            log_operation_start(logger, "load_settings")

        assert caplog.records[-1].operation == "load_settings"
        assert "load_settings" in caplog.records[-1].getMessage()
