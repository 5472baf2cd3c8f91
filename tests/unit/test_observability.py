"""
Name: Observability Unit Tests

Responsibilities:
  - Test narration context vars
  - Test JSON formatter with context
  - Test logger setup helpers
  - Test error response structure

Notes:
  - Builds LogRecord objects directly for formatter tests
"""

import json
import logging
import sys

import pytest

from narration.context import (
    chunk_index_var,
    clear_context,
    get_context_dict,
    narration_id_var,
)
from narration.exceptions import NarrationError, SynthesisError
from narration.logger import JSONFormatter, configure_logging, logger, setup_logger

pytestmark = pytest.mark.unit


def _record(msg="Test", level=logging.INFO, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestContextVars:
    """Test context variable helpers."""

    def test_get_context_dict_empty(self):
        """R: Should return empty dict when no context set."""
        clear_context()

        assert get_context_dict() == {}

    def test_get_context_dict_with_values(self):
        """R: Should return dict with set values."""
        narration_id_var.set("chapter-7")
        chunk_index_var.set(0)

        result = get_context_dict()

        assert result == {"narration_id": "chapter-7", "chunk_index": 0}

        # Cleanup
        clear_context()

    def test_clear_context(self):
        """R: Should clear all context vars."""
        narration_id_var.set("chapter-7")
        chunk_index_var.set(3)

        clear_context()

        assert narration_id_var.get() == ""
        assert chunk_index_var.get() == -1


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def test_formatter_basic_log(self):
        """R: Should format log as JSON."""
        data = json.loads(JSONFormatter().format(_record("Test message")))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["logger"] == "test"
        assert data["line"] == 10
        assert "timestamp" in data

    def test_formatter_includes_context(self):
        """R: Should include narration context in log."""
        narration_id_var.set("ctx-456")
        chunk_index_var.set(2)

        data = json.loads(JSONFormatter().format(_record()))

        assert data.get("narration_id") == "ctx-456"
        assert data.get("chunk_index") == 2

        # Cleanup
        clear_context()

    def test_formatter_filters_sensitive_keys(self):
        """R: Should not include sensitive fields."""
        record = _record()
        record.api_key = "secret-key"
        record.OPENAI_API_KEY = "sk-test"
        record.safe_field = "visible"

        data = json.loads(JSONFormatter().format(record))

        assert "api_key" not in data
        assert "OPENAI_API_KEY" not in data
        assert data.get("safe_field") == "visible"

    def test_formatter_includes_extra_fields(self):
        """R: Should include extra fields from log call."""
        record = _record()
        record.chunk_count = 3
        record.avg_chunk_size = 987

        data = json.loads(JSONFormatter().format(record))

        assert data.get("chunk_count") == 3
        assert data.get("avg_chunk_size") == 987

    def test_formatter_includes_exception(self):
        """R: Should include exception stacktrace."""
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            JSONFormatter().format(_record("Error occurred", logging.ERROR, exc_info))
        )

        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "test error"
        assert isinstance(data["exception"]["stacktrace"], list)


class TestLoggerSetup:
    """Test logger helpers."""

    def test_global_logger(self):
        assert logger.name == "narration"
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_setup_logger_does_not_duplicate_handlers(self):
        first = setup_logger("narration.test_setup")
        second = setup_logger("narration.test_setup")

        assert first is second
        assert len(second.handlers) == 1

    def test_configure_logging_sets_level(self):
        previous = logger.level
        try:
            configure_logging("DEBUG")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)


class TestExceptions:
    """Test narration exceptions and error responses."""

    def test_error_response(self):
        error = NarrationError("Something failed", error_id="err-1")

        assert error.to_response().to_dict() == {
            "error_code": "NARRATION_ERROR",
            "message": "Something failed",
            "error_id": "err-1",
        }

    def test_error_id_is_generated(self):
        assert NarrationError("a").error_id != NarrationError("b").error_id

    def test_synthesis_error_carries_chunk(self):
        cause = RuntimeError("provider down")
        error = SynthesisError("Speech synthesis failed for chunk 2", chunk_index=2, original_error=cause)

        assert isinstance(error, NarrationError)
        assert error.chunk_index == 2
        assert error.original_error is cause
        assert error.to_response().error_code == "SYNTHESIS_ERROR"
