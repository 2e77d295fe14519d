"""Unit tests for StdlibLoggingAdapter (structured logging via stdlib).

Tests cover:
- LoggerProtocol methods (debug, warning)
- Renderer and level selection
- Output routed to the ``errtrace`` stdlib logger, never to stdout

Architecture:
- Unit tests with mocked structlog
- Integration tests with real structlog and caplog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from errtrace.infrastructure.logging.stdlib_adapter import (
    LOGGER_NAME,
    StdlibLoggingAdapter,
)

STRUCTLOG = "errtrace.infrastructure.logging.stdlib_adapter.structlog"


@pytest.fixture
def mock_structlog():
    """Patched structlog whose wrapped logger is a MagicMock."""
    with patch(STRUCTLOG) as mocked:
        mocked.wrap_logger.return_value = MagicMock()
        yield mocked


@pytest.fixture
def mock_logger(mock_structlog):
    """The structlog logger the adapter writes to."""
    return mock_structlog.wrap_logger.return_value


@pytest.mark.unit
class TestStdlibLoggingAdapterLogging:
    """Test StdlibLoggingAdapter logging methods."""

    def test_debug_logs_message_with_context(self, mock_logger):
        """Test debug() logs event with structured context."""
        StdlibLoggingAdapter().debug("error_chain_created", code=5, cause_type="OSError")

        mock_logger.debug.assert_called_once_with(
            "error_chain_created", code=5, cause_type="OSError"
        )

    def test_warning_logs_message_with_context(self, mock_logger):
        """Test warning() logs event with structured context."""
        StdlibLoggingAdapter().warning("wrap_message_dropped", dropped_message="save failed")

        mock_logger.warning.assert_called_once_with(
            "wrap_message_dropped", dropped_message="save failed"
        )

    def test_logs_with_no_context(self, mock_logger):
        """Test logging with no additional context."""
        StdlibLoggingAdapter().warning("plain_event")

        mock_logger.warning.assert_called_once_with("plain_event")


@pytest.mark.unit
class TestStdlibLoggingAdapterInitialization:
    """Test renderer, level and sink selection."""

    def test_json_renderer_when_requested(self, mock_structlog):
        """Test use_json selects the JSON renderer."""
        StdlibLoggingAdapter(use_json=True)

        processors = mock_structlog.wrap_logger.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self, mock_structlog):
        """Test human-readable rendering is the default."""
        StdlibLoggingAdapter()

        processors = mock_structlog.wrap_logger.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_level_filter(self, mock_structlog):
        """Test the filtering wrapper uses the requested level."""
        StdlibLoggingAdapter(level=logging.DEBUG)

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.DEBUG)

    def test_wraps_named_stdlib_logger(self, mock_structlog):
        """Test events are handed to the errtrace stdlib logger."""
        StdlibLoggingAdapter()

        factory = mock_structlog.stdlib.LoggerFactory.return_value
        factory.assert_called_once_with(LOGGER_NAME)
        assert mock_structlog.wrap_logger.call_args.args == (factory.return_value,)


@pytest.mark.integration
class TestStdlibLoggingAdapterOutput:
    """Test real structlog output through stdlib logging."""

    def test_json_event_reaches_stdlib_logger(self, caplog, capsys):
        """Test JSON events land on the errtrace logger, not on stdout."""
        adapter = StdlibLoggingAdapter(use_json=True, level=logging.DEBUG)

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            adapter.warning("wrap_message_dropped", dropped_message="save failed")

        record, = caplog.records
        assert record.name == LOGGER_NAME
        assert record.levelno == logging.WARNING
        assert '"event": "wrap_message_dropped"' in record.getMessage()
        assert '"dropped_message": "save failed"' in record.getMessage()
        assert capsys.readouterr().out == ""

    def test_events_below_level_are_filtered(self, caplog):
        """Test debug events are dropped at WARNING level."""
        adapter = StdlibLoggingAdapter(use_json=True, level=logging.WARNING)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            adapter.debug("error_chain_created")

        assert caplog.records == []
