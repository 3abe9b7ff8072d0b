"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error)
- Context binding
- Log level filtering
- JSON output format on stderr
- Protocol compliance

Architecture:
- Method tests mock structlog
- Output tests use a real structlog pipeline captured with capsys
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from flexerr.domain.protocols import LoggerProtocol
from flexerr.infrastructure.logging.console_adapter import ConsoleAdapter

_STRUCTLOG = "flexerr.infrastructure.logging.console_adapter.structlog"


def _last_json_line(err: str) -> dict:
    return json.loads(err.strip().splitlines()[-1])


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_debug_logs_message_with_context(self):
        """Test debug() forwards message and context."""
        with patch(_STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.debug("Error type defined", error_type="AppError")

            mock_logger.debug.assert_called_once_with(
                "Error type defined", error_type="AppError"
            )

    def test_info_logs_message_with_context(self):
        """Test info() forwards message and context."""
        with patch(_STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("Tracer selected", tracer="string")

            mock_logger.info.assert_called_once_with("Tracer selected", tracer="string")

    def test_warning_logs_message_with_context(self):
        """Test warning() forwards message and context."""
        with patch(_STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.warning("Error type definition rejected", code="empty_definition")

            mock_logger.warning.assert_called_once_with(
                "Error type definition rejected", code="empty_definition"
            )

    def test_error_adds_exception_details(self):
        """Test error() adds error_type and error_message for an exception."""
        with patch(_STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Render failed", error=ValueError("bad slot"), slot="path")

            mock_logger.error.assert_called_once_with(
                "Render failed",
                slot="path",
                error_type="ValueError",
                error_message="bad slot",
            )

    def test_error_without_exception(self):
        """Test error() without an exception only forwards context."""
        with patch(_STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Render failed", slot="path")

            mock_logger.error.assert_called_once_with("Render failed", slot="path")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() returns a new adapter wrapping the bound logger."""
        with patch(_STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.wrap_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(error_type="AppError")
            bound.info("Error type defined")

            assert bound is not adapter
            assert isinstance(bound, ConsoleAdapter)
            mock_logger.bind.assert_called_once_with(error_type="AppError")
            bound_logger.info.assert_called_once_with("Error type defined")


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test rendered output with a real structlog pipeline."""

    def test_json_output_on_stderr(self, capsys):
        """Test JSON mode writes one parseable line per event to stderr."""
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.info("Error type defined", error_type="AppError")

        captured = capsys.readouterr()
        event = _last_json_line(captured.err)
        assert captured.out == ""
        assert event["event"] == "Error type defined"
        assert event["error_type"] == "AppError"
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_bound_context_in_output(self, capsys):
        """Test bound context appears in every subsequent event."""
        adapter = ConsoleAdapter(use_json=True, level="DEBUG").bind(error_type="AppError")

        adapter.warning("Error type definition rejected")

        event = _last_json_line(capsys.readouterr().err)
        assert event["error_type"] == "AppError"
        assert event["level"] == "warning"

    def test_level_filtering(self, capsys):
        """Test events below the configured level are dropped."""
        adapter = ConsoleAdapter(use_json=True, level="WARNING")

        adapter.debug("dropped")
        adapter.info("dropped")

        assert capsys.readouterr().err == ""

    def test_console_output(self, capsys):
        """Test console mode renders the event text."""
        adapter = ConsoleAdapter(use_json=False, level="INFO")

        adapter.info("Tracer selected", tracer="string")

        err = capsys.readouterr().err
        assert "Tracer selected" in err
        assert "tracer=string" in err


@pytest.mark.unit
class TestConsoleAdapterProtocol:
    """Test LoggerProtocol compliance."""

    def test_implements_logger_protocol(self):
        """Test ConsoleAdapter satisfies LoggerProtocol structurally."""
        assert isinstance(ConsoleAdapter(), LoggerProtocol)
