"""Unit tests for ConsoleAdapter (structured console logging).

Architecture:
- structlog is patched; no output is produced
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().info("User created", user_id="123")

            mock_logger.info.assert_called_once_with("User created", user_id="123")

    def test_error_flattens_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error(
                "Credential notification failed",
                error=ConnectionError("smtp down"),
                code="notify_failed",
            )

            mock_logger.error.assert_called_once_with(
                "Credential notification failed",
                code="notify_failed",
                error_type="ConnectionError",
                error_message="smtp down",
            )

    def test_json_renderer_selected(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert mock_structlog.processors.JSONRenderer.return_value in processors

    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="t-1")
            bound.warning("Credential token expired")

            mock_logger.bind.assert_called_once_with(trace_id="t-1")
            mock_logger.bind.return_value.warning.assert_called_once_with(
                "Credential token expired"
            )
            assert bound is not adapter
