"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from bart_client.adapters.api_request_logger import (
    REDACTED,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given BART_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("BART_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given BART_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("BART_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given BART_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("BART_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("bart_client.adapters.api_request_logger.should_log_requests", return_value=False)
    @patch("bart_client.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        log_api_request("GET", "http://api.bart.gov/api/stn.aspx", {"cmd": "stns"})

        mock_logger.info.assert_not_called()

    @patch("bart_client.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("bart_client.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_url_with_sorted_params(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when calling with params, then logs method, URL and params."""
        log_api_request("GET", "http://api.bart.gov/api/etd.aspx", {"orig": "EMBR", "cmd": "etd"})

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "GET http://api.bart.gov/api/etd.aspx?cmd=etd&orig=EMBR" in message

    @patch("bart_client.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("bart_client.adapters.api_request_logger.logger")
    def test_api_key_is_redacted(self, mock_logger: MagicMock, _mock_should_log: MagicMock) -> None:
        """Given a key param, when logging, then the key value does not appear."""
        log_api_request("GET", "http://api.bart.gov/api/stn.aspx", {"cmd": "stns", "key": "SECRET"})

        message = mock_logger.info.call_args[0][0]
        assert "SECRET" not in message
        assert f"key={REDACTED}" in message

    @patch("bart_client.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("bart_client.adapters.api_request_logger.logger")
    def test_without_params_logs_bare_url(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given no params, when logging, then the URL is logged as is."""
        log_api_request("GET", "http://api.bart.gov/api/stn.aspx")

        message = mock_logger.info.call_args[0][0]
        assert message.endswith("GET http://api.bart.gov/api/stn.aspx")
