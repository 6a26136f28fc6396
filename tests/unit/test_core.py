"""Tests for settings, errors and logging setup."""

import json

import pytest

from datumsformat.core.config import Settings, get_settings, reset_settings
from datumsformat.core.exceptions import (
    DateFormatError,
    InvalidIsoDateError,
    MonthOutOfRangeError,
)
from datumsformat.core.logging import bind_context, get_logger, setup_logging
from datumsformat.utils.formatters import format_error


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, test_settings: Settings):
        """Test default values."""
        assert test_settings.booking_window_months == 3
        assert test_settings.booking_endpoint == "/webhook/booking-ops"
        assert test_settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        """Test values are read from DATUMSFORMAT_ environment variables."""
        monkeypatch.setenv("DATUMSFORMAT_BOOKING_WINDOW_MONTHS", "6")
        monkeypatch.setenv("DATUMSFORMAT_DEBUG", "true")
        reset_settings()

        settings = get_settings()
        assert settings.booking_window_months == 6
        assert settings.debug is True

    def test_singleton(self):
        """Test get_settings returns the same instance until reset."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestErrors:
    """Tests for the error hierarchy."""

    def test_base_error_dict(self):
        """Test base error serialization."""
        error = DateFormatError("kaputt")
        assert format_error(error) == {
            "error": True,
            "code": "DATE_FORMAT_ERROR",
            "message": "kaputt",
        }

    def test_month_error_dict(self):
        """Test month is included in the dict."""
        result = MonthOutOfRangeError(13).to_dict()
        assert result["code"] == "MONTH_OUT_OF_RANGE"
        assert result["month"] == 13

    def test_subclass_of_base(self):
        """Test specific errors can be caught as DateFormatError."""
        with pytest.raises(DateFormatError):
            raise InvalidIsoDateError("2025-02-30")


class TestLogging:
    """Tests for structlog setup."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]):
        """Test production mode writes JSON lines to stderr."""
        setup_logging(debug=False, log_level="INFO")
        get_logger("test").info("booking_prepared", date="2025-02-15")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "booking_prepared"
        assert event["level"] == "info"
        assert event["date"] == "2025-02-15"
        assert "timestamp" in event

    def test_level_filter(self, capsys: pytest.CaptureFixture[str]):
        """Test events below the configured level are dropped."""
        setup_logging(debug=False, log_level="WARNING")
        get_logger("test").info("ignored_event")

        assert "ignored_event" not in capsys.readouterr().err

    def test_bound_context(self, capsys: pytest.CaptureFixture[str]):
        """Test context variables are merged into events."""
        setup_logging(debug=False, log_level="INFO")
        bind_context(session_id="chat-7")
        get_logger("test").info("confirmation_rendered")

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["session_id"] == "chat-7"
