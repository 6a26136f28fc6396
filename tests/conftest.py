"""Pytest fixtures and configuration."""

from datetime import date

import pytest

from datumsformat.core.config import Settings, reset_settings
from datumsformat.core.logging import clear_context, reset_logging


@pytest.fixture
def sample_date() -> date:
    """Sample date for testing."""
    return date(2025, 2, 15)


@pytest.fixture
def fixed_today() -> date:
    """Reference 'today' for clock-dependent tests."""
    return date(2025, 6, 10)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    reset_settings()
    return Settings(booking_window_months=3, debug=True)


@pytest.fixture
def confirmation_response() -> dict:
    """Booking API response as returned by booking-ops."""
    return {
        "success": True,
        "confirmation_details": {
            "date": "2025-02-15",
            "service": "Massage",
            "time": "14:30",
            "booking_id": "B-1042",
        },
    }


@pytest.fixture(autouse=True)
def cleanup_settings():
    """Clean up settings and logging configuration after each test."""
    yield
    reset_settings()
    clear_context()
    reset_logging()
