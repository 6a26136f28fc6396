"""Tests for date picker bounds."""

from datetime import date, datetime

import pytest

from datumsformat.core.config import reset_settings
from datumsformat.services.date_picker import get_date_picker_bounds


class TestGetDatePickerBounds:
    """Tests for get_date_picker_bounds."""

    def test_three_months(self, fixed_today: date):
        """Test default window of three months."""
        bounds = get_date_picker_bounds(today=fixed_today, months_ahead=3)

        assert bounds.min_date == "10.06.2025"
        assert bounds.max_date == "10.09.2025"
        assert bounds.min_iso == "2025-06-10"
        assert bounds.max_iso == "2025-09-10"

    def test_month_end_clamps(self):
        """Test the month step stops at the end of a shorter month."""
        bounds = get_date_picker_bounds(today=date(2025, 11, 30), months_ahead=3)
        assert bounds.max_date == "28.02.2026"

    def test_leap_year_clamp(self):
        """Test clamping to 29 February in a leap year."""
        bounds = get_date_picker_bounds(today=date(2023, 11, 30), months_ahead=3)
        assert bounds.max_iso == "2024-02-29"

    def test_datetime_today(self):
        """Test a datetime reference is reduced to its day."""
        bounds = get_date_picker_bounds(today=datetime(2025, 1, 15, 9, 0), months_ahead=1)
        assert bounds.min_date == "15.01.2025"
        assert bounds.max_date == "15.02.2025"

    def test_window_from_settings(self, fixed_today: date, monkeypatch: pytest.MonkeyPatch):
        """Test window defaults to the configured number of months."""
        monkeypatch.setenv("DATUMSFORMAT_BOOKING_WINDOW_MONTHS", "1")
        reset_settings()

        bounds = get_date_picker_bounds(today=fixed_today)
        assert bounds.max_date == "10.07.2025"

    def test_default_window(self, fixed_today: date):
        """Test built-in default window of three months."""
        bounds = get_date_picker_bounds(today=fixed_today)
        assert bounds.max_iso == "2025-09-10"

    def test_system_clock(self):
        """Test default reference day is today."""
        bounds = get_date_picker_bounds(months_ahead=0)
        assert bounds.min_date == bounds.max_date
