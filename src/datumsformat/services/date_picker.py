"""Bounds for the booking date picker."""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from datumsformat.core.config import get_settings
from datumsformat.core.logging import get_logger
from datumsformat.models.schemas import DatePickerBounds
from datumsformat.utils.date_utils import date_object_to_german, to_iso

logger = get_logger(__name__)


def get_date_picker_bounds(
    today: date | None = None,
    months_ahead: int | None = None,
) -> DatePickerBounds:
    """
    Get the selectable range for the booking date picker.

    The earliest date is today, so no past dates can be picked. The latest
    is today plus the booking window; the month step clamps to the end of
    the target month (31.01. + 1 month is 28.02. or 29.02.).

    Args:
        today: Reference day, defaults to the system clock
        months_ahead: Booking window in months, defaults to the settings

    Returns:
        Bounds in German and ISO format
    """
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    if months_ahead is None:
        months_ahead = get_settings().booking_window_months

    latest = today + relativedelta(months=months_ahead)

    min_date = date_object_to_german(today)
    max_date = date_object_to_german(latest)
    bounds = DatePickerBounds(
        min_date=min_date,
        max_date=max_date,
        min_iso=to_iso(min_date),
        max_iso=to_iso(max_date),
    )

    logger.debug("date_picker_bounds", min_date=bounds.min_iso, max_date=bounds.max_iso)
    return bounds
