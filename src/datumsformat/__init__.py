"""Date helpers for a German booking chatbot: ISO <-> DD.MM.YYYY."""

from datumsformat.core.exceptions import (
    BookingResponseError,
    DateFormatError,
    DateInPastError,
    InvalidGermanDateError,
    InvalidIsoDateError,
    MonthOutOfRangeError,
)
from datumsformat.core.logging import setup_logging
from datumsformat.models import (
    BookingAction,
    BookingRequest,
    DateFormat,
    DatePickerBounds,
)
from datumsformat.services import (
    get_date_picker_bounds,
    prepare_booking_request,
    render_booking_confirmation,
)
from datumsformat.utils import (
    current_german_date,
    date_object_to_german,
    format_date,
    is_past,
    is_valid_german,
    parse_german_date,
    parse_iso_date,
    to_german,
    to_iso,
    to_readable_german,
)

__version__ = "1.0.0"

__all__ = [
    "to_german",
    "to_iso",
    "current_german_date",
    "is_valid_german",
    "is_past",
    "date_object_to_german",
    "to_readable_german",
    "parse_german_date",
    "parse_iso_date",
    "format_date",
    "prepare_booking_request",
    "render_booking_confirmation",
    "get_date_picker_bounds",
    "setup_logging",
    "BookingAction",
    "BookingRequest",
    "DateFormat",
    "DatePickerBounds",
    "DateFormatError",
    "InvalidGermanDateError",
    "InvalidIsoDateError",
    "MonthOutOfRangeError",
    "DateInPastError",
    "BookingResponseError",
]
