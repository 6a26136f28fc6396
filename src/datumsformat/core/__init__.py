"""Core configuration, constants and errors for datumsformat."""

from datumsformat.core.config import Settings, get_settings
from datumsformat.core.exceptions import (
    BookingResponseError,
    DateFormatError,
    DateInPastError,
    InvalidGermanDateError,
    InvalidIsoDateError,
    MonthOutOfRangeError,
)

__all__ = [
    "Settings",
    "get_settings",
    "DateFormatError",
    "InvalidGermanDateError",
    "InvalidIsoDateError",
    "MonthOutOfRangeError",
    "DateInPastError",
    "BookingResponseError",
]
