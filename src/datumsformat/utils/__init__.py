"""Date helpers and formatters for datumsformat."""

from datumsformat.utils.date_utils import (
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
from datumsformat.utils.formatters import format_booking_confirmation, format_error

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
    "format_booking_confirmation",
    "format_error",
]
