"""Output formatters for booking chat messages."""

from datumsformat.core.constants import MSG_BOOKING_CONFIRMED
from datumsformat.core.exceptions import DateFormatError
from datumsformat.models.schemas import ConfirmationDetails


def format_optional(value: str | None) -> str:
    """Format an optional field for display."""
    if value is None:
        return "-"
    return value


def format_booking_confirmation(details: ConfirmationDetails, display_date: str) -> str:
    """
    Format a booking confirmation for the chat window.

    Args:
        details: Confirmation details from the booking API
        display_date: Booked date, already converted for display

    Returns:
        Multi-line message
    """
    lines = [
        MSG_BOOKING_CONFIRMED,
        f"Service: {format_optional(details.service)}",
        f"Datum: {display_date}",
        f"Uhrzeit: {format_optional(details.time)}",
    ]
    return "\n".join(lines)


def format_error(error: DateFormatError) -> dict:
    """Format error for JSON response."""
    return error.to_dict()
