"""Booking form handling and confirmation rendering."""

from datetime import date
from typing import Any

from pydantic import ValidationError

from datumsformat.core.config import get_settings
from datumsformat.core.exceptions import (
    BookingResponseError,
    DateInPastError,
    InvalidGermanDateError,
)
from datumsformat.core.logging import get_logger
from datumsformat.models.enums import BookingAction
from datumsformat.models.schemas import BookingData, BookingRequest, BookingResponse
from datumsformat.utils.date_utils import (
    is_past,
    is_valid_german,
    to_german,
    to_iso,
    to_readable_german,
)
from datumsformat.utils.formatters import format_booking_confirmation

logger = get_logger(__name__)


def prepare_booking_request(
    german_date: str | None,
    today: date | None = None,
    **booking_data: Any,
) -> BookingRequest:
    """
    Turn a date typed into the booking form into an API request.

    Args:
        german_date: Date from the form input ("DD.MM.YYYY")
        today: Reference day for the past check, defaults to the system clock
        **booking_data: Further booking fields (service, time, name, ...)

    Returns:
        Request for the booking-ops endpoint with the date in ISO format

    Raises:
        InvalidGermanDateError: If the date is not a valid "DD.MM.YYYY" date
        DateInPastError: If the date lies before today

    Example:
        >>> request = prepare_booking_request("15.02.2030", service="Massage")
        >>> request.to_payload()["booking_data"]["date"]
        '2030-02-15'
    """
    if not is_valid_german(german_date):
        logger.warning("booking_rejected", reason="invalid_date", date=german_date)
        raise InvalidGermanDateError(german_date)

    if is_past(german_date, today=today):
        logger.warning("booking_rejected", reason="date_in_past", date=german_date)
        raise DateInPastError(german_date)

    iso_date = to_iso(german_date)
    booking_data.pop("date", None)
    request = BookingRequest(
        action=BookingAction.CREATE,
        booking_data=BookingData(date=iso_date, **booking_data),
        endpoint=get_settings().booking_endpoint,
    )

    logger.info(
        "booking_prepared",
        date=iso_date,
        endpoint=request.endpoint,
        fields=sorted(booking_data),
    )
    return request


def render_booking_confirmation(response: dict, readable: bool = False) -> str:
    """
    Render the chat message for a booking API response.

    Args:
        response: Decoded JSON response with "confirmation_details"
        readable: Write the month out ("15. Februar 2025") instead of "15.02.2025"

    Returns:
        Confirmation message

    Raises:
        BookingResponseError: If the response has no usable confirmation details
    """
    try:
        parsed = BookingResponse.model_validate(response)
    except ValidationError as e:
        logger.error("confirmation_invalid_response", errors=e.error_count())
        raise BookingResponseError(
            "Antwort enthält keine gültigen Buchungsdetails"
        ) from e

    details = parsed.confirmation_details
    display_date = to_german(details.date)
    if readable:
        display_date = to_readable_german(display_date)

    logger.info("confirmation_rendered", date=details.date, readable=readable)
    return format_booking_confirmation(details, display_date)
