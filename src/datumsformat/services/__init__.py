"""Booking flow services for datumsformat."""

from datumsformat.services.booking import prepare_booking_request, render_booking_confirmation
from datumsformat.services.date_picker import get_date_picker_bounds

__all__ = [
    "prepare_booking_request",
    "render_booking_confirmation",
    "get_date_picker_bounds",
]
