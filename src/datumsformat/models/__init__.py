"""Data models for datumsformat."""

from datumsformat.models.enums import BookingAction, DateFormat
from datumsformat.models.schemas import (
    BookingData,
    BookingRequest,
    BookingResponse,
    ConfirmationDetails,
    DatePickerBounds,
)

__all__ = [
    "BookingAction",
    "DateFormat",
    "BookingData",
    "BookingRequest",
    "BookingResponse",
    "ConfirmationDetails",
    "DatePickerBounds",
]
