"""Pydantic models for the booking flow."""

from pydantic import BaseModel, ConfigDict, Field

from datumsformat.models.enums import BookingAction


class BookingData(BaseModel):
    """Booking fields sent to the API; any extra field is passed through."""

    model_config = ConfigDict(extra="allow")

    date: str = Field(..., description="Booking date in ISO format (YYYY-MM-DD)")


class BookingRequest(BaseModel):
    """Request body for the booking-ops endpoint."""

    action: BookingAction = Field(default=BookingAction.CREATE, description="Booking action")
    booking_data: BookingData = Field(..., description="Booking fields")
    endpoint: str = Field(
        ..., exclude=True, description="Endpoint path the body is posted to (not part of the body)"
    )

    def to_payload(self) -> dict:
        """JSON-ready body, e.g. {"action": "create", "booking_data": {...}}."""
        return self.model_dump(mode="json")


class ConfirmationDetails(BaseModel):
    """Confirmation block of a booking API response."""

    model_config = ConfigDict(extra="allow")

    date: str = Field(..., min_length=1, description="Booked date in ISO format")
    service: str | None = Field(None, description="Booked service")
    time: str | None = Field(None, description="Booked time of day")


class BookingResponse(BaseModel):
    """Booking API response; only the confirmation details are read."""

    model_config = ConfigDict(extra="allow")

    confirmation_details: ConfirmationDetails


class DatePickerBounds(BaseModel):
    """
    Earliest and latest selectable date.

    The German values are for display, the ISO values for the min/max
    attributes of a native date input.
    """

    min_date: str = Field(..., description="Earliest date (DD.MM.YYYY)")
    max_date: str = Field(..., description="Latest date (DD.MM.YYYY)")
    min_iso: str = Field(..., description="Earliest date (YYYY-MM-DD)")
    max_iso: str = Field(..., description="Latest date (YYYY-MM-DD)")
