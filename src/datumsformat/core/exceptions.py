"""Custom exceptions for datumsformat."""

from datumsformat.core.constants import MSG_DATE_IN_PAST, MSG_INVALID_DATE


class DateFormatError(Exception):
    """Base exception for datumsformat."""

    def __init__(self, message: str, code: str = "DATE_FORMAT_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON response."""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
        }


class InvalidGermanDateError(DateFormatError):
    """Value is not a valid DD.MM.YYYY date."""

    def __init__(self, value: str | None, message: str = MSG_INVALID_DATE) -> None:
        super().__init__(message, "INVALID_GERMAN_DATE")
        self.value = value

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["value"] = self.value
        return result


class InvalidIsoDateError(DateFormatError):
    """Value is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str | None) -> None:
        message = f"Ungültiges ISO-Datum: '{value}' (erwartet YYYY-MM-DD)"
        super().__init__(message, "INVALID_ISO_DATE")
        self.value = value

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["value"] = self.value
        return result


class MonthOutOfRangeError(DateFormatError):
    """Month number outside 1-12."""

    def __init__(self, month: int) -> None:
        message = f"Monat {month} liegt nicht zwischen 1 und 12"
        super().__init__(message, "MONTH_OUT_OF_RANGE")
        self.month = month

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["month"] = self.month
        return result


class DateInPastError(DateFormatError):
    """Date lies before today."""

    def __init__(self, value: str) -> None:
        super().__init__(MSG_DATE_IN_PAST, "DATE_IN_PAST")
        self.value = value

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["value"] = self.value
        return result


class BookingResponseError(DateFormatError):
    """Booking API response is missing confirmation details."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "BOOKING_RESPONSE_ERROR")
