"""Enumeration types for datumsformat."""

from enum import Enum


class DateFormat(str, Enum):
    """
    Textual date representations.

    - ISO: "2025-02-15", what the booking API speaks
    - GERMAN: "15.02.2025", what users type and read
    - READABLE: "15. Februar 2025", for chat messages
    """

    ISO = "iso"
    GERMAN = "german"
    READABLE = "readable"


class BookingAction(str, Enum):
    """Actions accepted by the booking-ops endpoint."""

    CREATE = "create"
