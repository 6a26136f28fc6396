"""Date patterns, month names and booking constants."""

import re

# Strict shapes, ASCII digits only
ISO_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
GERMAN_DATE_PATTERN = re.compile(r"(\d{2})\.(\d{2})\.(\d{4})", re.ASCII)

ISO_SEPARATOR = "-"
GERMAN_SEPARATOR = "."

# Index = month - 1
GERMAN_MONTHS: tuple[str, ...] = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)

# User-facing messages of the booking form
MSG_INVALID_DATE = "Bitte gib ein gültiges Datum ein (DD.MM.YYYY)"
MSG_DATE_IN_PAST = "Das Datum darf nicht in der Vergangenheit liegen"
MSG_BOOKING_CONFIRMED = "Dein Termin wurde gebucht!"
