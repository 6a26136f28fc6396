"""Conversion, validation and formatting of ISO and German date strings."""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from datumsformat.core.constants import (
    GERMAN_DATE_PATTERN,
    GERMAN_MONTHS,
    GERMAN_SEPARATOR,
    ISO_DATE_PATTERN,
    ISO_SEPARATOR,
)
from datumsformat.core.exceptions import (
    InvalidGermanDateError,
    InvalidIsoDateError,
    MonthOutOfRangeError,
)
from datumsformat.models.enums import DateFormat


def _split_fields(value: str, separator: str) -> tuple[str, str, str]:
    """Split into exactly three fields, missing ones become empty strings."""
    parts = value.split(separator)
    parts += [""] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


def _numeric_fields(german: str) -> tuple[int, int, int] | None:
    """
    Day, month and year of a German date as ints.

    Blank fields count as 0 ("15..2025" has month 0). Returns None when a
    field is missing or not a number.
    """
    parts = german.split(GERMAN_SEPARATOR)
    if len(parts) < 3:
        return None
    try:
        day, month, year = (int(part) if part.strip() else 0 for part in parts[:3])
    except ValueError:
        return None
    return day, month, year


def _calendar_date(year: int, month: int, day: int) -> date | None:
    """
    Build a date, rolling month and day overflow into the following units.

    31.02.2025 becomes 03.03.2025, day 0 is the last day of the previous
    month and month 13 is January of the next year. Returns None when the
    result is outside the supported year range (1-9999).
    """
    try:
        return date(year, 1, 1) + relativedelta(months=month - 1, days=day - 1)
    except (ValueError, OverflowError):
        return None


def _is_calendar_date(year: int, month: int, day: int) -> bool:
    """Check that (year, month, day) survives normalization unchanged."""
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return False
    normalized = _calendar_date(year, month, day)
    if normalized is None:
        return False
    return (normalized.year, normalized.month, normalized.day) == (year, month, day)


def to_german(iso: str | None) -> str:
    """
    Convert an ISO date to German format.

    No validation is done; malformed input yields a malformed result
    instead of an error.

    Args:
        iso: Date in "YYYY-MM-DD" format

    Returns:
        Date in "DD.MM.YYYY" format, "" for empty input

    Example:
        >>> to_german("2025-02-15")
        '15.02.2025'
    """
    if not iso:
        return ""
    year, month, day = _split_fields(iso, ISO_SEPARATOR)
    return f"{day}.{month}.{year}"


def to_iso(german: str | None) -> str:
    """
    Convert a German date to ISO format.

    Day and month are left-padded with zeros to two characters. No calendar
    validation is done.

    Args:
        german: Date in "DD.MM.YYYY" format

    Returns:
        Date in "YYYY-MM-DD" format, "" for empty input

    Example:
        >>> to_iso("5.2.2025")
        '2025-02-05'
    """
    if not german:
        return ""
    day, month, year = _split_fields(german, GERMAN_SEPARATOR)
    return f"{year}-{month.rjust(2, '0')}-{day.rjust(2, '0')}"


def date_object_to_german(value: date) -> str:
    """Format a date or datetime as "DD.MM.YYYY" (local wall-clock fields)."""
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def current_german_date(now: date | None = None) -> str:
    """
    Get today's date in German format.

    Args:
        now: Current date/datetime, defaults to the local system clock

    Returns:
        Today in "DD.MM.YYYY" format
    """
    return date_object_to_german(now if now is not None else datetime.now())


def is_valid_german(german: str | None) -> bool:
    """
    Validate a German date.

    The value must be exactly "DD.MM.YYYY" and denote a real calendar date,
    so "31.02.2025" is rejected. Never raises.

    Args:
        german: Value to check

    Returns:
        True if valid, False otherwise

    Example:
        >>> is_valid_german("15.02.2025")
        True
        >>> is_valid_german("32.13.2025")
        False
    """
    if not german or not isinstance(german, str):
        return False

    match = GERMAN_DATE_PATTERN.fullmatch(german)
    if match is None:
        return False

    day, month, year = (int(group) for group in match.groups())
    return _is_calendar_date(year, month, day)


def is_past(german: str | None, today: date | None = None) -> bool:
    """
    Check whether a German date lies before today.

    The value is expected to be validated already. Only calendar days are
    compared, so today itself is not in the past. Blank fields count as 0;
    missing or non-numeric fields give False.

    Args:
        german: Date in "DD.MM.YYYY" format
        today: Reference day, defaults to the local system clock

    Returns:
        True if the date is strictly before today
    """
    if not german:
        return False

    fields = _numeric_fields(german)
    if fields is None:
        return False

    day, month, year = fields
    target = _calendar_date(year, month, day)
    if target is None:
        return False

    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    return target < today


def to_readable_german(german: str | None) -> str:
    """
    Format a German date with the month written out.

    Args:
        german: Date in "DD.MM.YYYY" format

    Returns:
        Date like "15. Februar 2025" (day not zero-padded), "" for empty input

    Raises:
        InvalidGermanDateError: If day, month or year is not a number
        MonthOutOfRangeError: If the month is outside 1-12
    """
    if not german:
        return ""

    fields = _numeric_fields(german)
    if fields is None:
        raise InvalidGermanDateError(german, f"Ungültiges Datum: '{german}'")

    day, month, year = fields
    if not 1 <= month <= len(GERMAN_MONTHS):
        raise MonthOutOfRangeError(month)

    return f"{day}. {GERMAN_MONTHS[month - 1]} {year}"


def parse_german_date(german: str | None) -> date:
    """
    Parse a German date string into a date object.

    Raises:
        InvalidGermanDateError: If the value is not a valid "DD.MM.YYYY" date
    """
    if not is_valid_german(german):
        raise InvalidGermanDateError(german)
    day, month, year = (int(part) for part in german.split(GERMAN_SEPARATOR))
    return date(year, month, day)


def parse_iso_date(iso: str | None) -> date:
    """
    Parse an ISO date string into a date object.

    Raises:
        InvalidIsoDateError: If the value is not a valid "YYYY-MM-DD" date
    """
    if not iso or not isinstance(iso, str):
        raise InvalidIsoDateError(iso)

    match = ISO_DATE_PATTERN.fullmatch(iso)
    if match is None:
        raise InvalidIsoDateError(iso)

    year, month, day = (int(group) for group in match.groups())
    if not _is_calendar_date(year, month, day):
        raise InvalidIsoDateError(iso)
    return date(year, month, day)


def format_date(d: date, format_type: DateFormat | str = DateFormat.ISO) -> str:
    """
    Format a date object to string.

    Args:
        d: Date to format
        format_type: 'iso', 'german' or 'readable'; unknown values give ISO

    Returns:
        Formatted date string
    """
    german = date_object_to_german(d)
    formats = {
        DateFormat.ISO: lambda: to_iso(german),
        DateFormat.GERMAN: lambda: german,
        DateFormat.READABLE: lambda: to_readable_german(german),
    }
    try:
        key = DateFormat(format_type)
    except ValueError:
        key = DateFormat.ISO
    return formats[key]()
