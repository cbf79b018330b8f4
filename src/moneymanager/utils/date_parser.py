"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_RELATIVE_PREFIXES = ("last ", "this ", "next ")
_RELATIVE_WORDS = ("today", "yesterday", "tomorrow")
_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Offset in periods relative to the current one
_PERIOD_OFFSETS = {"last": -1, "this": 0, "next": 1}

PERIOD_NAMES = (
    "this-week",
    "this-month",
    "this-year",
    "last-week",
    "last-month",
    "last-year",
)


def _period_start(unit: str, today: date, offset: int) -> date:
    """First day of the week/month/year ``offset`` periods from today's."""
    if unit == "week":
        return today - timedelta(days=today.weekday()) + timedelta(weeks=offset)
    if unit == "month":
        return today.replace(day=1) + relativedelta(months=offset)
    if unit == "year":
        return today.replace(month=1, day=1) + relativedelta(years=offset)
    raise ValueError(f"Unknown period unit: '{unit}'")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"
    - Period starts: "last month", "this week", "next year"
    - Weekdays: "last friday" (the most recent Friday before today)

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)
    if text == "tomorrow":
        return today + timedelta(days=1)

    if text.startswith(_RELATIVE_PREFIXES):
        direction, unit = text.split(" ", 1)
        if unit in ("week", "month", "year"):
            return _period_start(unit, today, _PERIOD_OFFSETS[direction])
        if direction == "last" and unit in _WEEKDAYS:
            days_ago = (today.weekday() - _WEEKDAYS.index(unit)) % 7 or 7
            return today - timedelta(days=days_ago)

    # Try parsing as absolute date
    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get first and last day of a whole calendar period.

    Args:
        period: One of this-week, this-month, this-year, last-week,
            last-month, last-year. Weeks run Monday to Sunday.
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period string is not recognized
    """
    name = period.strip().lower()
    if name not in PERIOD_NAMES:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIOD_NAMES)}"
        )

    direction, unit = name.split("-", 1)
    today = today or date.today()
    start = _period_start(unit, today, _PERIOD_OFFSETS[direction])
    following = _period_start(unit, today, _PERIOD_OFFSETS[direction] + 1)
    return start, following - timedelta(days=1)


def parse_datetime(value: str) -> datetime:
    """Parse a date-time string into a naive local datetime.

    Supports:
    - "now"
    - ISO-8601 and free-form date-times: "2024-01-15T14:30", "Jan 15 2024 2pm"
    - Anything ``parse_date`` accepts, at midnight: "today", "last week"

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = value.strip().lower()
    if text == "now":
        return datetime.now().replace(microsecond=0)
    if text in _RELATIVE_WORDS or text.startswith(_RELATIVE_PREFIXES):
        return start_of_day(parse_date(text))

    try:
        dt = date_parser.parse(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date-time '{value}': {e}")
    # Local wall-clock time is stored, so drop any explicit offset
    return dt.replace(tzinfo=None)


def start_of_day(day: date) -> datetime:
    """Midnight at the start of ``day``."""
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    """Last representable instant of ``day``."""
    return datetime.combine(day, time.max)


def to_datetime_range(
    start: Optional[date], end: Optional[date]
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Widen a date range to datetimes covering both whole end days."""
    return (
        start_of_day(start) if start is not None else None,
        end_of_day(end) if end is not None else None,
    )
