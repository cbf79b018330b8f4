"""Tests for date parser with relative dates."""

from datetime import date, datetime, timedelta

import pytest

from moneymanager.utils.date_parser import (
    end_of_day,
    get_date_range,
    parse_date,
    parse_datetime,
    start_of_day,
    to_datetime_range,
)

# A Wednesday in a leap year
TODAY = date(2024, 3, 13)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_days():
    assert parse_date("today", today=TODAY) == TODAY
    assert parse_date("Yesterday", today=TODAY) == date(2024, 3, 12)
    assert parse_date("tomorrow", today=TODAY) == date(2024, 3, 14)


def test_parse_today_defaults_to_current_date():
    assert parse_date("today") == date.today()


def test_parse_period_starts():
    assert parse_date("this week", today=TODAY) == date(2024, 3, 11)
    assert parse_date("last week", today=TODAY) == date(2024, 3, 4)
    assert parse_date("next week", today=TODAY) == date(2024, 3, 18)
    assert parse_date("last month", today=TODAY) == date(2024, 2, 1)
    assert parse_date("this year", today=TODAY) == date(2024, 1, 1)
    assert parse_date("next year", today=TODAY) == date(2025, 1, 1)


def test_parse_last_weekday():
    assert parse_date("last friday", today=TODAY) == date(2024, 3, 8)
    # The same weekday as today means a full week back
    assert parse_date("last wednesday", today=TODAY) == date(2024, 3, 6)


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date at all")


@pytest.mark.parametrize(
    "period,expected",
    [
        ("this-week", (date(2024, 3, 11), date(2024, 3, 17))),
        ("last-week", (date(2024, 3, 4), date(2024, 3, 10))),
        ("this-month", (date(2024, 3, 1), date(2024, 3, 31))),
        ("last-month", (date(2024, 2, 1), date(2024, 2, 29))),
        ("this-year", (date(2024, 1, 1), date(2024, 12, 31))),
        ("last-year", (date(2023, 1, 1), date(2023, 12, 31))),
    ],
)
def test_get_date_range_covers_whole_periods(period, expected):
    assert get_date_range(period, today=TODAY) == expected


def test_get_date_range_last_month_across_year_boundary():
    assert get_date_range("last-month", today=date(2024, 1, 20)) == (
        date(2023, 12, 1),
        date(2023, 12, 31),
    )


def test_get_date_range_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade", today=TODAY)


def test_parse_datetime_formats():
    assert parse_datetime("2024-01-15T14:30") == datetime(2024, 1, 15, 14, 30)
    assert parse_datetime("2024-01-15 09:05:10") == datetime(2024, 1, 15, 9, 5, 10)
    assert parse_datetime("2024-01-15") == datetime(2024, 1, 15, 0, 0)


def test_parse_datetime_drops_offset():
    result = parse_datetime("2024-01-15T14:30:00+05:30")
    assert result == datetime(2024, 1, 15, 14, 30)
    assert result.tzinfo is None


def test_parse_datetime_relative_is_midnight():
    assert parse_datetime("yesterday") == start_of_day(date.today() - timedelta(days=1))


def test_parse_datetime_invalid():
    with pytest.raises(ValueError, match="Could not parse date-time"):
        parse_datetime("whenever")


def test_day_bounds():
    assert start_of_day(TODAY) == datetime(2024, 3, 13, 0, 0)
    assert end_of_day(TODAY) == datetime(2024, 3, 13, 23, 59, 59, 999999)
    assert to_datetime_range(TODAY, None) == (datetime(2024, 3, 13), None)
    assert to_datetime_range(None, None) == (None, None)
