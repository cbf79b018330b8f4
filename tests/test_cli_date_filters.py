"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from moneymanager.cli.date_filters import period_flags_from, resolve_cli_date_range

TODAY = date(2024, 3, 13)


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Only one period option" in err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            period_flags={"this-month": True},
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags={"last-week": True, "this-month": False},
        today=TODAY,
    )

    assert (start, end) == (date(2024, 3, 4), date(2024, 3, 10))


def test_resolve_cli_date_range_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2024-01-01",
        end_date="yesterday",
        period_flags={},
        today=TODAY,
    )

    assert (start, end) == (date(2024, 1, 1), date(2024, 3, 12))


def test_resolve_cli_date_range_single_bound():
    start, end = resolve_cli_date_range(
        _ctx(), start_date="2024-01-01", end_date=None, period_flags={}
    )
    assert (start, end) == (date(2024, 1, 1), None)


def test_resolve_cli_date_range_default_range():
    default = (date(2024, 1, 1), date(2024, 1, 31))
    start, end = resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, period_flags={}, default_range=default
    )
    assert (start, end) == default


def test_resolve_cli_date_range_invalid_date(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(_ctx(), start_date="soonish", end_date=None, period_flags={})
    assert "Invalid start date" in capsys.readouterr().err


def test_resolve_cli_date_range_reversed_range(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(
            _ctx(), start_date="2024-02-01", end_date="2024-01-01", period_flags={}
        )
    assert "must not be after" in capsys.readouterr().err


def test_period_flags_from_click_params():
    flags = period_flags_from({"this_week": True, "last_year": False, "start_date": "x"})

    assert flags["this-week"] is True
    assert flags["last-year"] is False
    assert set(flags) == {"this-week", "this-month", "this-year", "last-week", "last-month", "last-year"}
