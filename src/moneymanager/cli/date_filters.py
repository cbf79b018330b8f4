"""CLI helpers for date range resolution."""

from datetime import date

import click

from moneymanager.utils.date_parser import PERIOD_NAMES, get_date_range, parse_date

PERIOD_FLAGS = ", ".join(f"--{name}" for name in PERIOD_NAMES)


def period_options(command):
    """Attach the --this-*/--last-* flags to a command.

    Their values reach the command as ``this_week``, ``last_month`` and so
    on; ``period_flags_from`` collects them back.
    """
    for name in reversed(PERIOD_NAMES):
        which, unit = name.split("-")
        label = "current" if which == "this" else "previous"
        command = click.option(f"--{name}", is_flag=True, help=f"Filter to {label} {unit}")(command)
    return command


def period_flags_from(params: dict) -> dict[str, bool]:
    """Map period flag parameters back to period names."""
    return {name: bool(params.get(name.replace("-", "_"))) for name in PERIOD_NAMES}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
    today: date | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    chosen = [period for period, is_set in period_flags.items() if is_set]

    if len(chosen) > 1:
        click.echo(
            f"Error: Only one period option ({PERIOD_FLAGS}) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if chosen and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --last-week, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if chosen:
        return get_date_range(chosen[0], today=today)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date, today=today)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date, today=today)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: Start date must not be after end date.", err=True)
        ctx.exit(1)

    if start is None and end is None and default_range is not None:
        start, end = default_range

    return start, end
