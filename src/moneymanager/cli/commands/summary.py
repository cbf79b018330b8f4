"""Summary commands."""

import click
from moneymanager.cli.date_filters import period_flags_from, period_options, resolve_cli_date_range
from moneymanager.domain.entities import CategorySummary, TransactionType
from moneymanager.domain.summary import SummaryService
from moneymanager.utils.date_parser import to_datetime_range


def print_category_rows(summaries: list[CategorySummary], indent: int = 4) -> None:
    """Print category totals, highest first, then by name for ties."""
    for s in sorted(summaries, key=lambda s: (-s.total_amount, s.category_name)):
        total_str = f"${s.total_amount:,.2f}"
        label = f"{s.category_name} ({s.count})"
        click.echo(f"{' ' * indent}{label:<{50 - indent}} {total_str:>20}")


@click.command("summary")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')")
@period_options
@click.pass_context
def summary(ctx, start_date: str | None, end_date: str | None, **periods):
    """Show totals per category.

    A date range applies only when both ends are known, either from a
    period flag or from --start-date and --end-date together.
    """
    clock = ctx.obj["clock"]
    service = SummaryService(ctx.obj["db"], clock)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
        today=clock.now().date(),
    )
    summaries = service.category_summary(*to_datetime_range(start, end))

    if not summaries:
        click.echo("No transactions found.")
        return

    click.echo("\nCategory Summary:")
    click.echo("-" * 71)
    click.echo(f"{'Category':<50} {'Total':>20}")
    click.echo("-" * 71)

    for txn_type in (TransactionType.INCOME, TransactionType.EXPENSE):
        group = [s for s in summaries if s.type == txn_type]
        if not group:
            continue
        label = txn_type.value.title()
        click.echo(label)
        click.echo("*" * 71)
        print_category_rows(group)
        subtotal = sum(s.total_amount for s in group)
        click.echo("-" * 71)
        subtotal_str = f"${subtotal:,.2f}"
        click.echo(f"{label + ' Subtotal':<50} {subtotal_str:>20}")
        click.echo("=" * 71)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
