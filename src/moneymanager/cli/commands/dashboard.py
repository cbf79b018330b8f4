"""Dashboard command."""

import click
from moneymanager.cli.commands.summary import print_category_rows
from moneymanager.cli.date_filters import resolve_cli_date_range
from moneymanager.domain.entities import DashboardSummary, PeriodKind
from moneymanager.domain.summary import SummaryService
from moneymanager.utils.date_parser import to_datetime_range


def _print_dashboard(dashboard: DashboardSummary) -> None:
    click.echo(f"\nDashboard {dashboard.start:%Y-%m-%d} to {dashboard.end:%Y-%m-%d}")
    click.echo("-" * 71)
    for label, value in (
        ("Income", dashboard.total_income),
        ("Expense", dashboard.total_expense),
        ("Net", dashboard.net),
    ):
        value_str = f"${value:,.2f}"
        click.echo(f"{label:<50} {value_str:>20}")

    if dashboard.category_breakdown:
        click.echo("\nBy category:")
        print_category_rows(list(dashboard.category_breakdown))

    if dashboard.period_comparison:
        click.echo("\nTrend:")
        click.echo(f"    {'Period':<16} {'Income':>16} {'Expense':>16}")
        for point in dashboard.period_comparison:
            income_str = f"${point.income:,.2f}"
            expense_str = f"${point.expense:,.2f}"
            click.echo(f"    {point.label:<16} {income_str:>16} {expense_str:>16}")


@click.command("dashboard")
@click.option("--weekly", is_flag=True, help="Current week with a 4-week trend")
@click.option("--monthly", is_flag=True, help="Current month with a 6-month trend (default)")
@click.option("--yearly", is_flag=True, help="Current year with a 3-year trend")
@click.option("--start-date", help="Custom range start (requires --end-date)")
@click.option("--end-date", help="Custom range end (requires --start-date)")
@click.pass_context
def dashboard(
    ctx,
    weekly: bool,
    monthly: bool,
    yearly: bool,
    start_date: str | None,
    end_date: str | None,
):
    """Show income, expense, net and category totals for a period.

    Examples:
        moneymanager dashboard --weekly
        moneymanager dashboard --start-date 2024-01-01 --end-date 2024-03-31
    """
    clock = ctx.obj["clock"]
    service = SummaryService(ctx.obj["db"], clock)

    kinds = [
        kind
        for kind, is_set in (
            (PeriodKind.WEEKLY, weekly),
            (PeriodKind.MONTHLY, monthly),
            (PeriodKind.YEARLY, yearly),
        )
        if is_set
    ]
    if len(kinds) > 1:
        click.echo("Error: Only one of --weekly, --monthly and --yearly can be specified.", err=True)
        ctx.exit(1)

    if start_date or end_date:
        if kinds:
            click.echo(
                "Error: --weekly, --monthly and --yearly cannot be combined with --start-date or --end-date.",
                err=True,
            )
            ctx.exit(1)
        if not (start_date and end_date):
            click.echo("Error: A custom range needs both --start-date and --end-date.", err=True)
            ctx.exit(1)
        start, end = resolve_cli_date_range(
            ctx,
            start_date=start_date,
            end_date=end_date,
            period_flags={},
            today=clock.now().date(),
        )
        result = service.dashboard_summary(*to_datetime_range(start, end))
    else:
        result = service.period_summary(kinds[0] if kinds else PeriodKind.MONTHLY)

    _print_dashboard(result)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
