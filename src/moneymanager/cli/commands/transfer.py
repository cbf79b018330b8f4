"""Transfer commands."""

import click
from moneymanager.cli.account_resolution import resolve_account_or_exit
from moneymanager.cli.date_filters import resolve_cli_date_range
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.account import AccountService
from moneymanager.domain.errors import DomainError
from moneymanager.domain.transfer import TransferService
from moneymanager.utils.amount_parser import parse_amount
from moneymanager.utils.date_parser import parse_datetime, to_datetime_range


@click.group()
def transfer_group():
    """Move money between accounts."""
    pass


@transfer_group.command("create")
@click.option("--from", "from_account", required=True, help="Source account name or ID")
@click.option("--to", "to_account", required=True, help="Destination account name or ID")
@click.option("--amount", required=True, help="Positive amount")
@click.option("--description", help="Optional note")
@click.option("--date", help="Date and time; defaults to now")
@click.pass_context
def create_transfer(
    ctx,
    from_account: str,
    to_account: str,
    amount: str,
    description: str | None,
    date: str | None,
):
    """Transfer money from one account to another.

    Examples:
        moneymanager transfer create --from bank --to cash --amount 500
    """
    db = ctx.obj["db"]
    clock = ctx.obj["clock"]
    account_service = AccountService(db, clock)
    service = TransferService(db, clock)

    from_id = resolve_account_or_exit(ctx, account_service, from_account)
    to_id = resolve_account_or_exit(ctx, account_service, to_account)

    try:
        transfer_amount = parse_amount(amount)
        transfer_date = parse_datetime(date) if date is not None else clock.now()
        transfer = service.create_transfer(
            from_account_id=from_id,
            to_account_id=to_id,
            amount=transfer_amount,
            description=description,
            date_time=transfer_date,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transfer {transfer.id}")
    for account_id in (from_id, to_id):
        acc = account_service.get_account(account_id)
        click.echo(f"  {acc.name}: ${acc.balance:,.2f}")


@transfer_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative)")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative)")
@click.pass_context
def list_transfers(ctx, start_date: str | None, end_date: str | None):
    """List transfers, newest first.

    A date range filters only when both --start-date and --end-date are given.
    """
    db = ctx.obj["db"]
    service = TransferService(db, ctx.obj["clock"])

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={},
        today=ctx.obj["clock"].now().date(),
    )
    if start is not None and end is not None:
        transfers = service.list_transfers_by_date_range(*to_datetime_range(start, end))
    else:
        transfers = service.list_transfers()

    if not transfers:
        click.echo("No transfers found.")
        return

    accounts = {acc.id: acc.name for acc in AccountService(db).list_accounts()}
    click.echo(f"\nFound {len(transfers)} transfer(s):")
    click.echo("-" * 100)
    for transfer in transfers:
        amount_str = f"${transfer.amount:,.2f}"
        click.echo(
            f"{transfer.id:<32} {transfer.date_time:%Y-%m-%d %H:%M} "
            f"{accounts.get(transfer.from_account_id, transfer.from_account_id)[:15]:>15} -> "
            f"{accounts.get(transfer.to_account_id, transfer.to_account_id)[:15]:<15} "
            f"{amount_str:>12} {transfer.description or ''}"
        )


@transfer_group.command("delete")
@click.argument("transfer_id")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_transfer(ctx, transfer_id: str, yes: bool):
    """Delete a transfer and move its amount back."""
    service = TransferService(ctx.obj["db"], ctx.obj["clock"])

    try:
        transfer = service.require_transfer(transfer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Delete transfer of ${transfer.amount:,.2f}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transfer(transfer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transfer {transfer_id}")


def register_commands(cli):
    """Register transfer commands with main CLI."""
    cli.add_command(transfer_group, name="transfer")
