"""Transaction management commands."""

import click
from moneymanager.cli.account_resolution import resolve_account_or_exit
from moneymanager.cli.commands.add import DIVISION_CHOICE, TYPE_CHOICE, resolve_category_id
from moneymanager.cli.date_filters import resolve_cli_date_range
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.account import AccountService
from moneymanager.domain.category import CategoryService
from moneymanager.domain.errors import DomainError
from moneymanager.domain.transaction import TransactionService
from moneymanager.utils.amount_parser import parse_amount
from moneymanager.utils.date_parser import parse_datetime, to_datetime_range


def _service(ctx) -> TransactionService:
    return TransactionService(ctx.obj["db"], ctx.obj["clock"])


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--category", help="Category name or ID")
@click.option("--division", type=DIVISION_CHOICE, help="OFFICE or PERSONAL")
@click.pass_context
def list_transactions(ctx, start_date: str, end_date: str, category: str, division: str):
    """View transactions with optional filters, newest first.

    Transactions older than 12 hours are marked as locked.
    """
    db = ctx.obj["db"]
    service = _service(ctx)
    category_service = CategoryService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={},
        today=ctx.obj["clock"].now().date(),
    )
    start_dt, end_dt = to_datetime_range(start, end)

    category_id = resolve_category_id(category_service, category) if category else None
    transactions = service.list_transactions(
        division=division, category_id=category_id, start=start_dt, end=end_dt
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    accounts = {acc.id: acc.name for acc in AccountService(db).list_accounts()}
    categories = {cat.id: cat.name for cat in category_service.list_categories()}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 120)
    click.echo(
        f"{'ID':<32} {'Date':<16} {'Type':<8} {'Amount':>12} {'Category':<15} {'Account':<15} {'Description':<20}"
    )
    click.echo("-" * 120)
    for txn in transactions:
        lock = "" if service.is_editable(txn) else " [locked]"
        amount_str = f"${txn.amount:,.2f}"
        click.echo(
            f"{txn.id:<32} {txn.date_time:%Y-%m-%d %H:%M} {txn.type.value:<8} {amount_str:>12} "
            f"{categories.get(txn.category_id, txn.category_id)[:15]:<15} "
            f"{accounts.get(txn.account_id, 'Unknown')[:15]:<15} {txn.description[:20]}{lock}"
        )


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show all fields of one transaction."""
    service = _service(ctx)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {txn.category_id}")
    click.echo(f"  Division: {txn.division.value}")
    click.echo(f"  Account: {txn.account_id}")
    click.echo(f"  Date: {txn.date_time:%Y-%m-%d %H:%M}")
    click.echo(f"  Created: {txn.created_at:%Y-%m-%d %H:%M:%S}")
    click.echo(f"  Editable: {'yes' if service.is_editable(txn) else 'no'}")


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="INCOME or EXPENSE")
@click.option("--amount", help="New positive amount")
@click.option("--description", help="New description")
@click.option("--category", help="Category name or ID")
@click.option("--division", type=DIVISION_CHOICE, help="OFFICE or PERSONAL")
@click.option("--account", help="Account name or ID")
@click.option("--date", help="Date and time (e.g. '2024-01-15 14:30')")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    transaction_type: str | None,
    amount: str | None,
    description: str | None,
    category: str | None,
    division: str | None,
    account: str | None,
    date: str | None,
) -> None:
    """Update a transaction created in the last 12 hours.

    Updates only the fields that are provided. Account balances are
    adjusted to match.

    Examples:
        moneymanager transaction update 3f2a... --amount 75
        moneymanager transaction update 3f2a... --account bank --type INCOME
    """
    db = ctx.obj["db"]
    service = _service(ctx)

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_datetime(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    category_id = None
    if category is not None:
        category_id = resolve_category_id(CategoryService(db), category)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            transaction_type=transaction_type,
            amount=txn_amount,
            description=description,
            category_id=category_id,
            division=division,
            account_id=account_id,
            date_time=txn_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction created in the last 12 hours.

    Its effect on the account balance is reverted.
    """
    service = _service(ctx)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Delete {txn.type.value.lower()} of ${txn.amount:,.2f} '{txn.description}'?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
