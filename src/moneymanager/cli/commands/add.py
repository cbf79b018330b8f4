"""Add transaction command."""

import click
from moneymanager.cli.account_resolution import resolve_account_or_exit
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.account import AccountService
from moneymanager.domain.category import CategoryService
from moneymanager.domain.entities import Division, TransactionType
from moneymanager.domain.errors import DomainError, NotFoundError
from moneymanager.domain.transaction import TransactionService
from moneymanager.utils.amount_parser import parse_amount
from moneymanager.utils.date_parser import parse_datetime

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)
DIVISION_CHOICE = click.Choice([d.value for d in Division], case_sensitive=False)


def resolve_category_id(category_service: CategoryService, category: str) -> str:
    """Category ID for a name or ID; unknown values are kept as given."""
    try:
        return category_service.require_category(category).id
    except NotFoundError:
        return category


@click.command("add")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, required=True, help="INCOME or EXPENSE")
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45)")
@click.option("--description", required=True, help="Transaction description")
@click.option("--category", required=True, help="Category name or ID")
@click.option("--division", type=DIVISION_CHOICE, default="PERSONAL", show_default=True, help="OFFICE or PERSONAL")
@click.option("--account", required=True, help="Account name or ID")
@click.option("--date", help="Date and time (e.g. '2024-01-15 14:30', 'yesterday'); defaults to now")
@click.pass_context
def add_transaction(
    ctx,
    transaction_type: str,
    amount: str,
    description: str,
    category: str,
    division: str,
    account: str,
    date: str | None,
):
    """Add an income or expense transaction.

    The account balance is updated with the transaction.

    Examples:
        moneymanager add --type EXPENSE --amount 50 --description "Lunch" --category food --account cash
        moneymanager add --type INCOME --amount 1000 --description "Pay" --category Salary --account "Bank Account" --date 2024-01-31
    """
    db = ctx.obj["db"]
    clock = ctx.obj["clock"]
    transaction_service = TransactionService(db, clock)
    account_service = AccountService(db, clock)
    category_service = CategoryService(db)

    account_id = resolve_account_or_exit(ctx, account_service, account)

    # Parse date
    if date is None:
        txn_date = clock.now()
    else:
        try:
            txn_date = parse_datetime(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    # Parse amount
    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = transaction_service.create_transaction(
            transaction_type=transaction_type,
            amount=txn_amount,
            description=description,
            category_id=resolve_category_id(category_service, category),
            division=division,
            account_id=account_id,
            date_time=txn_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    account_obj = account_service.get_account(account_id)
    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    click.echo(f"  Account: {account_obj.name} (balance: ${account_obj.balance:,.2f})")
    click.echo(f"  Date: {txn.date_time:%Y-%m-%d %H:%M}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
