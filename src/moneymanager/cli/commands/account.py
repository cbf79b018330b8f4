"""Account management commands."""

import click
from moneymanager.cli.account_resolution import resolve_account_or_exit
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.account import AccountService
from moneymanager.domain.errors import DomainError
from moneymanager.utils.amount_parser import parse_amount


def _service(ctx) -> AccountService:
    return AccountService(ctx.obj["db"], ctx.obj["clock"])


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--color", default="#3b82f6", show_default=True, help="Display color")
@click.option("--balance", default="0", show_default=True, help="Opening balance")
@click.option("--id", "account_id", help="Explicit account ID (e.g. 'cash'); generated if omitted")
@click.pass_context
def create_account(ctx, name: str, color: str, balance: str, account_id: str | None):
    """Create a new account.

    Examples:
        moneymanager account create "Cash" --id cash --balance 5000 --color "#10b981"
        moneymanager account create "Bank Account" --balance 25000
    """
    service = _service(ctx)

    try:
        opening_balance = parse_amount(balance)
        new_id = service.create_account(
            name=name, color=color, balance=opening_balance, account_id=account_id
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{name}' (ID: {new_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their balances."""
    service = _service(ctx)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        balance_str = f"${acc.balance:,.2f}"
        click.echo(f"ID: {acc.id:<32} | {acc.name:20s} | {balance_str:>14}")


@account_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option("--color", help="New display color")
@click.pass_context
def update_account(ctx, account: str, name: str | None, color: str | None) -> None:
    """Rename or recolor an account.

    ACCOUNT can be an account name or ID. Balances change only through
    transactions and transfers.

    Examples:
        moneymanager account update cash --name "Wallet"
        moneymanager account update "Bank Account" --color "#1d4ed8"
    """
    if name is None and color is None:
        click.echo("Error: Nothing to update; pass --name and/or --color.", err=True)
        ctx.exit(1)

    service = _service(ctx)
    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        updated = service.update_account(account_id=account_id, name=name, color=color)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated account '{updated.name}' (ID: {updated.id})")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account name or ID.

    The account can only be deleted if no transactions or transfers
    reference it.
    """
    service = _service(ctx)
    account_id = resolve_account_or_exit(ctx, service, account)
    account_obj = service.get_account(account_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}' (ID: {account_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted account '{account_obj.name}'")


@account_group.command("total")
@click.pass_context
def total_balance(ctx) -> None:
    """Show the sum of all account balances."""
    total = _service(ctx).get_total_balance()
    click.echo(f"Total balance: ${total:,.2f}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
