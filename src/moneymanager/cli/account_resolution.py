"""CLI helpers for account resolution."""

from __future__ import annotations

import click
from moneymanager.cli.error_handling import handle_domain_error
from moneymanager.domain.account import AccountService
from moneymanager.domain.errors import DomainError
from moneymanager.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str
) -> str:
    """Resolve account name or ID, or exit with a CLI error."""
    try:
        return resolve_account(account_service, account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
