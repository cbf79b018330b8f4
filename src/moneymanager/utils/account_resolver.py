"""Utility for resolving account names to IDs."""

from moneymanager.domain.account import AccountService
from moneymanager.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, account: str) -> str:
    """Resolve account name or ID to account ID.

    An exact ID match wins over a name match.

    Args:
        account_service: AccountService instance
        account: Account ID (e.g. "cash") or account name (e.g. "Bank Account")

    Returns:
        Account ID

    Raises:
        NotFoundError: If account is not found
    """
    if account_service.get_account(account) is not None:
        return account

    # Try to find by name
    for acc in account_service.list_accounts():
        if acc.name == account:
            return acc.id

    raise NotFoundError(f"Account '{account}' not found")
