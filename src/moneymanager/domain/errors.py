"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class NotEditableError(DomainError):
    """Ledger entry is outside its edit window."""


class InvalidTransferError(DomainError):
    """Transfer source and destination are the same account."""


class StoreError(DomainError):
    """Underlying persistence operation failed; nothing was applied."""


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def category_not_found(category_id: str) -> str:
    """Return message for missing category."""
    return f"Category {category_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def transfer_not_found(transfer_id: str) -> str:
    """Return message for missing transfer."""
    return f"Transfer {transfer_id} not found"


def transaction_not_editable(transaction_id: str, action: str) -> str:
    """Return message for a transaction past its edit window."""
    return f"Transaction {transaction_id} cannot be {action} after 12 hours"


def transaction_changed(transaction_id: str) -> str:
    """Return message for a transaction modified by another writer."""
    return f"Transaction {transaction_id} was changed by another update; try again"


def same_account_transfer(account_id: str) -> str:
    """Return message for a transfer into its own source account."""
    return f"Cannot transfer from account {account_id} to itself"


def account_delete_blocked(
    account_id: str, transaction_count: int, transfer_count: int
) -> str:
    """Return message when account has dependent transactions or transfers."""
    parts = []
    if transaction_count > 0:
        parts.append(
            f"{transaction_count} transaction{'s' if transaction_count != 1 else ''}"
        )
    if transfer_count > 0:
        parts.append(
            f"{transfer_count} transfer{'s' if transfer_count != 1 else ''}"
        )
    return (
        f"Cannot delete account {account_id}: it has {', '.join(parts)}. "
        "Please reassign or delete them first."
    )


def category_delete_blocked(category_id: str, transaction_count: int) -> str:
    """Return message when category is still used by transactions."""
    return (
        f"Cannot delete category {category_id}: it is used by "
        f"{transaction_count} transaction{'s' if transaction_count != 1 else ''}."
    )
