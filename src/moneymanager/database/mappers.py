"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, including the cents-to-Decimal
conversion for every money column.
"""

from moneymanager.domain import entities as domain
from moneymanager.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
    Transfer as ORMTransfer,
)
from moneymanager.utils.money import from_cents


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        balance=from_cents(orm_account.balance_cents),
        color=orm_account.color,
        created_at=orm_account.created_at,
        updated_at=orm_account.updated_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        icon=orm_category.icon,
        type=orm_category.type,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        type=orm_transaction.type,
        amount=from_cents(orm_transaction.amount_cents),
        description=orm_transaction.description,
        category_id=orm_transaction.category_id,
        division=orm_transaction.division,
        account_id=orm_transaction.account_id,
        date_time=orm_transaction.date_time,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
        version=orm_transaction.version,
    )


def transfer_to_domain(orm_transfer: ORMTransfer) -> domain.Transfer:
    """Convert SQLAlchemy Transfer model to domain Transfer entity."""
    return domain.Transfer(
        id=orm_transfer.id,
        from_account_id=orm_transfer.from_account_id,
        to_account_id=orm_transfer.to_account_id,
        amount=from_cents(orm_transfer.amount_cents),
        description=orm_transfer.description,
        date_time=orm_transfer.date_time,
        created_at=orm_transfer.created_at,
    )
