"""Transaction domain service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from moneymanager.database.base import Database
from moneymanager.domain.balance import BalanceManager
from moneymanager.domain.entities import (
    Division,
    Transaction as TransactionEntity,
    TransactionType,
)
from moneymanager.domain.errors import (
    NotEditableError,
    NotFoundError,
    ValidationError,
    transaction_not_editable,
    transaction_not_found,
)
from moneymanager.domain.mutability import is_editable
from moneymanager.utils.clock import Clock, system_clock
from moneymanager.utils.money import require_positive

logger = logging.getLogger(__name__)


def signed_amount(transaction_type: TransactionType, amount: Decimal) -> Decimal:
    """Balance delta for a transaction of the given type and amount."""
    return amount if transaction_type == TransactionType.INCOME else -amount


def parse_transaction_type(value: TransactionType | str) -> TransactionType:
    """Coerce a value to TransactionType, accepting any letter case."""
    try:
        return TransactionType(value.upper() if isinstance(value, str) else value)
    except ValueError:
        raise ValidationError(f"Invalid transaction type: {value!r}")


def parse_division(value: Division | str) -> Division:
    """Coerce a value to Division, accepting any letter case."""
    try:
        return Division(value.upper() if isinstance(value, str) else value)
    except ValueError:
        raise ValidationError(f"Invalid division: {value!r}")


def _require_text(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def _require_datetime(value: datetime) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"Date and time is required, got {value!r}")
    return value


class TransactionService:
    """Service for managing transactions.

    Every write keeps the affected account balances in step with the
    ledger: the ledger row and all balance deltas are committed together
    or not at all.
    """

    def __init__(
        self,
        db: Database,
        clock: Clock = system_clock,
        balances: Optional[BalanceManager] = None,
    ):
        """Initialize transaction service.

        Args:
            db: Database instance
            clock: Source of timestamps and edit-window checks
            balances: Balance manager; one sharing ``db`` and ``clock`` is
                created if None
        """
        self.db = db
        self.clock = clock
        self.balances = balances or BalanceManager(db, clock)

    def create_transaction(
        self,
        transaction_type: TransactionType | str,
        amount: Decimal | int | str,
        description: str,
        category_id: str,
        division: Division | str,
        account_id: str,
        date_time: datetime,
    ) -> TransactionEntity:
        """Create a transaction and apply it to its account.

        Args:
            transaction_type: Income or expense
            amount: Positive amount
            description: Free text description
            category_id: Category ID (not required to exist)
            division: Office or personal
            account_id: Account the transaction is booked against
            date_time: Business date and time of the transaction

        Returns:
            The stored transaction

        Raises:
            ValidationError: If any field is missing or malformed
            NotFoundError: If the account doesn't exist
        """
        transaction_type = parse_transaction_type(transaction_type)
        amount = require_positive(amount)
        description = _require_text(description, "Description")
        category_id = _require_text(category_id, "Category")
        division = parse_division(division)
        account_id = _require_text(account_id, "Account")
        date_time = _require_datetime(date_time)

        with self.db.atomic():
            transaction_id = self.db.create_transaction(
                transaction_type=transaction_type,
                amount=amount,
                description=description,
                category_id=category_id,
                division=division,
                account_id=account_id,
                date_time=date_time,
                created_at=self.clock.now(),
            )
            self.balances.update_balance(
                account_id, signed_amount(transaction_type, amount)
            )

        logger.info(
            "Created transaction: %s - %s - %s", transaction_id, description, amount
        )
        return self.require_transaction(transaction_id)

    def get_transaction(self, transaction_id: str) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: str) -> TransactionEntity:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def is_editable(self, transaction: TransactionEntity) -> bool:
        """Whether the transaction is still inside its edit window."""
        return is_editable(transaction.created_at, self.clock.now())

    def _require_editable(self, transaction_id: str, action: str) -> TransactionEntity:
        txn = self.require_transaction(transaction_id)
        if not self.is_editable(txn):
            logger.warning("Refused to %s frozen transaction %s", action, transaction_id)
            raise NotEditableError(transaction_not_editable(transaction_id, f"{action}d"))
        return txn

    def update_transaction(
        self,
        transaction_id: str,
        transaction_type: Optional[TransactionType | str] = None,
        amount: Optional[Decimal | int | str] = None,
        description: Optional[str] = None,
        category_id: Optional[str] = None,
        division: Optional[Division | str] = None,
        account_id: Optional[str] = None,
        date_time: Optional[datetime] = None,
    ) -> TransactionEntity:
        """Update a transaction inside its edit window.

        Fields left as None keep their current value. The old balance effect
        is reverted on the old account and the new one applied to the new
        account, so changing ``account_id`` moves the whole effect.

        Raises:
            NotFoundError: If the transaction or the new account doesn't exist
            NotEditableError: If the edit window has passed
            ValidationError: If a new value is malformed
            ConflictError: If another writer changed the transaction meanwhile
        """
        new_type = parse_transaction_type(transaction_type) if transaction_type is not None else None
        new_amount = require_positive(amount) if amount is not None else None
        if description is not None:
            _require_text(description, "Description")
        if category_id is not None:
            _require_text(category_id, "Category")
        new_division = parse_division(division) if division is not None else None
        if account_id is not None:
            _require_text(account_id, "Account")
        if date_time is not None:
            _require_datetime(date_time)

        with self.db.atomic():
            existing = self._require_editable(transaction_id, "update")

            new_type = new_type or existing.type
            new_amount = new_amount if new_amount is not None else existing.amount
            new_account_id = account_id or existing.account_id

            # Revert the old effect before anything else is written
            self.balances.update_balance(existing.account_id, -existing.signed_amount)
            self.db.update_transaction(
                transaction_id=transaction_id,
                transaction_type=new_type,
                amount=new_amount,
                description=description if description is not None else existing.description,
                category_id=category_id or existing.category_id,
                division=new_division or existing.division,
                account_id=new_account_id,
                date_time=date_time or existing.date_time,
                updated_at=self.clock.now(),
                expected_version=existing.version,
            )
            self.balances.update_balance(new_account_id, signed_amount(new_type, new_amount))

        logger.info("Updated transaction: %s", transaction_id)
        return self.require_transaction(transaction_id)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction inside its edit window and revert its effect.

        Raises:
            NotFoundError: If transaction doesn't exist
            NotEditableError: If the edit window has passed
        """
        with self.db.atomic():
            existing = self._require_editable(transaction_id, "delete")
            self.balances.update_balance(existing.account_id, -existing.signed_amount)
            self.db.delete_transaction(transaction_id, expected_version=existing.version)

        logger.info("Deleted transaction: %s", transaction_id)

    def list_transactions(
        self,
        division: Optional[Division | str] = None,
        category_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters, newest first.

        Any subset of filters may be given; each date bound is inclusive and
        independent of the other.
        """
        return self.db.list_transactions(
            division=parse_division(division) if division is not None else None,
            category_id=category_id,
            start=start,
            end=end,
        )

    def get_total_income(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> Decimal:
        """Total income, over ``[start, end]`` when both bounds are given."""
        return self._total(TransactionType.INCOME, start, end)

    def get_total_expense(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> Decimal:
        """Total expense, over ``[start, end]`` when both bounds are given."""
        return self._total(TransactionType.EXPENSE, start, end)

    def _total(
        self,
        transaction_type: TransactionType,
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> Decimal:
        if start is None or end is None:
            start = end = None
        transactions = self.db.list_transactions(
            start=start, end=end, transaction_type=transaction_type
        )
        return sum((txn.amount for txn in transactions), Decimal("0.00"))
