"""Abstract database interface (the ledger store)."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from moneymanager.domain.entities import (
    Account,
    Category,
    Division,
    Transaction,
    TransactionType,
    Transfer,
)


class Database(ABC):
    """Abstract database interface for moneymanager.

    Every write method commits immediately unless it runs inside an
    ``atomic()`` block, in which case the outermost block commits or rolls
    back all of them together.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Open a unit of work.

        Nested blocks join the outer one. Any exception raised inside the
        outermost block rolls back every write made in it.
        """
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        balance: Decimal,
        color: str,
        created_at: datetime,
        account_id: Optional[str] = None,
    ) -> str:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def account_exists(self, account_id: str) -> bool:
        """Check if an account exists."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def update_account(
        self,
        account_id: str,
        updated_at: datetime,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> None:
        """Update account name and/or color. Never touches the balance."""
        pass

    @abstractmethod
    def adjust_account_balance(
        self, account_id: str, delta: Decimal, updated_at: datetime
    ) -> Optional[Decimal]:
        """Add ``delta`` to an account balance in a single store operation.

        Returns:
            The new balance, or None if the account does not exist
        """
        pass

    @abstractmethod
    def get_total_balance(self) -> Decimal:
        """Sum of all account balances."""
        pass

    @abstractmethod
    def delete_account(self, account_id: str) -> None:
        """Delete an account."""
        pass

    @abstractmethod
    def get_account_transaction_count(self, account_id: str) -> int:
        """Count transactions booked against an account."""
        pass

    @abstractmethod
    def get_account_transfer_count(self, account_id: str) -> int:
        """Count transfers from or to an account."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self,
        name: str,
        icon: str,
        category_type: TransactionType,
        category_id: Optional[str] = None,
    ) -> str:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def category_exists(self, category_id: str) -> bool:
        """Check if a category exists."""
        pass

    @abstractmethod
    def list_categories(
        self, category_type: Optional[TransactionType] = None
    ) -> list[Category]:
        """List categories, optionally filtered by type."""
        pass

    @abstractmethod
    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        icon: Optional[str] = None,
        category_type: Optional[TransactionType] = None,
    ) -> None:
        """Update category fields."""
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def get_category_transaction_count(self, category_id: str) -> int:
        """Count transactions that reference a category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        description: str,
        category_id: str,
        division: Division,
        account_id: str,
        date_time: datetime,
        created_at: datetime,
    ) -> str:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def transaction_exists(self, transaction_id: str) -> bool:
        """Check if a transaction exists."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: str,
        transaction_type: TransactionType,
        amount: Decimal,
        description: str,
        category_id: str,
        division: Division,
        account_id: str,
        date_time: datetime,
        updated_at: datetime,
        expected_version: Optional[int] = None,
    ) -> None:
        """Overwrite every mutable field of a transaction.

        When ``expected_version`` is given the write only succeeds if the
        stored row still carries that version.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ConflictError: If the row changed since it was read
        """
        pass

    @abstractmethod
    def delete_transaction(
        self, transaction_id: str, expected_version: Optional[int] = None
    ) -> None:
        """Delete a transaction, optionally only if it still has ``expected_version``."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        division: Optional[Division] = None,
        category_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        transaction_type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest ``date_time`` first.

        Args:
            division: Optional division filter
            category_id: Optional category ID filter
            start: Optional inclusive lower bound on ``date_time``
            end: Optional inclusive upper bound on ``date_time``
            transaction_type: Optional income/expense filter
        """
        pass

    # Transfer operations
    @abstractmethod
    def create_transfer(
        self,
        from_account_id: str,
        to_account_id: str,
        amount: Decimal,
        description: Optional[str],
        date_time: datetime,
        created_at: datetime,
    ) -> str:
        """Create a transfer. Returns transfer ID."""
        pass

    @abstractmethod
    def get_transfer(self, transfer_id: str) -> Optional[Transfer]:
        """Get transfer by ID."""
        pass

    @abstractmethod
    def transfer_exists(self, transfer_id: str) -> bool:
        """Check if a transfer exists."""
        pass

    @abstractmethod
    def delete_transfer(self, transfer_id: str) -> None:
        """Delete a transfer."""
        pass

    @abstractmethod
    def list_transfers(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Transfer]:
        """List transfers, newest ``date_time`` first, optionally bounded."""
        pass
