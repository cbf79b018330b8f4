"""Account domain service."""

import logging
from decimal import Decimal
from typing import Optional

from moneymanager.database.base import Database
from moneymanager.domain.balance import BalanceManager
from moneymanager.domain.entities import Account as AccountEntity
from moneymanager.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    account_delete_blocked,
    account_not_found,
)
from moneymanager.utils.clock import Clock, system_clock
from moneymanager.utils.money import to_decimal

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database, clock: Clock = system_clock):
        """Initialize account service.

        Args:
            db: Database instance
            clock: Source of timestamps
        """
        self.db = db
        self.clock = clock
        self.balances = BalanceManager(db, clock)

    def create_account(
        self,
        name: str,
        color: str,
        balance: Decimal | int | str = Decimal("0"),
        account_id: Optional[str] = None,
    ) -> str:
        """Create a new account.

        Args:
            name: Account name
            color: Display color (e.g. "#10b981")
            balance: Opening balance, may be negative
            account_id: Optional explicit ID (e.g. "cash"); generated if None

        Returns:
            Account ID

        Raises:
            ValidationError: If name or color is blank, or balance is malformed
            ConflictError: If the name or ID is already taken
        """
        if not name or not name.strip():
            raise ValidationError("Account name is required")
        if not color or not color.strip():
            raise ValidationError("Account color is required")
        opening_balance = to_decimal(balance)

        # Check if account with same name exists
        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(f"Account with name '{name}' already exists")
        if account_id is not None and self.db.account_exists(account_id):
            raise ConflictError(f"Account with ID '{account_id}' already exists")

        new_id = self.db.create_account(
            name=name,
            balance=opening_balance,
            color=color,
            created_at=self.clock.now(),
            account_id=account_id,
        )
        logger.info("Created account: %s - %s", new_id, name)
        return new_id

    def get_account(self, account_id: str) -> Optional[AccountEntity]:
        """Get account by ID.

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(self, account_id: str) -> AccountEntity:
        """Get account by ID or raise NotFoundError."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def update_account(
        self,
        account_id: str,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> AccountEntity:
        """Rename or recolor an account.

        The balance is not editable here; it only moves through
        transactions and transfers.

        Raises:
            NotFoundError: If account not found
            ConflictError: If the new name belongs to another account
        """
        self.require_account(account_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Account name is required")
            # Check for duplicate names (excluding current account)
            for acc in self.db.list_accounts():
                if acc.id != account_id and acc.name == name:
                    raise ConflictError(f"Account with name '{name}' already exists")
        if color is not None and not color.strip():
            raise ValidationError("Account color is required")

        self.db.update_account(
            account_id=account_id, updated_at=self.clock.now(), name=name, color=color
        )
        logger.info("Updated account: %s", account_id)
        return self.require_account(account_id)

    def delete_account(self, account_id: str) -> None:
        """Delete an account.

        Raises:
            NotFoundError: If account not found
            DependencyError: If transactions or transfers still reference it
        """
        self.require_account(account_id)

        transaction_count = self.db.get_account_transaction_count(account_id)
        transfer_count = self.db.get_account_transfer_count(account_id)
        if transaction_count > 0 or transfer_count > 0:
            logger.warning("Refused to delete referenced account %s", account_id)
            raise DependencyError(
                account_delete_blocked(account_id, transaction_count, transfer_count)
            )

        self.db.delete_account(account_id)
        logger.info("Deleted account: %s", account_id)

    def get_total_balance(self) -> Decimal:
        """Sum of all account balances."""
        return self.balances.get_total_balance()
