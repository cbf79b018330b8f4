"""Transfer domain service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from moneymanager.database.base import Database
from moneymanager.domain.balance import BalanceManager
from moneymanager.domain.entities import Transfer as TransferEntity
from moneymanager.domain.errors import (
    InvalidTransferError,
    NotFoundError,
    ValidationError,
    account_not_found,
    same_account_transfer,
    transfer_not_found,
)
from moneymanager.utils.clock import Clock, system_clock
from moneymanager.utils.money import require_positive

logger = logging.getLogger(__name__)


class TransferService:
    """Service for moving money between two accounts.

    Transfers are never edited. Unlike transactions they can be deleted at
    any age.
    """

    def __init__(
        self,
        db: Database,
        clock: Clock = system_clock,
        balances: Optional[BalanceManager] = None,
    ):
        """Initialize transfer service.

        Args:
            db: Database instance
            clock: Source of timestamps
            balances: Balance manager; one sharing ``db`` and ``clock`` is
                created if None
        """
        self.db = db
        self.clock = clock
        self.balances = balances or BalanceManager(db, clock)

    def create_transfer(
        self,
        from_account_id: str,
        to_account_id: str,
        amount: Decimal | int | str,
        description: Optional[str],
        date_time: datetime,
    ) -> TransferEntity:
        """Create a transfer and move its amount between the accounts.

        Returns:
            The stored transfer

        Raises:
            InvalidTransferError: If both accounts are the same
            ValidationError: If the amount or date is malformed
            NotFoundError: If either account doesn't exist
        """
        if from_account_id == to_account_id:
            logger.warning("Refused transfer from account %s to itself", from_account_id)
            raise InvalidTransferError(same_account_transfer(from_account_id))
        amount = require_positive(amount)
        if not isinstance(date_time, datetime):
            raise ValidationError(f"Date and time is required, got {date_time!r}")

        with self.db.atomic():
            # Verify accounts exist before any write
            for account_id in (from_account_id, to_account_id):
                if not self.db.account_exists(account_id):
                    raise NotFoundError(account_not_found(account_id))

            transfer_id = self.db.create_transfer(
                from_account_id=from_account_id,
                to_account_id=to_account_id,
                amount=amount,
                description=description,
                date_time=date_time,
                created_at=self.clock.now(),
            )
            self.balances.update_balance(from_account_id, -amount)
            self.balances.update_balance(to_account_id, amount)

        logger.info(
            "Created transfer: %s - %s from %s to %s",
            transfer_id,
            amount,
            from_account_id,
            to_account_id,
        )
        return self.require_transfer(transfer_id)

    def get_transfer(self, transfer_id: str) -> Optional[TransferEntity]:
        """Get transfer by ID."""
        return self.db.get_transfer(transfer_id)

    def require_transfer(self, transfer_id: str) -> TransferEntity:
        """Get transfer by ID or raise NotFoundError."""
        transfer = self.db.get_transfer(transfer_id)
        if transfer is None:
            raise NotFoundError(transfer_not_found(transfer_id))
        return transfer

    def delete_transfer(self, transfer_id: str) -> None:
        """Delete a transfer and move its amount back.

        Raises:
            NotFoundError: If transfer doesn't exist
        """
        with self.db.atomic():
            transfer = self.require_transfer(transfer_id)
            self.balances.update_balance(transfer.from_account_id, transfer.amount)
            self.balances.update_balance(transfer.to_account_id, -transfer.amount)
            self.db.delete_transfer(transfer_id)

        logger.info("Deleted transfer: %s", transfer_id)

    def list_transfers(self) -> list[TransferEntity]:
        """List all transfers, newest first."""
        return self.db.list_transfers()

    def list_transfers_by_date_range(
        self, start: datetime, end: datetime
    ) -> list[TransferEntity]:
        """List transfers whose ``date_time`` falls in ``[start, end]``, newest first."""
        return self.db.list_transfers(start=start, end=end)
