"""Account balance manager."""

import logging
from decimal import Decimal

from moneymanager.database.base import Database
from moneymanager.domain.errors import NotFoundError, account_not_found
from moneymanager.utils.clock import Clock, system_clock
from moneymanager.utils.money import to_decimal

logger = logging.getLogger(__name__)


class BalanceManager:
    """Applies signed deltas to account balances.

    This is the only writer of ``Account.balance`` after an account is
    created. It does not judge the sign or size of a delta; callers decide
    what a ledger event is worth.
    """

    def __init__(self, db: Database, clock: Clock = system_clock):
        """Initialize balance manager.

        Args:
            db: Database instance
            clock: Source of ``updated_at`` stamps
        """
        self.db = db
        self.clock = clock

    def update_balance(self, account_id: str, delta: Decimal) -> None:
        """Add ``delta`` to an account's balance.

        Joins the caller's unit of work when one is open.

        Raises:
            NotFoundError: If the account does not exist
        """
        delta = to_decimal(delta)
        new_balance = self.db.adjust_account_balance(
            account_id, delta, updated_at=self.clock.now()
        )
        if new_balance is None:
            raise NotFoundError(account_not_found(account_id))
        logger.debug(
            "Updated balance for account %s: %s (change: %s)",
            account_id,
            new_balance,
            delta,
        )

    def get_total_balance(self) -> Decimal:
        """Return the sum of every account balance."""
        return self.db.get_total_balance()
