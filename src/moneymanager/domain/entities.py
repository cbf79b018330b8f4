"""Domain model entities for moneymanager.

These are pure data classes representing business concepts, independent of
database schema. Money is always a Decimal here; the storage layer keeps it
in integer cents.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Division(str, Enum):
    """Context a transaction belongs to. Used only for filtering."""

    OFFICE = "OFFICE"
    PERSONAL = "PERSONAL"


class PeriodKind(str, Enum):
    """Calendar period used by dashboard comparisons."""

    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


@dataclass(frozen=True)
class Account:
    """Account domain entity with its running balance."""

    id: str
    name: str
    balance: Decimal
    color: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: str
    name: str
    icon: str
    type: TransactionType


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``amount`` is always positive; the balance effect is derived from ``type``.
    """

    id: str
    type: TransactionType
    amount: Decimal
    description: str
    category_id: str
    division: Division
    account_id: str
    date_time: datetime
    created_at: datetime
    updated_at: datetime
    version: int = 1

    @property
    def signed_amount(self) -> Decimal:
        """Balance delta this transaction applies to its account."""
        if self.type == TransactionType.INCOME:
            return self.amount
        return -self.amount


@dataclass(frozen=True)
class Transfer:
    """Transfer between two distinct accounts."""

    id: str
    from_account_id: str
    to_account_id: str
    amount: Decimal
    description: str | None
    date_time: datetime
    created_at: datetime


@dataclass(frozen=True)
class CategorySummary:
    """Aggregated totals for a single category."""

    category_id: str
    category_name: str
    icon: str
    type: TransactionType
    total_amount: Decimal
    count: int


@dataclass(frozen=True)
class PeriodPoint:
    """Income and expense totals for one calendar period."""

    label: str
    start: datetime
    end: datetime
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Dashboard report over a date range.

    ``net`` is income minus expense for the range. It is not an account
    balance.
    """

    start: datetime | None
    end: datetime | None
    total_income: Decimal
    total_expense: Decimal
    net: Decimal
    category_breakdown: tuple[CategorySummary, ...] = field(default_factory=tuple)
    period_comparison: tuple[PeriodPoint, ...] = field(default_factory=tuple)
