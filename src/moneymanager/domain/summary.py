"""Summary and dashboard domain service."""

from collections import defaultdict
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Optional, Sequence

from dateutil.relativedelta import relativedelta

from moneymanager.database.base import Database
from moneymanager.domain.category import DEFAULT_ICON
from moneymanager.domain.entities import (
    Category,
    CategorySummary,
    DashboardSummary,
    PeriodKind,
    PeriodPoint,
    Transaction,
    TransactionType,
)
from moneymanager.domain.transaction import TransactionService
from moneymanager.utils.clock import Clock, system_clock

# Number of trailing periods shown in a comparison, current period included
PERIOD_COUNTS = {
    PeriodKind.WEEKLY: 4,
    PeriodKind.MONTHLY: 6,
    PeriodKind.YEARLY: 3,
}

_ONE_MICROSECOND = timedelta(microseconds=1)


def period_bounds(kind: PeriodKind, now: datetime, periods_back: int = 0) -> tuple[datetime, datetime]:
    """Return the inclusive ``(start, end)`` of a calendar period.

    Args:
        kind: Week (Monday to Sunday), calendar month or calendar year
        now: Reference local time
        periods_back: 0 for the period containing ``now``, 1 for the one
            before, and so on

    Returns:
        Start at 00:00:00 and end at 23:59:59.999999 of the last day
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if kind == PeriodKind.WEEKLY:
        start = midnight - timedelta(days=midnight.weekday(), weeks=periods_back)
        step = relativedelta(weeks=1)
    elif kind == PeriodKind.MONTHLY:
        start = midnight.replace(day=1) - relativedelta(months=periods_back)
        step = relativedelta(months=1)
    elif kind == PeriodKind.YEARLY:
        start = midnight.replace(month=1, day=1) - relativedelta(years=periods_back)
        step = relativedelta(years=1)
    else:
        raise ValueError(f"Unknown period kind: {kind!r}")
    return start, start + step - _ONE_MICROSECOND


def period_label(kind: PeriodKind, start: datetime) -> str:
    """Human-readable name of a period, e.g. "Jan 6", "Jan 2024" or "2024"."""
    if kind == PeriodKind.WEEKLY:
        return f"{start:%b} {start.day}"
    if kind == PeriodKind.MONTHLY:
        return start.strftime("%b %Y")
    return str(start.year)


class SummaryService:
    """Service for category breakdowns, period comparisons and dashboards."""

    def __init__(self, db: Database, clock: Clock = system_clock):
        """Initialize summary service.

        Args:
            db: Database instance
            clock: Source of the current period
        """
        self.db = db
        self.clock = clock
        self.transactions = TransactionService(db, clock)

    def get_filtered_transactions(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Transaction]:
        """Get transactions in ``[start, end]``, or all when a bound is missing."""
        if start is None or end is None:
            return self.db.list_transactions()
        return self.db.list_transactions(start=start, end=end)

    def category_summary(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[CategorySummary]:
        """Total and count per category.

        Categories that no longer exist are reported under their raw ID with
        the default icon. The result order is unspecified.
        """
        transactions = self.get_filtered_transactions(start=start, end=end)
        summary_dict = self.aggregate_transactions_by_group(transactions)
        return self.convert_summary_to_results(summary_dict, self.build_category_index())

    def build_category_index(self) -> dict[str, Category]:
        """Map category IDs to categories."""
        return {cat.id: cat for cat in self.db.list_categories()}

    def aggregate_transactions_by_group(
        self, transactions: Sequence[Transaction]
    ) -> dict[str, dict[str, Any]]:
        """Aggregate transactions into per-category groups.

        The group's type is taken from the first transaction seen; a
        category's transactions are assumed to share one type.
        """
        summary_dict: dict[str, dict[str, Any]] = defaultdict(
            lambda: {"type": None, "total": Decimal("0.00"), "count": 0}
        )

        for txn in transactions:
            group = summary_dict[txn.category_id]
            if group["type"] is None:
                group["type"] = txn.type
            group["total"] += txn.amount
            group["count"] += 1

        return summary_dict

    def convert_summary_to_results(
        self,
        summary_dict: dict[str, dict[str, Any]],
        category_index: dict[str, Category],
    ) -> list[CategorySummary]:
        """Convert summary groups into CategorySummary entities."""
        results: list[CategorySummary] = []
        for category_id, data in summary_dict.items():
            category = category_index.get(category_id)
            results.append(
                CategorySummary(
                    category_id=category_id,
                    category_name=category.name if category else category_id,
                    icon=category.icon if category else DEFAULT_ICON,
                    type=data["type"],
                    total_amount=data["total"],
                    count=data["count"],
                )
            )
        return results

    def current_period_range(self, kind: PeriodKind) -> tuple[datetime, datetime]:
        """Bounds of the week, month or year containing now."""
        return period_bounds(kind, self.clock.now())

    def period_comparison(self, kind: PeriodKind) -> list[PeriodPoint]:
        """Income and expense for the trailing periods, oldest first.

        Four weeks, six months or three years, ending with the current
        period.
        """
        kind = PeriodKind(kind)
        now = self.clock.now()
        count = PERIOD_COUNTS[kind]
        bounds = [period_bounds(kind, now, back) for back in range(count - 1, -1, -1)]

        transactions = self.db.list_transactions(start=bounds[0][0], end=bounds[-1][1])
        grouped = self.group_transactions_by_period(transactions, bounds)

        points = []
        for start, end in bounds:
            period_transactions = grouped.get(start, [])
            points.append(
                PeriodPoint(
                    label=period_label(kind, start),
                    start=start,
                    end=end,
                    income=self.calculate_total(period_transactions, TransactionType.INCOME),
                    expense=self.calculate_total(period_transactions, TransactionType.EXPENSE),
                )
            )
        return points

    def group_transactions_by_period(
        self,
        transactions: Sequence[Transaction],
        bounds: Sequence[tuple[datetime, datetime]],
    ) -> dict[datetime, list[Transaction]]:
        """Group transactions by the start of the period they fall in."""
        period_transactions: dict[datetime, list[Transaction]] = defaultdict(list)

        for txn in transactions:
            for start, end in bounds:
                if start <= txn.date_time <= end:
                    period_transactions[start].append(txn)
                    break

        return dict(period_transactions)

    def calculate_total(
        self, transactions: Sequence[Transaction], transaction_type: TransactionType
    ) -> Decimal:
        """Sum amounts of one transaction type."""
        return sum(
            (txn.amount for txn in transactions if txn.type == transaction_type),
            Decimal("0.00"),
        )

    def dashboard_summary(
        self,
        start: datetime,
        end: datetime,
        kind: Optional[PeriodKind] = None,
    ) -> DashboardSummary:
        """Build the dashboard for ``[start, end]``.

        Args:
            start: Inclusive range start
            end: Inclusive range end
            kind: Period kind for the trend series; None for a custom range,
                which has no comparison

        Returns:
            DashboardSummary whose ``net`` is income minus expense
        """
        total_income = self.transactions.get_total_income(start, end)
        total_expense = self.transactions.get_total_expense(start, end)
        comparison = self.period_comparison(kind) if kind is not None else []

        return DashboardSummary(
            start=start,
            end=end,
            total_income=total_income,
            total_expense=total_expense,
            net=total_income - total_expense,
            category_breakdown=tuple(self.category_summary(start, end)),
            period_comparison=tuple(comparison),
        )

    def period_summary(self, kind: PeriodKind) -> DashboardSummary:
        """Dashboard for the current week, month or year."""
        start, end = self.current_period_range(kind)
        return self.dashboard_summary(start, end, kind)

    def weekly_summary(self) -> DashboardSummary:
        """Dashboard for the current week."""
        return self.period_summary(PeriodKind.WEEKLY)

    def monthly_summary(self) -> DashboardSummary:
        """Dashboard for the current month."""
        return self.period_summary(PeriodKind.MONTHLY)

    def yearly_summary(self) -> DashboardSummary:
        """Dashboard for the current year."""
        return self.period_summary(PeriodKind.YEARLY)
