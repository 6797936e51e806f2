"""Summary domain service."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional

from spendtrack.database.base import Database
from spendtrack.domain.entities import Expense, SummaryReport


class SummaryService:
    """Service for aggregating expense amounts by month and category."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_filtered_expenses(
        self,
        month: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> list[Expense]:
        """Get expenses matching summary criteria (month AND category)."""
        return self.db.list_expenses(category_id=category_id, month=month)

    def summarize(
        self,
        month: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> Decimal:
        """Total amount spent.

        Args:
            month: Optional month in YYYY-MM format
            category_id: Optional category ID

        Returns:
            Sum of matching amounts, Decimal("0") when nothing matches
        """
        expenses = self.get_filtered_expenses(month=month, category_id=category_id)
        return sum((e.amount for e in expenses), Decimal("0"))

    def daily_breakdown(
        self,
        month: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> dict[str, Decimal]:
        """Totals per day (YYYY-MM-DD), ordered by day."""
        expenses = self.get_filtered_expenses(month=month, category_id=category_id)
        return self._group(expenses, lambda e: e.date.isoformat())

    def monthly_breakdown(self, category_id: Optional[int] = None) -> dict[str, Decimal]:
        """Totals per month (YYYY-MM), ordered by month."""
        expenses = self.get_filtered_expenses(category_id=category_id)
        return self._group(expenses, lambda e: e.date.strftime("%Y-%m"))

    def category_breakdown(self, month: Optional[str] = None) -> dict[Optional[int], Decimal]:
        """Totals per category ID, in order of first appearance.

        Uncategorized expenses are grouped under None.
        """
        totals: dict[Optional[int], Decimal] = {}
        for expense in self.get_filtered_expenses(month=month):
            totals[expense.category_id] = (
                totals.get(expense.category_id, Decimal("0")) + expense.amount
            )
        return totals

    def build_summary_report(
        self,
        month: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> SummaryReport:
        """Build a summary report for formatting."""
        expenses = self.get_filtered_expenses(month=month, category_id=category_id)
        return SummaryReport(
            month=month,
            category_id=category_id,
            total=sum((e.amount for e in expenses), Decimal("0")),
            count=len(expenses),
            daily_totals=self._group(expenses, lambda e: e.date.isoformat()),
        )

    @staticmethod
    def _group(expenses, key) -> dict[str, Decimal]:
        grouped: defaultdict[str, Decimal] = defaultdict(lambda: Decimal("0"))
        for expense in expenses:
            grouped[key(expense)] += expense.amount
        return dict(sorted(grouped.items()))
