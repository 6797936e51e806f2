"""Spending limit checks."""

from datetime import date
from decimal import Decimal
from typing import Optional

from spendtrack.database.base import Database
from spendtrack.domain.entities import LimitReport, LimitStatus
from spendtrack.domain.errors import ValidationError
from spendtrack.domain.summary import SummaryService


def check_limit(total: Decimal, limit: Decimal) -> LimitStatus:
    """Compare a total against a limit. EXCEEDED only when strictly above."""
    if total > limit:
        return LimitStatus.EXCEEDED
    return LimitStatus.WITHIN_LIMIT


def current_month() -> str:
    """Return the current month as YYYY-MM."""
    return date.today().strftime("%Y-%m")


class LimitService:
    """Service for the monthly spending limit."""

    def __init__(self, db: Database):
        """Initialize limit service.

        Args:
            db: Database instance
        """
        self.db = db
        self.summary_service = SummaryService(db)

    def get_limit(self) -> Optional[Decimal]:
        """Get the configured monthly limit, or None."""
        return self.db.get_limit()

    def set_limit(self, amount: Decimal) -> Optional[Decimal]:
        """Set the monthly limit. Zero clears it.

        Args:
            amount: New limit

        Returns:
            The stored limit, None if cleared

        Raises:
            ValidationError: If amount is negative
        """
        amount = Decimal(str(amount))
        if not amount.is_finite():
            raise ValidationError(f"Invalid limit: {amount}")
        if amount < 0:
            raise ValidationError(f"Spending limit cannot be negative: {amount}")

        limit = amount if amount > 0 else None
        self.db.set_limit(limit)
        return limit

    def check_month(self, month: Optional[str] = None) -> Optional[LimitReport]:
        """Check a month's spending against the limit.

        Args:
            month: Month in YYYY-MM format, defaults to the current month

        Returns:
            LimitReport, or None when no limit is configured
        """
        limit = self.get_limit()
        if limit is None:
            return None

        month = month or current_month()
        total = self.summary_service.summarize(month=month)
        return LimitReport(
            month=month,
            total=total,
            limit=limit,
            status=check_limit(total, limit),
        )
