"""Domain model entities for spendtrack.

These are pure data classes representing business concepts, independent of
the on-disk format. The JSON layer converts to and from them through
spendtrack.database.mappers.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Category:
    """Expense category."""

    id: int
    name: str


@dataclass(frozen=True)
class Expense:
    """Single recorded expense. Immutable once created."""

    id: int
    description: str
    amount: Decimal
    category_id: Optional[int]
    date: date


@dataclass
class Store:
    """Aggregate root holding everything persisted in the data file.

    The next-id counters only ever grow, so ids of deleted entries are not
    handed out again.
    """

    categories: list[Category] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    limit: Optional[Decimal] = None
    next_category_id: int = 1
    next_expense_id: int = 1


class LimitStatus(Enum):
    """Outcome of comparing a total against the spending limit."""

    WITHIN_LIMIT = "within_limit"
    EXCEEDED = "exceeded"


@dataclass(frozen=True)
class LimitReport:
    """Limit check for one month."""

    month: str
    total: Decimal
    limit: Decimal
    status: LimitStatus

    @property
    def remaining(self) -> Decimal:
        """Amount left before the limit; negative once exceeded."""
        return self.limit - self.total


@dataclass(frozen=True)
class SummaryReport:
    """Summary totals prepared for display."""

    month: Optional[str]
    category_id: Optional[int]
    total: Decimal
    count: int
    daily_totals: dict[str, Decimal]
