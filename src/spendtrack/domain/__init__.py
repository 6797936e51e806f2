"""Domain layer for spendtrack application.

Services live in their own modules (spendtrack.domain.category, ...) and are
imported from there; only entities and errors are re-exported here because
the database layer depends on them.
"""

from spendtrack.domain.entities import (
    Category,
    Expense,
    LimitReport,
    LimitStatus,
    Store,
    SummaryReport,
)
from spendtrack.domain.errors import (
    DomainError,
    FormatError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "Category",
    "Expense",
    "LimitReport",
    "LimitStatus",
    "Store",
    "SummaryReport",
    "DomainError",
    "FormatError",
    "NotFoundError",
    "ValidationError",
]
