"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from spendtrack.domain.entities import Category, Expense


class Database(ABC):
    """Abstract database interface for spendtrack."""

    @abstractmethod
    def connect(self) -> None:
        """Load the database into memory."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release the in-memory state."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Persist the current state."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> bool:
        """Delete a category. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories in insertion order."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        description: str,
        amount: Decimal,
        date: date,
        category_id: Optional[int] = None,
    ) -> int:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> bool:
        """Delete an expense. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_expenses(
        self,
        category_id: Optional[int] = None,
        month: Optional[str] = None,
    ) -> list[Expense]:
        """List expenses in insertion order with optional filters.

        Args:
            category_id: Optional category ID filter
            month: Optional month filter in YYYY-MM format
        """
        pass

    # Spending limit
    @abstractmethod
    def get_limit(self) -> Optional[Decimal]:
        """Get the monthly spending limit, if any."""
        pass

    @abstractmethod
    def set_limit(self, limit: Optional[Decimal]) -> None:
        """Set or clear the monthly spending limit."""
        pass
