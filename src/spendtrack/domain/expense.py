"""Expense domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from spendtrack.database.base import Database
from spendtrack.domain.category import CategoryService
from spendtrack.domain.entities import Expense
from spendtrack.domain.errors import NotFoundError, ValidationError, expense_not_found


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db
        self.category_service = CategoryService(db)

    def create_expense(
        self,
        description: str,
        amount: Decimal,
        category_id: Optional[int] = None,
        date: Optional[date] = None,
    ) -> int:
        """Create an expense.

        Args:
            description: What the money was spent on
            amount: Non-negative amount
            category_id: Optional category ID
            date: Expense date, defaults to today

        Returns:
            Expense ID

        Raises:
            ValidationError: If description is empty or amount is negative
            NotFoundError: If category doesn't exist
        """
        description = (description or "").strip()
        if not description:
            raise ValidationError("Expense description cannot be empty")

        amount = Decimal(str(amount))
        if not amount.is_finite():
            raise ValidationError(f"Invalid amount: {amount}")
        if amount < 0:
            raise ValidationError(f"Expense amount cannot be negative: {amount}")

        # Verify category if provided
        if category_id is not None:
            self.category_service.require_category(category_id)

        return self.db.create_expense(
            description=description,
            amount=amount,
            date=date if date is not None else _today(),
            category_id=category_id,
        )

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID.

        Args:
            expense_id: Expense ID

        Returns:
            Expense entity or None if not found
        """
        return self.db.get_expense(expense_id)

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If expense doesn't exist
        """
        if not self.db.delete_expense(expense_id):
            raise NotFoundError(expense_not_found(expense_id))

    def list_expenses(
        self,
        category_id: Optional[int] = None,
        month: Optional[str] = None,
    ) -> list[Expense]:
        """List expenses in insertion order.

        Args:
            category_id: Optional category ID to filter by
            month: Optional month (YYYY-MM) to filter by

        Returns:
            List of Expense entities
        """
        return self.db.list_expenses(category_id=category_id, month=month)


def _today() -> date:
    return date.today()
