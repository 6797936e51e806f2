"""CSV export domain service."""

import csv
import logging
from pathlib import Path
from typing import Optional, Sequence

from spendtrack.database.base import Database
from spendtrack.domain.entities import Expense

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "description", "amount", "category", "date"]


def expense_to_row(expense: Expense) -> list[str]:
    """Convert an expense to CSV field values."""
    return [
        str(expense.id),
        expense.description,
        str(expense.amount),
        "" if expense.category_id is None else str(expense.category_id),
        expense.date.isoformat(),
    ]


class CSVExportService:
    """Service for exporting expenses to CSV files."""

    def __init__(self, db: Database):
        """Initialize CSV export service.

        Args:
            db: Database instance
        """
        self.db = db

    def export(self, path: str | Path, expenses: Optional[Sequence[Expense]] = None) -> int:
        """Write expenses to a CSV file with a header row.

        Args:
            path: Output file path, replaced if it exists
            expenses: Expenses to write, defaults to all expenses in order

        Returns:
            Number of data rows written

        Raises:
            OSError: If the file cannot be written
        """
        if expenses is None:
            expenses = self.db.list_expenses()

        csv_path = Path(path)
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_COLUMNS)
            for expense in expenses:
                writer.writerow(expense_to_row(expense))

        logger.debug("Exported %d expenses to %s", len(expenses), csv_path)
        return len(expenses)
