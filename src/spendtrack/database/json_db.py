"""JSON file implementation of the database interface."""

import json
import logging
import os
import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional

from spendtrack.database.base import Database
from spendtrack.database.mappers import store_from_dict, store_to_dict
from spendtrack.domain.entities import Category, Expense, Store
from spendtrack.domain.errors import FormatError

logger = logging.getLogger(__name__)


def load_store(path: str | Path) -> Store:
    """Load a Store from a JSON data file.

    A missing file is a first run and yields an empty Store.

    Raises:
        OSError: If the file exists but cannot be read
        FormatError: If the file content is not valid store data
    """
    target = Path(path)
    if not target.exists():
        logger.debug("Data file %s does not exist, starting with an empty store", target)
        return Store()

    with target.open("rb") as handle:
        raw = handle.read()

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FormatError(f"Data file {target} is not valid JSON: {e}") from e

    store = store_from_dict(data)
    logger.debug(
        "Loaded %d expenses and %d categories from %s",
        len(store.expenses),
        len(store.categories),
        target,
    )
    return store


def save_store(path: str | Path, store: Store) -> None:
    """Write the whole Store to a JSON data file.

    The content goes to a temporary file in the same directory which then
    replaces the target, so the file holds either the old or the new state.

    Raises:
        OSError: If the file cannot be written
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(store_to_dict(store), indent=2)

    fd, tmp_path = tempfile.mkstemp(prefix=".spendtrack_", suffix=".json", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
            handle.write("\n")
        os.replace(tmp_path, target)
    except OSError:
        # Clean up temp file if something goes wrong
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        raise
    logger.debug("Saved %d expenses to %s", len(store.expenses), target)


class JSONDatabase(Database):
    """Database backed by a single JSON file, held in memory between
    connect() and commit()."""

    def __init__(self, path: str | Path):
        """Initialize JSON database.

        Args:
            path: Path to the JSON data file
        """
        self.path = Path(path)
        self._store: Optional[Store] = None

    @property
    def store(self) -> Store:
        """Loaded store; raises RuntimeError before connect()."""
        if self._store is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._store

    def connect(self) -> None:
        """Load the data file."""
        self._store = load_store(self.path)

    def disconnect(self) -> None:
        """Drop the in-memory store without saving."""
        self._store = None

    def commit(self) -> None:
        """Write the in-memory store back to the data file."""
        save_store(self.path, self.store)

    # Category operations
    def create_category(self, name: str) -> int:
        """Create a category. Returns category ID."""
        store = self.store
        category = Category(id=store.next_category_id, name=name)
        store.categories.append(category)
        store.next_category_id += 1
        return category.id

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        for category in self.store.categories:
            if category.id == category_id:
                return category
        return None

    def delete_category(self, category_id: int) -> bool:
        """Delete a category, leaving expenses that reference it untouched."""
        store = self.store
        remaining = [c for c in store.categories if c.id != category_id]
        if len(remaining) == len(store.categories):
            return False
        store.categories = remaining
        return True

    def list_categories(self) -> list[Category]:
        """List all categories in insertion order."""
        return list(self.store.categories)

    # Expense operations
    def create_expense(
        self,
        description: str,
        amount: Decimal,
        date: date,
        category_id: Optional[int] = None,
    ) -> int:
        """Create an expense. Returns expense ID."""
        store = self.store
        expense = Expense(
            id=store.next_expense_id,
            description=description,
            amount=amount,
            category_id=category_id,
            date=date,
        )
        store.expenses.append(expense)
        store.next_expense_id += 1
        return expense.id

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        for expense in self.store.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def delete_expense(self, expense_id: int) -> bool:
        """Delete an expense."""
        store = self.store
        remaining = [e for e in store.expenses if e.id != expense_id]
        if len(remaining) == len(store.expenses):
            return False
        store.expenses = remaining
        return True

    def list_expenses(
        self,
        category_id: Optional[int] = None,
        month: Optional[str] = None,
    ) -> list[Expense]:
        """List expenses in insertion order with optional filters."""
        expenses = self.store.expenses
        if category_id is not None:
            expenses = [e for e in expenses if e.category_id == category_id]
        if month is not None:
            expenses = [e for e in expenses if e.date.strftime("%Y-%m") == month]
        return list(expenses)

    # Spending limit
    def get_limit(self) -> Optional[Decimal]:
        """Get the monthly spending limit, if any."""
        return self.store.limit

    def set_limit(self, limit: Optional[Decimal]) -> None:
        """Set or clear the monthly spending limit."""
        self.store.limit = limit
