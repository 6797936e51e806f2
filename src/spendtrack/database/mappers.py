"""Mapper functions to convert between domain models and JSON data.

This layer isolates the file format from the domain, so the layout of the
data file can change without touching the services.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from spendtrack.domain import entities as domain
from spendtrack.domain.errors import FormatError


def category_to_dict(category: domain.Category) -> dict[str, Any]:
    """Convert Category entity to a JSON-ready dict."""
    return {"id": category.id, "name": category.name}


def expense_to_dict(expense: domain.Expense) -> dict[str, Any]:
    """Convert Expense entity to a JSON-ready dict."""
    return {
        "id": expense.id,
        "description": expense.description,
        "amount": str(expense.amount),
        "category_id": expense.category_id,
        "date": expense.date.isoformat(),
    }


def store_to_dict(store: domain.Store) -> dict[str, Any]:
    """Convert the whole Store to a JSON-ready dict."""
    return {
        "categories": [category_to_dict(c) for c in store.categories],
        "expenses": [expense_to_dict(e) for e in store.expenses],
        "limit": str(store.limit) if store.limit is not None else None,
        "next_category_id": store.next_category_id,
        "next_expense_id": store.next_expense_id,
    }


def _require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise FormatError(f"Invalid {field_name}: {value!r}")
    return value


def _parse_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise FormatError(f"Invalid {field_name}: {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise FormatError(f"Invalid {field_name}: {value!r}")
    if not amount.is_finite() or amount < 0:
        raise FormatError(f"Invalid {field_name}: {value!r}")
    return amount


def category_from_dict(data: Any) -> domain.Category:
    """Convert a decoded JSON object to a Category entity."""
    if not isinstance(data, dict):
        raise FormatError(f"Category entry must be an object, got {data!r}")
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise FormatError(f"Invalid category name: {name!r}")
    return domain.Category(id=_require_int(data.get("id"), "category id"), name=name)


def expense_from_dict(data: Any) -> domain.Expense:
    """Convert a decoded JSON object to an Expense entity."""
    if not isinstance(data, dict):
        raise FormatError(f"Expense entry must be an object, got {data!r}")

    description = data.get("description")
    if not isinstance(description, str) or not description.strip():
        raise FormatError(f"Invalid expense description: {description!r}")

    category_id = data.get("category_id")
    if category_id is not None:
        category_id = _require_int(category_id, "category_id")

    raw_date = data.get("date")
    try:
        expense_date = date.fromisoformat(raw_date)
    except (TypeError, ValueError):
        raise FormatError(f"Invalid expense date: {raw_date!r}")

    return domain.Expense(
        id=_require_int(data.get("id"), "expense id"),
        description=description,
        amount=_parse_decimal(data.get("amount"), "expense amount"),
        category_id=category_id,
        date=expense_date,
    )


def _next_id(data: dict, key: str, entries: list) -> int:
    # Older files carry no counters; fall back to one past the highest id
    floor = max((entry.id for entry in entries), default=0) + 1
    stored: Optional[Any] = data.get(key)
    if stored is None:
        return floor
    return max(_require_int(stored, key), floor)


def store_from_dict(data: Any) -> domain.Store:
    """Convert decoded JSON data to a Store.

    Raises:
        FormatError: If the data does not match the store layout
    """
    if not isinstance(data, dict):
        raise FormatError("Data file must contain a JSON object")

    raw_categories = data.get("categories", [])
    raw_expenses = data.get("expenses", [])
    if not isinstance(raw_categories, list):
        raise FormatError("'categories' must be a list")
    if not isinstance(raw_expenses, list):
        raise FormatError("'expenses' must be a list")

    categories = [category_from_dict(c) for c in raw_categories]
    expenses = [expense_from_dict(e) for e in raw_expenses]

    for label, entries in (("category", categories), ("expense", expenses)):
        ids = [entry.id for entry in entries]
        if len(ids) != len(set(ids)):
            raise FormatError(f"Duplicate {label} ids in data file")

    raw_limit = data.get("limit")
    limit = _parse_decimal(raw_limit, "limit") if raw_limit is not None else None

    return domain.Store(
        categories=categories,
        expenses=expenses,
        limit=limit,
        next_category_id=_next_id(data, "next_category_id", categories),
        next_expense_id=_next_id(data, "next_expense_id", expenses),
    )
