"""Shared pytest fixtures for spendtrack tests."""

from datetime import date
from decimal import Decimal

import pytest

from spendtrack.database.factories import create_json_database
from spendtrack.domain.category import CategoryService
from spendtrack.domain.csv_export import CSVExportService
from spendtrack.domain.expense import ExpenseService
from spendtrack.domain.limit import LimitService
from spendtrack.domain.summary import SummaryService


@pytest.fixture
def data_path(tmp_path):
    """Path to a data file that does not exist yet."""
    return tmp_path / "data.json"


@pytest.fixture
def temp_db(data_path):
    """Create a connected database backed by a temporary data file."""
    db = create_json_database(data_path=str(data_path))
    db.connect()

    yield db

    db.disconnect()


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def limit_service(temp_db):
    """Create a LimitService with a temporary database."""
    return LimitService(temp_db)


@pytest.fixture
def csv_export_service(temp_db):
    """Create a CSVExportService with a temporary database."""
    return CSVExportService(temp_db)


@pytest.fixture
def sample_categories(category_service):
    """Create a few categories and return their IDs by name."""
    return {
        name: category_service.create_category(name)
        for name in ("Food", "Transport", "Housing")
    }


@pytest.fixture
def sample_expenses(expense_service, sample_categories):
    """Create expenses spread over two months and return their IDs."""
    food = sample_categories["Food"]
    transport = sample_categories["Transport"]
    rows = [
        ("Groceries", Decimal("45.20"), food, date(2024, 3, 2)),
        ("Bus pass", Decimal("30.00"), transport, date(2024, 3, 5)),
        ("Lunch", Decimal("12.50"), food, date(2024, 3, 5)),
        ("Dinner", Decimal("40.00"), food, date(2024, 4, 1)),
        ("Book", Decimal("15.99"), None, date(2024, 4, 10)),
    ]
    return [
        expense_service.create_expense(
            description=description,
            amount=amount,
            category_id=category_id,
            date=expense_date,
        )
        for description, amount, category_id, expense_date in rows
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
