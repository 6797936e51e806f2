"""Tests for the JSON file database."""

import json
import os
from datetime import date
from decimal import Decimal

import pytest

from spendtrack.database.factories import DATA_PATH_ENV, create_json_database, default_data_path
from spendtrack.database.json_db import JSONDatabase, load_store, save_store
from spendtrack.domain.entities import Category, Expense, Store
from spendtrack.domain.errors import FormatError


def _sample_store() -> Store:
    return Store(
        categories=[Category(id=1, name="Food"), Category(id=3, name="Travel")],
        expenses=[
            Expense(
                id=1,
                description="Lunch, with \"friends\"",
                amount=Decimal("20.50"),
                category_id=1,
                date=date(2024, 3, 5),
            ),
            Expense(
                id=4,
                description="Taxi",
                amount=Decimal("13"),
                category_id=None,
                date=date(2024, 3, 6),
            ),
        ],
        limit=Decimal("250.00"),
        next_category_id=4,
        next_expense_id=5,
    )


def test_load_missing_file_returns_empty_store(data_path):
    """Test that a missing data file is a first run, not an error."""
    store = load_store(data_path)

    assert store == Store()
    assert not data_path.exists()


def test_save_and_load_round_trip(data_path):
    """Test that a saved store loads back unchanged."""
    store = _sample_store()
    save_store(data_path, store)

    assert load_store(data_path) == store


def test_save_load_is_idempotent(data_path):
    """Test that load, save, load yields identical stores and file content."""
    save_store(data_path, _sample_store())
    first_content = data_path.read_text(encoding="utf-8")

    first = load_store(data_path)
    save_store(data_path, first)
    second = load_store(data_path)

    assert first == second
    assert data_path.read_text(encoding="utf-8") == first_content


def test_save_creates_parent_directory(tmp_path):
    """Test that missing parent directories are created."""
    path = tmp_path / "nested" / "dir" / "data.json"
    save_store(path, Store())

    assert path.exists()


def test_save_replaces_previous_content(data_path):
    """Test that save fully replaces the previous state."""
    save_store(data_path, _sample_store())
    save_store(data_path, Store())

    assert load_store(data_path) == Store()


def test_save_leaves_no_temp_files(data_path):
    """Test that the temporary file is moved into place."""
    save_store(data_path, _sample_store())

    assert os.listdir(data_path.parent) == [data_path.name]


def test_save_failure_keeps_old_content(data_path, monkeypatch):
    """Test that a failed save does not touch the existing file."""
    save_store(data_path, _sample_store())
    before = data_path.read_text(encoding="utf-8")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("spendtrack.database.json_db.os.replace", fail_replace)
    with pytest.raises(OSError):
        save_store(data_path, Store())

    assert data_path.read_text(encoding="utf-8") == before
    assert os.listdir(data_path.parent) == [data_path.name]


def test_file_layout(data_path):
    """Test the JSON layout written to disk."""
    save_store(data_path, _sample_store())
    data = json.loads(data_path.read_text(encoding="utf-8"))

    assert set(data) == {"categories", "expenses", "limit", "next_category_id", "next_expense_id"}
    assert data["categories"][0] == {"id": 1, "name": "Food"}
    assert data["expenses"][1] == {
        "id": 4,
        "description": "Taxi",
        "amount": "13",
        "category_id": None,
        "date": "2024-03-06",
    }
    assert data["limit"] == "250.00"


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"categories": {}}',
        '{"expenses": [{"id": 1}]}',
        '{"expenses": [{"id": 1, "description": "x", "amount": "abc", "date": "2024-01-01"}]}',
        '{"expenses": [{"id": 1, "description": "x", "amount": "1", "date": "soon"}]}',
        '{"categories": [{"id": 1, "name": "A"}, {"id": 1, "name": "B"}]}',
        '{"limit": true}',
    ],
)
def test_load_corrupt_file(data_path, content):
    """Test that invalid content raises FormatError."""
    data_path.write_text(content, encoding="utf-8")

    with pytest.raises(FormatError):
        load_store(data_path)


def test_load_invalid_encoding(data_path):
    """Test that undecodable bytes raise FormatError."""
    data_path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(FormatError):
        load_store(data_path)


def test_load_unreadable_path(tmp_path):
    """Test that a path that cannot be read raises OSError."""
    with pytest.raises(OSError):
        load_store(tmp_path)


def test_load_without_counters(data_path):
    """Test that missing id counters are derived from existing ids."""
    data_path.write_text(
        json.dumps(
            {
                "categories": [{"id": 2, "name": "Food"}],
                "expenses": [
                    {"id": 7, "description": "Lunch", "amount": 20.5, "date": "2024-03-05"}
                ],
                "limit": 100,
            }
        ),
        encoding="utf-8",
    )

    store = load_store(data_path)

    assert store.next_category_id == 3
    assert store.next_expense_id == 8
    assert store.expenses[0].amount == Decimal("20.5")
    assert store.expenses[0].category_id is None
    assert store.limit == Decimal("100")


def test_deleted_ids_not_reused_after_reload(data_path):
    """Test that id counters survive a save/load cycle."""
    db = JSONDatabase(data_path)
    db.connect()
    db.create_expense(description="A", amount=Decimal("1"), date=date(2024, 1, 1))
    second = db.create_expense(description="B", amount=Decimal("1"), date=date(2024, 1, 1))
    db.delete_expense(second)
    db.commit()

    reloaded = JSONDatabase(data_path)
    reloaded.connect()
    third = reloaded.create_expense(description="C", amount=Decimal("1"), date=date(2024, 1, 1))

    assert third == second + 1


def test_database_requires_connect(data_path):
    """Test that using the database before connect() fails loudly."""
    db = JSONDatabase(data_path)
    with pytest.raises(RuntimeError):
        db.list_expenses()


def test_disconnect_discards_uncommitted_changes(data_path):
    """Test that changes are only persisted by commit()."""
    db = JSONDatabase(data_path)
    db.connect()
    db.create_category("Food")
    db.disconnect()

    db.connect()
    assert db.list_categories() == []


def test_factory_uses_explicit_path(tmp_path):
    """Test that an explicit path wins."""
    db = create_json_database(data_path=str(tmp_path / "x.json"))
    assert db.path == tmp_path / "x.json"


def test_factory_uses_environment(tmp_path, monkeypatch):
    """Test that the environment variable is used when no path is given."""
    monkeypatch.setenv(DATA_PATH_ENV, str(tmp_path / "env.json"))
    db = create_json_database()
    assert db.path == tmp_path / "env.json"


def test_factory_default_path(monkeypatch):
    """Test the default location under the home directory."""
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    db = create_json_database()
    assert db.path == default_data_path()
    assert db.path.name == "data.json"


def test_load_negative_amount_and_limit(data_path):
    """Test that a file with a negative amount or limit is rejected."""
    data_path.write_text(
        json.dumps(
            {
                "expenses": [
                    {"id": 1, "description": "x", "amount": "-5", "date": "2024-01-01"}
                ],
                "limit": "-3",
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(FormatError):
        load_store(data_path)
