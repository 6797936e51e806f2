"""Database layer for spendtrack application."""

from spendtrack.database.base import Database
from spendtrack.database.json_db import JSONDatabase, load_store, save_store
from spendtrack.database.factories import create_json_database

__all__ = ["Database", "JSONDatabase", "load_store", "save_store", "create_json_database"]
