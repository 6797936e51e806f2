"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from spendtrack.database.json_db import JSONDatabase

DATA_PATH_ENV = "SPENDTRACK_DATA_PATH"


def default_data_path() -> Path:
    """Return the default data file location (~/.spendtrack/data.json)."""
    return Path.home() / ".spendtrack" / "data.json"


def create_json_database(data_path: Optional[str] = None) -> JSONDatabase:
    """Create a JSON file database instance.

    Args:
        data_path: Path to the JSON data file. If None, checks SPENDTRACK_DATA_PATH
            environment variable, then defaults to ~/.spendtrack/data.json

    Returns:
        JSONDatabase instance (not yet connected)
    """
    if data_path is None:
        # Check environment variable
        data_path = os.environ.get(DATA_PATH_ENV)

    if data_path is None:
        # Parent directory is created on first save
        return JSONDatabase(default_data_path())

    return JSONDatabase(Path(data_path).expanduser())
