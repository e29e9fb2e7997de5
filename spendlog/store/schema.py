"""Database schema definition and default locations."""

import os
from pathlib import Path

EXPENSES_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS expenses (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        amount REAL NOT NULL,
        category TEXT NOT NULL,
        note TEXT,
        date TEXT NOT NULL
    )
"""

EXPENSES_DATE_INDEX_SQL = "CREATE INDEX IF NOT EXISTS idx_expenses_date ON expenses(date)"

SCHEMA_STATEMENTS = (EXPENSES_TABLE_SQL, EXPENSES_DATE_INDEX_SQL)


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_db_path() -> Path:
    """Get the default database path (XDG compliant).

    The SPENDLOG_DB environment variable overrides the location.
    """
    override = os.environ.get("SPENDLOG_DB")
    if override:
        return Path(override).expanduser()
    return get_xdg_data_home() / "spendlog" / "spendlog.db"

