"""Database store layer - provides persistence for the application.

This module re-exports the public store API for easy importing.
"""

from spendlog.store.gateway import SqliteGateway, StorageGateway
from spendlog.store.repository import ExpenseRepository
from spendlog.store.schema import get_db_path

__all__ = [
    # Schema
    "get_db_path",
    # Persistence
    "ExpenseRepository",
    "SqliteGateway",
    "StorageGateway",
]
