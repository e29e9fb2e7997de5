"""Storage gateway: the single persistence boundary.

The repository talks to storage only through the StorageGateway protocol,
so any backing store offering execute/query_all can stand in for SQLite.
"""

import logging
import sqlite3
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from spendlog.errors import StorageUnavailable
from spendlog.store.schema import get_db_path

logger = logging.getLogger(__name__)


class StorageGateway(Protocol):
    """Abstract durable table store."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a DDL/DML statement and return the affected row count."""
        ...

    def query_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a query and return every row as a dictionary."""
        ...


class SqliteGateway:
    """StorageGateway backed by a SQLite database file.

    Each call opens its own connection and closes it before returning.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path if db_path is not None else get_db_path()

    def _connect(self) -> sqlite3.Connection:
        """Create a database connection with row factory.

        Returns:
            Database connection with row_factory configured.

        Raises:
            StorageUnavailable: If the database file cannot be opened.
        """
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageUnavailable(f"Cannot open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a statement in its own transaction.

        Args:
            sql: SQL statement.
            params: Positional query parameters.

        Returns:
            Number of rows affected (-1 for DDL).

        Raises:
            StorageUnavailable: If the statement fails.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(sql, tuple(params))
            count = cursor.rowcount
            conn.commit()
            return count
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Statement failed on %s: %s", self.db_path, e)
            raise StorageUnavailable(f"Database write failed: {e}") from e
        finally:
            conn.close()

    def query_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a query and fetch all rows.

        Raises:
            StorageUnavailable: If the query fails.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(sql, tuple(params))
            return [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            logger.error("Query failed on %s: %s", self.db_path, e)
            raise StorageUnavailable(f"Database read failed: {e}") from e
        finally:
            conn.close()
