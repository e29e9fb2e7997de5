"""Helpers shared by the CLI commands."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from spendlog.config import default_filter, load_config, resolve_db_path
from spendlog.session import ExpenseSession
from spendlog.store.gateway import SqliteGateway
from spendlog.store.repository import ExpenseRepository

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Send log records through rich (WARNING by default, DEBUG when verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def open_session(config: dict[str, Any] | None = None) -> ExpenseSession:
    """Open the configured database and load all expenses.

    Raises:
        StorageUnavailable: If the database cannot be opened.
    """
    if config is None:
        config = load_config()

    repository = ExpenseRepository(SqliteGateway(resolve_db_path(config)))
    session = ExpenseSession(repository, filter_mode=default_filter(config))
    session.open()
    return session
