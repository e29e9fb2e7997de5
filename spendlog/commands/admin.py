"""Admin command for initializing the database and configuration."""

import sys
import tomllib
from pathlib import Path

from rich.markup import escape

from spendlog.commands.common import console
from spendlog.config import create_default_config, get_config_path, load_config, resolve_db_path
from spendlog.errors import StorageUnavailable
from spendlog.store.gateway import SqliteGateway
from spendlog.store.repository import ExpenseRepository
from spendlog.store.schema import get_db_path


def run_full_init(db_path: Path, config_path: Path) -> None:
    """Initialize new database and config."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
    ExpenseRepository(SqliteGateway(db_path)).initialize()
    console.print("[green]✓[/green] Database initialized")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize spendlog database and configuration."""
    config_path = get_config_path()

    try:
        if config_path.exists() and not force:
            # Existing setup: only make sure the schema is current
            db_path = resolve_db_path(load_config(config_path))
            ExpenseRepository(SqliteGateway(db_path)).initialize()
            console.print(f"[yellow]Config already exists: {config_path}[/yellow]")
            console.print(f"[green]✓[/green] Database schema is up to date: {db_path}")
            console.print("[dim]Use 'spendlog init --force' to reset the config file[/dim]")
            return

        run_full_init(get_db_path(), config_path)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error in {config_path}: {escape(str(e))}[/red]", style="bold")
        console.print("[dim]Fix the file or run 'spendlog init --force' to recreate it[/dim]")
        sys.exit(1)
    except StorageUnavailable as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
