"""Configuration file management for spendlog."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from spendlog.domain.models import FilterMode
from spendlog.store.schema import get_db_path

DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {"db_path": ""},
    "display": {"currency_symbol": "$", "default_filter": FilterMode.ALL.value},
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "spendlog" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(DEFAULT_CONFIG, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, filling in defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary. Defaults are returned if the file is missing.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config: dict[str, Any] = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}

    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        loaded = tomllib.load(f)

    for section, values in loaded.items():
        if isinstance(values, dict):
            config.setdefault(section, {}).update(values)
        else:
            config[section] = values

    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def resolve_db_path(config: dict[str, Any]) -> Path:
    """Get the database path, honouring SPENDLOG_DB and then the config file."""
    if os.environ.get("SPENDLOG_DB"):
        return get_db_path()

    configured = config.get("storage", {}).get("db_path")
    if configured:
        return Path(configured).expanduser()
    return get_db_path()


def currency_symbol(config: dict[str, Any]) -> str:
    return str(config.get("display", {}).get("currency_symbol", "$"))


def default_filter(config: dict[str, Any]) -> FilterMode:
    return FilterMode.parse(config.get("display", {}).get("default_filter"))
