"""Configuration file management for houseledger."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from houseledger.domain.errors import ValidationError
from houseledger.domain.params import DEFAULT_PAGE_SIZE, parse_limit
from houseledger.store.schema import get_db_path

DB_PATH_ENV = "HOUSELEDGER_DB"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    db_path: Path
    page_size: int = DEFAULT_PAGE_SIZE
    currency_symbol: str = "$"


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
    return get_xdg_config_home() / "houseledger" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "ledger": {"page_size": DEFAULT_PAGE_SIZE, "currency_symbol": "$"},
        "storage": {"db_path": ""},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ValidationError("config", f"[{name}] must be a table, got {section!r}")
    return section


def get_settings(config_path: Path | None = None) -> Settings:
    """Resolve settings from defaults, the config file and the environment.

    A missing config file is not an error; defaults apply. The HOUSELEDGER_DB
    environment variable takes precedence over the configured database path.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings instance.

    Raises:
        ValidationError: If the config file is not valid TOML, a section is
            not a table, or a value is invalid.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}
    except tomllib.TOMLDecodeError as e:
        raise ValidationError("config", f"{config_path or get_config_path()} is not valid TOML: {e}") from e

    ledger = _section(config, "ledger")
    storage = _section(config, "storage")

    db_path_value = os.environ.get(DB_PATH_ENV) or storage.get("db_path")
    if db_path_value and not isinstance(db_path_value, str):
        raise ValidationError("config", f"storage.db_path must be a string, got {db_path_value!r}")
    db_path = Path(db_path_value).expanduser() if db_path_value else get_db_path()

    return Settings(
        db_path=db_path,
        page_size=parse_limit(ledger.get("page_size")),
        currency_symbol=str(ledger.get("currency_symbol", "$")),
    )
