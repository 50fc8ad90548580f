"""Configuration file management for kakeibo."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from kakeibo.store.ledger import DEFAULT_STORE_PATH


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
    return get_xdg_config_home() / "kakeibo" / "config.toml"


def default_config() -> dict[str, Any]:
    """Get the configuration written by 'kakeibo init'."""
    return {"store_path": str(DEFAULT_STORE_PATH)}


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    A missing config file is not an error; the defaults apply.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return default_config()

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

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_store_path(override: str | Path | None = None, config_path: Path | None = None) -> Path:
    """Resolve the ledger store path.

    Precedence: explicit override, then 'store_path' from the config file,
    then store/data.json in the working directory.

    Args:
        override: Path given on the command line, if any.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Store file path with '~' expanded.
    """
    if override:
        return Path(override).expanduser()

    store_path = load_config(config_path).get("store_path")
    if store_path:
        return Path(store_path).expanduser()

    return DEFAULT_STORE_PATH
