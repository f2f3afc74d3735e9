"""Sweet Shop configuration management.

Handles global (~/.config/sweetshop/) and local (.sweetshop/) configuration.
"""

from pathlib import Path
from typing import Any

import yaml

from sweetshop.utils import deep_merge

# Default configuration values
DEFAULT_CONFIG = {
    "version": "0.1.0",
    "shop": {
        "name": "Sweet Shop",
        "seed_sample_data": True,
    },
    "inventory": {
        "start_id": 1001,
    },
    "display": {
        "currency": "₹",
    },
    "logging": {
        "enabled": True,
        "dir": ".sweetshop/logs",
    },
}


def get_global_config_dir() -> Path:
    """Get the global configuration directory path."""
    return Path.home() / ".config" / "sweetshop"


def get_local_config_dir() -> Path:
    """Get the local configuration directory path (current directory)."""
    return Path.cwd() / ".sweetshop"


def ensure_global_config(force: bool = False) -> Path:
    """Ensure the global configuration directory exists with defaults.

    Creates ~/.config/sweetshop/config.yaml if it doesn't exist.

    Args:
        force: Rewrite the defaults over an existing file

    Returns:
        Path to the global config directory
    """
    global_dir = get_global_config_dir()
    _ensure_config_file(global_dir / "config.yaml", force)
    return global_dir


def ensure_local_config(force: bool = False) -> Path:
    """Ensure .sweetshop/config.yaml exists in the current directory.

    Args:
        force: Rewrite the defaults over an existing file

    Returns:
        Path to the local config directory
    """
    local_dir = get_local_config_dir()
    _ensure_config_file(local_dir / "config.yaml", force)
    return local_dir


def _ensure_config_file(config_file: Path, force: bool) -> None:
    if config_file.exists() and not force:
        return
    config_file.parent.mkdir(parents=True, exist_ok=True)
    _write_default_config(config_file)


def _write_default_config(config_path: Path) -> None:
    """Write default configuration to file."""
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(
            DEFAULT_CONFIG,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )


def _read_config_file(config_file: Path) -> dict[str, Any]:
    with open(config_file, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config() -> dict[str, Any]:
    """Load merged configuration (global + local).

    Priority (highest first):
    1. Local config (.sweetshop/config.yaml)
    2. Global config (~/.config/sweetshop/config.yaml)
    3. Default values

    Returns:
        Merged configuration dictionary
    """
    config = deep_merge(DEFAULT_CONFIG, {})

    global_config_file = get_global_config_dir() / "config.yaml"
    if global_config_file.exists():
        config = deep_merge(config, _read_config_file(global_config_file))

    # Local config overrides global
    local_config_file = get_local_config_dir() / "config.yaml"
    if local_config_file.exists():
        config = deep_merge(config, _read_config_file(local_config_file))

    return config


def get_setting(config: dict[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Look up a nested setting by dotted key.

    Args:
        config: Configuration dictionary
        dotted_key: Key path such as "display.currency"
        default: Returned when any part of the path is missing

    Returns:
        The setting value or default
    """
    node: Any = config
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node
