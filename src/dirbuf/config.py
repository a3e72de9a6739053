"""Configuration file management for dirbuf."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

import tomli_w

from dirbuf.layout import Signs
from dirbuf.navigator import NavigatorSettings

LOGGER = logging.getLogger(__name__)

# Default configuration file location
CONFIG_FILE = Path.home() / ".dirbuf.toml"

# Default configuration
DEFAULT_CONFIG = {
    "navigation": {
        "show_hidden_files": False,
        "show_size": False,
    },
    "signs": {
        "directory": " ",
        "file": " ",
    },
    "colors": {
        "cwd": "cyan_bold",
        "sign": "magenta",
        "directory": "blue_bold",
        "file": "default",
        "link": "red",
        "size": "yellow",
        "time": "green",
    },
}

# Color name to curses color mapping
COLOR_MAP = {
    "default": ("default", "normal"),
    "blue_bold": ("blue", "bold"),
    "blue": ("blue", "normal"),
    "cyan_bold": ("cyan", "bold"),
    "cyan": ("cyan", "normal"),
    "green_bold": ("green", "bold"),
    "green": ("green", "normal"),
    "magenta": ("magenta", "normal"),
    "gray_dim": ("white", "dim"),
    "yellow": ("yellow", "normal"),
    "white": ("white", "normal"),
    "red_bold": ("red", "bold"),
    "red": ("red", "normal"),
}


def load_config() -> Dict[str, Any]:
    """Load configuration from file or return defaults."""
    if not CONFIG_FILE.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(CONFIG_FILE, "rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as err:
        LOGGER.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, err)
        return copy.deepcopy(DEFAULT_CONFIG)
    # Merge with defaults to ensure all keys exist
    return _merge_config(DEFAULT_CONFIG, config)


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(config, f)


def _merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge user config with defaults, preserving user values."""
    result = copy.deepcopy(default)
    for key, value in user.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value
    return result


def create_default_config() -> bool:
    """Write the default configuration file unless one already exists.

    Returns ``True`` when a file was created.
    """
    if CONFIG_FILE.exists():
        return False
    save_config(DEFAULT_CONFIG)
    return True


def get_style_colors(config: Dict[str, Any] | None = None) -> Dict[str, str]:
    """Get the color name configured for each highlight style."""
    if config is None:
        config = load_config()
    return config.get("colors", DEFAULT_CONFIG["colors"])


def get_navigator_settings(config: Dict[str, Any] | None = None) -> NavigatorSettings:
    """Build navigator settings from the ``navigation`` and ``signs`` tables."""
    if config is None:
        config = load_config()
    navigation = config.get("navigation", {})
    signs = config.get("signs", {})
    default_signs = DEFAULT_CONFIG["signs"]
    return NavigatorSettings(
        show_hidden_files=bool(navigation.get("show_hidden_files", False)),
        show_size=bool(navigation.get("show_size", False)),
        signs=Signs(
            directory=str(signs.get("directory", default_signs["directory"])),
            file=str(signs.get("file", default_signs["file"])),
        ),
    )


__all__ = [
    "COLOR_MAP",
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "create_default_config",
    "get_navigator_settings",
    "get_style_colors",
    "load_config",
    "save_config",
]
