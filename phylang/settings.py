#!/usr/bin/env python3
"""
Settings loader for Phylang.

app.yaml is read once. Lookups take dotted paths ("naming.thresholds"), and
list-valued settings can be fetched with their element type checked, since
YAML 1.1 quietly turns bare words such as ``on`` or ``no`` into booleans.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Tuple

import yaml

from .errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
DATA_DIR = PACKAGE_ROOT / "data"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{APP_CONFIG_PATH.name} must contain a mapping at the top level")
    return data


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def require_setting(path: str) -> Any:
    """Like get_setting, but a missing key is a configuration error."""
    value = get_setting(path)
    if value is None:
        raise ConfigError(f"{path} must be set in app.yaml")
    return value


def get_string_list(path: str, default: Tuple[str, ...] = ()) -> Tuple[str, ...]:
    """
    Get a list of strings by dotted path.

    Raises:
        ConfigError: If the setting is not a list, or an entry is not a
            string (quote words like "on" and "no" in app.yaml)
    """
    value = get_setting(path)
    if value is None:
        return tuple(default)
    if not isinstance(value, list):
        raise ConfigError(f"{path} must be a list in app.yaml")
    for i, entry in enumerate(value):
        if not isinstance(entry, str):
            raise ConfigError(f"{path}[{i}] must be a string, got {entry!r}")
    return tuple(value)


__all__ = [
    "load_app_config",
    "get_setting",
    "require_setting",
    "get_string_list",
    "PACKAGE_ROOT",
    "CONFIG_DIR",
    "DATA_DIR",
    "APP_CONFIG_PATH",
]
