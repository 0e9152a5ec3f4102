#!/usr/bin/env python3
"""
Phylang Configuration
=====================
Named cultural presets, read from the ``presets`` section of app.yaml.

Usage:
    from phylang.config import get_preset, list_presets

    profile, geography = get_preset("mountain_warriors")
    for name, info in list_presets().items():
        print(name, info["description"])
"""

from typing import Tuple

from .culture import CulturalProfile, Geography
from .errors import ConfigError
from .settings import get_setting


# =============================================================================
# Cultural Presets
# =============================================================================

def _presets() -> dict:
    presets = get_setting('presets', {}) or {}
    if not isinstance(presets, dict):
        raise ConfigError("presets must be a mapping in app.yaml")
    return presets


def get_preset(name: str) -> Tuple[CulturalProfile, Geography]:
    """
    Resolve a preset name to a profile and geography.

    Args:
        name: Preset name (e.g., "coastal_folk")

    Returns:
        (CulturalProfile, Geography)

    Raises:
        ValueError: If the preset name is not found
    """
    presets = _presets()
    preset = presets.get(name)
    if preset is None:
        available = ', '.join(sorted(presets.keys()))
        raise ValueError(
            f"Unknown preset '{name}'. "
            f"Available presets: {available}"
        )

    traits = preset.get('traits')
    geography = preset.get('geography')
    if traits is None or geography is None:
        raise ConfigError(f"presets.{name} must set traits and geography")
    return CulturalProfile.from_sequence(traits), Geography.parse(geography)


def list_presets() -> dict:
    """List all available presets with descriptions."""
    return {
        name: {
            "traits": list(p.get("traits", [])),
            "geography": p.get("geography"),
            "description": p.get("description", ""),
        }
        for name, p in _presets().items()
    }


def default_preset() -> str:
    return get_setting('defaults.preset', 'plains_herders')


def default_seed() -> int:
    return int(get_setting('defaults.seed', 0))


__all__ = [
    "get_preset",
    "list_presets",
    "default_preset",
    "default_seed",
]
