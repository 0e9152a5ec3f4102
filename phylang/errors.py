#!/usr/bin/env python3
"""
Phylang Errors
==============
Every failure the library reports is one of these types. They subclass
ValueError where the input itself is at fault, so callers that only catch
ValueError keep working.
"""


class PhylangError(Exception):
    """Base class for all Phylang errors."""


class InvalidProfileError(PhylangError, ValueError):
    """A cultural trait score is missing, non-numeric, or outside [1.0, 5.0]."""

    def __init__(self, trait: str, value, message: str = None):
        self.trait = trait
        self.value = value
        super().__init__(message or f"{trait} must be within [1.0, 5.0], got {value!r}")


class UnknownGeographyError(PhylangError, ValueError):
    """A geography name could not be matched to a known category."""

    def __init__(self, name, available=()):
        self.name = name
        self.available = tuple(available)
        hint = f" Available: {', '.join(self.available)}" if self.available else ""
        super().__init__(f"Unknown geography '{name}'.{hint}")


class UnknownOptionError(PhylangError, ValueError):
    """A name in a request context (place type, characteristic) is not recognised."""

    def __init__(self, kind: str, name, available=()):
        self.kind = kind
        self.name = name
        self.available = tuple(available)
        hint = f" Available: {', '.join(self.available)}" if self.available else ""
        super().__init__(f"Unknown {kind} '{name}'.{hint}")


class ConfigError(PhylangError, ValueError):
    """A packaged YAML table or app.yaml is missing a required key."""


__all__ = [
    "PhylangError",
    "InvalidProfileError",
    "UnknownGeographyError",
    "UnknownOptionError",
    "ConfigError",
]
