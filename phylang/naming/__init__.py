#!/usr/bin/env python3
"""
Naming System
=============
Personal names, place names and epithets composed from the language's own
words.

Usage:
    from phylang import new_language, CulturalProfile, Geography
    from phylang.naming import PersonalNameContext, PlaceNameContext, PlaceType

    lang = new_language(CulturalProfile(4, 3, 2, 3, 3, 4), Geography.COASTAL, 12345)
    lang.naming.generate_personal_name(PersonalNameContext(42))
    lang.naming.generate_place_name(PlaceNameContext(7, PlaceType.NATURAL))

Template choice is an ordered rule list per name kind, evaluated
first-match-wins against the culture's trait scores. Thresholds live under
``naming.thresholds`` in app.yaml.
"""

from typing import Optional

from .base import (
    NameComposer,
    NameRule,
    capitalize,
    capitalize_name,
    first_match,
    syllables_per_name,
)
from .epithet import (
    CHARACTERISTIC_CONCEPTS,
    Characteristic,
    EpithetContext,
    EpithetNaming,
    EpithetPattern,
)
from .personal import NamePattern, PersonalNameContext, PersonalNaming
from .place import PlaceNameContext, PlacePattern, PlaceNaming, PlaceType, feature_role


class NamingSystem(PersonalNaming, PlaceNaming, EpithetNaming):
    """All name templates bound to one genome and seed."""

    def generate_full_name(self, person: PersonalNameContext,
                           epithet: Optional[EpithetContext] = None) -> str:
        """Personal name followed by an epithet when one is requested."""
        name = self.generate_personal_name(person)
        if epithet is None:
            return name
        return f"{name} {self.generate_epithet(epithet)}"


__all__ = [
    "NamingSystem",
    "NameComposer",
    "NameRule",
    "NamePattern",
    "PlacePattern",
    "EpithetPattern",
    "PersonalNameContext",
    "PlaceNameContext",
    "PlaceType",
    "EpithetContext",
    "Characteristic",
    "CHARACTERISTIC_CONCEPTS",
    "capitalize",
    "capitalize_name",
    "first_match",
    "feature_role",
    "syllables_per_name",
]
