#!/usr/bin/env python3
"""
Cultural Parameters
===================
The two inputs every language is derived from: a HEXACO trait profile and a
geographic category.

Scores are on the 1.0-5.0 HEXACO scale. Out-of-range values are rejected at
construction rather than clamped.
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import Dict, Sequence

from .errors import InvalidProfileError, UnknownGeographyError

TRAIT_MIN = 1.0
TRAIT_MAX = 5.0

# Constructor order
TRAITS = (
    'agreeableness',
    'openness',
    'conscientiousness',
    'extraversion',
    'honesty_humility',
    'emotionality',
)


@dataclass(frozen=True)
class CulturalProfile:
    """Six HEXACO trait scores describing a culture."""
    agreeableness: float
    openness: float
    conscientiousness: float
    extraversion: float
    honesty_humility: float
    emotionality: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is a Real subclass but never a meaningful score
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidProfileError(
                    f.name, value, f"{f.name} must be a number, got {value!r}"
                )
            value = float(value)
            if math.isnan(value) or not TRAIT_MIN <= value <= TRAIT_MAX:
                raise InvalidProfileError(f.name, value)
            object.__setattr__(self, f.name, value)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> 'CulturalProfile':
        """Build from six scores in constructor order."""
        if len(values) != len(TRAITS):
            raise InvalidProfileError(
                'traits', values,
                f"expected {len(TRAITS)} trait scores, got {len(values)}",
            )
        return cls(*values)

    @staticmethod
    def normalize(score: float) -> float:
        return (score - TRAIT_MIN) / (TRAIT_MAX - TRAIT_MIN)

    def normalized(self, trait: str) -> float:
        """Trait score mapped onto [0, 1]."""
        if trait not in TRAITS:
            raise KeyError(trait)
        return self.normalize(getattr(self, trait))

    def normalized_traits(self) -> Dict[str, float]:
        return {trait: self.normalized(trait) for trait in TRAITS}

    def as_tuple(self):
        return tuple(getattr(self, trait) for trait in TRAITS)


class Geography(Enum):
    """Closed set of geographic categories."""
    MOUNTAINS = 'mountains'
    COASTAL = 'coastal'
    DESERT = 'desert'
    FOREST = 'forest'
    PLAINS = 'plains'
    RIVER_VALLEY = 'river_valley'

    @classmethod
    def parse(cls, text) -> 'Geography':
        """
        Resolve a geography from free text.

        Accepts member names or values in any case, with spaces or hyphens
        in place of underscores ("River Valley", "river-valley").
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise UnknownGeographyError(text, cls.names())
        key = text.strip().lower().replace('-', '_').replace(' ', '_')
        for member in cls:
            if key == member.value:
                return member
        raise UnknownGeographyError(text, cls.names())

    @classmethod
    def names(cls):
        return [member.value for member in cls]

    def __str__(self):
        return self.value


__all__ = [
    "TRAITS",
    "TRAIT_MIN",
    "TRAIT_MAX",
    "CulturalProfile",
    "Geography",
]
