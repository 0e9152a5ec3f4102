#!/usr/bin/env python3
"""
Linguistic Genome
=================
The complete, seed-free description of one language: which sounds it has,
how it builds syllables, how it orders clauses, and which concepts its names
draw on.

``build_genome`` is a pure function of (CulturalProfile, Geography). Two
genomes built from the same inputs compare equal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Tuple

from .culture import CulturalProfile, Geography
from .morphology import CombiningRule, MorphemeDatabase, build_morphemes
from .phonology import PhonemeInventory, SyllableStructure, build_inventory, build_syllables

logger = logging.getLogger(__name__)


class WordOrder(Enum):
    """Canonical order of subject, verb and object."""
    SVO = 'SVO'
    SOV = 'SOV'
    VSO = 'VSO'
    VOS = 'VOS'
    OVS = 'OVS'
    OSV = 'OSV'

    @property
    def slots(self) -> Tuple[str, ...]:
        return tuple(self.value)

    @classmethod
    def from_conscientiousness(cls, normalized: float) -> 'WordOrder':
        """First matching threshold wins; disciplined cultures are verb-final."""
        for threshold, order in _WORD_ORDER_THRESHOLDS:
            if normalized >= threshold:
                return order
        return cls.OSV


_WORD_ORDER_THRESHOLDS = (
    (0.75, WordOrder.SOV),
    (0.5, WordOrder.SVO),
    (0.3, WordOrder.VSO),
    (0.15, WordOrder.VOS),
    (0.05, WordOrder.OVS),
)


class MorphologyType(Enum):
    """How affixes attach to stems."""
    ISOLATING = 'isolating'
    AGGLUTINATIVE = 'agglutinative'
    FUSIONAL = 'fusional'

    @classmethod
    def from_culture(cls, profile: CulturalProfile) -> 'MorphologyType':
        if profile.normalized('conscientiousness') > 0.6:
            if profile.normalized('openness') > 0.6:
                return cls.AGGLUTINATIVE
            return cls.ISOLATING
        return cls.FUSIONAL

    def attach(self, stem: str, affix: str, vowels: Iterable[str] = ()) -> str:
        """
        Attach a suffix to a stem.

        Isolating languages keep the affix as a separate word; fusional ones
        fuse it after dropping a stem-final vowel.
        """
        if self is MorphologyType.ISOLATING:
            return f"{stem} {affix}"
        if self is MorphologyType.FUSIONAL:
            for vowel in sorted(vowels, key=len, reverse=True):
                if stem.endswith(vowel) and len(stem) > len(vowel):
                    stem = stem[:-len(vowel)]
                    break
        return f"{stem}{affix}"


@dataclass(frozen=True)
class LinguisticGenome:
    """Immutable language parameters derived from a culture."""
    profile: CulturalProfile
    geography: Geography
    inventory: PhonemeInventory
    syllables: SyllableStructure
    word_order: WordOrder
    morphology_type: MorphologyType
    combining_rule: CombiningRule
    morphemes: MorphemeDatabase

    @property
    def word_length(self) -> Tuple[Tuple[int, float], ...]:
        return self.syllables.word_length

    @property
    def vowel_symbols(self) -> Tuple[str, ...]:
        return tuple(p.symbol for p in self.inventory.vowels)

    def summary(self) -> Dict[str, Any]:
        """Plain-data overview, suitable for display or JSON."""
        return {
            'geography': self.geography.value,
            'profile': {
                'agreeableness': self.profile.agreeableness,
                'openness': self.profile.openness,
                'conscientiousness': self.profile.conscientiousness,
                'extraversion': self.profile.extraversion,
                'honesty_humility': self.profile.honesty_humility,
                'emotionality': self.profile.emotionality,
            },
            'word_order': self.word_order.value,
            'morphology_type': self.morphology_type.value,
            'combining_rule': self.combining_rule.value,
            'consonants': [p.symbol for p in self.inventory.consonants],
            'vowels': [p.symbol for p in self.inventory.vowels],
            'category_weights': {
                name: round(weight, 4) for name, weight in self.inventory.category_weights
            },
            'syllable_patterns': {
                p.template: round(p.weight, 4) for p in self.syllables.patterns
            },
            'word_length': {count: round(w, 4) for count, w in self.word_length},
            'regularity': round(self.morphemes.regularity, 4),
            'compounding': round(self.morphemes.compounding, 4),
            'elaborateness': round(self.morphemes.elaborateness, 4),
        }


def build_genome(profile: CulturalProfile, geography: Geography) -> LinguisticGenome:
    """
    Derive the genome for a culture.

    Pure and total: every weight is table-driven arithmetic over the trait
    scores and the geography modifiers. Invalid profiles never get here;
    they are rejected when the CulturalProfile is constructed.
    """
    if not isinstance(profile, CulturalProfile):
        raise TypeError(f"profile must be a CulturalProfile, got {type(profile).__name__}")
    geography = Geography.parse(geography)

    genome = LinguisticGenome(
        profile=profile,
        geography=geography,
        inventory=build_inventory(profile, geography),
        syllables=build_syllables(profile, geography),
        word_order=WordOrder.from_conscientiousness(profile.normalized('conscientiousness')),
        morphology_type=MorphologyType.from_culture(profile),
        combining_rule=CombiningRule.from_culture(profile),
        morphemes=build_morphemes(profile, geography),
    )
    logger.debug(
        "Built genome for %s: word order %s, %d phonemes, %d syllable patterns",
        geography.value, genome.word_order.value, len(genome.inventory),
        len(genome.syllables.patterns),
    )
    return genome


__all__ = [
    "WordOrder",
    "MorphologyType",
    "LinguisticGenome",
    "build_genome",
]
