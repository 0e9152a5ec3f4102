#!/usr/bin/env python3
"""
Phonology
=========
Phoneme inventories and syllable structures derived from a culture.

Both are immutable: weights are computed once from the trait profile and the
geography tables, and the cumulative draw tables used by the word generator
are built alongside them.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .culture import CulturalProfile, Geography
from .rng import SeededRandom, WeightedTable
from .tables import load_geography, load_phonemes, load_syllables


@dataclass(frozen=True)
class Phoneme:
    """A phoneme symbol with its category and selection weight."""
    symbol: str
    category: str
    weight: float
    is_vowel: bool = False


@dataclass(frozen=True)
class PhonemeInventory:
    """The phonemes of one language and the weight of each category."""
    phonemes: Tuple[Phoneme, ...]
    category_weights: Tuple[Tuple[str, float], ...]
    _consonant_table: WeightedTable = field(init=False, compare=False, repr=False)
    _vowel_table: WeightedTable = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, '_consonant_table', WeightedTable(
            (p.symbol, p.weight) for p in self.consonants
        ))
        object.__setattr__(self, '_vowel_table', WeightedTable(
            (p.symbol, p.weight) for p in self.vowels
        ))

    @property
    def consonants(self) -> Tuple[Phoneme, ...]:
        return tuple(p for p in self.phonemes if not p.is_vowel)

    @property
    def vowels(self) -> Tuple[Phoneme, ...]:
        return tuple(p for p in self.phonemes if p.is_vowel)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(p.symbol for p in self.phonemes)

    def category_weight(self, category: str) -> float:
        for name, weight in self.category_weights:
            if name == category:
                return weight
        raise KeyError(category)

    def by_category(self, category: str) -> Tuple[Phoneme, ...]:
        return tuple(p for p in self.phonemes if p.category == category)

    def categories_of(self) -> Dict[str, str]:
        """Map each symbol to its category."""
        return {p.symbol: p.category for p in self.phonemes}

    def draw_consonant(self, rng: SeededRandom) -> str:
        return self._consonant_table.draw(rng)

    def draw_vowel(self, rng: SeededRandom) -> str:
        return self._vowel_table.draw(rng)

    def __len__(self):
        return len(self.phonemes)


@dataclass(frozen=True)
class SyllablePattern:
    """A C/V slot template and its selection weight."""
    template: str
    weight: float


@dataclass(frozen=True)
class SyllableStructure:
    """Permitted syllable patterns and syllable-count weights."""
    patterns: Tuple[SyllablePattern, ...]
    word_length: Tuple[Tuple[int, float], ...]
    _pattern_table: WeightedTable = field(init=False, compare=False, repr=False)
    _length_table: WeightedTable = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, '_pattern_table', WeightedTable(
            (p.template, p.weight) for p in self.patterns
        ))
        object.__setattr__(self, '_length_table', WeightedTable(self.word_length))

    @property
    def templates(self) -> Tuple[str, ...]:
        return tuple(p.template for p in self.patterns)

    def weight_of(self, template: str) -> float:
        for pattern in self.patterns:
            if pattern.template == template:
                return pattern.weight
        return 0.0

    def draw_pattern(self, rng: SeededRandom) -> str:
        return self._pattern_table.draw(rng)

    def draw_length(self, rng: SeededRandom) -> int:
        return self._length_table.draw(rng)


def build_inventory(profile: CulturalProfile, geography: Geography) -> PhonemeInventory:
    """
    Derive the phoneme inventory for a culture.

    Each category weight is a floored linear combination of the normalized
    traits, scaled by the geography modifier. Openness (or nativeness to the
    geography) decides which phonemes exist; the category weight is then
    split across them in proportion to their base frequency.
    """
    table = load_phonemes()
    modifiers = load_geography()[geography.value]
    normalized = profile.normalized_traits()
    openness = normalized['openness']

    phonemes = []
    category_weights = []
    for category in table.categories:
        weight = max(table.weight_floor, category.weight.evaluate(normalized))
        weight *= modifiers.category(category.name)
        category_weights.append((category.name, weight))

        members = [p for p in category.phonemes if p.available(openness, geography.value)]
        total_frequency = sum(p.frequency for p in members)
        for spec in members:
            phonemes.append(Phoneme(
                symbol=spec.symbol,
                category=category.name,
                weight=weight * spec.frequency / total_frequency,
                is_vowel=category.is_vowel,
            ))

    return PhonemeInventory(phonemes=tuple(phonemes), category_weights=tuple(category_weights))


def build_syllables(profile: CulturalProfile, geography: Geography) -> SyllableStructure:
    """Derive syllable pattern and syllable-count weights for a culture."""
    table = load_syllables()
    modifiers = load_geography()[geography.value]
    normalized = profile.normalized_traits()

    patterns = []
    for template, formula in table.patterns:
        weight = formula.evaluate(normalized) * modifiers.pattern(template)
        if weight >= table.min_weight:
            patterns.append(SyllablePattern(template, weight))

    lengths = []
    for count, formula in table.word_length:
        weight = max(0.0, formula.evaluate(normalized)) * modifiers.length(count)
        lengths.append((count, weight))

    return SyllableStructure(patterns=tuple(patterns), word_length=tuple(lengths))


__all__ = [
    "Phoneme",
    "PhonemeInventory",
    "SyllablePattern",
    "SyllableStructure",
    "build_inventory",
    "build_syllables",
]
