#!/usr/bin/env python3
"""
Data Table Loader
=================
Loads the fixed phonological and morphological tables that drive genome
construction from the YAML files in ``phylang/data``.

Usage:
    from phylang.tables import (
        load_phonemes, load_syllables, load_geography, load_morphemes
    )

    phonemes = load_phonemes()
    for category in phonemes.categories:
        print(category.name, len(category.phonemes))

Every loader is cached, so the files are read at most once per process and
the returned containers are shared read-only between threads.
"""

import yaml
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Tuple

from .culture import TRAITS, Geography
from .errors import ConfigError
from .settings import DATA_DIR


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class LinearWeight:
    """``base + sum(coef * normalized_trait)`` over named traits."""
    base: float
    coefficients: Tuple[Tuple[str, float], ...] = ()

    def evaluate(self, normalized: Mapping[str, float]) -> float:
        total = self.base
        for trait, coef in self.coefficients:
            total += coef * normalized[trait]
        return total


@dataclass(frozen=True)
class PhonemeSpec:
    """One candidate phoneme and the conditions for including it."""
    symbol: str
    frequency: float
    min_openness: float = 0.0
    native: Tuple[str, ...] = ()
    native_only: bool = False

    def available(self, openness: float, geography: str) -> bool:
        """Whether a culture with this normalized openness and geography has it."""
        if geography in self.native:
            return True
        if self.native_only:
            return False
        return openness >= self.min_openness


@dataclass(frozen=True)
class CategorySpec:
    """A phoneme category: its weight formula and candidate phonemes."""
    name: str
    is_vowel: bool
    weight: LinearWeight
    phonemes: Tuple[PhonemeSpec, ...]


@dataclass(frozen=True)
class PhonemeTable:
    """Container for the phoneme inventory table."""
    weight_floor: float
    categories: Tuple[CategorySpec, ...]

    def category(self, name: str) -> Optional[CategorySpec]:
        for spec in self.categories:
            if spec.name == name:
                return spec
        return None

    @property
    def category_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.categories)


@dataclass(frozen=True)
class SyllableTable:
    """Container for syllable pattern and word length weights."""
    min_weight: float
    patterns: Tuple[Tuple[str, LinearWeight], ...]
    word_length: Tuple[Tuple[int, LinearWeight], ...]


@dataclass(frozen=True)
class GeographyModifiers:
    """Multipliers and concept boosts for one geography."""
    categories: Dict[str, float] = field(default_factory=dict)
    patterns: Dict[str, float] = field(default_factory=dict)
    word_length: Dict[int, float] = field(default_factory=dict)
    concepts: Dict[str, float] = field(default_factory=dict)

    def category(self, name: str) -> float:
        return self.categories.get(name, 1.0)

    def pattern(self, template: str) -> float:
        return self.patterns.get(template, 1.0)

    def length(self, count: int) -> float:
        return self.word_length.get(count, 1.0)

    def concept_boost(self, concept: str) -> float:
        return self.concepts.get(concept, 0.0)


@dataclass(frozen=True)
class TraitBoost:
    """Concept boosts applied when a normalized trait crosses a bound."""
    trait: str
    boosts: Dict[str, float]
    above: Optional[float] = None
    below: Optional[float] = None

    def applies(self, normalized: Mapping[str, float]) -> bool:
        value = normalized[self.trait]
        if self.above is not None and not value > self.above:
            return False
        if self.below is not None and not value < self.below:
            return False
        return True


@dataclass(frozen=True)
class MorphemeTable:
    """Container for morpheme concepts, salience boosts and role lists."""
    minimum_weight: float
    concepts: Tuple[str, ...]
    trait_boosts: Tuple[TraitBoost, ...]
    roles: Dict[str, Tuple[str, ...]]
    affixes: Dict[str, Tuple[str, ...]]


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the data directory."""
    filepath = DATA_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Data table not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require(cfg: Mapping[str, Any], key: str, context: str):
    value = cfg.get(key) if isinstance(cfg, Mapping) else None
    if value is None:
        raise ConfigError(f"{context}.{key} must be set")
    return value


def _linear(raw: Mapping[str, Any], context: str) -> LinearWeight:
    base = float(_require(raw, 'base', context))
    coefficients = []
    for trait, coef in raw.items():
        if trait == 'base':
            continue
        if trait not in TRAITS:
            raise ConfigError(f"{context}.{trait} is not a cultural trait")
        coefficients.append((trait, float(coef)))
    return LinearWeight(base=base, coefficients=tuple(coefficients))


@lru_cache(maxsize=1)
def load_phonemes() -> PhonemeTable:
    """Load the phoneme inventory table."""
    raw = _load_yaml('phonemes.yaml')

    categories = []
    for name, cat in _require(raw, 'categories', 'phonemes').items():
        context = f'phonemes.categories.{name}'
        phonemes = tuple(
            PhonemeSpec(
                symbol=str(_require(entry, 'symbol', context)),
                frequency=float(_require(entry, 'frequency', context)),
                min_openness=float(entry.get('min_openness', 0.0)),
                native=tuple(entry.get('native', ())),
                native_only=bool(entry.get('native_only', False)),
            )
            for entry in _require(cat, 'phonemes', context)
        )
        categories.append(CategorySpec(
            name=name,
            is_vowel=bool(cat.get('is_vowel', False)),
            weight=_linear(_require(cat, 'weight', context), f'{context}.weight'),
            phonemes=phonemes,
        ))

    if not any(c.is_vowel for c in categories) or all(c.is_vowel for c in categories):
        raise ConfigError("phonemes.categories must contain consonant and vowel categories")

    return PhonemeTable(
        weight_floor=float(_require(raw, 'weight_floor', 'phonemes')),
        categories=tuple(categories),
    )


@lru_cache(maxsize=1)
def load_syllables() -> SyllableTable:
    """Load syllable pattern and word length weights."""
    raw = _load_yaml('syllables.yaml')

    patterns = []
    for template, weight in _require(raw, 'patterns', 'syllables').items():
        if not template or set(template) - {'C', 'V'} or 'V' not in template:
            raise ConfigError(f"syllables.patterns.{template} must be C/V slots with a vowel")
        patterns.append((template, _linear(weight, f'syllables.patterns.{template}')))

    lengths = tuple(
        (int(count), _linear(weight, f'syllables.word_length.{count}'))
        for count, weight in _require(raw, 'word_length', 'syllables').items()
    )

    return SyllableTable(
        min_weight=float(_require(raw, 'min_weight', 'syllables')),
        patterns=tuple(patterns),
        word_length=lengths,
    )


@lru_cache(maxsize=1)
def load_geography() -> Dict[str, GeographyModifiers]:
    """Load per-geography modifier tables, keyed by Geography value."""
    raw = _load_yaml('geography.yaml')

    tables = {}
    for geography in Geography:
        entry = _require(raw, geography.value, 'geography')
        tables[geography.value] = GeographyModifiers(
            categories={k: float(v) for k, v in (entry.get('categories') or {}).items()},
            patterns={k: float(v) for k, v in (entry.get('patterns') or {}).items()},
            word_length={int(k): float(v) for k, v in (entry.get('word_length') or {}).items()},
            concepts={k: float(v) for k, v in (entry.get('concepts') or {}).items()},
        )
    return tables


@lru_cache(maxsize=1)
def load_morphemes() -> MorphemeTable:
    """Load morpheme concepts, salience boosts and role lists."""
    raw = _load_yaml('morphemes.yaml')

    concepts = tuple(_require(raw, 'concepts', 'morphemes'))
    bad = [c for c in concepts if not isinstance(c, str)]
    if bad:
        raise ConfigError(f"morphemes.concepts must be strings (quote yes/no/on/off): {bad}")
    known = set(concepts)

    boosts = []
    for i, entry in enumerate(raw.get('trait_boosts') or ()):
        context = f'morphemes.trait_boosts[{i}]'
        trait = _require(entry, 'trait', context)
        if trait not in TRAITS:
            raise ConfigError(f"{context}.trait is not a cultural trait: {trait}")
        boosts.append(TraitBoost(
            trait=trait,
            boosts={k: float(v) for k, v in _require(entry, 'boosts', context).items()},
            above=entry.get('above'),
            below=entry.get('below'),
        ))

    roles = {}
    for role, members in _require(raw, 'roles', 'morphemes').items():
        if members == '*':
            roles[role] = concepts
            continue
        unknown = [m for m in members if m not in known]
        if unknown:
            raise ConfigError(f"morphemes.roles.{role} names unknown concepts: {unknown}")
        roles[role] = tuple(members)

    affixes = {
        role: tuple(members)
        for role, members in _require(raw, 'affixes', 'morphemes').items()
    }

    return MorphemeTable(
        minimum_weight=float(_require(raw, 'minimum_weight', 'morphemes')),
        concepts=concepts,
        trait_boosts=tuple(boosts),
        roles=roles,
        affixes=affixes,
    )


__all__ = [
    "LinearWeight",
    "PhonemeSpec",
    "CategorySpec",
    "PhonemeTable",
    "SyllableTable",
    "GeographyModifiers",
    "TraitBoost",
    "MorphemeTable",
    "load_phonemes",
    "load_syllables",
    "load_geography",
    "load_morphemes",
]
