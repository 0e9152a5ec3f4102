#!/usr/bin/env python3
"""
Morphology
==========
Weighted morpheme roles and the rules for combining morphemes into names.

A morpheme here is a concept fragment ("storm", "born", "son"), not a sound.
Surface forms are produced on demand by the word generator with the language
seed, so the database itself is seed-free and nothing resembling a
dictionary is ever stored.

Root salience follows geography and personality: mountain peoples talk of
stone and sky, agreeable ones of peace, low honesty-humility of power and
honor. Affix roles instead favour their canonical candidate in proportion to
conscientiousness (regularity).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .culture import CulturalProfile, Geography
from .rng import SeededRandom, WeightedTable
from .tables import load_geography, load_morphemes

ROOT = 'root'
AFFIX = 'affix'


@dataclass(frozen=True)
class Morpheme:
    """A concept fragment and its cultural salience."""
    concept: str
    kind: str = ROOT
    # Salience before geography boosts; used to re-weight under an override
    trait_weight: float = 1.0
    weight: float = 1.0


@dataclass(frozen=True)
class MorphemeDatabase:
    """
    Role -> weighted candidate morphemes for one culture.

    ``regularity`` comes from conscientiousness, ``compounding`` from
    openness and ``elaborateness`` is the inverse of honesty-humility.
    """
    roles: Tuple[Tuple[str, Tuple[Morpheme, ...]], ...]
    geography: Geography
    regularity: float
    compounding: float
    elaborateness: float
    minimum_weight: float = 0.1

    def role_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.roles)

    def candidates(self, role: str, geography: Optional[Geography] = None) -> Tuple[Morpheme, ...]:
        """
        Weighted candidates for a role.

        With a geography override, root weights are recomputed against the
        override's concept boosts instead of the language's own geography.
        """
        for name, morphemes in self.roles:
            if name == role:
                break
        else:
            raise KeyError(f"Unknown morpheme role: {role}")

        if geography is None or geography == self.geography:
            return morphemes

        boosts = load_geography()[geography.value]
        return tuple(
            Morpheme(
                concept=m.concept,
                kind=m.kind,
                trait_weight=m.trait_weight,
                weight=max(self.minimum_weight, m.trait_weight + boosts.concept_boost(m.concept)),
            ) if m.kind == ROOT else m
            for m in morphemes
        )

    def draw(self, role: str, rng: SeededRandom, geography: Optional[Geography] = None) -> Morpheme:
        """One weighted draw from a role."""
        return WeightedTable((m, m.weight) for m in self.candidates(role, geography)).draw(rng)

    def salience(self, concept: str) -> float:
        for _, morphemes in self.roles:
            for m in morphemes:
                if m.concept == concept:
                    return m.weight
        raise KeyError(concept)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            name: {m.concept: round(m.weight, 4) for m in morphemes}
            for name, morphemes in self.roles
        }


class CombiningRule(Enum):
    """How two morphemes join into one name."""
    CONCATENATE = 'concatenate'  # Firestone
    HYPHENATED = 'hyphenated'    # Fire-Stone
    GENITIVE = 'genitive'        # Stone <of> Fire

    @classmethod
    def from_culture(cls, profile: CulturalProfile) -> 'CombiningRule':
        if profile.normalized('conscientiousness') > 0.6:
            return cls.HYPHENATED
        if profile.normalized('openness') > 0.7:
            return cls.GENITIVE
        return cls.CONCATENATE

    def combine(self, first: str, second: str, of_word: str = 'of') -> str:
        """
        Join two morphemes.

        ``of_word`` is the language's own word for "of", used by the
        genitive rule.
        """
        if self is CombiningRule.HYPHENATED:
            return f"{first}-{second}"
        if self is CombiningRule.GENITIVE:
            return f"{second} {of_word} {first}"
        return f"{first}{second}"


def root_weights(profile: CulturalProfile, geography: Geography) -> Dict[str, Tuple[float, float]]:
    """concept -> (trait weight, final weight) for every root concept."""
    table = load_morphemes()
    boosts = load_geography()[geography.value]
    normalized = profile.normalized_traits()

    trait_weights = {concept: 1.0 for concept in table.concepts}
    for rule in table.trait_boosts:
        if not rule.applies(normalized):
            continue
        for concept, delta in rule.boosts.items():
            if concept in trait_weights:
                trait_weights[concept] += delta

    return {
        concept: (tw, max(table.minimum_weight, tw + boosts.concept_boost(concept)))
        for concept, tw in trait_weights.items()
    }


def build_morphemes(profile: CulturalProfile, geography: Geography) -> MorphemeDatabase:
    """Derive the weighted morpheme roles for a culture."""
    table = load_morphemes()
    weights = root_weights(profile, geography)
    regularity = profile.normalized('conscientiousness')

    roles = []
    for role, concepts in table.roles.items():
        roles.append((role, tuple(
            Morpheme(concept, ROOT, *weights[concept]) for concept in concepts
        )))

    canonical_weight = 1.0 + 4.0 * regularity
    irregular_weight = max(table.minimum_weight, 1.0 - regularity)
    for role, concepts in table.affixes.items():
        roles.append((role, tuple(
            Morpheme(concept, AFFIX, w, w)
            for concept, w in (
                (c, canonical_weight if i == 0 else irregular_weight)
                for i, c in enumerate(concepts)
            )
        )))

    return MorphemeDatabase(
        roles=tuple(roles),
        geography=geography,
        regularity=regularity,
        compounding=profile.normalized('openness'),
        elaborateness=1.0 - profile.normalized('honesty_humility'),
        minimum_weight=table.minimum_weight,
    )


__all__ = [
    "ROOT",
    "AFFIX",
    "Morpheme",
    "MorphemeDatabase",
    "CombiningRule",
    "root_weights",
    "build_morphemes",
]
