#!/usr/bin/env python3
"""
Shared naming machinery: rule lists, capitalization and the word helpers
every name template is built from.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence

from ..culture import CulturalProfile, Geography
from ..generation import generate_word
from ..genome import LinguisticGenome
from ..morphology import CombiningRule
from ..rng import SeededRandom
from ..settings import get_string_list, require_setting

_PART_SPLIT = re.compile(r'([ -])')


@dataclass(frozen=True)
class NameRule:
    """A template and the condition under which it applies."""
    pattern: Enum
    predicate: Callable[[CulturalProfile, Any], bool]

    def matches(self, profile: CulturalProfile, context: Any) -> bool:
        return bool(self.predicate(profile, context))


def first_match(rules: Sequence[NameRule], profile: CulturalProfile, context: Any) -> Enum:
    """Pattern of the first rule whose predicate holds."""
    for rule in rules:
        if rule.matches(profile, context):
            return rule.pattern
    raise LookupError("no naming rule matched; rule lists must end with a catch-all")


def always(profile: CulturalProfile, context: Any) -> bool:
    return True


def capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def capitalize_name(name: str, keep: Iterable[str] = ()) -> str:
    """Capitalize every space- or hyphen-separated part except those in keep."""
    keep = set(keep)
    parts = _PART_SPLIT.split(name)
    return ''.join(
        part if part in (' ', '-') or part in keep else capitalize(part)
        for part in parts
    )


def syllables_per_name(profile: CulturalProfile, geography: Geography) -> int:
    """Syllables in a generated given name: 2, adjusted by culture, within 1-4."""
    count = 2
    if profile.normalized('openness') > 0.6:
        count += 1
    if profile.honesty_humility < 2.5:
        count += 1
    if geography is Geography.MOUNTAINS:
        count -= 1
    if geography is Geography.COASTAL:
        count += 1
    return max(1, min(4, count))


def naming_thresholds() -> dict:
    return require_setting('naming.thresholds')


def ordinal_concepts() -> tuple:
    return get_string_list('naming.ordinals')


class NameComposer:
    """
    Word helpers shared by the personal, place and epithet templates.

    Every random stream comes from a concept key such as
    ``person:42:elaborate``, so a given identifier and slot always produce
    the same draws while different slots diverge.
    """

    def __init__(self, genome: LinguisticGenome, seed: int,
                 translate: Optional[Callable[[str], str]] = None):
        self.genome = genome
        self.seed = seed
        self._translate = translate or (lambda concept: generate_word(concept, seed, genome))
        self.thresholds = naming_thresholds()
        self.ordinals = ordinal_concepts()
        self.syllables_per_name = syllables_per_name(genome.profile, genome.geography)

    @property
    def profile(self) -> CulturalProfile:
        return self.genome.profile

    @property
    def combining_rule(self) -> CombiningRule:
        return self.genome.combining_rule

    def word(self, concept: str) -> str:
        """The language's word for a concept, as translate_word gives it."""
        return self._translate(concept)

    def fixed_word(self, concept: str, syllables: int) -> str:
        return generate_word(concept, self.seed, self.genome, syllables=syllables)

    def rng(self, key: str) -> SeededRandom:
        return SeededRandom.for_concept(key, self.seed)

    def particle(self, name: str) -> str:
        """In-language function word (the, of, new)."""
        return self.word(name)

    def root(self, role: str, rng: SeededRandom, geography: Optional[Geography] = None) -> str:
        """Surface form of a weighted root drawn from a morpheme role."""
        return self.word(self.genome.morphemes.draw(role, rng, geography).concept)

    def affix(self, role: str, rng: SeededRandom) -> str:
        """Surface form of a one-syllable affix drawn from an affix role."""
        morpheme = self.genome.morphemes.draw(role, rng)
        return self.fixed_word(f"affix:{morpheme.concept}", 1)

    def given_name(self, key: str) -> str:
        return capitalize(self.fixed_word(key, self.syllables_per_name))

    def combine(self, first: str, second: str) -> str:
        """Join two morphemes by the culture's combining rule and capitalize."""
        of_word = self.particle('of')
        name = self.combining_rule.combine(first, second, of_word=of_word)
        if self.combining_rule is CombiningRule.GENITIVE:
            return capitalize_name(name, keep=(of_word,))
        return capitalize_name(name)

    def article_phrase(self, word: str) -> str:
        """``<the> <Word>``"""
        return f"{self.particle('the')} {capitalize(word)}"

    @staticmethod
    def key(kind: str, identifier: Any, slot: str) -> str:
        return f"{kind}:{identifier}:{slot}"


__all__ = [
    "NameRule",
    "first_match",
    "always",
    "capitalize",
    "capitalize_name",
    "syllables_per_name",
    "NameComposer",
]
