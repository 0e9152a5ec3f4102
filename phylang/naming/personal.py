#!/usr/bin/env python3
"""
Personal Names
==============
Template selection (first match wins, raw 1-5 trait scale):

- conscientiousness above threshold -> PATRONYMIC  "<Given> <Father><suffix>"
- openness above threshold          -> COMPOUND    "<Root><root>[<root>]"
- honesty-humility below threshold  -> ELABORATE   "<Title> <Given> <suffix>"
- extraversion above threshold      -> DESCRIPTIVE "<Given> <Trait>"
- otherwise                         -> SIMPLE      "<Given>"
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple

from ..culture import Geography
from ..morphology import CombiningRule
from .base import NameComposer, NameRule, always, capitalize, first_match


class NamePattern(Enum):
    SIMPLE = 'simple'
    PATRONYMIC = 'patronymic'
    COMPOUND = 'compound'
    ELABORATE = 'elaborate'
    DESCRIPTIVE = 'descriptive'


@dataclass(frozen=True)
class PersonalNameContext:
    """Request data for one personal name."""
    entity_id: Any
    parent_name: Optional[str] = None
    birth_order: Optional[int] = None
    geography: Optional[Geography] = None

    def __post_init__(self):
        if self.geography is not None:
            object.__setattr__(self, 'geography', Geography.parse(self.geography))
        if self.birth_order is not None and self.birth_order < 1:
            raise ValueError("birth_order starts at 1")

    def with_parent(self, parent_name: str) -> 'PersonalNameContext':
        return replace(self, parent_name=parent_name)

    def with_birth_order(self, birth_order: int) -> 'PersonalNameContext':
        return replace(self, birth_order=birth_order)

    def with_geography(self, geography: Geography) -> 'PersonalNameContext':
        return replace(self, geography=geography)


def personal_rules(thresholds: dict) -> Tuple[NameRule, ...]:
    patronymic = thresholds['patronymic_conscientiousness']
    compound = thresholds['compound_openness']
    elaborate = thresholds['elaborate_honesty_humility']
    descriptive = thresholds['descriptive_extraversion']
    return (
        NameRule(NamePattern.PATRONYMIC, lambda p, ctx: p.conscientiousness > patronymic),
        NameRule(NamePattern.COMPOUND, lambda p, ctx: p.openness > compound),
        NameRule(NamePattern.ELABORATE, lambda p, ctx: p.honesty_humility < elaborate),
        NameRule(NamePattern.DESCRIPTIVE, lambda p, ctx: p.extraversion > descriptive),
        NameRule(NamePattern.SIMPLE, always),
    )


class PersonalNaming(NameComposer):
    """Personal name templates."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.personal_rules = personal_rules(self.thresholds)

    @property
    def pattern(self) -> NamePattern:
        """The personal-name template this culture uses."""
        return first_match(self.personal_rules, self.profile, None)

    def generate_personal_name(self, context: PersonalNameContext) -> str:
        pattern = first_match(self.personal_rules, self.profile, context)
        builder = {
            NamePattern.SIMPLE: self._simple_name,
            NamePattern.PATRONYMIC: self._patronymic_name,
            NamePattern.COMPOUND: self._compound_name,
            NamePattern.ELABORATE: self._elaborate_name,
            NamePattern.DESCRIPTIVE: self._descriptive_name,
        }[pattern]
        return builder(context)

    def _given(self, context: PersonalNameContext) -> str:
        return self.given_name(self.key('person', context.entity_id, 'given'))

    def _simple_name(self, context: PersonalNameContext) -> str:
        return self._given(context)

    def _patronymic_name(self, context: PersonalNameContext) -> str:
        father = context.parent_name
        if not father:
            father = self.given_name(self.key('person', context.entity_id, 'father'))
        rng = self.rng(self.key('person', context.entity_id, 'patronymic'))
        suffix = self.affix('patronymic_suffix', rng)
        surname = self.genome.morphology_type.attach(father, suffix, self.genome.vowel_symbols)
        return f"{self._given(context)} {surname}"

    def _compound_name(self, context: PersonalNameContext) -> str:
        rng = self.rng(self.key('person', context.entity_id, 'compound'))
        count = 3 if rng.chance(self.genome.morphemes.compounding / 2) else 2
        return capitalize(''.join(self.root('compound', rng) for _ in range(count)))

    def _elaborate_name(self, context: PersonalNameContext) -> str:
        rng = self.rng(self.key('person', context.entity_id, 'elaborate'))
        title_count = 2 if self.genome.morphemes.elaborateness >= 0.75 else 1
        titles = [capitalize(self.root('title', rng)) for _ in range(title_count)]
        return ' '.join(titles + [self._given(context), self._elaborate_suffix(context, rng)])

    def _elaborate_suffix(self, context: PersonalNameContext, rng) -> str:
        if context.birth_order is not None and self.ordinals:
            index = min(context.birth_order, len(self.ordinals)) - 1
            return self.article_phrase(self.word(self.ordinals[index]))
        if self.ordinals and rng.chance(0.5):
            return self.article_phrase(self.word(rng.choice(self.ordinals)))
        feature = self.root('lineage', rng, context.geography)
        return f"{self.particle('of')} {self.article_phrase(feature)}"

    def _descriptive_name(self, context: PersonalNameContext) -> str:
        rng = self.rng(self.key('person', context.entity_id, 'descriptive'))
        trait = capitalize(self.root('characteristic', rng))
        joiner = '-' if self.combining_rule is CombiningRule.HYPHENATED else ' '
        return f"{self._given(context)}{joiner}{trait}"


__all__ = [
    "NamePattern",
    "PersonalNameContext",
    "personal_rules",
    "PersonalNaming",
]
