#!/usr/bin/env python3
"""
Epithets
========
Achievement first, then birth circumstance, then a characteristic. Always
returns an epithet; a context with nothing in it falls through to a
trait-weighted characteristic.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple

from ..errors import UnknownOptionError
from ..rng import WeightedTable
from .base import NameComposer, NameRule, always, first_match


class Characteristic(Enum):
    TALL = 'tall'
    SHORT = 'short'
    STRONG = 'strong'
    SWIFT = 'swift'
    WISE = 'wise'
    CUNNING = 'cunning'
    MAD = 'mad'
    HONEST = 'honest'
    BRAVE = 'brave'
    CRUEL = 'cruel'
    JUST = 'just'
    SILENT = 'silent'
    LOUD = 'loud'
    BELOVED = 'beloved'
    FEARED = 'feared'

    @classmethod
    def parse(cls, text) -> 'Characteristic':
        """Resolve a characteristic from a member or its name, in any case."""
        if isinstance(text, cls):
            return text
        key = str(text).strip().lower()
        for member in cls:
            if key == member.value:
                return member
        raise UnknownOptionError('characteristic', text, [m.value for m in cls])

    @property
    def concepts(self) -> Tuple[str, ...]:
        """Morpheme concepts that can express this characteristic."""
        return CHARACTERISTIC_CONCEPTS[self]


CHARACTERISTIC_CONCEPTS = {
    Characteristic.TALL: ('great', 'sky'),
    Characteristic.SHORT: ('small',),
    Characteristic.STRONG: ('strong', 'power'),
    Characteristic.SWIFT: ('swift', 'air'),
    Characteristic.WISE: ('wise', 'ancient'),
    Characteristic.CUNNING: ('wise', 'dark'),
    Characteristic.MAD: ('storm', 'dark'),
    Characteristic.HONEST: ('truth', 'bright'),
    Characteristic.BRAVE: ('brave', 'courage'),
    Characteristic.CRUEL: ('dark', 'destroy'),
    Characteristic.JUST: ('justice', 'truth'),
    Characteristic.SILENT: ('dark', 'spirit'),
    Characteristic.LOUD: ('storm', 'strike'),
    Characteristic.BELOVED: ('love', 'hope'),
    Characteristic.FEARED: ('dark', 'power'),
}


class EpithetPattern(Enum):
    ACHIEVEMENT = 'achievement'
    BIRTH = 'birth'
    CHARACTERISTIC = 'characteristic'


@dataclass(frozen=True)
class EpithetContext:
    """Request data for one epithet."""
    entity_id: Any
    achievement: Optional[str] = None
    birth_event: Optional[str] = None
    characteristic: Optional[Characteristic] = None

    def __post_init__(self):
        if self.characteristic is not None:
            object.__setattr__(self, 'characteristic', Characteristic.parse(self.characteristic))

    def with_achievement(self, achievement: str) -> 'EpithetContext':
        return replace(self, achievement=achievement)

    def with_birth_event(self, event: str) -> 'EpithetContext':
        return replace(self, birth_event=event)

    def with_characteristic(self, characteristic: Characteristic) -> 'EpithetContext':
        return replace(self, characteristic=characteristic)


EPITHET_RULES = (
    NameRule(EpithetPattern.ACHIEVEMENT, lambda p, ctx: bool(ctx.achievement)),
    NameRule(EpithetPattern.BIRTH, lambda p, ctx: bool(ctx.birth_event)),
    NameRule(EpithetPattern.CHARACTERISTIC, always),
)


class EpithetNaming(NameComposer):
    """Epithet templates."""

    epithet_rules = EPITHET_RULES

    def epithet_pattern(self, context: EpithetContext) -> EpithetPattern:
        return first_match(self.epithet_rules, self.profile, context)

    def generate_epithet(self, context: EpithetContext) -> str:
        pattern = self.epithet_pattern(context)
        if pattern is EpithetPattern.ACHIEVEMENT:
            return self._achievement_epithet(context)
        if pattern is EpithetPattern.BIRTH:
            return self._birth_epithet(context)
        return self._characteristic_epithet(context)

    def _achievement_epithet(self, context: EpithetContext) -> str:
        rng = self.rng(self.key('epithet', context.entity_id, 'achievement'))
        deed = self.word(context.achievement)
        form = rng.below(3)
        if form == 0:
            return self.article_phrase(deed)
        if form == 1:
            return self.article_phrase(deed + self.affix('agentive_suffix', rng))
        return self.article_phrase(deed + self.root('achievement', rng))

    def _birth_epithet(self, context: EpithetContext) -> str:
        rng = self.rng(self.key('epithet', context.entity_id, 'birth'))
        event = self.word(context.birth_event)
        return self.combine(event, self.root('born', rng))

    def _characteristic_epithet(self, context: EpithetContext) -> str:
        rng = self.rng(self.key('epithet', context.entity_id, 'characteristic'))
        if context.characteristic is None:
            return self.article_phrase(self.root('characteristic', rng))
        morphemes = self.genome.morphemes
        table = WeightedTable((c, morphemes.salience(c)) for c in context.characteristic.concepts)
        return self.article_phrase(self.word(table.draw(rng)))


__all__ = [
    "Characteristic",
    "CHARACTERISTIC_CONCEPTS",
    "EpithetPattern",
    "EpithetContext",
    "EPITHET_RULES",
    "EpithetNaming",
]
