#!/usr/bin/env python3
"""
Place Names
===========
Template selection (first match wins):

- founder given          -> FOUNDER      "<Founder><suffix>", "<Founder> <Noun>", "<New> <Founder>"
- historical event given -> HISTORICAL   event word + geographic feature
- openness above threshold -> MYTHOPOETIC mythic root + mythic feature
- otherwise              -> DESCRIPTIVE  place quality + place-type feature
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple

from ..culture import Geography
from ..errors import UnknownOptionError
from .base import NameComposer, NameRule, always, capitalize, first_match


class PlaceType(Enum):
    SETTLEMENT = 'settlement'
    NATURAL = 'natural'
    LANDMARK = 'landmark'
    REGION = 'region'

    @classmethod
    def parse(cls, text) -> 'PlaceType':
        """Resolve a place type from a member or its name, in any case."""
        if isinstance(text, cls):
            return text
        key = str(text).strip().lower()
        for member in cls:
            if key == member.value:
                return member
        raise UnknownOptionError('place type', text, [m.value for m in cls])


class PlacePattern(Enum):
    FOUNDER = 'founder'
    HISTORICAL = 'historical'
    MYTHOPOETIC = 'mythopoetic'
    DESCRIPTIVE = 'descriptive'


# Concept used for "<Founder> <Noun>"
FOUNDER_NOUNS = {
    PlaceType.SETTLEMENT: 'rest',
    PlaceType.LANDMARK: 'tower',
    PlaceType.NATURAL: 'vale',
    PlaceType.REGION: 'realm',
}


@dataclass(frozen=True)
class PlaceNameContext:
    """Request data for one place name."""
    place_id: Any
    place_type: PlaceType = PlaceType.SETTLEMENT
    geography: Optional[Geography] = None
    founder_name: Optional[str] = None
    historical_event: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'place_type', PlaceType.parse(self.place_type))
        if self.geography is not None:
            object.__setattr__(self, 'geography', Geography.parse(self.geography))

    def with_geography(self, geography: Geography) -> 'PlaceNameContext':
        return replace(self, geography=geography)

    def with_founder(self, founder_name: str) -> 'PlaceNameContext':
        return replace(self, founder_name=founder_name)

    def with_event(self, event: str) -> 'PlaceNameContext':
        return replace(self, historical_event=event)


def place_rules(thresholds: dict) -> Tuple[NameRule, ...]:
    mythopoetic = thresholds['mythopoetic_openness']
    return (
        NameRule(PlacePattern.FOUNDER, lambda p, ctx: bool(ctx.founder_name)),
        NameRule(PlacePattern.HISTORICAL, lambda p, ctx: bool(ctx.historical_event)),
        NameRule(PlacePattern.MYTHOPOETIC, lambda p, ctx: p.openness > mythopoetic),
        NameRule(PlacePattern.DESCRIPTIVE, always),
    )


def feature_role(place_type: PlaceType, geography: Geography) -> str:
    """Morpheme role supplying the feature noun for a place type."""
    if place_type is PlaceType.NATURAL:
        return f"feature_natural_{geography.value}"
    return f"feature_{place_type.value}"


class PlaceNaming(NameComposer):
    """Place name templates."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.place_rules = place_rules(self.thresholds)

    def place_pattern(self, context: PlaceNameContext) -> PlacePattern:
        return first_match(self.place_rules, self.profile, context)

    def generate_place_name(self, context: PlaceNameContext) -> str:
        pattern = self.place_pattern(context)
        builder = {
            PlacePattern.FOUNDER: self._founder_place,
            PlacePattern.HISTORICAL: self._historical_place,
            PlacePattern.MYTHOPOETIC: self._mythopoetic_place,
            PlacePattern.DESCRIPTIVE: self._descriptive_place,
        }[pattern]
        return builder(context)

    def _geography(self, context: PlaceNameContext) -> Geography:
        return context.geography or self.genome.geography

    def _feature(self, context: PlaceNameContext, rng) -> str:
        geography = self._geography(context)
        return self.root(feature_role(context.place_type, geography), rng, context.geography)

    def _founder_place(self, context: PlaceNameContext) -> str:
        rng = self.rng(self.key('place', context.place_id, 'founder'))
        founder = context.founder_name
        choice = rng.below(3)
        if choice == 0:
            return f"{founder}{self.affix('place_suffix', rng)}"
        if choice == 1:
            return f"{founder} {capitalize(self.word(FOUNDER_NOUNS[context.place_type]))}"
        return f"{capitalize(self.particle('new'))} {founder}"

    def _historical_place(self, context: PlaceNameContext) -> str:
        rng = self.rng(self.key('place', context.place_id, 'historical'))
        event = self.word(context.historical_event)
        return self.combine(event, self._feature(context, rng))

    def _mythopoetic_place(self, context: PlaceNameContext) -> str:
        rng = self.rng(self.key('place', context.place_id, 'mythopoetic'))
        mythic = self.root('mythic', rng, context.geography)
        feature = self.root('mythic_feature', rng, context.geography)
        return self.combine(mythic, feature)

    def _descriptive_place(self, context: PlaceNameContext) -> str:
        rng = self.rng(self.key('place', context.place_id, 'descriptive'))
        quality = self.root('place_quality', rng, context.geography)
        return self.combine(quality, self._feature(context, rng))


__all__ = [
    "PlaceType",
    "PlacePattern",
    "PlaceNameContext",
    "place_rules",
    "feature_role",
    "PlaceNaming",
]
