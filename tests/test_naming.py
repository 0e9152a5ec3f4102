"""
Tests for the Naming System
===========================
Template selection, name composition and determinism for personal names,
place names and epithets.
"""

import pytest

from phylang import (
    Characteristic,
    EpithetContext,
    Geography,
    NamePattern,
    NamingSystem,
    PersonalNameContext,
    PhylangError,
    PlaceNameContext,
    PlaceType,
    UnknownOptionError,
    build_genome,
    generate_word,
    get_preset,
    new_language,
)
from phylang.naming import (
    CHARACTERISTIC_CONCEPTS,
    EpithetPattern,
    NameRule,
    PlacePattern,
    capitalize,
    capitalize_name,
    feature_role,
    first_match,
)

from conftest import make_profile


def preset_language(name, seed=12345):
    profile, geography = get_preset(name)
    return new_language(profile, geography, seed)


def the(lang):
    return lang.translate_word('the')


class TestRules:
    """First-match template selection."""

    @pytest.mark.parametrize("preset,expected", [
        ('coastal_folk', NamePattern.SIMPLE),
        ('mountain_warriors', NamePattern.PATRONYMIC),
        ('river_scholars', NamePattern.PATRONYMIC),
        ('desert_nobility', NamePattern.ELABORATE),
        ('forest_dreamers', NamePattern.COMPOUND),
        ('plains_herders', NamePattern.SIMPLE),
    ])
    def test_preset_patterns(self, preset, expected):
        assert preset_language(preset).naming.pattern is expected

    def test_descriptive(self):
        naming = NamingSystem(build_genome(make_profile(extraversion=4.5), Geography.PLAINS), 1)
        assert naming.pattern is NamePattern.DESCRIPTIVE

    def test_rule_order(self):
        """Conscientiousness outranks openness and honesty-humility."""
        profile = make_profile(conscientiousness=5.0, openness=5.0, honesty_humility=1.0)
        naming = NamingSystem(build_genome(profile, Geography.PLAINS), 1)
        assert naming.pattern is NamePattern.PATRONYMIC

    def test_thresholds_are_strict(self):
        naming = NamingSystem(build_genome(make_profile(openness=3.8), Geography.PLAINS), 1)
        assert naming.pattern is NamePattern.SIMPLE

    def test_first_match_requires_catch_all(self):
        rules = (NameRule(NamePattern.SIMPLE, lambda p, ctx: False),)
        with pytest.raises(LookupError):
            first_match(rules, make_profile(), None)


class TestPersonalNames:
    """Personal name templates."""

    def test_simple_name(self, coastal_lang):
        name = coastal_lang.naming.generate_personal_name(PersonalNameContext(42))
        expected = generate_word('person:42:given', 12345, coastal_lang.genome, syllables=3)
        assert name == capitalize(expected)

    def test_patronymic_uses_parent(self):
        lang = preset_language('mountain_warriors')
        name = lang.naming.generate_personal_name(PersonalNameContext(7, parent_name='Bob'))
        given, surname = name.split(' ', 1)
        assert given
        assert surname.startswith('Bob')
        assert len(surname) > len('Bob')

    def test_patronymic_without_parent(self):
        lang = preset_language('river_scholars')
        name = lang.naming.generate_personal_name(PersonalNameContext(7))
        assert ' ' in name

    def test_compound_is_one_word(self):
        lang = preset_language('forest_dreamers')
        for entity in range(10):
            name = lang.naming.generate_personal_name(PersonalNameContext(entity))
            assert ' ' not in name
            assert name == capitalize(name)

    def test_elaborate_birth_order(self):
        lang = preset_language('desert_nobility')
        name = lang.naming.generate_personal_name(PersonalNameContext(3, birth_order=1))
        ordinal = f"{the(lang)} {capitalize(lang.translate_word('first'))}"
        assert name.endswith(ordinal)
        # two titles, the given name, then the ordinal phrase
        assert len(name.split(' ')) == 5

    def test_elaborate_birth_order_clamped(self):
        lang = preset_language('desert_nobility')
        name = lang.naming.generate_personal_name(PersonalNameContext(3, birth_order=25))
        assert name.endswith(capitalize(lang.translate_word('tenth')))

    def test_descriptive_two_parts(self):
        lang = new_language(make_profile(extraversion=4.5), Geography.PLAINS, 5)
        name = lang.naming.generate_personal_name(PersonalNameContext(1))
        assert len(name.split(' ')) == 2

    def test_given_and_father_slots_diverge(self):
        """The same entity draws its own name and its father's from separate keys."""
        naming = preset_language('river_scholars').naming
        differ = sum(
            naming.given_name(naming.key('person', i, 'given')) !=
            naming.given_name(naming.key('person', i, 'father'))
            for i in range(50)
        )
        assert differ >= 45
        given, surname = naming.generate_personal_name(PersonalNameContext(3)).split(' ', 1)
        assert given == naming.given_name(naming.key('person', 3, 'given'))

    def test_birth_order_must_be_positive(self):
        with pytest.raises(ValueError):
            PersonalNameContext(1, birth_order=0)

    def test_context_builders(self):
        context = PersonalNameContext(1).with_parent('Ana').with_birth_order(2)
        assert context.parent_name == 'Ana'
        assert context.birth_order == 2
        assert context.with_geography('desert').geography is Geography.DESERT


class TestPlaceNames:
    """Place name templates."""

    def test_founder(self, coastal_lang):
        for place in range(10):
            context = PlaceNameContext(place, PlaceType.SETTLEMENT, founder_name='Kalo')
            assert coastal_lang.naming.place_pattern(context) is PlacePattern.FOUNDER
            assert 'Kalo' in coastal_lang.naming.generate_place_name(context)

    def test_founder_beats_event(self, coastal_lang):
        context = PlaceNameContext(1, founder_name='Kalo', historical_event='battle')
        assert coastal_lang.naming.place_pattern(context) is PlacePattern.FOUNDER

    def test_historical(self, coastal_lang):
        context = PlaceNameContext(1, PlaceType.LANDMARK, historical_event='battle')
        assert coastal_lang.naming.place_pattern(context) is PlacePattern.HISTORICAL
        name = coastal_lang.naming.generate_place_name(context)
        assert capitalize(coastal_lang.translate_word('battle')) in name

    def test_mythopoetic(self):
        lang = new_language(make_profile(openness=4.0), Geography.PLAINS, 9)
        context = PlaceNameContext(1, PlaceType.NATURAL)
        assert lang.naming.place_pattern(context) is PlacePattern.MYTHOPOETIC
        assert lang.naming.generate_place_name(context)

    def test_descriptive(self, coastal_lang):
        context = PlaceNameContext(1, PlaceType.REGION)
        assert coastal_lang.naming.place_pattern(context) is PlacePattern.DESCRIPTIVE
        name = coastal_lang.naming.generate_place_name(context)
        assert name == capitalize(name)

    def test_local_geography(self, coastal_lang):
        context = PlaceNameContext(1, PlaceType.NATURAL, geography='mountains')
        assert context.geography is Geography.MOUNTAINS
        assert coastal_lang.naming.generate_place_name(context) == \
            coastal_lang.naming.generate_place_name(context)

    def test_geography_override_changes_names(self, coastal_lang):
        naming = coastal_lang.naming
        changed = sum(
            naming.generate_place_name(PlaceNameContext(i, PlaceType.NATURAL)) !=
            naming.generate_place_name(PlaceNameContext(i, PlaceType.NATURAL, geography='desert'))
            for i in range(50)
        )
        assert changed >= 40

    def test_place_type_from_string(self):
        assert PlaceNameContext(1, 'Landmark').place_type is PlaceType.LANDMARK
        assert PlaceType.parse(' SETTLEMENT ') is PlaceType.SETTLEMENT

    def test_unknown_place_type(self):
        with pytest.raises(UnknownOptionError) as exc:
            PlaceNameContext(1, 'castle')
        assert isinstance(exc.value, ValueError)
        assert isinstance(exc.value, PhylangError)
        assert "Unknown place type 'castle'" in str(exc.value)
        assert 'landmark' in str(exc.value)

    @pytest.mark.parametrize("place_type,geography,expected", [
        (PlaceType.NATURAL, Geography.COASTAL, 'feature_natural_coastal'),
        (PlaceType.NATURAL, Geography.RIVER_VALLEY, 'feature_natural_river_valley'),
        (PlaceType.SETTLEMENT, Geography.DESERT, 'feature_settlement'),
        (PlaceType.LANDMARK, Geography.FOREST, 'feature_landmark'),
        (PlaceType.REGION, Geography.PLAINS, 'feature_region'),
    ])
    def test_feature_role(self, place_type, geography, expected):
        assert feature_role(place_type, geography) == expected


class TestEpithets:
    """Epithet templates."""

    def test_patterns(self, coastal_lang):
        naming = coastal_lang.naming
        assert naming.epithet_pattern(EpithetContext(1, achievement='x', birth_event='y')) \
            is EpithetPattern.ACHIEVEMENT
        assert naming.epithet_pattern(EpithetContext(1, birth_event='y')) is EpithetPattern.BIRTH
        assert naming.epithet_pattern(EpithetContext(1)) is EpithetPattern.CHARACTERISTIC

    def test_achievement(self, coastal_lang):
        for entity in range(10):
            epithet = coastal_lang.naming.generate_epithet(
                EpithetContext(entity, achievement='dragon')
            )
            assert epithet.startswith(f"{the(coastal_lang)} ")
            deed = capitalize(coastal_lang.translate_word('dragon'))
            assert epithet[len(the(coastal_lang)) + 1:].startswith(deed)

    def test_birth(self, coastal_lang):
        epithet = coastal_lang.naming.generate_epithet(EpithetContext(1, birth_event='storm'))
        assert epithet

    def test_characteristic_default(self, coastal_lang):
        epithet = coastal_lang.naming.generate_epithet(EpithetContext(1))
        assert epithet.startswith(f"{the(coastal_lang)} ")

    def test_characteristic_uses_its_concepts(self, coastal_lang):
        choices = {
            f"{the(coastal_lang)} {capitalize(coastal_lang.translate_word(c))}"
            for c in CHARACTERISTIC_CONCEPTS[Characteristic.BRAVE]
        }
        for entity in range(10):
            epithet = coastal_lang.naming.generate_epithet(
                EpithetContext(entity, characteristic='brave')
            )
            assert epithet in choices

    def test_every_characteristic_resolves(self, coastal_lang):
        for characteristic in Characteristic:
            assert coastal_lang.naming.generate_epithet(
                EpithetContext(1, characteristic=characteristic)
            )

    def test_characteristic_from_string(self):
        assert EpithetContext(1, characteristic='Brave').characteristic is Characteristic.BRAVE
        assert Characteristic.parse(Characteristic.MAD) is Characteristic.MAD

    def test_unknown_characteristic(self):
        with pytest.raises(UnknownOptionError) as exc:
            EpithetContext(1, characteristic='grumpy')
        assert isinstance(exc.value, PhylangError)
        assert "Unknown characteristic 'grumpy'" in str(exc.value)
        assert 'feared' in str(exc.value)

    def test_full_name(self, coastal_lang):
        person = PersonalNameContext(5)
        epithet = EpithetContext(5, achievement='dragon')
        name = coastal_lang.naming.generate_personal_name(person)
        full = coastal_lang.naming.generate_full_name(person, epithet)
        assert full == f"{name} {coastal_lang.naming.generate_epithet(epithet)}"
        assert coastal_lang.naming.generate_full_name(person) == name


class TestDeterminism:
    """Same identifiers give the same names; different ones diverge."""

    def test_repeatable(self):
        a = preset_language('desert_nobility')
        b = preset_language('desert_nobility')
        for entity in range(5):
            context = PersonalNameContext(entity)
            assert a.naming.generate_personal_name(context) == \
                b.naming.generate_personal_name(context)

    def test_entities_diverge(self, coastal_lang):
        names = {coastal_lang.naming.generate_personal_name(PersonalNameContext(i))
                 for i in range(20)}
        assert len(names) >= 15

    def test_seed_changes_names(self):
        a = preset_language('coastal_folk', seed=1)
        b = preset_language('coastal_folk', seed=2)
        names_a = [a.naming.generate_personal_name(PersonalNameContext(i)) for i in range(5)]
        names_b = [b.naming.generate_personal_name(PersonalNameContext(i)) for i in range(5)]
        assert names_a != names_b


class TestCapitalization:
    """Name-part capitalization."""

    def test_capitalize(self):
        assert capitalize('tala') == 'Tala'
        assert capitalize('') == ''

    def test_capitalize_name(self):
        assert capitalize_name('fire-stone du sea', keep=('du',)) == 'Fire-Stone du Sea'
        assert capitalize_name('mira ko') == 'Mira Ko'
