#!/usr/bin/env python3
"""
Phylang - Culture-Driven Language Generator
===========================================

Derives a complete synthetic language from six HEXACO trait scores and a
geography, then produces words, phrases and proper names on demand. Nothing
is stored: every word is recomputed from (concept, seed, genome).

Quick Start
-----------
    from phylang import CulturalProfile, Geography, new_language
    from phylang import PersonalNameContext, PlaceNameContext, PlaceType

    lang = new_language(CulturalProfile(4.0, 3.0, 2.0, 3.0, 3.0, 4.0),
                        Geography.COASTAL, seed=12345)

    lang.translate_word("house")
    lang.translate_phrase("the warrior sees the mountain")
    lang.naming.generate_personal_name(PersonalNameContext(42))
    lang.naming.generate_place_name(PlaceNameContext(7, PlaceType.NATURAL))

Modules
-------
    phylang.genome     - Genome derivation (phonemes, syllables, word order)
    phylang.generation - Deterministic word generation
    phylang.phrase     - Phrase tokenization and reordering
    phylang.naming     - Personal names, place names, epithets
    phylang.language   - Language facade with word cache
    phylang.config     - Named cultural presets

CLI Usage
---------
    python -m phylang word house river --preset coastal_folk
    python -m phylang name person 42 --preset desert_nobility
    python -m phylang presets
"""

__version__ = "0.1.0"

# =============================================================================
# Submodule Imports
# =============================================================================

from .errors import (
    PhylangError,
    InvalidProfileError,
    UnknownGeographyError,
    UnknownOptionError,
    ConfigError,
)
from .culture import CulturalProfile, Geography, TRAITS
from .phonology import PhonemeInventory, SyllableStructure, Phoneme, SyllablePattern
from .morphology import MorphemeDatabase, Morpheme, CombiningRule
from .genome import LinguisticGenome, WordOrder, MorphologyType, build_genome
from .generation import generate_word, WordGenerator
from .phrase import translate_phrase, PhraseTranslator
from .naming import (
    NamingSystem,
    NamePattern,
    PersonalNameContext,
    PlaceNameContext,
    PlaceType,
    EpithetContext,
    Characteristic,
)
from .language import Language, new_language
from .config import get_preset, list_presets


__all__ = [
    '__version__',
    # Errors
    'PhylangError',
    'InvalidProfileError',
    'UnknownGeographyError',
    'UnknownOptionError',
    'ConfigError',
    # Culture
    'CulturalProfile',
    'Geography',
    'TRAITS',
    # Genome
    'build_genome',
    'LinguisticGenome',
    'WordOrder',
    'MorphologyType',
    'CombiningRule',
    'PhonemeInventory',
    'SyllableStructure',
    'Phoneme',
    'SyllablePattern',
    'MorphemeDatabase',
    'Morpheme',
    # Generation
    'generate_word',
    'WordGenerator',
    'translate_phrase',
    'PhraseTranslator',
    # Naming
    'NamingSystem',
    'NamePattern',
    'PersonalNameContext',
    'PlaceNameContext',
    'PlaceType',
    'EpithetContext',
    'Characteristic',
    # Facade
    'Language',
    'new_language',
    # Presets
    'get_preset',
    'list_presets',
]
