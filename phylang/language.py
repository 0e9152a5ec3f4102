#!/usr/bin/env python3
"""
Language Facade
===============
One genome, one seed, and an optional per-instance word cache.

Usage:
    from phylang import CulturalProfile, Geography, new_language

    lang = new_language(CulturalProfile(4, 3, 2, 3, 3, 4), Geography.COASTAL, 12345)
    lang.translate_word("house")
    lang.translate_phrase("the warrior sees the mountain")
    lang.naming.generate_personal_name(PersonalNameContext(42))

A Language is safe to share between threads. The genome and seed never
change; the cache is guarded by a lock and only ever gains entries, each
written at most once, so cached and uncached instances return the same
words.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, Optional

from .culture import CulturalProfile, Geography
from .generation import generate_word
from .genome import LinguisticGenome, WordOrder, build_genome
from .naming import NamingSystem
from .phrase import PhraseTranslator
from .settings import get_setting

logger = logging.getLogger(__name__)


class Language:
    """A generated language bound to one genome and seed."""

    def __init__(self, profile: CulturalProfile, geography: Geography, seed: int,
                 cache: Optional[bool] = None, genome: Optional[LinguisticGenome] = None):
        """
        Build a language.

        Args:
            profile: Cultural trait scores
            geography: Geographic category (enum member or name)
            seed: Integer seed; words depend on it
            cache: Memoize translate_word (None = cache.enabled in app.yaml)
            genome: Prebuilt genome for (profile, geography), if already at hand
        """
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
        geography = Geography.parse(geography)
        if genome is None:
            genome = build_genome(profile, geography)
        elif genome.profile != profile or genome.geography is not geography:
            raise ValueError("genome was built from a different profile or geography")

        if cache is None:
            cache = bool(get_setting('cache.enabled', True))

        self._genome = genome
        self._seed = seed
        self._cache_enabled = bool(cache)
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._phrases = PhraseTranslator(genome, seed, translate=self.translate_word)
        self._naming = NamingSystem(genome, seed, translate=self.translate_word)

    @property
    def genome(self) -> LinguisticGenome:
        return self._genome

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def cache_enabled(self) -> bool:
        return self._cache_enabled

    @property
    def naming(self) -> NamingSystem:
        return self._naming

    @property
    def id(self) -> str:
        return f"lang_{self.seed}"

    @property
    def profile(self) -> CulturalProfile:
        return self.genome.profile

    @property
    def geography(self) -> Geography:
        return self.genome.geography

    @property
    def word_order(self) -> WordOrder:
        return self.genome.word_order

    def translate_word(self, concept: str) -> str:
        """The language's word for a concept (used verbatim, no normalization)."""
        if not self.cache_enabled:
            return generate_word(concept, self.seed, self.genome)

        with self._lock:
            cached = self._cache.get(concept)
        if cached is not None:
            return cached

        word = generate_word(concept, self.seed, self.genome)
        with self._lock:
            return self._cache.setdefault(concept, word)

    def translate_phrase(self, phrase: str) -> str:
        """Word-by-word translation reordered to the language's word order."""
        return self._phrases.translate(phrase)

    def translate_many(self, concepts: Iterable[str],
                       max_workers: Optional[int] = None) -> Dict[str, str]:
        """
        Translate several concepts on a thread pool.

        Returns:
            Dictionary mapping each concept to its word, in input order
        """
        concepts = list(dict.fromkeys(concepts))
        if max_workers is None:
            max_workers = get_setting('translate_many.max_workers', 4)
        if not concepts:
            return {}

        with ThreadPoolExecutor(max_workers=max(1, int(max_workers))) as executor:
            words = list(executor.map(self.translate_word, concepts))
        return dict(zip(concepts, words))

    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            size = len(self._cache)
            self._cache.clear()
        logger.debug("Cleared %d cached words for %s", size, self.id)

    def describe(self) -> Dict[str, Any]:
        """Summary of the language and its genome."""
        summary = {'id': self.id, 'seed': self.seed}
        summary.update(self.genome.summary())
        summary['name_pattern'] = self.naming.pattern.value
        summary['syllables_per_name'] = self.naming.syllables_per_name
        return summary

    def __repr__(self):
        return (f"Language(id={self.id!r}, geography={self.geography.value!r}, "
                f"word_order={self.word_order.value!r})")


def new_language(profile: CulturalProfile, geography: Geography, seed: int,
                 cache: Optional[bool] = None) -> Language:
    """Build a Language from a culture and a seed."""
    return Language(profile, geography, seed, cache=cache)


__all__ = ["Language", "new_language"]
