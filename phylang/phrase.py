#!/usr/bin/env python3
"""
Phrase Translation
==================
Word-by-word phrase rendering with clause reordering.

Policy:
- Tokens are runs of word characters, apostrophes and hyphens; everything
  else separates them. Tokens are lowercased.
- Structural words (articles, common prepositions) are dropped.
- Roles are positional: first token is the subject, second the verb, the
  rest form the object block in their original order.
- Slots are emitted in the genome's word order and joined with single spaces.

Empty or purely structural input gives an empty string.
"""

import re
from typing import Callable, Dict, FrozenSet, List, Optional

from .generation import generate_word
from .genome import LinguisticGenome
from .settings import get_string_list

TOKEN_RE = re.compile(r"[\w'-]+")


def _structural_words() -> FrozenSet[str]:
    return frozenset(w.lower() for w in get_string_list('phrase.structural_words'))


class PhraseTranslator:
    """Tokenize, assign roles, translate and reorder one phrase at a time."""

    def __init__(self, genome: LinguisticGenome, seed: int,
                 translate: Optional[Callable[[str], str]] = None):
        self.genome = genome
        self.seed = seed
        # Language passes its cached translate_word here
        self._translate = translate or (lambda concept: generate_word(concept, seed, genome))
        self.structural_words = _structural_words()

    def tokenize(self, phrase: str) -> List[str]:
        """Lowercased content tokens in input order."""
        if not phrase:
            return []
        tokens = (t.lower() for t in TOKEN_RE.findall(phrase))
        return [t for t in tokens if t.strip("'-") and t not in self.structural_words]

    @staticmethod
    def assign_roles(tokens: List[str]) -> Dict[str, List[str]]:
        """Positional roles: subject, verb, then the object block."""
        return {
            'S': tokens[:1],
            'V': tokens[1:2],
            'O': tokens[2:],
        }

    def translate(self, phrase: str) -> str:
        roles = self.assign_roles(self.tokenize(phrase))
        words = []
        for slot in self.genome.word_order.slots:
            words.extend(self._translate(token) for token in roles[slot])
        return ' '.join(words)

    __call__ = translate


def translate_phrase(phrase: str, genome: LinguisticGenome, seed: int) -> str:
    """Translate a phrase with a fresh, uncached translator."""
    return PhraseTranslator(genome, seed).translate(phrase)


__all__ = ["TOKEN_RE", "PhraseTranslator", "translate_phrase"]
