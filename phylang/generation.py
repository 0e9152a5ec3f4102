#!/usr/bin/env python3
"""
Word Generation
===============
Turns a concept string into a surface word, deterministically.

The draw order is fixed:

1. derived seed = mix(fnv1a64(concept), seed)
2. syllable count (unless given), one weighted draw
3. per syllable: one pattern draw, then one phoneme draw per C/V slot

Concepts are used exactly as given; "House" and "house" are different
concepts. The empty string is a valid concept and still yields a word.
"""

from typing import Optional

from .genome import LinguisticGenome
from .rng import SeededRandom


def generate_word(concept: str, seed: int, genome: LinguisticGenome,
                  syllables: Optional[int] = None) -> str:
    """
    Generate the word for a concept.

    Args:
        concept: Meaning to realize, used verbatim
        seed: Language seed
        genome: Language parameters
        syllables: Fixed syllable count (drawn from the genome if None)

    Returns:
        Surface word; never empty
    """
    if not isinstance(concept, str):
        raise TypeError(f"concept must be a string, got {type(concept).__name__}")
    if syllables is not None and syllables < 1:
        raise ValueError("syllables must be at least 1")

    rng = SeededRandom.for_concept(concept, seed)
    structure = genome.syllables
    inventory = genome.inventory

    count = syllables if syllables is not None else structure.draw_length(rng)

    parts = []
    for _ in range(count):
        template = structure.draw_pattern(rng)
        for slot in template:
            if slot == 'V':
                parts.append(inventory.draw_vowel(rng))
            else:
                parts.append(inventory.draw_consonant(rng))
    return ''.join(parts)


class WordGenerator:
    """Word generation bound to one genome and seed."""

    def __init__(self, genome: LinguisticGenome, seed: int):
        self.genome = genome
        self.seed = seed

    def generate(self, concept: str, syllables: Optional[int] = None) -> str:
        return generate_word(concept, self.seed, self.genome, syllables=syllables)

    __call__ = generate


__all__ = ["generate_word", "WordGenerator"]
