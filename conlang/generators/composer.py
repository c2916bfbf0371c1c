#!/usr/bin/env python3
"""
Word Composer
=============
Strings syllables into words.

Word length is skewed toward the language's minimum syllable count. When a
morpheme list is given, each slot may reuse a morpheme instead of a fresh
syllable, which gives names of one category a shared flavour.

Spelling is applied once to the whole word, so multi-symbol spellings work
across syllable boundaries.
"""

from typing import List, Optional, Sequence, TYPE_CHECKING

from .entropy import RandomSource, biased_choice
from .syllables import make_syllable

if TYPE_CHECKING:
    from .language import BaseLanguage

MORPHEME_CHANCE = 0.25


def syllable_count(rng: RandomSource, base: 'BaseLanguage') -> int:
    """Draw a syllable count in [min, max], favouring short words."""
    x = rng.random()
    span = base.max_syllable_count - base.min_syllable_count + 1
    return int(base.min_syllable_count + x * x * span)


def compose_syllables(rng: RandomSource,
                      base: 'BaseLanguage',
                      morphemes: Optional[Sequence[str]] = None,
                      morpheme_chance: float = MORPHEME_CHANCE) -> List[str]:
    """Draw the raw syllables of one word."""
    syllables = []
    for _ in range(syllable_count(rng, base)):
        if morphemes and rng.random() < morpheme_chance:
            syllables.append(biased_choice(rng, morphemes))
        else:
            syllables.append(make_syllable(rng, base))
    return syllables


def make_word(rng: RandomSource,
              base: 'BaseLanguage',
              morphemes: Optional[Sequence[str]] = None,
              morpheme_chance: float = MORPHEME_CHANCE) -> str:
    """
    Compose one spelled-out word.

    Parameters
    ----------
    rng : RandomSource
        Source for every draw
    base : BaseLanguage
        Phonology and spelling of the language
    morphemes : sequence, optional
        Raw (unspelled) morphemes that may stand in for syllables
    morpheme_chance : float
        Chance per slot of using a morpheme when morphemes are given

    Returns
    -------
    str
        The word, spelled with the language's orthography
    """
    raw = ''.join(compose_syllables(rng, base, morphemes, morpheme_chance))
    return base.orthography.transform(raw)
