#!/usr/bin/env python3
"""
Syllable Templates
==================
Turns a language's syllable template into raw syllables.

Template codes:
    C/c  consonant    V/v  vowel    E/e  ending
    G/g  glide        S/s  sibilant

Upper case slots are always filled. Lower case slots are filled on a coin
flip. Each filled slot takes a front-biased pick from its phoneme class.
"""

from typing import TYPE_CHECKING

from .entropy import RandomSource, biased_choice
from .phonemes import parse_template

if TYPE_CHECKING:
    from .language import BaseLanguage


def make_syllable(rng: RandomSource, base: 'BaseLanguage') -> str:
    """
    Build one syllable of raw phonetic symbols.

    Raises
    ------
    CatalogError
        If the template holds an unknown code. Templates come from the
        fixed catalog, so this means the catalog is broken.
    """
    phones = []
    for phoneme_class, mandatory in parse_template(base.template):
        if mandatory or rng.coin():
            phones.append(biased_choice(rng, base.phonemes.get(phoneme_class)))
    return ''.join(phones)


def make_spelled_syllable(rng: RandomSource, base: 'BaseLanguage') -> str:
    """Build one syllable and spell it out."""
    return base.orthography.transform(make_syllable(rng, base))
