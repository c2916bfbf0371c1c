#!/usr/bin/env python3
"""
Language Generators
===================
The generation engine, leaves first:
- orthography: symbol -> spelling tables
- inventory: per-language phoneme sets
- syllables: syllable template interpreter
- composer: words from syllables and morphemes
- language: language assembly and naming
"""

from .entropy import (
    RandomSource,
    SeededRandom,
    TrueRandom,
    get_rng,
    seed_bytes,
    biased_index,
    biased_choice,
)
from .phonemes import (
    Catalog,
    CatalogError,
    load_catalog,
    parse_template,
)
from .orthography import Orthography
from .inventory import PhonemeInventory
from .syllables import make_syllable, make_spelled_syllable
from .composer import make_word, compose_syllables, syllable_count
from .language import (
    BaseLanguage,
    Language,
    NamingPolicy,
    capitalize,
)

__all__ = [
    # Randomness
    'RandomSource',
    'SeededRandom',
    'TrueRandom',
    'get_rng',
    'seed_bytes',
    'biased_index',
    'biased_choice',
    # Catalog
    'Catalog',
    'CatalogError',
    'load_catalog',
    'parse_template',
    # Engine
    'Orthography',
    'PhonemeInventory',
    'make_syllable',
    'make_spelled_syllable',
    'make_word',
    'compose_syllables',
    'syllable_count',
    'BaseLanguage',
    'Language',
    'NamingPolicy',
    'capitalize',
]
