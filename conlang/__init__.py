#!/usr/bin/env python3
"""
conlang - Fictional Language & Name Generator
=============================================

Generates a self-consistent fictional language (phonemes, syllable
structure, spelling, a few function words and name morphemes) and uses it
to make words, place names, region names and person names.

Quick Start
-----------
    from conlang import Language, SeededRandom

    lang = Language.from_seed("NotEnglish")

    lang.genitive, lang.definite, lang.titles
    lang.make_word()

    # Reproducible names: pass an explicit random source
    rng = SeededRandom.from_string("names")
    long_form, short_form = lang.make_place_rng(rng)

Modules
-------
    conlang.generators - The generation engine
    conlang.settings   - app.yaml settings
    conlang.cli        - Command-line interface

CLI Usage
---------
    python -m conlang describe --seed NotEnglish
    python -m conlang places -n 10 --seed NotEnglish
"""

__version__ = "0.1.0"
__author__ = "conlang"

from . import generators

from .generators import (
    Language,
    BaseLanguage,
    NamingPolicy,
    PhonemeInventory,
    Orthography,
    RandomSource,
    SeededRandom,
    TrueRandom,
    CatalogError,
    get_rng,
    seed_bytes,
    biased_index,
    capitalize,
)

__all__ = [
    'Language',
    'BaseLanguage',
    'NamingPolicy',
    'PhonemeInventory',
    'Orthography',
    'RandomSource',
    'SeededRandom',
    'TrueRandom',
    'CatalogError',
    'get_rng',
    'seed_bytes',
    'biased_index',
    'capitalize',
]
