#!/usr/bin/env python3
"""
Phoneme Inventory
=================
Picks the five phoneme sets of a language and fixes their frequency order.

Each class draws one candidate set from the catalog and shuffles it. After
the shuffle, position 0 is the most frequent phoneme of the class.
Draw order is consonants, vowels, sibilants, glides, endings; changing it
changes every seeded language.
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Optional

from .entropy import RandomSource
from .phonemes import Catalog, CatalogError, PHONEME_CLASSES, load_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhonemeInventory:
    """Five phoneme sets, each ordered most to least frequent."""
    consonants: Tuple[str, ...]
    vowels: Tuple[str, ...]
    sibilants: Tuple[str, ...]
    glides: Tuple[str, ...]
    endings: Tuple[str, ...]

    def __post_init__(self):
        for phoneme_class in PHONEME_CLASSES:
            if not getattr(self, phoneme_class):
                raise CatalogError(f"Phoneme class '{phoneme_class}' is empty")

    def get(self, phoneme_class: str) -> Tuple[str, ...]:
        """Get the ordered set for a class name such as 'vowels'."""
        if phoneme_class not in PHONEME_CLASSES:
            raise CatalogError(f"Unknown phoneme class '{phoneme_class}'")
        return getattr(self, phoneme_class)

    @classmethod
    def build(cls, rng: RandomSource, catalog: Optional[Catalog] = None) -> 'PhonemeInventory':
        """Draw and shuffle one candidate set per class."""
        catalog = catalog or load_catalog()
        sets = {}
        for phoneme_class in PHONEME_CLASSES:
            name, symbols = rng.choice(catalog.phoneme_sets(phoneme_class))
            symbols = list(symbols)
            rng.shuffle(symbols)
            logger.debug("%s: %s -> %s", phoneme_class, name, ''.join(symbols))
            sets[phoneme_class] = tuple(symbols)
        return cls(**sets)
