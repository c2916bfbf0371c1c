#!/usr/bin/env python3
"""
Phonology Catalog Loader
========================
Loads the fixed phonology catalogs from YAML for the language generator.

The catalog holds every table a language is assembled from:
- Orthography layers (default map, consonant styles, vowel styles)
- Syllable templates
- Candidate phoneme sets for the five phoneme classes

Usage:
    from conlang.generators.phonemes import load_catalog

    catalog = load_catalog()
    catalog.syllables        # ('CVC', 'CVvC', ...)
    catalog.consonant_sets   # (('minimal', 'ptkmnls'), ...)

Entries keep their file order; languages pick them by index, so the order
is part of the seeded output.
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, List, Tuple, Any
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent
CATALOG_FILE = 'catalog.yaml'

# Template code -> phoneme class. Upper case is mandatory, lower optional.
TEMPLATE_CODES = {
    'C': 'consonants',
    'V': 'vowels',
    'E': 'endings',
    'G': 'glides',
    'S': 'sibilants',
}

# Order in which a language draws its phoneme sets
PHONEME_CLASSES = ('consonants', 'vowels', 'sibilants', 'glides', 'endings')


class CatalogError(ValueError):
    """Raised when the fixed catalog breaks one of its invariants."""


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

Mapping = Tuple[Tuple[str, str], ...]
NamedSets = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Catalog:
    """Frozen view of the phonology catalog."""
    default_map: Mapping
    consonant_maps: Tuple[Tuple[str, Mapping], ...]
    vowel_maps: Tuple[Tuple[str, Mapping], ...]
    syllables: Tuple[str, ...]
    consonant_sets: NamedSets
    vowel_sets: NamedSets
    sibilant_sets: NamedSets
    glide_sets: NamedSets
    ending_sets: NamedSets

    def phoneme_sets(self, phoneme_class: str) -> NamedSets:
        """Get the candidate sets for one phoneme class."""
        try:
            return getattr(self, f"{phoneme_class[:-1]}_sets")
        except AttributeError:
            raise CatalogError(f"Unknown phoneme class '{phoneme_class}'") from None


# =============================================================================
# Validation
# =============================================================================

def parse_template(template: str) -> List[Tuple[str, bool]]:
    """
    Split a syllable template into (phoneme class, mandatory) pairs.

    Raises
    ------
    CatalogError
        If the template contains a code outside ``CcVvEeGgSs``.
    """
    slots = []
    for code in template:
        phoneme_class = TEMPLATE_CODES.get(code.upper())
        if phoneme_class is None:
            raise CatalogError(f"Unknown syllable template code '{code}' in '{template}'")
        slots.append((phoneme_class, code.isupper()))
    return slots


def _mapping(data: Any, context: str) -> Mapping:
    if not isinstance(data, dict):
        raise CatalogError(f"{context} must be a mapping")
    pairs = []
    for symbol, spelling in data.items():
        symbol = str(symbol)
        if len(symbol) != 1:
            raise CatalogError(f"{context}: key '{symbol}' must be a single symbol")
        pairs.append((symbol, str(spelling)))
    return tuple(pairs)


def _named_maps(data: Any, context: str) -> Tuple[Tuple[str, Mapping], ...]:
    if not isinstance(data, dict) or not data:
        raise CatalogError(f"{context} must be a non-empty mapping")
    return tuple((name, _mapping(m or {}, f"{context}.{name}")) for name, m in data.items())


def _named_sets(data: Any, context: str) -> NamedSets:
    if not isinstance(data, dict) or not data:
        raise CatalogError(f"{context} must be a non-empty mapping")
    sets = []
    for name, symbols in data.items():
        if not symbols:
            raise CatalogError(f"{context}.{name} must not be empty")
        sets.append((name, str(symbols)))
    return tuple(sets)


def build_catalog(raw: Dict[str, Any]) -> Catalog:
    """Validate raw catalog data and freeze it."""
    ortho = raw.get('orthography') or {}
    phonemes = raw.get('phonemes') or {}
    missing = [c for c in PHONEME_CLASSES if c not in phonemes]
    if missing:
        raise CatalogError(f"phonemes is missing classes: {', '.join(missing)}")

    syllables = tuple(str(s) for s in raw.get('syllables') or ())
    if not syllables:
        raise CatalogError("syllables must list at least one template")
    for template in syllables:
        if not template:
            raise CatalogError("syllable templates must not be empty")
        parse_template(template)

    return Catalog(
        default_map=_mapping(ortho.get('default') or {}, 'orthography.default'),
        consonant_maps=_named_maps(ortho.get('consonants'), 'orthography.consonants'),
        vowel_maps=_named_maps(ortho.get('vowels'), 'orthography.vowels'),
        syllables=syllables,
        consonant_sets=_named_sets(phonemes['consonants'], 'phonemes.consonants'),
        vowel_sets=_named_sets(phonemes['vowels'], 'phonemes.vowels'),
        sibilant_sets=_named_sets(phonemes['sibilants'], 'phonemes.sibilants'),
        glide_sets=_named_sets(phonemes['glides'], 'phonemes.glides'),
        ending_sets=_named_sets(phonemes['endings'], 'phonemes.endings'),
    )


# =============================================================================
# Loaders
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Missing phonology catalog: {filepath}")
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_catalog() -> Catalog:
    """Load and validate the phonology catalog (cached)."""
    catalog = build_catalog(_load_yaml(CATALOG_FILE))
    logger.debug(
        "Loaded catalog: %d templates, %d consonant sets, %d vowel sets",
        len(catalog.syllables), len(catalog.consonant_sets), len(catalog.vowel_sets),
    )
    return catalog


def reload_catalog() -> Catalog:
    """Drop the cached catalog and load it again."""
    load_catalog.cache_clear()
    return load_catalog()


__all__ = [
    'Catalog',
    'CatalogError',
    'PHONEME_CLASSES',
    'TEMPLATE_CODES',
    'build_catalog',
    'load_catalog',
    'parse_template',
    'reload_catalog',
]
