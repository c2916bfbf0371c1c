"""
Tests for the Phonology Catalog
===============================
The catalog is fixed data; these tests guard its invariants.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlang.generators.phonemes import (
    Catalog,
    CatalogError,
    PHONEME_CLASSES,
    build_catalog,
    load_catalog,
    parse_template,
    reload_catalog,
)


def minimal_raw():
    return {
        'orthography': {
            'default': {'ʃ': 'sh'},
            'consonants': {'plain': {}},
            'vowels': {'plain': {}},
        },
        'syllables': ['CV'],
        'phonemes': {c: {'only': 'ab'} for c in PHONEME_CLASSES},
    }


class TestLoadCatalog:
    """Tests for the shipped catalog."""

    @pytest.fixture
    def catalog(self):
        return load_catalog()

    def test_returns_catalog(self, catalog):
        assert isinstance(catalog, Catalog)

    def test_is_cached(self, catalog):
        assert load_catalog() is catalog

    def test_reload(self, catalog):
        assert reload_catalog() == catalog

    def test_catalog_sizes(self, catalog):
        assert len(catalog.syllables) == 22
        assert len(catalog.consonant_sets) == 8
        assert len(catalog.vowel_sets) == 7
        assert len(catalog.sibilant_sets) == 3
        assert len(catalog.glide_sets) == 5
        assert len(catalog.ending_sets) == 4
        assert len(catalog.consonant_maps) == 5
        assert len(catalog.vowel_maps) == 5

    def test_every_phoneme_set_non_empty(self, catalog):
        for phoneme_class in PHONEME_CLASSES:
            sets = catalog.phoneme_sets(phoneme_class)
            assert sets
            for name, symbols in sets:
                assert symbols, f"{phoneme_class}.{name} is empty"

    def test_every_template_parses(self, catalog):
        for template in catalog.syllables:
            assert parse_template(template)

    def test_every_template_has_mandatory_vowel(self, catalog):
        for template in catalog.syllables:
            assert 'V' in template

    def test_first_layers_are_plain(self, catalog):
        assert catalog.consonant_maps[0] == ('plain', ())
        assert catalog.vowel_maps[0] == ('plain', ())

    def test_default_map(self, catalog):
        default = dict(catalog.default_map)
        assert default['ʃ'] == 'sh'
        assert default['ŋ'] == 'ng'
        assert default['A'] == 'á'

    def test_mapping_values_non_empty(self, catalog):
        layers = [catalog.default_map]
        layers += [m for _, m in catalog.consonant_maps]
        layers += [m for _, m in catalog.vowel_maps]
        for layer in layers:
            for symbol, spelling in layer:
                assert len(symbol) == 1
                assert spelling

    def test_unknown_phoneme_class(self, catalog):
        with pytest.raises(CatalogError):
            catalog.phoneme_sets('clicks')


class TestParseTemplate:
    """Tests for syllable template parsing."""

    def test_mandatory_and_optional(self):
        assert parse_template('cVC') == [
            ('consonants', False),
            ('vowels', True),
            ('consonants', True),
        ]

    def test_all_codes(self):
        classes = [c for c, _ in parse_template('CVEGS')]
        assert classes == ['consonants', 'vowels', 'endings', 'glides', 'sibilants']
        assert all(not m for _, m in parse_template('cvegs'))

    def test_unknown_code_raises(self):
        with pytest.raises(CatalogError):
            parse_template('CXV')

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestBuildCatalog:
    """Tests for catalog validation."""

    def test_minimal_catalog(self):
        catalog = build_catalog(minimal_raw())
        assert catalog.syllables == ('CV',)
        assert catalog.vowel_sets == (('only', 'ab'),)

    def test_missing_phoneme_class(self):
        raw = minimal_raw()
        del raw['phonemes']['glides']
        with pytest.raises(CatalogError, match='glides'):
            build_catalog(raw)

    def test_empty_phoneme_set(self):
        raw = minimal_raw()
        raw['phonemes']['vowels'] = {'none': ''}
        with pytest.raises(CatalogError):
            build_catalog(raw)

    def test_no_templates(self):
        raw = minimal_raw()
        raw['syllables'] = []
        with pytest.raises(CatalogError):
            build_catalog(raw)

    def test_bad_template(self):
        raw = minimal_raw()
        raw['syllables'] = ['CVQ']
        with pytest.raises(CatalogError):
            build_catalog(raw)

    def test_multi_symbol_key(self):
        raw = minimal_raw()
        raw['orthography']['default'] = {'sh': 'x'}
        with pytest.raises(CatalogError):
            build_catalog(raw)

    def test_empty_mapping_layers(self):
        raw = minimal_raw()
        raw['orthography']['vowels'] = {}
        with pytest.raises(CatalogError):
            build_catalog(raw)
