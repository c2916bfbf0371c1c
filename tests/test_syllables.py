"""
Tests for Syllable Templates
============================
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlang.generators.entropy import SeededRandom
from conlang.generators.inventory import PhonemeInventory
from conlang.generators.language import BaseLanguage
from conlang.generators.orthography import Orthography
from conlang.generators.phonemes import CatalogError
from conlang.generators.syllables import make_syllable, make_spelled_syllable


SINGLETONS = PhonemeInventory(('p',), ('a',), ('s',), ('l',), ('m',))


def base_language(template, phonemes=SINGLETONS, orthography=None):
    return BaseLanguage(phonemes, orthography or Orthography(), template, 1, 3)


class TestMakeSyllable:
    """Tests for template interpretation."""

    def test_mandatory_codes(self):
        base = base_language('CVC')
        assert make_syllable(SeededRandom.from_string("x"), base) == 'pap'

    def test_every_class(self):
        base = base_language('SCGVE')
        assert make_syllable(SeededRandom.from_string("x"), base) == 'spla' + 'm'

    def test_optional_code_taken(self, scripted):
        rng = scripted([0.1, 0.0, 0.0, 0.0, 0.0])
        assert make_syllable(rng, base_language('sCVE')) == 'spam'
        assert rng.values == []

    def test_optional_code_skipped(self, scripted):
        # A skipped slot only consumes its coin flip
        rng = scripted([0.9, 0.0, 0.0, 0.0])
        assert make_syllable(rng, base_language('sCVE')) == 'pam'
        assert rng.values == []

    def test_weighted_pick(self, scripted):
        phonemes = PhonemeInventory(('p', 't', 'k'), ('a', 'e', 'i'), ('s',), ('l',), ('m',))
        base = base_language('CV', phonemes)
        # 0.6 ** 2 * 3 = 1.08 -> index 1; 0.0 -> index 0
        assert make_syllable(scripted([0.6, 0.0]), base) == 'ta'
        assert make_syllable(scripted([0.0, 0.99]), base) == 'pi'

    def test_unknown_code_raises(self):
        broken = SimpleNamespace(template='CXV', phonemes=SINGLETONS)
        with pytest.raises(CatalogError):
            make_syllable(SeededRandom.from_string("x"), broken)

    def test_symbols_come_from_inventory(self):
        phonemes = PhonemeInventory(tuple('ptk'), tuple('aiu'), ('s',), tuple('rl'), tuple('mn'))
        base = base_language('cgVe', phonemes)
        allowed = set('ptkaiusrlmn')
        rng = SeededRandom.from_string("symbols")
        for _ in range(200):
            syllable = make_syllable(rng, base)
            assert set(syllable) <= allowed
            assert 1 <= len(syllable) <= 4
            assert any(v in syllable for v in 'aiu')


class TestMakeSpelledSyllable:
    """Tests for spelled syllables."""

    def test_spelled(self):
        base = base_language('CVC', orthography=Orthography({'p': 'ph'}))
        assert make_spelled_syllable(SeededRandom.from_string("x"), base) == 'phaph'


class TestBaseLanguage:
    """Tests for syllable bound invariants."""

    @pytest.mark.parametrize('bounds', [(2, 2), (0, 3), (1, 7), (3, 2)])
    def test_invalid_bounds_raise(self, bounds):
        with pytest.raises(CatalogError):
            BaseLanguage(SINGLETONS, Orthography(), 'CV', *bounds)

    def test_invalid_template_raises(self):
        with pytest.raises(CatalogError):
            BaseLanguage(SINGLETONS, Orthography(), 'CVX', 1, 2)

    def test_from_random_bounds(self):
        for i in range(100):
            base = BaseLanguage.from_random(SeededRandom.from_string(f"bounds-{i}"))
            assert 1 <= base.min_syllable_count < base.max_syllable_count <= 6
            if len(base.template) < 3:
                assert base.min_syllable_count in (2, 3)
            else:
                assert base.min_syllable_count in (1, 2)
