"""
Shared test helpers
===================
Random sources with scripted draws, for tests that pin exact picks.
"""

import random
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlang.generators.entropy import RandomSource


class ScriptedRandom(RandomSource):
    """Returns scripted floats from random()."""

    def __init__(self, values):
        super().__init__(random.Random(0))
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class ConstantRandom(RandomSource):
    """Returns the same float forever."""

    def __init__(self, value):
        super().__init__(random.Random(0))
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def scripted():
    """Factory for sources that replay a list of random() draws."""
    return ScriptedRandom


@pytest.fixture
def constant():
    """Factory for sources whose random() never changes."""
    return ConstantRandom
