#!/usr/bin/env python3
"""
Orthography
===========
Spells phonetic symbols out in Latin letters.

An orthography is a symbol -> spelling table built in layers: the catalog's
default map first, then a consonant style, then a vowel style. Later layers
win. Symbols without an entry are written as themselves.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple, Optional


class Orthography:
    """
    Immutable symbol -> spelling table.

    Usage:
        ortho = Orthography({'ʃ': 'sh'}).with_mapping([('ʃ', 'sch')])
        ortho.transform('ʃa')   # 'scha'
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._mapping = MappingProxyType(dict(mapping or {}))

    @classmethod
    def layered(cls, *layers: Iterable[Tuple[str, str]]) -> 'Orthography':
        """Build an orthography from layers applied in order."""
        ortho = cls()
        for layer in layers:
            ortho = ortho.with_mapping(layer)
        return ortho

    def with_mapping(self, mapping: Iterable[Tuple[str, str]]) -> 'Orthography':
        """Return a new orthography with mapping laid over this one."""
        if isinstance(mapping, Mapping):
            mapping = mapping.items()
        merged: Dict[str, str] = dict(self._mapping)
        merged.update(mapping)
        return Orthography(merged)

    @property
    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the table."""
        return self._mapping

    def get_mapping(self, symbol: str) -> str:
        return self._mapping.get(symbol, symbol)

    def transform(self, text: Iterable[str]) -> str:
        """Spell out every symbol of text and join the results."""
        return ''.join(self.get_mapping(symbol) for symbol in text)

    def __eq__(self, other):
        if not isinstance(other, Orthography):
            return NotImplemented
        return dict(self._mapping) == dict(other._mapping)

    def __hash__(self):
        return hash(frozenset(self._mapping.items()))

    def __repr__(self):
        return f"Orthography({dict(self._mapping)!r})"
