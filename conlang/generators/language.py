#!/usr/bin/env python3
"""
Language Generator
==================
Assembles a complete fictional language and names things with it.

A Language is built once from a random source (or a seed string) and is
read-only afterwards. It carries:
- Phonology: phoneme inventory, syllable template, syllable bounds
- Spelling: a layered orthography
- Vocabulary: genitive ("of") and definite ("the") words, titles
- Name morphemes for places, regions and people

Every generator method takes the random source it draws from, so output is
a pure function of the language and that source.

Usage:
    from conlang import Language, SeededRandom

    lang = Language.from_seed("NotEnglish")
    lang.genitive, lang.definite
    lang.make_place()                   # (long form, short form)
    lang.make_person_rng(SeededRandom.from_string("stream"))
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Any, Optional, Sequence

from conlang.settings import get_setting

from .composer import make_word, MORPHEME_CHANCE
from .entropy import RandomSource, SeededRandom, get_rng, biased_choice
from .inventory import PhonemeInventory
from .orthography import Orthography
from .phonemes import Catalog, CatalogError, load_catalog, parse_template
from .syllables import make_syllable, make_spelled_syllable

logger = logging.getLogger(__name__)

MAX_SYLLABLES = 6
SHORT_TEMPLATE = 3

NameForms = Tuple[str, str]


def capitalize(text: str) -> str:
    """Upper-case the first character and keep the rest as is."""
    return text[:1].upper() + text[1:]


# =============================================================================
# Base Language
# =============================================================================

@dataclass(frozen=True)
class BaseLanguage:
    """Phonology and spelling of a language."""
    phonemes: PhonemeInventory
    orthography: Orthography
    template: str
    min_syllable_count: int
    max_syllable_count: int

    def __post_init__(self):
        if not 1 <= self.min_syllable_count < self.max_syllable_count <= MAX_SYLLABLES:
            raise CatalogError(
                f"Invalid syllable bounds {self.min_syllable_count}..{self.max_syllable_count}"
            )
        parse_template(self.template)

    @classmethod
    def from_random(cls, rng: RandomSource, catalog: Optional[Catalog] = None) -> 'BaseLanguage':
        """
        Draw phonemes, orthography layers, template and syllable bounds.

        Short templates (fewer than three codes) start one syllable higher
        so their words are not too short.
        """
        catalog = catalog or load_catalog()
        phonemes = PhonemeInventory.build(rng, catalog)
        c_name, c_map = rng.choice(catalog.consonant_maps)
        v_name, v_map = rng.choice(catalog.vowel_maps)
        orthography = Orthography.layered(catalog.default_map, c_map, v_map)
        template = rng.choice(catalog.syllables)
        min_syllables = rng.randrange(1, 3)
        if len(template) < SHORT_TEMPLATE:
            min_syllables += 1
        max_syllables = rng.randrange(min_syllables + 1, MAX_SYLLABLES + 1)
        logger.debug(
            "Base language: template=%s syllables=%d..%d spelling=%s/%s",
            template, min_syllables, max_syllables, c_name, v_name,
        )
        return cls(phonemes, orthography, template, min_syllables, max_syllables)


# =============================================================================
# Naming Policy
# =============================================================================

@dataclass(frozen=True)
class NamingPolicy:
    """Probabilities and sizes used when building and naming."""
    morpheme_chance: float = MORPHEME_CHANCE
    definite_chance: float = 0.1
    title_chance: float = 0.1
    title_capitalize_chance: float = 0.9
    place_morpheme_count: Tuple[int, int] = (5, 9)
    region_morpheme_count: Tuple[int, int] = (5, 9)
    person_morpheme_count: Tuple[int, int] = (7, 13)
    title_count: Tuple[int, int] = (4, 7)
    max_title_attempts: int = 1000

    @classmethod
    def from_settings(cls) -> 'NamingPolicy':
        """Build a policy from the ``naming`` section of app.yaml."""
        cfg = get_setting("naming", {}) or {}
        counts = cfg.get("morpheme_counts", {}) or {}
        kwargs: Dict[str, Any] = {}
        for key in ("morpheme_chance", "definite_chance", "title_chance",
                    "title_capitalize_chance"):
            if cfg.get(key) is not None:
                kwargs[key] = float(cfg[key])
        for category in ("place", "region", "person"):
            if counts.get(category):
                kwargs[f"{category}_morpheme_count"] = _int_range(counts[category], f"naming.morpheme_counts.{category}")
        if cfg.get("title_count"):
            kwargs["title_count"] = _int_range(cfg["title_count"], "naming.title_count")
        if cfg.get("max_title_attempts") is not None:
            kwargs["max_title_attempts"] = int(cfg["max_title_attempts"])
        return cls(**kwargs)


def _int_range(value: Sequence[int], context: str) -> Tuple[int, int]:
    low, high = (int(v) for v in value)
    if low < 1 or low > high:
        raise ValueError(f"{context} must be [min, max] with 1 <= min <= max")
    return low, high


# =============================================================================
# Language
# =============================================================================

@dataclass(frozen=True)
class Language:
    """
    A generated language and its fixed vocabulary.

    Morphemes are stored raw (unspelled) so that a name is spelled once,
    after its syllables are joined. Use ``spelled_morphemes()`` to read
    them as written.
    """
    base: BaseLanguage
    genitive: str
    definite: str
    place_morphemes: Tuple[str, ...]
    region_morphemes: Tuple[str, ...]
    person_morphemes: Tuple[str, ...]
    titles: Tuple[str, ...]
    surname_last: bool
    policy: NamingPolicy = field(default_factory=NamingPolicy)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_random(cls,
                    rng: RandomSource,
                    policy: Optional[NamingPolicy] = None,
                    catalog: Optional[Catalog] = None) -> 'Language':
        """
        Build a language from a random source.

        Draw order: base language, genitive, definite, place, region and
        person morphemes, titles, surname order.
        """
        policy = policy or NamingPolicy.from_settings()
        base = BaseLanguage.from_random(rng, catalog)
        genitive = make_spelled_syllable(rng, base)
        definite = make_spelled_syllable(rng, base)
        place = _make_morphemes(rng, base, policy.place_morpheme_count)
        region = _make_morphemes(rng, base, policy.region_morpheme_count)
        person = _make_morphemes(rng, base, policy.person_morpheme_count)
        titles = _make_titles(rng, base, policy)
        surname_last = rng.coin()
        logger.debug(
            "Language: genitive=%r definite=%r titles=%s surname_last=%s",
            genitive, definite, titles, surname_last,
        )
        return cls(base, genitive, definite, place, region, person, titles,
                   surname_last, policy)

    @classmethod
    def from_seed(cls, seed: str, policy: Optional[NamingPolicy] = None) -> 'Language':
        """Build the language for a seed string. Any string is accepted."""
        return cls.from_random(SeededRandom.from_string(seed), policy)

    # -------------------------------------------------------------------------
    # Words
    # -------------------------------------------------------------------------

    def make_word_rng(self, rng: RandomSource) -> str:
        """Generate a plain word (no name morphemes)."""
        return make_word(rng, self.base)

    def make_word(self) -> str:
        return self.make_word_rng(get_rng())

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    def make_place_rng(self, rng: RandomSource) -> NameForms:
        """Generate a place name as (long form, short form)."""
        return self._make_location(rng, self.place_morphemes)

    def make_place(self) -> NameForms:
        return self.make_place_rng(get_rng())

    def make_region_rng(self, rng: RandomSource) -> NameForms:
        """Generate a region name as (long form, short form)."""
        return self._make_location(rng, self.region_morphemes)

    def make_region(self) -> NameForms:
        return self.make_region_rng(get_rng())

    def make_person_rng(self, rng: RandomSource) -> NameForms:
        """
        Generate a person name as (long form, short form).

        For two-word names the short form is the surname; which word that
        is depends on ``surname_last``. A title, when drawn, goes on both
        forms.
        """
        long_form, first, second = self._make_name(rng, self.person_morphemes)
        if second is None:
            short_form = first
        else:
            short_form = second if self.surname_last else first
        if rng.random() < self.policy.title_chance:
            title = biased_choice(rng, self.titles)
            long_form = f"{title} {long_form}"
            short_form = f"{title} {short_form}"
        return long_form, short_form

    def make_person(self) -> NameForms:
        return self.make_person_rng(get_rng())

    def _make_location(self, rng: RandomSource, morphemes: Sequence[str]) -> NameForms:
        long_form, first, _ = self._make_name(rng, morphemes)
        if rng.random() < self.policy.definite_chance:
            long_form = f"{capitalize(self.definite)} {long_form}"
        return long_form, first

    def _make_name(self, rng: RandomSource,
                   morphemes: Sequence[str]) -> Tuple[str, str, Optional[str]]:
        """Return (joined name, first word, second word or None)."""
        if not rng.coin():
            word = capitalize(self._name_word(rng, morphemes))
            return word, word, None
        first = capitalize(self._name_word(rng, morphemes))
        second = capitalize(self._name_word(rng, morphemes))
        joiner = f" {self.genitive} " if rng.coin() else " "
        return joiner.join((first, second)), first, second

    def _name_word(self, rng: RandomSource, morphemes: Sequence[str]) -> str:
        return make_word(rng, self.base, morphemes, self.policy.morpheme_chance)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def spelled_morphemes(self, category: str) -> Tuple[str, ...]:
        """Morphemes of 'place', 'region' or 'person' as written."""
        try:
            raw = getattr(self, f"{category}_morphemes")
        except AttributeError:
            raise ValueError(f"Unknown morpheme category '{category}'") from None
        return tuple(self.base.orthography.transform(m) for m in raw)

    def describe(self) -> Dict[str, Any]:
        """Summarize the language as plain, JSON-friendly data."""
        phonemes = self.base.phonemes
        return {
            'phonemes': {
                'consonants': ''.join(phonemes.consonants),
                'vowels': ''.join(phonemes.vowels),
                'sibilants': ''.join(phonemes.sibilants),
                'glides': ''.join(phonemes.glides),
                'endings': ''.join(phonemes.endings),
            },
            'template': self.base.template,
            'syllables': [self.base.min_syllable_count, self.base.max_syllable_count],
            'orthography': dict(self.base.orthography.mapping),
            'genitive': self.genitive,
            'definite': self.definite,
            'titles': list(self.titles),
            'surname_last': self.surname_last,
            'morphemes': {
                category: list(self.spelled_morphemes(category))
                for category in ('place', 'region', 'person')
            },
        }


# =============================================================================
# Vocabulary Builders
# =============================================================================

def _make_morphemes(rng: RandomSource, base: BaseLanguage,
                    count: Tuple[int, int]) -> Tuple[str, ...]:
    return tuple(make_syllable(rng, base) for _ in range(rng.randint(*count)))


def _make_titles(rng: RandomSource, base: BaseLanguage,
                 policy: NamingPolicy) -> Tuple[str, ...]:
    """Draw distinct titles, rejecting repeats."""
    count = rng.randint(*policy.title_count)
    titles: List[str] = []
    attempts = 0
    while len(titles) < count:
        attempts += 1
        if attempts > policy.max_title_attempts:
            raise CatalogError(
                f"Could not draw {count} distinct titles from template '{base.template}'"
            )
        title = make_spelled_syllable(rng, base)
        if rng.random() < policy.title_capitalize_chance:
            title = capitalize(title)
        if title not in titles:
            titles.append(title)
    return tuple(titles)


__all__ = [
    'BaseLanguage',
    'Language',
    'NamingPolicy',
    'NameForms',
    'capitalize',
]
