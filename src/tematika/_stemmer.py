"""Suffix-stripping stemmer for Russian word forms."""

from __future__ import annotations

_VOWELS = "аеиоуыэюя"

# Suffix lists are scanned in declared order and the first hit wins,
# so reordering them changes classification output.
PERFECTIVE_GERUND: tuple[str, ...] = (
    "ив", "ивши", "ившись", "ыв", "ывши", "ывшись",
)

ADJECTIVE: tuple[str, ...] = (
    "ее", "ие", "ые", "ое", "ими", "ыми", "ей", "ий", "ый", "ой",
    "ем", "им", "ым", "ом", "его", "ого", "ему", "ому", "их", "ых",
    "ую", "юю", "ая", "яя", "ою", "ею",
)

VERB: tuple[str, ...] = (
    "ла", "на", "ете", "йте", "ли", "й", "л", "ем", "н", "ло",
    "но", "ет", "ют", "ны", "ть", "ешь", "нно",
)

NOUN: tuple[str, ...] = (
    "а", "ев", "ов", "ие", "ье", "е", "иями", "ями", "ами", "еи",
    "ии", "и", "ией", "ей", "ой", "ий", "й", "иям", "ям", "ием",
    "ем", "ам", "ом", "о", "у", "ах", "иях", "ях", "ы", "ь",
    "ию", "ью", "ю", "ия", "ья", "я",
)

_SOFT_SIGN = "ь"


def _find_rv(word: str) -> str:
    """Return the region after the first vowel that is not the last letter."""
    last = len(word) - 1
    for i, ch in enumerate(word):
        if i < last and ch in _VOWELS:
            return word[i + 1:]
    return ""


def _remove_suffix(word: str, suffixes: tuple[str, ...]) -> str:
    for suffix in suffixes:
        if word.endswith(suffix):
            return word[: len(word) - len(suffix)]
    return word


class Stemmer:
    """Reduce a word to its root by stripping known grammatical endings.

    Only the region after the first vowel is ever modified; everything up to
    and including that vowel is kept verbatim. Stateless, so one instance can
    be shared freely.
    """

    __slots__ = ()

    def stem(self, word: str) -> str:
        word = word.lower().strip()
        if len(word) < 3:
            return word

        rv = _find_rv(word)
        if not rv:
            return word

        stemmed = _remove_suffix(rv, PERFECTIVE_GERUND)
        if stemmed == rv:
            stemmed = _remove_suffix(rv, ADJECTIVE)
            stemmed = _remove_suffix(stemmed, VERB)
            stemmed = _remove_suffix(stemmed, NOUN)

        if stemmed.endswith(_SOFT_SIGN):
            stemmed = stemmed[:-1]

        return word[: len(word) - len(rv)] + stemmed

    def stem_words(self, words: list[str]) -> list[str]:
        return [self.stem(w) for w in words]
