"""Word extraction and per-topic phrase scanning (Aho-Corasick)."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable

import ahocorasick

from ._types import Topic

if TYPE_CHECKING:
    from ._loader import DictionaryStore

_WORD_RE = re.compile(r"[а-яА-Яa-zA-Z]+")


def extract_words(text: str) -> list[str]:
    """Maximal runs of Cyrillic/Latin letters, lower-cased."""
    return [m.group().lower() for m in _WORD_RE.finditer(text)]


def _build_automaton(phrases: Iterable[str]) -> ahocorasick.Automaton | None:
    ac = ahocorasick.Automaton()
    n = 0
    for phrase in phrases:
        ac.add_word(phrase, phrase)
        n += 1
    if n == 0:
        return None
    ac.make_automaton()
    return ac


class PhraseScanner:
    """Counts non-overlapping literal phrase occurrences per topic."""

    __slots__ = ("_automata",)

    def __init__(self, store: DictionaryStore) -> None:
        self._automata: dict[Topic, ahocorasick.Automaton] = {}
        for topic in Topic:
            ac = _build_automaton(store.get_phrases(topic))
            if ac is not None:
                self._automata[topic] = ac

    def count(self, topic: Topic, text_lower: str) -> dict[str, int]:
        """Return phrase -> occurrence count for phrases found at least once.

        Each phrase is counted independently, scanning left to right; an
        occurrence is accepted only if it starts at or after the end of the
        previous accepted occurrence of the same phrase.
        """
        ac = self._automata.get(topic)
        if ac is None:
            return {}

        counts: dict[str, int] = {}
        last_end: dict[str, int] = {}
        # Matches arrive ordered by end position, so per phrase also by start.
        for end_inclusive, phrase in ac.iter(text_lower):
            end = end_inclusive + 1
            start = end - len(phrase)
            if start >= last_end.get(phrase, 0):
                counts[phrase] = counts.get(phrase, 0) + 1
                last_end[phrase] = end
        return counts
