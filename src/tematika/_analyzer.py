"""TopicAnalyzer: tokenize, stem, match dictionaries, aggregate scores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._stemmer import Stemmer
from ._tokenizer import PhraseScanner, extract_words
from ._types import AnalysisResult, Topic

if TYPE_CHECKING:
    from ._loader import DictionaryStore

logger = logging.getLogger(__name__)

# A phrase occurrence counts as much as two single-word matches.
PHRASE_WEIGHT = 2


class TopicAnalyzer:
    """Main classification engine. Holds the dictionaries and exposes the public API."""

    __slots__ = ("_store", "_stemmer", "_phrases")

    def __init__(
        self, store: DictionaryStore, stemmer: Stemmer | None = None
    ) -> None:
        self._store = store
        self._stemmer = stemmer if stemmer is not None else Stemmer()
        self._phrases = PhraseScanner(store)

    @property
    def store(self) -> DictionaryStore:
        return self._store

    # -- Public API --

    def analyze(self, text: str) -> AnalysisResult:
        """Score a text against every topic dictionary."""
        words = extract_words(text)
        logger.debug("Extracted %d words", len(words))

        scores: dict[Topic, int] = {t: 0 for t in Topic}
        details: dict[Topic, dict[str, int]] = {t: {} for t in Topic}

        # Words: one point per stemmed token per matching topic.
        for stem in self._stemmer.stem_words(words):
            for topic in Topic:
                if self._store.contains_word(topic, stem):
                    matches = details[topic]
                    matches[stem] = matches.get(stem, 0) + 1
                    scores[topic] += 1

        # Phrases: literal substrings of the lower-cased original text.
        text_lower = text.lower()
        for topic in Topic:
            for phrase, count in self._phrases.count(topic, text_lower).items():
                details[topic][phrase] = count
                scores[topic] += PHRASE_WEIGHT * count

        result = AnalysisResult.build(scores, details, len(words))
        logger.info(
            "Analysis finished: %d words, top topic %s",
            result.total_words, result.top_topic().name,
        )
        return result

    def analyze_batch(self, texts: list[str]) -> list[AnalysisResult]:
        """Analyze multiple texts."""
        return [self.analyze(t) for t in texts]

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)

    def matching_topics(self, word: str) -> list[Topic]:
        """Topics whose dictionary accepts ``word`` after stemming."""
        stem = self._stemmer.stem(word)
        return [t for t in Topic if self._store.contains_word(t, stem)]
