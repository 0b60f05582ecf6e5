"""Data structures for tematika."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Topic(Enum):
    # Declaration order is the tie-break for top_topic().
    MEDICINE = "medicine"
    HISTORY = "history"
    PROGRAMMING = "programming"
    NETWORKS = "networks"
    CRYPTOGRAPHY = "cryptography"
    FINANCE = "finance"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Topic, str] = {
    Topic.MEDICINE: "Медицина",
    Topic.HISTORY: "История",
    Topic.PROGRAMMING: "Программирование",
    Topic.NETWORKS: "Сети",
    Topic.CRYPTOGRAPHY: "Криптография",
    Topic.FINANCE: "Финансы",
}


@dataclass(slots=True, frozen=True)
class TopicDictionary:
    roots: frozenset[str] = frozenset()
    phrases: tuple[str, ...] = ()   # ordered, duplicates collapsed


_EMPTY_DETAILS: Mapping[str, int] = MappingProxyType({})


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Frozen outcome of a single analysis.

    ``scores`` and ``match_details`` are copied on construction into
    read-only views covering every topic, so callers may pass plain dicts.
    """

    scores: Mapping[Topic, int]
    match_details: Mapping[Topic, Mapping[str, int]]
    total_words: int

    # Read-only views are unhashable; results compare by value only.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        scores = self.scores
        details = self.match_details
        object.__setattr__(self, "scores", MappingProxyType(
            {t: int(scores.get(t, 0)) for t in Topic}
        ))
        object.__setattr__(self, "match_details", MappingProxyType({
            t: MappingProxyType(dict(details[t]))
            if details.get(t) else _EMPTY_DETAILS
            for t in Topic
        }))

    @classmethod
    def build(
        cls,
        scores: Mapping[Topic, int],
        match_details: Mapping[Topic, Mapping[str, int]],
        total_words: int,
    ) -> AnalysisResult:
        return cls(
            scores=scores,
            match_details=match_details,
            total_words=total_words,
        )

    def score(self, topic: Topic) -> int:
        return self.scores.get(topic, 0)

    def matched_terms(self, topic: Topic) -> Mapping[str, int]:
        return self.match_details.get(topic, _EMPTY_DETAILS)

    def top_topic(self) -> Topic:
        """Topic with the greatest score; ties go to the earlier topic."""
        return max(Topic, key=self.score)

    def percentage(self, topic: Topic) -> float:
        """Score of ``topic`` as a percentage of total words (0.0 if empty)."""
        if self.total_words == 0:
            return 0.0
        return self.score(topic) * 100.0 / self.total_words
