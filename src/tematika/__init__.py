"""Tematika: dictionary-based topic classification for Russian text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._chart import build_chart, write_chart
from ._document import read_document
from ._errors import (
    DictionaryChecksumError,
    DictionaryError,
    DocumentError,
    ResultVersionError,
    TematikaError,
    UnsupportedFormatError,
)
from ._loader import DictionaryStore, load_dictionaries
from ._report import format_report, write_report
from ._serialize import pack_result, unpack_result
from ._stemmer import Stemmer
from ._types import AnalysisResult, Topic, TopicDictionary

if TYPE_CHECKING:
    from pathlib import Path

    from ._analyzer import TopicAnalyzer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "AnalysisResult",
    "DictionaryChecksumError",
    "DictionaryError",
    "DictionaryStore",
    "DocumentError",
    "ResultVersionError",
    "Stemmer",
    "TematikaError",
    "Topic",
    "TopicAnalyzer",
    "TopicDictionary",
    "UnsupportedFormatError",
    "build_chart",
    "format_report",
    "load_dictionaries",
    "pack_result",
    "read_document",
    "unpack_result",
    "write_chart",
    "write_report",
]


def load(data_dir: Path | str | None = None) -> "TopicAnalyzer":
    """Load dictionaries and return a ready-to-use TopicAnalyzer.

    Args:
        data_dir: Path to dictionary directory. If None, uses bundled package data.
    """
    from ._analyzer import TopicAnalyzer

    return TopicAnalyzer(load_dictionaries(data_dir))


# Deferred import so TopicAnalyzer is available as tematika.TopicAnalyzer
# without pulling in ahocorasick until it is needed.
def __getattr__(name: str):
    if name == "TopicAnalyzer":
        from ._analyzer import TopicAnalyzer
        return TopicAnalyzer
    raise AttributeError(f"module 'tematika' has no attribute {name!r}")
