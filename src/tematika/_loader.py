"""Topic dictionary loading, checksum verification, and default fallback."""

from __future__ import annotations

import hashlib
import json
import logging
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ._defaults import DEFAULT_ROOTS
from ._errors import DictionaryChecksumError, DictionaryError
from ._types import Topic, TopicDictionary

logger = logging.getLogger(__name__)

_MANIFEST_VERSION = "1.0"

_EMPTY = TopicDictionary()


def _default_data_dir() -> Path:
    return Path(str(resources.files("tematika") / "data"))


def dictionary_filename(topic: Topic) -> str:
    return f"{topic.value}.txt"


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, str]:
    """Return filename -> sha256, or an empty dict when there is no usable manifest.

    An unreadable, malformed or wrong-version manifest is ignored with a
    warning; dictionaries are then read without checksum verification.
    """
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        return {}
    try:
        with open(manifest_path, encoding="utf-8") as f:
            manifest: Any = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable manifest %s: %s", manifest_path, exc)
        return {}

    if not isinstance(manifest, dict):
        logger.warning("Ignoring malformed manifest %s: expected an object", manifest_path)
        return {}
    version = manifest.get("version")
    if version != _MANIFEST_VERSION:
        logger.warning(
            "Ignoring manifest %s: expected version %r, got %r",
            manifest_path, _MANIFEST_VERSION, version,
        )
        return {}
    files = manifest.get("files", {})
    if not isinstance(files, dict):
        logger.warning("Ignoring malformed manifest %s: 'files' is not an object", manifest_path)
        return {}

    checksums: dict[str, str] = {}
    for name, digest in files.items():
        if isinstance(name, str) and isinstance(digest, str):
            checksums[name] = digest
        else:
            logger.warning("Skipping malformed manifest entry %r: %r", name, digest)
    return checksums


def parse_dictionary(lines: list[str]) -> TopicDictionary:
    """Split dictionary lines into roots and phrases.

    Blank lines and ``#`` comments are skipped. A line with internal
    whitespace is a phrase, anything else is a root.
    """
    roots: set[str] = set()
    phrases: dict[str, None] = {}
    for raw in lines:
        line = raw.strip().lower()
        if not line or line.startswith("#"):
            continue
        if len(line.split()) > 1:
            phrases.setdefault(line, None)
        else:
            roots.add(line)
    return TopicDictionary(roots=frozenset(roots), phrases=tuple(phrases))


def read_dictionary(
    path: Path, expected_sha256: str | None = None
) -> TopicDictionary:
    """Read one dictionary resource, raising DictionaryError on any failure."""
    if not path.is_file():
        raise DictionaryError(f"Dictionary not found: {path}")
    try:
        if expected_sha256 is not None:
            actual = _sha256(path)
            if actual != expected_sha256:
                raise DictionaryChecksumError(
                    f"Checksum mismatch for {path.name}: "
                    f"expected {expected_sha256[:16]}..., got {actual[:16]}..."
                )
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"Cannot read dictionary {path}: {exc}") from exc
    return parse_dictionary(lines)


def default_dictionary(topic: Topic) -> TopicDictionary:
    return TopicDictionary(roots=DEFAULT_ROOTS[topic])


class DictionaryStore:
    """Read-only per-topic vocabulary: root sets and phrase lists."""

    __slots__ = ("_dictionaries",)

    def __init__(self, dictionaries: Mapping[Topic, TopicDictionary]) -> None:
        self._dictionaries: Mapping[Topic, TopicDictionary] = MappingProxyType(
            {t: dictionaries.get(t, _EMPTY) for t in Topic}
        )

    def get(self, topic: Topic) -> TopicDictionary:
        return self._dictionaries[topic]

    def get_roots(self, topic: Topic) -> frozenset[str]:
        return self._dictionaries[topic].roots

    def get_phrases(self, topic: Topic) -> tuple[str, ...]:
        return self._dictionaries[topic].phrases

    def contains_word(self, topic: Topic, word: str) -> bool:
        """Exact root match, or either of word/root is a prefix of the other.

        The prefix rule absorbs stemmer imprecision; short roots will
        therefore match many words.
        """
        roots = self._dictionaries[topic].roots
        if word in roots:
            return True
        for root in roots:
            if word.startswith(root) or root.startswith(word):
                return True
        return False


def load_dictionaries(data_dir: Path | str | None = None) -> DictionaryStore:
    """Load every topic dictionary, falling back to defaults per topic.

    Args:
        data_dir: Directory holding ``<topic>.txt`` files and an optional
            ``manifest.json``. If None, uses bundled package data.
    """
    if data_dir is None:
        data_dir = _default_data_dir()
    else:
        data_dir = Path(data_dir)

    checksums = _read_manifest(data_dir)
    dictionaries: dict[Topic, TopicDictionary] = {}
    for topic in Topic:
        filename = dictionary_filename(topic)
        try:
            d = read_dictionary(data_dir / filename, checksums.get(filename))
        except DictionaryError as exc:
            logger.warning("%s; using default dictionary for %s", exc, topic.name)
            d = default_dictionary(topic)
        else:
            if not d.roots and not d.phrases:
                logger.warning(
                    "Dictionary %s is empty; using default dictionary for %s",
                    filename, topic.name,
                )
                d = default_dictionary(topic)
            else:
                logger.info(
                    "Loaded dictionary %s: %d roots, %d phrases",
                    topic.name, len(d.roots), len(d.phrases),
                )
        dictionaries[topic] = d

    return DictionaryStore(dictionaries)
