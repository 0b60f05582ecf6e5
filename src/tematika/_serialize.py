"""msgpack encoding of AnalysisResult for hand-off between processes."""

from __future__ import annotations

from typing import Any

import msgpack
from msgpack.exceptions import UnpackException

from ._errors import ResultVersionError, TematikaError
from ._types import AnalysisResult, Topic

RESULT_VERSION = "1.0"


def pack_result(result: AnalysisResult) -> bytes:
    payload = {
        "version": RESULT_VERSION,
        "total_words": result.total_words,
        "scores": {t.value: result.score(t) for t in Topic},
        "matches": {t.value: dict(result.matched_terms(t)) for t in Topic},
    }
    return msgpack.packb(payload, use_bin_type=True)


def unpack_result(data: bytes) -> AnalysisResult:
    """Decode bytes produced by :func:`pack_result`.

    Raises:
        ResultVersionError: If the payload was written by another version.
        TematikaError: If the payload is malformed.
    """
    try:
        payload: dict[str, Any] = msgpack.unpackb(data, raw=False)
    except (ValueError, UnpackException) as exc:
        raise TematikaError(f"Malformed result payload: {exc}") from exc

    if not isinstance(payload, dict):
        raise TematikaError("Malformed result payload: expected a map")
    version = payload.get("version")
    if version != RESULT_VERSION:
        raise ResultVersionError(
            f"Expected result version {RESULT_VERSION!r}, got {version!r}"
        )

    try:
        scores = {Topic(k): int(v) for k, v in payload["scores"].items()}
        details = {
            Topic(k): {str(term): int(n) for term, n in v.items()}
            for k, v in payload["matches"].items()
        }
        total_words = int(payload["total_words"])
    except (KeyError, ValueError, TypeError, AttributeError) as exc:
        raise TematikaError(f"Malformed result payload: {exc}") from exc

    return AnalysisResult.build(scores, details, total_words)
