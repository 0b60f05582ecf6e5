"""Plain-text report rendering for an AnalysisResult."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ._types import Topic

if TYPE_CHECKING:
    from ._types import AnalysisResult

logger = logging.getLogger(__name__)


def format_report(result: AnalysisResult) -> str:
    lines: list[str] = [
        "=== ОТЧЕТ АНАЛИЗА ТЕКСТА ===",
        "",
        f"Всего слов в тексте: {result.total_words}",
        "",
        "--- Статистика по тематикам ---",
    ]
    for topic in Topic:
        lines.append(
            f"{topic.display_name}: {result.score(topic)} совпадений "
            f"({result.percentage(topic):.2f}%)"
        )

    lines.append("")
    lines.append("--- Детализация совпадений ---")
    for topic in Topic:
        matches = result.matched_terms(topic)
        if not matches:
            continue
        lines.append("")
        lines.append(f"{topic.display_name}:")
        for term, count in matches.items():
            lines.append(f"  {term}: {count}")

    lines.append("")
    lines.append(f"=== РЕЗУЛЬТАТ: {result.top_topic().display_name} ===")
    return "\n".join(lines) + "\n"


def write_report(result: AnalysisResult, path: Path | str) -> Path:
    """Write the report to ``path`` (UTF-8) and return the path."""
    path = Path(path)
    path.write_text(format_report(result), encoding="utf-8")
    logger.info("Report saved: %s", path)
    return path
