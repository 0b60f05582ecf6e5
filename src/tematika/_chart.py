"""Bar chart of per-topic scores, rendered with matplotlib (Agg)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from ._types import Topic

if TYPE_CHECKING:
    from ._types import AnalysisResult

logger = logging.getLogger(__name__)

CHART_SIZE_INCHES = (8.0, 6.0)
CHART_DPI = 100


def build_chart(result: AnalysisResult) -> Figure:
    """One bar per topic, in declaration order."""
    fig = Figure(figsize=CHART_SIZE_INCHES, dpi=CHART_DPI)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot()
    labels = [t.display_name for t in Topic]
    values = [result.score(t) for t in Topic]
    ax.bar(labels, values)
    ax.set_title("Статистика по тематикам")
    ax.set_xlabel("Тематика")
    ax.set_ylabel("Количество совпадений")
    ax.tick_params(axis="x", labelrotation=20)
    fig.tight_layout()
    return fig


def write_chart(result: AnalysisResult, path: Path | str) -> Path:
    """Save the chart as PNG to ``path`` and return the path."""
    path = Path(path)
    build_chart(result).savefig(path, format="png")
    logger.info("Chart saved: %s", path)
    return path
