"""
Chart images for the report's optional "Requirements Analysis" page.

A chart provider returns a rendered PNG for a chart kind, or None when there is
nothing to draw. `collect_charts` is the only caller the renderer needs: it
asks for the pie and bar charts in order; a provider failure is logged and
treated as "no charts".
"""

from __future__ import annotations

from io import BytesIO
from typing import List, Optional, Protocol

from matplotlib.figure import Figure

from .layout import is_drawable
from .logging_utils import get_logger
from .models import ChartImage, ChartKind, Project

logger = get_logger(__name__)

CHART_WIDTH_PX = 400
CHART_HEIGHT_PX = 300
CHART_DPI = 100

PIE_COLORS = ["#2b6cb0", "#d69e2e"]
BAR_COLOR = "#1a365d"


class ChartProvider(Protocol):
    def capture(self, kind: ChartKind, project: Project) -> Optional[ChartImage]:
        ...


def _figure_to_chart(fig: Figure, kind: ChartKind) -> ChartImage:
    buf = BytesIO()
    fig.savefig(buf, format="png", dpi=CHART_DPI, facecolor="white", metadata={"Software": None})
    return ChartImage(kind=kind, data=buf.getvalue(), width=CHART_WIDTH_PX, height=CHART_HEIGHT_PX)


class MatplotlibChartProvider:
    """Draws the distribution pie and the per-stakeholder bar chart."""

    def capture(self, kind: ChartKind, project: Project) -> Optional[ChartImage]:
        if kind is ChartKind.PIE:
            return self.requirement_distribution(project)
        if kind is ChartKind.BAR:
            return self.requirements_by_stakeholder(project)
        return None

    def _figure(self):
        return Figure(figsize=(CHART_WIDTH_PX / CHART_DPI, CHART_HEIGHT_PX / CHART_DPI), dpi=CHART_DPI)

    def requirement_distribution(self, project: Project) -> Optional[ChartImage]:
        stats = project.statistics()
        values = [stats["functional_requirements"], stats["non_functional_requirements"]]
        if sum(values) == 0:
            return None
        labels = ["Functional Requirements", "Non-Functional Requirements"]
        fig = self._figure()
        ax = fig.add_subplot(1, 1, 1)
        # zero-sized wedges would still print a 0% label
        shown = [(label, value, color) for label, value, color in zip(labels, values, PIE_COLORS) if value]
        ax.pie(
            [v for _, v, _ in shown],
            labels=[label for label, _, _ in shown],
            colors=[c for _, _, c in shown],
            autopct="%1.0f%%",
            textprops={"fontsize": 8},
        )
        ax.axis("equal")
        return _figure_to_chart(fig, ChartKind.PIE)

    def requirements_by_stakeholder(self, project: Project) -> Optional[ChartImage]:
        rows = project.requirements_per_stakeholder()
        if not rows:
            return None
        fig = self._figure()
        ax = fig.add_subplot(1, 1, 1)
        positions = list(range(len(rows)))
        ax.bar(positions, [count for _, count in rows], color=BAR_COLOR)
        ax.set_xticks(positions)
        ax.set_xticklabels([name for name, _ in rows], rotation=45, ha="right", fontsize=8)
        ax.set_ylabel("Number of Requirements", fontsize=8)
        ax.yaxis.get_major_locator().set_params(integer=True)
        ax.grid(axis="y", linestyle="--", alpha=0.5)
        fig.tight_layout()
        return _figure_to_chart(fig, ChartKind.BAR)


def collect_charts(project: Project, provider: Optional[ChartProvider]) -> List[ChartImage]:
    """
    Capture the pie then the bar chart. Missing or unreadable charts are left out;
    a provider error is logged and yields no charts at all.
    """
    if provider is None:
        return []
    charts: List[ChartImage] = []
    try:
        for kind in (ChartKind.PIE, ChartKind.BAR):
            image = provider.capture(kind, project)
            if image is None:
                continue
            if not is_drawable(image):
                logger.warning("Dropping unreadable %s chart for %s", kind.value, project.name)
                continue
            charts.append(image)
    except Exception as exc:
        logger.warning("Could not capture charts for %s: %s", project.name, exc)
        return []
    return charts


__all__ = ["ChartProvider", "MatplotlibChartProvider", "collect_charts"]
