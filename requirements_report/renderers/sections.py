"""
Section-building helpers for the requirements report PDF.

Every builder takes the project, the layout engine and the current cursor and
returns the new cursor. Builders only write through the layout engine.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..layout import LayoutEngine
from ..models import ChartImage, ChartKind, Project

UNKNOWN_STAKEHOLDER = "Unknown"
NO_STAKEHOLDERS = "No stakeholders defined."
NO_FUNCTIONAL = "No functional requirements defined."

CHART_TITLES = {
    ChartKind.PIE: "Requirements Distribution",
    ChartKind.BAR: "Requirements by Stakeholder",
}


def format_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def functional_label(index: int) -> str:
    """1-based position -> FR-001, FR-012, FR-100."""
    return f"FR-{index:03d}"


def build_cover_page(project: Project, layout: LayoutEngine, y: float, generated_at: date) -> float:
    """Title, project name, domain and generation date on the first page."""
    x = layout.margin
    y = layout.place("Requirements Document", x, y + 30, font_size=24, bold=True)
    y = layout.place(project.name, x, y + 20, font_size=18)
    y = layout.place(f"Domain: {project.domain}", x, y + 15, font_size=12)
    y = layout.place(f"Generated: {format_date(generated_at)}", x, y + 10, font_size=12)
    return y


def build_overview_page(project: Project, layout: LayoutEngine, y: float) -> float:
    x = layout.margin
    y = layout.new_page()
    y = layout.place("Project Overview", x, y, font_size=16, bold=True)
    y = layout.place(project.description, x, y + 15, layout.geometry.content_width, 10) + 10
    return y


def build_stakeholders_section(project: Project, layout: LayoutEngine, y: float) -> float:
    x = layout.margin
    y += 10
    y = layout.place("Stakeholders", x, y, font_size=14, bold=True)
    if not project.stakeholders:
        return layout.place(NO_STAKEHOLDERS, x, y + 10, font_size=10)
    for i, stakeholder in enumerate(project.stakeholders, start=1):
        y = layout.place(f"{i}. {stakeholder.name} - {stakeholder.role}", x, y + 10, font_size=10)
    return y


def build_functional_section(project: Project, layout: LayoutEngine, y: float) -> float:
    geometry = layout.geometry
    x = layout.margin
    y = layout.ensure_space(y, geometry.section_reserve)
    y += 20
    y = layout.place("Functional Requirements", x, y, font_size=14, bold=True)
    if not project.functional_requirements:
        return layout.place(NO_FUNCTIONAL, x, y + 10, font_size=10)

    stakeholders = project.stakeholder_index()
    for i, req in enumerate(project.functional_requirements, start=1):
        owner = stakeholders.get(req.stakeholder_id)
        owner_name = owner.name if owner else UNKNOWN_STAKEHOLDER
        y = layout.ensure_space(y, geometry.entry_reserve)
        text = f"{functional_label(i)}: {req.description} ({owner_name})"
        y = layout.place(text, x, y + 10, geometry.content_width, 10) + 5
    return y


def build_non_functional_section(project: Project, layout: LayoutEngine, y: float) -> float:
    """Skipped entirely when the project has no non-functional requirements."""
    if not project.non_functional_requirements:
        return y
    geometry = layout.geometry
    x = layout.margin
    y = layout.ensure_space(y, geometry.section_reserve)
    y += 20
    y = layout.place("Non-Functional Requirements", x, y, font_size=14, bold=True)
    for req in project.non_functional_requirements:
        y = layout.ensure_space(y, geometry.entry_reserve)
        y = layout.place(f"{req.category.value.upper()}:", x, y + 15, font_size=10, bold=True)
        y = layout.place(req.description, x, y + 5, geometry.content_width, 10) + 5
    return y


def build_visual_analysis_page(
    project: Project,
    layout: LayoutEngine,
    y: float,
    charts: Optional[List[ChartImage]] = None,
) -> float:
    """Chart page; omitted when no chart images are available."""
    if not charts:
        return y
    geometry = layout.geometry
    x = layout.margin
    y = layout.new_page()
    y = layout.place("Requirements Analysis", x, y, font_size=14, bold=True)

    chart_y = y + 20
    for chart in charts:
        chart_y = layout.ensure_space(chart_y, geometry.chart_reserve)
        chart_y = layout.place(CHART_TITLES[chart.kind], x, chart_y, font_size=12, bold=True)
        width, height = layout.fit_image(chart, geometry.content_width, geometry.chart_max_height)
        layout.place_image(chart, x, chart_y + 10, width, height)
        chart_y += height + 30
    return chart_y


def build_statistics_page(project: Project, layout: LayoutEngine, y: float) -> float:
    x = layout.margin
    stats = project.statistics()
    y = layout.new_page()
    y = layout.place("Project Statistics", x, y, font_size=14, bold=True)
    y = layout.place(f"Total Stakeholders: {stats['stakeholders']}", x, y + 15, font_size=10)
    y = layout.place(f"Functional Requirements: {stats['functional_requirements']}", x, y + 10, font_size=10)
    y = layout.place(
        f"Non-Functional Requirements: {stats['non_functional_requirements']}", x, y + 10, font_size=10
    )
    return y


__all__ = [
    "build_cover_page",
    "build_overview_page",
    "build_stakeholders_section",
    "build_functional_section",
    "build_non_functional_section",
    "build_visual_analysis_page",
    "build_statistics_page",
    "functional_label",
    "format_date",
    "UNKNOWN_STAKEHOLDER",
    "NO_STAKEHOLDERS",
    "NO_FUNCTIONAL",
]
