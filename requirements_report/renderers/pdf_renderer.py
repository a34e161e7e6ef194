"""
PDF renderer for the requirements report.

This module owns the document lifecycle: it opens a canvas through the layout
engine, runs the section builders in their fixed order, and finalizes the PDF.
Data prep (loading projects, capturing charts) happens before it is called.
"""

from __future__ import annotations

import re
from datetime import date
from io import BytesIO
from typing import List, Optional

from ..layout import LayoutEngine, is_drawable
from ..logging_utils import get_logger
from ..models import ChartImage, Project, ReportSettings
from .sections import (
    build_cover_page,
    build_overview_page,
    build_stakeholders_section,
    build_functional_section,
    build_non_functional_section,
    build_visual_analysis_page,
    build_statistics_page,
)

logger = get_logger(__name__)

REPORT_EXTENSION = ".pdf"


def report_filename(project_name: str) -> str:
    """'Customer Portal Redesign' -> 'Customer-Portal-Redesign-Requirements.pdf'."""
    return re.sub(r"\s+", "-", project_name) + "-Requirements" + REPORT_EXTENSION


def build_document(
    project: Project,
    layout: LayoutEngine,
    charts: Optional[List[ChartImage]] = None,
    generated_at: Optional[date] = None,
) -> LayoutEngine:
    """
    Run every section builder against the layout engine, in document order.
    """
    # charts that reportlab cannot draw only cost the analysis page
    charts = [chart for chart in charts or [] if is_drawable(chart)]
    y = layout.margin
    y = build_cover_page(project, layout, y, generated_at or date.today())
    y = build_overview_page(project, layout, y)
    y = build_stakeholders_section(project, layout, y)
    y = build_functional_section(project, layout, y)
    y = build_non_functional_section(project, layout, y)
    y = build_visual_analysis_page(project, layout, y, charts)
    build_statistics_page(project, layout, y)
    return layout


def render_pdf(
    project: Project,
    settings: Optional[ReportSettings] = None,
    charts: Optional[List[ChartImage]] = None,
    generated_at: Optional[date] = None,
) -> bytes:
    """
    Render the full report for `project` and return the PDF bytes.
    """
    buffer = BytesIO()
    layout = LayoutEngine(buffer, settings, title=f"{project.name} - Requirements")
    build_document(project, layout, charts, generated_at)
    layout.finish()
    logger.debug("Rendered %s: %d pages, %d charts", project.name, layout.page_count, len(layout.images))
    return buffer.getvalue()


__all__ = ["render_pdf", "build_document", "report_filename", "REPORT_EXTENSION"]
