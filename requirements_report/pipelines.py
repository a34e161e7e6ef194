"""
Pipeline entrypoints for building a requirements report.

This is the thin orchestration layer between callers (CLI, HTTP API) and the
renderer: it resolves settings, captures charts, renders the PDF and writes it
to disk. Either a complete file ends up at the target path or nothing does.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from .charts import ChartProvider, MatplotlibChartProvider, collect_charts
from .logging_utils import get_logger
from .models import Project, ReportSettings
from .renderers.pdf_renderer import render_pdf, report_filename

logger = get_logger(__name__)


class ReportGenerationError(RuntimeError):
    """The PDF could not be produced; callers may offer a retry."""


@dataclass
class Report:
    filename: str
    content: bytes


def generate_report(
    project: Project,
    settings: ReportSettings | None = None,
    chart_provider: Optional[ChartProvider] = None,
    generated_at: Optional[date] = None,
) -> Report:
    """
    Render `project` in memory. Chart problems only drop the analysis page;
    anything else that goes wrong while rendering raises ReportGenerationError.
    """
    cfg = settings or ReportSettings.default()
    if chart_provider is None and cfg.charts_enabled:
        chart_provider = MatplotlibChartProvider()
    charts = collect_charts(project, chart_provider) if cfg.charts_enabled else []

    try:
        content = render_pdf(project, cfg, charts=charts, generated_at=generated_at)
    except Exception as exc:
        logger.error("Report generation failed for %s: %s", project.name, exc)
        raise ReportGenerationError(f"Could not generate report for {project.name!r}") from exc

    filename = report_filename(project.name)
    logger.info("Generated %s (%d bytes, %d charts)", filename, len(content), len(charts))
    return Report(filename=filename, content=content)


def build_pdf(
    project: Project,
    settings: ReportSettings | None = None,
    output_dir: Path | None = None,
    chart_provider: Optional[ChartProvider] = None,
    generated_at: Optional[date] = None,
) -> Path:
    """
    Build the report PDF and write it into `output_dir` (settings.output_dir by default).
    """
    cfg = settings or ReportSettings.default()
    report = generate_report(project, cfg, chart_provider, generated_at)

    target_dir = Path(output_dir or cfg.output_dir)
    target = target_dir / report.filename
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(report.content)
            os.replace(tmp_name, target)
        except BaseException:
            os.unlink(tmp_name)
            raise
    except OSError as exc:
        logger.error("Could not write %s: %s", target, exc)
        raise ReportGenerationError(f"Could not write report to {target}") from exc

    logger.info("Wrote %s", target)
    return target


__all__ = ["build_pdf", "generate_report", "Report", "ReportGenerationError"]
