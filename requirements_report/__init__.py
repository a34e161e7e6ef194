"""Requirements document generation: project records in, paginated PDF out."""

from .models import (
    ChartImage,
    ChartKind,
    FunctionalRequirement,
    NFRCategory,
    NonFunctionalRequirement,
    Project,
    ReportSettings,
    Stakeholder,
)
from .pipelines import ReportGenerationError, build_pdf, generate_report
from .renderers.pdf_renderer import render_pdf, report_filename

__all__ = [
    "ChartImage",
    "ChartKind",
    "FunctionalRequirement",
    "NFRCategory",
    "NonFunctionalRequirement",
    "Project",
    "ReportSettings",
    "Stakeholder",
    "ReportGenerationError",
    "build_pdf",
    "generate_report",
    "render_pdf",
    "report_filename",
]
