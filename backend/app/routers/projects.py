from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status

from requirements_report.logging_utils import get_logger
from requirements_report.models import ReportSettings
from requirements_report.pipelines import ReportGenerationError, generate_report

from .. import schemas
from ..dependencies import get_report_settings, get_storage
from ..storage import MemStorage, to_record

logger = get_logger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


def content_disposition(filename: str) -> str:
    """
    Attachment header for `filename`. Non-ASCII names get an RFC 5987
    `filename*` value next to an ASCII-only `filename` fallback.
    """
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    fallback = "".join(c for c in filename if c.isascii() and c.isprintable() and c not in '"\\')
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quoted}"


def _get_or_404(storage: MemStorage, project_id: str) -> schemas.Project:
    project = storage.get(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.post(
    "",
    response_model=schemas.Project,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project from a completed wizard",
)
def create_project(
    payload: schemas.ProjectCreate,
    storage: MemStorage = Depends(get_storage),
) -> schemas.Project:
    project = storage.create(payload)
    logger.info("Created project %s (%s)", project.id, project.name)
    return project


@router.get("", response_model=schemas.ProjectList, summary="List all projects")
def list_projects(storage: MemStorage = Depends(get_storage)) -> schemas.ProjectList:
    projects = storage.list_all()
    return schemas.ProjectList(results=projects, total=len(projects))


@router.get("/{project_id}", response_model=schemas.Project, summary="Get a single project")
def get_project(project_id: str, storage: MemStorage = Depends(get_storage)) -> schemas.Project:
    return _get_or_404(storage, project_id)


@router.patch("/{project_id}", response_model=schemas.Project, summary="Partially update a project")
def update_project(
    project_id: str,
    payload: schemas.ProjectUpdate,
    storage: MemStorage = Depends(get_storage),
) -> schemas.Project:
    project = storage.update(project_id, payload)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("/{project_id}/stats", response_model=schemas.ProjectStats, summary="Requirement counts for the dashboard")
def project_stats(project_id: str, storage: MemStorage = Depends(get_storage)) -> schemas.ProjectStats:
    record = to_record(_get_or_404(storage, project_id))
    by_stakeholder = [
        schemas.StakeholderCount(name=name, requirements=count)
        for name, count in record.requirements_per_stakeholder()
    ]
    return schemas.ProjectStats(**record.statistics(), requirements_by_stakeholder=by_stakeholder)


@router.get(
    "/{project_id}/report",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
    summary="Download the requirements document as PDF",
)
def download_report(
    project_id: str,
    storage: MemStorage = Depends(get_storage),
    report_settings: ReportSettings = Depends(get_report_settings),
) -> Response:
    record = to_record(_get_or_404(storage, project_id))
    try:
        report = generate_report(record, report_settings)
    except ReportGenerationError:
        raise HTTPException(
            status_code=500,
            detail="Failed to generate the report. Please try again.",
        )
    return Response(
        content=report.content,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(report.filename)},
    )
