from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from requirements_report.models import Project as ProjectRecord

from . import schemas


class MemStorage:
    """
    In-memory project store keyed by server-assigned id.

    One instance is created per app (see backend.main.create_app) and reached
    through the get_storage dependency. Access is not locked; the host must
    serialize writes to the same key.
    """

    def __init__(self) -> None:
        self._projects: Dict[str, schemas.Project] = {}

    def get(self, project_id: str) -> Optional[schemas.Project]:
        return self._projects.get(project_id)

    def create(self, payload: schemas.ProjectCreate) -> schemas.Project:
        project_id = str(uuid.uuid4())
        project = schemas.Project(id=project_id, **payload.model_dump())
        self._projects[project_id] = project
        return project

    def update(self, project_id: str, payload: schemas.ProjectUpdate) -> Optional[schemas.Project]:
        existing = self._projects.get(project_id)
        if existing is None:
            return None
        # Lists in the payload replace the stored lists wholesale.
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        updated = schemas.Project(**{**existing.model_dump(), **changes})
        self._projects[project_id] = updated
        return updated

    def list_all(self) -> List[schemas.Project]:
        return list(self._projects.values())


def to_record(project: schemas.Project) -> ProjectRecord:
    """Convert a stored project into the report's read-only record."""
    return ProjectRecord.from_dict(project.model_dump(mode="json"))
