from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from requirements_report.models import STAKEHOLDER_ROLES, NFRCategory


def _ensure_unique_ids(items, label: str) -> None:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate {label} id: {item.id}")
        seen.add(item.id)


class WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)


class Stakeholder(WireModel):
    id: str = Field(min_length=1)
    name: str
    role: str = Field(description="Free-form role label", examples=STAKEHOLDER_ROLES)


class FunctionalRequirement(WireModel):
    id: str = Field(min_length=1)
    stakeholder_id: str = Field(alias="stakeholderId")
    description: str


class NonFunctionalRequirement(WireModel):
    id: str = Field(min_length=1)
    category: NFRCategory
    description: str


class ProjectPayload(WireModel):
    """Shared list checks for create and update payloads."""

    @field_validator("stakeholders", check_fields=False)
    @classmethod
    def unique_stakeholders(cls, value):
        if value:
            _ensure_unique_ids(value, "stakeholder")
        return value

    @field_validator("functional_requirements", check_fields=False)
    @classmethod
    def unique_functional(cls, value):
        if value:
            _ensure_unique_ids(value, "functional requirement")
        return value

    @field_validator("non_functional_requirements", check_fields=False)
    @classmethod
    def one_per_category(cls, value):
        if value:
            _ensure_unique_ids(value, "non-functional requirement")
            categories = [req.category for req in value]
            if len(categories) != len(set(categories)):
                raise ValueError("at most one non-functional requirement per category")
        return value


class ProjectCreate(ProjectPayload):
    name: str = Field(min_length=1)
    domain: str = Field(min_length=1)
    description: str = Field(min_length=1)
    stakeholders: List[Stakeholder] = Field(default_factory=list)
    functional_requirements: List[FunctionalRequirement] = Field(
        default_factory=list, alias="functionalRequirements"
    )
    non_functional_requirements: List[NonFunctionalRequirement] = Field(
        default_factory=list, alias="nonFunctionalRequirements"
    )


class ProjectUpdate(ProjectPayload):
    """Partial update: only fields present in the request replace stored ones."""

    name: Optional[str] = Field(default=None, min_length=1)
    domain: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    stakeholders: Optional[List[Stakeholder]] = None
    functional_requirements: Optional[List[FunctionalRequirement]] = Field(
        default=None, alias="functionalRequirements"
    )
    non_functional_requirements: Optional[List[NonFunctionalRequirement]] = Field(
        default=None, alias="nonFunctionalRequirements"
    )


class Project(ProjectCreate):
    id: str


class ProjectList(BaseModel):
    results: List[Project]
    total: int


class StakeholderCount(BaseModel):
    name: str
    requirements: int


class ProjectStats(WireModel):
    stakeholders: int
    functional_requirements: int = Field(alias="functionalRequirements")
    non_functional_requirements: int = Field(alias="nonFunctionalRequirements")
    requirements_by_stakeholder: List[StakeholderCount] = Field(
        default_factory=list, alias="requirementsByStakeholder"
    )
