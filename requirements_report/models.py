from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping


class NFRCategory(str, Enum):
    """Closed set of non-functional requirement categories (wizard order)."""

    SECURITY = "security"
    PERFORMANCE = "performance"
    USABILITY = "usability"
    SCALABILITY = "scalability"


class ChartKind(str, Enum):
    PIE = "pie"
    BAR = "bar"


STAKEHOLDER_ROLES = [
    "Product Manager",
    "Developer",
    "Designer",
    "End User",
    "Business Owner",
    "Other",
]


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    # Accept both the camelCase wire keys and snake_case keys.
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class Stakeholder:
    id: str
    name: str
    role: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Stakeholder":
        return cls(id=str(data["id"]), name=data.get("name", ""), role=data.get("role", ""))


@dataclass(frozen=True)
class FunctionalRequirement:
    id: str
    stakeholder_id: str
    description: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FunctionalRequirement":
        return cls(
            id=str(data["id"]),
            stakeholder_id=str(_pick(data, "stakeholderId", "stakeholder_id", default="")),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class NonFunctionalRequirement:
    id: str
    category: NFRCategory
    description: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NonFunctionalRequirement":
        return cls(
            id=str(data["id"]),
            category=NFRCategory(data["category"]),
            description=data.get("description", ""),
        )


def non_functional_from_categories(values: Mapping[str, str]) -> List[NonFunctionalRequirement]:
    """
    Build the non-functional list from the wizard's one-field-per-category form.

    Blank fields are dropped and entries follow the category enumeration order,
    so the result never holds more than one requirement per category.
    """
    result: List[NonFunctionalRequirement] = []
    for category in NFRCategory:
        text = (values.get(category.value) or "").strip()
        if not text:
            continue
        result.append(
            NonFunctionalRequirement(id=uuid.uuid4().hex, category=category, description=text)
        )
    return result


@dataclass(frozen=True)
class Project:
    """Read-only snapshot of one project's requirements, as handed to the report."""

    id: str
    name: str
    domain: str
    description: str
    stakeholders: List[Stakeholder] = field(default_factory=list)
    functional_requirements: List[FunctionalRequirement] = field(default_factory=list)
    non_functional_requirements: List[NonFunctionalRequirement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        return cls(
            id=str(data.get("id") or ""),
            name=data.get("name", ""),
            domain=data.get("domain", ""),
            description=data.get("description", ""),
            stakeholders=[Stakeholder.from_dict(s) for s in data.get("stakeholders") or []],
            functional_requirements=[
                FunctionalRequirement.from_dict(r)
                for r in _pick(data, "functionalRequirements", "functional_requirements", default=[])
            ],
            non_functional_requirements=[
                NonFunctionalRequirement.from_dict(r)
                for r in _pick(data, "nonFunctionalRequirements", "non_functional_requirements", default=[])
            ],
        )

    def stakeholder_index(self) -> Dict[str, Stakeholder]:
        return {s.id: s for s in self.stakeholders}

    def requirements_per_stakeholder(self) -> List[tuple[str, int]]:
        """(stakeholder name, functional requirement count) in stakeholder order."""
        counts: Dict[str, int] = {}
        for req in self.functional_requirements:
            counts[req.stakeholder_id] = counts.get(req.stakeholder_id, 0) + 1
        return [(s.name, counts.get(s.id, 0)) for s in self.stakeholders]

    def statistics(self) -> Dict[str, int]:
        return {
            "stakeholders": len(self.stakeholders),
            "functional_requirements": len(self.functional_requirements),
            "non_functional_requirements": len(self.non_functional_requirements),
        }


@dataclass(frozen=True)
class ChartImage:
    """A rendered chart: PNG bytes plus its pixel size."""

    kind: ChartKind
    data: bytes
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass
class PageGeometry:
    """Page size and page-break reserves, in millimetres."""

    width: float = 210.0
    height: float = 297.0
    margin: float = 20.0
    # Content is pushed to a new page once the cursor passes height - reserve.
    section_reserve: float = 97.0
    entry_reserve: float = 47.0
    chart_reserve: float = 147.0
    chart_max_height: float = 120.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin


@dataclass
class ReportSettings:
    """Options for building a requirements report."""

    geometry: PageGeometry = field(default_factory=PageGeometry)
    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    charts_enabled: bool = True
    output_dir: Path = Path("exports")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportSettings":
        page = data.get("page", {}) or {}
        fonts = data.get("fonts", {}) or {}
        charts = data.get("charts", {}) or {}
        defaults = PageGeometry()
        geometry = PageGeometry(
            width=float(page.get("width", defaults.width)),
            height=float(page.get("height", defaults.height)),
            margin=float(page.get("margin", defaults.margin)),
            section_reserve=float(page.get("section_reserve", defaults.section_reserve)),
            entry_reserve=float(page.get("entry_reserve", defaults.entry_reserve)),
            chart_reserve=float(page.get("chart_reserve", defaults.chart_reserve)),
            chart_max_height=float(page.get("chart_max_height", defaults.chart_max_height)),
        )
        return cls(
            geometry=geometry,
            font_name=fonts.get("regular", "Helvetica"),
            bold_font_name=fonts.get("bold", "Helvetica-Bold"),
            charts_enabled=bool(charts.get("enabled", True)),
            output_dir=Path(data.get("output_dir") or "exports"),
        )

    @classmethod
    def default(cls) -> "ReportSettings":
        return cls()
