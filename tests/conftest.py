from datetime import date
from io import BytesIO

import pytest

from requirements_report.layout import LayoutEngine
from requirements_report.models import Project

GENERATED_AT = date(2024, 3, 5)


@pytest.fixture
def portal_data():
    return {
        "id": "p1",
        "name": "Customer Portal",
        "domain": "E-commerce",
        "description": "Redesign",
        "stakeholders": [{"id": "s1", "name": "Alice", "role": "PM"}],
        "functionalRequirements": [{"id": "f1", "stakeholderId": "s1", "description": "Login"}],
        "nonFunctionalRequirements": [{"id": "n1", "category": "security", "description": "Use TLS"}],
    }


@pytest.fixture
def portal(portal_data):
    return Project.from_dict(portal_data)


@pytest.fixture
def empty_project():
    return Project(id="p0", name="Empty", domain="None", description="Nothing yet")


@pytest.fixture
def layout():
    return LayoutEngine(BytesIO())


def index_in_order(lines, expected):
    """Positions of each expected line, asserting they appear in order."""
    positions = []
    start = 0
    for text in expected:
        pos = lines.index(text, start)
        positions.append(pos)
        start = pos + 1
    return positions
