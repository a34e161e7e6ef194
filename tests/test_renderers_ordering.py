import pytest

from requirements_report.models import FunctionalRequirement, Project, Stakeholder
from requirements_report.renderers import sections
from requirements_report.renderers.pdf_renderer import build_document

from conftest import GENERATED_AT, index_in_order


def test_end_to_end_section_order(portal, layout):
    build_document(portal, layout, generated_at=GENERATED_AT)
    lines = layout.text()
    index_in_order(lines, [
        "Requirements Document",
        "Customer Portal",
        "Domain: E-commerce",
        "Generated: 3/5/2024",
        "Project Overview",
        "Redesign",
        "Stakeholders",
        "1. Alice - PM",
        "Functional Requirements",
        "FR-001: Login (Alice)",
        "Non-Functional Requirements",
        "SECURITY:",
        "Use TLS",
        "Project Statistics",
        "Total Stakeholders: 1",
        "Functional Requirements: 1",
        "Non-Functional Requirements: 1",
    ])


def test_cover_overview_and_statistics_start_new_pages(portal, layout):
    build_document(portal, layout, generated_at=GENERATED_AT)
    assert layout.pages[0][0] == "Requirements Document"
    assert layout.pages[1][0] == "Project Overview"
    assert layout.pages[-1][0] == "Project Statistics"
    assert layout.page_count == 3


def test_empty_project_renders_placeholders(empty_project, layout):
    build_document(empty_project, layout, generated_at=GENERATED_AT)
    lines = layout.text()
    index_in_order(lines, [
        "Stakeholders",
        sections.NO_STAKEHOLDERS,
        "Functional Requirements",
        sections.NO_FUNCTIONAL,
        "Total Stakeholders: 0",
        "Functional Requirements: 0",
        "Non-Functional Requirements: 0",
    ])
    assert "Non-Functional Requirements" not in lines


@pytest.mark.parametrize("position, label", [(1, "FR-001"), (12, "FR-012"), (100, "FR-100")])
def test_functional_label_zero_padded(position, label):
    assert sections.functional_label(position) == label


def test_functional_numbering_follows_list_order(layout):
    stakeholders = [Stakeholder("s1", "Alice", "PM"), Stakeholder("s2", "Bob", "Developer")]
    reqs = [FunctionalRequirement(f"f{i}", "s2" if i % 2 else "s1", f"Req {i}") for i in range(1, 13)]
    project = Project("p", "P", "D", "Desc", stakeholders, reqs, [])
    sections.build_functional_section(project, layout, layout.margin)
    lines = layout.text()
    assert "FR-001: Req 1 (Bob)" in lines
    assert "FR-002: Req 2 (Alice)" in lines
    assert "FR-012: Req 12 (Alice)" in lines


def test_unresolved_stakeholder_is_unknown(layout):
    project = Project(
        "p", "P", "D", "Desc",
        [Stakeholder("s1", "Alice", "PM")],
        [FunctionalRequirement("f1", "missing", "Export CSV")],
        [],
    )
    sections.build_functional_section(project, layout, layout.margin)
    assert "FR-001: Export CSV (Unknown)" in layout.text()


def test_non_functional_absent_when_empty(portal, layout):
    project = Project(portal.id, portal.name, portal.domain, portal.description,
                      portal.stakeholders, portal.functional_requirements, [])
    y = sections.build_non_functional_section(project, layout, 50)
    assert y == 50
    assert layout.text() == []


def test_non_functional_categories_uppercased(layout):
    project = Project.from_dict({
        "id": "p", "name": "P", "domain": "D", "description": "Desc",
        "nonFunctionalRequirements": [
            {"id": "n1", "category": "performance", "description": "p95 under 200ms"},
            {"id": "n2", "category": "usability", "description": "Keyboard friendly"},
        ],
    })
    sections.build_non_functional_section(project, layout, layout.margin)
    index_in_order(layout.text(), [
        "Non-Functional Requirements",
        "PERFORMANCE:",
        "p95 under 200ms",
        "USABILITY:",
        "Keyboard friendly",
    ])


def test_long_functional_list_paginates(layout):
    stakeholders = [Stakeholder("s1", "Alice", "PM")]
    reqs = [FunctionalRequirement(f"f{i}", "s1", f"Requirement {i}") for i in range(1, 61)]
    project = Project("p", "P", "D", "Desc", stakeholders, reqs, [])
    sections.build_functional_section(project, layout, layout.margin)
    assert layout.page_count > 1
    # every page after a break starts with the next entry, none are lost
    labels = [line for line in layout.text() if line.startswith("FR-")]
    assert len(labels) == 60
    assert layout.pages[1][0].startswith("FR-")


def test_functional_section_breaks_when_cursor_is_low(portal, layout):
    threshold = layout.geometry.height - layout.geometry.section_reserve
    sections.build_functional_section(portal, layout, threshold + 1)
    assert layout.page_count == 2
    assert layout.pages[1][0] == "Functional Requirements"
