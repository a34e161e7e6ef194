from io import BytesIO

import pytest

from requirements_report.layout import LayoutEngine
from requirements_report.models import ChartImage, ChartKind, PageGeometry, ReportSettings


def test_single_line_advances_half_font_size(layout):
    assert layout.place("Heading", 20, 40, font_size=14) == pytest.approx(47)
    assert layout.place("Body", 20, 50) == pytest.approx(55)


def test_wrapped_text_advances_per_line(layout):
    text = " ".join(["requirement"] * 80)
    lines = layout.wrap(text, layout.geometry.content_width, 10)
    assert len(lines) > 1
    y = layout.place(text, 20, 30, layout.geometry.content_width, 10)
    assert y == pytest.approx(30 + len(lines) * 5)
    assert layout.text() == lines


def test_short_text_with_width_is_one_line(layout):
    assert layout.place("Login", 20, 30, 170, 10) == pytest.approx(35)


def test_new_page_resets_cursor(layout):
    layout.place("first", 20, 200)
    assert layout.new_page() == layout.margin
    assert layout.page_count == 2
    assert layout.pages[1] == []


def test_ensure_space_uses_page_height_minus_reserve(layout):
    limit = layout.geometry.height - 47
    assert layout.ensure_space(limit, 47) == limit
    assert layout.page_count == 1
    assert layout.ensure_space(limit + 0.5, 47) == layout.margin
    assert layout.page_count == 2


def test_thresholds_follow_page_height():
    settings = ReportSettings(geometry=PageGeometry(width=216, height=279, margin=20))
    engine = LayoutEngine(BytesIO(), settings)
    # 279 - 97 = 182: a cursor of 190 no longer fits on a letter page
    assert engine.ensure_space(190, settings.geometry.section_reserve) == 20
    assert engine.page_count == 2


def _chart(width, height):
    return ChartImage(kind=ChartKind.PIE, data=b"", width=width, height=height)


def test_fit_image_limited_by_height(layout):
    width, height = layout.fit_image(_chart(400, 300), 170, 120)
    assert height == pytest.approx(120)
    assert width == pytest.approx(160)


def test_fit_image_limited_by_width(layout):
    width, height = layout.fit_image(_chart(800, 200), 170, 120)
    assert width == pytest.approx(170)
    assert height == pytest.approx(42.5)


def test_finish_produces_pdf():
    buf = BytesIO()
    engine = LayoutEngine(buf)
    engine.place("Hello", 20, 20)
    engine.finish()
    assert buf.getvalue().startswith(b"%PDF")
