"""Tests for the drawing canvas and the layout cursor."""

import pytest

from compliance_report.render._helpers import PRIMARY
from compliance_report.render.canvas import Canvas
from compliance_report.render.layout import BOTTOM_MARGIN, TOP_MARGIN, LayoutCursor


def _cursor() -> LayoutCursor:
    cursor = LayoutCursor(Canvas())
    cursor.new_page()
    return cursor


# -- Canvas --------------------------------------------------------------------


def test_canvas_is_a4_portrait():
    c = Canvas()
    assert c.width == pytest.approx(210, abs=0.1)
    assert c.height == pytest.approx(297, abs=0.1)


def test_canvas_records_ops_per_page():
    c = Canvas()
    c.new_page()
    c.fill_rect(0, 0, 10, 10, PRIMARY)
    c.new_page()
    c.text(10, 10, "second", 10, PRIMARY)
    assert c.page_count() == 2
    assert [op.kind for op in c.ops(1)] == ["fill"]
    assert c.texts(2) == ["second"]


def test_canvas_select_page_draws_on_earlier_page():
    c = Canvas()
    c.new_page()
    c.new_page()
    c.select_page(1)
    c.text(10, 10, "back on one", 10, PRIMARY)
    assert c.texts(1) == ["back on one"]
    assert c.texts(2) == []
    assert c.current_page == 1


def test_canvas_select_page_out_of_range():
    c = Canvas()
    c.new_page()
    with pytest.raises(IndexError):
        c.select_page(2)
    with pytest.raises(IndexError):
        c.select_page(0)


def test_canvas_requires_a_page():
    canvas = Canvas()
    with pytest.raises(RuntimeError, match="new_page"):
        canvas.fill_rect(0, 0, 1, 1, PRIMARY)
    with pytest.raises(RuntimeError, match="new_page"):
        canvas.stroke_rect(0, 0, 1, 1, PRIMARY)
    with pytest.raises(RuntimeError, match="new_page"):
        canvas.text(10, 10, "x", 8, PRIMARY)
    assert canvas.page_count() == 0


def test_canvas_sanitizes_text():
    c = Canvas()
    c.new_page()
    c.text(10, 10, "✓ PASSED", 8, PRIMARY)
    assert c.texts(1) == ["+ PASSED"]


def test_canvas_wrap_text_splits_long_strings():
    c = Canvas()
    c.new_page()
    long = "Review and address all non-compliant items " * 6
    lines = c.wrap_text(long, 60, 10)
    assert len(lines) > 1
    assert c.wrap_text("short", 60, 10) == ["short"]


def test_canvas_output_is_pdf():
    c = Canvas()
    c.new_page()
    c.text(10, 10, "hello", 10, PRIMARY)
    data = c.output()
    assert data[:5] == b"%PDF-"


# -- Cursor --------------------------------------------------------------------


def test_reserve_within_page_is_noop():
    cursor = _cursor()
    cursor.advance(50)
    assert cursor.reserve(20) is False
    assert cursor.y == TOP_MARGIN + 50
    assert cursor.canvas.page_count() == 1


def test_reserve_breaks_when_height_exceeds_page():
    cursor = _cursor()
    cursor.advance(cursor.remaining - 5)
    assert cursor.reserve(10) is True
    assert cursor.canvas.page_count() == 2
    assert cursor.y == TOP_MARGIN


def test_reserve_just_under_remaining_does_not_break():
    cursor = _cursor()
    cursor.advance(30)
    assert cursor.reserve(cursor.remaining - 0.5) is False
    assert cursor.canvas.page_count() == 1


def test_reserve_at_top_never_opens_blank_page():
    cursor = _cursor()
    assert cursor.reserve(cursor.page_height * 2) is False
    assert cursor.canvas.page_count() == 1


def test_cursor_limit_respects_bottom_margin():
    cursor = _cursor()
    assert cursor.limit == pytest.approx(cursor.page_height - BOTTOM_MARGIN)
