"""Grid table with word-wrapped cells and a header repeated on every page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from compliance_report.render._helpers import (
    BACKGROUND,
    BODY,
    Color,
    GRID,
    PRIMARY,
    WHITE,
)
from compliance_report.render.layout import CONTENT_X, LayoutCursor

log = logging.getLogger(__name__)

HEADER_H = 8.0
HEADER_FONT = 9
BODY_FONT = 8
LINE_H = 3.5
CELL_PAD = 1.5
MAX_CELL_LINES = 12

# (row_index, col_index, text) -> text color, or None for the default
CellStyle = Callable[[int, int, str], Optional[Color]]


@dataclass(frozen=True)
class Column:
    label: str
    width: float
    align: str = "L"    # "L", "C" or "R"


def row_height(line_count: int) -> float:
    """Height of a body row whose tallest cell wraps to line_count lines."""
    return min(max(line_count, 1), MAX_CELL_LINES) * LINE_H + 2 * CELL_PAD


def first_row_height(canvas, columns: Sequence[Column], rows: Sequence[Sequence[str]]) -> float:
    """Wrapped height of the first body row, 0.0 for an empty table."""
    if not rows:
        return 0.0
    return _cells_height(_wrap_row(canvas, columns, rows[0]))


def render_table(
    cursor: LayoutCursor,
    columns: Sequence[Column],
    rows: Sequence[Sequence[str]],
    *,
    cell_style: CellStyle | None = None,
    x: float = CONTENT_X,
) -> float:
    """Draw a header row and body rows, returning the cursor y after the last row.

    Each body row reserves its own height. When that reservation opens a new
    page the header row is drawn again before the row.
    """
    canvas = cursor.canvas
    wrapped = [_wrap_row(canvas, columns, row) for row in rows]

    first_h = _cells_height(wrapped[0]) if wrapped else 0.0
    cursor.reserve(HEADER_H + first_h)
    _draw_header(cursor, columns, x)

    repeats = 0
    for row_idx, cells in enumerate(wrapped):
        h = _cells_height(cells)
        if cursor.reserve(h):
            _draw_header(cursor, columns, x)
            repeats += 1
        _draw_row(cursor, columns, rows[row_idx], cells, row_idx, h, x, cell_style)

    if repeats:
        log.debug("Table of %d rows continued across %d page(s)", len(rows), repeats)
    return cursor.y


def _wrap_row(canvas, columns: Sequence[Column], row: Sequence[str]) -> list[list[str]]:
    if len(row) != len(columns):
        raise ValueError(f"row has {len(row)} cells, table has {len(columns)} columns")
    cells = []
    for col, value in zip(columns, row):
        lines = canvas.wrap_text(str(value), col.width - 2 * CELL_PAD, BODY_FONT)
        cells.append(lines[:MAX_CELL_LINES])
    return cells


def _cells_height(cells: list[list[str]]) -> float:
    return row_height(max(len(c) for c in cells))


def _draw_header(cursor: LayoutCursor, columns: Sequence[Column], x: float) -> None:
    canvas = cursor.canvas
    y = cursor.y
    canvas.fill_rect(x, y, sum(c.width for c in columns), HEADER_H, PRIMARY)
    cx = x
    for col in columns:
        tx = _aligned_x(canvas, col, cx, col.label, HEADER_FONT, bold=True)
        canvas.text(tx, y + HEADER_H / 2 + 1.2, col.label, HEADER_FONT, WHITE, bold=True)
        cx += col.width
    cursor.advance(HEADER_H)


def _draw_row(
    cursor: LayoutCursor,
    columns: Sequence[Column],
    values: Sequence[str],
    cells: list[list[str]],
    row_idx: int,
    h: float,
    x: float,
    cell_style: CellStyle | None,
) -> None:
    canvas = cursor.canvas
    y = cursor.y
    if row_idx % 2 == 1:
        canvas.fill_rect(x, y, sum(c.width for c in columns), h, BACKGROUND)

    cx = x
    for col_idx, (col, lines) in enumerate(zip(columns, cells)):
        canvas.stroke_rect(cx, y, col.width, h, GRID, line_width=0.1)
        color = None
        if cell_style is not None:
            color = cell_style(row_idx, col_idx, str(values[col_idx]))
        for i, line in enumerate(lines):
            tx = _aligned_x(canvas, col, cx, line, BODY_FONT)
            canvas.text(tx, y + CELL_PAD + (i + 1) * LINE_H - 0.9, line, BODY_FONT, color or BODY)
        cx += col.width
    cursor.advance(h)


def _aligned_x(canvas, col: Column, cell_x: float, text: str, size: float,
               bold: bool = False) -> float:
    if col.align == "L":
        return cell_x + CELL_PAD
    width = canvas.string_width(text, size, bold=bold)
    if col.align == "C":
        return cell_x + (col.width - width) / 2
    return cell_x + col.width - CELL_PAD - width
