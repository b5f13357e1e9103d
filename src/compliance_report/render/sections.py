"""Section builders. Each draws one part of the report at the cursor."""

from __future__ import annotations

from datetime import datetime

from compliance_report.config import ReportConfig
from compliance_report.models import ComplianceResult, ReportStats
from compliance_report.render._helpers import (
    ACCENT,
    BACKGROUND,
    BAR_TRACK,
    Color,
    DESTRUCTIVE,
    MUTED,
    PRIMARY,
    SECONDARY,
    WARNING,
    WHITE,
    generated_label,
    overall_color,
    progress_color,
    status_color,
    status_token,
)
from compliance_report.render.canvas import Canvas
from compliance_report.render.layout import CONTENT_W, CONTENT_X, FOOTER_H, LayoutCursor
from compliance_report.render.table import (
    HEADER_H,
    Column,
    first_row_height,
    render_table,
    row_height,
)

TITLE_H = 40.0
SUMMARY_BOX_H = 25.0
SUMMARY_H = 68.0
TILE_W = 35.0
TILE_H = 12.0
TILE_STEP = 40.0
BAR_W = 150.0
BAR_H = 8.0
BANNER_H = 15.0
RECO_BAND_H = 25.0
RECO_WRAP_W = 160.0
RECO_LINE_H = 5.0

RULE_COLUMNS = (
    Column("Category", 25),
    Column("Rule", 35),
    Column("Status", 25, align="C"),
    Column("Message", 95),
)
STATUS_COL = 2

# Banner, gap and the table header. The first body row is added per file.
FILE_BLOCK_HEAD = BANNER_H + 5 + HEADER_H


# ── 1. Title block ─────────────────────────────────────────────────────────

def title_block(cursor: LayoutCursor, config: ReportConfig, generated_at: datetime) -> None:
    """Full-width band at the top of page 1."""
    c = cursor.canvas
    c.fill_rect(0, 0, c.width, TITLE_H, PRIMARY)

    # Logo square
    c.fill_rect(15, 10, 8, 8, ACCENT)
    c.text(17, 15, config.logo_text, 6, WHITE)

    c.text(30, 20, config.product_name, 24, WHITE, bold=True)
    c.text(30, 28, config.report_title, 20, WHITE)
    c.text(30, 35, generated_label(generated_at), 10, WHITE)

    cursor.advance(TITLE_H + 10 - cursor.y)


# ── 2. Executive summary ───────────────────────────────────────────────────

def summary_tiles(stats: ReportStats) -> list[tuple[int, str, int, Color]]:
    """(slot, label, count, color) for each tile shown. Total is always shown."""
    tiles = [(0, "TOTAL FILES", stats.total_files, PRIMARY)]
    for slot, label, count, color in (
        (1, "COMPLIANT", stats.compliant_files, SECONDARY),
        (2, "WARNINGS", stats.warning_files, WARNING),
        (3, "NON-COMPLIANT", stats.non_compliant_files, DESTRUCTIVE),
    ):
        if count > 0:
            tiles.append((slot, label, count, color))
    return tiles


def executive_summary(cursor: LayoutCursor, stats: ReportStats) -> None:
    """Stat tiles in a bordered box, the compliance-rate bar, then the details heading."""
    cursor.reserve(SUMMARY_H)
    c = cursor.canvas
    y0 = cursor.y

    c.fill_rect(CONTENT_X, y0, CONTENT_W, SUMMARY_BOX_H, BACKGROUND)
    c.stroke_rect(CONTENT_X, y0, CONTENT_W, SUMMARY_BOX_H, PRIMARY, line_width=0.5)
    c.text(20, y0 + 8, "EXECUTIVE SUMMARY", 14, PRIMARY, bold=True)

    tile_y = y0 + 12
    for slot, label, count, color in summary_tiles(stats):
        tx = 20 + slot * TILE_STEP
        c.fill_rect(tx, tile_y, TILE_W, TILE_H, color)
        c.text(tx + 3, tile_y + 8, str(count), 16, WHITE, bold=True)
        c.text(tx + 13, tile_y + 7.5, label, 6.5, WHITE)

    # Compliance rate bar
    rate = stats.compliance_rate
    c.text(20, y0 + 39, "OVERALL COMPLIANCE RATE", 12, PRIMARY, bold=True)
    bar_y = y0 + 42
    c.fill_rect(20, bar_y, BAR_W, BAR_H, BAR_TRACK)
    c.fill_rect(20, bar_y, BAR_W * rate / 100, BAR_H, progress_color(rate))
    c.text(20 + BAR_W + 5, bar_y + 6, f"{rate}%", 14, PRIMARY, bold=True)

    c.text(20, y0 + 62, "DETAILED COMPLIANCE ANALYSIS", 14, PRIMARY, bold=True)
    cursor.advance(SUMMARY_H)


# ── 3. File blocks ─────────────────────────────────────────────────────────

def rule_rows(result: ComplianceResult) -> list[list[str]]:
    """Table rows in the result's rule order."""
    return [
        [r.category, r.rule, status_token(r.status), r.message]
        for r in result.rules
    ]


def _status_cell_style(row_idx: int, col_idx: int, text: str) -> Color | None:
    if col_idx != STATUS_COL:
        return None
    return status_color(text)


def file_block(cursor: LayoutCursor, index: int, result: ComplianceResult) -> None:
    """Status banner for one result followed by its rules table.

    The banner is kept on the same page as the table header and the first
    row at its wrapped height.
    """
    c = cursor.canvas
    rows = rule_rows(result)
    first_h = first_row_height(c, RULE_COLUMNS, rows) or row_height(1)
    cursor.reserve(FILE_BLOCK_HEAD + first_h)
    y = cursor.y

    c.fill_rect(CONTENT_X, y, CONTENT_W, BANNER_H, overall_color(result.overall_status))
    c.text(20, y + 6, f"FILE {index}: {result.file_name}", 12, WHITE, bold=True)
    c.text(20, y + 12, f"STATUS: {result.overall_status.upper()}", 10, WHITE)
    cursor.advance(BANNER_H + 5)

    if not result.rules:
        c.text(20, cursor.y + 4, "No rules were evaluated for this file.", 9, MUTED)
        cursor.advance(10)
        return

    render_table(cursor, RULE_COLUMNS, rows, cell_style=_status_cell_style)
    cursor.advance(10)


# ── 4. Recommendations ─────────────────────────────────────────────────────

def recommendations(cursor: LayoutCursor, config: ReportConfig) -> None:
    """Numbered action items, always on a fresh page."""
    cursor.new_page()
    c = cursor.canvas
    c.fill_rect(0, 0, c.width, RECO_BAND_H, PRIMARY)
    c.text(20, 15, "RECOMMENDATIONS & NEXT STEPS", 16, WHITE, bold=True)
    cursor.advance(RECO_BAND_H + 5 - cursor.y)

    c.text(20, cursor.y + 5, "ACTION ITEMS:", 12, PRIMARY, bold=True)
    cursor.advance(10)

    for n, item in enumerate(config.recommendations, 1):
        lines = c.wrap_text(item, RECO_WRAP_W, 10)
        h = len(lines) * RECO_LINE_H + 3
        cursor.reserve(h)
        y = cursor.y + 4
        c.text(25, y, f"{n}.", 10, MUTED)
        for i, line in enumerate(lines):
            c.text(35, y + i * RECO_LINE_H, line, 10, PRIMARY)
        cursor.advance(h)


# ── 5. Footer ──────────────────────────────────────────────────────────────

def page_label(page: int, total: int) -> str:
    return f"Page {page} of {total}"


def footer_band(canvas: Canvas, config: ReportConfig, page: int, total: int) -> None:
    """Footer band on the currently selected page."""
    top = canvas.height - FOOTER_H
    canvas.fill_rect(0, top, canvas.width, FOOTER_H, PRIMARY)
    for i, line in enumerate(config.footer_lines[:3]):
        canvas.text(20, top + 6 + i * 5, line, 8, WHITE)

    label = page_label(page, total)
    width = canvas.string_width(label, 8)
    canvas.text(canvas.width - 15 - width, top + 16, label, 8, WHITE)
