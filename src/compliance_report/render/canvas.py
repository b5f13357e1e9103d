"""Page-addressable drawing surface on top of fpdf2.

Every primitive is drawn into the PDF and also recorded in a per-page
operation log, so layout can be inspected without parsing PDF bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from fpdf import FPDF
from fpdf.enums import MethodReturnValue

from compliance_report.render._helpers import Color, latin1

log = logging.getLogger(__name__)

_FONT = "Helvetica"
_PT_TO_MM = 25.4 / 72


@dataclass(frozen=True)
class DrawOp:
    """One recorded drawing primitive."""
    kind: str           # "fill", "stroke", "text"
    x: float
    y: float
    w: float = 0.0
    h: float = 0.0
    color: Color = (0, 0, 0)
    text: str = ""
    size: float = 0.0


class Canvas:
    """A4 portrait, millimetre units. Pages are numbered from 1."""

    def __init__(self, *, creation_date: datetime | None = None):
        self._pdf = FPDF(orientation="P", unit="mm", format="A4")
        # Page breaks are decided by LayoutCursor, never by fpdf2.
        self._pdf.set_auto_page_break(auto=False)
        self._pdf.set_margins(0, 0, 0)
        self._pdf.set_creator("compliance-report")
        self._pdf.set_title("Compliance Report")
        if creation_date is not None:
            if creation_date.tzinfo is None:
                creation_date = creation_date.astimezone()
            self._pdf.set_creation_date(creation_date)

        self.width: float = self._pdf.w
        self.height: float = self._pdf.h
        self._ops: list[list[DrawOp]] = []
        self._page = 0

    # ── Pages ──────────────────────────────────────────────────────────

    def new_page(self) -> int:
        """Append a page and make it current. Returns its 1-based number."""
        self._pdf.add_page()
        self._ops.append([])
        self._page = len(self._ops)
        log.debug("Started page %d", self._page)
        return self._page

    def page_count(self) -> int:
        return len(self._ops)

    @property
    def current_page(self) -> int:
        return self._page

    def select_page(self, page: int) -> None:
        """Make an existing page current again (finalization pass only)."""
        if not 1 <= page <= len(self._ops):
            raise IndexError(f"page {page} out of range 1..{len(self._ops)}")
        self._pdf.page = page
        self._page = page
        # fpdf2 caches the active font; switch away so the next set_font
        # is written into the selected page's content stream.
        self._pdf.set_font("Courier", "", 1)

    # ── Primitives ─────────────────────────────────────────────────────

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self._require_page()
        self._pdf.set_fill_color(*color)
        self._pdf.rect(x, y, w, h, style="F")
        self._record(DrawOp("fill", x, y, w, h, color))

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: Color,
                    line_width: float = 0.2) -> None:
        self._require_page()
        self._pdf.set_draw_color(*color)
        self._pdf.set_line_width(line_width)
        self._pdf.rect(x, y, w, h, style="D")
        self._record(DrawOp("stroke", x, y, w, h, color))

    def text(self, x: float, y: float, text: str, size: float, color: Color,
             bold: bool = False) -> None:
        """Draw a single line of text with its baseline at y."""
        self._require_page()
        safe = latin1(text)
        self._pdf.set_font(_FONT, "B" if bold else "", size)
        self._pdf.set_text_color(*color)
        self._pdf.text(x, y, safe)
        self._record(DrawOp("text", x, y, color=color, text=safe, size=size))

    # ── Measuring ──────────────────────────────────────────────────────

    def string_width(self, text: str, size: float, bold: bool = False) -> float:
        self._pdf.set_font(_FONT, "B" if bold else "", size)
        return self._pdf.get_string_width(latin1(text))

    def wrap_text(self, text: str, width: float, size: float) -> list[str]:
        """Split text into lines that fit width at the given font size."""
        self._pdf.set_font(_FONT, "", size)
        lines = self._pdf.multi_cell(
            width, size * _PT_TO_MM, latin1(text),
            dry_run=True, output=MethodReturnValue.LINES,
        )
        return list(lines) or [""]

    # ── Inspection / output ────────────────────────────────────────────

    def ops(self, page: int) -> list[DrawOp]:
        """Recorded operations for a 1-based page."""
        return list(self._ops[page - 1])

    def texts(self, page: int) -> list[str]:
        return [op.text for op in self._ops[page - 1] if op.kind == "text"]

    def structure(self) -> tuple[tuple[DrawOp, ...], ...]:
        """Immutable snapshot of every page's operations."""
        return tuple(tuple(page) for page in self._ops)

    def output(self) -> bytes:
        """Serialize the document. Errors from fpdf2 propagate unchanged."""
        return bytes(self._pdf.output())

    def _require_page(self) -> None:
        # Must run before any fpdf2 call
        if not self._ops:
            raise RuntimeError("no page to draw on; call new_page() first")

    def _record(self, op: DrawOp) -> None:
        self._ops[self._page - 1].append(op)
