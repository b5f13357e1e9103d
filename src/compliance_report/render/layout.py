"""Vertical layout cursor: the single page-break decision point."""

from __future__ import annotations

import logging

from compliance_report.render.canvas import Canvas

log = logging.getLogger(__name__)

TOP_MARGIN = 20.0
FOOTER_H = 20.0                      # footer band drawn by the finalizer
BOTTOM_MARGIN = FOOTER_H + 5.0
CONTENT_X = 15.0
CONTENT_W = 180.0                    # 210 - 15 - 15


class LayoutCursor:
    """Tracks the write position on the active page.

    Callers reserve() the height they are about to draw, draw, then
    advance() by what they consumed.
    """

    def __init__(self, canvas: Canvas, *, top_margin: float = TOP_MARGIN,
                 bottom_margin: float = BOTTOM_MARGIN):
        self.canvas = canvas
        self.top_margin = top_margin
        self.bottom_margin = bottom_margin
        self.page_height = canvas.height
        self.y = top_margin

    @property
    def limit(self) -> float:
        """Lowest y content may reach on a page."""
        return self.page_height - self.bottom_margin

    @property
    def remaining(self) -> float:
        return self.limit - self.y

    def reserve(self, height: float) -> bool:
        """Break to a new page unless height fits. Returns True on a break.

        A cursor already at the top of a page never breaks: content taller
        than a whole page is drawn where it stands.
        """
        if self.y + height <= self.limit or self.y <= self.top_margin:
            return False
        log.debug("Page break before %.1fmm block at y=%.1f on page %d",
                  height, self.y, self.canvas.current_page)
        self.new_page()
        return True

    def advance(self, height: float) -> None:
        self.y += height

    def new_page(self) -> None:
        self.canvas.new_page()
        self.y = self.top_margin
