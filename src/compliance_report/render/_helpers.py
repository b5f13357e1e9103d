"""Shared helpers for render backends (PDF, markdown)."""

from __future__ import annotations

from datetime import date, datetime

Color = tuple[int, int, int]

# ── Color palette ──────────────────────────────────────────────────────────

PRIMARY: Color = (10, 61, 98)
SECONDARY: Color = (76, 175, 80)
ACCENT: Color = (184, 115, 51)
DESTRUCTIVE: Color = (212, 24, 61)
WARNING: Color = (255, 152, 0)
MUTED: Color = (113, 113, 130)
BACKGROUND: Color = (245, 245, 245)
WHITE: Color = (255, 255, 255)
BODY: Color = (30, 30, 30)
BAR_TRACK: Color = (220, 220, 220)
GRID: Color = (200, 200, 200)

_STATUS_TOKENS = {"passed": "PASSED", "warning": "WARNING", "failed": "FAILED"}

_OVERALL_COLORS = {
    "compliant": SECONDARY,
    "warning": WARNING,
    "non-compliant": DESTRUCTIVE,
}


def status_token(status: str) -> str:
    """Table token for a rule status: 'passed' -> 'PASSED'."""
    return _STATUS_TOKENS.get(status, status.upper())


def status_color(text: str) -> Color | None:
    """Color for a status cell by the token it contains; None means default."""
    if "PASSED" in text:
        return SECONDARY
    if "WARNING" in text:
        return WARNING
    if "FAILED" in text:
        return DESTRUCTIVE
    return None


def overall_color(overall_status: str) -> Color:
    return _OVERALL_COLORS.get(overall_status, DESTRUCTIVE)


def progress_color(rate: int) -> Color:
    """Progress bar fill: green from 80%, amber from 60%, red below."""
    if rate >= 80:
        return SECONDARY
    if rate >= 60:
        return WARNING
    return DESTRUCTIVE


def report_filename(generated_at: date | datetime, ext: str = "pdf") -> str:
    """Compliance_Report_<YYYY-MM-DD>.<ext> for the generation day."""
    day = generated_at.date() if isinstance(generated_at, datetime) else generated_at
    return f"Compliance_Report_{day.isoformat()}.{ext}"


def generated_label(generated_at: datetime) -> str:
    return f"Generated: {generated_at:%Y-%m-%d} at {generated_at:%H:%M:%S}"


# Unicode -> ASCII substitutions for PDF core fonts (latin-1 only).
_UNICODE_SUBS = str.maketrans({
    "\u2014": "--",   # em dash
    "\u2013": "-",    # en dash
    "\u2018": "'",    # left single quote
    "\u2019": "'",    # right single quote
    "\u201c": '"',    # left double quote
    "\u201d": '"',    # right double quote
    "\u2026": "...",  # ellipsis
    "\u2022": "*",    # bullet
    "\u2713": "+",    # check mark
    "\u2717": "x",    # ballot x
    "\u26a0": "!",    # warning sign
    "\u2265": ">=",   # greater or equal
    "\u2264": "<=",   # less or equal
    "\u00a0": " ",    # non-breaking space
})


def latin1(text: str) -> str:
    """Sanitize text for latin-1 PDF core fonts."""
    result = text.translate(_UNICODE_SUBS)
    return result.encode("latin-1", errors="replace").decode("latin-1")
