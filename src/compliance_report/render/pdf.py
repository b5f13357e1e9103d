"""Render compliance results as a paginated PDF report.

Two passes: content is laid out first with no footers, then the
finalizer stamps a footer band and "Page i of N" on every page once
N is known.
"""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Iterable

from compliance_report.config import ReportConfig
from compliance_report.models import ComplianceResult, ReportStats, check_consistency
from compliance_report.render.canvas import Canvas
from compliance_report.render.layout import LayoutCursor
from compliance_report.render.sections import (
    executive_summary,
    file_block,
    footer_band,
    recommendations,
    title_block,
)

log = logging.getLogger(__name__)


def build_report(
    results: Iterable[ComplianceResult],
    generated_at: datetime,
    *,
    config: ReportConfig | None = None,
    strict: bool = False,
) -> Canvas | None:
    """Lay out and finalize the report. Returns None when there is nothing to report.

    With strict=True every result's overall status is checked against its
    rules first and InvariantViolation is raised on a mismatch.
    """
    results = list(results)
    if not results:
        log.info("No results supplied; nothing to report")
        return None
    if strict:
        check_consistency(results)

    config = config or ReportConfig()
    stats = ReportStats.from_results(results)
    log.info("Building report for %d file(s), compliance rate %d%%",
             stats.total_files, stats.compliance_rate)

    canvas = Canvas(creation_date=generated_at)
    cursor = LayoutCursor(canvas)
    cursor.new_page()

    title_block(cursor, config, generated_at)
    executive_summary(cursor, stats)
    for index, result in enumerate(results, 1):
        file_block(cursor, index, result)
    recommendations(cursor, config)

    finalize(canvas, config)
    return canvas


def finalize(canvas: Canvas, config: ReportConfig) -> int:
    """Stamp the footer band on every page. Returns the page count."""
    total = canvas.page_count()
    for page in range(1, total + 1):
        canvas.select_page(page)
        footer_band(canvas, config, page, total)
    log.info("Finalized %d page(s)", total)
    return total


def generate(
    results: Iterable[ComplianceResult],
    generated_at: datetime,
    *,
    config: ReportConfig | None = None,
    strict: bool = False,
) -> bytes | None:
    """Produce the PDF bytes, or None for an empty result collection."""
    canvas = build_report(results, generated_at, config=config, strict=strict)
    if canvas is None:
        return None
    return canvas.output()


def render_pdf(
    results: Iterable[ComplianceResult],
    output_path: Path,
    generated_at: datetime | None = None,
    *,
    config: ReportConfig | None = None,
    strict: bool = False,
) -> Path | None:
    """Write the PDF to output_path. Nothing is written for empty input.

    The file is written to a temporary sibling and renamed into place, so
    a failed write never leaves a partial report behind.
    """
    generated_at = generated_at or datetime.now()
    data = generate(results, generated_at, config=config, strict=strict)
    if data is None:
        return None

    output_path = Path(output_path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent,
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp_name, output_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    log.info("PDF report written to %s (%d bytes)", output_path, len(data))
    return output_path
