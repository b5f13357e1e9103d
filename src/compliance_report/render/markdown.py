"""Render compliance results as a Markdown report."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from compliance_report.config import ReportConfig
from compliance_report.models import ComplianceResult, ReportStats
from compliance_report.render._helpers import generated_label, status_token


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def render_markdown(
    results: Iterable[ComplianceResult],
    generated_at: datetime,
    config: ReportConfig | None = None,
) -> str | None:
    """Produce the full Markdown report, or None when there is nothing to report."""
    results = list(results)
    if not results:
        return None

    config = config or ReportConfig()
    stats = ReportStats.from_results(results)
    sections: list[str] = []

    # ── Title ────────────────────────────────────────────────────────────
    sections.append(f"# {config.product_name.title()} {config.report_title.title()}\n")
    sections.append(f"_{generated_label(generated_at)}_\n")

    # ── Executive summary ────────────────────────────────────────────────
    sections.append("## Executive Summary\n")
    sections.append("| Total | Compliant | Warnings | Non-Compliant | Compliance Rate |")
    sections.append("|---|---|---|---|---|")
    sections.append(
        f"| {stats.total_files} | {stats.compliant_files} | {stats.warning_files} "
        f"| {stats.non_compliant_files} | {stats.compliance_rate}% |"
    )
    sections.append("")

    # ── Per-file details ─────────────────────────────────────────────────
    sections.append("## Detailed Compliance Analysis\n")
    for index, r in enumerate(results, 1):
        sections.append(f"### File {index}: {r.file_name}\n")
        sections.append(f"**Status**: {r.overall_status.upper()}\n")
        if not r.rules:
            sections.append("No rules were evaluated for this file.\n")
            continue
        sections.append("| Category | Rule | Status | Message |")
        sections.append("|---|---|---|---|")
        for rule in r.rules:
            sections.append(
                f"| {_cell(rule.category)} | {_cell(rule.rule)} "
                f"| {status_token(rule.status)} | {_cell(rule.message)} |"
            )
        sections.append("")

    # ── Recommendations ──────────────────────────────────────────────────
    if config.recommendations:
        sections.append("## Recommendations & Next Steps\n")
        for n, item in enumerate(config.recommendations, 1):
            sections.append(f"{n}. {item}")
        sections.append("")

    sections.append("---\n")
    sections.append("  \n".join(config.footer_lines) + "\n")

    return "\n".join(sections)
