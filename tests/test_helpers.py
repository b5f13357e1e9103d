"""Tests for palette selection, status tokens, and naming helpers."""

from datetime import date, datetime

from compliance_report.render._helpers import (
    DESTRUCTIVE,
    SECONDARY,
    WARNING,
    latin1,
    overall_color,
    progress_color,
    report_filename,
    status_color,
    status_token,
)


def test_progress_color_boundaries():
    assert progress_color(100) == SECONDARY
    assert progress_color(80) == SECONDARY
    assert progress_color(79) == WARNING
    assert progress_color(60) == WARNING
    assert progress_color(59) == DESTRUCTIVE
    assert progress_color(0) == DESTRUCTIVE


def test_status_color_matches_tokens():
    assert status_color("PASSED") == SECONDARY
    assert status_color("+ PASSED") == SECONDARY
    assert status_color("WARNING") == WARNING
    assert status_color("FAILED") == DESTRUCTIVE


def test_status_color_is_case_sensitive():
    assert status_color("passed") is None
    assert status_color("Failed") is None
    assert status_color("Structure") is None


def test_status_token():
    assert status_token("passed") == "PASSED"
    assert status_token("warning") == "WARNING"
    assert status_token("failed") == "FAILED"


def test_overall_color():
    assert overall_color("compliant") == SECONDARY
    assert overall_color("warning") == WARNING
    assert overall_color("non-compliant") == DESTRUCTIVE


def test_report_filename_uses_day_only():
    assert report_filename(datetime(2026, 3, 7, 23, 59, 1)) == "Compliance_Report_2026-03-07.pdf"
    assert report_filename(date(2026, 3, 7), "md") == "Compliance_Report_2026-03-07.md"


def test_latin1_replaces_symbols():
    assert latin1("✓ done — ok") == "+ done -- ok"
    assert latin1("中") == "?"
