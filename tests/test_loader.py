"""Tests for reading results files and report configuration."""

import json

import pytest

from compliance_report.config import DEFAULT_RECOMMENDATIONS, ConfigError, load_config
from compliance_report.loader import ResultsFileError, load_results

_ONE = {
    "fileName": "plan.pdf",
    "overallStatus": "warning",
    "processingTime": 1.0,
    "rules": [{"id": "1", "category": "Fire", "rule": "Exits",
               "status": "warning", "message": "Check width"}],
}


def test_load_json_list(tmp_path):
    path = tmp_path / "results.json"
    path.write_text(json.dumps([_ONE]))
    results = load_results(path)
    assert len(results) == 1
    assert results[0].overall_status == "warning"


def test_load_json_mapping_with_results_key(tmp_path):
    path = tmp_path / "results.json"
    path.write_text(json.dumps({"generated_at": "x", "results": [_ONE, _ONE]}))
    assert len(load_results(path)) == 2


def test_load_yaml(tmp_path):
    path = tmp_path / "results.yaml"
    path.write_text(
        "- fileName: plan.pdf\n"
        "  overallStatus: compliant\n"
        "  rules:\n"
        "    - {id: '1', category: Fire, rule: Exits, status: passed, message: ok}\n"
    )
    results = load_results(path)
    assert results[0].rules[0].status == "passed"
    assert results[0].processing_time == 0.0


def test_load_empty_yaml_is_empty_list(tmp_path):
    path = tmp_path / "results.yml"
    path.write_text("")
    assert load_results(path) == []


def test_load_rejects_bad_status(tmp_path):
    path = tmp_path / "results.json"
    path.write_text(json.dumps([dict(_ONE, overallStatus="unknown")]))
    with pytest.raises(ResultsFileError, match="Invalid results"):
        load_results(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(ResultsFileError, match="Cannot read"):
        load_results(tmp_path / "missing.json")


def test_config_partial_override_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logo_text: XY\n")
    config = load_config(path)
    assert config.logo_text == "XY"
    assert config.product_name == "ARCHITECTURAL PLANS"
    assert config.recommendations == DEFAULT_RECOMMENDATIONS


def test_config_empty_file_is_default(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).report_title == "COMPLIANCE REPORT"


def test_config_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="must be a mapping"):
        load_config(path)


def test_config_rejects_wrong_types(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("recommendations: 5\n")
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(path)
