"""Report branding and static text, optionally loaded from YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

log = logging.getLogger(__name__)

DEFAULT_RECOMMENDATIONS = [
    "Review and address all non-compliant items before proceeding with construction",
    "Consult with a structural engineer for any load-bearing modifications",
    "Obtain necessary permits from local planning authority",
    "Schedule follow-up compliance check after revisions",
    "Keep all documentation for future reference and inspections",
]


class ConfigError(Exception):
    """The report configuration file could not be read or validated."""


class ReportConfig(BaseModel):
    product_name: str = "ARCHITECTURAL PLANS"
    report_title: str = "COMPLIANCE REPORT"
    logo_text: str = "AP"
    footer_lines: list[str] = Field(default_factory=lambda: [
        "Architectural Plans Compliance Checker",
        "Professional Building Compliance Analysis",
        "Contact: info@compliancechecker.com | www.compliancechecker.com",
    ])
    recommendations: list[str] = Field(default_factory=lambda: list(DEFAULT_RECOMMENDATIONS))


def load_config(path: Path) -> ReportConfig:
    """Read a YAML file of ReportConfig overrides. Missing keys keep defaults."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    try:
        config = ReportConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    log.debug("Loaded report config from %s", path)
    return config
