"""Load compliance results exported by the upload UI from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from compliance_report.models import ComplianceResult

log = logging.getLogger(__name__)

_RESULTS_ADAPTER = TypeAdapter(list[ComplianceResult])


class ResultsFileError(Exception):
    """A results file is unreadable or does not hold a list of results."""


def load_results(path: Path) -> list[ComplianceResult]:
    """Parse a results file. ``.yaml``/``.yml`` use YAML, anything else JSON.

    The document may be a bare list of results or a mapping with a
    ``results`` key (the shape written by ``--format json``).
    """
    try:
        text = path.read_text()
    except OSError as e:
        raise ResultsFileError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ResultsFileError(f"Cannot parse {path}: {e}") from e

    if isinstance(data, dict) and "results" in data:
        data = data["results"]
    if data is None:
        data = []

    try:
        results = _RESULTS_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ResultsFileError(f"Invalid results in {path}: {e}") from e

    log.info("Loaded %d result(s) from %s", len(results), path)
    return results
