"""CLI entry point for compliance-report."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

import click

from compliance_report import __version__
from compliance_report.config import ConfigError, ReportConfig, load_config
from compliance_report.loader import ResultsFileError, load_results
from compliance_report.models import InvariantViolation, ReportStats, check_consistency
from compliance_report.render._helpers import report_filename


@click.command()
@click.argument("results_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["pdf", "md", "json"], case_sensitive=False),
    default="pdf",
    help="Output format (default: pdf).",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, resolve_path=True),
    default=None,
    help="Output file path. Defaults to Compliance_Report_<date>.pdf for pdf, stdout for md/json.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
    help="YAML file overriding report branding and recommendations.",
)
@click.option(
    "--generated-at",
    type=click.DateTime(),
    default=None,
    help="Generation timestamp to print in the report. Defaults to now.",
)
@click.option(
    "--strict", is_flag=True, default=False,
    help="Reject results whose overall status disagrees with their rules.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=__version__)
def main(
    results_file: str,
    fmt: str,
    output: str | None,
    config_path: str | None,
    generated_at: datetime | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Build a compliance report from a JSON or YAML file of analysis results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        results = load_results(Path(results_file))
        config = load_config(Path(config_path)) if config_path else ReportConfig()
        if strict:
            check_consistency(results)
    except (ResultsFileError, ConfigError, InvariantViolation) as e:
        raise click.ClickException(str(e)) from e

    if not results:
        click.echo("Nothing to report.")
        return

    generated_at = generated_at or datetime.now()
    fmt = fmt.lower()
    if fmt == "json":
        _output_json(results, generated_at, output)
    elif fmt == "md":
        _output_md(results, generated_at, config, output)
    else:
        _output_pdf(results, generated_at, config, output)


def _output_pdf(results, generated_at: datetime, config: ReportConfig, output: str | None) -> None:
    from compliance_report.render.pdf import render_pdf
    dest = Path(output) if output else Path(report_filename(generated_at, "pdf"))
    render_pdf(results, dest, generated_at, config=config)
    click.echo(f"PDF report written to {dest}")


def _output_md(results, generated_at: datetime, config: ReportConfig, output: str | None) -> None:
    from compliance_report.render.markdown import render_markdown
    md = render_markdown(results, generated_at, config)
    if output:
        Path(output).write_text(md)
        click.echo(f"Report written to {output}")
    else:
        click.echo(md)


def _output_json(results, generated_at: datetime, output: str | None) -> None:
    data = {
        "generated_at": generated_at.isoformat(),
        "stats": ReportStats.from_results(results).model_dump(),
        "results": [r.model_dump(by_alias=True) for r in results],
    }

    text = json.dumps(data, indent=2)
    if output:
        Path(output).write_text(text)
        click.echo(f"JSON report written to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
