# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""junit-report CLI: render validation results as a JUnit XML report.

Usage
-----
    junit-report render results.yaml
    junit-report render results.json --output reports/junit.xml
    junit-report --verbose render results.yaml --fail-on-invalid

Results File
------------
YAML or JSON. Either a list of results or a mapping with a ``results``
list. Each result is a mapping::

    - file_path: cfg/a.yaml
      is_valid: true
    - file_path: cfg\\b.yaml
      is_valid: false
      error: bad key

Exit Codes
----------
    0: Report written
    1: Report written, ``--fail-on-invalid`` set and some result invalid
    2: Results could not be loaded or the report could not be rendered;
       nothing is written
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from junit_reporter.errors import (
    ModelReportErrorContext,
    ReportInputError,
    ReportRenderError,
)
from junit_reporter.models import (
    DEFAULT_TOOL_NAME,
    ModelJunitReporterConfig,
    ModelValidationReport,
)
from junit_reporter.reporter import JunitReporter

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_INVALID_RESULTS = 1
EXIT_RENDER_ERROR = 2


class _PathSink:
    """Sink writing the report to a file, created only on first write."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def write(self, text: str, /) -> int:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(text, encoding="utf-8")
        return len(text)


def load_validation_reports(path: Path) -> list[ModelValidationReport]:
    """Load validation results from a YAML or JSON file.

    Args:
        path: Results file.

    Returns:
        Validation results in file order.

    Raises:
        ReportInputError: If the file cannot be read or parsed, or a result
            is malformed.
    """
    context = ModelReportErrorContext.with_correlation(operation="load_results")
    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ReportInputError(
            f"cannot read results file {path}: {e}", context=context
        ) from e

    if isinstance(content, dict):
        if not isinstance(content.get("results"), list):
            raise ReportInputError(
                f"results file {path} has no 'results' list",
                context=context,
            )
        content = content["results"]
    if content is None:
        content = []
    if not isinstance(content, list):
        raise ReportInputError(
            f"results file {path} must contain a list of results",
            context=context,
        )

    reports: list[ModelValidationReport] = []
    for index, item in enumerate(content):
        try:
            reports.append(ModelValidationReport.model_validate(item))
        except ValidationError as e:
            raise ReportInputError(
                f"invalid result #{index} in {path}: {e}",
                context=context,
                index=index,
            ) from e
    logger.debug("Loaded %d results from %s", len(reports), path)
    return reports


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """junit-report: render validation results as JUnit XML."""
    if verbose:
        logging.getLogger("junit_reporter").setLevel(logging.DEBUG)


@cli.command("render")
@click.argument(
    "results_file",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the report to this file instead of standard output.",
)
@click.option(
    "--tool-name",
    default=lambda: os.environ.get("JUNIT_REPORTER_TOOL_NAME", DEFAULT_TOOL_NAME),
    show_default=DEFAULT_TOOL_NAME,
    help=(
        "Report, suite and class name "
        "(overrides JUNIT_REPORTER_TOOL_NAME env var)."
    ),
)
@click.option(
    "--fail-on-invalid",
    is_flag=True,
    help="Exit 1 when any result is invalid.",
)
def render_cmd(
    results_file: Path,
    output: Path | None,
    tool_name: str,
    fail_on_invalid: bool,
) -> None:
    """Render RESULTS_FILE as a JUnit XML report."""
    try:
        config = ModelJunitReporterConfig(tool_name=tool_name, class_name=tool_name)
    except ValidationError as e:
        err_console.print(
            f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}"
        )
        sys.exit(EXIT_RENDER_ERROR)

    try:
        reports = load_validation_reports(results_file)
        reporter = JunitReporter(
            config=config,
            sink=_PathSink(output) if output is not None else None,
        )
        reporter.print(reports)
    except ReportRenderError as e:
        logger.debug("Render failed: %s", e.model.context)
        err_console.print(
            f"[bold red]{e.error_code.value}:[/bold red] {escape(e.message)}"
        )
        sys.exit(EXIT_RENDER_ERROR)

    invalid_count = sum(1 for r in reports if not r.is_valid)
    if output is not None:
        err_console.print(
            f"[green]Wrote JUnit report to {escape(str(output))}[/green] "
            f"({len(reports)} results, {invalid_count} invalid)"
        )
    if fail_on_invalid and invalid_count:
        sys.exit(EXIT_INVALID_RESULTS)
    sys.exit(EXIT_OK)


def main() -> None:
    """Entry point for the junit-report CLI."""
    logging.basicConfig(level=logging.WARNING)
    cli()


__all__ = ["cli", "load_validation_reports", "main"]
