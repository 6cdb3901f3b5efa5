# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from sarifmd.core.exceptions import SarifMdError

logger = logging.getLogger("sarifmd.cli")

app = typer.Typer(
    name="sarifmd",
    help="Render SARIF static-analysis results as a Markdown report",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    MARKDOWN = "markdown"
    CONSOLE = "console"


@app.command()
def render(
    sarif_file: Annotated[
        Path, typer.Argument(help="SARIF file to render (relative to the workspace)")
    ],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.MARKDOWN,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the Markdown to this file"),
    ] = None,
    job_summary: Annotated[
        bool | None,
        typer.Option(
            "--job-summary/--no-job-summary",
            help="Append the report to the GitHub job summary "
            "(default: SARIFMD_ADD_JOB_SUMMARY)",
        ),
    ] = None,
) -> None:
    """Render a SARIF file as a Markdown report."""
    from sarifmd.ci.summary import publish_job_summary
    from sarifmd.core.config import get_settings
    from sarifmd.core.logging import setup_logging
    from sarifmd.io import read_sarif, resolve_input_path, write_report
    from sarifmd.report import generate_markdown_from_sarif

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    sarif_path = resolve_input_path(sarif_file, settings.workspace)
    add_summary = settings.add_job_summary if job_summary is None else job_summary

    try:
        sarif = read_sarif(sarif_path)
        markdown = generate_markdown_from_sarif(sarif, input_path=sarif_path)
        logger.debug("Markdown report generated successfully.", extra={"sarif_path": sarif_path})

        if output:
            written = write_report(markdown, output)
            typer.echo(f"Output written to {written}", err=True)

        if add_summary:
            publish_job_summary(markdown, settings.step_summary_path)
    except SarifMdError as exc:
        logger.debug("Report generation failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    _print_report(markdown, fmt)


def _print_report(markdown: str, fmt: OutputFormat) -> None:
    if fmt == OutputFormat.CONSOLE:
        from rich.console import Console
        from rich.markdown import Markdown

        Console().print(Markdown(markdown))
    else:
        sys.stdout.write(markdown + "\n")


@app.command()
def version() -> None:
    """Show version information."""
    from sarifmd import __version__

    typer.echo(f"sarifmd v{__version__}")
