# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF to Markdown report generator for GitHub Actions.

Reads a SARIF file (relative paths resolve against $GITHUB_WORKSPACE),
renders the Markdown report, optionally writes it to a file and appends it
to the job summary. Exits with code 1 and an ``::error::`` annotation if
the report cannot be produced.
"""

from __future__ import annotations

import argparse
import logging
import sys

from sarifmd.ci.summary import publish_job_summary, set_github_output
from sarifmd.core.config import get_settings
from sarifmd.core.exceptions import SarifMdError
from sarifmd.core.logging import setup_logging
from sarifmd.io import read_sarif, resolve_input_path, write_report
from sarifmd.report import generate_markdown_from_sarif

logger = logging.getLogger("sarifmd.action")

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


def parse_boolean_input(value: str) -> bool:
    """Parse a boolean action input the way GitHub's YAML 1.2 core schema does."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    msg = f"Input does not meet YAML 1.2 \"Core Schema\" specification: {value!r}"
    raise argparse.ArgumentTypeError(msg)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a SARIF file as a Markdown report.",
    )
    parser.add_argument(
        "--file-path",
        required=True,
        help="SARIF file to render, absolute or relative to the workspace",
    )
    parser.add_argument(
        "--add-job-summary",
        default=None,
        type=parse_boolean_input,
        help="Append the report to the job summary (true/false)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional path to write the Markdown report to",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the report script."""
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    add_summary = (
        settings.add_job_summary if args.add_job_summary is None else args.add_job_summary
    )

    try:
        sarif_path = resolve_input_path(args.file_path, settings.workspace)
        sarif = read_sarif(sarif_path)
        markdown = generate_markdown_from_sarif(sarif, input_path=sarif_path)
        logger.debug("Markdown report generated successfully.", extra={"sarif_path": sarif_path})

        if args.output:
            written = write_report(markdown, args.output)
            set_github_output("report_path", str(written))
            sys.stdout.write(f"Report written to {written}\n")

        if add_summary:
            publish_job_summary(markdown, settings.step_summary_path)
            logger.debug("Markdown report appended to the job summary.")
    except SarifMdError as exc:
        sys.stdout.write(f"::error::{exc}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
