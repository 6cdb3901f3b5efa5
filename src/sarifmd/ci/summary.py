# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""GitHub Actions integration: job summary and step outputs."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sarifmd.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def publish_job_summary(markdown: str, summary_path: Path | None) -> Path:
    """Append *markdown* to the job summary file and return its path.

    GitHub renders everything appended to ``$GITHUB_STEP_SUMMARY`` on the
    workflow run page.

    Raises:
        ConfigurationError: If no summary file is configured.
    """
    if summary_path is None:
        msg = "GITHUB_STEP_SUMMARY is not set; cannot append the job summary"
        raise ConfigurationError(msg)

    with open(summary_path, "a", encoding="utf-8") as f:
        f.write(markdown)
        f.write("\n")
    logger.debug(
        "Markdown report appended to the job summary at %s",
        summary_path,
        extra={"summary_path": summary_path},
    )
    return Path(summary_path)


def set_github_output(name: str, value: str) -> None:
    """Write a key=value pair to $GITHUB_OUTPUT."""
    output_file = os.environ.get("GITHUB_OUTPUT")
    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")
