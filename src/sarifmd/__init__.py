# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sarifmd - Render SARIF static-analysis results as Markdown reports."""

__version__ = "0.1.0"

from sarifmd.core.exceptions import (
    ConfigurationError,
    MalformedSarifError,
    SarifMdError,
    SarifReadError,
)
from sarifmd.io import read_sarif, resolve_input_path, write_report
from sarifmd.report import collect_results, generate_markdown_from_sarif, render_markdown

__all__ = [
    "ConfigurationError",
    "MalformedSarifError",
    "SarifMdError",
    "SarifReadError",
    "__version__",
    "collect_results",
    "generate_markdown_from_sarif",
    "read_sarif",
    "render_markdown",
    "resolve_input_path",
    "write_report",
]
