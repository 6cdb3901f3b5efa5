# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF to Markdown transformation.

Provides:
- Rule index building and severity normalization per SARIF run
- Category humanization for breadcrumb labels
- Result collection and Markdown rendering
"""

from sarifmd.report.categories import humanize_category_id
from sarifmd.report.collector import collect_results, format_location
from sarifmd.report.markdown import (
    build_category_sections,
    build_summary_table,
    escape_html,
    escape_table_cell,
    generate_markdown_from_sarif,
    render_markdown,
)
from sarifmd.report.rules import build_rule_index
from sarifmd.report.severity import normalize_severity, severity_sort_key, title_case

__all__ = [
    "build_category_sections",
    "build_rule_index",
    "build_summary_table",
    "collect_results",
    "escape_html",
    "escape_table_cell",
    "format_location",
    "generate_markdown_from_sarif",
    "humanize_category_id",
    "normalize_severity",
    "render_markdown",
    "severity_sort_key",
    "title_case",
]
