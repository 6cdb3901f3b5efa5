# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Markdown rendering of collected SARIF results.

The report is laid out for GitHub job summaries: a severity summary table
followed by one collapsible ``<details>`` block per category.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from sarifmd.models.report import Category, CollectedResults, IssueEntry
from sarifmd.models.sarif import parse_sarif
from sarifmd.report.collector import collect_results
from sarifmd.report.severity import severity_sort_key

logger = logging.getLogger(__name__)

LINE_BREAK = "<br>"

_NEWLINE_RE = re.compile(r"\r?\n")
# Line-break tags that survive cell escaping: <br>, <br/>, < BR / >
_BR_TAG_RE = re.compile(r"(<\s*br\s*/*\s*>)", re.IGNORECASE)

_ISSUE_TABLE_HEADER = (
    "| Rule | Severity | Message | Location | Tags | Help |\n"
    "| --- | --- | --- | --- | --- | --- |"
)


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


def escape_html(text: object) -> str:
    if text is None:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_table_cell(text: object) -> str:
    """Make *text* safe inside a Markdown table cell.

    Newlines become ``<br>``, pipes are backslash-escaped and angle
    brackets are entity-escaped except where they form a line-break tag.
    """
    if text is None:
        return ""
    value = _NEWLINE_RE.sub(LINE_BREAK, str(text)).replace("|", "\\|")
    parts = _BR_TAG_RE.split(value)
    # split() with a capture group puts the br tags at odd indexes
    return "".join(
        part if i % 2 else part.replace("<", "&lt;").replace(">", "&gt;")
        for i, part in enumerate(parts)
    )


# ---------------------------------------------------------------------------
# Summary table
# ---------------------------------------------------------------------------


def build_summary_table(summary_counts: Mapping[str, int], total_issues: int) -> str:
    if not summary_counts:
        return "No issues found."

    rows = [
        f"| {escape_table_cell(severity)} | {summary_counts[severity]} |"
        for severity in sorted(summary_counts, key=severity_sort_key)
    ]
    rows.append(f"| Total | {total_issues} |")
    return "\n".join(["| Severity | Issues |", "| --- | --- |", *rows])


# ---------------------------------------------------------------------------
# Category sections
# ---------------------------------------------------------------------------


def _issue_row(issue: IssueEntry) -> str:
    rule_parts = [f"**{escape_table_cell(issue.rule_id)}**"]
    if issue.rule_description:
        rule_parts.append(escape_table_cell(issue.rule_description))
    rule_cell = LINE_BREAK.join(rule_parts)
    tags_cell = escape_table_cell(", ".join(str(tag) for tag in issue.tags)) if issue.tags else ""
    help_cell = f"[Docs]({escape_table_cell(issue.help_uri)})" if issue.help_uri else ""

    return (
        f"| {rule_cell} | {escape_table_cell(issue.severity)} "
        f"| {escape_table_cell(issue.message)} | {escape_table_cell(issue.location)} "
        f"| {tags_cell} | {help_cell} |"
    )


def _category_sort_key(category: Category) -> tuple[int, str, str]:
    return (-len(category.issues), category.label.casefold(), category.label)


def build_category_sections(categories: Iterable[Category]) -> str:
    """Render one collapsible block per category, largest first.

    Returns an empty string when there are no categories.
    """
    sections: list[str] = []
    for category in sorted(categories, key=_category_sort_key):
        table_body = "\n".join(_issue_row(issue) for issue in category.issues)
        sections.append(
            "\n".join([
                "<details>",
                f"<summary>{escape_html(category.label)} ({len(category.issues)})</summary>",
                "",
                _ISSUE_TABLE_HEADER,
                table_body,
                "",
                "</details>",
                "",
            ])
        )
    return "\n".join(sections)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


def _display_path(input_path: str | os.PathLike[str]) -> str:
    return os.path.relpath(os.path.abspath(input_path), os.getcwd())


def render_markdown(
    collected: CollectedResults,
    *,
    input_path: str | os.PathLike[str] | None = None,
) -> str:
    """Assemble the full report from already collected results."""
    summary_table = build_summary_table(collected.summary_counts, collected.total_issues)
    category_sections = build_category_sections(collected.categories.values())

    lines = ["# SARIF Report"]
    if input_path:
        lines.extend(["", f"*Source: {escape_html(_display_path(input_path))}*"])

    lines.extend([
        "",
        "## Summary",
        "",
        summary_table,
        "",
        "## Problem Categories",
        "",
        category_sections or "No categorized issues found.",
    ])
    return "\n".join(lines)


def generate_markdown_from_sarif(
    sarif: Mapping[str, Any] | Any,
    *,
    input_path: str | Path | None = None,
) -> str:
    """Convert a decoded SARIF document into a Markdown report.

    Args:
        sarif: The parsed SARIF JSON (a dict) or an already validated
            ``SarifLog``.
        input_path: Optional path of the source file, shown relative to the
            current directory under the report heading.

    Returns:
        The complete Markdown document.

    Raises:
        MalformedSarifError: If the document has no ``runs`` list.
    """
    log = parse_sarif(sarif)
    collected = collect_results(log.runs)
    markdown = render_markdown(collected, input_path=input_path)
    logger.debug(
        "Rendered Markdown report (%d characters)",
        len(markdown),
        extra={"sarif_path": input_path, "report_length": len(markdown)},
    )
    return markdown
