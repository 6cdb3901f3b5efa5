# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Single pass over all runs gathering severity counts and category groups."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sarifmd.core.constants import (
    UNCATEGORIZED_ID,
    UNKNOWN_FILE,
    UNKNOWN_LOCATION,
    UNKNOWN_RULE,
)
from sarifmd.models.report import Category, CollectedResults, IssueEntry, RuleInfo
from sarifmd.models.sarif import SarifLocation, SarifRun
from sarifmd.report.categories import humanize_category_id
from sarifmd.report.rules import build_rule_index
from sarifmd.report.severity import normalize_severity

logger = logging.getLogger(__name__)


def format_location(location: SarifLocation | None) -> str:
    """Render a location as ``file`` or ``file:line``."""
    if location is None or location.physicalLocation is None:
        return UNKNOWN_LOCATION

    physical = location.physicalLocation
    uri = physical.artifactLocation.uri if physical.artifactLocation else None
    file = uri or UNKNOWN_FILE
    start_line = physical.region.startLine if physical.region else None
    return f"{file}:{start_line}" if start_line else file


def collect_results(runs: Iterable[SarifRun]) -> CollectedResults:
    """Group every result of every run by category, counting severities.

    Issues keep input order within each category. A result whose rule has
    several categories appears in each of them as the same IssueEntry.
    """
    summary_counts: dict[str, int] = {}
    categories: dict[str, Category] = {}
    total_issues = 0

    for run in runs:
        rule_index = build_rule_index(run)

        for result in run.results:
            rule_info = rule_index.get(result.ruleId) or RuleInfo(id=result.ruleId)
            severity = normalize_severity(result, rule_info)
            summary_counts[severity] = summary_counts.get(severity, 0) + 1
            total_issues += 1

            category_ids = rule_info.categories or (UNCATEGORIZED_ID,)
            first_location = result.locations[0] if result.locations else None

            issue = IssueEntry(
                severity=severity,
                rule_id=rule_info.id or UNKNOWN_RULE,
                rule_description=rule_info.short_description or rule_info.full_description,
                message=(result.message.text if result.message else None) or "",
                location=format_location(first_location),
                help_uri=rule_info.help_uri,
                tags=tuple(result.properties.tags) if result.properties else (),
            )

            for category_id in category_ids:
                category = categories.get(category_id)
                if category is None:
                    category = Category(id=category_id, label=humanize_category_id(category_id))
                    categories[category_id] = category
                category.issues.append(issue)

    logger.debug(
        "Collected %d issue(s) in %d category bucket(s)",
        total_issues,
        len(categories),
        extra={"total_issues": total_issues, "category_count": len(categories)},
    )
    return CollectedResults(
        summary_counts=summary_counts,
        categories=categories,
        total_issues=total_issues,
    )
