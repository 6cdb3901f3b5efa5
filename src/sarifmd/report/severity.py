# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity normalization and ordering."""

from __future__ import annotations

from sarifmd.core.constants import SEVERITY_ORDER, SEVERITY_RANK, UNKNOWN_SEVERITY
from sarifmd.models.report import RuleInfo
from sarifmd.models.sarif import SarifResult


def title_case(value: object) -> str:
    """Uppercase the first character and lowercase the rest ("HIGH" -> "High")."""
    if not value:
        return ""
    text = str(value)
    return text[:1].upper() + text[1:].lower()


def normalize_severity(result: SarifResult, rule_info: RuleInfo | None) -> str:
    """Return the display severity for *result*.

    The tool-specific override property wins over the SARIF ``level``,
    which wins over the rule's default level. With none of them set the
    severity is ``Unknown``.
    """
    override = result.properties.severity_override if result.properties else None
    default_level = rule_info.default_level if rule_info else None
    severity = override or result.level or default_level
    return title_case(severity) if severity else UNKNOWN_SEVERITY


def severity_sort_key(label: str) -> tuple[int, str, str]:
    """Sort key placing known severities in fixed order, others alphabetically after."""
    rank = SEVERITY_RANK.get(label)
    if rank is None:
        return (len(SEVERITY_ORDER), label.casefold(), label)
    return (rank, "", "")
