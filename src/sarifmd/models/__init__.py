# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for sarifmd."""

from sarifmd.models.report import Category, CollectedResults, IssueEntry, RuleInfo
from sarifmd.models.sarif import (
    SarifLocation,
    SarifLog,
    SarifResult,
    SarifRule,
    SarifRun,
    parse_sarif,
)

__all__ = [
    "Category",
    "CollectedResults",
    "IssueEntry",
    "RuleInfo",
    "SarifLocation",
    "SarifLog",
    "SarifResult",
    "SarifRule",
    "SarifRun",
    "parse_sarif",
]
