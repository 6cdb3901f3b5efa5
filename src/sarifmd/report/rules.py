# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rule metadata index for a single SARIF run."""

from __future__ import annotations

from sarifmd.models.report import RuleInfo
from sarifmd.models.sarif import SarifRule, SarifRun


def _rule_categories(rule: SarifRule) -> tuple[str, ...]:
    targets: list[str] = []
    for relationship in rule.relationships:
        target = relationship.target
        if target is None:
            continue
        target_id = target.id or target.guid
        if target_id:
            targets.append(target_id)
    # De-duplicate, keeping first-seen order
    return tuple(dict.fromkeys(targets))


def build_rule_index(run: SarifRun) -> dict[str | None, RuleInfo]:
    """Map rule id to its metadata for every rule the run's driver declares.

    A run without a tool, driver or rule list yields an empty index.
    """
    driver = run.tool.driver if run.tool else None
    if driver is None:
        return {}

    index: dict[str | None, RuleInfo] = {}
    for rule in driver.rules:
        index[rule.id] = RuleInfo(
            id=rule.id,
            short_description=rule.shortDescription.text if rule.shortDescription else None,
            full_description=rule.fullDescription.text if rule.fullDescription else None,
            help_uri=rule.helpUri or (rule.help.text if rule.help else None),
            default_level=(
                rule.defaultConfiguration.level if rule.defaultConfiguration else None
            ),
            categories=_rule_categories(rule),
        )
    return index
