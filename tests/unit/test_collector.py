# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for result collection across runs.

Tests cover:
- Location formatting
- Severity counting and totals
- Category grouping, lazy bucket creation and shared issue entries
- Input-order stability within categories
"""

from __future__ import annotations

from typing import Any

from sarifmd.core.constants import UNCATEGORIZED_ID
from sarifmd.models.sarif import SarifLocation, parse_sarif
from sarifmd.report.collector import collect_results, format_location

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_rule(rule_id: str, *categories: str, **fields: Any) -> dict[str, Any]:
    rule: dict[str, Any] = {"id": rule_id, **fields}
    if categories:
        rule["relationships"] = [{"target": {"id": c}} for c in categories]
    return rule


def _make_result(
    rule_id: str,
    *,
    level: str | None = None,
    message: str | None = None,
    uri: str = "src/main.py",
    line: int | None = None,
    **fields: Any,
) -> dict[str, Any]:
    result: dict[str, Any] = {"ruleId": rule_id, **fields}
    if level is not None:
        result["level"] = level
    if message is not None:
        result["message"] = {"text": message}
    physical: dict[str, Any] = {"artifactLocation": {"uri": uri}}
    if line is not None:
        physical["region"] = {"startLine": line}
    result.setdefault("locations", [{"physicalLocation": physical}])
    return result


def _collect(*runs: dict[str, Any]):
    return collect_results(parse_sarif({"runs": list(runs)}).runs)


def _run(rules: list[dict[str, Any]], results: list[dict[str, Any]]) -> dict[str, Any]:
    return {"tool": {"driver": {"name": "tool", "rules": rules}}, "results": results}


# ---------------------------------------------------------------------------
# format_location
# ---------------------------------------------------------------------------


class TestFormatLocation:
    def test_none(self):
        assert format_location(None) == "Unknown location"

    def test_no_physical_location(self):
        location = SarifLocation.model_validate({"logicalLocations": [{"name": "f"}]})
        assert format_location(location) == "Unknown location"

    def test_file_and_line(self):
        location = SarifLocation.model_validate({
            "physicalLocation": {
                "artifactLocation": {"uri": "src/app.py"},
                "region": {"startLine": 7},
            },
        })
        assert format_location(location) == "src/app.py:7"

    def test_file_without_region(self):
        location = SarifLocation.model_validate({
            "physicalLocation": {"artifactLocation": {"uri": "src/app.py"}},
        })
        assert format_location(location) == "src/app.py"

    def test_region_without_start_line(self):
        location = SarifLocation.model_validate({
            "physicalLocation": {
                "artifactLocation": {"uri": "src/app.py"},
                "region": {"startColumn": 3},
            },
        })
        assert format_location(location) == "src/app.py"

    def test_missing_artifact_uri(self):
        location = SarifLocation.model_validate({
            "physicalLocation": {"region": {"startLine": 2}},
        })
        assert format_location(location) == "Unknown file:2"


# ---------------------------------------------------------------------------
# collect_results
# ---------------------------------------------------------------------------


class TestSeverityCounts:
    def test_empty_runs(self):
        collected = _collect()
        assert collected.summary_counts == {}
        assert collected.categories == {}
        assert collected.total_issues == 0

    def test_runs_without_results(self):
        collected = _collect(_run([], []), {"tool": {}})
        assert collected.total_issues == 0
        assert collected.categories == {}

    def test_total_matches_sum_of_counts(self):
        collected = _collect(
            _run(
                [_make_rule("R1", "CAT.A", defaultConfiguration={"level": "warning"})],
                [
                    _make_result("R1"),
                    _make_result("R1", level="error"),
                    _make_result("R1", properties={"qodanaSeverity": "high"}),
                ],
            ),
            _run([], [_make_result("X"), _make_result("Y", level="NOTE")]),
        )
        assert collected.summary_counts == {
            "Warning": 1,
            "Error": 1,
            "High": 1,
            "Unknown": 1,
            "Note": 1,
        }
        assert collected.total_issues == 5
        assert sum(collected.summary_counts.values()) == collected.total_issues


class TestCategories:
    def test_uncategorized_bucket_for_unknown_rule(self):
        collected = _collect(_run([], [_make_result("missing-rule", message="m")]))
        assert list(collected.categories) == [UNCATEGORIZED_ID]
        bucket = collected.categories[UNCATEGORIZED_ID]
        assert bucket.label == "Uncategorized"
        assert bucket.issues[0].rule_id == "missing-rule"
        assert bucket.issues[0].severity == "Unknown"

    def test_uncategorized_not_created_when_unused(self):
        collected = _collect(_run([_make_rule("R1", "CAT.A")], [_make_result("R1")]))
        assert UNCATEGORIZED_ID not in collected.categories

    def test_rule_without_relationships_is_uncategorized(self):
        collected = _collect(_run([_make_rule("R1")], [_make_result("R1")]))
        assert list(collected.categories) == [UNCATEGORIZED_ID]

    def test_category_label_is_humanized(self):
        collected = _collect(_run([_make_rule("R1", "PYTHON.SECURITY")], [_make_result("R1")]))
        assert collected.categories["PYTHON.SECURITY"].label == "Python › Security"

    def test_multi_category_result_shares_one_entry(self):
        collected = _collect(
            _run([_make_rule("R1", "CAT.A", "CAT.B")], [_make_result("R1", message="shared")]),
        )
        issues_a = collected.categories["CAT.A"].issues
        issues_b = collected.categories["CAT.B"].issues
        assert len(issues_a) == len(issues_b) == 1
        assert issues_a[0] is issues_b[0]
        assert collected.total_issues == 1
        assert UNCATEGORIZED_ID not in collected.categories

    def test_input_order_preserved_across_runs(self):
        collected = _collect(
            _run(
                [_make_rule("R1", "CAT.A")],
                [
                    _make_result("R1", level="error", message="first"),
                    _make_result("R1", level="note", message="second"),
                    _make_result("R1", level="error", message="third"),
                ],
            ),
            _run(
                [_make_rule("R1", "CAT.A")],
                [_make_result("R1", level="error", message="fourth")],
            ),
        )
        messages = [i.message for i in collected.categories["CAT.A"].issues]
        assert messages == ["first", "second", "third", "fourth"]

    def test_rule_index_is_scoped_per_run(self):
        collected = _collect(
            _run([_make_rule("R1", "CAT.A")], [_make_result("R1")]),
            _run([], [_make_result("R1")]),
        )
        assert len(collected.categories["CAT.A"].issues) == 1
        assert len(collected.categories[UNCATEGORIZED_ID].issues) == 1


class TestIssueEntry:
    def test_fields_from_rule_and_result(self):
        collected = _collect(
            _run(
                [
                    _make_rule(
                        "R1",
                        "CAT.A",
                        shortDescription={"text": "Short"},
                        fullDescription={"text": "Full"},
                        helpUri="https://docs/R1",
                    ),
                ],
                [
                    _make_result(
                        "R1",
                        level="warning",
                        message="Something broke",
                        uri="lib/x.py",
                        line=3,
                        properties={"tags": ["security", "owasp"]},
                    ),
                ],
            ),
        )
        issue = collected.categories["CAT.A"].issues[0]
        assert issue.severity == "Warning"
        assert issue.rule_id == "R1"
        assert issue.rule_description == "Short"
        assert issue.message == "Something broke"
        assert issue.location == "lib/x.py:3"
        assert issue.help_uri == "https://docs/R1"
        assert issue.tags == ("security", "owasp")

    def test_full_description_fallback(self):
        collected = _collect(
            _run([_make_rule("R1", fullDescription={"text": "Full"})], [_make_result("R1")]),
        )
        issue = collected.categories[UNCATEGORIZED_ID].issues[0]
        assert issue.rule_description == "Full"

    def test_defaults_for_sparse_result(self):
        collected = _collect(_run([], [{"ruleId": "R9"}]))
        issue = collected.categories[UNCATEGORIZED_ID].issues[0]
        assert issue.message == ""
        assert issue.location == "Unknown location"
        assert issue.rule_description is None
        assert issue.help_uri is None
        assert issue.tags == ()

    def test_missing_rule_id(self):
        collected = _collect(_run([], [{"message": {"text": "anonymous"}}]))
        issue = collected.categories[UNCATEGORIZED_ID].issues[0]
        assert issue.rule_id == "Unknown rule"

    def test_only_first_location_used(self):
        result = _make_result(
            "R1",
            locations=[
                {"physicalLocation": {"artifactLocation": {"uri": "a.py"}, "region": {"startLine": 1}}},
                {"physicalLocation": {"artifactLocation": {"uri": "b.py"}, "region": {"startLine": 2}}},
            ],
        )
        collected = _collect(_run([], [result]))
        assert collected.categories[UNCATEGORIZED_ID].issues[0].location == "a.py:1"
