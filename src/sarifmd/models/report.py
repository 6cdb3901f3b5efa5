# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Intermediate report models built from a SARIF document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RuleInfo(BaseModel):
    """Rule metadata harvested from a run's tool driver."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    short_description: str | None = None
    full_description: str | None = None
    help_uri: str | None = None
    default_level: str | None = None
    categories: tuple[str, ...] = ()


class IssueEntry(BaseModel):
    """One reported result, shared by every category it belongs to."""

    model_config = ConfigDict(frozen=True)

    severity: str
    rule_id: str
    rule_description: str | None = None
    message: str = ""
    location: str
    help_uri: str | None = None
    tags: tuple[Any, ...] = ()


class Category(BaseModel):
    """A group of issues under one rule category."""

    id: str
    label: str
    issues: list[IssueEntry] = Field(default_factory=list)


class CollectedResults(BaseModel):
    """Everything the renderer needs, gathered in one pass over the runs."""

    summary_counts: dict[str, int] = Field(default_factory=dict)
    categories: dict[str, Category] = Field(default_factory=dict)
    total_issues: int = 0
