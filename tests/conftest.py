# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import json
import logging
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "sarif"
QODANA_SARIF = FIXTURES_DIR / "qodana.sarif.json"
QODANA_EXPECTED = FIXTURES_DIR / "expected-qodana-report.md"

_ENV_VARS = (
    "GITHUB_WORKSPACE",
    "GITHUB_STEP_SUMMARY",
    "GITHUB_OUTPUT",
    "SARIFMD_WORKSPACE",
    "SARIFMD_STEP_SUMMARY",
    "SARIFMD_ADD_JOB_SUMMARY",
    "SARIFMD_LOG_LEVEL",
    "SARIFMD_LOG_FORMAT",
)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def qodana_sarif() -> dict:
    return json.loads(QODANA_SARIF.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep CI runner variables from leaking into settings under test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("sarifmd")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
