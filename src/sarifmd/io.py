# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Reading SARIF input and writing rendered reports."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from sarifmd.core.exceptions import SarifReadError

logger = logging.getLogger(__name__)


def resolve_input_path(path: str | os.PathLike[str], workspace: Path | None = None) -> Path:
    """Resolve *path* against the workspace root, or the current directory.

    Absolute paths are returned unchanged. A workspace that is not itself
    absolute is ignored.
    """
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    if workspace is not None and Path(workspace).is_absolute():
        return (Path(workspace) / candidate).resolve()
    return (Path.cwd() / candidate).resolve()


def read_sarif(path: str | os.PathLike[str]) -> Any:
    """Load and decode a SARIF JSON file.

    Raises:
        SarifReadError: If the file cannot be read, is not UTF-8, or is
            not valid JSON.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
        data = json.loads(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = f"Failed to read SARIF input at {path}: {exc}"
        raise SarifReadError(msg) from exc
    logger.debug("Read %d character(s) of SARIF input", len(raw), extra={"sarif_path": path})
    return data


def write_report(markdown: str, output: str | os.PathLike[str]) -> Path:
    """Write *markdown* to *output*, creating parent directories. Returns the resolved path."""
    target = Path(output).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(markdown, encoding="utf-8")
    logger.debug("Wrote Markdown report to %s", target, extra={"output_path": target})
    return target
