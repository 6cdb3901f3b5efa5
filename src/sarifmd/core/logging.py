# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Logging setup for the ``sarifmd`` logger namespace.

Three output formats are supported:

- ``text``: one human-readable line per record
- ``json``: one JSON object per record, carrying the report context
  (``sarif_path``, ``total_issues``, ...) passed through ``extra=``
- ``github``: GitHub Actions workflow commands, so DEBUG records only show
  when step debug logging is enabled and warnings/errors become annotations
"""

import json
import logging
import sys
from typing import Any

# Keys that report code attaches to records via ``extra=``
CONTEXT_FIELDS = (
    "sarif_path",
    "output_path",
    "summary_path",
    "total_issues",
    "category_count",
    "report_length",
)

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the report context fields present on *record*, as strings or ints."""
    context: dict[str, Any] = {}
    for key in CONTEXT_FIELDS:
        value = getattr(record, key, None)
        if value is not None:
            context[key] = value if isinstance(value, int) else str(value)
    return context


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(record_context(record))
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


def escape_workflow_data(text: str) -> str:
    # Workflow command data must stay on one line
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_workflow_property(text: str) -> str:
    return escape_workflow_data(text).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsFormatter(logging.Formatter):
    """Render records as ``::debug::``/``::warning::``/``::error::`` commands.

    INFO records are printed as plain lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and record.exc_info[1]:
            message = f"{message}: {record.exc_info[1]}"

        if record.levelno >= logging.ERROR:
            command = "error"
        elif record.levelno >= logging.WARNING:
            command = "warning"
        elif record.levelno < logging.INFO:
            command = "debug"
        else:
            return message

        file_param = ""
        sarif_path = getattr(record, "sarif_path", None)
        if sarif_path and command != "debug":
            file_param = f" file={escape_workflow_property(str(sarif_path))}"
        return f"::{command}{file_param}::{escape_workflow_data(message)}"


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    root = logging.getLogger("sarifmd")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    elif fmt == "github":
        handler.setFormatter(GitHubActionsFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
