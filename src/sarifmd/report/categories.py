# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Turn machine category identifiers into breadcrumb labels."""

from __future__ import annotations

import re

from sarifmd.core.constants import (
    CATEGORY_ACRONYMS,
    CATEGORY_SEPARATOR,
    UNCATEGORIZED_ID,
    UNCATEGORIZED_LABEL,
)

# "camelCase" / "v2Rule" boundaries
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
# "HTTPServer" -> "HTTP Server"
_ACRONYM_WORD_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")


def _humanize_segment(segment: str) -> str:
    acronym = CATEGORY_ACRONYMS.get(segment.upper())
    if acronym is not None:
        return acronym
    text = segment.replace("_", " ")
    if text.isupper():
        # SCREAMING_CASE segment: "PROBABLE_BUGS" -> "Probable Bugs"
        return " ".join(word.capitalize() for word in text.split(" "))
    text = _LOWER_UPPER_RE.sub(r"\1 \2", text)
    return _ACRONYM_WORD_RE.sub(r"\1 \2", text)


def humanize_category_id(category_id: str | None) -> str:
    """Return a display label such as ``"Python › Security"`` for *category_id*."""
    if not category_id or category_id == UNCATEGORIZED_ID:
        return UNCATEGORIZED_LABEL
    return CATEGORY_SEPARATOR.join(
        _humanize_segment(segment) for segment in str(category_id).split(".")
    )
