# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity ordering, category lookup tables and report constants."""

UNCATEGORIZED_ID = "__UNCATEGORIZED__"
UNCATEGORIZED_LABEL = "Uncategorized"

# Breadcrumb separator between humanized category segments
CATEGORY_SEPARATOR = " › "

UNKNOWN_SEVERITY = "Unknown"
UNKNOWN_LOCATION = "Unknown location"
UNKNOWN_FILE = "Unknown file"
UNKNOWN_RULE = "Unknown rule"

# Result property some tools (Qodana) use to override the SARIF level
SEVERITY_OVERRIDE_PROPERTY = "qodanaSeverity"

# Display order of severities in the summary table. Labels not listed
# here sort after all of these, alphabetically.
SEVERITY_ORDER: tuple[str, ...] = (
    "Critical",
    "High",
    "Moderate",
    "Medium",
    "Low",
    "Note",
    "Warning",
    "Error",
    "Info",
    "Information",
    "Unknown",
)

SEVERITY_RANK: dict[str, int] = {label: rank for rank, label in enumerate(SEVERITY_ORDER)}

# Category segments (upper-cased) that need a fixed display form
CATEGORY_ACRONYMS: dict[str, str] = {
    "CSHARP": "C#",
    "VBNET": "VB.NET",
    "FSHARP": "F#",
    "JAVASCRIPT": "JavaScript",
    "TYPESCRIPT": "TypeScript",
    "CPP": "C++",
    "CS": "C#",
}
