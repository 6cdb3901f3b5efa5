# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sarifmd."""


class SarifMdError(Exception):
    """Base exception for all sarifmd errors."""


class ConfigurationError(SarifMdError):
    """Invalid or missing configuration."""


class SarifReadError(SarifMdError):
    """Failed to read or decode a SARIF input file."""


class MalformedSarifError(SarifMdError):
    """SARIF content lacks the structure needed to build a report."""
