# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration module for sarifmd.

Provides the GitHub Actions job summary publisher and step output helper.
"""

from sarifmd.ci.summary import publish_job_summary, set_github_output

__all__ = [
    "publish_job_summary",
    "set_github_output",
]
