# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SARIFMD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        fmt = str(v).strip().lower()
        if fmt not in ("json", "text", "github"):
            msg = f"log_format must be 'json', 'text' or 'github', got {v!r}"
            raise ValueError(msg)
        return fmt

    # Job summary
    add_job_summary: bool = False
    step_summary_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("SARIFMD_STEP_SUMMARY", "GITHUB_STEP_SUMMARY"),
    )

    # Relative input paths are resolved against this root when it is absolute
    workspace: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("SARIFMD_WORKSPACE", "GITHUB_WORKSPACE"),
    )


def get_settings() -> Settings:
    return Settings()
