"""
Collider fitting — Configuration & Settings.

Loads settings from environment variables / .env file with sensible defaults.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from engine.fitting.policy import FitMode

# Project root directory (two levels up from engine/config/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from .env or COLLIDER_* environment variables."""

    # ── Fit modes ──────────────────────────────────────────────────
    height_fit_mode: FitMode = Field(
        default=FitMode.INSIDE,
        description="Default capsule height fit mode: inside | outside | midway",
    )
    radius_fit_mode: FitMode = Field(
        default=FitMode.INSIDE,
        description="Default capsule & sphere radius fit mode: inside | outside | midway",
    )

    @field_validator("height_fit_mode", "radius_fit_mode", mode="before")
    @classmethod
    def lower_fit_mode(cls, value):
        if isinstance(value, str) and not isinstance(value, FitMode):
            return value.strip().lower()
        return value

    # ── Logging ────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    model_config = {
        "env_prefix": "COLLIDER_",
        "env_file": str(PROJECT_ROOT / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
