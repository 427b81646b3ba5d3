# src/config/settings.py - v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for cache location, copy strategy order and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Copy providers known to storage.provider_factory, in registry order.
KNOWN_COPY_STRATEGIES = ("ditto", "cp", "shutil")


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Cache ===
    cache_root: Path = Path(".expo/cache")
    staged_uploads: bool = False

    # === Copy strategies ===
    copy_strategies: str = "ditto,cp"
    copy_timeout_seconds: float = 600.0

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("copy_timeout_seconds")
    @classmethod
    def validate_copy_timeout(cls, v: float) -> float:  # noqa: N805
        if v <= 0:
            raise ValueError("copy_timeout_seconds must be > 0")
        return v

    @model_validator(mode="after")
    def validate_copy_strategies(self) -> Settings:
        strategies = self.copy_strategies_list
        if not strategies:
            raise ConfigurationError("COPY_STRATEGIES must name at least one strategy")
        unknown = [s for s in strategies if s not in KNOWN_COPY_STRATEGIES]
        if unknown:
            raise ConfigurationError(
                f"COPY_STRATEGIES contains unknown strategies: {', '.join(unknown)} "
                f"(known: {', '.join(KNOWN_COPY_STRATEGIES)})"
            )
        return self

    # --- Helpers ---

    @property
    def copy_strategies_list(self) -> list[str]:
        """Parse comma-separated copy strategies, preserving order."""
        return [s.strip() for s in self.copy_strategies.split(",") if s.strip()]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (CLI flags or tests).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
