"""Application configuration using Pydantic Settings.

All settings are loaded from environment variables or .env file.
The evidence engine itself reads nothing from the environment: the
evidence_* fields below are only mapped onto an EvidencePolicy by the
skill profile layer.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="SKILLS_",
    )

    # Application
    environment: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"

    # Category inference cache (0 = unbounded, negative = disabled)
    inference_cache_size: int = 0

    # Evidence policy defaults
    evidence_include_topics: bool = True
    evidence_include_text: bool = True
    evidence_include_license: bool = False
    evidence_min_signal_score: float = Field(default=0.06, ge=0.0, le=1.0)
    evidence_max_signals_per_repo: int = Field(default=40, ge=1, le=200)
    evidence_max_highlights: int = Field(default=4, ge=1, le=20)

    # Prometheus
    metrics_enabled: bool = True

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
