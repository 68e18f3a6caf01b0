"""
Greedy - Application Settings

Loads configuration from environment variables (prefix GREEDY_) and an
optional .env file using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greedy.engine.base import ENTRY_THRESHOLD, TARGET_SCORE, StrategyName

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rules
    entry_threshold: int = Field(default=ENTRY_THRESHOLD, gt=0)
    target_score: int = Field(default=TARGET_SCORE, gt=0)

    # AI
    default_ai_strategy: StrategyName = StrategyName.BALANCED
    random_seed: int | None = None

    # Application
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GREEDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
