"""Engine configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    rules_path: Path | None = None
    debug: bool = False
    log_level: str = "INFO"
    debug_label_limit: int = Field(default=10, ge=0)
    text_label_score: float = Field(default=0.8, ge=0.0, le=1.0)
    text_min_word_length: int = Field(default=3, ge=1)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_FRESHNESS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
