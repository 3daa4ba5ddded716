"""Configuration management for the UHT trait challenge."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Catalog data (bundled JSON files are used when unset)
    traits_file: Optional[Path] = Field(default=None)
    entities_file: Optional[Path] = Field(default=None)

    # Fixed seed for reproducible entity draws
    random_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
