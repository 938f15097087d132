"""Configuration management for Book Registry."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BOOK_REGISTRY_",
    )

    # Registry rules
    enforce_revision_year: bool = Field(
        default=False,
        description="Reject revisions published before their source",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"))
    catalog_file: str = Field(default="catalog.json")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for the CLI")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
