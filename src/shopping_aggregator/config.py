"""Aggregator configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Aggregator settings loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Spelling correction / fuzzy family matching
    fuzzy_matching_enabled: bool = True
    fuzzy_min_length: int = Field(default=4, ge=1)  # shorter names are never corrected
    fuzzy_edit_min_length: int = Field(default=6, ge=1)  # edit-distance search threshold
    fuzzy_max_distance: int = Field(default=1, ge=0)

    # Sentinel used when an ingredient line carries no recipe id
    unknown_recipe_id: str = "unknown"

    # Logging
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
