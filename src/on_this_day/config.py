# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads all settings from environment variables and .env file.

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # "On this day" API
    history_api_url: str = "https://history.muffinlabs.com/date"
    history_api_timeout: int = 10
    history_api_user_agent: str = "on-this-day/0.1 (+https://github.com/on-this-day)"
    history_api_sample_fallback: bool = False  # Serve built-in sample events when the API fails

    # Local event store
    data_dir: Path = Path("data")
    local_events_file: str = "local_events.json"

    # Timeline
    bounds_span_years: int = 100  # Default range when a date has no events
    title_max_length: int = 200
    title_fallback_length: int = 150

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    @property
    def local_events_path(self) -> Path:
        """Path to the JSON file holding user-submitted events."""
        return self.data_dir / self.local_events_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables and .env file.
    """
    return Settings()
