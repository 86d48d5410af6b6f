"""Configuration management for pdevents."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EVENTS_V2_ENDPOINT = "https://events.pagerduty.com/v2/enqueue"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGERDUTY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    events_url: str = Field(default=EVENTS_V2_ENDPOINT)

    # Only applied to HTTP clients the submitter creates itself
    timeout: float = Field(default=30.0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
