"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    nutrislice_api_base: str = (
        "https://rutgers.api.nutrislice.com/menu/api/weeks/school"
    )
    nutrislice_user_agent: str = "DiningHallScanner/0.2 (+local dev)"
    http_timeout_seconds: float = 15.0
    menu_cache_ttl_seconds: int = 600
    menu_retry_attempts: int = 1
    menu_retry_delay_seconds: float = 0.3
    menu_timezone: str = "America/New_York"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_hall_ids(raw: str | None) -> list[str]:
    """Parse a comma-separated hall id list from a query string."""
    if raw is None:
        return []
    ids: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value:
            ids.append(value)
    return ids
