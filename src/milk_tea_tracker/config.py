"""Application configuration."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    local_storage_path: str = ".milk_tea_tracker/storage.json"
    default_weekly_budget: int = 2000
    search_limit: int = 5
    timezone: str = "UTC"
    remote_timeout_seconds: int = 10
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def remote_enabled(self) -> bool:
        """Return True when Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)


def parse_timezone(raw: str | None) -> str:
    """Return a valid IANA timezone name, defaulting to UTC."""
    if raw is None:
        return "UTC"
    cleaned = raw.strip()
    if not cleaned:
        return "UTC"
    try:
        ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError):
        return "UTC"
    return cleaned
