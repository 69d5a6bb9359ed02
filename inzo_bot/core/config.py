"""
Application configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import os
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Required tokens
    telegram_bot_token: str
    supabase_url: str = Field(validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"))
    supabase_service_role_key: str

    # Admin Telegram user ID (compared as a string)
    telegram_admin_id: str | None = None

    # Webhook
    webhook_secret: str | None = None
    webhook_url: str | None = None
    webhook_path: str = "/api/telegram-webhook"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Data store HTTP timeout, seconds
    request_timeout: float = 10.0

    log_level: str = "INFO"

    @field_validator("telegram_admin_id", "webhook_secret", "webhook_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | int | None) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None

    @field_validator("supabase_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("webhook_path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith("/") else f"/{value}"

    model_config = {
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
