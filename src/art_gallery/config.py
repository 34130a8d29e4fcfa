"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    user_session_ttl_seconds: int = 7 * 24 * 60 * 60
    admin_session_ttl_seconds: int = 24 * 60 * 60
    user_session_cookie: str = "session"
    admin_session_cookie: str = "admin-session"
    secure_cookies: bool = False
    verify_order_total: bool = True
    default_artist_code: str = "bt"
    default_country: str = "Kenya"
    storage_retry_attempts: int = 3

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
