"""
Centralized configuration for the movie library backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with LIBRARY_ (e.g., LIBRARY_SUPABASE_URL).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LIBRARY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Movie Library API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Direct Postgres connection, only used by run_migrations.py
    supabase_db_url: str = ""

    # Sessions
    session_cookie_name: str = "session_id"
    session_ttl_seconds: int = 60 * 60 * 24
    session_cookie_secure: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
