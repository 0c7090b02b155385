"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_timeout_ms: int = 5000
    init_database_on_startup: bool = True

    # Redis (session store)
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_db: int = 0

    # Sessions
    session_cookie_name: str = "registry.sid"
    session_ttl_minutes: int = 24 * 60
    session_cookie_secure: bool = False  # Set to true behind HTTPS
    # Reload role/status from auth_db on every request instead of trusting
    # the snapshot taken at login.
    session_revalidate: bool = False

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
