"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the roster backend service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite+pysqlite:///:memory:"
    database_echo: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_title: str = "User API"
    api_version: str = "1.0.0"
    docs_url: str = "/users/api-docs"
    cors_allow_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = ["BackendSettings", "get_settings", "settings"]
