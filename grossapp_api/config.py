# grossapp_api/config.py

"""
Configuration for the GrossApp admin HTTP API.

All settings are read from environment variables prefixed with
``GROSSAPP_`` (or from a local ``.env`` file), e.g.::

    GROSSAPP_DATABASE_URL=postgresql+psycopg://user:pass@db:5432/grossapp
    GROSSAPP_REQUEST_TIMEOUT_SECONDS=10
    GROSSAPP_LOG_FORMAT=json

Typical usage
=============

    from grossapp_api.config import get_config

    cfg = get_config()
    engine = create_engine(cfg.DATABASE_URL, echo=cfg.DEBUG)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration registry, validated via pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "grossapp-admin-api"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    VERSION: str = "0.1.0"

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8000, gt=0, le=65535)
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]
    REQUEST_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./grossapp.db"
    DB_POOL_SIZE: int = Field(default=5, ge=1)
    DB_MAX_OVERFLOW: int = Field(default=10, ge=0)
    DB_POOL_TIMEOUT: float = Field(default=30.0, gt=0)

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "json" or "console"

    model_config = SettingsConfigDict(
        env_prefix="GROSSAPP_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def api_root(self) -> str:
        """
        Normalized router prefix: "" or "/something" without trailing slash.
        """
        prefix = (self.API_PREFIX or "").strip()
        if not prefix or prefix == "/":
            return ""
        if not prefix.startswith("/"):
            prefix = "/" + prefix
        return prefix.rstrip("/")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Singleton configuration instance
_CONFIG: Optional[Settings] = None


def get_config() -> Settings:
    """
    Return the global Settings instance, creating it from environment
    variables on first use.
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = Settings()
    return _CONFIG


def set_config(config: Settings) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests, where you may want to override configuration
    without touching environment variables.
    """
    global _CONFIG
    _CONFIG = config


__all__ = ["AppEnv", "Settings", "get_config", "set_config"]
