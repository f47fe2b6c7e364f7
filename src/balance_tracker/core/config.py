"""Application settings for the balance tracker service."""

import enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StartupPolicy(str, enum.Enum):
    """Reconciliation applied to the student collection at startup."""

    NONE = "none"
    SEED_IF_EMPTY = "seed-if-empty"
    PURGE_FIXED_IDS = "purge-fixed-ids"


class Settings(BaseSettings):
    """Environment-driven configuration values."""

    model_config = SettingsConfigDict(
        env_prefix="BALANCE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
    )

    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy database URL. The service refuses to start without it.",
    )
    admin_password: Optional[str] = Field(
        default=None,
        description="Shared secret granting the teacher (admin) role.",
    )
    startup_policy: StartupPolicy = Field(
        default=StartupPolicy.SEED_IF_EMPTY,
        description="Which reconciliation runs once the database is reachable.",
    )
    log_level: str = Field(default="INFO", description="Root logger level name.")
    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(default=3000, description="Port the HTTP server listens on.")


class ConfigurationError(RuntimeError):
    """Raised when the service cannot start with the supplied settings."""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
