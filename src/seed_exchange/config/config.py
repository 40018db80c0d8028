# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, EVENTS__ENABLED.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "seed-exchange"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/seed_exchange.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class EventBusSettings(BaseSettings):
    """Exchange event bus (bubus) configuration (from env EVENTS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = Field(
        default=True,
        description="Dispatch ExchangeConfirmedEvent / ExchangeWithdrawnEvent from the engine.",
    )
    name: str = "SeedExchange"
    max_history_size: int = Field(default=100, ge=1, le=10000)


class HealthCheckSettings(BaseSettings):
    """Storage health probe configuration (from env HEALTH__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    probe_plant_id: str = Field(
        default="health-check-plant",
        description="Plant id used for the sentinel entry written by the probe.",
    )
    probe_user_id: str = Field(
        default="health-check-user",
        description="Requester id used for the sentinel entry written by the probe.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, HEALTH__PROBE_PLANT_ID.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    events: EventBusSettings = Field(default_factory=EventBusSettings)
    health: HealthCheckSettings = Field(default_factory=HealthCheckSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(events={"enabled": False}).
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from seed_exchange.config import get_settings

        settings = get_settings()
        console_level = settings.logging.console_level
    """
    return Settings()
