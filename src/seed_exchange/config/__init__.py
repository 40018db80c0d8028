"""Configuration subpackage."""

from seed_exchange.config.config import (
    AppSettings,
    EventBusSettings,
    HealthCheckSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "EventBusSettings",
    "HealthCheckSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
