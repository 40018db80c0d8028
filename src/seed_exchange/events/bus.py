"""Application event bus (bubus). Singleton instance for publish/subscribe."""

from __future__ import annotations

from bubus import EventBus  # type: ignore[import-untyped]

from seed_exchange.config import get_settings

_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Return the application event bus singleton. Created on first call from EVENTS__* settings."""
    global _event_bus
    if _event_bus is None:
        events = get_settings().events
        _event_bus = EventBus(
            name=events.name,
            max_history_size=events.max_history_size,
            wal_path=None,
        )
    return _event_bus


def set_event_bus(bus: EventBus | None) -> None:
    """Set the event bus instance (e.g. for testing or DI). None resets to lazy default."""
    global _event_bus
    _event_bus = bus
