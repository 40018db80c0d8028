# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from typing import Any, Optional

from dependency_injector import containers, providers

from seed_exchange.config import Settings, get_settings
from seed_exchange.events.bus import get_event_bus
from seed_exchange.persistence.repositories.in_memory import InMemoryExchangeRepository
from seed_exchange.services.health import StorageHealthCheckService
from seed_exchange.services.matching import SeedExchangeEngine


def _build_event_bus(settings: Settings) -> Optional[Any]:
    """Return the shared event bus, or None when EVENTS__ENABLED is false."""
    if not settings.events.enabled:
        return None
    return get_event_bus()


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, event bus, ledger store, engine and health probe."""

    config = providers.Callable(get_settings)

    event_bus = providers.Singleton(_build_event_bus, config)

    exchange_repository = providers.Singleton(InMemoryExchangeRepository)

    seed_exchange_engine = providers.Singleton(
        SeedExchangeEngine,
        repository=exchange_repository,
        event_bus=event_bus,
    )

    storage_health_check_service = providers.Singleton(
        StorageHealthCheckService,
        repository=exchange_repository,
        settings=config,
    )
