"""In-memory repository implementations."""

from seed_exchange.persistence.repositories.in_memory.exchange_repository import (
    InMemoryExchangeRepository,
)

__all__ = ["InMemoryExchangeRepository"]
