"""Persistence layer (repositories, etc.)."""

from seed_exchange.persistence.repositories import (
    IExchangeRepository,
    InMemoryExchangeRepository,
)

__all__ = [
    "IExchangeRepository",
    "InMemoryExchangeRepository",
]
