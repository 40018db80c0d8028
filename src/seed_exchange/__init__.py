"""Seed exchange: FIFO matching of seed offers and requests over a pluggable ledger."""

from seed_exchange.config import get_settings
from seed_exchange.DI import Container
from seed_exchange.models import EntryStatus, ExchangeEntry, UserIdentity
from seed_exchange.persistence import IExchangeRepository, InMemoryExchangeRepository
from seed_exchange.services.matching import (
    OfferResult,
    RequestResult,
    SeedExchangeEngine,
    WithdrawResult,
)

__version__ = "0.1.0"
__all__ = [
    "Container",
    "EntryStatus",
    "ExchangeEntry",
    "IExchangeRepository",
    "InMemoryExchangeRepository",
    "OfferResult",
    "RequestResult",
    "SeedExchangeEngine",
    "UserIdentity",
    "WithdrawResult",
    "get_settings",
]
