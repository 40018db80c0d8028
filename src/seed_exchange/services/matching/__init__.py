"""Seed matching engine and its result models."""

from __future__ import annotations

from seed_exchange.services.matching.dto import (
    OfferResult,
    RequestResult,
    WithdrawResult,
)
from seed_exchange.services.matching.seed_exchange_engine import (
    REQUEST_QUANTITY,
    SeedExchangeEngine,
)

__all__ = [
    "OfferResult",
    "REQUEST_QUANTITY",
    "RequestResult",
    "SeedExchangeEngine",
    "WithdrawResult",
]
