# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/."""

from seed_exchange.persistence.repositories.interfaces.exchange_repository import (
    IExchangeRepository,
)

__all__ = ["IExchangeRepository"]
