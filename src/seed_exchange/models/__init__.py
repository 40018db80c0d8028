# -*- coding: utf-8 -*-
"""Domain models."""

from seed_exchange.models.exchange_entry import EntryStatus, ExchangeEntry
from seed_exchange.models.user import UserIdentity

__all__ = [
    "EntryStatus",
    "ExchangeEntry",
    "UserIdentity",
]
