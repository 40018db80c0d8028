# -*- coding: utf-8 -*-
"""Exchange lifecycle events."""

from seed_exchange.events.exchanges.exchange_events import (
    ExchangeConfirmedEvent,
    ExchangeWithdrawnEvent,
)

__all__ = ["ExchangeConfirmedEvent", "ExchangeWithdrawnEvent"]
