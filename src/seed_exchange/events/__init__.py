# -*- coding: utf-8 -*-
"""Event bus and event types."""

from seed_exchange.events.bus import get_event_bus, set_event_bus
from seed_exchange.events.exchanges import ExchangeConfirmedEvent, ExchangeWithdrawnEvent

__all__ = [
    "get_event_bus",
    "set_event_bus",
    "ExchangeConfirmedEvent",
    "ExchangeWithdrawnEvent",
]
