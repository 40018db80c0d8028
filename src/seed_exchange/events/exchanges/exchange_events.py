# -*- coding: utf-8 -*-
"""Exchange lifecycle events (bubus BaseEvent), emitted by SeedExchangeEngine."""

from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from bubus import BaseEvent  # type: ignore[import-untyped]


class ExchangeConfirmedEvent(BaseEvent[None]):
    """Emitted once per confirmed entry, when an offer and a request are bound together."""

    exchange_id: UUID
    plant_id: str
    request_user_id: str
    offer_user_id: str
    quantity: int
    confirmation_time: datetime
    trigger: Literal["offer", "request"]
    """Which submission produced the match."""


class ExchangeWithdrawnEvent(BaseEvent[None]):
    """Emitted when an open request or offer is withdrawn by its owner."""

    exchange_id: UUID
    plant_id: str
    user_id: str
    side: Literal["request", "offer"]
    quantity: int
