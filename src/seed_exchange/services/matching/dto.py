"""Result models for the matching engine operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from seed_exchange.models.exchange_entry import ExchangeEntry

WithdrawRejection = Literal["not_found", "already_confirmed", "not_owner"]


@dataclass
class OfferResult:
    """Result of submit_offer: confirmed entries (in fill order) and the open leftover, if any."""

    filled_exchanges: list[ExchangeEntry] = field(default_factory=list)
    remaining_offer: Optional[ExchangeEntry] = None

    @property
    def filled_quantity(self) -> int:
        return sum(e.quantity for e in self.filled_exchanges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "filled_exchanges": [e.to_dict() for e in self.filled_exchanges],
            "remaining_offer": self.remaining_offer.to_dict() if self.remaining_offer else None,
        }


@dataclass
class RequestResult:
    """Result of submit_request: either the confirmed exchange or the new open request."""

    filled: bool = False
    exchange: Optional[ExchangeEntry] = None
    remaining_request: Optional[ExchangeEntry] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filled": self.filled,
            "exchange": self.exchange.to_dict() if self.exchange else None,
            "remaining_request": self.remaining_request.to_dict() if self.remaining_request else None,
        }


@dataclass
class WithdrawResult:
    """Result of withdraw. reason is set only when success is False."""

    success: bool = False
    withdrawn_exchange: Optional[ExchangeEntry] = None
    reason: Optional[WithdrawRejection] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "withdrawn_exchange": (
                self.withdrawn_exchange.to_dict() if self.withdrawn_exchange else None
            ),
            "reason": self.reason,
        }
