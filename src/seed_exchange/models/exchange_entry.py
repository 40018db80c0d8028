# -*- coding: utf-8 -*-
"""ExchangeEntry: one unit-of-exchange negotiation from open side to confirmed exchange.

An entry is either:
- an open request (request_user_id set, offer_user_id None),
- an open offer (offer_user_id set, request_user_id None),
- a confirmed exchange (both sides set, confirmation_time set).

Entries are immutable; every transition returns a new copy that the engine persists.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4


class EntryStatus(str, Enum):
    """Entry lifecycle state."""

    OPEN_REQUEST = "OPEN_REQUEST"
    OPEN_OFFER = "OPEN_OFFER"
    CONFIRMED = "CONFIRMED"


_TIME_FIELDS = (
    "seed_request_time",
    "seed_offer_time",
    "confirmation_time",
    "ship_time",
    "received_time",
)


def _require_text(value: str, field_name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field_name} must be non-empty")
    return value


def _parse_time(raw: Any) -> Optional[datetime]:
    """Parse an ISO-8601 value; timestamps without an offset are taken as UTC."""
    if raw is None:
        return None
    parsed = raw if isinstance(raw, datetime) else datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass(frozen=True, slots=True)
class ExchangeEntry:
    """One ledger entry. Identity: id (UUID), unique across all plants."""

    id: UUID
    plant_id: str
    """Fungible good being exchanged; partitions every query."""

    request_user_id: Optional[str]
    offer_user_id: Optional[str]
    quantity: int
    """Units this entry currently represents (>= 1 while stored)."""

    seed_request_time: Optional[datetime] = None
    seed_offer_time: Optional[datetime] = None
    confirmation_time: Optional[datetime] = None
    """None while open; set once when both sides are bound."""
    ship_time: Optional[datetime] = None
    received_time: Optional[datetime] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def status(self) -> EntryStatus:
        if self.confirmation_time is not None:
            return EntryStatus.CONFIRMED
        if self.offer_user_id is None:
            return EntryStatus.OPEN_REQUEST
        return EntryStatus.OPEN_OFFER

    @property
    def is_confirmed(self) -> bool:
        return self.confirmation_time is not None

    @property
    def is_open(self) -> bool:
        return not self.is_confirmed

    @property
    def is_open_request(self) -> bool:
        return self.is_open and self.request_user_id is not None and self.offer_user_id is None

    @property
    def is_open_offer(self) -> bool:
        return self.is_open and self.offer_user_id is not None and self.request_user_id is None

    @property
    def open_owner(self) -> Optional[str]:
        """Return the only populated side of an open entry, or None if confirmed."""
        if self.is_open_request:
            return self.request_user_id
        if self.is_open_offer:
            return self.offer_user_id
        return None

    def involves(self, user_id: str) -> bool:
        """Return True if user_id is the requester or the offerer."""
        return user_id in (self.request_user_id, self.offer_user_id)

    # -------------------------------------------------------------------------
    # Transitions (return new copies)
    # -------------------------------------------------------------------------

    def with_quantity(self, quantity: int) -> ExchangeEntry:
        """Return a copy with quantity replaced."""
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        return replace(self, quantity=quantity)

    def with_offer_filled(self, offer_user_id: str, at: datetime, quantity: int) -> ExchangeEntry:
        """Confirm an open request by binding the offerer. Keeps id and seed_request_time."""
        if not self.is_open_request:
            raise ValueError(f"entry {self.id} is not an open request")
        return replace(
            self,
            offer_user_id=offer_user_id,
            seed_offer_time=at,
            confirmation_time=at,
            quantity=quantity,
        )

    def with_request_filled(self, request_user_id: str, at: datetime, quantity: int = 1) -> ExchangeEntry:
        """Confirm an open offer by binding the requester. Keeps id and seed_offer_time."""
        if not self.is_open_offer:
            raise ValueError(f"entry {self.id} is not an open offer")
        return replace(
            self,
            request_user_id=request_user_id,
            seed_request_time=at,
            confirmation_time=at,
            quantity=quantity,
        )

    def remainder(self, quantity: int, *, id: UUID | None = None) -> ExchangeEntry:
        """Return the unconsumed part of an open entry as a new entry (fresh id, same side and time)."""
        if not self.is_open:
            raise ValueError(f"entry {self.id} is confirmed and cannot be split")
        if quantity < 1:
            raise ValueError(f"remainder quantity must be >= 1, got {quantity}")
        return replace(self, id=id or uuid4(), quantity=quantity)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def open_request(
        cls,
        plant_id: str,
        request_user_id: str,
        *,
        quantity: int = 1,
        requested_at: datetime | None = None,
        id: UUID | None = None,
    ) -> ExchangeEntry:
        """Create a new open request."""
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        return cls(
            id=id or uuid4(),
            plant_id=_require_text(plant_id, "plant_id"),
            request_user_id=_require_text(request_user_id, "request_user_id"),
            offer_user_id=None,
            quantity=quantity,
            seed_request_time=requested_at or datetime.now(UTC),
        )

    @classmethod
    def open_offer(
        cls,
        plant_id: str,
        offer_user_id: str,
        quantity: int,
        *,
        offered_at: datetime | None = None,
        id: UUID | None = None,
    ) -> ExchangeEntry:
        """Create a new open offer for the given number of packets."""
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        return cls(
            id=id or uuid4(),
            plant_id=_require_text(plant_id, "plant_id"),
            request_user_id=None,
            offer_user_id=_require_text(offer_user_id, "offer_user_id"),
            quantity=quantity,
            seed_offer_time=offered_at or datetime.now(UTC),
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize with ISO-8601 timestamps; unset timestamps stay None."""
        data: dict[str, Any] = {
            "id": str(self.id),
            "plant_id": self.plant_id,
            "request_user_id": self.request_user_id,
            "offer_user_id": self.offer_user_id,
            "quantity": self.quantity,
        }
        for name in _TIME_FIELDS:
            value = getattr(self, name)
            data[name] = value.isoformat() if value is not None else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExchangeEntry:
        """Inverse of to_dict. Missing required keys raise KeyError; None is kept as None."""
        times = {name: _parse_time(data.get(name)) for name in _TIME_FIELDS}
        return cls(
            id=UUID(str(data["id"])),
            plant_id=data["plant_id"],
            request_user_id=data["request_user_id"],
            offer_user_id=data["offer_user_id"],
            quantity=int(data["quantity"]),
            **times,
        )
