"""In-memory exchange repository (keyed by entry id, insertion ordered)."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

from seed_exchange.exceptions import DuplicateEntryError, EntryNotFoundError
from seed_exchange.models.exchange_entry import ExchangeEntry
from seed_exchange.persistence.repositories.interfaces.exchange_repository import (
    IExchangeRepository,
)

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _by_request_time(entry: ExchangeEntry) -> datetime:
    """Sort key: seed_request_time (FIFO = oldest first)."""
    return entry.seed_request_time or _EPOCH


def _by_offer_time(entry: ExchangeEntry) -> datetime:
    """Sort key: seed_offer_time (FIFO = oldest first)."""
    return entry.seed_offer_time or _EPOCH


class InMemoryExchangeRepository(IExchangeRepository):
    """In-memory implementation of IExchangeRepository.

    sorted() is stable and dict keeps insertion order (updates keep their slot),
    so equal timestamps come back in insertion order.
    """

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[UUID, ExchangeEntry] = {}

    async def list_open_requests(self, plant_id: str) -> list[ExchangeEntry]:
        """Return open requests for the plant, ordered by seed_request_time."""
        return sorted(
            (e for e in self._store.values() if e.plant_id == plant_id and e.is_open_request),
            key=_by_request_time,
        )

    async def list_open_offers(self, plant_id: str) -> list[ExchangeEntry]:
        """Return open offers for the plant, ordered by seed_offer_time."""
        return sorted(
            (e for e in self._store.values() if e.plant_id == plant_id and e.is_open_offer),
            key=_by_offer_time,
        )

    async def get(self, entry_id: UUID) -> ExchangeEntry | None:
        """Return the entry by id, or None if missing."""
        return self._store.get(entry_id)

    async def insert(self, entry: ExchangeEntry) -> None:
        """Add a new entry."""
        if entry.id in self._store:
            raise DuplicateEntryError(entry.id)
        self._store[entry.id] = entry

    async def update(self, entry: ExchangeEntry) -> None:
        """Replace an existing entry."""
        if entry.id not in self._store:
            raise EntryNotFoundError(entry.id)
        self._store[entry.id] = entry

    async def remove(self, entry_id: UUID) -> None:
        """Delete the entry by id (no-op if missing)."""
        self._store.pop(entry_id, None)

    async def list_all(self) -> list[ExchangeEntry]:
        """Return every entry in insertion order."""
        return list(self._store.values())

    async def clear(self) -> None:
        """Remove every entry."""
        self._store.clear()
