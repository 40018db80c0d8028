# -*- coding: utf-8 -*-
"""Abstract interface for exchange ledger storage (in-memory, document DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from seed_exchange.models.exchange_entry import ExchangeEntry


class IExchangeRepository(ABC):
    """Interface for persisting ExchangeEntry records, partitioned by plant_id.

    No operation is transactional across entries; the matching engine issues
    several dependent calls per submission.
    """

    @abstractmethod
    async def list_open_requests(self, plant_id: str) -> list[ExchangeEntry]:
        """Return open requests for the plant, ordered by seed_request_time (FIFO, ties by insertion)."""
        ...

    @abstractmethod
    async def list_open_offers(self, plant_id: str) -> list[ExchangeEntry]:
        """Return open offers for the plant, ordered by seed_offer_time (FIFO, ties by insertion)."""
        ...

    @abstractmethod
    async def get(self, entry_id: UUID) -> Optional[ExchangeEntry]:
        """Return the entry by id, or None if missing."""
        ...

    @abstractmethod
    async def insert(self, entry: ExchangeEntry) -> None:
        """Add a new entry. Raises DuplicateEntryError if the id is already stored."""
        ...

    @abstractmethod
    async def update(self, entry: ExchangeEntry) -> None:
        """Replace an existing entry (by id). Raises EntryNotFoundError if missing."""
        ...

    @abstractmethod
    async def remove(self, entry_id: UUID) -> None:
        """Delete the entry by id. No-op if missing."""
        ...

    @abstractmethod
    async def list_all(self) -> list[ExchangeEntry]:
        """Return every entry in the ledger."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry (tests and tooling)."""
        ...

    # -------------------------------------------------------------------------
    # Auxiliary scans; default impls filter list_all()
    # -------------------------------------------------------------------------

    async def list_by_user(self, user_id: str) -> list[ExchangeEntry]:
        """Return all entries where user_id is the requester or the offerer."""
        return [e for e in await self.list_all() if e.involves(user_id)]

    async def list_confirmed(self) -> list[ExchangeEntry]:
        """Return all confirmed exchanges."""
        return [e for e in await self.list_all() if e.is_confirmed]
