# -*- coding: utf-8 -*-
"""Unit tests for InMemoryExchangeRepository."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from seed_exchange.exceptions import DuplicateEntryError, EntryNotFoundError, StorageError
from seed_exchange.models.exchange_entry import ExchangeEntry
from seed_exchange.persistence.repositories.in_memory.exchange_repository import (
    InMemoryExchangeRepository,
)


async def test_insert_and_get_roundtrip(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    offer = open_offer_factory()

    await exchange_repo.insert(offer)

    assert await exchange_repo.get(offer.id) == offer


async def test_get_returns_none_for_unknown_id(
    exchange_repo: InMemoryExchangeRepository,
) -> None:
    assert await exchange_repo.get(uuid4()) is None


async def test_insert_rejects_duplicate_id(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    offer = open_offer_factory()
    await exchange_repo.insert(offer)

    with pytest.raises(DuplicateEntryError) as exc_info:
        await exchange_repo.insert(offer.with_quantity(1))

    assert exc_info.value.entry_id == offer.id
    assert isinstance(exc_info.value, StorageError)


async def test_update_rejects_missing_entry(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    with pytest.raises(EntryNotFoundError):
        await exchange_repo.update(open_offer_factory())


async def test_update_replaces_entry(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    offer = open_offer_factory(quantity=3)
    await exchange_repo.insert(offer)

    await exchange_repo.update(offer.with_quantity(2))

    stored = await exchange_repo.get(offer.id)
    assert stored is not None
    assert stored.quantity == 2


async def test_remove_is_noop_for_unknown_id(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    offer = open_offer_factory()
    await exchange_repo.insert(offer)

    await exchange_repo.remove(uuid4())
    await exchange_repo.remove(offer.id)

    assert await exchange_repo.list_all() == []


async def test_list_open_requests_is_fifo_and_filters_plant(
    exchange_repo: InMemoryExchangeRepository,
    open_request_factory: Callable[..., ExchangeEntry],
    now_utc: datetime,
) -> None:
    newer = open_request_factory(request_user_id="carol", requested_at=now_utc + timedelta(minutes=5))
    older = open_request_factory(request_user_id="bob", requested_at=now_utc)
    other_plant = open_request_factory(plant_id="carrot", requested_at=now_utc - timedelta(days=1))

    await exchange_repo.insert(newer)
    await exchange_repo.insert(older)
    await exchange_repo.insert(other_plant)

    listed = await exchange_repo.list_open_requests("tomato-001")

    assert [e.id for e in listed] == [older.id, newer.id]


async def test_list_open_offers_breaks_ties_by_insertion_order(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    first = open_offer_factory(offer_user_id="alice")
    second = open_offer_factory(offer_user_id="bob")
    third = open_offer_factory(offer_user_id="carol")
    for entry in (first, second, third):
        await exchange_repo.insert(entry)

    # updating keeps the original insertion slot
    await exchange_repo.update(first.with_quantity(1))

    listed = await exchange_repo.list_open_offers("tomato-001")

    assert [e.id for e in listed] == [first.id, second.id, third.id]


async def test_open_lists_exclude_confirmed_entries(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
    open_request_factory: Callable[..., ExchangeEntry],
    now_utc: datetime,
) -> None:
    offer = open_offer_factory()
    request = open_request_factory()
    await exchange_repo.insert(offer)
    await exchange_repo.insert(request)
    await exchange_repo.update(offer.with_request_filled("carol", now_utc))

    assert await exchange_repo.list_open_offers("tomato-001") == []
    assert [e.id for e in await exchange_repo.list_open_requests("tomato-001")] == [request.id]


async def test_list_by_user_and_list_confirmed(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
    open_request_factory: Callable[..., ExchangeEntry],
    now_utc: datetime,
) -> None:
    confirmed = open_offer_factory(offer_user_id="alice").with_request_filled("bob", now_utc)
    bob_request = open_request_factory(request_user_id="bob", plant_id="carrot")
    carol_offer = open_offer_factory(offer_user_id="carol")
    for entry in (confirmed, bob_request, carol_offer):
        await exchange_repo.insert(entry)

    assert {e.id for e in await exchange_repo.list_by_user("bob")} == {confirmed.id, bob_request.id}
    assert [e.id for e in await exchange_repo.list_by_user("alice")] == [confirmed.id]
    assert [e.id for e in await exchange_repo.list_confirmed()] == [confirmed.id]


async def test_clear_removes_everything(
    exchange_repo: InMemoryExchangeRepository,
    open_offer_factory: Callable[..., ExchangeEntry],
) -> None:
    await exchange_repo.insert(open_offer_factory())
    await exchange_repo.insert(open_offer_factory())

    await exchange_repo.clear()

    assert await exchange_repo.list_all() == []
