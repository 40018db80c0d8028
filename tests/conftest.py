# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from seed_exchange.models.exchange_entry import ExchangeEntry
from seed_exchange.models.user import UserIdentity
from seed_exchange.persistence.repositories.in_memory.exchange_repository import (
    InMemoryExchangeRepository,
)
from seed_exchange.services.matching.seed_exchange_engine import SeedExchangeEngine


class FakeEventBus:
    """Minimal event bus fake for asserting dispatched events."""

    def __init__(self) -> None:
        self.dispatched: list[Any] = []

    def dispatch(self, event: Any) -> None:
        self.dispatched.append(event)


class SteppingClock:
    """Deterministic clock: every call returns the previous time plus one second."""

    def __init__(self, start: datetime) -> None:
        self._next = start

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + timedelta(seconds=1)
        return now


@pytest.fixture
def plant() -> str:
    """Default plant id used by tests."""
    return "tomato-001"


@pytest.fixture
def alice() -> UserIdentity:
    return UserIdentity(user_id="alice", email="alice@example.com", name="Alice")


@pytest.fixture
def bob() -> UserIdentity:
    return UserIdentity(user_id="bob", email="bob@example.com", name="Bob")


@pytest.fixture
def charlie() -> UserIdentity:
    return UserIdentity(user_id="charlie", email="charlie@example.com", name="Charlie")


@pytest.fixture
def diana() -> UserIdentity:
    return UserIdentity(user_id="diana", email="diana@example.com", name="Diana")


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(now_utc: datetime) -> SteppingClock:
    """Clock advancing one second per submission, starting at now_utc."""
    return SteppingClock(now_utc)


@pytest.fixture
def exchange_repo() -> InMemoryExchangeRepository:
    """Fresh in-memory exchange repository per test."""
    return InMemoryExchangeRepository()


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def engine(
    exchange_repo: InMemoryExchangeRepository,
    event_bus: FakeEventBus,
    clock: SteppingClock,
) -> SeedExchangeEngine:
    """Engine wired to the per-test repository, fake bus and stepping clock."""
    return SeedExchangeEngine(exchange_repo, event_bus=event_bus, clock=clock)


@pytest.fixture
def open_request_factory(plant: str, now_utc: datetime) -> Callable[..., ExchangeEntry]:
    """Build open requests with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> ExchangeEntry:
        return ExchangeEntry.open_request(
            overrides.pop("plant_id", plant),
            overrides.pop("request_user_id", "bob"),
            quantity=overrides.pop("quantity", 1),
            requested_at=overrides.pop("requested_at", now_utc),
            id=overrides.pop("id", None),
        )

    return _build


@pytest.fixture
def open_offer_factory(plant: str, now_utc: datetime) -> Callable[..., ExchangeEntry]:
    """Build open offers with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> ExchangeEntry:
        return ExchangeEntry.open_offer(
            overrides.pop("plant_id", plant),
            overrides.pop("offer_user_id", "alice"),
            overrides.pop("quantity", 3),
            offered_at=overrides.pop("offered_at", now_utc),
            id=overrides.pop("id", None),
        )

    return _build
