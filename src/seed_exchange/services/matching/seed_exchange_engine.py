# -*- coding: utf-8 -*-
"""SeedExchangeEngine: FIFO matching of seed offers against seed requests.

Three operations mutate the ledger through IExchangeRepository:
- submit_offer: fill open requests oldest-first, leftover becomes an open offer.
- submit_request: take one packet from the oldest eligible open offer, else open a request.
- withdraw: delete an open entry owned by the caller.

A user's own open entries are never used to fill that user's opposite submission.
Each submission is a sequence of independent storage calls; a storage failure
propagates as-is and earlier sub-steps are not rolled back.
"""

from __future__ import annotations

import structlog
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Callable, Literal, Optional
from uuid import UUID

from seed_exchange.events.exchanges import ExchangeConfirmedEvent, ExchangeWithdrawnEvent
from seed_exchange.models.exchange_entry import ExchangeEntry
from seed_exchange.services.matching.dto import OfferResult, RequestResult, WithdrawResult

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from seed_exchange.models.user import UserIdentity
    from seed_exchange.persistence.repositories.interfaces.exchange_repository import (
        IExchangeRepository,
    )

REQUEST_QUANTITY = 1
"""Every request asks for exactly one packet."""


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _normalize_plant(plant_id: str) -> str:
    plant = (plant_id or "").strip()
    if not plant:
        raise ValueError("plant_id must be non-empty")
    return plant


class SeedExchangeEngine:
    """Matching engine over an injected exchange ledger."""

    _event_bus: Optional["EventBus"] = None

    def __init__(
        self,
        repository: "IExchangeRepository",
        event_bus: Optional[Any] = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            repository: Ledger storage (storage contract).
            event_bus: Optional; if set, emits ExchangeConfirmedEvent / ExchangeWithdrawnEvent.
            clock: Timestamp source; called once per submission.
            get_logger: Logger factory.
            logger_name: Optional logger name.
        """
        self._repo = repository
        self._event_bus = event_bus
        self._clock = clock
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def submit_offer(
        self,
        user: "UserIdentity",
        plant_id: str,
        quantity: int,
    ) -> OfferResult:
        """Offer packets of a plant; fill open requests FIFO, keep the rest as an open offer.

        A quantity of 0 is a no-op: nothing is read or written.

        Args:
            user: Offering user.
            plant_id: Plant being offered.
            quantity: Number of packets (>= 0).

        Returns:
            OfferResult with the confirmed entries in fill order and the remaining open offer.
        """
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")
        user_id = user.user_id.strip()
        result = OfferResult()
        if quantity == 0:
            self._logger.debug("offer_zero_quantity_ignored", user_id=user_id, plant_id=plant_id)
            return result

        plant = _normalize_plant(plant_id)
        now = self._clock()
        remaining = quantity
        for request in await self._repo.list_open_requests(plant):
            if remaining <= 0:
                break
            if request.request_user_id == user_id:
                continue

            consumed = min(remaining, request.quantity)
            confirmed = request.with_offer_filled(user_id, now, consumed)
            await self._repo.update(confirmed)
            if request.quantity > consumed:
                await self._repo.insert(request.remainder(request.quantity - consumed))

            remaining -= consumed
            result.filled_exchanges.append(confirmed)
            self._emit_confirmed(confirmed, trigger="offer")

        if remaining > 0:
            offer = ExchangeEntry.open_offer(plant, user_id, remaining, offered_at=now)
            await self._repo.insert(offer)
            result.remaining_offer = offer

        self._logger.info(
            "offer_submitted",
            user_id=user_id,
            plant_id=plant,
            quantity=quantity,
            filled_count=len(result.filled_exchanges),
            filled_quantity=result.filled_quantity,
            remaining_quantity=remaining,
        )
        return result

    async def submit_request(self, user: "UserIdentity", plant_id: str) -> RequestResult:
        """Request one packet of a plant from the oldest eligible open offer.

        At most one offer is consumed. If no offer from another user exists, an
        open request is recorded instead.
        """
        plant = _normalize_plant(plant_id)
        user_id = user.user_id.strip()
        now = self._clock()

        for offer in await self._repo.list_open_offers(plant):
            if offer.offer_user_id == user_id or offer.quantity < REQUEST_QUANTITY:
                continue

            confirmed = offer.with_request_filled(user_id, now, REQUEST_QUANTITY)
            await self._repo.update(confirmed)
            if offer.quantity > REQUEST_QUANTITY:
                await self._repo.insert(offer.remainder(offer.quantity - REQUEST_QUANTITY))

            self._emit_confirmed(confirmed, trigger="request")
            self._logger.info(
                "request_filled",
                user_id=user_id,
                plant_id=plant,
                exchange_id=str(confirmed.id),
                offer_user_id=confirmed.offer_user_id,
                offer_remaining=offer.quantity - REQUEST_QUANTITY,
            )
            return RequestResult(filled=True, exchange=confirmed)

        request = ExchangeEntry.open_request(
            plant, user_id, quantity=REQUEST_QUANTITY, requested_at=now
        )
        await self._repo.insert(request)
        self._logger.info(
            "request_opened",
            user_id=user_id,
            plant_id=plant,
            exchange_id=str(request.id),
        )
        return RequestResult(filled=False, remaining_request=request)

    async def withdraw(self, user: "UserIdentity", entry_id: UUID) -> WithdrawResult:
        """Withdraw an open request or offer owned by the user.

        Confirmed entries are permanent history and are never removed.
        """
        user_id = user.user_id.strip()
        entry = await self._repo.get(entry_id)
        if entry is None:
            return self._reject_withdraw(user_id, entry_id, "not_found")
        if entry.is_confirmed:
            return self._reject_withdraw(user_id, entry_id, "already_confirmed")
        if entry.open_owner != user_id:
            return self._reject_withdraw(user_id, entry_id, "not_owner")

        await self._repo.remove(entry_id)
        side: Literal["request", "offer"] = "request" if entry.is_open_request else "offer"
        self._emit_withdrawn(entry, user_id, side)
        self._logger.info(
            "exchange_withdrawn",
            user_id=user_id,
            exchange_id=str(entry_id),
            plant_id=entry.plant_id,
            side=side,
            quantity=entry.quantity,
        )
        return WithdrawResult(success=True, withdrawn_exchange=entry)

    def _reject_withdraw(
        self,
        user_id: str,
        entry_id: UUID,
        reason: Literal["not_found", "already_confirmed", "not_owner"],
    ) -> WithdrawResult:
        self._logger.info(
            "withdraw_rejected",
            user_id=user_id,
            exchange_id=str(entry_id),
            reason=reason,
        )
        return WithdrawResult(success=False, reason=reason)

    def _emit_confirmed(self, entry: ExchangeEntry, trigger: Literal["offer", "request"]) -> None:
        """Emit ExchangeConfirmedEvent for subscribers (notifications, audit)."""
        if self._event_bus is None:
            return
        event = ExchangeConfirmedEvent(
            exchange_id=entry.id,
            plant_id=entry.plant_id,
            request_user_id=entry.request_user_id or "",
            offer_user_id=entry.offer_user_id or "",
            quantity=entry.quantity,
            confirmation_time=entry.confirmation_time,
            trigger=trigger,
        )
        self._event_bus.dispatch(event)

    def _emit_withdrawn(
        self,
        entry: ExchangeEntry,
        user_id: str,
        side: Literal["request", "offer"],
    ) -> None:
        """Emit ExchangeWithdrawnEvent for subscribers."""
        if self._event_bus is None:
            return
        event = ExchangeWithdrawnEvent(
            exchange_id=entry.id,
            plant_id=entry.plant_id,
            user_id=user_id,
            side=side,
            quantity=entry.quantity,
        )
        self._event_bus.dispatch(event)
