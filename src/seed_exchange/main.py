# -*- coding: utf-8 -*-
"""
Entry point for the seed exchange.

Two commands:
- demo: walks a few users through offers, requests and a withdrawal on the configured ledger.
- health: probes the ledger store and prints the report (exit code 1 unless healthy).

Run with: python -m seed_exchange.main [demo|health]
"""
from __future__ import annotations

import argparse
import asyncio
import sys
import structlog
from typing import Any, Optional, Sequence

from seed_exchange.DI import Container
from seed_exchange.events import ExchangeConfirmedEvent, ExchangeWithdrawnEvent
from seed_exchange.logging.config import configure_logging
from seed_exchange.models import UserIdentity
from seed_exchange.services.health import format_health_check_result


def _subscribe_audit_log(event_bus: Any, logger: Any) -> None:
    """Log every exchange event dispatched by the engine."""

    def _on_confirmed(event: ExchangeConfirmedEvent) -> None:
        logger.info(
            "exchange_confirmed",
            exchange_id=str(event.exchange_id),
            plant_id=event.plant_id,
            request_user_id=event.request_user_id,
            offer_user_id=event.offer_user_id,
            quantity=event.quantity,
            trigger=event.trigger,
        )

    def _on_withdrawn(event: ExchangeWithdrawnEvent) -> None:
        logger.info(
            "exchange_withdrawn_event",
            exchange_id=str(event.exchange_id),
            plant_id=event.plant_id,
            user_id=event.user_id,
            side=event.side,
        )

    event_bus.on(ExchangeConfirmedEvent, _on_confirmed)
    event_bus.on(ExchangeWithdrawnEvent, _on_withdrawn)


async def run_demo(container: Optional[Container] = None) -> None:
    """Run the walkthrough scenario and log the final ledger state."""
    logger = structlog.get_logger("main")
    container = container or Container()
    engine = container.seed_exchange_engine()
    repo = container.exchange_repository()
    event_bus = container.event_bus()
    if event_bus is not None:
        _subscribe_audit_log(event_bus, logger)

    alice = UserIdentity(user_id="alice-123", email="alice@example.com", name="Alice")
    bob = UserIdentity(user_id="bob-456", email="bob@example.com", name="Bob")
    charlie = UserIdentity(user_id="charlie-789", email="charlie@example.com", name="Charlie")

    await engine.submit_offer(alice, "tomato-red", 5)
    await engine.submit_request(bob, "tomato-red")
    await engine.submit_request(charlie, "tomato-red")
    await engine.submit_request(bob, "carrot-orange")
    await engine.submit_offer(charlie, "carrot-orange", 2)
    lettuce = await engine.submit_request(alice, "lettuce-green")
    if lettuce.remaining_request is not None:
        await engine.withdraw(alice, lettuce.remaining_request.id)

    if event_bus is not None:
        await event_bus.wait_until_idle()

    confirmed = await repo.list_confirmed()
    summary: dict[str, Any] = {}
    for plant in ("tomato-red", "carrot-orange", "lettuce-green"):
        offers = await repo.list_open_offers(plant)
        requests = await repo.list_open_requests(plant)
        summary[plant] = {
            "open_offer_packets": sum(e.quantity for e in offers),
            "open_requests": len(requests),
        }
    logger.info("demo_final_state", confirmed_exchanges=len(confirmed), plants=summary)


async def run_health_check(container: Optional[Container] = None) -> int:
    """Probe the ledger store, print the formatted report and return an exit code."""
    container = container or Container()
    service = container.storage_health_check_service()
    result = await service.perform_health_check()
    print(format_health_check_result(result))
    return 0 if result.is_healthy else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="seed-exchange")
    parser.add_argument("command", choices=("demo", "health"), nargs="?", default="demo")
    args = parser.parse_args(argv)

    configure_logging()
    if args.command == "health":
        return asyncio.run(run_health_check())
    asyncio.run(run_demo())
    return 0


__all__ = ["run_demo", "run_health_check", "main"]

if __name__ == "__main__":
    sys.exit(main())
