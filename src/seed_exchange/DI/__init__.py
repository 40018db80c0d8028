"""Dependency injection."""

from seed_exchange.DI.container import Container

__all__ = ["Container"]
