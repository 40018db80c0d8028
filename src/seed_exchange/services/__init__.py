# -*- coding: utf-8 -*-
"""Services: matching engine and health checks."""

from seed_exchange.services.health import StorageHealthCheckService
from seed_exchange.services.matching import SeedExchangeEngine

__all__ = ["SeedExchangeEngine", "StorageHealthCheckService"]
