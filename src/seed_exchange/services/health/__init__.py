# -*- coding: utf-8 -*-
"""Health checks for the ledger store."""

from seed_exchange.services.health.storage_health import (
    DependencyHealth,
    HealthCheckResult,
    HealthStatus,
    StorageHealthCheckService,
    format_health_check_result,
    overall_status,
)

__all__ = [
    "DependencyHealth",
    "HealthCheckResult",
    "HealthStatus",
    "StorageHealthCheckService",
    "format_health_check_result",
    "overall_status",
]
