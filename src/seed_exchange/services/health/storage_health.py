# -*- coding: utf-8 -*-
"""Storage health probe: exercises create/read/query/delete on the exchange ledger.

Writes a sentinel open request under a dedicated plant id, checks it can be read
back and queried, removes it, and reports a DependencyHealth. Probe failures are
reported as statuses, never raised.
"""

from __future__ import annotations

import time
import structlog
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional
from uuid import uuid4

from seed_exchange.exceptions import MissingRequiredConfigError
from seed_exchange.models.exchange_entry import ExchangeEntry

if TYPE_CHECKING:
    from seed_exchange.config import Settings
    from seed_exchange.persistence.repositories.interfaces.exchange_repository import (
        IExchangeRepository,
    )


class HealthStatus(str, Enum):
    """Health of a dependency or of the whole service."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}

_STATUS_ICON = {
    HealthStatus.HEALTHY: "[OK]",
    HealthStatus.DEGRADED: "[WARN]",
    HealthStatus.UNHEALTHY: "[FAIL]",
}


@dataclass
class DependencyHealth:
    """Result of one dependency check."""

    name: str
    status: HealthStatus
    message: str
    response_time_ms: Optional[float] = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class HealthCheckResult:
    """Overall result: worst dependency status wins."""

    status: HealthStatus
    timestamp: datetime
    dependencies: list[DependencyHealth] = field(default_factory=list)
    version: Optional[str] = None

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
            "dependencies": [d.to_dict() for d in self.dependencies],
            "version": self.version,
        }


def overall_status(dependencies: list[DependencyHealth]) -> HealthStatus:
    """Return the most severe status among dependencies (HEALTHY if none)."""
    if not dependencies:
        return HealthStatus.HEALTHY
    return max((d.status for d in dependencies), key=_SEVERITY.__getitem__)


def format_health_check_result(result: HealthCheckResult) -> str:
    """Render a HealthCheckResult as a human-readable report."""
    lines = [
        f"{_STATUS_ICON[result.status]} Overall status: {result.status.value.upper()}",
        f"Timestamp: {result.timestamp.isoformat()}",
    ]
    if result.version:
        lines.append(f"Version: {result.version}")
    lines.append("")
    lines.append("Dependencies:")
    for dep in result.dependencies:
        lines.append(f"  {_STATUS_ICON[dep.status]} {dep.name}: {dep.status.value}")
        lines.append(f"      {dep.message}")
        if dep.response_time_ms is not None:
            lines.append(f"      Response time: {dep.response_time_ms:.1f}ms")
        for key, value in dep.details.items():
            lines.append(f"      {key}: {value}")
    return "\n".join(lines)


class StorageHealthCheckService:
    """Probe the exchange ledger with a sentinel entry."""

    def __init__(
        self,
        repository: "IExchangeRepository",
        settings: "Settings",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        if not settings.health.probe_plant_id.strip():
            raise MissingRequiredConfigError("HEALTH__PROBE_PLANT_ID")
        if not settings.health.probe_user_id.strip():
            raise MissingRequiredConfigError("HEALTH__PROBE_USER_ID")
        self._repo = repository
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def check_storage(self) -> DependencyHealth:
        """Run create/read/query/delete against the repository."""
        started = time.perf_counter()
        probe = self._settings.health
        storage_type = type(self._repo).__name__

        def _elapsed_ms() -> float:
            return (time.perf_counter() - started) * 1000

        def _report(status: HealthStatus, message: str, **details: Any) -> DependencyHealth:
            return DependencyHealth(
                name="storage",
                status=status,
                message=message,
                response_time_ms=_elapsed_ms(),
                details={"storage_type": storage_type, **details},
            )

        sentinel = ExchangeEntry.open_request(
            probe.probe_plant_id,
            probe.probe_user_id,
            id=uuid4(),
        )
        try:
            await self._repo.insert(sentinel)
            removed = False
            try:
                retrieved = await self._repo.get(sentinel.id)
                if retrieved is None:
                    return _report(HealthStatus.UNHEALTHY, "Failed to retrieve test data after write")
                if retrieved.id != sentinel.id or retrieved.plant_id != sentinel.plant_id:
                    return _report(HealthStatus.UNHEALTHY, "Data integrity check failed")

                open_requests = await self._repo.list_open_requests(probe.probe_plant_id)
                if not any(e.id == sentinel.id for e in open_requests):
                    return _report(HealthStatus.DEGRADED, "Query operation returned unexpected results")

                await self._repo.remove(sentinel.id)
                removed = True
                if await self._repo.get(sentinel.id) is not None:
                    return _report(HealthStatus.DEGRADED, "Delete operation did not remove test data")
            finally:
                # the sentinel must not outlive the check
                if not removed:
                    await self._repo.remove(sentinel.id)
        except Exception as e:
            self._logger.warning(
                "storage_health_check_failed",
                storage_type=storage_type,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return _report(
                HealthStatus.UNHEALTHY,
                str(e) or "Unknown error during health check",
                error_type=type(e).__name__,
            )

        return _report(
            HealthStatus.HEALTHY,
            f"{storage_type} storage is functioning correctly",
            operations_verified=["create", "read", "query", "delete"],
        )

    async def perform_health_check(self) -> HealthCheckResult:
        """Check every dependency and aggregate into one HealthCheckResult."""
        dependencies = [await self.check_storage()]
        result = HealthCheckResult(
            status=overall_status(dependencies),
            timestamp=datetime.now(UTC),
            dependencies=dependencies,
            version=self._settings.app.service_version,
        )
        self._logger.info(
            "health_check_completed",
            status=result.status.value,
            dependencies={d.name: d.status.value for d in dependencies},
        )
        return result
