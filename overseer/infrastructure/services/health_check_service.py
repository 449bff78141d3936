"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from time import perf_counter
from typing import Dict, Iterable, List, Optional
from urllib.parse import urljoin

import httpx

from overseer.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from overseer.domain.ports.health_check import IHealthCheckService
from overseer.infrastructure.database.mongo_database import MongoDatabase

NOMAD_HEALTH_PATHS = ("/v1/agent/health", "/v1/status/leader")


class HealthCheckService(IHealthCheckService):
    """Check MongoDB and the Nomad agent."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        nomad_address: str,
        nomad_token: str = "",
        *,
        nomad_enabled: bool = True,
        http_timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._mongo_database = mongo_database
        self._nomad_address = nomad_address
        self._nomad_token = nomad_token
        self._nomad_enabled = nomad_enabled
        self._http_timeout = http_timeout
        self._transport = transport

    async def evaluate(self) -> SystemHealth:
        """Run checks concurrently and aggregate system health."""

        checks = {
            "mongo": asyncio.create_task(self._check_mongo()),
            "nomad": asyncio.create_task(self._check_nomad()),
        }

        dependency_statuses: List[DependencyStatus] = []

        for name, task in checks.items():
            try:
                dependency_statuses.append(await task)
            except Exception as exc:
                dependency_statuses.append(
                    DependencyStatus(
                        name=name,
                        status=ServiceStatus.DOWN,
                        message=str(exc),
                    )
                )

        return SystemHealth.from_dependencies(dependency_statuses)

    async def _check_mongo(self) -> DependencyStatus:
        if not self._mongo_database:
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.UNKNOWN,
                message="Mongo database client not configured.",
            )

        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.client.admin.command, "ping")
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.UP,
                message="MongoDB ping successful",
                latency_ms=latency_ms,
                details={"database": self._mongo_database.db.name},
            )
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=latency_ms,
            )

    async def _check_nomad(self) -> DependencyStatus:
        if not self._nomad_enabled:
            return DependencyStatus(
                name="nomad",
                status=ServiceStatus.UNKNOWN,
                message="Nomad event source disabled.",
            )
        return await self._check_http_service(
            name="nomad", base_url=self._nomad_address, paths=NOMAD_HEALTH_PATHS
        )

    async def _check_http_service(
        self,
        *,
        name: str,
        base_url: str,
        paths: Iterable[str],
    ) -> DependencyStatus:
        if not base_url:
            return DependencyStatus(
                name=name,
                status=ServiceStatus.UNKNOWN,
                message="Service URL not configured.",
            )

        attempts_log: List[dict] = []
        last_result: DependencyStatus | None = None

        for path in paths:
            result = await self._hit_http_endpoint(
                name=name, base_url=base_url, path=path
            )
            attempts_log.append(
                {
                    "path": path,
                    "status": result.status.value,
                    "message": result.message,
                    "checked_at": datetime.now(timezone.utc).isoformat(),
                }
            )

            if result.status == ServiceStatus.UP:
                result.details.setdefault("attempts", attempts_log)
                return result

            last_result = result

        if last_result is None:
            return DependencyStatus(
                name=name,
                status=ServiceStatus.UNKNOWN,
                message="Unable to evaluate service health",
            )

        last_result.details.setdefault("attempts", attempts_log)
        return last_result

    async def _hit_http_endpoint(
        self,
        *,
        name: str,
        base_url: str,
        path: str,
    ) -> DependencyStatus:
        url = self._normalize_url(base_url, path)
        headers: Dict[str, str] = {}
        if self._nomad_token:
            headers["X-Nomad-Token"] = self._nomad_token
        start = perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=self._http_timeout, transport=self._transport
            ) as client:
                response = await client.get(url, headers=headers)

            latency_ms = (perf_counter() - start) * 1000
            status_code = response.status_code

            if status_code >= 500:
                status = ServiceStatus.DOWN
            elif status_code >= 400:
                status = ServiceStatus.DEGRADED
            else:
                status = ServiceStatus.UP

            return DependencyStatus(
                name=name,
                status=status,
                message=f"HTTP {status_code}",
                latency_ms=latency_ms,
                details={"url": url, "status_code": status_code},
            )

        except httpx.RequestError as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name=name,
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=latency_ms,
                details={"url": url},
            )

    def _normalize_url(self, base_url: str, path: str) -> str:
        if not path:
            return base_url
        base = base_url if base_url.endswith("/") else f"{base_url}/"
        return urljoin(base, path.lstrip("/"))
