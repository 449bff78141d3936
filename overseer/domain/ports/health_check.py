"""Port for probing the registry store and the orchestrator."""

from __future__ import annotations

from typing import Protocol

from overseer.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Checks every dependency the API and the ingestion worker rely on."""

    async def evaluate(self) -> SystemHealth:
        """Check dependencies concurrently and aggregate the result."""
        ...
