"""Use cases behind the /health and /info endpoints."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from overseer.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from overseer.application.models import SystemInfo
from overseer.domain.entities.health import ApplicationInfo
from overseer.domain.ports.health_check import IHealthCheckService


def redact_url(url: str) -> str:
    """Drop credentials from a URL's netloc."""
    if not url:
        return url

    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url

    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit(
        (parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment)
    )


class GetHealthStatusUseCase:
    """Check every dependency."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(await self._health_check_service.evaluate())


class GetApplicationInfoUseCase:
    """Report build metadata, uptime and a health snapshot."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            status=system_health.status,
            dependencies=system_health.dependencies,
            extras={
                "nomad": {
                    "enabled": self._info.nomad_enabled,
                    "address": redact_url(self._info.nomad_address),
                    "topic": self._info.nomad_topic,
                },
                "database": self._info.database_name,
            },
        )
        return ApplicationInfoDTO.from_domain(info)
