from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi import HTTPException, Request

from overseer.application.models import SystemInfo
from overseer.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from overseer.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from overseer.presentation.controllers.system_controller import health, info


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth(
            status=status,
            dependencies=[DependencyStatus(name="mongo", status=status)],
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


class _FailingHealthService:
    async def evaluate(self) -> SystemHealth:
        raise RuntimeError("health check crashed")


def _request(started_at: datetime) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/info",
        "headers": [],
        "query_string": b"",
        "server": ("test", 80),
        "app": SimpleNamespace(state=SimpleNamespace(started_at=started_at)),
    }
    return Request(scope)


def _system_info() -> SystemInfo:
    return SystemInfo(
        title="Overseer",
        description="desc",
        version="1.0",
        environment="development",
        git_commit="abc",
        build_time="now",
        nomad_enabled=False,
        nomad_address="http://nomad:4646",
        nomad_topic="Job",
        database_name="overseer",
    )


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    dto = await health(
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        )
    )
    assert dto.status is ServiceStatus.UP
    assert dto.dependencies[0].name == "mongo"


@pytest.mark.asyncio
async def test_health_endpoint_failure_is_service_unavailable():
    with pytest.raises(HTTPException) as excinfo:
        await health(
            get_health_status_use_case=GetHealthStatusUseCase(_FailingHealthService())
        )
    assert excinfo.value.status_code == 503


@pytest.mark.asyncio
async def test_info_endpoint_returns_application_info():
    started_at = datetime.now(timezone.utc)
    info_use_case = GetApplicationInfoUseCase(
        _HealthService(ServiceStatus.UP), _system_info()
    )

    dto = await info(
        request=_request(started_at), get_application_info_use_case=info_use_case
    )

    assert dto.name == "Overseer"
    assert dto.started_at == started_at
    assert dto.extras["nomad"]["enabled"] is False


@pytest.mark.asyncio
async def test_info_endpoint_failure_is_internal_error():
    info_use_case = GetApplicationInfoUseCase(_FailingHealthService(), _system_info())

    with pytest.raises(HTTPException) as excinfo:
        await info(
            request=_request(datetime.now(timezone.utc)),
            get_application_info_use_case=info_use_case,
        )
    assert excinfo.value.status_code == 500
