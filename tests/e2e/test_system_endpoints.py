from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

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
from overseer.main.app import create_app
from overseer.main.container import get_container
from tests.conftest import FakeMongoDatabase


class _HealthCheckService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth(
            status=status,
            dependencies=[
                DependencyStatus(name="mongo", status=status),
                DependencyStatus(name="nomad", status=status),
            ],
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


@pytest.fixture()
def client():
    app = create_app()
    container = get_container()
    container.mongo_database.override(providers.Object(FakeMongoDatabase()))

    health_provider = _HealthCheckService(ServiceStatus.UP)
    system_info = SystemInfo(
        title="Overseer",
        description="desc",
        version="1.0",
        environment="development",
        git_commit="abc",
        build_time="now",
        nomad_enabled=True,
        nomad_address="http://nomad:4646",
        nomad_topic="Job",
        database_name="overseer",
    )

    container.get_health_status_use_case.override(
        providers.Object(GetHealthStatusUseCase(health_provider))
    )
    container.get_application_info_use_case.override(
        providers.Factory(
            GetApplicationInfoUseCase,
            health_check_service=health_provider,
            system_info=system_info,
        )
    )

    with TestClient(app) as test_client:
        yield test_client


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "up"
    assert [dependency["name"] for dependency in body["dependencies"]] == [
        "mongo",
        "nomad",
    ]


def test_info_endpoint(client):
    response = client.get("/info")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Overseer"
    assert body["extras"]["nomad"]["topic"] == "Job"
    assert body["uptime_seconds"] >= 0
