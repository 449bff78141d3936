from __future__ import annotations

import asyncio
from dataclasses import dataclass

import pytest
from dependency_injector import providers

from overseer.infrastructure.gateways.nomad import (
    ExponentialBackoff,
    FixedBackoff,
    IdleDeploymentEventSource,
    NomadDeploymentEventSource,
)
from overseer.main.config import AppSettings, NomadSettings
from overseer.main.container import app_lifespan, get_container, init_container
from overseer.shared.consts import EnumRetryStrategy


@dataclass
class _StubMongoDatabase:
    ensured_indexes: bool = False
    closed: bool = False

    async def create_indexes(self) -> None:
        self.ensured_indexes = True

    def close(self) -> None:
        self.closed = True


def _container(**nomad):
    container = init_container(AppSettings(nomad=NomadSettings(**nomad)))
    container.mongo_database.override(providers.Object(_StubMongoDatabase()))
    return container


@pytest.mark.asyncio
async def test_init_and_get_container() -> None:
    container = init_container(AppSettings())
    assert hasattr(container, "mongo_database")
    assert get_container() is container

    stub_db = _StubMongoDatabase()
    container.mongo_database.override(providers.Object(stub_db))

    async with app_lifespan() as active:
        assert active is container


@pytest.mark.asyncio
async def test_app_lifespan_manages_resources() -> None:
    container = init_container(AppSettings())
    stub_db = _StubMongoDatabase()
    container.mongo_database.override(providers.Object(stub_db))

    async with app_lifespan():
        await asyncio.sleep(0)

    assert stub_db.ensured_indexes is True
    assert stub_db.closed is True


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("overseer.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()


def test_backoff_policy_follows_retry_strategy() -> None:
    fixed = _container(retry_delay_seconds=2).backoff_policy()
    exponential = _container(
        retry_strategy=EnumRetryStrategy.EXPONENTIAL,
        retry_delay_seconds=1,
        retry_max_delay_seconds=8,
    ).backoff_policy()

    assert isinstance(fixed, FixedBackoff)
    assert fixed.delay(3) == 2
    assert isinstance(exponential, ExponentialBackoff)
    assert [exponential.delay(attempt) for attempt in (1, 2, 5)] == [1, 2, 8]


def test_event_source_depends_on_nomad_being_enabled() -> None:
    assert isinstance(
        _container(enabled=True).deployment_event_source(), NomadDeploymentEventSource
    )
    assert isinstance(
        _container(enabled=False).deployment_event_source(), IdleDeploymentEventSource
    )


def test_stream_client_cursor_follows_resume_setting() -> None:
    resuming = _container(resume_from_cursor=True).nomad_stream_client()
    live_only = _container(resume_from_cursor=False).nomad_stream_client()

    assert resuming.cursor_repository is not None
    assert live_only.cursor_repository is None


def test_stream_client_receives_nomad_settings() -> None:
    client = _container(
        address="http://nomad:4646/", token="acl", topic="Job", queue_size=4
    ).nomad_stream_client()

    assert client.address == "http://nomad:4646"
    assert client.token == "acl"
    assert client.queue_size == 4
