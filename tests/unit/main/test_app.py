from __future__ import annotations

import pytest
from dependency_injector import providers

from overseer.main import app as module_app
from overseer.main.app import create_app
from overseer.main.container import get_container


class _StubMongoDatabase:
    def __init__(self) -> None:
        self.closed = False

    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    stub_db = _StubMongoDatabase()
    get_container().mongo_database.override(providers.Object(stub_db))
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is get_container()

    assert stub_db.closed is True
    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_app_exposes_every_router() -> None:
    paths = {route.path for route in create_app().routes}

    assert {
        "/health",
        "/info",
        "/applications/",
        "/applications/reorder",
        "/environments/{environment_id}",
        "/instances/",
        "/deployments/",
    } <= paths
