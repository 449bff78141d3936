from __future__ import annotations

from typing import cast

import pytest

from overseer.application.dtos import InstanceCreateDTO, InstanceUpdateDTO
from overseer.application.use_cases.instance_use_cases import (
    CreateInstanceUseCase,
    GetInstancesUseCase,
    UpdateInstanceUseCase,
)
from overseer.domain.entities.errors import (
    CatalogEntryNotFoundError,
    CatalogValidationError,
)
from overseer.infrastructure.database import MongoDatabase
from overseer.infrastructure.repositories import (
    ApplicationRepository,
    EnvironmentRepository,
    InstanceRepository,
)
from tests.conftest import FakeMongoDatabase


@pytest.fixture()
def repositories(fake_mongo_database: FakeMongoDatabase):
    database = cast(MongoDatabase, fake_mongo_database)
    return {
        "instance_repository": InstanceRepository(database),
        "application_repository": ApplicationRepository(database),
        "environment_repository": EnvironmentRepository(database),
    }


async def _seed(repositories):
    await repositories["application_repository"].create("checkout")
    await repositories["environment_repository"].create("production")
    await repositories["environment_repository"].create("staging")
    return repositories


def _create_request(name: str = "prod.checkout.web.api") -> InstanceCreateDTO:
    return InstanceCreateDTO(environment_id=1, application_id=1, name=name)


@pytest.mark.asyncio
async def test_create_instance_and_filter_by_name(repositories) -> None:
    seeded = await _seed(repositories)
    create = CreateInstanceUseCase(**seeded)
    await create.execute(_create_request())
    await create.execute(_create_request("stage.checkout.web.api"))

    get_instances = GetInstancesUseCase(
        instance_repository=seeded["instance_repository"]
    )

    assert len(await get_instances.execute()) == 2
    [match] = await get_instances.execute(name="stage.checkout.web.api")
    assert match.id == 2


@pytest.mark.asyncio
async def test_create_instance_rejects_duplicate_name(repositories) -> None:
    seeded = await _seed(repositories)
    create = CreateInstanceUseCase(**seeded)
    await create.execute(_create_request())

    with pytest.raises(CatalogValidationError):
        await create.execute(_create_request())


@pytest.mark.asyncio
async def test_create_instance_requires_known_environment(repositories) -> None:
    seeded = await _seed(repositories)
    create = CreateInstanceUseCase(**seeded)

    with pytest.raises(CatalogEntryNotFoundError) as excinfo:
        await create.execute(
            InstanceCreateDTO(environment_id=9, application_id=1, name="x.y.z.w")
        )

    assert excinfo.value.entry_type == "environment"


@pytest.mark.asyncio
async def test_update_instance_moves_and_renames(repositories) -> None:
    seeded = await _seed(repositories)
    await CreateInstanceUseCase(**seeded).execute(_create_request())
    update = UpdateInstanceUseCase(**seeded)

    updated = await update.execute(
        1, InstanceUpdateDTO(environment_id=2, name="stage.checkout.web.api")
    )

    assert (updated.environment_id, updated.name) == (2, "stage.checkout.web.api")


@pytest.mark.asyncio
async def test_update_instance_keeping_its_name_is_allowed(repositories) -> None:
    seeded = await _seed(repositories)
    await CreateInstanceUseCase(**seeded).execute(_create_request())

    updated = await UpdateInstanceUseCase(**seeded).execute(
        1, InstanceUpdateDTO(name="prod.checkout.web.api")
    )

    assert updated.name == "prod.checkout.web.api"


@pytest.mark.asyncio
async def test_update_instance_rejects_taken_name(repositories) -> None:
    seeded = await _seed(repositories)
    create = CreateInstanceUseCase(**seeded)
    await create.execute(_create_request())
    await create.execute(_create_request("stage.checkout.web.api"))

    with pytest.raises(CatalogValidationError):
        await UpdateInstanceUseCase(**seeded).execute(
            2, InstanceUpdateDTO(name="prod.checkout.web.api")
        )


@pytest.mark.asyncio
async def test_update_missing_instance_raises(repositories) -> None:
    seeded = await _seed(repositories)
    with pytest.raises(CatalogEntryNotFoundError):
        await UpdateInstanceUseCase(**seeded).execute(3, InstanceUpdateDTO())
