from __future__ import annotations

from typing import cast

import pytest
from fastapi import HTTPException

from overseer.application.dtos import InstanceCreateDTO, InstanceDTO, InstanceUpdateDTO
from overseer.application.use_cases.instance_use_cases import (
    CreateInstanceUseCase,
    GetInstancesUseCase,
    UpdateInstanceUseCase,
)
from overseer.domain.entities.errors import (
    CatalogEntryNotFoundError,
    CatalogValidationError,
)
from overseer.presentation.controllers.instances_controller import (
    create_instance,
    get_instances,
    update_instance,
)

INSTANCE = InstanceDTO(
    id=7, environment_id=2, application_id=1, name="prod.checkout.web.api"
)


class _StubGetInstancesUseCase:
    def __init__(self) -> None:
        self.names: list = []

    async def execute(self, name=None):
        self.names.append(name)
        return [INSTANCE]


class _StubUseCase:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error

    async def execute(self, *args):
        if self.error is not None:
            raise self.error
        return INSTANCE


def _create_request() -> InstanceCreateDTO:
    return InstanceCreateDTO(
        environment_id=2, application_id=1, name="prod.checkout.web.api"
    )


@pytest.mark.asyncio
async def test_get_instances_forwards_name_filter() -> None:
    stub = _StubGetInstancesUseCase()

    result = await get_instances(
        name="prod.checkout.web.api",
        get_instances_use_case=cast(GetInstancesUseCase, stub),
    )

    assert result == [INSTANCE]
    assert stub.names == ["prod.checkout.web.api"]


@pytest.mark.asyncio
async def test_create_instance_success() -> None:
    result = await create_instance(
        request=_create_request(),
        create_instance_use_case=cast(CreateInstanceUseCase, _StubUseCase()),
    )

    assert result.id == 7


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (CatalogEntryNotFoundError("environment", 2), 404),
        (CatalogValidationError("Instance name is already used"), 400),
        (RuntimeError("db down"), 500),
    ],
)
async def test_create_instance_error_mapping(
    error: Exception, status_code: int
) -> None:
    with pytest.raises(HTTPException) as excinfo:
        await create_instance(
            request=_create_request(),
            create_instance_use_case=cast(CreateInstanceUseCase, _StubUseCase(error)),
        )

    assert excinfo.value.status_code == status_code


@pytest.mark.asyncio
async def test_update_instance_not_found() -> None:
    stub = _StubUseCase(CatalogEntryNotFoundError("instance", 7))

    with pytest.raises(HTTPException) as excinfo:
        await update_instance(
            instance_id=7,
            request=InstanceUpdateDTO(name="prod.checkout.web.worker"),
            update_instance_use_case=cast(UpdateInstanceUseCase, stub),
        )

    assert excinfo.value.status_code == 404
