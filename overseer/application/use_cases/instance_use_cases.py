"""
Instance Use Cases - Application Layer

Management of deployment targets. An instance name doubles as the
deployment name of incoming events, so names are unique.
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject

from overseer.domain.entities.catalog import Instance
from overseer.domain.entities.errors import (
    CatalogEntryNotFoundError,
    CatalogValidationError,
)
from overseer.domain.repositories.catalog_repository import (
    IApplicationRepository,
    IEnvironmentRepository,
    IInstanceRepository,
)
from overseer.shared import get_logger

from ..dtos.catalog_dto import InstanceCreateDTO, InstanceDTO, InstanceUpdateDTO

logger = get_logger(__name__)


async def _ensure_unique_name(
    repository: IInstanceRepository, name: str, instance_id: int = 0
) -> None:
    clashes = [i for i in await repository.find_by_name(name) if i.id != instance_id]
    if clashes:
        raise CatalogValidationError(
            f"Instance name {name} is already used",
            {"name": name, "instance_ids": [i.id for i in clashes]},
        )


async def _require(repository, entry_type: str, entry_id: int) -> None:
    if await repository.find_by_id(entry_id) is None:
        raise CatalogEntryNotFoundError(entry_type, entry_id)


class GetInstancesUseCase:
    """Use case for listing instances."""

    @inject
    def __init__(
        self,
        instance_repository: IInstanceRepository = Provide["instance_repository"],
    ):
        self.instance_repository = instance_repository

    async def execute(self, name: Optional[str] = None) -> List[InstanceDTO]:
        """
        List instances, optionally only those with an exact name.

        Args:
            name: Deployment name to filter by

        Returns:
            Matching instances ordered by ID
        """
        instances = await self.instance_repository.find_all(name=name)
        return [InstanceDTO.from_domain(instance) for instance in instances]


class CreateInstanceUseCase:
    """Use case for creating an instance."""

    @inject
    def __init__(
        self,
        instance_repository: IInstanceRepository = Provide["instance_repository"],
        application_repository: IApplicationRepository = Provide[
            "application_repository"
        ],
        environment_repository: IEnvironmentRepository = Provide[
            "environment_repository"
        ],
    ):
        self.instance_repository = instance_repository
        self.application_repository = application_repository
        self.environment_repository = environment_repository

    async def execute(self, request: InstanceCreateDTO) -> InstanceDTO:
        """
        Create an instance of an application in an environment.

        Raises:
            CatalogEntryNotFoundError: If the application or environment
                does not exist
            CatalogValidationError: If the name is already used
        """
        await _require(
            self.environment_repository, "environment", request.environment_id
        )
        await _require(
            self.application_repository, "application", request.application_id
        )
        await _ensure_unique_name(self.instance_repository, request.name)

        instance = await self.instance_repository.create(
            Instance(
                environment_id=request.environment_id,
                application_id=request.application_id,
                name=request.name,
            )
        )
        logger.info(
            "instance.created",
            instance_id=instance.id,
            name=instance.name,
            environment_id=instance.environment_id,
            application_id=instance.application_id,
        )
        return InstanceDTO.from_domain(instance)


class UpdateInstanceUseCase:
    """Use case for renaming or moving an instance."""

    @inject
    def __init__(
        self,
        instance_repository: IInstanceRepository = Provide["instance_repository"],
        application_repository: IApplicationRepository = Provide[
            "application_repository"
        ],
        environment_repository: IEnvironmentRepository = Provide[
            "environment_repository"
        ],
    ):
        self.instance_repository = instance_repository
        self.application_repository = application_repository
        self.environment_repository = environment_repository

    async def execute(
        self, instance_id: int, request: InstanceUpdateDTO
    ) -> InstanceDTO:
        instance = await self.instance_repository.find_by_id(instance_id)
        if instance is None:
            raise CatalogEntryNotFoundError("instance", instance_id)

        if request.environment_id is not None:
            await _require(
                self.environment_repository, "environment", request.environment_id
            )
            instance.environment_id = request.environment_id

        if request.application_id is not None:
            await _require(
                self.application_repository, "application", request.application_id
            )
            instance.application_id = request.application_id

        if request.name is not None and request.name != instance.name:
            await _ensure_unique_name(
                self.instance_repository, request.name, instance_id
            )
            instance.name = request.name

        updated = await self.instance_repository.update(instance)
        return InstanceDTO.from_domain(updated)
