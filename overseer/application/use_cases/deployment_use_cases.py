"""Use cases for reading and registering deployed versions."""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject

from overseer.domain.ports.target_registry import ITargetRegistry
from overseer.domain.repositories.deployment_repository import IDeploymentRepository

from ..dtos.deployment_dto import DeploymentCreateDTO, DeploymentDTO


class GetDeploymentsUseCase:
    """Use case for listing registered versions."""

    @inject
    def __init__(
        self,
        deployment_repository: IDeploymentRepository = Provide[
            "deployment_repository"
        ],
    ):
        self.deployment_repository = deployment_repository

    async def execute(
        self,
        instance_id: Optional[int] = None,
        latest_only: bool = False,
        skip: int = 0,
        limit: int = 100,
    ) -> List[DeploymentDTO]:
        """
        List registrations, newest first.

        Args:
            instance_id: Only registrations of this instance
            latest_only: Only the current version of each instance
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        if latest_only:
            deployments = await self.deployment_repository.find_latest_per_instance()
            if instance_id is not None:
                deployments = [d for d in deployments if d.instance_id == instance_id]
        else:
            deployments = await self.deployment_repository.find_all(
                instance_id=instance_id, skip=skip, limit=limit
            )
        return [DeploymentDTO.from_domain(deployment) for deployment in deployments]


class RegisterDeploymentUseCase:
    """Use case for registering a version by hand, through the target registry."""

    @inject
    def __init__(self, target_registry: ITargetRegistry = Provide["target_registry"]):
        self.target_registry = target_registry

    async def execute(self, request: DeploymentCreateDTO) -> DeploymentDTO:
        deployment = await self.target_registry.register(
            request.instance_id, request.version, request.deployed_at
        )
        return DeploymentDTO.from_domain(deployment)
