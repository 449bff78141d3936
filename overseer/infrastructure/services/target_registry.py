"""
Target Registry Service - Infrastructure Layer

MongoDB-backed registry of deployment targets. Lookups go through the
instance repository; registrations are appended to the deployment
repository.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from pymongo.errors import PyMongoError

from overseer.domain.entities.catalog import Instance
from overseer.domain.entities.deployment import Deployment
from overseer.domain.entities.errors import (
    DeploymentRegistrationError,
    DeploymentValidationError,
    TargetLookupError,
)
from overseer.domain.repositories.catalog_repository import IInstanceRepository
from overseer.domain.repositories.deployment_repository import IDeploymentRepository
from overseer.shared import get_logger

logger = get_logger(__name__)


class MongoTargetRegistry:
    """Target registry over the instance and deployment collections."""

    def __init__(
        self,
        instance_repository: IInstanceRepository,
        deployment_repository: IDeploymentRepository,
    ):
        self.instance_repository = instance_repository
        self.deployment_repository = deployment_repository

    async def find_targets_by_deployment_name(self, name: str) -> List[Instance]:
        try:
            return await self.instance_repository.find_by_name(name)
        except PyMongoError as e:
            raise TargetLookupError(
                f"Failed to look up targets for deployment {name}",
                {"deployment_name": name, "error": str(e)},
            ) from e

    async def register(
        self,
        target_id: int,
        version: str,
        deployed_at: Optional[datetime] = None,
    ) -> Deployment:
        """
        Append a version registration for a target.

        Args:
            target_id: ID of the instance the version runs in
            version: Version identifier (image tag)
            deployed_at: When the version was deployed; now when unset

        Returns:
            The stored registration

        Raises:
            DeploymentValidationError: If an argument is missing or the
                target does not exist
            DeploymentRegistrationError: If the registration is not stored
        """
        if target_id <= 0:
            raise DeploymentValidationError("Instance ID is required")
        if not version:
            raise DeploymentValidationError("Version is required")

        try:
            instance = await self.instance_repository.find_by_id(target_id)
            if instance is None:
                raise DeploymentValidationError(
                    f"Instance with ID {target_id} not found",
                    {"instance_id": target_id},
                )

            deployment = Deployment(
                id=uuid4(),
                instance_id=target_id,
                version=version,
                deployed_at=deployed_at or datetime.now(timezone.utc),
            )
            await self.deployment_repository.create(deployment)
        except PyMongoError as e:
            raise DeploymentRegistrationError(
                f"Failed to register version {version} for instance {target_id}",
                {"instance_id": target_id, "version": version, "error": str(e)},
            ) from e

        logger.info(
            "deployment.registered",
            deployment_id=str(deployment.id),
            instance_id=target_id,
            version=version,
            deployed_at=deployment.deployed_at.isoformat(),
        )
        return deployment
