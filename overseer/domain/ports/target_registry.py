"""Target registry abstraction used to correlate deployment events."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol

from overseer.domain.entities.catalog import Instance
from overseer.domain.entities.deployment import Deployment


class ITargetRegistry(Protocol):
    """Lookup of deployment targets and append-only version registration."""

    async def find_targets_by_deployment_name(self, name: str) -> List[Instance]:
        """
        Return targets whose deployment name equals ``name`` exactly.

        Raises:
            TargetLookupError: If the targets cannot be queried.
        """
        ...

    async def register(
        self,
        target_id: int,
        version: str,
        deployed_at: Optional[datetime] = None,
    ) -> Deployment:
        """
        Register a version for a target.

        An unset ``deployed_at`` is replaced with the current time.

        Raises:
            DeploymentValidationError: If the registration is incomplete.
            DeploymentRegistrationError: If the registration is not stored.
        """
        ...
