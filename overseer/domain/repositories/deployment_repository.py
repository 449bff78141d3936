"""
Domain Repository Interface - Deployment

Append-only storage of version registrations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from overseer.domain.entities.deployment import Deployment


class IDeploymentRepository(ABC):
    """Interface for deployment registration repository."""

    @abstractmethod
    async def create(self, deployment: Deployment) -> Deployment:
        """Append a deployment registration."""
        pass

    @abstractmethod
    async def find_all(
        self,
        instance_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Deployment]:
        """Return registrations, newest first."""
        pass

    @abstractmethod
    async def find_latest_per_instance(self) -> List[Deployment]:
        """Return the most recent registration of every instance."""
        pass
