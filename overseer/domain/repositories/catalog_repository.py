"""
Domain Repository Interfaces - Catalog

Repository contracts for applications, environments and instances.
Applications and environments share the same ordered-catalog shape.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

from overseer.domain.entities.catalog import Application, Environment, Instance

EntryT = TypeVar("EntryT", Application, Environment)


class IOrderedCatalogRepository(ABC, Generic[EntryT]):
    """Interface for named catalog entries kept in a user-defined order."""

    @abstractmethod
    async def find_all(self) -> List[EntryT]:
        """Return all entries ordered by sort order."""
        pass

    @abstractmethod
    async def find_by_id(self, entry_id: int) -> Optional[EntryT]:
        """Get an entry by ID."""
        pass

    @abstractmethod
    async def create(self, name: str) -> EntryT:
        """Create an entry at the end of the current order."""
        pass

    @abstractmethod
    async def update(self, entry: EntryT) -> EntryT:
        """Persist changes to an existing entry."""
        pass

    @abstractmethod
    async def delete(self, entry_id: int) -> None:
        """Delete an entry."""
        pass

    @abstractmethod
    async def reorder(self, entry_ids: Sequence[int]) -> None:
        """Assign each entry its position in ``entry_ids`` as sort order."""
        pass


class IApplicationRepository(IOrderedCatalogRepository[Application]):
    """Interface for application repository."""


class IEnvironmentRepository(IOrderedCatalogRepository[Environment]):
    """Interface for environment repository."""


class IInstanceRepository(ABC):
    """Interface for instance (deployment target) repository."""

    @abstractmethod
    async def find_all(self, name: Optional[str] = None) -> List[Instance]:
        """Return instances, optionally restricted to an exact name."""
        pass

    @abstractmethod
    async def find_by_id(self, instance_id: int) -> Optional[Instance]:
        """Get an instance by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> List[Instance]:
        """Return every instance whose name equals ``name`` (case-sensitive)."""
        pass

    @abstractmethod
    async def create(self, instance: Instance) -> Instance:
        """Create an instance, assigning its ID."""
        pass

    @abstractmethod
    async def update(self, instance: Instance) -> Instance:
        """Persist changes to an existing instance."""
        pass
