"""
Catalog Use Cases - Application Layer

Use cases shared by the two ordered catalogs, applications and
environments. Each instance is bound to one repository and names its
entries after ``entry_type`` in errors.
"""

from typing import List

from overseer.domain.entities.errors import (
    CatalogEntryNotFoundError,
    CatalogValidationError,
)
from overseer.domain.repositories.catalog_repository import IOrderedCatalogRepository
from overseer.shared import get_logger

from ..dtos.catalog_dto import (
    CatalogEntryCreateDTO,
    CatalogEntryDTO,
    CatalogEntryUpdateDTO,
    ReorderDTO,
)

logger = get_logger(__name__)


class _CatalogUseCase:
    def __init__(self, repository: IOrderedCatalogRepository, entry_type: str):
        self.repository = repository
        self.entry_type = entry_type


class ListCatalogEntriesUseCase(_CatalogUseCase):
    """List entries in their display order."""

    async def execute(self) -> List[CatalogEntryDTO]:
        entries = await self.repository.find_all()
        return [CatalogEntryDTO.from_domain(entry) for entry in entries]


class CreateCatalogEntryUseCase(_CatalogUseCase):
    """Create an entry after every existing one."""

    async def execute(self, request: CatalogEntryCreateDTO) -> CatalogEntryDTO:
        entry = await self.repository.create(request.name)
        logger.info(
            "catalog.entry.created",
            entry_type=self.entry_type,
            entry_id=entry.id,
            name=entry.name,
        )
        return CatalogEntryDTO.from_domain(entry)


class UpdateCatalogEntryUseCase(_CatalogUseCase):
    """Rename an entry."""

    async def execute(
        self, entry_id: int, request: CatalogEntryUpdateDTO
    ) -> CatalogEntryDTO:
        entry = await self.repository.find_by_id(entry_id)
        if entry is None:
            raise CatalogEntryNotFoundError(self.entry_type, entry_id)

        entry.name = request.name
        updated = await self.repository.update(entry)
        return CatalogEntryDTO.from_domain(updated)


class DeleteCatalogEntryUseCase(_CatalogUseCase):
    """Delete an entry."""

    async def execute(self, entry_id: int) -> None:
        await self.repository.delete(entry_id)
        logger.info(
            "catalog.entry.deleted", entry_type=self.entry_type, entry_id=entry_id
        )


class ReorderCatalogEntriesUseCase(_CatalogUseCase):
    """
    Apply a new display order.

    The request must list every existing entry exactly once; its position
    in the list becomes the entry's sort order.
    """

    async def execute(self, request: ReorderDTO) -> List[CatalogEntryDTO]:
        existing = {entry.id for entry in await self.repository.find_all()}
        requested = set(request.ids)

        if requested != existing:
            raise CatalogValidationError(
                f"Reorder must list every {self.entry_type} exactly once",
                {
                    "missing": sorted(existing - requested),
                    "unknown": sorted(requested - existing),
                },
            )

        await self.repository.reorder(request.ids)
        entries = await self.repository.find_all()
        return [CatalogEntryDTO.from_domain(entry) for entry in entries]
