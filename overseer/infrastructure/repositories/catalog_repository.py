"""
MongoDB Catalog Repositories - Infrastructure Layer

This module implements the application and environment repositories.
Both are ordered catalogs of named entries with integer IDs.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

import pymongo

from overseer.domain.entities.catalog import Application, Environment
from overseer.domain.entities.errors import CatalogEntryNotFoundError
from overseer.domain.repositories.catalog_repository import (
    EntryT,
    IApplicationRepository,
    IEnvironmentRepository,
)
from overseer.infrastructure.database import MongoDatabase


class _OrderedCatalogRepository:
    """Shared MongoDB storage for ordered catalog entries."""

    COLLECTION_NAME: str
    ENTRY_TYPE: str
    entity_factory: Callable[..., Any]

    def __init__(self, mongo_database: MongoDatabase):
        """
        Initialize the repository.

        Args:
            mongo_database: MongoDB database client
        """
        self.db = mongo_database

    def _to_document(self, entry: EntryT) -> Dict[str, Any]:
        return {"id": entry.id, "name": entry.name, "sort_order": entry.sort_order}

    def _to_entity(self, document: Dict[str, Any]) -> EntryT:
        return self.entity_factory(
            id=int(document["id"]),
            name=document["name"],
            sort_order=int(document.get("sort_order", 0)),
        )

    async def find_all(self) -> List[EntryT]:
        documents = await self.db.find_many(
            self.COLLECTION_NAME, {}, sort_by="sort_order"
        )
        return [self._to_entity(document) for document in documents]

    async def find_by_id(self, entry_id: int) -> Optional[EntryT]:
        document = await self.db.find_one(self.COLLECTION_NAME, {"id": entry_id})
        if document is None:
            return None
        return self._to_entity(document)

    async def create(self, name: str) -> EntryT:
        """Create an entry placed after every existing entry."""
        last = await self.db.find_many(
            self.COLLECTION_NAME,
            {},
            sort_by="sort_order",
            sort_direction=pymongo.DESCENDING,
            limit=1,
        )
        sort_order = int(last[0].get("sort_order", 0)) + 1 if last else 0

        entry = self.entity_factory(
            id=await self.db.next_sequence(self.COLLECTION_NAME),
            name=name,
            sort_order=sort_order,
        )
        await self.db.insert_one(self.COLLECTION_NAME, self._to_document(entry))
        return entry

    async def update(self, entry: EntryT) -> EntryT:
        matched = await self.db.update_one(
            self.COLLECTION_NAME,
            {"id": entry.id},
            {"name": entry.name, "sort_order": entry.sort_order},
        )
        if matched == 0:
            raise CatalogEntryNotFoundError(self.ENTRY_TYPE, entry.id)
        return entry

    async def delete(self, entry_id: int) -> None:
        if await self.db.find_one(self.COLLECTION_NAME, {"id": entry_id}) is None:
            raise CatalogEntryNotFoundError(self.ENTRY_TYPE, entry_id)
        await self.db.delete_one(self.COLLECTION_NAME, {"id": entry_id})

    async def reorder(self, entry_ids: Sequence[int]) -> None:
        for position, entry_id in enumerate(entry_ids):
            await self.db.update_one(
                self.COLLECTION_NAME, {"id": entry_id}, {"sort_order": position}
            )


class ApplicationRepository(_OrderedCatalogRepository, IApplicationRepository):
    """MongoDB implementation of the application repository."""

    COLLECTION_NAME = "applications"
    ENTRY_TYPE = "application"
    entity_factory = Application


class EnvironmentRepository(_OrderedCatalogRepository, IEnvironmentRepository):
    """MongoDB implementation of the environment repository."""

    COLLECTION_NAME = "environments"
    ENTRY_TYPE = "environment"
    entity_factory = Environment
