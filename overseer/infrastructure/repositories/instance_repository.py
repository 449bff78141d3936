"""
MongoDB Instance Repository - Infrastructure Layer

Instances are the deployment targets of the registry. Their name is the
deployment name the ingestion pipeline correlates orchestrator events with.
"""

from typing import Any, Dict, List, Optional

from overseer.domain.entities.catalog import Instance
from overseer.domain.entities.errors import CatalogEntryNotFoundError
from overseer.domain.repositories.catalog_repository import IInstanceRepository
from overseer.infrastructure.database import MongoDatabase


class InstanceRepository(IInstanceRepository):
    """MongoDB implementation of the InstanceRepository."""

    COLLECTION_NAME = "instances"

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, instance: Instance) -> Dict[str, Any]:
        return {
            "id": instance.id,
            "environment_id": instance.environment_id,
            "application_id": instance.application_id,
            "name": instance.name,
        }

    def _to_entity(self, document: Dict[str, Any]) -> Instance:
        return Instance(
            id=int(document["id"]),
            environment_id=int(document["environment_id"]),
            application_id=int(document["application_id"]),
            name=document["name"],
        )

    async def find_all(self, name: Optional[str] = None) -> List[Instance]:
        query: Dict[str, Any] = {}
        if name:
            query["name"] = name

        documents = await self.db.find_many(self.COLLECTION_NAME, query, sort_by="id")
        return [self._to_entity(document) for document in documents]

    async def find_by_id(self, instance_id: int) -> Optional[Instance]:
        document = await self.db.find_one(self.COLLECTION_NAME, {"id": instance_id})
        if document is None:
            return None
        return self._to_entity(document)

    async def find_by_name(self, name: str) -> List[Instance]:
        """
        Find every instance registered under a deployment name.

        The match is exact and case-sensitive. More than one result means
        the catalog holds duplicate targets; callers decide how to react.
        """
        documents = await self.db.find_many(
            self.COLLECTION_NAME, {"name": name}, sort_by="id"
        )
        return [self._to_entity(document) for document in documents]

    async def create(self, instance: Instance) -> Instance:
        instance.id = await self.db.next_sequence(self.COLLECTION_NAME)
        await self.db.insert_one(self.COLLECTION_NAME, self._to_document(instance))
        return instance

    async def update(self, instance: Instance) -> Instance:
        matched = await self.db.update_one(
            self.COLLECTION_NAME,
            {"id": instance.id},
            {
                "environment_id": instance.environment_id,
                "application_id": instance.application_id,
                "name": instance.name,
            },
        )
        if matched == 0:
            raise CatalogEntryNotFoundError("instance", instance.id)
        return instance
