"""
MongoDB Deployment Repository - Infrastructure Layer

Append-only storage of version registrations. Several registrations per
instance are kept; the most recent ``deployed_at`` is the current version.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

import pymongo

from overseer.domain.entities.deployment import Deployment
from overseer.domain.repositories.deployment_repository import IDeploymentRepository
from overseer.infrastructure.database import MongoDatabase


class DeploymentRepository(IDeploymentRepository):
    """MongoDB implementation of the DeploymentRepository."""

    COLLECTION_NAME = "deployments"

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, deployment: Deployment) -> Dict[str, Any]:
        return {
            "id": str(deployment.id),
            "instance_id": deployment.instance_id,
            "version": deployment.version,
            "deployed_at": deployment.deployed_at,
        }

    def _to_entity(self, document: Dict[str, Any]) -> Deployment:
        return Deployment(
            id=UUID(document["id"]),
            instance_id=int(document["instance_id"]),
            version=document["version"],
            deployed_at=document["deployed_at"],
        )

    async def create(self, deployment: Deployment) -> Deployment:
        await self.db.insert_one(self.COLLECTION_NAME, self._to_document(deployment))
        return deployment

    async def find_all(
        self,
        instance_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Deployment]:
        query: Dict[str, Any] = {}
        if instance_id is not None:
            query["instance_id"] = instance_id

        documents = await self.db.find_many(
            self.COLLECTION_NAME,
            query,
            sort_by="deployed_at",
            sort_direction=pymongo.DESCENDING,
            skip=skip,
            limit=limit,
        )
        return [self._to_entity(document) for document in documents]

    async def find_latest_per_instance(self) -> List[Deployment]:
        pipeline: List[Dict[str, Any]] = [
            {"$sort": {"deployed_at": pymongo.DESCENDING}},
            {"$group": {"_id": "$instance_id", "latest": {"$first": "$$ROOT"}}},
            {"$replaceRoot": {"newRoot": "$latest"}},
            {"$sort": {"instance_id": pymongo.ASCENDING}},
        ]
        documents = await self.db.aggregate(self.COLLECTION_NAME, pipeline)
        return [self._to_entity(document) for document in documents]
