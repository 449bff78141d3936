from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from overseer.domain.entities.catalog import (  # noqa: E402
    Application,
    Environment,
    Instance,
)


@pytest.fixture()
def sample_application() -> Application:
    return Application(id=1, name="checkout", sort_order=0)


@pytest.fixture()
def sample_environment() -> Environment:
    return Environment(id=2, name="production", sort_order=0)


@pytest.fixture()
def sample_instance() -> Instance:
    return Instance(
        id=7, environment_id=2, application_id=1, name="prod.checkout.web.api"
    )


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.created_indexes: List[tuple[Any, ...]] = []

    def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [doc for doc in self.documents if self._matches(doc, query)]

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())


class FakeMongoDatabase:
    """In-memory stand-in for MongoDatabase."""

    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.sequences: Dict[str, int] = {}
        self.pipelines: List[Sequence[Dict[str, Any]]] = []
        self.aggregate_results: List[Dict[str, Any]] = []
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Dict[str, Any] | None:
        found = self.get_collection(collection_name).find(query)
        return dict(found[0]) if found else None

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        documents = [dict(d) for d in self.get_collection(collection_name).find(query)]
        if sort_by:
            documents.sort(key=lambda d: d.get(sort_by), reverse=sort_direction < 0)
        documents = documents[skip:]
        if limit:
            documents = documents[:limit]
        return documents

    async def aggregate(
        self, collection_name: str, pipeline: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        self.pipelines.append(pipeline)
        return list(self.aggregate_results)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        self.get_collection(collection_name).documents.append(dict(document))
        return document

    async def update_one(
        self, collection_name: str, query: Dict[str, Any], values: Dict[str, Any]
    ) -> int:
        found = self.get_collection(collection_name).find(query)
        if not found:
            return 0
        found[0].update(values)
        return 1

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], values: Dict[str, Any]
    ) -> None:
        if await self.update_one(collection_name, query, values) == 0:
            await self.insert_one(collection_name, {**query, **values})

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> None:
        collection = self.get_collection(collection_name)
        found = collection.find(query)
        if not found:
            raise Exception(f"Document not found in {collection_name}")
        collection.documents.remove(found[0])

    async def next_sequence(self, name: str) -> int:
        self.sequences[name] = self.sequences.get(name, 0) + 1
        return self.sequences[name]

    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
