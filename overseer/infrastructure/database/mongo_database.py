"""
MongoDB Database - Infrastructure Layer

This module provides the MongoDB client backing the target registry.
It handles connection, collections, integer id sequences and basic CRUD
operations.
"""

from typing import Any, Dict, List, Optional

import pymongo.errors
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from overseer.shared import get_logger

logger = get_logger(__name__)

COUNTERS_COLLECTION = "counters"

# collection -> [(index name, keys)]
INDEXES: Dict[str, List[tuple]] = {
    "applications": [("sort_order_idx", [("sort_order", 1)])],
    "environments": [("sort_order_idx", [("sort_order", 1)])],
    "instances": [
        ("name_idx", [("name", 1)]),
        (
            "environment_application_idx",
            [("environment_id", 1), ("application_id", 1)],
        ),
    ],
    "deployments": [
        ("instance_deployed_at_idx", [("instance_id", 1), ("deployed_at", -1)]),
    ],
    "stream_cursors": [("subscription_idx", [("subscription", 1)])],
}


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """Get a collection from the database."""
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Returns:
            The document if found, None otherwise
        """
        return self.db[collection_name].find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: Sort direction (1 for ascending, -1 for descending)
            skip: Number of documents to skip
            limit: Maximum number of documents to return (0 for no limit)

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query)

        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)

        cursor = cursor.skip(skip).limit(limit)

        return list(cursor)

    async def aggregate(
        self, collection_name: str, pipeline: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """Run an aggregation pipeline and return every resulting document."""
        return list(self.db[collection_name].aggregate(pipeline))

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Raises:
            Exception: If the insert is not acknowledged
        """
        result = self.db[collection_name].insert_one(document)
        if not result.acknowledged:
            raise Exception(f"Failed to insert document in {collection_name}")
        return document

    async def update_one(
        self, collection_name: str, query: Dict[str, Any], values: Dict[str, Any]
    ) -> int:
        """
        Set fields on the first document matching ``query``.

        Returns:
            The number of matched documents (0 or 1)
        """
        result = self.db[collection_name].update_one(query, {"$set": values})
        return result.matched_count

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], values: Dict[str, Any]
    ) -> None:
        """Set fields on the document matching ``query``, creating it if absent."""
        self.db[collection_name].update_one(query, {"$set": values}, upsert=True)

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> None:
        """
        Delete a document from a collection.

        Raises:
            Exception: If the document does not exist or the delete fails
        """
        result = self.db[collection_name].delete_one(query)
        if result.deleted_count == 0:
            raise Exception(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise Exception(f"Failed to delete document in {collection_name}")

    async def next_sequence(self, name: str) -> int:
        """
        Atomically allocate the next integer ID of a named sequence.

        IDs start at 1 and are never reused.
        """
        counter = self.db[COUNTERS_COLLECTION].find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """
        Create all necessary indexes for the application.
        This is an async method to be called during application startup.
        """
        for collection_name, indexes in INDEXES.items():
            for index_name, keys in indexes:
                try:
                    self.db[collection_name].create_index(
                        keys, name=index_name, background=True
                    )
                except pymongo.errors.OperationFailure as e:
                    logger.warning(
                        "mongo.index.create_failed",
                        collection=collection_name,
                        index=index_name,
                        error=str(e),
                    )
