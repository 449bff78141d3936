"""
Database package - Infrastructure Layer

This package contains the MongoDB connection used by the target registry,
the catalog repositories and the event stream cursor.
"""

from overseer.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
