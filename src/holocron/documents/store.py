"""Write lore records to MongoDB."""

from typing import Any, Mapping

from pymongo import ASCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, OperationFailure

from holocron.config import get_settings
from holocron.errors import SchemaError
from holocron.stores import WriteResult


class MongoDocumentStore:
    """Document store backed by a MongoDB database."""

    def __init__(self, client: MongoClient, database: str | None = None):
        """Initialize the document store.

        Args:
            client: An open MongoDB client (owned by the caller)
            database: Database name (from settings if not provided)
        """
        self.client = client
        self.db = client[database or get_settings().mongodb_database]

    def ensure_unique(self, collection: str, key: str) -> None:
        """Enforce natural-key uniqueness server-side."""
        try:
            self.db[collection].create_index([(key, ASCENDING)], unique=True, name=f"{key}_unique")
        except OperationFailure as e:
            # Existing duplicates block the unique index (E11000)
            raise SchemaError("MongoDB", collection, key, e) from e

    def insert(self, collection: str, document: Mapping[str, Any]) -> WriteResult:
        """Insert one record; a unique-index violation means it already exists."""
        try:
            # insert_one adds _id to the dict it is given
            self.db[collection].insert_one(dict(document))
        except DuplicateKeyError:
            return WriteResult.ALREADY_EXISTS
        return WriteResult.CREATED

    def count(self, collection: str, filters: Mapping[str, Any] | None = None) -> int:
        return self.db[collection].count_documents(dict(filters or {}))

    def natural_keys(self, collection: str, key: str) -> list[Any]:
        cursor = self.db[collection].find({}, {key: 1, "_id": 0})
        return [doc.get(key) for doc in cursor]

    def close(self) -> None:
        self.client.close()
