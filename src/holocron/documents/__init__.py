"""Document database interface."""

from holocron.documents.connection import check_mongo_connection, connect_mongo, get_client
from holocron.documents.store import MongoDocumentStore

__all__ = ["get_client", "check_mongo_connection", "connect_mongo", "MongoDocumentStore"]
