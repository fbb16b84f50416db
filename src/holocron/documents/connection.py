"""MongoDB connection management."""

from pymongo import MongoClient
from pymongo.errors import ConfigurationError, ConnectionFailure, OperationFailure

from holocron.config import get_settings
from holocron.errors import StoreConnectionError


def get_client() -> MongoClient | None:
    """Get a MongoDB client instance."""
    settings = get_settings()

    try:
        return MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.connect_timeout_ms,
            tz_aware=True,
        )
    except ConfigurationError:
        return None


def check_mongo_connection() -> bool:
    """Check if MongoDB is reachable and credentials are valid."""
    client = get_client()
    if not client:
        return False

    try:
        client.admin.command("ping")
        return True
    except (ConnectionFailure, OperationFailure):
        return False
    finally:
        client.close()


def connect_mongo() -> MongoClient:
    """Open a client and ping it, raising before any write happens."""
    client = get_client()
    if not client:
        raise StoreConnectionError("MongoDB", "invalid connection URI")

    try:
        client.admin.command("ping")
    except (ConnectionFailure, OperationFailure) as e:
        client.close()
        raise StoreConnectionError("MongoDB", str(e)) from e
    return client
