"""Neo4j connection management."""

from neo4j import Driver, GraphDatabase
from neo4j.exceptions import AuthError, ServiceUnavailable

from holocron.config import get_settings
from holocron.errors import StoreConnectionError


def get_driver() -> Driver | None:
    """Get a Neo4j driver instance."""
    settings = get_settings()

    try:
        driver = GraphDatabase.driver(
            settings.neo4j_uri,
            auth=(settings.neo4j_user, settings.neo4j_password),
        )
        return driver
    except ValueError:
        # Malformed URI
        return None


def check_neo4j_connection() -> bool:
    """Check if Neo4j is reachable and credentials are valid."""
    driver = get_driver()
    if not driver:
        return False

    try:
        driver.verify_connectivity()
        return True
    except (ServiceUnavailable, AuthError):
        return False
    finally:
        driver.close()


def connect_neo4j() -> Driver:
    """Open a driver and verify it, raising before any write happens."""
    driver = get_driver()
    if not driver:
        raise StoreConnectionError("Neo4j", "invalid connection URI")

    try:
        driver.verify_connectivity()
    except (ServiceUnavailable, AuthError) as e:
        driver.close()
        raise StoreConnectionError("Neo4j", str(e)) from e
    return driver
