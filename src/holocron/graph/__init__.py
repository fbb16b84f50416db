"""Graph database interface."""

from holocron.graph.connection import check_neo4j_connection, connect_neo4j, get_driver
from holocron.graph.store import Neo4jGraphStore

__all__ = ["get_driver", "check_neo4j_connection", "connect_neo4j", "Neo4jGraphStore"]
