"""Holocron - seed canonical Star Wars lore into MongoDB and Neo4j."""

__version__ = "0.1.0"
