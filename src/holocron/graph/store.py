"""Write lore nodes and inferred relationships to Neo4j."""

from typing import Any, Mapping

from neo4j import Driver
from neo4j.exceptions import ConstraintError, Neo4jError

from holocron.errors import SchemaError
from holocron.stores import DeclaredLink, InferredLink, LabelRule, LinkCounts, WriteResult, check_identifier


def _conditions(var: str, filters: tuple[tuple[str, Any], ...]) -> list[str]:
    return [f"{var}.{key} = ${var}_{key}" for key, _ in filters]


def _filter_params(rule: InferredLink) -> dict[str, Any]:
    params = {f"s_{key}": value for key, value in rule.source_filter}
    params.update({f"t_{key}": value for key, value in rule.target_filter})
    return params


def _join_values(rule: InferredLink) -> str:
    """Cypher fragment that unwinds a scalar-or-list property into ``value`` rows."""
    prop = f"s.{rule.source_property}"
    where = " AND ".join([f"{prop} IS NOT NULL", *_conditions("s", rule.source_filter)])
    return f"""
        MATCH (s:{rule.source_label})
        WHERE {where}
        UNWIND CASE WHEN valueType({prop}) STARTS WITH 'LIST' THEN {prop} ELSE [{prop}] END AS value
    """


class Neo4jGraphStore:
    """Graph store backed by a Neo4j driver."""

    def __init__(self, driver: Driver, database: str | None = None):
        """Initialize the graph store.

        Args:
            driver: An open Neo4j driver (owned by the caller)
            database: Optional database name (server default if not provided)
        """
        self.driver = driver
        self.database = database

    def _session(self):
        if self.database:
            return self.driver.session(database=self.database)
        return self.driver.session()

    def ensure_schema(self, label: str, key: str) -> None:
        """Create a uniqueness constraint on the natural key."""
        check_identifier(label)
        check_identifier(key)
        query = (
            f"CREATE CONSTRAINT {label.lower()}_{key}_unique IF NOT EXISTS "
            f"FOR (n:{label}) REQUIRE n.{key} IS UNIQUE"
        )
        try:
            with self._session() as session:
                session.run(query).consume()
        except Neo4jError as e:
            raise SchemaError("Neo4j", label, key, e) from e

    def create_node(self, label: str, key: str, properties: Mapping[str, Any]) -> WriteResult:
        """Create a node unless one with the same natural key exists.

        Args:
            label: Node label, e.g. "Character"
            key: Natural key property, e.g. "name"
            properties: Scalar properties (the key included)

        Returns:
            CREATED, or ALREADY_EXISTS when the MERGE matched an existing node
        """
        check_identifier(label)
        check_identifier(key)

        query = f"""
        MERGE (n:{label} {{{key}: $key}})
        ON CREATE SET n += $props
        """

        try:
            with self._session() as session:
                summary = session.run(query, key=properties.get(key), props=dict(properties)).consume()
        except ConstraintError:
            return WriteResult.ALREADY_EXISTS

        if summary.counters.nodes_created == 0:
            return WriteResult.ALREADY_EXISTS
        return WriteResult.CREATED

    def merge_links(self, rule: InferredLink) -> LinkCounts:
        """Create the rule's edges with MERGE, so re-runs never duplicate them."""
        if rule.reverse:
            pattern = f"(t)-[r:{rule.relationship}]->(s)"
        else:
            pattern = f"(s)-[r:{rule.relationship}]->(t)"

        target_conditions = _conditions("t", rule.target_filter)
        target_where = f"WHERE {' AND '.join(target_conditions)}" if target_conditions else ""

        query = (
            _join_values(rule)
            + f"""
        MATCH (t:{rule.target_label} {{{rule.target_property}: value}})
        {target_where}
        MERGE {pattern}
        RETURN count(r) AS matched
        """
        )

        with self._session() as session:
            result = session.run(query, **_filter_params(rule))
            record = result.single()
            summary = result.consume()

        return LinkCounts(
            matched=record["matched"] if record else 0,
            created=summary.counters.relationships_created,
        )

    def unmatched(self, rule: InferredLink) -> list[tuple[Any, Any]]:
        """Join values that name no target node at all: (source key, value) pairs.

        The target filter is ignored here; a value naming a node that exists
        but fails the filter is not a typo.
        """
        query = (
            _join_values(rule)
            + f"""
        OPTIONAL MATCH (t:{rule.target_label} {{{rule.target_property}: value}})
        WITH s, value, t
        WHERE t IS NULL
        RETURN s.{rule.source_key} AS source, value
        ORDER BY source, value
        """
        )

        params = {f"s_{key}": value for key, value in rule.source_filter}
        with self._session() as session:
            result = session.run(query, **params)
            return [(record["source"], record["value"]) for record in result]

    def merge_declared(self, link: DeclaredLink) -> LinkCounts:
        """MERGE one catalog-declared edge; properties are set only when it is created."""
        query = f"""
        MATCH (s:{link.source_label} {{{link.source_key}: $source}})
        MATCH (t:{link.target_label} {{{link.target_key}: $target}})
        MERGE (s)-[r:{link.relationship}]->(t)
        ON CREATE SET r += $props
        RETURN count(r) AS matched
        """

        with self._session() as session:
            result = session.run(query, source=link.source, target=link.target, props=dict(link.properties))
            record = result.single()
            summary = result.consume()

        return LinkCounts(
            matched=record["matched"] if record else 0,
            created=summary.counters.relationships_created,
        )

    def add_label(self, rule: LabelRule) -> LinkCounts:
        """Attach a denormalized label to matching nodes."""
        query = f"""
        MATCH (n:{rule.label})
        WHERE n.{rule.property} = $value
        SET n:{rule.new_label}
        RETURN count(n) AS matched
        """

        with self._session() as session:
            result = session.run(query, value=rule.value)
            record = result.single()
            summary = result.consume()

        return LinkCounts(
            matched=record["matched"] if record else 0,
            created=summary.counters.labels_added,
        )

    def count_nodes(self, label: str, filters: Mapping[str, Any] | None = None) -> int:
        check_identifier(label)
        filters = filters or {}
        conditions = [f"n.{check_identifier(k)} = ${k}" for k in filters]
        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""

        query = f"MATCH (n:{label}) {where} RETURN count(n) AS count"
        with self._session() as session:
            return session.run(query, **filters).single()["count"]

    def count_relationships(self, relationship: str | None = None) -> int:
        rel = f":{check_identifier(relationship)}" if relationship else ""
        query = f"MATCH ()-[r{rel}]->() RETURN count(r) AS count"
        with self._session() as session:
            return session.run(query).single()["count"]

    def natural_keys(self, label: str, key: str) -> list[Any]:
        check_identifier(label)
        check_identifier(key)
        query = f"MATCH (n:{label}) RETURN n.{key} AS key"
        with self._session() as session:
            return [record["key"] for record in session.run(query)]

    def label_counts(self) -> list[tuple[str, int]]:
        """Node counts by primary label, largest first."""
        query = """
            MATCH (n)
            RETURN labels(n)[0] as label, count(*) as count
            ORDER BY count DESC
        """
        with self._session() as session:
            return [(record["label"] or "Unlabeled", record["count"]) for record in session.run(query)]

    def close(self) -> None:
        self.driver.close()
