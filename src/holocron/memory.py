"""In-memory stores with the same semantics as the MongoDB and Neo4j backends.

Used for dry runs and tests. The graph is a networkx MultiDiGraph whose
nodes carry a label set and a property dict; edges are keyed by
relationship type, so MERGE means "add unless that key already exists".
"""

import copy
from collections import Counter, defaultdict
from typing import Any, Mapping

import networkx as nx

from holocron.errors import SchemaError
from holocron.stores import DeclaredLink, InferredLink, LabelRule, LinkCounts, WriteResult, as_values


def _matches(properties: Mapping[str, Any], filters: Mapping[str, Any] | None) -> bool:
    return all(properties.get(k) == v for k, v in (filters or {}).items())


def _duplicate_keys(values: list[Any]) -> list[Any]:
    return [v for v, n in Counter(v for v in values if v is not None).items() if n > 1]


class MemoryDocumentStore:
    """Collections of dicts with optional unique indexes."""

    def __init__(self) -> None:
        self.collections: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self._unique: dict[str, set[str]] = defaultdict(set)

    def ensure_unique(self, collection: str, key: str) -> None:
        duplicates = _duplicate_keys(self.natural_keys(collection, key))
        if duplicates:
            raise SchemaError("memory", collection, key, ValueError(f"duplicate keys {duplicates!r}"))
        self._unique[collection].add(key)

    def insert(self, collection: str, document: Mapping[str, Any]) -> WriteResult:
        docs = self.collections[collection]
        for key in self._unique[collection]:
            if any(existing.get(key) == document.get(key) for existing in docs):
                return WriteResult.ALREADY_EXISTS
        docs.append(copy.deepcopy(dict(document)))
        return WriteResult.CREATED

    def count(self, collection: str, filters: Mapping[str, Any] | None = None) -> int:
        return sum(1 for doc in self.collections[collection] if _matches(doc, filters))

    def natural_keys(self, collection: str, key: str) -> list[Any]:
        return [doc.get(key) for doc in self.collections[collection]]

    def close(self) -> None:
        pass


class MemoryGraphStore:
    """A labeled property graph held in networkx."""

    def __init__(self) -> None:
        self.graph = nx.MultiDiGraph()
        self._next_id = 0
        self._unique: set[tuple[str, str]] = set()

    def _nodes(self, label: str, filters: Mapping[str, Any] | None = None):
        for node_id, data in self.graph.nodes(data=True):
            if label in data["labels"] and _matches(data["properties"], filters):
                yield node_id, data["properties"]

    def _find(self, label: str, key: str, value: Any) -> int | None:
        for node_id, props in self._nodes(label):
            if props.get(key) == value:
                return node_id
        return None

    def ensure_schema(self, label: str, key: str) -> None:
        duplicates = _duplicate_keys(self.natural_keys(label, key))
        if duplicates:
            raise SchemaError("memory", label, key, ValueError(f"duplicate keys {duplicates!r}"))
        self._unique.add((label, key))

    def create_node(self, label: str, key: str, properties: Mapping[str, Any]) -> WriteResult:
        value = properties.get(key)
        if value is None:
            raise ValueError(f"Cannot merge {label} node using null property value for {key!r}")

        if self._find(label, key, value) is not None:
            return WriteResult.ALREADY_EXISTS

        self._next_id += 1
        self.graph.add_node(self._next_id, labels={label}, properties=dict(properties))
        return WriteResult.CREATED

    def _pairs(self, rule: InferredLink, target_filter: Mapping[str, Any] | None = None):
        """(source, target) node pairs joined by exact equality."""
        targets: dict[Any, list[int]] = defaultdict(list)
        for node_id, props in self._nodes(rule.target_label, target_filter):
            if props.get(rule.target_property) is not None:
                targets[props[rule.target_property]].append(node_id)

        for source_id, props in list(self._nodes(rule.source_label, dict(rule.source_filter))):
            for value in as_values(props.get(rule.source_property)):
                yield source_id, props, value, targets.get(value, [])

    def _merge_edge(self, u: int, v: int, relationship: str, properties: Mapping[str, Any] | None = None) -> bool:
        if self.graph.has_edge(u, v, key=relationship):
            return False
        self.graph.add_edge(u, v, key=relationship, **dict(properties or {}))
        return True

    def merge_links(self, rule: InferredLink) -> LinkCounts:
        counts = LinkCounts()
        for source_id, _, _, target_ids in self._pairs(rule, dict(rule.target_filter)):
            for target_id in target_ids:
                u, v = (target_id, source_id) if rule.reverse else (source_id, target_id)
                counts.matched += 1
                if self._merge_edge(u, v, rule.relationship):
                    counts.created += 1
        return counts

    def unmatched(self, rule: InferredLink) -> list[tuple[Any, Any]]:
        missing = [
            (props.get(rule.source_key), value)
            for _, props, value, target_ids in self._pairs(rule)
            if not target_ids
        ]
        return sorted(missing, key=lambda pair: (str(pair[0]), str(pair[1])))

    def merge_declared(self, link: DeclaredLink) -> LinkCounts:
        source_id = self._find(link.source_label, link.source_key, link.source)
        target_id = self._find(link.target_label, link.target_key, link.target)
        if source_id is None or target_id is None:
            return LinkCounts()
        created = self._merge_edge(source_id, target_id, link.relationship, link.properties)
        return LinkCounts(matched=1, created=int(created))

    def add_label(self, rule: LabelRule) -> LinkCounts:
        counts = LinkCounts()
        for node_id, props in list(self._nodes(rule.label)):
            if props.get(rule.property) == rule.value:
                counts.matched += 1
                labels = self.graph.nodes[node_id]["labels"]
                if rule.new_label not in labels:
                    labels.add(rule.new_label)
                    counts.created += 1
        return counts

    def count_nodes(self, label: str, filters: Mapping[str, Any] | None = None) -> int:
        return sum(1 for _ in self._nodes(label, filters))

    def count_relationships(self, relationship: str | None = None) -> int:
        if relationship is None:
            return self.graph.number_of_edges()
        return sum(1 for _, _, key in self.graph.edges(keys=True) if key == relationship)

    def edge_properties(self, source: tuple[str, Any], target: tuple[str, Any], relationship: str) -> dict[str, Any]:
        """Properties of the edge between two (label, name) nodes (empty if absent)."""
        u = self._find(source[0], "name", source[1])
        v = self._find(target[0], "name", target[1])
        if u is None or v is None or not self.graph.has_edge(u, v, key=relationship):
            return {}
        return dict(self.graph.edges[u, v, relationship])

    def natural_keys(self, label: str, key: str) -> list[Any]:
        return [props.get(key) for _, props in self._nodes(label)]

    def labels_of(self, label: str, key: str, value: Any) -> set[str]:
        """Labels on the node with the given natural key (empty if absent)."""
        node_id = self._find(label, key, value)
        if node_id is None:
            return set()
        return set(self.graph.nodes[node_id]["labels"])

    def close(self) -> None:
        pass
