"""Storage collaborator interfaces.

The load pipeline, reconciler and validator only talk to these protocols.
Each backend translates its own duplicate-key convention into
``WriteResult.ALREADY_EXISTS`` so callers never inspect store error codes.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Protocol

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def check_identifier(name: str) -> str:
    """Reject labels, property names and types that cannot be interpolated into Cypher."""
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid identifier: {name!r}")
    return name


class WriteResult(Enum):
    """Outcome of a single-record write."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class InferredLink:
    """An edge derived from exact equality of two node properties.

    Not a stored foreign key: the edge exists iff some value of
    ``source.source_property`` (a string, or any element of a list) equals
    ``target.target_property``. Case-sensitive, no fuzzy matching.
    """

    name: str
    source_label: str
    source_property: str
    target_label: str
    relationship: str
    target_property: str = "name"
    source_key: str = "name"
    reverse: bool = False  # edge points target -> source
    source_filter: tuple[tuple[str, Any], ...] = ()  # (property, value) pairs the source must match
    target_filter: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        for value in (
            self.source_label,
            self.source_property,
            self.target_label,
            self.relationship,
            self.target_property,
            self.source_key,
            *(key for key, _ in self.source_filter),
            *(key for key, _ in self.target_filter),
        ):
            check_identifier(value)


@dataclass(frozen=True)
class DeclaredLink:
    """An edge stated outright by a catalog, between two nodes named by natural key.

    Used for facts no property holds, such as family ties or the standing
    between two factions.
    """

    relationship: str
    source_label: str
    source: Any
    target_label: str
    target: Any
    properties: dict[str, Any] = field(default_factory=dict)
    source_key: str = "name"
    target_key: str = "name"

    def __post_init__(self) -> None:
        for value in (self.relationship, self.source_label, self.target_label, self.source_key, self.target_key):
            check_identifier(value)


@dataclass(frozen=True)
class LabelRule:
    """Add ``new_label`` to every ``label`` node whose ``property`` equals ``value``."""

    name: str
    label: str
    property: str
    value: Any
    new_label: str

    def __post_init__(self) -> None:
        for value in (self.label, self.property, self.new_label):
            check_identifier(value)


@dataclass
class LinkCounts:
    """What a single reconcile statement touched."""

    matched: int = 0
    created: int = 0


class DocumentStore(Protocol):
    """A collection-oriented store holding flat records."""

    def ensure_unique(self, collection: str, key: str) -> None: ...

    def insert(self, collection: str, document: Mapping[str, Any]) -> WriteResult: ...

    def count(self, collection: str, filters: Mapping[str, Any] | None = None) -> int: ...

    def natural_keys(self, collection: str, key: str) -> list[Any]: ...

    def close(self) -> None: ...


class GraphStore(Protocol):
    """A labeled property graph."""

    def ensure_schema(self, label: str, key: str) -> None: ...

    def create_node(self, label: str, key: str, properties: Mapping[str, Any]) -> WriteResult: ...

    def merge_links(self, rule: InferredLink) -> LinkCounts: ...

    def merge_declared(self, link: DeclaredLink) -> LinkCounts: ...

    def unmatched(self, rule: InferredLink) -> list[tuple[Any, Any]]: ...

    def add_label(self, rule: LabelRule) -> LinkCounts: ...

    def count_nodes(self, label: str, filters: Mapping[str, Any] | None = None) -> int: ...

    def count_relationships(self, relationship: str | None = None) -> int: ...

    def natural_keys(self, label: str, key: str) -> list[Any]: ...

    def close(self) -> None: ...


def graph_safe(properties: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only values a graph node can hold: scalars and lists of scalars."""
    scalar = (str, int, float, bool)
    safe: dict[str, Any] = {}
    for key, value in properties.items():
        if value is None or not _IDENTIFIER.match(key):
            continue
        if isinstance(value, scalar) or hasattr(value, "isoformat"):
            safe[key] = value
        elif isinstance(value, (list, tuple)):
            # Neo4j lists must be homogeneous
            if all(isinstance(v, scalar) for v in value) and len({type(v) for v in value}) <= 1:
                safe[key] = list(value)
    return safe


def as_values(value: Any) -> Iterable[Any]:
    """A property read as a join value: lists join element-wise."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return value
    return (value,)
