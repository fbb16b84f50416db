"""Cross-store consistency sweep and duplicate audit.

Maintenance operations, separate from loading. They only read, so the
two-store reconciliation gap left by an interrupted load can be measured
here and closed by re-running the load.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Sequence

from holocron.catalog import CollectionSpec
from holocron.stores import DocumentStore, GraphStore


@dataclass
class KeyDiff:
    """Natural keys present in one store but not the other."""

    collection: str
    label: str
    missing_in_graph: list[Any] = field(default_factory=list)
    missing_in_documents: list[Any] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        return not self.missing_in_graph and not self.missing_in_documents


@dataclass
class AuditFinding:
    """Data quality problems in one store for one entity type."""

    store: str  # "documents" or "graph"
    name: str  # collection or label
    total: int = 0
    duplicates: dict[Any, int] = field(default_factory=dict)  # key -> copies
    empty_keys: int = 0

    @property
    def healthy(self) -> bool:
        return not self.duplicates and not self.empty_keys


def _audit(store: str, name: str, keys: list[Any]) -> AuditFinding:
    present = [k for k in keys if k not in (None, "")]
    counts = Counter(present)
    return AuditFinding(
        store=store,
        name=name,
        total=len(keys),
        duplicates={k: n for k, n in counts.items() if n > 1},
        empty_keys=len(keys) - len(present),
    )


class ConsistencySweep:
    """Compares the document store and graph store by natural key."""

    def __init__(self, documents: DocumentStore, graph: GraphStore):
        self.documents = documents
        self.graph = graph

    def compare(self, collection: str, label: str, key: str = "name") -> KeyDiff:
        document_keys = {k for k in self.documents.natural_keys(collection, key) if k is not None}
        node_keys = {k for k in self.graph.natural_keys(label, key) if k is not None}
        return KeyDiff(
            collection=collection,
            label=label,
            missing_in_graph=sorted(document_keys - node_keys, key=str),
            missing_in_documents=sorted(node_keys - document_keys, key=str),
        )

    def audit(self, collection: str, label: str, key: str = "name") -> list[AuditFinding]:
        """Duplicate and empty natural keys in each store."""
        return [
            _audit("documents", collection, self.documents.natural_keys(collection, key)),
            _audit("graph", label, self.graph.natural_keys(label, key)),
        ]

    def sweep(self, specs: Sequence[CollectionSpec]) -> tuple[list[KeyDiff], list[AuditFinding]]:
        diffs = [self.compare(spec.collection, spec.label, spec.key) for spec in specs]
        findings = [f for spec in specs for f in self.audit(spec.collection, spec.label, spec.key)]
        return diffs, findings
