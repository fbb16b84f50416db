"""Load catalog records into the document store and the graph store.

Records are written one at a time, in catalog order. Each record is
independent: an "already exists" result in either store is logged and
skipped, while any other store error propagates and aborts the batch.
There is no transaction spanning the two stores; a crash between the two
writes leaves the record in the document store only, which the next run
repairs because the node write is attempted even for duplicate documents.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping

from holocron.catalog import Catalog
from holocron.models import LoreRecord, derive_id
from holocron.stores import DocumentStore, GraphStore, WriteResult, graph_safe

logger = logging.getLogger(__name__)


@dataclass
class CollectionResult:
    """Per-collection tallies for one load run."""

    collection: str
    label: str
    attempted: int = 0
    loaded: int = 0  # created in both stores
    documents_created: int = 0
    documents_skipped: int = 0
    nodes_created: int = 0
    nodes_skipped: int = 0
    skipped_keys: list[Any] = field(default_factory=list)


@dataclass
class LoadReport:
    """Results for every collection in a catalog."""

    catalog: str
    collections: list[CollectionResult] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return sum(c.loaded for c in self.collections)

    @property
    def attempted(self) -> int:
        return sum(c.attempted for c in self.collections)

    def get(self, collection: str) -> CollectionResult | None:
        for result in self.collections:
            if result.collection == collection:
                return result
        return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LoadPipeline:
    """Writes lore records to both stores with per-record independence."""

    def __init__(
        self,
        documents: DocumentStore,
        graph: GraphStore,
        source: str = "catalog",
        canonical: bool = True,
        verified: bool = True,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize the pipeline.

        Args:
            documents: Document store collaborator
            graph: Graph store collaborator
            source: Provenance tag for records that do not carry one
            canonical: Canonical flag for records that do not carry one
            verified: Verified flag written to every record
            clock: Timestamp source for createdAt/updatedAt
        """
        self.documents = documents
        self.graph = graph
        self.source = source
        self.canonical = canonical
        self.verified = verified
        self.clock = clock

    def prepare(self, record: LoreRecord | Mapping[str, Any], key: str = "name") -> dict[str, Any]:
        """Attach load metadata to a record.

        The derived id is only set when the natural key is a string; a
        missing key is left for the stores to reject.
        """
        if isinstance(record, LoreRecord):
            document = record.to_document()
        else:
            document = dict(record)

        natural_key = document.get(key)
        if isinstance(natural_key, str):
            document["id"] = derive_id(natural_key)

        now = self.clock()
        document["createdAt"] = now
        document["updatedAt"] = now
        document.setdefault("canonical", self.canonical)
        document.setdefault("source", self.source)
        document["verified"] = self.verified
        return document

    def load_record(
        self,
        record: LoreRecord | Mapping[str, Any],
        collection: str,
        label: str,
        key: str = "name",
    ) -> tuple[WriteResult, WriteResult]:
        """Write one record to both stores.

        Returns:
            (document result, node result)
        """
        document = self.prepare(record, key)
        natural_key = document.get(key)

        document_result = self.documents.insert(collection, document)
        if document_result is WriteResult.ALREADY_EXISTS:
            logger.info("Skipped duplicate %s document: %s", collection, natural_key)

        node_result = self.graph.create_node(label, key, graph_safe(document))
        if node_result is WriteResult.ALREADY_EXISTS:
            logger.info("Skipped duplicate %s node: %s", label, natural_key)

        return document_result, node_result

    def load_collection(
        self,
        records: Iterable[LoreRecord | Mapping[str, Any]],
        collection: str,
        label: str,
        key: str = "name",
    ) -> CollectionResult:
        """Load one entity type, strictly in the given order.

        Args:
            records: Records of a single type
            collection: Document collection name, e.g. "characters"
            label: Graph node label, e.g. "Character"
            key: Natural key field ("name", or "title" for events)

        Returns:
            Tallies for the collection
        """
        records = list(records)
        result = CollectionResult(collection=collection, label=label)
        canonical = "canonical" if self.canonical else "supplementary"
        logger.info("Adding %d %s %s...", len(records), canonical, collection)

        for record in records:
            result.attempted += 1
            document_result, node_result = self.load_record(record, collection, label, key)

            if document_result is WriteResult.CREATED:
                result.documents_created += 1
            else:
                result.documents_skipped += 1

            if node_result is WriteResult.CREATED:
                result.nodes_created += 1
            else:
                result.nodes_skipped += 1

            if document_result is WriteResult.CREATED and node_result is WriteResult.CREATED:
                result.loaded += 1
            else:
                natural_key = record.natural_key if isinstance(record, LoreRecord) else record.get(key)
                result.skipped_keys.append(natural_key)

        logger.info("Loaded %d/%d %s", result.loaded, result.attempted, collection)
        return result

    def load_catalog(self, catalog: Catalog) -> LoadReport:
        """Load every collection of a catalog, in catalog order."""
        report = LoadReport(catalog=catalog.name)
        for spec in catalog.collections:
            report.collections.append(
                self.load_collection(spec.records, spec.collection, spec.label, spec.key)
            )
        return report
