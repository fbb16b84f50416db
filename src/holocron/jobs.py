"""Seeding jobs: connect, load, reconcile, validate, close.

Each job is a bounded, sequential batch. Both stores are connected and
verified before the first write, and both are closed on the way out
whether the job succeeded or not.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from holocron.catalog import Catalog
from holocron.documents import MongoDocumentStore, connect_mongo
from holocron.errors import StoreConnectionError
from holocron.graph import Neo4jGraphStore, connect_neo4j
from holocron.memory import MemoryDocumentStore, MemoryGraphStore
from holocron.pipeline import (
    LoadPipeline,
    LoadReport,
    ReconcileReport,
    RelationshipReconciler,
    ValidationReport,
    Validator,
)
from holocron.stores import DocumentStore, GraphStore

logger = logging.getLogger(__name__)


@contextmanager
def open_stores(dry_run: bool = False) -> Iterator[tuple[DocumentStore, GraphStore]]:
    """Connect both stores for the duration of a job.

    Raises:
        StoreConnectionError: If either store is unreachable; nothing has
            been written at that point
    """
    if dry_run:
        documents: DocumentStore = MemoryDocumentStore()
        graph: GraphStore = MemoryGraphStore()
    else:
        client = connect_mongo()
        logger.info("Connected to MongoDB")
        try:
            driver = connect_neo4j()
        except StoreConnectionError:
            client.close()
            raise
        logger.info("Connected to Neo4j")
        documents = MongoDocumentStore(client)
        graph = Neo4jGraphStore(driver)

    try:
        yield documents, graph
    finally:
        documents.close()
        graph.close()
        logger.info("Disconnected from document and graph stores")


@dataclass
class JobOutcome:
    """Everything a seeding job produced."""

    catalog: str
    load: LoadReport
    reconcile: ReconcileReport
    validation: ValidationReport

    @property
    def passed(self) -> bool:
        return self.validation.passed


def prepare_stores(catalog: Catalog, documents: DocumentStore, graph: GraphStore) -> None:
    """Create the natural-key unique index and constraint for each collection."""
    for spec in catalog.collections:
        documents.ensure_unique(spec.collection, spec.key)
        graph.ensure_schema(spec.label, spec.key)


def run_seed_job(
    catalog: Catalog,
    documents: DocumentStore,
    graph: GraphStore,
    verified: bool = True,
) -> JobOutcome:
    """Load a catalog into both stores, reconcile edges, and validate.

    Args:
        catalog: The records to load and their targets
        documents: Connected document store
        graph: Connected graph store
        verified: Verified flag written to every record

    Returns:
        The job outcome; ``outcome.passed`` decides the exit status
    """
    prepare_stores(catalog, documents, graph)

    validator = Validator(documents, graph)
    baseline = None
    if catalog.preserve_canonical:
        baseline = validator.snapshot_canonical(catalog.targets)
        logger.info("Canonical baseline: %s", baseline)

    pipeline = LoadPipeline(
        documents,
        graph,
        source=catalog.source,
        canonical=catalog.canonical,
        verified=verified,
    )
    load = pipeline.load_catalog(catalog)
    reconcile = RelationshipReconciler(graph).reconcile(catalog.rules, catalog.links)
    validation = validator.validate(catalog.targets, baseline)

    return JobOutcome(catalog=catalog.name, load=load, reconcile=reconcile, validation=validation)
