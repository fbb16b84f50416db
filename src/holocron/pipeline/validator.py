"""Post-load audit: compare store counts against expected targets.

Read-only. A failed validation is reported, never repaired.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from holocron.catalog import CollectionTarget
from holocron.stores import DocumentStore, GraphStore

logger = logging.getLogger(__name__)

CANONICAL = {"canonical": True}


@dataclass
class CountCheck:
    """Counts for one collection in both stores."""

    collection: str
    label: str
    expected: int
    documents: int
    nodes: int
    canonical_documents: int
    canonical_nodes: int
    baseline: int | None = None  # known-good canonical count, if checked

    @property
    def documents_ok(self) -> bool:
        return self.documents >= self.expected

    @property
    def nodes_ok(self) -> bool:
        return self.nodes >= self.expected

    @property
    def canonical_ok(self) -> bool:
        if self.baseline is None:
            return True
        return self.canonical_documents == self.baseline and self.canonical_nodes == self.baseline

    @property
    def passed(self) -> bool:
        return self.documents_ok and self.nodes_ok and self.canonical_ok

    def problems(self) -> list[str]:
        """Human-readable discrepancies."""
        issues = []
        if not self.documents_ok:
            issues.append(f"{self.collection}: {self.documents} documents, expected at least {self.expected}")
        if not self.nodes_ok:
            issues.append(f"{self.label}: {self.nodes} nodes, expected at least {self.expected}")
        if not self.canonical_ok:
            issues.append(
                f"{self.collection}: canonical counts {self.canonical_documents} (documents) / "
                f"{self.canonical_nodes} (nodes), baseline {self.baseline}"
            )
        return issues


@dataclass
class ValidationReport:
    """All count checks for a run; truthy iff every check passed."""

    checks: list[CountCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    def __bool__(self) -> bool:
        return self.passed

    def problems(self) -> list[str]:
        return [issue for check in self.checks for issue in check.problems()]

    def get(self, collection: str) -> CountCheck | None:
        for check in self.checks:
            if check.collection == collection:
                return check
        return None


class Validator:
    """Queries both stores independently and compares against targets."""

    def __init__(self, documents: DocumentStore, graph: GraphStore):
        self.documents = documents
        self.graph = graph

    def snapshot_canonical(self, targets: Sequence[CollectionTarget]) -> dict[str, int]:
        """Capture canonical document counts before an additive load.

        The document store is the baseline; validation later requires both
        stores to report exactly this number.
        """
        return {target.collection: self.documents.count(target.collection, CANONICAL) for target in targets}

    def check(self, target: CollectionTarget, baseline: int | None = None) -> CountCheck:
        return CountCheck(
            collection=target.collection,
            label=target.label,
            expected=target.minimum,
            documents=self.documents.count(target.collection),
            nodes=self.graph.count_nodes(target.label),
            canonical_documents=self.documents.count(target.collection, CANONICAL),
            canonical_nodes=self.graph.count_nodes(target.label, CANONICAL),
            baseline=baseline,
        )

    def validate(
        self,
        targets: Sequence[CollectionTarget],
        canonical_baseline: Mapping[str, int] | None = None,
    ) -> ValidationReport:
        """Check every target.

        Args:
            targets: Minimum totals per collection
            canonical_baseline: Expected canonical count per collection, for
                loads that must leave canonical records untouched

        Returns:
            The report; ``report.passed`` is the overall result
        """
        baseline = canonical_baseline or {}
        report = ValidationReport(
            checks=[self.check(target, baseline.get(target.collection)) for target in targets]
        )

        for issue in report.problems():
            logger.warning(issue)
        return report
