"""Derive graph edges and labels from already-loaded node properties.

Only the graph store is touched. Every statement is idempotent (edges are
MERGEd, labels are SET), so the reconciler can be re-run after any load.
Values with no matching node are a silent no-op for the graph but are
reported, with a near-miss suggestion, so that typos and parenthetical
variants ("Tatooine (assembled)") stay visible.
"""

import logging
from dataclasses import dataclass, field
from itertools import groupby
from typing import Any, Iterable, Sequence

from rapidfuzz import fuzz, process

from holocron.errors import ReconcileError
from holocron.rules import BORN_ON, FORCE_USER, MEMBER_OF, OCCURRED_IN, PARTICIPATED_IN, TOOK_PLACE_AT
from holocron.stores import DeclaredLink, GraphStore, InferredLink, LabelRule

logger = logging.getLogger(__name__)

SUGGESTION_CUTOFF = 80  # rapidfuzz WRatio score


@dataclass
class UnmatchedValue:
    """A join value that names no existing node."""

    source: Any  # natural key of the source node
    value: Any
    suggestion: str | None = None


@dataclass
class StepResult:
    """Outcome of one reconcile statement."""

    name: str
    relationship: str  # edge type, or the label added
    matched: int = 0
    created: int = 0
    unmatched: list[UnmatchedValue] = field(default_factory=list)
    error: ReconcileError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ReconcileReport:
    """Results of a reconcile pass."""

    steps: list[StepResult] = field(default_factory=list)

    @property
    def failed(self) -> list[StepResult]:
        return [step for step in self.steps if not step.ok]

    @property
    def created(self) -> int:
        return sum(step.created for step in self.steps)

    def get(self, name: str) -> StepResult | None:
        for step in self.steps:
            if step.name == name:
                return step
        return None


def suggest(value: Any, candidates: Iterable[Any]) -> str | None:
    """Closest existing name for an unmatched value (report only)."""
    if not isinstance(value, str):
        return None
    names = [c for c in candidates if isinstance(c, str)]
    if not names:
        return None
    result = process.extractOne(value, names, scorer=fuzz.WRatio, score_cutoff=SUGGESTION_CUTOFF)
    return result[0] if result else None


class RelationshipReconciler:
    """Runs inferred-link and label rules against a graph store."""

    def __init__(self, graph: GraphStore, report_unmatched: bool = True):
        """Initialize the reconciler.

        Args:
            graph: Graph store collaborator
            report_unmatched: Also query and report values with no target node
        """
        self.graph = graph
        self.report_unmatched = report_unmatched

    def link(self, rule: InferredLink) -> StepResult:
        """MERGE the edges of one inferred link."""
        step = StepResult(name=rule.name, relationship=rule.relationship)
        try:
            counts = self.graph.merge_links(rule)
            step.matched = counts.matched
            step.created = counts.created

            if self.report_unmatched:
                missing = self.graph.unmatched(rule)
                if missing:
                    names = self.graph.natural_keys(rule.target_label, rule.target_property)
                    step.unmatched = [
                        UnmatchedValue(source, value, suggest(value, names)) for source, value in missing
                    ]
        except Exception as e:
            step.error = ReconcileError(rule.name, e)
            logger.exception("Reconcile step %s failed", rule.name)
            return step

        logger.info(
            "%s: %d matched, %d new %s edges, %d unmatched",
            rule.name,
            step.matched,
            step.created,
            rule.relationship,
            len(step.unmatched),
        )
        return step

    def tag(self, rule: LabelRule) -> StepResult:
        """Attach a derived label."""
        step = StepResult(name=rule.name, relationship=rule.new_label)
        try:
            counts = self.graph.add_label(rule)
        except Exception as e:
            step.error = ReconcileError(rule.name, e)
            logger.exception("Reconcile step %s failed", rule.name)
            return step

        step.matched = counts.matched
        step.created = counts.created
        logger.info("%s: %d tagged %s (%d new)", rule.name, step.matched, rule.new_label, step.created)
        return step

    def connect(self, links: Sequence[DeclaredLink], name: str | None = None) -> StepResult:
        """MERGE catalog-declared edges of a single relationship type.

        A link whose endpoints are not both loaded creates nothing and is
        reported as unmatched.
        """
        relationship = links[0].relationship if links else ""
        name = name or f"declared_{relationship.lower()}"
        step = StepResult(name=name, relationship=relationship)
        try:
            for link in links:
                counts = self.graph.merge_declared(link)
                step.matched += counts.matched
                step.created += counts.created
                if counts.matched == 0:
                    step.unmatched.append(UnmatchedValue(link.source, link.target))
        except Exception as e:
            step.error = ReconcileError(name, e)
            logger.exception("Reconcile step %s failed", name)
            return step

        logger.info(
            "%s: %d matched, %d new %s edges, %d unmatched",
            name,
            step.matched,
            step.created,
            relationship,
            len(step.unmatched),
        )
        return step

    def apply(self, rule: InferredLink | LabelRule) -> StepResult:
        if isinstance(rule, LabelRule):
            return self.tag(rule)
        return self.link(rule)

    def reconcile(
        self,
        rules: Iterable[InferredLink | LabelRule],
        links: Iterable[DeclaredLink] = (),
    ) -> ReconcileReport:
        """Run each rule, then each declared relationship type, independently.

        One failure never blocks the rest.
        """
        report = ReconcileReport()
        for rule in rules:
            report.steps.append(self.apply(rule))

        by_type = sorted(links, key=lambda link: link.relationship)
        for _, group in groupby(by_type, key=lambda link: link.relationship):
            report.steps.append(self.connect(list(group)))
        return report

    def link_birthworld(self) -> StepResult:
        """Character.homeworld == Location.name -> BORN_ON."""
        return self.link(BORN_ON)

    def link_affiliation(self) -> StepResult:
        """Character.affiliation (or any element of it) == Faction.name -> MEMBER_OF."""
        return self.link(MEMBER_OF)

    def tag_force_users(self) -> StepResult:
        """Characters with forceUser = true get the ForceUser label."""
        return self.tag(FORCE_USER)

    def link_event_eras(self) -> StepResult:
        return self.link(OCCURRED_IN)

    def link_event_locations(self) -> StepResult:
        return self.link(TOOK_PLACE_AT)

    def link_event_participants(self) -> StepResult:
        return self.link(PARTICIPATED_IN)
