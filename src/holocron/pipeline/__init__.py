"""Load, reconcile and validate pipeline."""

from .loader import CollectionResult, LoadPipeline, LoadReport
from .reconciler import ReconcileReport, RelationshipReconciler, StepResult, UnmatchedValue
from .sweep import AuditFinding, ConsistencySweep, KeyDiff
from .validator import CountCheck, ValidationReport, Validator

__all__ = [
    "CollectionResult",
    "LoadPipeline",
    "LoadReport",
    "ReconcileReport",
    "RelationshipReconciler",
    "StepResult",
    "UnmatchedValue",
    "AuditFinding",
    "ConsistencySweep",
    "KeyDiff",
    "CountCheck",
    "ValidationReport",
    "Validator",
]
