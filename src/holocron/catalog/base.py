"""Catalog containers and JSON catalog loading."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from holocron.models import AllianceGroup, Character, Faction, Location, LoreRecord, TimelineEra, TimelineEvent
from holocron.stores import DeclaredLink, InferredLink, LabelRule

# JSON key -> (model, node label, natural key)
COLLECTIONS: dict[str, tuple[type[LoreRecord], str, str]] = {
    "characters": (Character, "Character", "name"),
    "locations": (Location, "Location", "name"),
    "factions": (Faction, "Faction", "name"),
    "timelineEvents": (TimelineEvent, "TimelineEvent", "title"),
    "timelineEras": (TimelineEra, "TimelineEra", "name"),
    "allianceGroups": (AllianceGroup, "AllianceGroup", "name"),
}


@dataclass(frozen=True)
class CollectionTarget:
    """Minimum count a collection must reach in both stores."""

    collection: str
    label: str
    minimum: int


@dataclass
class CollectionSpec:
    """One entity type to load: its records and where they go."""

    collection: str
    label: str
    records: Sequence[LoreRecord]
    key: str = "name"
    minimum: int | None = None  # defaults to len(records)

    @property
    def target(self) -> CollectionTarget:
        minimum = len(self.records) if self.minimum is None else self.minimum
        return CollectionTarget(self.collection, self.label, minimum)


@dataclass
class Catalog:
    """An ordered set of collections loaded by a single seeding run."""

    name: str
    source: str  # provenance tag written to every record
    canonical: bool  # default canonical flag when a record does not set one
    collections: list[CollectionSpec]
    rules: list[InferredLink | LabelRule] = field(default_factory=list)
    links: list[DeclaredLink] = field(default_factory=list)  # edges no property implies
    preserve_canonical: bool = False  # additive load: canonical counts must not move

    @property
    def targets(self) -> list[CollectionTarget]:
        return [spec.target for spec in self.collections]

    @property
    def total_records(self) -> int:
        return sum(len(spec.records) for spec in self.collections)


def collection_spec(collection: str, records: Sequence[LoreRecord], minimum: int | None = None) -> CollectionSpec:
    """Build a CollectionSpec for one of the known collections."""
    _, label, key = COLLECTIONS[collection]
    return CollectionSpec(collection, label, list(records), key=key, minimum=minimum)


class CatalogFileError(ValueError):
    """A catalog file could not be parsed into lore records."""


def _parse_links(path: Path, entries: Any) -> list[DeclaredLink]:
    if not isinstance(entries, list):
        raise CatalogFileError(f"{path}: \"links\" must be a list")
    links = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise CatalogFileError(f"{path}: invalid link {entry!r}")
        try:
            links.append(DeclaredLink(**entry))
        except (TypeError, ValueError) as e:
            raise CatalogFileError(f"{path}: invalid link {entry!r}: {e}") from e
    return links


def load_catalog_file(
    path: Path,
    rules: list[InferredLink | LabelRule] | None = None,
) -> Catalog:
    """Load a JSON catalog.

    The file holds one array per collection, keyed like the document
    collections ("characters", "timelineEvents", ...), plus optional
    "name", "source", "canonical", "minimums", "preserve_canonical" and
    "links" (declared edges) entries.

    Args:
        path: Path to the JSON file
        rules: Reconcile rules to attach (none if not provided)

    Returns:
        The catalog, collections in file order

    Raises:
        CatalogFileError: If the file is not valid JSON or does not have
            the expected shape
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogFileError(f"{path}: not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogFileError(f"{path}: expected a JSON object")

    minimums = data.get("minimums", {})
    if not isinstance(minimums, dict):
        raise CatalogFileError(f"{path}: \"minimums\" must be an object of collection counts")

    specs = []
    for collection, records in data.items():
        if collection not in COLLECTIONS:
            continue
        if not isinstance(records, list):
            raise CatalogFileError(f"{path}: {collection!r} must be a list of records")
        model = COLLECTIONS[collection][0]
        try:
            parsed = [model.model_validate(record) for record in records]
        except ValidationError as e:
            raise CatalogFileError(f"{path}: invalid {collection} record: {e}") from e
        minimum = minimums.get(collection)
        if minimum is not None and (isinstance(minimum, bool) or not isinstance(minimum, int)):
            raise CatalogFileError(f"{path}: minimum for {collection!r} must be an integer")
        specs.append(collection_spec(collection, parsed, minimum=minimum))

    if not specs:
        raise CatalogFileError(f"{path}: no known collections ({', '.join(COLLECTIONS)})")

    return Catalog(
        name=data.get("name", path.stem),
        source=data.get("source", path.stem),
        canonical=bool(data.get("canonical", False)),
        collections=specs,
        rules=list(rules or []),
        links=_parse_links(path, data.get("links", [])),
        preserve_canonical=bool(data.get("preserve_canonical", False)),
    )
