"""Hand-authored lore catalogs."""

from typing import Callable

from .base import (
    COLLECTIONS,
    Catalog,
    CatalogFileError,
    CollectionSpec,
    CollectionTarget,
    collection_spec,
    load_catalog_file,
)
from .canon import canon_catalog
from .expanded import expanded_catalog
from .knowledge import WORLD_KNOWLEDGE
from .politics import politics_catalog
from .timeline import timeline_catalog

CATALOGS: dict[str, Callable[[], Catalog]] = {
    "canon": canon_catalog,
    "expanded": expanded_catalog,
    "timeline": timeline_catalog,
    "politics": politics_catalog,
}


def get_catalog(name: str) -> Catalog:
    """Build a named built-in catalog."""
    try:
        return CATALOGS[name]()
    except KeyError:
        raise KeyError(f"Unknown catalog {name!r} (choose from {', '.join(CATALOGS)})") from None


__all__ = [
    "COLLECTIONS",
    "CATALOGS",
    "Catalog",
    "CatalogFileError",
    "CollectionSpec",
    "CollectionTarget",
    "WORLD_KNOWLEDGE",
    "canon_catalog",
    "collection_spec",
    "expanded_catalog",
    "get_catalog",
    "load_catalog_file",
    "politics_catalog",
    "timeline_catalog",
]
