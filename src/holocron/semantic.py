"""Write-only client for the Weaviate semantic index.

Objects are created through Weaviate's REST API. Each object gets a
deterministic UUID derived from its class and title, so re-running a load
reports the existing object instead of creating a second copy.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import httpx

from .config import get_settings
from .models import WorldKnowledge
from .stores import WriteResult

logger = logging.getLogger(__name__)

KNOWLEDGE_CLASS = "WorldKnowledge"


def object_id(class_name: str, title: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"holocron:{class_name}:{title}"))


class SemanticIndexWriter:
    """Creates objects under a named Weaviate class.

    Usage:
        with SemanticIndexWriter() as index:
            index.add("WorldKnowledge", {"title": ..., "content": ...})
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize the writer.

        Args:
            base_url: Weaviate URL (default from config)
            timeout: Request timeout in seconds (default from config)
            client: Optional preconfigured httpx client
        """
        settings = get_settings()
        self.client = client or httpx.Client(
            base_url=base_url or settings.weaviate_url,
            timeout=timeout or settings.request_timeout,
        )

    def is_ready(self) -> bool:
        try:
            response = self.client.get("/v1/.well-known/ready")
        except httpx.RequestError:
            return False
        return response.status_code == 200

    def add(self, class_name: str, properties: Mapping[str, Any], key: str = "title") -> WriteResult:
        """Create one object.

        Args:
            class_name: Weaviate class, e.g. "WorldKnowledge"
            properties: Object properties
            key: Property used to derive the object id

        Returns:
            CREATED, or ALREADY_EXISTS when an object with the same id exists

        Raises:
            httpx.HTTPStatusError: On any other rejected request
        """
        payload = {
            "class": class_name,
            "id": object_id(class_name, str(properties[key])),
            "properties": dict(properties),
        }
        response = self.client.post("/v1/objects", json=payload)

        if response.status_code == 422 and "already exists" in response.text:
            return WriteResult.ALREADY_EXISTS
        response.raise_for_status()
        return WriteResult.CREATED

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "SemanticIndexWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


@dataclass
class KnowledgeResult:
    """Tallies for a semantic index load."""

    attempted: int = 0
    created: int = 0
    skipped: list[str] = field(default_factory=list)


def load_knowledge(
    entries: Iterable[WorldKnowledge],
    index: SemanticIndexWriter,
    class_name: str = KNOWLEDGE_CLASS,
) -> KnowledgeResult:
    """Write world knowledge entries in order, skipping existing ones."""
    result = KnowledgeResult()
    for entry in entries:
        result.attempted += 1
        if index.add(class_name, entry.model_dump()) is WriteResult.CREATED:
            result.created += 1
        else:
            logger.info("Skipped duplicate %s object: %s", class_name, entry.title)
            result.skipped.append(entry.title)
    return result
