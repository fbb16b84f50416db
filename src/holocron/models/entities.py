"""Entity models for the lore catalog."""

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def derive_id(name: str) -> str:
    """Derive the cross-store slug for a natural key.

    "Luke Skywalker" -> "luke_skywalker", "C-3PO" -> "c_3po"
    """
    return _NON_ALNUM.sub("_", name.lower())


class LoreRecord(BaseModel):
    """Base class for all catalog records.

    Unknown keys are kept so they reach the document store as-is.
    """

    model_config = ConfigDict(extra="allow")

    key_field: ClassVar[str] = "name"

    description: str | None = None
    era: str | None = None
    source: str | None = None
    canonical: bool | None = None

    @property
    def natural_key(self) -> Any:
        return getattr(self, self.key_field, None)

    def to_document(self) -> dict[str, Any]:
        """Flat key/value form of the record, without unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


class Character(LoreRecord):
    """A person, droid or creature."""

    name: str
    species: str | None = None
    homeworld: str | None = None  # Location name
    affiliation: str | list[str] | None = None  # Faction name(s)
    forceUser: bool | None = None
    force_sensitivity: str | None = None  # None, Low, Moderate, High, Very High
    rank: str | None = None
    wookieepedia_url: str | None = None

    @model_validator(mode="after")
    def _derive_force_user(self) -> "Character":
        if self.forceUser is None and self.force_sensitivity is not None:
            self.forceUser = self.force_sensitivity.strip().lower() not in ("", "none")
        return self

    @property
    def affiliations(self) -> list[str]:
        if self.affiliation is None:
            return []
        if isinstance(self.affiliation, str):
            return [self.affiliation]
        return list(self.affiliation)


class Location(LoreRecord):
    """A planet, moon, city or station."""

    name: str
    type: str | None = None  # Planet, Moon, City, Station
    region: str | None = None
    climate: str | None = None
    terrain: str | None = None
    force_nexus: str | None = None  # light, dark, balanced
    wookieepedia_url: str | None = None


class Faction(LoreRecord):
    """An organization, government or order."""

    name: str
    type: str | None = None  # Government, Military, Religious, Criminal, Corporate
    alignment: str | None = None  # Light, Dark, Neutral
    headquarters: str | None = None
    philosophy: str | None = None
    key_figures: list[str] = Field(default_factory=list)
    wookieepedia_url: str | None = None


class AllianceGroup(LoreRecord):
    """A coalition of factions, e.g. the Rebel Coalition."""

    name: str
    type: str | None = None  # ALLIANCE, HIERARCHY, CRIMINAL_NETWORK
    members: list[str] = Field(default_factory=list)  # Faction names
