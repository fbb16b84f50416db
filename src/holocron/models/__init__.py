"""Data models for lore records."""

from holocron.models.entities import AllianceGroup, Character, Faction, Location, LoreRecord, derive_id
from holocron.models.knowledge import WorldKnowledge
from holocron.models.timeline import EventCategory, Significance, TimelineEra, TimelineEvent

__all__ = [
    "AllianceGroup",
    "Character",
    "Faction",
    "Location",
    "LoreRecord",
    "derive_id",
    "WorldKnowledge",
    "EventCategory",
    "Significance",
    "TimelineEra",
    "TimelineEvent",
]
