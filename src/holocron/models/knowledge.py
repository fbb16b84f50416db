"""Entries written to the semantic index."""

from pydantic import BaseModel, Field


class WorldKnowledge(BaseModel):
    """A prose lore entry for similarity search."""

    title: str
    content: str
    category: str  # character, location, technology, politics
    era: str = "all_eras"
    canonicity: str = "canon"
    importance: int = Field(default=5, ge=1, le=10)
