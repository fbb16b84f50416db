"""Timeline models: dated events grouped into eras."""

from enum import Enum

from pydantic import Field, model_validator

from .entities import LoreRecord


class EventCategory(str, Enum):
    """What kind of event this was."""

    POLITICAL = "political"
    MILITARY = "military"
    JEDI = "jedi"
    SITH = "sith"
    TECHNOLOGY = "technology"
    CULTURAL = "cultural"
    OTHER = "other"


class Significance(str, Enum):
    """How much an event or era shaped the galaxy."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TimelineEvent(LoreRecord):
    """A single dated occurrence.

    dateNumeric uses the Battle of Yavin as zero: BBY is negative, ABY positive.
    """

    key_field = "title"

    title: str
    date: str | None = None  # display string, e.g. "19 BBY"
    dateNumeric: int | None = None
    category: EventCategory = EventCategory.OTHER
    significance: Significance = Significance.MEDIUM
    participants: list[str] = Field(default_factory=list)  # Character names
    location: str | None = None  # Location name
    consequences: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    isCanonical: bool = True


class TimelineEra(LoreRecord):
    """A named span of galactic history."""

    name: str
    timeframe: str | None = None
    startDate: int
    endDate: int
    characteristics: list[str] = Field(default_factory=list)
    majorEvents: list[str] = Field(default_factory=list)
    keyFigures: list[str] = Field(default_factory=list)
    significance: Significance = Significance.MEDIUM
    color: str | None = None

    @model_validator(mode="after")
    def _check_span(self) -> "TimelineEra":
        if self.startDate > self.endDate:
            raise ValueError(f"Era {self.name!r} starts after it ends")
        return self

    def contains(self, date_numeric: int) -> bool:
        return self.startDate <= date_numeric <= self.endDate
