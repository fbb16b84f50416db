"""Galactic politics: alliance groups and the faction relationship matrix.

Loaded after the canon catalog, whose factions these entries refer to.
Relationships with a faction that has not been loaded are reported as
unmatched and create nothing.
"""

from holocron.models import AllianceGroup
from holocron.rules import DEFAULT_RULES
from holocron.stores import DeclaredLink

from .base import Catalog, collection_spec

ALLIANCE_GROUPS = (
    AllianceGroup(name="Rebel Coalition", type="ALLIANCE",
                  members=["Rebel Alliance", "Royal House of Alderaan", "Jedi Order", "Bright Tree Village"],
                  description="Factions united against the Galactic Empire."),
    AllianceGroup(name="Imperial Hierarchy", type="HIERARCHY",
                  members=["Galactic Empire", "Imperial Navy", "Sith Order"],
                  description="The Empire and the institutions that answer to it."),
    AllianceGroup(name="Criminal Underworld", type="CRIMINAL_NETWORK",
                  members=["Hutt Cartel", "Bounty Hunters' Guild"],
                  description="Syndicates and the hunters they hire."),
)


def _relation(source: str, target: str, kind: str, intensity: int, description: str) -> DeclaredLink:
    return DeclaredLink(
        "FACTION_RELATIONSHIP",
        "Faction",
        source,
        "Faction",
        target,
        properties={"type": kind, "intensity": intensity, "description": description},
    )


RELATIONSHIPS = (
    _relation("Rebel Alliance", "Galactic Empire", "Enemy", 10, "Open war for control of the galaxy"),
    _relation("Galactic Empire", "Rebel Alliance", "Enemy", 10, "Open war for control of the galaxy"),
    _relation("Galactic Empire", "Sith Order", "Controlled", 9, "The Emperor and his apprentice rule the Empire"),
    _relation("Rebel Alliance", "Royal House of Alderaan", "Ally", 9, "Alderaan funded and sheltered the Rebellion"),
    _relation("Rebel Alliance", "Jedi Order", "Ally", 7, "Surviving Jedi fought alongside the Rebellion"),
    _relation("Rebel Alliance", "Bright Tree Village", "Ally", 8, "The Ewoks joined the assault on Endor"),
    _relation("Galactic Empire", "Hutt Cartel", "Tolerated", 4, "The Empire looks away while the Hutts pay"),
    _relation("Galactic Empire", "Bounty Hunters' Guild", "Employer", 6, "Vader hired hunters to find the Falcon"),
    _relation("Hutt Cartel", "Bounty Hunters' Guild", "Employer", 8, "Jabba keeps a standing roster of hunters"),
    _relation("Galactic Empire", "Imperial Senate", "Subordinate", 5, "The Senate answered to the Emperor until dissolved"),
    _relation("Jedi Order", "Sith Order", "Enemy", 10, "Millennia-old war between light and dark"),
)


def politics_catalog() -> Catalog:
    """Alliance groups and faction-to-faction relationships."""
    return Catalog(
        name="politics",
        source="faction_relationships",
        canonical=True,
        collections=[collection_spec("allianceGroups", ALLIANCE_GROUPS)],
        rules=list(DEFAULT_RULES),
        links=list(RELATIONSHIPS),
    )
