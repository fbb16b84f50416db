"""Encyclopedia expansion: supplementary entries layered on top of the canon set.

These records are loaded with canonical=False. The load is additive, so the
canonical counts in both stores must be unchanged afterwards.
"""

from holocron.models import Character, Faction, Location
from holocron.rules import DEFAULT_RULES

from .base import Catalog, collection_spec

CHARACTERS = (
    Character(name="Mon Mothma", species="Human", homeworld="Chandrila", affiliation="Rebel Alliance",
              forceUser=False, era="Galactic Civil War",
              description="Former senator and Chancellor of the Rebel Alliance."),
    Character(name="Gial Ackbar", species="Mon Calamari", homeworld="Mon Cala", affiliation="Rebel Alliance",
              forceUser=False, era="Galactic Civil War",
              description="Fleet admiral who commanded the Rebel assault at Endor."),
    Character(name="Biggs Darklighter", species="Human", homeworld="Tatooine", affiliation="Rebel Alliance",
              forceUser=False, era="Galactic Civil War",
              description="Luke Skywalker's childhood friend, killed at the Battle of Yavin."),
    Character(name="Thrawn", species="Chiss", homeworld="Csilla", affiliation="Galactic Empire",
              forceUser=False, era="Imperial Era",
              description="Chiss Grand Admiral and master strategist."),
    Character(name="Mara Jade", species="Human", affiliation="Galactic Empire", forceUser=True,
              era="Imperial Era", description="The Emperor's Hand, later a Jedi Master."),
    Character(name="Mace Windu", species="Human", homeworld="Haruun Kal", affiliation="Jedi Order",
              forceUser=True, era="Clone Wars", description="Jedi Master and senior member of the Jedi Council."),
    Character(name="Qui-Gon Jinn", species="Human", homeworld="Coruscant", affiliation="Jedi Order",
              forceUser=True, era="Republic Era", description="Jedi Master who discovered Anakin Skywalker."),
    Character(name="Count Dooku", species="Human", homeworld="Serenno", affiliation=["Separatists", "Sith Order"],
              forceUser=True, era="Clone Wars", description="Fallen Jedi who led the Separatist movement."),
    Character(name="Padme Amidala", species="Human", homeworld="Naboo", affiliation="Galactic Republic",
              forceUser=False, era="Clone Wars", description="Queen and later senator of Naboo."),
    Character(name="Jango Fett", species="Human", homeworld="Concord Dawn", affiliation="Independent",
              forceUser=False, era="Clone Wars", description="Bounty hunter and template for the clone army."),
    Character(name="Kyle Katarn", species="Human", homeworld="Sulon", affiliation="New Republic",
              forceUser=True, era="Post-Empire", description="Mercenary turned Jedi Master."),
    Character(name="Jaina Solo", species="Human", homeworld="Coruscant", affiliation="New Jedi Order",
              forceUser=True, era="Post-Empire", description="Daughter of Han Solo and Leia Organa."),
)

LOCATIONS = (
    Location(name="Naboo", type="Planet", region="Mid Rim", climate="Temperate", terrain="Plains, swamps"),
    Location(name="Kamino", type="Planet", region="Outer Rim", climate="Oceanic", terrain="Ocean, floating cities"),
    Location(name="Mustafar", type="Planet", region="Outer Rim", climate="Volcanic",
             terrain="Lava, mining facilities", force_nexus="dark"),
    Location(name="Ryloth", type="Planet", region="Outer Rim", climate="Tidally locked", terrain="Desert, mountains"),
    Location(name="Geonosis", type="Planet", region="Outer Rim", climate="Arid", terrain="Desert, rock formations"),
    Location(name="Felucia", type="Planet", region="Outer Rim", climate="Humid", terrain="Fungal jungle"),
    Location(name="Christophsis", type="Planet", region="Outer Rim", climate="Frozen",
             terrain="Crystal formations, cities"),
    Location(name="Utapau", type="Planet", region="Outer Rim", climate="Arid", terrain="Sinkholes, cliffs"),
    Location(name="Chandrila", type="Planet", region="Core Worlds", climate="Temperate", terrain="Hills, lakes"),
    Location(name="Mon Cala", type="Planet", region="Outer Rim", climate="Oceanic", terrain="Ocean, coral cities"),
)

FACTIONS = (
    Faction(name="Trade Federation", type="Corporate", alignment="Neutral", era="Republic Era"),
    Faction(name="Separatists", type="Government", alignment="Dark", era="Clone Wars"),
    Faction(name="Grand Army of the Republic", type="Military", alignment="Light", era="Clone Wars"),
    Faction(name="New Republic", type="Government", alignment="Light", era="Post-Empire"),
    Faction(name="Imperial Remnant", type="Government", alignment="Dark", era="Post-Empire"),
    Faction(name="New Jedi Order", type="Religious", alignment="Light", era="Post-Empire"),
    Faction(name="Black Sun", type="Criminal", alignment="Dark", era="Imperial Era"),
    Faction(name="Pyke Syndicate", type="Criminal", alignment="Dark", era="Multiple"),
    Faction(name="Crimson Dawn", type="Criminal", alignment="Dark", era="Multiple"),
    Faction(name="InterGalactic Banking Clan", type="Corporate", alignment="Neutral", era="Republic Era"),
)


def expanded_catalog() -> Catalog:
    """Supplementary encyclopedia entries, checked against the canonical baseline."""
    return Catalog(
        name="expanded",
        source="expanded_universe",
        canonical=False,
        collections=[
            collection_spec("characters", CHARACTERS),
            collection_spec("locations", LOCATIONS),
            collection_spec("factions", FACTIONS),
        ],
        rules=list(DEFAULT_RULES),
        preserve_canonical=True,
    )
