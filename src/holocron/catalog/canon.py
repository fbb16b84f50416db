"""Original Trilogy canon: A New Hope, The Empire Strikes Back, Return of the Jedi."""

from holocron.models import Character, Faction, Location
from holocron.rules import DEFAULT_RULES
from holocron.stores import DeclaredLink

from .base import Catalog, collection_spec

WOOKIEEPEDIA = "https://starwars.fandom.com/wiki/"
OT_SOURCE = "A New Hope, The Empire Strikes Back, Return of the Jedi"

CHARACTERS = (
    Character(
        name="Luke Skywalker",
        species="Human",
        homeworld="Tatooine",
        affiliation=["Rebel Alliance", "Jedi Order"],
        force_sensitivity="High",
        rank="Jedi Knight",
        era="Galactic Civil War",
        description="A moisture farmer who became a Jedi Knight and destroyed the first Death Star. "
        "Son of Anakin Skywalker and twin brother to Leia Organa.",
        wookieepedia_url=WOOKIEEPEDIA + "Luke_Skywalker",
    ),
    Character(
        name="Leia Organa",
        species="Human",
        homeworld="Alderaan",
        affiliation=["Rebel Alliance", "Royal House of Alderaan"],
        force_sensitivity="High",
        rank="Princess, General",
        era="Galactic Civil War",
        description="Princess of Alderaan and a leader of the Rebel Alliance. Twin sister to Luke Skywalker.",
        wookieepedia_url=WOOKIEEPEDIA + "Leia_Organa",
    ),
    Character(
        name="Han Solo",
        species="Human",
        homeworld="Corellia",
        affiliation="Rebel Alliance",
        force_sensitivity="None",
        rank="General",
        era="Galactic Civil War",
        description="Smuggler and captain of the Millennium Falcon who joined the Rebellion.",
        wookieepedia_url=WOOKIEEPEDIA + "Han_Solo",
    ),
    Character(
        name="Darth Vader",
        species="Human (cyborg)",
        homeworld="Tatooine",
        affiliation=["Galactic Empire", "Sith Order"],
        force_sensitivity="Very High",
        rank="Dark Lord of the Sith",
        era="Galactic Civil War",
        description="Dark Lord of the Sith and the Emperor's enforcer. Formerly the Jedi Anakin Skywalker.",
        wookieepedia_url=WOOKIEEPEDIA + "Darth_Vader",
    ),
    Character(
        name="Obi-Wan Kenobi",
        species="Human",
        homeworld="Stewjon",
        affiliation="Jedi Order",
        force_sensitivity="Very High",
        rank="Jedi Master",
        era="Galactic Civil War",
        description="Jedi Master in exile on Tatooine who began Luke Skywalker's training.",
        wookieepedia_url=WOOKIEEPEDIA + "Obi-Wan_Kenobi",
    ),
    Character(
        name="Yoda",
        species="Unknown",
        affiliation="Jedi Order",
        force_sensitivity="Very High",
        rank="Grand Master",
        era="Galactic Civil War",
        description="Ancient Jedi Grand Master who trained Luke Skywalker on Dagobah.",
        wookieepedia_url=WOOKIEEPEDIA + "Yoda",
    ),
    Character(
        name="Chewbacca",
        species="Wookiee",
        homeworld="Kashyyyk",
        affiliation="Rebel Alliance",
        force_sensitivity="None",
        rank="Co-pilot",
        era="Galactic Civil War",
        description="Wookiee warrior and Han Solo's co-pilot aboard the Millennium Falcon.",
        wookieepedia_url=WOOKIEEPEDIA + "Chewbacca",
    ),
    Character(
        name="C-3PO",
        species="Droid",
        homeworld="Tatooine (assembled)",
        affiliation="Rebel Alliance",
        forceUser=False,
        era="Galactic Civil War",
        description="Protocol droid fluent in over six million forms of communication.",
        wookieepedia_url=WOOKIEEPEDIA + "C-3PO",
    ),
    Character(
        name="R2-D2",
        species="Droid",
        homeworld="Naboo",
        affiliation="Rebel Alliance",
        forceUser=False,
        era="Galactic Civil War",
        description="Astromech droid who carried the Death Star plans to Obi-Wan Kenobi.",
        wookieepedia_url=WOOKIEEPEDIA + "R2-D2",
    ),
    Character(
        name="Emperor Palpatine",
        species="Human",
        homeworld="Naboo",
        affiliation=["Galactic Empire", "Sith Order"],
        force_sensitivity="Very High",
        rank="Emperor",
        era="Galactic Civil War",
        description="Darth Sidious, Dark Lord of the Sith and ruler of the Galactic Empire.",
        wookieepedia_url=WOOKIEEPEDIA + "Darth_Sidious",
    ),
    Character(
        name="Lando Calrissian",
        species="Human",
        homeworld="Socorro",
        affiliation="Rebel Alliance",
        force_sensitivity="None",
        rank="General",
        era="Galactic Civil War",
        description="Baron Administrator of Cloud City who led the attack on the second Death Star.",
        wookieepedia_url=WOOKIEEPEDIA + "Lando_Calrissian",
    ),
    Character(
        name="Boba Fett",
        species="Human (clone)",
        homeworld="Kamino",
        affiliation="Bounty Hunters' Guild",
        force_sensitivity="None",
        era="Galactic Civil War",
        description="Bounty hunter who delivered Han Solo, frozen in carbonite, to Jabba the Hutt.",
        wookieepedia_url=WOOKIEEPEDIA + "Boba_Fett",
    ),
    Character(
        name="Jabba the Hutt",
        species="Hutt",
        homeworld="Nal Hutta",
        affiliation="Hutt Cartel",
        force_sensitivity="None",
        era="Galactic Civil War",
        description="Crime lord who ruled Tatooine's underworld from his palace in the Dune Sea.",
        wookieepedia_url=WOOKIEEPEDIA + "Jabba_Desilijic_Tiure",
    ),
    Character(
        name="Grand Moff Tarkin",
        species="Human",
        homeworld="Eriadu",
        affiliation=["Galactic Empire", "Imperial Navy"],
        force_sensitivity="None",
        rank="Grand Moff",
        era="Galactic Civil War",
        description="Commander of the first Death Star who ordered the destruction of Alderaan.",
        wookieepedia_url=WOOKIEEPEDIA + "Wilhuff_Tarkin",
    ),
    Character(
        name="Wedge Antilles",
        species="Human",
        homeworld="Corellia",
        affiliation=["Rebel Alliance", "Rogue Squadron"],
        force_sensitivity="None",
        rank="Commander",
        era="Galactic Civil War",
        description="X-wing pilot who survived both Death Star assaults.",
        wookieepedia_url=WOOKIEEPEDIA + "Wedge_Antilles",
    ),
)

LOCATIONS = (
    Location(name="Tatooine", type="Planet", region="Outer Rim", climate="Arid", terrain="Desert, canyons",
             force_nexus="balanced", description="Twin-sunned desert world ruled by Hutt crime lords."),
    Location(name="Alderaan", type="Planet", region="Core Worlds", climate="Temperate", terrain="Mountains, grasslands",
             description="Peaceful Core world destroyed by the first Death Star."),
    Location(name="Yavin 4", type="Moon", region="Outer Rim", climate="Tropical", terrain="Jungle, temples",
             force_nexus="dark", description="Jungle moon hiding the Rebel base in ancient Massassi temples."),
    Location(name="Hoth", type="Planet", region="Outer Rim", climate="Frozen", terrain="Ice fields, glaciers",
             description="Ice planet sheltering Echo Base until the Imperial assault."),
    Location(name="Dagobah", type="Planet", region="Outer Rim", climate="Humid", terrain="Swamps, bayous",
             force_nexus="balanced", description="Swamp world where Yoda lived in exile."),
    Location(name="Bespin", type="Planet", region="Outer Rim", climate="Temperate", terrain="Gas giant atmosphere",
             description="Gas giant mined for tibanna gas."),
    Location(name="Cloud City", type="City", region="Outer Rim", climate="Temperate", terrain="Floating city",
             description="Tibanna mining colony suspended in Bespin's atmosphere."),
    Location(name="Forest Moon of Endor", type="Moon", region="Outer Rim", climate="Temperate", terrain="Forest",
             description="Home of the Ewoks and site of the second Death Star's shield generator."),
    Location(name="Death Star", type="Station", region="Outer Rim", climate="Artificial", terrain="Battle station",
             description="Moon-sized battle station capable of destroying planets."),
    Location(name="Death Star II", type="Station", region="Outer Rim", climate="Artificial", terrain="Battle station",
             description="Second, larger battle station destroyed above Endor."),
    Location(name="Mos Eisley", type="City", region="Outer Rim", climate="Arid", terrain="Spaceport",
             description="Tatooine spaceport, a wretched hive of scum and villainy."),
    Location(name="Corellia", type="Planet", region="Core Worlds", climate="Temperate", terrain="Shipyards, plains",
             description="Core world famous for its shipyards and pilots."),
    Location(name="Kashyyyk", type="Planet", region="Mid Rim", climate="Temperate", terrain="Wroshyr forests",
             description="Forest homeworld of the Wookiees."),
    Location(name="Coruscant", type="Planet", region="Core Worlds", climate="Temperate", terrain="Ecumenopolis",
             force_nexus="light", description="Planet-wide city and capital of the Empire."),
    Location(name="Dantooine", type="Planet", region="Outer Rim", climate="Temperate", terrain="Grasslands",
             description="Remote world of an abandoned Rebel base."),
)

FACTIONS = (
    Faction(name="Rebel Alliance", type="Military", alignment="Light", headquarters="Yavin 4",
            philosophy="Restore the Republic", key_figures=["Mon Mothma", "Leia Organa"],
            description="Alliance to Restore the Republic, fighting the Galactic Empire."),
    Faction(name="Galactic Empire", type="Government", alignment="Dark", headquarters="Coruscant",
            philosophy="Order through fear", key_figures=["Emperor Palpatine", "Darth Vader"],
            description="Authoritarian regime that replaced the Galactic Republic."),
    Faction(name="Jedi Order", type="Religious", alignment="Light", headquarters="Coruscant",
            philosophy="Peace, knowledge, serenity", key_figures=["Yoda", "Obi-Wan Kenobi"],
            description="Ancient order of Force users, nearly destroyed in the Great Jedi Purge."),
    Faction(name="Sith Order", type="Religious", alignment="Dark", philosophy="Power through passion",
            key_figures=["Emperor Palpatine", "Darth Vader"],
            description="Order of dark side Force users bound by the Rule of Two."),
    Faction(name="Royal House of Alderaan", type="Government", alignment="Light", headquarters="Alderaan",
            description="Ruling house of Alderaan, led by Bail Organa."),
    Faction(name="Hutt Cartel", type="Criminal", alignment="Dark", headquarters="Nal Hutta",
            description="Criminal empire of the Hutt clans."),
    Faction(name="Bounty Hunters' Guild", type="Criminal", alignment="Neutral",
            description="Loose guild regulating bounty hunters across the galaxy."),
    Faction(name="Imperial Navy", type="Military", alignment="Dark", headquarters="Coruscant",
            description="Space fleet of the Galactic Empire."),
    Faction(name="Rogue Squadron", type="Military", alignment="Light",
            description="Elite Rebel starfighter squadron."),
    Faction(name="Imperial Senate", type="Government", alignment="Neutral", headquarters="Coruscant",
            description="Legislature dissolved by the Emperor shortly before the Battle of Yavin."),
    Faction(name="Bright Tree Village", type="Tribal", alignment="Light", headquarters="Forest Moon of Endor",
            description="Ewok village that aided the Rebel strike team on Endor."),
    Faction(name="Jawa Clans", type="Tribal", alignment="Neutral", headquarters="Tatooine",
            description="Scavenger clans trading salvaged droids from sandcrawlers."),
    Faction(name="Tusken Raiders", type="Tribal", alignment="Neutral", headquarters="Tatooine",
            description="Nomadic people of Tatooine's Jundland Wastes."),
    Faction(name="Cloud City Wing Guard", type="Military", alignment="Neutral", headquarters="Cloud City",
            description="Security force of Cloud City."),
    Faction(name="Galactic Republic", type="Government", alignment="Light", headquarters="Coruscant",
            description="Democratic union of star systems that preceded the Empire."),
)


def _character_link(relationship: str, source: str, target: str) -> DeclaredLink:
    return DeclaredLink(relationship, "Character", source, "Character", target)


# Family ties and the film-stated allegiances and origins
LINKS = (
    _character_link("SIBLING_OF", "Luke Skywalker", "Leia Organa"),
    _character_link("SIBLING_OF", "Leia Organa", "Luke Skywalker"),
    _character_link("FATHER_OF", "Darth Vader", "Luke Skywalker"),
    _character_link("FATHER_OF", "Darth Vader", "Leia Organa"),
    DeclaredLink("MEMBER_OF", "Character", "Luke Skywalker", "Faction", "Rebel Alliance"),
    DeclaredLink("MEMBER_OF", "Character", "Darth Vader", "Faction", "Galactic Empire"),
    DeclaredLink("FROM", "Character", "Luke Skywalker", "Location", "Tatooine"),
)


def canon_catalog() -> Catalog:
    """The canonical Original Trilogy set (15 of each)."""
    return Catalog(
        name="canon",
        source=OT_SOURCE,
        canonical=True,
        collections=[
            collection_spec("characters", CHARACTERS),
            collection_spec("locations", LOCATIONS),
            collection_spec("factions", FACTIONS),
        ],
        rules=list(DEFAULT_RULES),
        links=list(LINKS),
    )
