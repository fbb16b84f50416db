"""Galactic timeline: eras and the events that defined them."""

from holocron.models import EventCategory, Significance, TimelineEra, TimelineEvent
from holocron.rules import DEFAULT_RULES

from .base import Catalog, collection_spec

ERAS = (
    TimelineEra(name="Dawn of the Jedi", timeframe="30,000 - 25,000 BBY", startDate=-30000, endDate=-25000,
                color="#8B4513", significance=Significance.CRITICAL,
                majorEvents=["Formation of the Je'daii Order", "Force Wars", "Birth of Jedi and Sith"]),
    TimelineEra(name="Old Republic", timeframe="25,000 - 1,000 BBY", startDate=-25000, endDate=-1000,
                color="#4169E1", significance=Significance.CRITICAL,
                majorEvents=["Great Hyperspace War", "Mandalorian Wars", "Jedi Civil War"]),
    TimelineEra(name="New Sith Wars", timeframe="2,000 - 1,000 BBY", startDate=-2000, endDate=-1000,
                color="#8B0000", significance=Significance.HIGH,
                majorEvents=["Battle of Ruusan", "Rule of Two established"]),
    TimelineEra(name="Republic Classic", timeframe="1,000 - 22 BBY", startDate=-1000, endDate=-22,
                color="#228B22", significance=Significance.MEDIUM,
                majorEvents=["Ruusan Reformation", "Rise of Palpatine"]),
    TimelineEra(name="Prequel Era", timeframe="32 - 19 BBY", startDate=-32, endDate=-19,
                color="#FFD700", significance=Significance.CRITICAL,
                majorEvents=["Naboo Crisis", "Clone Wars", "Order 66"],
                keyFigures=["Emperor Palpatine", "Obi-Wan Kenobi", "Yoda"]),
    TimelineEra(name="Imperial Era", timeframe="19 BBY - 4 ABY", startDate=-19, endDate=4,
                color="#2F4F4F", significance=Significance.CRITICAL,
                majorEvents=["Jedi Purge", "Death Star construction", "Rebellion forms"]),
    TimelineEra(name="Original Trilogy", timeframe="0 - 4 ABY", startDate=0, endDate=4,
                color="#FF6347", significance=Significance.CRITICAL,
                majorEvents=["Battle of Yavin", "Battle of Hoth", "Battle of Endor"],
                keyFigures=["Luke Skywalker", "Leia Organa", "Han Solo", "Darth Vader"]),
    TimelineEra(name="New Republic", timeframe="5 - 28 ABY", startDate=5, endDate=28,
                color="#4682B4", significance=Significance.HIGH,
                majorEvents=["New Republic formed", "Jedi Academy"]),
    TimelineEra(name="Sequel Era", timeframe="29 - 35 ABY", startDate=29, endDate=35,
                color="#9932CC", significance=Significance.CRITICAL,
                majorEvents=["First Order rises", "Starkiller Base destroyed"]),
)

EVENTS = (
    TimelineEvent(
        title="Prime Jedi Founds the Jedi Order", date="25,025 BBY", dateNumeric=-25025,
        era="Dawn of the Jedi", category=EventCategory.JEDI, significance=Significance.CRITICAL,
        participants=["Prime Jedi"], location="Ahch-To",
        consequences=["First Jedi Temple constructed"], sources=["The Last Jedi"], tags=["jedi origins"],
        description="The first Jedi establish their order on the ocean world of Ahch-To.",
    ),
    TimelineEvent(
        title="Battle of Ruusan", date="1,000 BBY", dateNumeric=-1000,
        era="New Sith Wars", category=EventCategory.MILITARY, significance=Significance.HIGH,
        participants=["Darth Bane"], location="Ruusan",
        consequences=["Brotherhood of Darkness destroyed", "Rule of Two"], tags=["sith"],
        description="The final battle of the New Sith Wars leaves a single Sith survivor.",
    ),
    TimelineEvent(
        title="Invasion of Naboo", date="32 BBY", dateNumeric=-32,
        era="Prequel Era", category=EventCategory.MILITARY, significance=Significance.HIGH,
        participants=["Emperor Palpatine", "Obi-Wan Kenobi", "R2-D2"], location="Naboo",
        consequences=["Palpatine elected Supreme Chancellor"], sources=["The Phantom Menace"],
        description="The Trade Federation blockades and invades Naboo.",
    ),
    TimelineEvent(
        title="First Battle of Geonosis", date="22 BBY", dateNumeric=-22,
        era="Prequel Era", category=EventCategory.MILITARY, significance=Significance.CRITICAL,
        participants=["Obi-Wan Kenobi", "Yoda", "C-3PO", "R2-D2"], location="Geonosis",
        consequences=["Clone Wars begin"], sources=["Attack of the Clones"],
        description="The clone army's first battle opens the Clone Wars.",
    ),
    TimelineEvent(
        title="Order 66", date="19 BBY", dateNumeric=-19,
        era="Prequel Era", category=EventCategory.SITH, significance=Significance.CRITICAL,
        participants=["Emperor Palpatine", "Darth Vader", "Yoda", "Obi-Wan Kenobi"], location="Coruscant",
        consequences=["Great Jedi Purge", "Jedi Order scattered"], sources=["Revenge of the Sith"],
        description="Clone troopers turn on their Jedi commanders across the galaxy.",
    ),
    TimelineEvent(
        title="Declaration of a New Order", date="19 BBY", dateNumeric=-19,
        era="Imperial Era", category=EventCategory.POLITICAL, significance=Significance.CRITICAL,
        participants=["Emperor Palpatine"], location="Coruscant",
        consequences=["Galactic Empire established"], sources=["Revenge of the Sith"],
        description="Palpatine reorganizes the Republic into the Galactic Empire.",
    ),
    TimelineEvent(
        title="Destruction of Alderaan", date="0 BBY", dateNumeric=0,
        era="Original Trilogy", category=EventCategory.MILITARY, significance=Significance.CRITICAL,
        participants=["Grand Moff Tarkin", "Leia Organa", "Darth Vader"], location="Alderaan",
        consequences=["Imperial Senate support collapses"], sources=["A New Hope"],
        description="The Death Star's first test fire destroys Alderaan.",
    ),
    TimelineEvent(
        title="Battle of Yavin", date="0 BBY", dateNumeric=0,
        era="Original Trilogy", category=EventCategory.MILITARY, significance=Significance.CRITICAL,
        participants=["Luke Skywalker", "Han Solo", "Wedge Antilles", "Darth Vader", "Grand Moff Tarkin"],
        location="Yavin 4", consequences=["First Death Star destroyed"], sources=["A New Hope"],
        description="Rebel starfighters destroy the Death Star above Yavin.",
    ),
    TimelineEvent(
        title="Battle of Hoth", date="3 ABY", dateNumeric=3,
        era="Original Trilogy", category=EventCategory.MILITARY, significance=Significance.HIGH,
        participants=["Luke Skywalker", "Leia Organa", "Han Solo", "Darth Vader"], location="Hoth",
        consequences=["Echo Base evacuated"], sources=["The Empire Strikes Back"],
        description="Imperial walkers overrun the Rebel base on Hoth.",
    ),
    TimelineEvent(
        title="Training on Dagobah", date="3 ABY", dateNumeric=3,
        era="Original Trilogy", category=EventCategory.JEDI, significance=Significance.HIGH,
        participants=["Luke Skywalker", "Yoda"], location="Dagobah",
        sources=["The Empire Strikes Back"],
        description="Yoda trains Luke Skywalker in the ways of the Force.",
    ),
    TimelineEvent(
        title="Duel on Cloud City", date="3 ABY", dateNumeric=3,
        era="Original Trilogy", category=EventCategory.SITH, significance=Significance.HIGH,
        participants=["Luke Skywalker", "Darth Vader", "Lando Calrissian", "Boba Fett"], location="Cloud City",
        consequences=["Han Solo frozen in carbonite", "Vader reveals he is Luke's father"],
        sources=["The Empire Strikes Back"],
        description="Luke confronts Vader and learns the truth about his father.",
    ),
    TimelineEvent(
        title="Rescue from Jabba's Palace", date="4 ABY", dateNumeric=4,
        era="Original Trilogy", category=EventCategory.OTHER, significance=Significance.MEDIUM,
        participants=["Luke Skywalker", "Leia Organa", "Han Solo", "Jabba the Hutt", "Boba Fett"],
        location="Tatooine (Dune Sea)", sources=["Return of the Jedi"],
        description="Han Solo is rescued and Jabba the Hutt is killed.",
    ),
    TimelineEvent(
        title="Battle of Endor", date="4 ABY", dateNumeric=4,
        era="Original Trilogy", category=EventCategory.MILITARY, significance=Significance.CRITICAL,
        participants=["Luke Skywalker", "Leia Organa", "Han Solo", "Lando Calrissian", "Darth Vader",
                      "Emperor Palpatine", "Chewbacca"],
        location="Forest Moon of Endor",
        consequences=["Second Death Star destroyed", "Emperor killed"], sources=["Return of the Jedi"],
        description="The Rebel Alliance destroys the second Death Star and the Emperor falls.",
    ),
    TimelineEvent(
        title="Founding of the New Republic", date="5 ABY", dateNumeric=5,
        era="New Republic", category=EventCategory.POLITICAL, significance=Significance.HIGH,
        participants=["Mon Mothma", "Leia Organa"], location="Chandrila",
        consequences=["Galactic Concordance signed"],
        description="The Rebel Alliance reforms as the New Republic.",
    ),
)


def timeline_catalog() -> Catalog:
    """Timeline events and eras; events load before the eras they reference."""
    return Catalog(
        name="timeline",
        source="timeline",
        canonical=True,
        collections=[
            collection_spec("timelineEvents", EVENTS),
            collection_spec("timelineEras", ERAS),
        ],
        rules=list(DEFAULT_RULES),
    )
