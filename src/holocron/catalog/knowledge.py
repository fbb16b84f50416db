"""World knowledge entries for the semantic index."""

from holocron.models import WorldKnowledge

WORLD_KNOWLEDGE = (
    WorldKnowledge(
        title="Luke Skywalker Character Profile",
        content="Luke Skywalker is a legendary Jedi Knight from Tatooine. Human male, pilot and "
        "Force-sensitive. Son of Anakin Skywalker and Padme Amidala. Known for optimism, "
        "determination, and compassion.",
        category="character",
        era="imperial_era",
        importance=10,
    ),
    WorldKnowledge(
        title="Mos Eisley Cantina",
        content="A rough drinking establishment in the Mos Eisley spaceport on Tatooine, known for its "
        "alien clientele, shady dealings and its 'no droids' policy.",
        category="location",
        era="imperial_era",
        importance=8,
    ),
    WorldKnowledge(
        title="The Force Philosophy",
        content="The Force is an energy field created by all living things. The light side represents "
        "peace, knowledge and serenity; the dark side feeds on anger, fear and aggression.",
        category="technology",
        importance=10,
    ),
    WorldKnowledge(
        title="Imperial Era Politics",
        content="The Galactic Empire rules through fear. Emperor Palpatine has dissolved the Senate and "
        "stormtroopers enforce Imperial will while the Rebel Alliance fights for freedom.",
        category="politics",
        era="imperial_era",
        importance=9,
    ),
    WorldKnowledge(
        title="Millennium Falcon Specifications",
        content="A YT-1300 light freighter heavily modified for speed and combat, piloted by Han Solo "
        "and Chewbacca, with an enhanced hyperdrive and quad laser cannons.",
        category="technology",
        era="imperial_era",
        importance=7,
    ),
    WorldKnowledge(
        title="Tatooine Desert World",
        content="A harsh desert planet in the Outer Rim with twin suns. Home to moisture farmers, "
        "Tusken Raiders and Jawas, and controlled by Hutt crime lords.",
        category="location",
        importance=8,
    ),
)
