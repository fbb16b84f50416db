"""Shared fixtures."""

from datetime import datetime, timezone

import pytest

from holocron.memory import MemoryDocumentStore, MemoryGraphStore
from holocron.models import Character, Faction, Location

FIXED_TIME = datetime(2024, 5, 4, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def documents():
    return MemoryDocumentStore()


@pytest.fixture
def graph():
    return MemoryGraphStore()


@pytest.fixture
def clock():
    return lambda: FIXED_TIME


@pytest.fixture
def small_lore():
    """Three characters, two locations, two factions."""
    characters = [
        Character(name="Luke Skywalker", homeworld="Tatooine", affiliation="Rebel Alliance", forceUser=True),
        Character(name="Han Solo", homeworld="Corellia", affiliation="Smugglers"),
        Character(name="C-3PO", homeworld="Tatooine (assembled)"),
    ]
    locations = [
        Location(name="Tatooine", type="Planet"),
        Location(name="Hoth", type="Planet"),
    ]
    factions = [
        Faction(name="Rebel Alliance", type="Military"),
        Faction(name="Galactic Empire", type="Government"),
    ]
    return characters, locations, factions
