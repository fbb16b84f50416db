"""End-to-end seeding against in-memory stores."""

import pytest

from holocron.catalog import (
    Catalog,
    canon_catalog,
    collection_spec,
    expanded_catalog,
    politics_catalog,
    timeline_catalog,
)
from holocron.jobs import open_stores, run_seed_job
from holocron.memory import MemoryDocumentStore, MemoryGraphStore
from holocron.rules import DEFAULT_RULES


class TestSeedJob:
    """Tests for a full load, reconcile, validate run."""

    @pytest.fixture
    def catalog(self, small_lore):
        characters, locations, factions = small_lore
        return Catalog(
            name="small",
            source="test",
            canonical=True,
            collections=[
                collection_spec("characters", characters, minimum=2),
                collection_spec("locations", locations),
                collection_spec("factions", factions),
            ],
            rules=list(DEFAULT_RULES),
        )

    def test_small_catalog(self, catalog, documents, graph):
        # One character already exists from an earlier run
        documents.ensure_unique("characters", "name")
        documents.insert("characters", {"name": "Han Solo", "canonical": True})
        graph.create_node("Character", "name", {"name": "Han Solo", "homeworld": "Corellia", "canonical": True})

        outcome = run_seed_job(catalog, documents, graph)

        characters = outcome.load.get("characters")
        assert characters.documents_created == 2
        assert characters.documents_skipped == 1
        assert characters.skipped_keys == ["Han Solo"]

        # Luke -> Tatooine; C-3PO's "Tatooine (assembled)" and Han's Corellia match nothing
        assert graph.count_relationships("BORN_ON") == 1
        # Luke -> Rebel Alliance; "Smugglers" is not a faction
        assert graph.count_relationships("MEMBER_OF") == 1
        assert "ForceUser" in graph.labels_of("Character", "name", "Luke Skywalker")

        assert outcome.passed
        assert [check.expected for check in outcome.validation.checks] == [2, 2, 2]
        assert not outcome.reconcile.failed

    def test_second_run_changes_nothing(self, catalog, documents, graph):
        run_seed_job(catalog, documents, graph)
        edges = graph.count_relationships()

        outcome = run_seed_job(catalog, documents, graph)

        assert outcome.load.loaded == 0
        assert outcome.reconcile.created == 0
        assert graph.count_relationships() == edges
        assert documents.count("characters") == 3
        assert outcome.passed


class TestBuiltinCatalogs:
    """The shipped catalogs seed cleanly on empty stores."""

    def test_canon(self, documents, graph):
        outcome = run_seed_job(canon_catalog(), documents, graph)

        assert outcome.passed
        assert outcome.load.loaded == 45
        assert graph.count_relationships("BORN_ON") > 0
        assert graph.count_relationships("MEMBER_OF") > 0
        assert graph.count_nodes("Character", {"canonical": True}) == 15

    def test_expanded_after_canon(self, documents, graph):
        run_seed_job(canon_catalog(), documents, graph)
        outcome = run_seed_job(expanded_catalog(), documents, graph)

        assert outcome.passed
        check = outcome.validation.get("characters")
        assert check.baseline == 15
        assert check.canonical_documents == 15
        assert documents.count("characters", {"canonical": False}) == 12

    def test_canon_declared_links(self, documents, graph):
        run_seed_job(canon_catalog(), documents, graph)

        assert graph.count_relationships("SIBLING_OF") == 2
        assert graph.count_relationships("FATHER_OF") == 2
        assert graph.count_relationships("FROM") == 1
        # Luke and Vader are already MEMBER_OF through their affiliations
        members = graph.count_relationships("MEMBER_OF")

        edges = graph.count_relationships()
        outcome = run_seed_job(canon_catalog(), documents, graph)

        assert outcome.reconcile.created == 0
        assert outcome.reconcile.get("declared_father_of").matched == 2
        assert graph.count_relationships() == edges
        assert graph.count_relationships("MEMBER_OF") == members

    def test_expanded_service(self, documents, graph):
        run_seed_job(canon_catalog(), documents, graph)
        outcome = run_seed_job(expanded_catalog(), documents, graph)

        # Dooku -> Separatists, Katarn -> New Republic, Jaina -> New Jedi Order
        assert outcome.reconcile.get("expanded_service").created == 3
        assert graph.count_relationships("SERVED_IN") == 3

        run_seed_job(expanded_catalog(), documents, graph)
        assert graph.count_relationships("SERVED_IN") == 3

    def test_politics_after_canon(self, documents, graph):
        run_seed_job(canon_catalog(), documents, graph)
        outcome = run_seed_job(politics_catalog(), documents, graph)

        assert outcome.passed
        assert outcome.reconcile.get("alliance_groups").created == 9
        relationships = outcome.reconcile.get("declared_faction_relationship")
        assert relationships.created == 11
        assert relationships.unmatched == []
        assert graph.edge_properties(
            ("Faction", "Jedi Order"), ("Faction", "Sith Order"), "FACTION_RELATIONSHIP"
        ) == {"type": "Enemy", "intensity": 10, "description": "Millennia-old war between light and dark"}

        edges = graph.count_relationships()
        assert run_seed_job(politics_catalog(), documents, graph).reconcile.created == 0
        assert graph.count_relationships() == edges

    def test_politics_without_factions(self, documents, graph):
        outcome = run_seed_job(politics_catalog(), documents, graph)

        assert outcome.passed
        assert graph.count_relationships() == 0
        assert len(outcome.reconcile.get("declared_faction_relationship").unmatched) == 11

    def test_timeline_after_canon(self, documents, graph):
        run_seed_job(canon_catalog(), documents, graph)
        outcome = run_seed_job(timeline_catalog(), documents, graph)

        assert outcome.passed
        assert graph.count_relationships("OCCURRED_IN") == 14
        assert graph.count_relationships("PARTICIPATED_IN") > 0
        assert graph.count_relationships("TOOK_PLACE_AT") > 0


class TestOpenStores:
    def test_dry_run_uses_memory(self):
        with open_stores(dry_run=True) as (documents, graph):
            assert isinstance(documents, MemoryDocumentStore)
            assert isinstance(graph, MemoryGraphStore)
