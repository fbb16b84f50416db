"""Tests for the MongoDB and Neo4j store adapters and shared store helpers."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from neo4j.exceptions import ClientError, ConstraintError
from pymongo.errors import DuplicateKeyError, OperationFailure

from holocron.documents import MongoDocumentStore
from holocron.errors import SchemaError
from holocron.graph import Neo4jGraphStore
from holocron.memory import MemoryDocumentStore, MemoryGraphStore
from holocron.rules import BORN_ON, FORCE_USER, PARTICIPATED_IN, SERVED_IN
from holocron.stores import DeclaredLink, InferredLink, WriteResult, as_values, graph_safe


class TestGraphSafe:
    def test_keeps_scalars_and_lists(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        props = graph_safe(
            {
                "name": "Luke Skywalker",
                "forceUser": True,
                "dateNumeric": -19,
                "createdAt": now,
                "affiliation": ["Rebel Alliance", "Jedi Order"],
                "homeworld": None,
            }
        )
        assert props == {
            "name": "Luke Skywalker",
            "forceUser": True,
            "dateNumeric": -19,
            "createdAt": now,
            "affiliation": ["Rebel Alliance", "Jedi Order"],
        }

    def test_drops_nested_and_mixed(self):
        props = graph_safe({"name": "X", "stats": {"hp": 10}, "mixed": ["a", 1], "bad key": "y"})
        assert props == {"name": "X"}

    def test_as_values(self):
        assert list(as_values(None)) == []
        assert list(as_values("Tatooine")) == ["Tatooine"]
        assert list(as_values(["A", "B"])) == ["A", "B"]


class TestInferredLink:
    def test_rejects_unsafe_identifiers(self):
        with pytest.raises(ValueError, match="Invalid identifier"):
            InferredLink("bad", "Character", "homeworld} DETACH DELETE n //", "Location", "BORN_ON")

    def test_rejects_unsafe_filter_keys(self):
        with pytest.raises(ValueError, match="Invalid identifier"):
            InferredLink("bad", "Character", "affiliation", "Faction", "SERVED_IN", source_filter=(("a b", 1),))


class TestDeclaredLink:
    def test_rejects_unsafe_relationship(self):
        with pytest.raises(ValueError, match="Invalid identifier"):
            DeclaredLink("KNOWS]->() DETACH DELETE t //", "Character", "Luke Skywalker", "Character", "Han Solo")

    def test_defaults(self):
        link = DeclaredLink("FROM", "Character", "Luke Skywalker", "Location", "Tatooine")
        assert link.properties == {}
        assert (link.source_key, link.target_key) == ("name", "name")


class TestMongoDocumentStore:
    """Tests for the MongoDB adapter."""

    @pytest.fixture
    def client(self):
        return MagicMock()

    @pytest.fixture
    def store(self, client):
        return MongoDocumentStore(client, database="swrpg")

    def test_insert_created(self, store, client):
        assert store.insert("characters", {"name": "Yoda"}) is WriteResult.CREATED
        client["swrpg"]["characters"].insert_one.assert_called_once_with({"name": "Yoda"})

    def test_insert_duplicate(self, store, client):
        client["swrpg"]["characters"].insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        assert store.insert("characters", {"name": "Yoda"}) is WriteResult.ALREADY_EXISTS

    def test_insert_other_error_propagates(self, store, client):
        client["swrpg"]["characters"].insert_one.side_effect = RuntimeError("network")
        with pytest.raises(RuntimeError):
            store.insert("characters", {"name": "Yoda"})

    def test_insert_does_not_mutate_input(self, store, client):
        def add_id(doc):
            doc["_id"] = "abc"

        client["swrpg"]["characters"].insert_one.side_effect = add_id
        document = {"name": "Yoda"}
        store.insert("characters", document)
        assert "_id" not in document

    def test_ensure_unique(self, store, client):
        store.ensure_unique("characters", "name")
        client["swrpg"]["characters"].create_index.assert_called_once_with(
            [("name", 1)], unique=True, name="name_unique"
        )

    def test_ensure_unique_blocked_by_duplicates(self, store, client):
        client["swrpg"]["characters"].create_index.side_effect = OperationFailure(
            "Index build failed: E11000 duplicate key error", code=11000
        )

        with pytest.raises(SchemaError, match="MongoDB characters") as excinfo:
            store.ensure_unique("characters", "name")

        assert "holocron sweep" in str(excinfo.value)

    def test_count_with_filter(self, store, client):
        client["swrpg"]["characters"].count_documents.return_value = 15
        assert store.count("characters", {"canonical": True}) == 15
        client["swrpg"]["characters"].count_documents.assert_called_once_with({"canonical": True})


class TestNeo4jGraphStore:
    """Tests for the Neo4j adapter."""

    @pytest.fixture
    def session(self):
        return MagicMock()

    @pytest.fixture
    def store(self, session):
        driver = MagicMock()
        driver.session.return_value.__enter__.return_value = session
        return Neo4jGraphStore(driver)

    def summary(self, session, **counters):
        summary = MagicMock()
        for name, value in counters.items():
            setattr(summary.counters, name, value)
        session.run.return_value.consume.return_value = summary
        return summary

    def test_create_node_created(self, store, session):
        self.summary(session, nodes_created=1)
        result = store.create_node("Character", "name", {"name": "Yoda", "forceUser": True})

        assert result is WriteResult.CREATED
        query = session.run.call_args.args[0]
        assert "MERGE (n:Character {name: $key})" in query
        assert "ON CREATE SET n += $props" in query
        assert session.run.call_args.kwargs["key"] == "Yoda"

    def test_create_node_existing(self, store, session):
        self.summary(session, nodes_created=0)
        assert store.create_node("Character", "name", {"name": "Yoda"}) is WriteResult.ALREADY_EXISTS

    def test_create_node_constraint_error(self, store, session):
        session.run.side_effect = ConstraintError("already exists with label")
        assert store.create_node("Character", "name", {"name": "Yoda"}) is WriteResult.ALREADY_EXISTS

    def test_create_node_rejects_bad_label(self, store):
        with pytest.raises(ValueError):
            store.create_node("Character) DETACH DELETE (m", "name", {"name": "Yoda"})

    def test_ensure_schema(self, store, session):
        store.ensure_schema("Character", "name")
        query = session.run.call_args.args[0]
        assert "CREATE CONSTRAINT character_name_unique IF NOT EXISTS" in query
        assert "REQUIRE n.name IS UNIQUE" in query

    def test_ensure_schema_blocked_by_duplicates(self, store, session):
        session.run.side_effect = ClientError("Unable to create Constraint: both nodes have name 'Yoda'")

        with pytest.raises(SchemaError, match="Neo4j Character") as excinfo:
            store.ensure_schema("Character", "name")

        assert excinfo.value.key == "name"
        assert "holocron sweep" in str(excinfo.value)

    def test_merge_links(self, store, session):
        self.summary(session, relationships_created=3)
        session.run.return_value.single.return_value = {"matched": 5}

        counts = store.merge_links(BORN_ON)

        assert counts.matched == 5
        assert counts.created == 3
        query = session.run.call_args.args[0]
        assert "MATCH (t:Location {name: value})" in query
        assert "MERGE (s)-[r:BORN_ON]->(t)" in query
        assert "CREATE" not in query

    def test_merge_links_reverse(self, store, session):
        self.summary(session, relationships_created=0)
        session.run.return_value.single.return_value = {"matched": 0}

        store.merge_links(PARTICIPATED_IN)

        assert "MERGE (t)-[r:PARTICIPATED_IN]->(s)" in session.run.call_args.args[0]

    def test_merge_links_filters(self, store, session):
        self.summary(session, relationships_created=1)
        session.run.return_value.single.return_value = {"matched": 1}

        store.merge_links(SERVED_IN)

        query = session.run.call_args.args[0]
        assert "s.source = $s_source" in query
        assert "WHERE t.source = $t_source" in query
        assert "MERGE (s)-[r:SERVED_IN]->(t)" in query
        assert session.run.call_args.kwargs == {"s_source": "expanded_universe", "t_source": "expanded_universe"}

    def test_merge_declared(self, store, session):
        self.summary(session, relationships_created=1)
        session.run.return_value.single.return_value = {"matched": 1}
        link = DeclaredLink(
            "FACTION_RELATIONSHIP", "Faction", "Hutt Cartel", "Faction", "Bounty Hunters' Guild",
            properties={"type": "Employer", "intensity": 8},
        )

        counts = store.merge_declared(link)

        assert (counts.matched, counts.created) == (1, 1)
        query = session.run.call_args.args[0]
        assert "MATCH (s:Faction {name: $source})" in query
        assert "MERGE (s)-[r:FACTION_RELATIONSHIP]->(t)" in query
        assert "ON CREATE SET r += $props" in query
        assert session.run.call_args.kwargs == {
            "source": "Hutt Cartel",
            "target": "Bounty Hunters' Guild",
            "props": {"type": "Employer", "intensity": 8},
        }

    def test_merge_declared_missing_endpoint(self, store, session):
        self.summary(session, relationships_created=0)
        session.run.return_value.single.return_value = {"matched": 0}

        link = DeclaredLink("FROM", "Character", "Luke Skywalker", "Location", "Tatooine")
        assert store.merge_declared(link).matched == 0

    def test_add_label(self, store, session):
        self.summary(session, labels_added=2)
        session.run.return_value.single.return_value = {"matched": 4}

        counts = store.add_label(FORCE_USER)

        assert (counts.matched, counts.created) == (4, 2)
        assert "SET n:ForceUser" in session.run.call_args.args[0]
        assert session.run.call_args.kwargs["value"] is True

    def test_count_nodes_filters(self, store, session):
        session.run.return_value.single.return_value = {"count": 15}

        assert store.count_nodes("Character", {"canonical": True}) == 15
        query = session.run.call_args.args[0]
        assert "WHERE n.canonical = $canonical" in query
        assert session.run.call_args.kwargs == {"canonical": True}

    def test_unmatched(self, store, session):
        session.run.return_value = [{"source": "C-3PO", "value": "Tatooine (assembled)"}]
        assert store.unmatched(BORN_ON) == [("C-3PO", "Tatooine (assembled)")]


class TestMemoryStoreSchema:
    """Unique keys cannot be enforced over existing duplicates."""

    def test_document_duplicates(self):
        store = MemoryDocumentStore()
        store.insert("characters", {"name": "Yoda"})
        store.insert("characters", {"name": "Yoda"})

        with pytest.raises(SchemaError, match="memory characters"):
            store.ensure_unique("characters", "name")

    def test_graph_duplicates(self):
        store = MemoryGraphStore()
        store.graph.add_node(1, labels={"Character"}, properties={"name": "Yoda"})
        store.graph.add_node(2, labels={"Character"}, properties={"name": "Yoda"})

        with pytest.raises(SchemaError, match="memory Character"):
            store.ensure_schema("Character", "name")

    def test_unique_after_clean_load(self):
        store = MemoryDocumentStore()
        store.insert("characters", {"name": "Yoda"})
        store.ensure_unique("characters", "name")

        assert store.insert("characters", {"name": "Yoda"}) is WriteResult.ALREADY_EXISTS
