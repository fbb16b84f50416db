"""Tests for the cross-store consistency sweep."""

from holocron.catalog import collection_spec
from holocron.models import Character
from holocron.pipeline import ConsistencySweep


class TestCompare:
    def test_consistent(self, documents, graph):
        for name in ("Luke Skywalker", "Leia Organa"):
            documents.insert("characters", {"name": name})
            graph.create_node("Character", "name", {"name": name})

        diff = ConsistencySweep(documents, graph).compare("characters", "Character")
        assert diff.consistent

    def test_gap_from_interrupted_load(self, documents, graph):
        documents.insert("characters", {"name": "Luke Skywalker"})
        documents.insert("characters", {"name": "Leia Organa"})
        graph.create_node("Character", "name", {"name": "Luke Skywalker"})
        graph.create_node("Character", "name", {"name": "Biggs Darklighter"})

        diff = ConsistencySweep(documents, graph).compare("characters", "Character")

        assert not diff.consistent
        assert diff.missing_in_graph == ["Leia Organa"]
        assert diff.missing_in_documents == ["Biggs Darklighter"]


class TestAudit:
    def test_duplicates_and_empty_keys(self, documents, graph):
        # No unique index: duplicates can slip in
        documents.insert("characters", {"name": "Han Solo"})
        documents.insert("characters", {"name": "Han Solo"})
        documents.insert("characters", {"name": ""})

        documents_finding, graph_finding = ConsistencySweep(documents, graph).audit("characters", "Character")

        assert documents_finding.store == "documents"
        assert documents_finding.total == 3
        assert documents_finding.duplicates == {"Han Solo": 2}
        assert documents_finding.empty_keys == 1
        assert not documents_finding.healthy
        assert graph_finding.healthy
        assert graph_finding.total == 0

    def test_sweep_reads_only(self, documents, graph):
        documents.insert("characters", {"name": "Luke Skywalker"})
        specs = [collection_spec("characters", [Character(name="Luke Skywalker")])]

        diffs, findings = ConsistencySweep(documents, graph).sweep(specs)

        assert diffs[0].missing_in_graph == ["Luke Skywalker"]
        assert len(findings) == 2
        assert graph.count_nodes("Character") == 0
        assert documents.count("characters") == 1
