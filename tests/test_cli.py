"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

import holocron.jobs
from holocron.cli import main
from holocron.errors import StoreConnectionError
from holocron.memory import MemoryDocumentStore, MemoryGraphStore


@pytest.fixture
def runner():
    return CliRunner()


class TestLoadCommands:
    """Tests for the seeding commands in dry-run mode."""

    def test_load_canon_dry_run(self, runner):
        result = runner.invoke(main, ["load", "canon", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "PASS" in result.output
        assert "birthworld" in result.output

    def test_load_timeline_dry_run(self, runner):
        result = runner.invoke(main, ["load", "timeline", "--dry-run"])
        assert result.exit_code == 0, result.output

    def test_load_file_dry_run(self, runner, tmp_path):
        path = tmp_path / "outer_rim.json"
        path.write_text(json.dumps({"locations": [{"name": "Jakku"}, {"name": "Lothal"}]}))

        result = runner.invoke(main, ["load", "file", str(path), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "outer_rim" in result.output

    def test_load_file_invalid(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"characters": [{"species": "Ewok"}]}))

        result = runner.invoke(main, ["load", "file", str(path), "--dry-run"])
        assert result.exit_code == 1

    def test_load_file_malformed_json(self, runner, tmp_path):
        path = tmp_path / "truncated.json"
        path.write_text('{"characters": [')

        result = runner.invoke(main, ["load", "file", str(path), "--dry-run"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "not valid JSON" in " ".join(result.output.split())

    def test_load_file_null_collection(self, runner, tmp_path):
        path = tmp_path / "null.json"
        path.write_text(json.dumps({"characters": None}))

        result = runner.invoke(main, ["load", "file", str(path), "--dry-run"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_load_politics_dry_run(self, runner):
        result = runner.invoke(main, ["load", "politics", "--dry-run"])

        # Factions come from canon, so every relationship is reported unmatched
        assert result.exit_code == 0, result.output
        assert "Rebel Alliance -> 'Galactic Empire'" in result.output

    def test_existing_duplicates_point_to_sweep(self, runner, monkeypatch):
        from contextlib import contextmanager

        documents = MemoryDocumentStore()
        documents.insert("characters", {"name": "Luke Skywalker"})
        documents.insert("characters", {"name": "Luke Skywalker"})

        @contextmanager
        def duplicated_stores(dry_run=False):
            yield documents, MemoryGraphStore()

        monkeypatch.setattr(holocron.jobs, "open_stores", duplicated_stores)
        result = runner.invoke(main, ["load", "canon"])

        assert result.exit_code == 1
        output = " ".join(result.output.split())
        assert "characters" in output
        assert "holocron sweep" in output

    def test_unreachable_store_exits_nonzero(self, runner, monkeypatch):
        def refuse():
            raise StoreConnectionError("MongoDB", "connection refused")

        monkeypatch.setattr(holocron.jobs, "connect_mongo", refuse)
        result = runner.invoke(main, ["load", "canon"])

        assert result.exit_code == 1
        assert "Cannot connect to MongoDB" in result.output


class TestValidateCommand:
    def test_empty_stores_fail(self, runner, monkeypatch):
        from contextlib import contextmanager

        @contextmanager
        def empty_stores(dry_run=False):
            yield MemoryDocumentStore(), MemoryGraphStore()

        monkeypatch.setattr(holocron.jobs, "open_stores", empty_stores)
        result = runner.invoke(main, ["validate", "--catalog", "canon"])

        assert result.exit_code == 1
        assert "FAIL" in result.output


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
