# =============================================================================
# tests/test_stores.py - Reference Collaborator Tests
# =============================================================================
# Tests for:
# - InMemoryConfigAccessor snapshot semantics
# - JsonFileConfigAccessor file format, normalization and error handling
# - StaticSessionRegistry
# =============================================================================

import json
import threading

import pytest

from deej_core.interfaces import PersistenceError
from deej_core.stores import (
    InMemoryConfigAccessor,
    JsonFileConfigAccessor,
    StaticSessionRegistry,
    parse_mapping,
)


# =============================================================================
# parse_mapping
# =============================================================================

class TestParseMapping:
    """Test conversion of the decoded JSON mapping."""

    def test_string_and_list_values(self):
        assert parse_mapping({"0": "master", "1": ["a.exe", "b.exe"]}) == {
            0: ["master"],
            1: ["a.exe", "b.exe"],
        }

    def test_null_value_is_empty(self):
        assert parse_mapping({"3": None}) == {3: []}

    def test_none_is_empty_mapping(self):
        assert parse_mapping(None) == {}

    def test_bad_entries_skipped(self, caplog):
        mapping = parse_mapping({"x": "a.exe", "-2": "b.exe", "4": 12, "5": ["ok.exe", 3], "6": "ok.exe"})

        assert mapping == {6: ["ok.exe"]}
        assert len([r for r in caplog.records if r.name == "deej_core.stores"]) == 4

    def test_non_object_rejected(self):
        with pytest.raises(PersistenceError) as exc_info:
            parse_mapping(["master"])

        assert exc_info.value.code == "INVALID_MAPPING"


# =============================================================================
# InMemoryConfigAccessor
# =============================================================================

class TestInMemoryConfigAccessor:
    """Test the in-memory accessor."""

    def test_starts_empty(self):
        assert InMemoryConfigAccessor().get_mapping() == {}

    def test_returned_mapping_is_a_copy(self):
        accessor = InMemoryConfigAccessor({0: ["a.exe"]})

        mapping = accessor.get_mapping()
        mapping[0].append("b.exe")
        mapping[1] = ["c.exe"]

        assert accessor.get_mapping() == {0: ["a.exe"]}

    def test_write_replaces_whole_snapshot(self):
        accessor = InMemoryConfigAccessor({0: ["a.exe"], 1: ["b.exe"]})

        accessor.write_mapping({2: ["c.exe"]})

        assert accessor.get_mapping() == {2: ["c.exe"]}

    def test_written_mapping_is_copied(self):
        accessor = InMemoryConfigAccessor()
        mapping = {0: ["a.exe"]}

        accessor.write_mapping(mapping)
        mapping[0].append("b.exe")

        assert accessor.get_mapping() == {0: ["a.exe"]}


# =============================================================================
# JsonFileConfigAccessor
# =============================================================================

class TestJsonFileConfigAccessor:
    """Test the JSON file accessor."""

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonFileConfigAccessor(tmp_path / "config.json").get_mapping() == {}

    def test_blank_file_is_empty(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("  \n")

        assert JsonFileConfigAccessor(path).get_mapping() == {}

    def test_reads_mapping(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"slider_mapping": {"0": "master", "2": ["chrome.exe"]}}))

        assert JsonFileConfigAccessor(path).get_mapping() == {0: ["master"], 2: ["chrome.exe"]}

    def test_write_then_read(self, tmp_path):
        accessor = JsonFileConfigAccessor(tmp_path / "config.json")

        accessor.write_mapping({1: ["spotify.exe"], 0: ["master"]})

        assert accessor.get_mapping() == {0: ["master"], 1: ["spotify.exe"]}
        document = json.loads((tmp_path / "config.json").read_text())
        assert document == {"slider_mapping": {"0": ["master"], "1": ["spotify.exe"]}}

    def test_write_preserves_other_settings(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"com_port": "COM4", "slider_mapping": {"0": "master"}}))

        JsonFileConfigAccessor(path).write_mapping({0: ["chrome.exe"]})

        document = json.loads(path.read_text())
        assert document["com_port"] == "COM4"
        assert document["slider_mapping"] == {"0": ["chrome.exe"]}

    def test_write_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "config.json"

        JsonFileConfigAccessor(path).write_mapping({0: ["master"]})

        assert path.is_file()

    def test_write_leaves_no_temp_files(self, tmp_path):
        accessor = JsonFileConfigAccessor(tmp_path / "config.json")

        accessor.write_mapping({0: ["master"]})
        accessor.write_mapping({0: ["chrome.exe"]})

        assert [p.name for p in tmp_path.iterdir()] == ["config.json"]

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"slider_mapping": "master"}'])
    def test_malformed_file_raises(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content)

        with pytest.raises(PersistenceError):
            JsonFileConfigAccessor(path).get_mapping()

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        accessor = JsonFileConfigAccessor(blocker / "config.json")

        with pytest.raises(PersistenceError):
            accessor.write_mapping({0: ["master"]})

    def test_concurrent_writes_keep_file_valid(self, tmp_path):
        accessor = JsonFileConfigAccessor(tmp_path / "config.json")

        def write(slider):
            for _ in range(10):
                accessor.write_mapping({slider: [f"app{slider}.exe"]})

        threads = [threading.Thread(target=write, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        mapping = accessor.get_mapping()
        assert len(mapping) == 1
        slider, apps = next(iter(mapping.items()))
        assert apps == [f"app{slider}.exe"]


# =============================================================================
# StaticSessionRegistry
# =============================================================================

class TestStaticSessionRegistry:
    """Test the list-backed session registry."""

    def test_empty_by_default(self):
        assert StaticSessionRegistry().list_keys() == []

    def test_returns_copy(self):
        registry = StaticSessionRegistry(["a.exe"])

        registry.list_keys().append("b.exe")

        assert registry.list_keys() == ["a.exe"]

    def test_set_keys(self):
        registry = StaticSessionRegistry(("a.exe",))

        registry.set_keys(["b.exe", "c.exe"])

        assert registry.list_keys() == ["b.exe", "c.exe"]
