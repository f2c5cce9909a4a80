"""Tests for frame/configs.py — named configuration store."""
import json
import logging
import pytest
from shared.types import FrameSpec
from frame.configs import ConfigStore, ConfigError, SavedConfig


@pytest.fixture
def store(tmp_path):
    return ConfigStore(str(tmp_path / "configs.json"))


class TestConfigStore:
    def test_empty_when_missing(self, store):
        assert store.entries() == []

    def test_save_and_load(self, store, arched_spec):
        saved = store.save("Front door", arched_spec)
        assert isinstance(saved, SavedConfig)
        assert saved.timestamp > 0
        assert store.load("Front door") == arched_spec

    def test_name_trimmed(self, store, square_spec):
        store.save("  Kitchen  ", square_spec)
        assert store.names() == ["Kitchen"]

    def test_empty_name_rejected(self, store, square_spec):
        with pytest.raises(ValueError, match="empty"):
            store.save("   ", square_spec)

    def test_existing_needs_overwrite(self, store, square_spec, arched_spec):
        store.save("A", square_spec)
        with pytest.raises(ConfigError, match="already exists"):
            store.save("A", arched_spec)
        store.save("A", arched_spec, overwrite=True)
        assert store.names() == ["A"]
        assert store.load("A") == arched_spec

    def test_order_preserved(self, store, square_spec):
        for name in ("b", "a", "c"):
            store.save(name, square_spec)
        assert store.names() == ["b", "a", "c"]

    def test_delete(self, store, square_spec):
        store.save("A", square_spec)
        store.save("B", square_spec)
        store.delete("A")
        assert store.names() == ["B"]

    def test_unknown_name(self, store):
        with pytest.raises(ConfigError):
            store.load("nope")
        with pytest.raises(ConfigError):
            store.delete("nope")

    def test_file_format(self, store, square_spec):
        store.save("A", square_spec)
        with open(store.path) as f:
            records = json.load(f)
        assert records[0]["name"] == "A"
        assert records[0]["params"]["width"] == 48
        assert "timestamp" in records[0]

    def test_corrupt_file_treated_as_empty(self, store, caplog):
        with open(store.path, "w") as f:
            f.write("{not json")
        with caplog.at_level(logging.ERROR):
            assert store.entries() == []
        assert "Error loading configs" in caplog.text

    def test_missing_optional_params_default(self, store):
        with open(store.path, "w") as f:
            json.dump([{"name": "old", "timestamp": 1,
                        "params": {"width": 30, "height": 40, "ideal_spacing": 3}}], f)
        assert store.load("old") == FrameSpec(width=30, height=40, ideal_spacing=3)

    def test_malformed_records_skipped(self, store, caplog):
        good = {"name": "ok", "timestamp": 5,
                "params": {"width": 30, "height": 40, "ideal_spacing": 3}}
        with open(store.path, "w") as f:
            json.dump([7, {"name": "no-params", "timestamp": 1}, {"name": "no-ts", "params": {}},
                       {"name": "bad-spec", "timestamp": 1, "params": {"width": 30}}, good], f)
        with caplog.at_level(logging.ERROR):
            assert store.names() == ["ok"]
            assert store.load("ok") == FrameSpec(width=30, height=40, ideal_spacing=3)
        assert "Skipping malformed config record 0" in caplog.text

    def test_save_over_malformed_file(self, store, square_spec):
        with open(store.path, "w") as f:
            json.dump(["junk"], f)
        store.save("A", square_spec)
        store.delete("A")
        assert store.entries() == []


def test_store_method_names_do_not_shadow_builtins():
    # methods named after builtins break annotations evaluated in the class body
    assert not {"list", "dict", "str"} & set(vars(ConfigStore))
