"""Local state store behavior"""
import json

import pytest

from mindsync.infra.storage import FileStateStore, InMemoryStateStore


def test_file_store_roundtrip(tmp_path):
    store = FileStateStore(tmp_path / "state")
    assert store.load("mindsync-timer-state") is None

    store.save("mindsync-timer-state", {"elapsed_seconds": 12})
    assert store.load("mindsync-timer-state") == {"elapsed_seconds": 12}
    assert json.loads((tmp_path / "state" / "mindsync-timer-state.json").read_text()) == {"elapsed_seconds": 12}

    store.save("mindsync-timer-state", {"elapsed_seconds": 13})
    assert store.load("mindsync-timer-state") == {"elapsed_seconds": 13}


def test_file_store_remove_is_idempotent(tmp_path):
    store = FileStateStore(tmp_path)
    store.save("key", {"a": 1})
    store.remove("key")
    store.remove("key")
    assert store.load("key") is None


def test_file_store_corrupt_entry_loads_as_none(tmp_path):
    (tmp_path / "mindsync-bloom-streak.json").write_text("{not json")
    store = FileStateStore(tmp_path)
    assert store.load("mindsync-bloom-streak") is None


def test_file_store_non_object_loads_as_none(tmp_path):
    (tmp_path / "key.json").write_text("[1, 2]")
    assert FileStateStore(tmp_path).load("key") is None


def test_file_store_write_failure_is_swallowed(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("a file where a directory should be")
    store = FileStateStore(blocker / "state")
    store.save("key", {"a": 1})
    assert store.load("key") is None


def test_file_store_rejects_path_keys(tmp_path):
    with pytest.raises(ValueError):
        FileStateStore(tmp_path).load("../escape")


def test_in_memory_store():
    store = InMemoryStateStore({"broken": "{{", "ok": '{"x": 1}'})
    assert store.load("broken") is None
    assert store.load("ok") == {"x": 1}
    store.save("new", {"y": 2})
    assert store.raw("new") == '{"y": 2}'
    store.remove("new")
    assert store.raw("new") is None
