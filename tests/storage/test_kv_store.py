from __future__ import annotations

from src.brigade_pay.brigade_pay.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, build_store


def test_in_memory_store_returns_copies():
    store = InMemoryKeyValueStore()
    value = [{"a": 1}]
    store.set("k", value)
    value.append({"b": 2})

    assert store.get("k") == [{"a": 1}]
    assert store.get("missing", []) == []


def test_json_file_store_persists_between_instances(tmp_path):
    path = tmp_path / "data" / "users.json"
    JsonFileKeyValueStore(path).set("users", [{"username": "ż"}])

    reopened = JsonFileKeyValueStore(path)

    assert reopened.get("users") == [{"username": "ż"}]
    reopened.delete("users")
    assert JsonFileKeyValueStore(path).get("users") is None


def test_build_store_picks_backend(tmp_path):
    assert isinstance(build_store(""), InMemoryKeyValueStore)
    assert isinstance(build_store(str(tmp_path / "u.json")), JsonFileKeyValueStore)
