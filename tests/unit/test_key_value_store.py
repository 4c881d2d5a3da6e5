"""Unit тесты для InMemoryKeyValueStore."""

import pytest

from src.core.errors import PersistenceError
from src.store import InMemoryKeyValueStore


def test_get_absent_returns_none(kv):
    assert kv.get("missing") is None
    assert not kv.contains("missing")


def test_put_then_get(kv):
    kv.put("k", b"v")

    assert kv.get("k") == b"v"
    assert kv.contains("k")


def test_put_overwrites(kv):
    kv.put("k", b"v1")
    kv.put("k", b"v2")

    assert kv.get("k") == b"v2"
    assert kv.keys() == ["k"]


def test_put_rejects_non_bytes(kv):
    with pytest.raises(PersistenceError):
        kv.put("k", "text")


def test_initial_data_is_copied():
    initial = {"k": b"v"}
    store = InMemoryKeyValueStore(initial)
    store.put("k2", b"v2")

    assert "k2" not in initial
    assert store.snapshot() == {"k": b"v", "k2": b"v2"}
