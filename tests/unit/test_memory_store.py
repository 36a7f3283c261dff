"""Tests for the in-memory preference store."""

from fossbox.adapters import MemoryKeyValueStore


class TestMemoryKeyValueStore:
    def test_get_missing_returns_default(self) -> None:
        store = MemoryKeyValueStore()
        assert store.get("fossbox-section") is None
        assert store.get("fossbox-section", "movies") == "movies"

    def test_set_and_get(self) -> None:
        store = MemoryKeyValueStore()
        store.set("fossbox-section", "tv")
        store.set("autoplay", False)
        assert store.get("fossbox-section") == "tv"
        assert store.get("autoplay") is False
        assert len(store) == 2

    def test_initial_values_are_copied(self) -> None:
        initial = {"fossbox-section": "tv"}
        store = MemoryKeyValueStore(initial)
        store.set("fossbox-section", "movies")
        assert initial == {"fossbox-section": "tv"}

    def test_remove_and_clear(self) -> None:
        store = MemoryKeyValueStore({"a": "1", "b": "2"})
        store.remove("a")
        store.remove("missing")
        assert store.get("a") is None
        store.clear()
        assert len(store) == 0
