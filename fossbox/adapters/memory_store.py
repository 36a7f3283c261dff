"""In-memory implementation of the KeyValueStore protocol.

Suitable for tests and for hosts without persistent storage. Values are lost
when the instance is destroyed.
"""


class MemoryKeyValueStore:
    """Dictionary-backed preference store.

    Example:
        store = MemoryKeyValueStore({"fossbox-section": "tv"})
        store.get("fossbox-section")  # "tv"
    """

    def __init__(self, initial: dict[str, str | bool] | None = None) -> None:
        self._values: dict[str, str | bool] = dict(initial or {})

    def get(self, key: str, default: str | bool | None = None) -> str | bool | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str | bool) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)
