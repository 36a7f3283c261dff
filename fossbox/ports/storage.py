"""Key-value storage protocol for user preferences."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Protocol for persistent string/bool preferences.

    Mirrors browser local storage: keys and values are plain strings or
    booleans, and a missing key yields the supplied default.
    """

    def get(self, key: str, default: str | bool | None = None) -> str | bool | None:
        """Return the stored value for ``key`` or ``default``."""
        ...

    def set(self, key: str, value: str | bool) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key`` if present."""
        ...
