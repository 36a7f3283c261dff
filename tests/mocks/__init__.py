"""Mock implementations for testing."""

from tests.mocks.providers import MockContentProvider, make_movies, make_shows
from tests.mocks.timers import FakeTimer, FakeTimerHandle

__all__ = [
    "FakeTimer",
    "FakeTimerHandle",
    "MockContentProvider",
    "make_movies",
    "make_shows",
]
