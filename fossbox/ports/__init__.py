"""Ports (interfaces) for the application.

This module contains Protocol definitions that define the boundaries between
the controllers and the host environment: rendering, navigation, view
surfaces, preference storage and timers.
"""

from fossbox.ports.storage import KeyValueStore
from fossbox.ports.timers import Timer, TimerHandle, resolve_timer
from fossbox.ports.ui import (
    CarouselView,
    DisplayElement,
    GridView,
    ItemRenderer,
    LinkBoxView,
    Navigator,
    PaginationView,
    ResultsPanel,
)

__all__ = [
    # Data classes
    "DisplayElement",
    # Collaborators
    "ItemRenderer",
    "KeyValueStore",
    "Navigator",
    # Views
    "CarouselView",
    "GridView",
    "LinkBoxView",
    "PaginationView",
    "ResultsPanel",
    # Timers
    "Timer",
    "TimerHandle",
    "resolve_timer",
]
