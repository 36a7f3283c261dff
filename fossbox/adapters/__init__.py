"""Adapters for the host environment.

This module contains implementations of the presentation and storage ports:
an HTML item renderer plus in-memory stores, views and navigator.
"""

from fossbox.adapters.html_renderer import HtmlItemRenderer
from fossbox.adapters.memory_store import MemoryKeyValueStore
from fossbox.adapters.memory_views import (
    MemoryCarouselView,
    MemoryGridView,
    MemoryLinkBoxView,
    MemoryNavigator,
    MemoryPaginationView,
    MemoryResultsPanel,
)

__all__ = [
    "HtmlItemRenderer",
    "MemoryCarouselView",
    "MemoryGridView",
    "MemoryKeyValueStore",
    "MemoryLinkBoxView",
    "MemoryNavigator",
    "MemoryPaginationView",
    "MemoryResultsPanel",
]
