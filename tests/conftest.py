"""Shared pytest fixtures for fossbox tests."""

import pytest

from fossbox.adapters import (
    HtmlItemRenderer,
    MemoryGridView,
    MemoryNavigator,
    MemoryResultsPanel,
)
from tests.mocks.providers import MockContentProvider
from tests.mocks.timers import FakeTimer


@pytest.fixture
def fake_timer() -> FakeTimer:
    """Provide a manually advanced timer.

    Returns:
        FakeTimer: A virtual clock starting at 0 seconds.
    """
    return FakeTimer()


@pytest.fixture
def mock_provider() -> MockContentProvider:
    """Provide an empty mock content provider.

    Tests fill in listings or search results as needed, or construct a
    MockContentProvider directly.

    Returns:
        MockContentProvider: A provider with no data.
    """
    return MockContentProvider()


@pytest.fixture
def navigator() -> MemoryNavigator:
    """Provide a navigator that records visited URLs."""
    return MemoryNavigator()


@pytest.fixture
def renderer(navigator: MemoryNavigator) -> HtmlItemRenderer:
    """Provide an HTML renderer wired to the recording navigator."""
    return HtmlItemRenderer(navigator)


@pytest.fixture
def results_panel() -> MemoryResultsPanel:
    """Provide an in-memory search results panel."""
    return MemoryResultsPanel()


@pytest.fixture
def grid_view() -> MemoryGridView:
    """Provide an in-memory grid view."""
    return MemoryGridView()
