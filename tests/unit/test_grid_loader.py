"""Tests for the grid content loader."""

import asyncio

import pytest

from fossbox.core.catalog import Category, Section
from fossbox.core.config import GridConfig
from fossbox.core.errors import NetworkError, ProviderUnavailable
from fossbox.core.grid import GridContentLoader
from tests.mocks.providers import MockContentProvider, make_movies, make_shows


class RecordingBounds:
    """Collects every page count the loader reports."""

    def __init__(self) -> None:
        self.reported: list[int | None] = []

    def tighten_total_pages(self, reported: int | None) -> bool:
        self.reported.append(reported)
        return True


def make_loader(provider, renderer, grid_view, config=None) -> GridContentLoader:
    return GridContentLoader(provider, renderer, grid_view, config or GridConfig())


class TestLoad:
    """Tests for GridContentLoader.load()."""

    @pytest.mark.asyncio
    async def test_movies_section_uses_popular_movies(self, renderer, grid_view):
        provider = MockContentProvider(listings={Category.MOVIE_POPULAR: make_movies(4)})
        loader = make_loader(provider, renderer, grid_view)

        assert await loader.load(Section.MOVIES, 1)

        assert provider.category_calls == [(Category.MOVIE_POPULAR, 1)]
        assert grid_view.calls == ["show_placeholder", "show_items"]
        assert grid_view.titles == ["Movie 1", "Movie 2", "Movie 3", "Movie 4"]
        assert grid_view.placeholder is None

    @pytest.mark.asyncio
    async def test_tv_section_uses_popular_tv(self, renderer, grid_view):
        provider = MockContentProvider(listings={Category.TV_POPULAR: make_shows(2)})
        loader = make_loader(provider, renderer, grid_view)

        await loader.load(Section.TV, 2)

        assert provider.category_calls == [(Category.TV_POPULAR, 2)]
        assert grid_view.titles == ["Show 1", "Show 2"]

    @pytest.mark.asyncio
    async def test_placeholder_shown_while_pending(self, renderer, grid_view):
        provider = MockContentProvider(listings={Category.MOVIE_POPULAR: make_movies(1)})
        provider.hold(MockContentProvider.page_key(Category.MOVIE_POPULAR, 1))
        loader = make_loader(provider, renderer, grid_view)

        task = asyncio.create_task(loader.load(Section.MOVIES, 1))
        await asyncio.sleep(0)
        assert grid_view.placeholder == "Loading..."

        provider.release(MockContentProvider.page_key(Category.MOVIE_POPULAR, 1))
        assert await task
        assert grid_view.titles == ["Movie 1"]

    @pytest.mark.asyncio
    async def test_truncates_to_page_size(self, renderer, grid_view):
        provider = MockContentProvider(listings={Category.MOVIE_POPULAR: make_movies(50)})
        loader = make_loader(provider, renderer, grid_view)

        await loader.load(Section.MOVIES, 1)

        assert len(grid_view.elements) == 35

    @pytest.mark.asyncio
    async def test_mobile_page_size(self, renderer, grid_view):
        provider = MockContentProvider(listings={Category.MOVIE_POPULAR: make_movies(50)})
        loader = make_loader(provider, renderer, grid_view, GridConfig(page_size=15))

        await loader.load(Section.MOVIES, 1)

        assert len(grid_view.elements) == 15

    @pytest.mark.asyncio
    async def test_empty_page_shows_message(self, renderer, grid_view):
        loader = make_loader(MockContentProvider(), renderer, grid_view)

        assert await loader.load(Section.MOVIES, 1)

        assert grid_view.message == "No content found."
        assert grid_view.elements == []

    @pytest.mark.asyncio
    async def test_failure_shows_section_message(self, renderer, grid_view):
        provider = MockContentProvider(fail_with=NetworkError("HTTP 503"))
        loader = make_loader(provider, renderer, grid_view)

        assert not await loader.load(Section.MOVIES, 1)
        assert grid_view.message == "Failed to load movies"

        assert not await loader.load(Section.TV, 1)
        assert grid_view.message == "Failed to load TV shows"

    @pytest.mark.asyncio
    async def test_unavailable_provider_shows_failure(self, renderer, grid_view):
        provider = MockContentProvider(fail_with=ProviderUnavailable("no key"))
        loader = make_loader(provider, renderer, grid_view)

        assert not await loader.load(Section.MOVIES, 1)
        assert grid_view.message == "Failed to load movies"


class TestPageBounds:
    @pytest.mark.asyncio
    async def test_reports_total_pages(self, renderer, grid_view):
        provider = MockContentProvider(
            listings={Category.MOVIE_POPULAR: make_movies(2)}, total_pages=42
        )
        loader = make_loader(provider, renderer, grid_view)
        bounds = RecordingBounds()
        loader.page_bounds = bounds

        await loader.load(Section.MOVIES, 1)

        assert bounds.reported == [42]

    @pytest.mark.asyncio
    async def test_failure_reports_nothing(self, renderer, grid_view):
        provider = MockContentProvider(fail_with=NetworkError("HTTP 500"))
        loader = make_loader(provider, renderer, grid_view)
        bounds = RecordingBounds()
        loader.page_bounds = bounds

        await loader.load(Section.MOVIES, 1)

        assert bounds.reported == []


class TestStaleLoads:
    @pytest.mark.asyncio
    async def test_older_page_arriving_last_is_dropped(self, renderer, grid_view):
        """Rapid page clicks paint only the most recent page."""
        provider = MockContentProvider(
            pages={
                (Category.MOVIE_POPULAR, 2): make_movies(2, prefix="Two"),
                (Category.MOVIE_POPULAR, 3): make_movies(2, prefix="Three"),
            }
        )
        key_two = MockContentProvider.page_key(Category.MOVIE_POPULAR, 2)
        key_three = MockContentProvider.page_key(Category.MOVIE_POPULAR, 3)
        provider.hold(key_two)
        provider.hold(key_three)
        loader = make_loader(provider, renderer, grid_view)

        first = asyncio.create_task(loader.load(Section.MOVIES, 2))
        second = asyncio.create_task(loader.load(Section.MOVIES, 3))
        await asyncio.sleep(0)

        provider.release(key_three)
        assert await second
        provider.release(key_two)
        assert not await first

        assert grid_view.titles == ["Three 1", "Three 2"]

    @pytest.mark.asyncio
    async def test_stale_failure_is_dropped(self, renderer, grid_view):
        provider = MockContentProvider(listings={Category.MOVIE_POPULAR: make_movies(1)})
        key = MockContentProvider.page_key(Category.MOVIE_POPULAR, 1)
        provider.hold(key)
        loader = make_loader(provider, renderer, grid_view)

        first = asyncio.create_task(loader.load(Section.MOVIES, 1))
        await asyncio.sleep(0)
        provider.fail_with = NetworkError("HTTP 500")
        second = asyncio.create_task(loader.load(Section.MOVIES, 2))
        assert not await second
        assert grid_view.message == "Failed to load movies"

        provider.fail_with = None
        provider.release(key)
        assert not await first
        assert grid_view.message == "Failed to load movies"
