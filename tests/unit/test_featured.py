"""Tests for the sidebar featured links."""

import pytest

from fossbox.adapters import MemoryLinkBoxView
from fossbox.core.catalog import Category
from fossbox.core.errors import NetworkError
from fossbox.core.featured import (
    FEATURED_BOX,
    NO_CONTENT_MESSAGE,
    TOP_MOVIES_BOX,
    TOP_TV_BOX,
    FeaturedLinksLoader,
)
from tests.mocks.providers import MockContentProvider, make_movies, make_shows


class FailingTvProvider(MockContentProvider):
    """Fails only the TV listing."""

    async def fetch_by_category(self, category, page):
        if category is Category.TV_POPULAR:
            self.category_calls.append((category, page))
            raise NetworkError("HTTP 500")
        return await super().fetch_by_category(category, page)


@pytest.fixture
def link_view() -> MemoryLinkBoxView:
    return MemoryLinkBoxView()


class TestFeaturedLinksLoader:
    @pytest.mark.asyncio
    async def test_fills_all_boxes(self, renderer, link_view):
        provider = MockContentProvider(
            listings={
                Category.MOVIE_POPULAR: make_movies(10),
                Category.TV_POPULAR: make_shows(10),
            }
        )
        loader = FeaturedLinksLoader(provider, renderer, link_view)

        await loader.load()

        assert link_view.titles(TOP_MOVIES_BOX) == [f"Movie {i}" for i in range(1, 7)]
        assert link_view.titles(TOP_TV_BOX) == [f"Show {i}" for i in range(1, 7)]
        assert link_view.titles(FEATURED_BOX) == ["Movie 1", "Movie 2", "Movie 3"]
        assert sorted(provider.category_calls) == sorted(
            [(Category.MOVIE_POPULAR, 1), (Category.TV_POPULAR, 1)]
        )

    @pytest.mark.asyncio
    async def test_failed_listing_only_empties_its_boxes(self, renderer, link_view):
        provider = FailingTvProvider(listings={Category.MOVIE_POPULAR: make_movies(4)})
        loader = FeaturedLinksLoader(provider, renderer, link_view)

        await loader.load()

        assert link_view.snapshot() == {
            FEATURED_BOX: ["Movie 1", "Movie 2", "Movie 3"],
            TOP_MOVIES_BOX: ["Movie 1", "Movie 2", "Movie 3", "Movie 4"],
            TOP_TV_BOX: NO_CONTENT_MESSAGE,
        }

    @pytest.mark.asyncio
    async def test_total_failure_shows_messages(self, renderer, link_view):
        provider = MockContentProvider(fail_with=NetworkError("HTTP 500"))
        loader = FeaturedLinksLoader(provider, renderer, link_view)

        await loader.load()

        assert link_view.messages == {
            TOP_MOVIES_BOX: NO_CONTENT_MESSAGE,
            TOP_TV_BOX: NO_CONTENT_MESSAGE,
            FEATURED_BOX: NO_CONTENT_MESSAGE,
        }

    @pytest.mark.asyncio
    async def test_custom_counts(self, renderer, link_view):
        provider = MockContentProvider(
            listings={
                Category.MOVIE_POPULAR: make_movies(10),
                Category.TV_POPULAR: make_shows(10),
            }
        )
        loader = FeaturedLinksLoader(
            provider, renderer, link_view, top_count=2, featured_count=1
        )

        await loader.load()

        assert link_view.titles(TOP_TV_BOX) == ["Show 1", "Show 2"]
        assert link_view.titles(FEATURED_BOX) == ["Movie 1"]

    @pytest.mark.asyncio
    async def test_link_click_navigates(self, navigator, renderer, link_view):
        provider = MockContentProvider(listings={Category.TV_POPULAR: make_shows(1)})
        loader = FeaturedLinksLoader(provider, renderer, link_view)

        await loader.load()
        link_view.boxes[TOP_TV_BOX][0].click()

        assert navigator.current_url == "player.html?id=show-1&type=tv&title=Show+1"
