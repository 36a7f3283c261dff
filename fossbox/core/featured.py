"""Sidebar boxes of top movies, top TV shows and featured picks."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING

from fossbox.core.catalog import CatalogItem, Category
from fossbox.core.errors import CatalogError
from fossbox.core.logging import get_logger

if TYPE_CHECKING:
    from fossbox.core.providers import ContentProvider
    from fossbox.ports.ui import ItemRenderer, LinkBoxView

logger = get_logger(__name__)

TOP_MOVIES_BOX = "top-movies"
TOP_TV_BOX = "top-tv"
FEATURED_BOX = "featured"
NO_CONTENT_MESSAGE = "No content available"


class FeaturedLinksLoader:
    """Fills the sidebar link boxes.

    Both listings are fetched concurrently. A failed listing only empties
    the boxes that depend on it.
    """

    def __init__(
        self,
        provider: ContentProvider,
        renderer: ItemRenderer,
        view: LinkBoxView,
        top_count: int = 6,
        featured_count: int = 3,
    ) -> None:
        self._provider = provider
        self._renderer = renderer
        self._view = view
        self._top_count = top_count
        self._featured_count = featured_count

    async def load(self) -> None:
        top_movies, top_tv = await asyncio.gather(
            self._top(Category.MOVIE_POPULAR),
            self._top(Category.TV_POPULAR),
        )
        self._fill(TOP_MOVIES_BOX, top_movies)
        self._fill(TOP_TV_BOX, top_tv)
        self._fill(FEATURED_BOX, top_movies[: self._featured_count])

    async def _top(self, category: Category) -> list[CatalogItem]:
        try:
            page = await self._provider.fetch_by_category(category, 1)
        except CatalogError as ex:
            logger.warning(
                "featured_listing_failed", category=category.value, error=str(ex)
            )
            return []
        return list(page.items)[: self._top_count]

    def _fill(self, box: str, items: Sequence[CatalogItem]) -> None:
        if not items:
            self._view.show_message(box, NO_CONTENT_MESSAGE)
            return
        self._view.show_links(box, [self._renderer.render(item) for item in items])
