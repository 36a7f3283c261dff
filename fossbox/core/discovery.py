"""Random "discover" shelves of movies or TV shows."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from fossbox.core.catalog import Category, MediaKind
from fossbox.core.errors import CatalogError
from fossbox.core.logging import get_logger

if TYPE_CHECKING:
    from fossbox.core.providers import ContentProvider
    from fossbox.ports.ui import GridView, ItemRenderer

logger = get_logger(__name__)

SHELF_CATEGORIES: dict[MediaKind, tuple[Category, ...]] = {
    MediaKind.MOVIE: (
        Category.MOVIE_POPULAR,
        Category.MOVIE_TOP_RATED,
        Category.MOVIE_NOW_PLAYING,
    ),
    MediaKind.TV: (
        Category.TV_POPULAR,
        Category.TV_TOP_RATED,
        Category.TV_ON_THE_AIR,
    ),
}

_NOUNS = {MediaKind.MOVIE: "movies", MediaKind.TV: "TV shows"}


class RandomShelf:
    """A grid refilled with a shuffled page of a random listing.

    Attributes:
        kind: Which kind of items the shelf shows.
    """

    def __init__(
        self,
        provider: ContentProvider,
        renderer: ItemRenderer,
        view: GridView,
        kind: MediaKind,
        size: int = 35,
        max_page: int = 20,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the shelf.

        Args:
            provider: Source of listings.
            renderer: Renders each item.
            view: The grid to fill.
            kind: Movies or TV shows.
            size: Items shown after shuffling.
            max_page: Pages are drawn uniformly from ``[1, max_page]``.
            rng: Random source; a fresh ``random.Random`` by default.
        """
        self._provider = provider
        self._renderer = renderer
        self._view = view
        self.kind = kind
        self._size = size
        self._max_page = max_page
        self._rng = rng or random.Random()
        self._generation = 0

    async def refresh(self) -> bool:
        """Load a new random selection.

        Returns:
            True if items were painted.
        """
        self._generation += 1
        generation = self._generation
        noun = _NOUNS[self.kind]
        self._view.show_placeholder(f"Loading random {noun}...")

        category = self._rng.choice(SHELF_CATEGORIES[self.kind])
        page = self._rng.randint(1, self._max_page)

        try:
            result = await self._provider.fetch_by_category(category, page)
        except CatalogError as ex:
            if generation == self._generation:
                logger.warning(
                    "random_shelf_failed",
                    category=category.value,
                    page=page,
                    error=str(ex),
                )
                self._view.show_message(f"Failed to load {noun}. Try again!")
            return False

        if generation != self._generation:
            return False

        items = list(result.items)
        self._rng.shuffle(items)
        items = items[: self._size]
        if not items:
            self._view.show_message("No content found.")
            return False
        self._view.show_items([self._renderer.render(item) for item in items])
        logger.debug(
            "random_shelf_loaded", category=category.value, page=page, count=len(items)
        )
        return True
