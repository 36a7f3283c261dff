"""Fetch-and-render of one grid page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from fossbox.core.catalog import Section
from fossbox.core.config import GridConfig
from fossbox.core.errors import CatalogError
from fossbox.core.logging import get_logger

if TYPE_CHECKING:
    from fossbox.core.providers import ContentProvider
    from fossbox.ports.ui import GridView, ItemRenderer

logger = get_logger(__name__)


class PageBounds(Protocol):
    """Receiver of authoritative page counts (the pagination controller)."""

    def tighten_total_pages(self, reported: int | None) -> bool: ...


class GridContentLoader:
    """Loads a (section, page) into the grid view.

    Each load() bumps a generation number; a response that arrives after a
    newer load() started is dropped, so rapid page clicks cannot paint an
    older page over a newer one.
    """

    def __init__(
        self,
        provider: ContentProvider,
        renderer: ItemRenderer,
        view: GridView,
        config: GridConfig,
    ) -> None:
        self._provider = provider
        self._renderer = renderer
        self._view = view
        self._config = config
        self._generation = 0
        self.page_bounds: PageBounds | None = None

    async def load(self, section: Section, page: int) -> bool:
        """Show ``page`` of ``section``.

        Returns:
            True if the page was painted (including an empty page), False on
            failure or when a newer load superseded this one.
        """
        self._generation += 1
        generation = self._generation
        self._view.show_placeholder(self._config.loading_message)

        try:
            result = await self._provider.fetch_by_category(section.category, page)
        except CatalogError as ex:
            if generation != self._generation:
                return False
            logger.warning(
                "grid_load_failed",
                section=section.value,
                page=page,
                category=ex.category.name,
                error=str(ex),
            )
            self._view.show_message(f"Failed to load {section.noun}")
            return False

        if generation != self._generation:
            logger.debug("grid_stale_response_dropped", section=section.value, page=page)
            return False

        items = list(result.items)[: self._config.page_size]
        if items:
            self._view.show_items([self._renderer.render(item) for item in items])
        else:
            self._view.show_message(self._config.empty_message)
        logger.debug("grid_page_loaded", section=section.value, page=page, count=len(items))

        if self.page_bounds is not None:
            self.page_bounds.tighten_total_pages(result.total_pages)
        return True
