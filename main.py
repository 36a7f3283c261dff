"""Console entry point: wires the controllers to TMDB and in-memory views.

Usage:
    TMDB_API_KEY=... python main.py [search text]
"""

import asyncio
import os
import sys

from fossbox.adapters import (
    HtmlItemRenderer,
    MemoryCarouselView,
    MemoryGridView,
    MemoryKeyValueStore,
    MemoryLinkBoxView,
    MemoryNavigator,
    MemoryPaginationView,
    MemoryResultsPanel,
)
from fossbox.core import (
    AppConfig,
    CarouselController,
    FeaturedLinksLoader,
    GridContentLoader,
    PaginationController,
    SearchController,
)
from fossbox.core.logging import bind_contextvars, configure_logging, get_logger
from fossbox.providers import TmdbProvider

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)


async def main(query: str | None = None) -> None:
    """Load every surface once and log what it shows."""
    config = AppConfig.from_env()
    bind_contextvars(profile=os.getenv("FOSSBOX_PROFILE", "desktop"))

    provider = TmdbProvider(config.tmdb)
    navigator = MemoryNavigator()
    renderer = HtmlItemRenderer(navigator)

    carousel_view = MemoryCarouselView()
    carousel = CarouselController(config.carousel, carousel_view)
    await carousel.refresh(provider)
    logger.info(
        "carousel_ready",
        phase=carousel.phase.value,
        slides=carousel.state.total_slides,
        caption=carousel.caption,
    )

    links_view = MemoryLinkBoxView()
    await FeaturedLinksLoader(provider, renderer, links_view).load()
    logger.info("sidebar_ready", boxes=links_view.snapshot())

    if query:
        panel = MemoryResultsPanel()
        search = SearchController(
            provider, renderer, panel, config.header_search, navigator=navigator
        )
        search.submit(query)
        await search.wait_idle()
        logger.info(
            "search_ready",
            query=query,
            visible=panel.visible,
            message=panel.message,
            titles=panel.titles,
        )
        search.open_full_results(query)
        logger.info("search_page_url", url=navigator.current_url)

    grid_view = MemoryGridView()
    pagination_view = MemoryPaginationView()
    loader = GridContentLoader(provider, renderer, grid_view, config.grid)
    pagination = PaginationController(
        loader, config.grid, pagination_view, MemoryKeyValueStore()
    )
    await pagination.go_to_page(1)
    logger.info(
        "grid_ready",
        section=pagination.section.value,
        count=len(grid_view.elements),
        message=grid_view.message,
        window=pagination_view.window,
    )

    carousel.stop()


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or None))
