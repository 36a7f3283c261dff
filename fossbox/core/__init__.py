"""Core interaction controllers and protocols.

This module contains the platform-agnostic controllers behind the catalog
page (carousel, search, pagination, grid loading) and the types they share.
"""

from fossbox.core.carousel import (
    CarouselController,
    CarouselPhase,
    CarouselState,
    Slide,
    slides_from_items,
)
from fossbox.core.catalog import (
    CatalogItem,
    Category,
    MediaKind,
    Movie,
    Section,
    Show,
    classify_media_kind,
)
from fossbox.core.config import (
    AppConfig,
    CarouselConfig,
    GridConfig,
    SearchConfig,
    TmdbConfig,
)
from fossbox.core.debounce import DebounceScheduler
from fossbox.core.discovery import RandomShelf
from fossbox.core.errors import (
    CatalogError,
    EmptyResult,
    ErrorCategory,
    NetworkError,
    ProviderUnavailable,
    classify_error,
)
from fossbox.core.featured import FeaturedLinksLoader
from fossbox.core.grid import GridContentLoader
from fossbox.core.logging import (
    bind_contextvars,
    configure_logging,
    get_logger,
)
from fossbox.core.navigation import detail_url_for, search_url_for
from fossbox.core.pagination import (
    ELLIPSIS,
    PageState,
    PaginationController,
    page_window,
)
from fossbox.core.providers import CatalogPage, ContentProvider
from fossbox.core.search import (
    SearchController,
    SearchPhase,
    SearchQuery,
    SearchResultSet,
)

__all__ = [
    # Carousel
    "CarouselController",
    "CarouselPhase",
    "CarouselState",
    "Slide",
    "slides_from_items",
    # Catalog types
    "CatalogItem",
    "Category",
    "MediaKind",
    "Movie",
    "Section",
    "Show",
    "classify_media_kind",
    # Configuration
    "AppConfig",
    "CarouselConfig",
    "GridConfig",
    "SearchConfig",
    "TmdbConfig",
    # Debounce
    "DebounceScheduler",
    # Error handling
    "CatalogError",
    "EmptyResult",
    "ErrorCategory",
    "NetworkError",
    "ProviderUnavailable",
    "classify_error",
    # Grid, sidebar and shelves
    "FeaturedLinksLoader",
    "GridContentLoader",
    "RandomShelf",
    # Logging
    "bind_contextvars",
    "configure_logging",
    "get_logger",
    # Navigation
    "detail_url_for",
    "search_url_for",
    # Pagination
    "ELLIPSIS",
    "PageState",
    "PaginationController",
    "page_window",
    # Providers
    "CatalogPage",
    "ContentProvider",
    # Search
    "SearchController",
    "SearchPhase",
    "SearchQuery",
    "SearchResultSet",
]
