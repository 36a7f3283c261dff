"""Configuration objects passed to controllers at construction.

Controllers never look configuration up on their own; the entry point builds
an AppConfig (usually via AppConfig.from_env()) and hands each controller the
section it needs.
"""

import os
from dataclasses import dataclass, field, replace

UNKNOWN_TOTAL_PAGES = 999


@dataclass(frozen=True)
class CarouselConfig:
    """Featured carousel settings.

    Attributes:
        autoplay_interval_ms: Delay between automatic slide advances.
        max_slides: Maximum number of slides built from the provider listing.
    """

    autoplay_interval_ms: int = 5000
    max_slides: int = 10


@dataclass(frozen=True)
class SearchConfig:
    """Settings for one search surface.

    Attributes:
        debounce_delay_ms: Quiet period before a keystroke-driven query is
            issued. None disables live search; only submit() queries.
        max_results: Results kept from each provider response.
        min_query_length: Shorter input hides the results panel.
        empty_message: Shown when the provider returns nothing.
        failure_message: Shown on network failures.
        unavailable_message: Shown when the provider is not configured.
    """

    debounce_delay_ms: int | None = 300
    max_results: int = 8
    min_query_length: int = 2
    empty_message: str = "No results found"
    failure_message: str = "Search failed"
    unavailable_message: str = "Search unavailable"

    @classmethod
    def header(cls) -> "SearchConfig":
        """Live search box in the page header."""
        return cls()

    @classmethod
    def full_page(cls) -> "SearchConfig":
        """Search form on the results page; fires on submit only."""
        return cls(
            debounce_delay_ms=None,
            max_results=20,
            empty_message="No movies found matching your search.",
            failure_message="Search failed. Please try again later.",
        )


@dataclass(frozen=True)
class GridConfig:
    """Paginated grid settings.

    Attributes:
        page_size: Items rendered per page.
        max_total_pages: Upper bound used until the provider reports one.
        loading_message: Placeholder shown while a page loads.
        empty_message: Shown when a page has no items.
    """

    page_size: int = 35
    max_total_pages: int = UNKNOWN_TOTAL_PAGES
    loading_message: str = "Loading..."
    empty_message: str = "No content found."


@dataclass(frozen=True)
class TmdbConfig:
    """Connection settings for the TMDB content provider."""

    api_key: str = ""
    base_url: str = "https://api.themoviedb.org/3"
    image_base_url: str = "https://image.tmdb.org/t/p"
    language: str = "en-US"
    timeout_seconds: float = 12.0
    poster_size: str = "w500"
    backdrop_size: str = "original"


@dataclass(frozen=True)
class AppConfig:
    """Complete configuration for one page session."""

    carousel: CarouselConfig = field(default_factory=CarouselConfig)
    header_search: SearchConfig = field(default_factory=SearchConfig.header)
    page_search: SearchConfig = field(default_factory=SearchConfig.full_page)
    grid: GridConfig = field(default_factory=GridConfig)
    tmdb: TmdbConfig = field(default_factory=TmdbConfig)

    @property
    def autoplay_interval_ms(self) -> int:
        return self.carousel.autoplay_interval_ms

    @property
    def debounce_delay_ms(self) -> int | None:
        return self.header_search.debounce_delay_ms

    @property
    def max_search_results(self) -> int:
        return self.header_search.max_results

    @property
    def page_size(self) -> int:
        return self.grid.page_size

    @classmethod
    def desktop(cls) -> "AppConfig":
        """Defaults of the desktop site."""
        return cls()

    @classmethod
    def mobile(cls) -> "AppConfig":
        """Defaults of the mobile site: slower debounce, smaller pages."""
        return cls(
            header_search=SearchConfig(debounce_delay_ms=500, max_results=15),
            grid=GridConfig(page_size=15),
        )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build configuration from environment variables.

        FOSSBOX_PROFILE selects the desktop or mobile defaults; individual
        values can then be overridden.
        """
        profile = os.getenv("FOSSBOX_PROFILE", "desktop").lower()
        config = cls.mobile() if profile == "mobile" else cls.desktop()

        tmdb = TmdbConfig(
            api_key=os.getenv("TMDB_API_KEY", ""),
            base_url=os.getenv("TMDB_BASE_URL", TmdbConfig.base_url).rstrip("/"),
            image_base_url=os.getenv(
                "TMDB_IMAGE_BASE_URL", TmdbConfig.image_base_url
            ).rstrip("/"),
            language=os.getenv("TMDB_LANGUAGE", TmdbConfig.language),
        )

        carousel = config.carousel
        autoplay = os.getenv("AUTOPLAY_INTERVAL_MS")
        if autoplay:
            carousel = replace(carousel, autoplay_interval_ms=int(autoplay))

        header_search = config.header_search
        debounce = os.getenv("SEARCH_DEBOUNCE_MS")
        if debounce:
            header_search = replace(header_search, debounce_delay_ms=int(debounce))

        grid = config.grid
        page_size = os.getenv("PAGE_SIZE")
        if page_size:
            grid = replace(grid, page_size=int(page_size))

        return replace(
            config,
            carousel=carousel,
            header_search=header_search,
            grid=grid,
            tmdb=tmdb,
        )
