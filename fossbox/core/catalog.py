"""Catalog item types and the movie/TV classification rule.

Items arrive from the provider as loosely shaped records. They are classified
exactly once, at the provider boundary, into either a Movie or a Show; the
rest of the code dispatches on the type and never re-inspects raw fields.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class MediaKind(Enum):
    """Kind of catalog item, as used in detail URLs."""

    MOVIE = "movie"
    TV = "tv"

    @property
    def label(self) -> str:
        return "Movie" if self is MediaKind.MOVIE else "TV Show"


@dataclass(frozen=True)
class Movie:
    """A feature film.

    Attributes:
        id: Provider identifier.
        title: Display title.
        year: Release year, if known.
        poster_url: Absolute poster image URL, if any.
        overview: Plot summary, if any.
        backdrop_url: Absolute wide background image URL, if any.
        rating: Average vote, if any.
    """

    id: str
    title: str
    year: int | None = None
    poster_url: str | None = None
    overview: str | None = None
    backdrop_url: str | None = None
    rating: float | None = None

    @property
    def media_kind(self) -> MediaKind:
        return MediaKind.MOVIE


@dataclass(frozen=True)
class Show:
    """A TV series. Same fields as Movie; the year is the first air year."""

    id: str
    title: str
    year: int | None = None
    poster_url: str | None = None
    overview: str | None = None
    backdrop_url: str | None = None
    rating: float | None = None

    @property
    def media_kind(self) -> MediaKind:
        return MediaKind.TV


CatalogItem = Movie | Show


class Category(Enum):
    """Provider listings, valued by their TMDB path."""

    MOVIE_NOW_PLAYING = "movie/now_playing"
    MOVIE_POPULAR = "movie/popular"
    MOVIE_TOP_RATED = "movie/top_rated"
    TV_POPULAR = "tv/popular"
    TV_TOP_RATED = "tv/top_rated"
    TV_ON_THE_AIR = "tv/on_the_air"

    @property
    def media_kind(self) -> MediaKind:
        """Kind every item of this listing defaults to."""
        return MediaKind.TV if self.value.startswith("tv/") else MediaKind.MOVIE


class Section(Enum):
    """Top-level grid sections the user can switch between."""

    MOVIES = "movies"
    TV = "tv"

    @property
    def category(self) -> Category:
        return Category.MOVIE_POPULAR if self is Section.MOVIES else Category.TV_POPULAR

    @property
    def noun(self) -> str:
        return "movies" if self is Section.MOVIES else "TV shows"


def classify_media_kind(
    raw: Mapping[str, Any], default: MediaKind = MediaKind.MOVIE
) -> MediaKind:
    """Decide whether a raw provider record is a movie or a TV show.

    Rules, first applicable wins:
    1. an explicit ``media_type`` of ``movie`` or ``tv``;
    2. a TV-only date field (``first_air_date``);
    3. a TV-only name field (``name``).

    Args:
        raw: The provider record.
        default: Kind used when no rule applies.

    Returns:
        The classified MediaKind.
    """
    media_type = raw.get("media_type")
    if media_type in ("movie", "tv"):
        return MediaKind(media_type)
    if raw.get("first_air_date"):
        return MediaKind.TV
    if raw.get("name"):
        return MediaKind.TV
    return default


def parse_year(date: str | None) -> int | None:
    """Extract the year from a ``YYYY-MM-DD`` date string."""
    if not date:
        return None
    head = date.split("-", 1)[0]
    if len(head) == 4 and head.isdigit():
        return int(head)
    return None


def make_item(kind: MediaKind, **fields: Any) -> CatalogItem:
    """Build the variant that matches ``kind``."""
    if kind is MediaKind.TV:
        return Show(**fields)
    return Movie(**fields)
