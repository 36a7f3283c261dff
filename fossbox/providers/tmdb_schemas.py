"""Pydantic schemas for TMDB list and search responses.

Only the fields the catalog uses are declared; everything else TMDB sends is
ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class TmdbResult(BaseModel):
    """One entry of a TMDB ``results`` array (movie, show or person)."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    media_type: str | None = None
    title: str | None = None
    name: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    overview: str | None = None
    vote_average: float | None = None

    @property
    def display_title(self) -> str:
        return self.title or self.name or ""

    @property
    def date(self) -> str | None:
        return self.release_date or self.first_air_date


class TmdbListResponse(BaseModel):
    """A paged TMDB listing or search response."""

    model_config = ConfigDict(extra="ignore")

    page: int = 1
    results: list[TmdbResult] = Field(default_factory=list)
    total_pages: int | None = None
    total_results: int | None = None
