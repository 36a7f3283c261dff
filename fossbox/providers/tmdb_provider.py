"""TMDB content provider implementation.

This module provides an implementation of the ContentProvider protocol for
The Movie Database (TMDB) v3 API. Raw results are validated with pydantic
and classified into Movie or Show at this boundary.
"""

from __future__ import annotations

import asyncio
import logging

import aiohttp
from pydantic import ValidationError

from fossbox.core.catalog import (
    CatalogItem,
    Category,
    MediaKind,
    classify_media_kind,
    make_item,
    parse_year,
)
from fossbox.core.config import TmdbConfig
from fossbox.core.errors import CatalogError, NetworkError, ProviderUnavailable
from fossbox.core.providers import CatalogPage
from fossbox.providers.tmdb_schemas import TmdbListResponse, TmdbResult

logger = logging.getLogger(__name__)


class TmdbProvider:
    """TMDB API client implementing the ContentProvider protocol.

    The API key is injected through TmdbConfig rather than read from the
    environment here. Every failure surfaces as ProviderUnavailable (no key)
    or NetworkError (transport, status or payload problems).

    Example:
        provider = TmdbProvider(TmdbConfig(api_key="..."))
        page = await provider.fetch_by_category(Category.MOVIE_POPULAR, 2)
        items = await provider.search("blade runner")
    """

    def __init__(self, config: TmdbConfig) -> None:
        self._config = config

    async def fetch_by_category(self, category: Category, page: int) -> CatalogPage:
        """Fetch one page of a TMDB listing such as ``movie/popular``."""
        response = await self._get(f"/{category.value}", {"page": str(page)})
        items = self._convert(response.results, category.media_kind)
        return CatalogPage(
            items=tuple(items), page=response.page, total_pages=response.total_pages
        )

    async def search(self, query: str) -> list[CatalogItem]:
        """Search movies and TV shows together (``search/multi``).

        People and other non-title results are dropped.
        """
        response = await self._get(
            "/search/multi",
            {"query": query, "page": "1", "include_adult": "false"},
        )
        return self._convert(response.results, MediaKind.MOVIE)

    async def _get(self, path: str, params: dict[str, str]) -> TmdbListResponse:
        if not self._config.api_key:
            raise ProviderUnavailable("TMDB API key not configured")

        url = f"{self._config.base_url}{path}"
        payload = {
            "api_key": self._config.api_key,
            "language": self._config.language,
            **params,
        }

        logger.debug("TMDB request: %s", path)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url,
                    params=payload,
                    headers={"Accept": "application/json"},
                    timeout=aiohttp.ClientTimeout(total=self._config.timeout_seconds),
                ) as response:
                    if response.status != 200:
                        error_text = await response.text(errors="replace")
                        snippet = error_text[:500].replace("\n", " ")
                        logger.error(
                            "TMDB request failed with status %d: %s",
                            response.status,
                            snippet,
                        )
                        message = (
                            f"TMDB request failed with status {response.status}: {snippet}"
                        )
                        # Rejected credentials
                        if response.status in (401, 403):
                            raise ProviderUnavailable(message)
                        raise NetworkError(message)

                    data = await response.json()

        # ValueError covers undecodable JSON and text bodies
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as ex:
            logger.error("Network error during TMDB request: %s", ex)
            raise CatalogError.from_exception(ex) from ex

        try:
            return TmdbListResponse.model_validate(data)
        except ValidationError as ex:
            logger.error("Malformed TMDB response for %s: %s", path, ex)
            raise NetworkError(
                f"Malformed TMDB response: {ex.error_count()} errors", original_error=ex
            ) from ex

    def _convert(
        self, results: list[TmdbResult], default_kind: MediaKind
    ) -> list[CatalogItem]:
        items: list[CatalogItem] = []
        for result in results:
            if result.media_type not in (None, "movie", "tv"):
                continue
            title = result.display_title
            if not title:
                continue
            kind = classify_media_kind(result.model_dump(), default_kind)
            items.append(
                make_item(
                    kind,
                    id=str(result.id),
                    title=title,
                    year=parse_year(result.date),
                    poster_url=self._image_url(
                        result.poster_path, self._config.poster_size
                    ),
                    overview=result.overview or None,
                    backdrop_url=self._image_url(
                        result.backdrop_path, self._config.backdrop_size
                    ),
                    rating=result.vote_average,
                )
            )
        logger.debug("Converted %d of %d TMDB results", len(items), len(results))
        return items

    def _image_url(self, path: str | None, size: str) -> str | None:
        if not path:
            return None
        return f"{self._config.image_base_url}/{size}{path}"
