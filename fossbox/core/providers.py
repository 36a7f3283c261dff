"""Content provider protocol.

This module defines the interface the controllers use to obtain catalog
items. Implementations can talk to TMDB or any other metadata service; the
controllers only depend on this Protocol.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from fossbox.core.catalog import CatalogItem, Category

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class CatalogPage:
    """One page of a provider listing.

    Attributes:
        items: Classified items in provider order.
        page: The 1-based page number that was requested.
        total_pages: Number of pages the provider reports for the listing,
            if it reports one.
    """

    items: Sequence[CatalogItem] = field(default_factory=tuple)
    page: int = 1
    total_pages: int | None = None


# =============================================================================
# Provider Protocols
# =============================================================================


class ContentProvider(Protocol):
    """Protocol for catalog metadata providers.

    Both operations raise a fossbox.core.errors.CatalogError subclass on
    failure: ProviderUnavailable when the provider is not configured and
    NetworkError when the request or its payload is unusable. An empty but
    valid response is returned as-is; callers decide how to present it.
    """

    async def fetch_by_category(self, category: Category, page: int) -> CatalogPage:
        """Fetch one page of a listing.

        Args:
            category: The listing to fetch.
            page: 1-based page number.

        Returns:
            The page of classified items.
        """
        ...

    async def search(self, query: str) -> list[CatalogItem]:
        """Search movies and TV shows by free text.

        Args:
            query: The raw query text; implementations must encode it.

        Returns:
            Matching items in provider relevance order.
        """
        ...
