"""URL builders for page transitions.

User-provided text only ever reaches a Navigator through these helpers, which
percent-encode every query value.
"""

from urllib.parse import urlencode

from fossbox.core.catalog import CatalogItem

PLAYER_PAGE = "player.html"
SEARCH_PAGE = "search.html"


def detail_url_for(item: CatalogItem) -> str:
    """URL of the player/detail page for a catalog item."""
    query = urlencode(
        {"id": item.id, "type": item.media_kind.value, "title": item.title}
    )
    return f"{PLAYER_PAGE}?{query}"


def search_url_for(query: str) -> str:
    """URL of the full search results page for a query."""
    return f"{SEARCH_PAGE}?{urlencode({'q': query.strip()})}"
