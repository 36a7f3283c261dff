"""HTML implementation of the ItemRenderer protocol."""

from html import escape

from fossbox.core.catalog import CatalogItem
from fossbox.core.navigation import detail_url_for
from fossbox.ports.ui import DisplayElement, Navigator

NO_POSTER_URL = "https://via.placeholder.com/200x300/333/fff?text=No+Image"
NO_OVERVIEW = "No description available."


class HtmlItemRenderer:
    """Renders catalog items as escaped HTML cards.

    Clicking a rendered element sends the navigator to the item's detail page.

    Attributes:
        overview_length: Overviews longer than this are cut and suffixed
            with an ellipsis.
    """

    def __init__(self, navigator: Navigator, overview_length: int = 150) -> None:
        self._navigator = navigator
        self.overview_length = overview_length

    def render(self, item: CatalogItem) -> DisplayElement:
        url = detail_url_for(item)
        return DisplayElement(
            item=item,
            markup=self._markup(item),
            on_click=lambda: self._navigator.go_to(url),
        )

    def _markup(self, item: CatalogItem) -> str:
        title = escape(item.title or "Unknown")
        poster = escape(item.poster_url or NO_POSTER_URL, quote=True)
        year = str(item.year) if item.year else "Unknown"
        kind = item.media_kind.value.upper()

        overview = item.overview or ""
        if len(overview) > self.overview_length:
            overview = overview[: self.overview_length] + "..."
        overview = escape(overview) if overview else NO_OVERVIEW

        return (
            f'<div class="movie-item" data-id="{escape(item.id, quote=True)}" '
            f'data-type="{item.media_kind.value}">'
            f'<img src="{poster}" alt="{title}" loading="lazy">'
            '<div class="movie-info">'
            f"<h4>{title}</h4>"
            f'<p class="movie-year">{year} • {kind}</p>'
            f'<p class="movie-overview">{overview}</p>'
            "</div></div>"
        )
