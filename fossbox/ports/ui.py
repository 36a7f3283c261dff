"""Presentation ports.

This module contains the Protocols the controllers paint through: the item
renderer, the page navigator and one view surface per controller. Hosts
implement them on top of whatever markup layer they use; the in-memory
adapters in fossbox.adapters.memory_views back the tests and the console
entry point.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from fossbox.core.catalog import CatalogItem

if TYPE_CHECKING:
    from fossbox.core.carousel import Slide
    from fossbox.core.pagination import WindowEntry

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class DisplayElement:
    """A rendered catalog item.

    Attributes:
        item: The item this element displays.
        markup: Rendered markup for the host page.
        on_click: Invoked when the user activates the element.
    """

    item: CatalogItem
    markup: str
    on_click: Callable[[], None]

    def click(self) -> None:
        self.on_click()


# =============================================================================
# Collaborator Protocols
# =============================================================================


class Navigator(Protocol):
    """Performs page transitions on the host."""

    def go_to(self, url: str) -> None:
        """Navigate to ``url``. URLs come from fossbox.core.navigation."""
        ...


class ItemRenderer(Protocol):
    """Turns a catalog item into a clickable display element."""

    def render(self, item: CatalogItem) -> DisplayElement:
        """Render ``item``; clicking it navigates to its detail page."""
        ...


# =============================================================================
# View Protocols
# =============================================================================


class ResultsPanel(Protocol):
    """Dropdown or page area that lists search results."""

    def show_results(self, elements: Sequence[DisplayElement]) -> None:
        """Replace the content with ``elements`` and make the panel visible."""
        ...

    def show_message(self, message: str) -> None:
        """Replace the content with a message and make the panel visible."""
        ...

    def hide(self) -> None:
        """Hide the panel, keeping its content."""
        ...


class GridView(Protocol):
    """Area that shows one page of catalog items."""

    def show_placeholder(self, message: str) -> None:
        """Show a loading placeholder in place of the items."""
        ...

    def show_items(self, elements: Sequence[DisplayElement]) -> None:
        """Replace the content with ``elements``."""
        ...

    def show_message(self, message: str) -> None:
        """Replace the content with a message (empty page or failure)."""
        ...


class CarouselView(Protocol):
    """Featured carousel slides and caption."""

    def show(self, slides: Sequence[Slide], caption: str) -> None:
        """Paint ``slides`` (exactly one active) and the caption text."""
        ...


class PaginationView(Protocol):
    """Page number buttons and prev/next controls."""

    def show(
        self,
        window: Sequence[WindowEntry],
        current_page: int,
        total_pages: int,
        has_previous: bool,
        has_next: bool,
    ) -> None:
        """Paint the page window; ellipsis entries are not clickable."""
        ...


class LinkBoxView(Protocol):
    """Sidebar boxes of compact item links, addressed by box name."""

    def show_links(self, box: str, elements: Sequence[DisplayElement]) -> None:
        """Fill ``box`` with ``elements``."""
        ...

    def show_message(self, box: str, message: str) -> None:
        """Fill ``box`` with a message."""
        ...
