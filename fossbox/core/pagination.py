"""Paginated grid navigation and the page-button window."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal, Union

from fossbox.core.catalog import Section
from fossbox.core.config import UNKNOWN_TOTAL_PAGES, GridConfig
from fossbox.core.logging import get_logger

if TYPE_CHECKING:
    from fossbox.core.grid import GridContentLoader
    from fossbox.ports.storage import KeyValueStore
    from fossbox.ports.ui import PaginationView

logger = get_logger(__name__)

ELLIPSIS: Literal["..."] = "..."
SECTION_KEY = "fossbox-section"

WindowEntry = Union[int, Literal["..."]]


def page_window(current_page: int, total_pages: int) -> list[WindowEntry]:
    """Page buttons to show around ``current_page``.

    Always contains page 1 and ``total_pages``, plus one page either side of
    the current one. Gaps of two or more pages collapse into ELLIPSIS.

    >>> page_window(5, 10)
    [1, '...', 4, 5, 6, '...', 10]
    >>> page_window(1, 3)
    [1, 2, 3]
    """
    window: list[WindowEntry] = [1]
    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)

    if start > 2:
        window.append(ELLIPSIS)

    for page in range(start, end + 1):
        if page != 1 and page != total_pages:
            window.append(page)

    if end < total_pages - 1:
        window.append(ELLIPSIS)

    if total_pages > 1:
        window.append(total_pages)

    return window


@dataclass(frozen=True)
class PageState:
    """Pagination position.

    ``current_page`` is always within ``[1, total_pages]``.
    """

    current_page: int = 1
    total_pages: int = UNKNOWN_TOTAL_PAGES
    page_size: int = 35

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class PaginationController:
    """Owns the page position and drives the grid loader.

    The total page count starts at a large sentinel and only ever shrinks,
    as the loader reports authoritative counts from the provider.
    """

    def __init__(
        self,
        loader: GridContentLoader,
        config: GridConfig,
        view: PaginationView | None = None,
        store: KeyValueStore | None = None,
    ) -> None:
        """Initialize the controller and attach it to ``loader``.

        Args:
            loader: Loads and renders grid pages; reports page counts back.
            config: Grid settings (page size, page bound).
            view: Page button surface.
            store: Preference store; remembers the selected section.
        """
        self._loader = loader
        self._config = config
        self._view = view
        self._store = store
        self._state = PageState(
            total_pages=config.max_total_pages, page_size=config.page_size
        )
        self._section = self._stored_section()
        loader.page_bounds = self

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def section(self) -> Section:
        return self._section

    @property
    def window(self) -> list[WindowEntry]:
        return page_window(self._state.current_page, self._state.total_pages)

    async def go_to_page(self, page: int) -> bool:
        """Show ``page`` of the current section.

        The current page only moves once the grid has painted the new page,
        so a failed or superseded load leaves the position where it was.

        Returns:
            False, with no state change, if ``page`` is out of range or the
            load did not paint.
        """
        if page < 1 or page > self._state.total_pages:
            logger.debug(
                "page_out_of_range", page=page, total_pages=self._state.total_pages
            )
            return False
        if not await self._loader.load(self._section, page):
            return False
        self._state = replace(
            self._state, current_page=min(page, self._state.total_pages)
        )
        self._paint()
        return True

    async def next_page(self) -> bool:
        return await self.go_to_page(self._state.current_page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self._state.current_page - 1)

    async def reload(self) -> None:
        """Load the current page again."""
        await self._loader.load(self._section, self._state.current_page)

    async def switch_section(self, section: Section) -> None:
        """Show page 1 of another section and remember the choice."""
        self._section = section
        self._state = replace(self._state, current_page=1)
        if self._store is not None:
            self._store.set(SECTION_KEY, section.value)
        logger.info("section_switched", section=section.value)
        await self.go_to_page(1)

    def tighten_total_pages(self, reported: int | None) -> bool:
        """Apply a page count reported by the provider.

        Only a smaller count than the current bound is accepted; the bound is
        never widened. The current page is clamped into the new range.

        Returns:
            True if the bound changed.
        """
        if reported is None or reported < 1:
            return False
        bounded = min(reported, self._config.max_total_pages)
        if bounded >= self._state.total_pages:
            return False
        self._state = replace(
            self._state,
            total_pages=bounded,
            current_page=min(self._state.current_page, bounded),
        )
        logger.debug("total_pages_tightened", total_pages=bounded)
        self._paint()
        return True

    def _stored_section(self) -> Section:
        if self._store is None:
            return Section.MOVIES
        stored = self._store.get(SECTION_KEY)
        try:
            return Section(stored)
        except ValueError:
            return Section.MOVIES

    def _paint(self) -> None:
        if self._view is None:
            return
        self._view.show(
            self.window,
            self._state.current_page,
            self._state.total_pages,
            self._state.has_previous,
            self._state.has_next,
        )
