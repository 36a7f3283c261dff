"""Incremental search with stale-response suppression.

Every keystroke or submit issues a new sequence id. Fetches are never
cancelled; instead each response carries the sequence id of the query that
produced it and is painted only if that id is still the latest one issued.
Out-of-order network completion therefore can never show older results over
newer ones.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from fossbox.core.catalog import CatalogItem
from fossbox.core.config import SearchConfig
from fossbox.core.debounce import DebounceScheduler
from fossbox.core.errors import CatalogError, ErrorCategory
from fossbox.core.logging import get_logger
from fossbox.core.navigation import search_url_for

if TYPE_CHECKING:
    from fossbox.core.providers import ContentProvider
    from fossbox.ports.timers import Timer
    from fossbox.ports.ui import ItemRenderer, Navigator, ResultsPanel

logger = get_logger(__name__)


@dataclass(frozen=True)
class SearchQuery:
    """A query as issued, tagged with its sequence id."""

    text: str
    sequence_id: int


@dataclass(frozen=True)
class SearchResultSet:
    """Items returned for the query with the same sequence id."""

    sequence_id: int
    items: tuple[CatalogItem, ...] = field(default_factory=tuple)


class SearchPhase(Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    FETCHING = "fetching"
    DISPLAYED = "displayed"
    ERRORED = "errored"


class SearchController:
    """Turns raw input into at most one current query.

    The same class drives the live header search (debounced) and the
    full-page search form (``debounce_delay_ms=None``, submit only).
    """

    def __init__(
        self,
        provider: ContentProvider,
        renderer: ItemRenderer,
        panel: ResultsPanel,
        config: SearchConfig,
        timer: Timer | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            provider: Source of search results.
            renderer: Renders each result for the panel.
            panel: Where results and messages are shown.
            config: Surface settings (debounce, truncation, messages).
            timer: Timer for the debounce window; defaults to the running loop.
            navigator: Opens the full search page from the header box.
        """
        self._provider = provider
        self._renderer = renderer
        self._panel = panel
        self._config = config
        self._debounce = DebounceScheduler(timer)
        self._navigator = navigator
        self._sequence = 0
        self._phase = SearchPhase.IDLE
        self._results: SearchResultSet | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def phase(self) -> SearchPhase:
        return self._phase

    @property
    def latest_sequence_id(self) -> int:
        return self._sequence

    @property
    def results(self) -> SearchResultSet | None:
        """The result set currently displayed, if any."""
        return self._results

    def on_input(self, text: str) -> None:
        """Handle the input box changing to ``text``."""
        if self._config.debounce_delay_ms is None:
            return
        query = self._issue(text)
        if len(query.text) < self._config.min_query_length:
            self._phase = SearchPhase.IDLE
            self._panel.hide()
            return
        self._phase = SearchPhase.DEBOUNCING
        self._debounce.schedule(
            self._config.debounce_delay_ms, self._start_fetch, query
        )

    def submit(self, text: str) -> None:
        """Search for ``text`` immediately (form submit)."""
        if not text.strip():
            return
        self._start_fetch(self._issue(text))

    def dismiss(self) -> None:
        """Hide the panel (click outside, Escape).

        The pending debounce is dropped and the sequence id advances, so a
        response still in flight is stale when it lands and cannot reopen
        the panel.
        """
        self._debounce.cancel()
        self._sequence += 1
        self._phase = SearchPhase.IDLE
        self._panel.hide()

    def open_full_results(self, text: str) -> bool:
        """Leave the header box for the full search page (Enter key).

        Returns:
            False if ``text`` is blank or no navigator is attached.
        """
        if not text.strip() or self._navigator is None:
            return False
        self.dismiss()
        url = search_url_for(text)
        logger.info("search_page_opened", url=url)
        self._navigator.go_to(url)
        return True

    async def wait_idle(self) -> None:
        """Wait until every fetch started so far has completed."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _issue(self, text: str) -> SearchQuery:
        self._debounce.cancel()
        self._sequence += 1
        return SearchQuery(text=text.strip(), sequence_id=self._sequence)

    def _start_fetch(self, query: SearchQuery) -> None:
        self._phase = SearchPhase.FETCHING
        self._spawn(self._fetch(query))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _is_current(self, sequence_id: int) -> bool:
        return sequence_id == self._sequence

    async def _fetch(self, query: SearchQuery) -> None:
        logger.debug("search_query_issued", sequence_id=query.sequence_id)
        try:
            items = await self._provider.search(query.text)
        except CatalogError as ex:
            if not self._is_current(query.sequence_id):
                logger.debug("search_stale_error_dropped", sequence_id=query.sequence_id)
                return
            logger.warning(
                "search_failed",
                sequence_id=query.sequence_id,
                category=ex.category.name,
                error=str(ex),
            )
            self._phase = SearchPhase.ERRORED
            if ex.category is ErrorCategory.PROVIDER_UNAVAILABLE:
                self._panel.show_message(self._config.unavailable_message)
            elif ex.category is ErrorCategory.EMPTY_RESULT:
                self._accept(SearchResultSet(sequence_id=query.sequence_id))
            else:
                self._panel.show_message(self._config.failure_message)
            return

        result_set = SearchResultSet(
            sequence_id=query.sequence_id,
            items=tuple(items[: self._config.max_results]),
        )
        if not self._is_current(result_set.sequence_id):
            logger.debug(
                "search_stale_response_dropped",
                sequence_id=result_set.sequence_id,
                latest=self._sequence,
            )
            return
        self._accept(result_set)

    def _accept(self, result_set: SearchResultSet) -> None:
        self._results = result_set
        self._phase = SearchPhase.DISPLAYED
        if not result_set.items:
            self._panel.show_message(self._config.empty_message)
            return
        elements = [self._renderer.render(item) for item in result_set.items]
        self._panel.show_results(elements)
        logger.info(
            "search_results_displayed",
            sequence_id=result_set.sequence_id,
            count=len(elements),
        )
