"""Featured carousel rotation engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import quote

from fossbox.core.catalog import CatalogItem, Category
from fossbox.core.config import CarouselConfig
from fossbox.core.errors import CatalogError
from fossbox.core.logging import get_logger
from fossbox.ports.timers import Timer, TimerHandle, resolve_timer

if TYPE_CHECKING:
    from fossbox.core.providers import ContentProvider
    from fossbox.ports.ui import CarouselView

logger = get_logger(__name__)

FALLBACK_TITLE = "Welcome to FossBOX"
FALLBACK_IMAGE_URL = "https://via.placeholder.com/1600x600/1b1b1b/ffffff?text=FossBOX"
DEFAULT_CAPTION = "Featured Content"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/1600x600/1b1b1b/ffffff?text={text}"


@dataclass(frozen=True)
class Slide:
    """One carousel slide."""

    index: int
    title: str
    background_image_url: str
    active: bool = False


class CarouselPhase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CarouselState:
    """Snapshot of the carousel.

    Exactly one slide is active whenever ``slides`` is non-empty, and it is
    the slide at ``current_index``.
    """

    slides: tuple[Slide, ...] = field(default_factory=tuple)
    current_index: int = 0
    phase: CarouselPhase = CarouselPhase.IDLE

    @property
    def total_slides(self) -> int:
        return len(self.slides)

    @property
    def current_slide(self) -> Slide | None:
        if 0 <= self.current_index < len(self.slides):
            return self.slides[self.current_index]
        return None

    @property
    def caption(self) -> str:
        slide = self.current_slide
        if slide is None:
            return ""
        return slide.title or DEFAULT_CAPTION


def slides_from_items(items: Sequence[CatalogItem]) -> list[Slide]:
    """Build inactive slides from catalog items, in order."""
    slides = []
    for index, item in enumerate(items):
        title = item.title or DEFAULT_CAPTION
        image = item.backdrop_url or PLACEHOLDER_IMAGE_URL.format(
            text=quote(item.title or "FossBOX")
        )
        slides.append(Slide(index=index, title=title, background_image_url=image))
    return slides


def _activate(slides: Sequence[Slide], index: int) -> tuple[Slide, ...]:
    return tuple(
        replace(slide, index=i, active=(i == index)) for i, slide in enumerate(slides)
    )


class CarouselController:
    """Owns the slide index and the autoplay timer.

    Autoplay uses one-shot timers: every tick advances and re-arms, and every
    re-arm cancels the previous handle first, so at most one timer is live.

    Example:
        carousel = CarouselController(CarouselConfig(), view)
        await carousel.refresh(provider)
        carousel.next()          # manual: advance and restart the interval
        carousel.pointer_enter() # pause
        carousel.pointer_leave() # fresh full interval
    """

    def __init__(
        self,
        config: CarouselConfig,
        view: CarouselView | None = None,
        timer: Timer | None = None,
    ) -> None:
        self._config = config
        self._view = view
        self._timer = timer
        self._handle: TimerHandle | None = None
        self._state = CarouselState()

    @property
    def state(self) -> CarouselState:
        return self._state

    @property
    def phase(self) -> CarouselPhase:
        return self._state.phase

    @property
    def caption(self) -> str:
        return self._state.caption

    @property
    def timer_armed(self) -> bool:
        return self._handle is not None

    async def refresh(self, provider: ContentProvider) -> None:
        """Load the "now playing" listing as slides.

        Provider failures and empty listings end in the fallback slide; they
        are logged, never raised.
        """
        try:
            page = await provider.fetch_by_category(Category.MOVIE_NOW_PLAYING, 1)
        except CatalogError as ex:
            logger.warning(
                "carousel_load_failed", category=ex.category.name, error=str(ex)
            )
            self.load([])
            return
        items = list(page.items)[: self._config.max_slides]
        self.load(slides_from_items(items))

    def load(self, slides: Sequence[Slide]) -> None:
        """Replace all slides and start playing from the first one.

        An empty sequence shows a single fallback slide with autoplay off
        until the next load().
        """
        self._cancel_timer()
        if not slides:
            fallback = Slide(
                index=0,
                title=FALLBACK_TITLE,
                background_image_url=FALLBACK_IMAGE_URL,
                active=True,
            )
            self._state = CarouselState(
                slides=(fallback,), current_index=0, phase=CarouselPhase.FALLBACK
            )
            logger.info("carousel_fallback_shown")
            self._paint()
            return

        self._state = CarouselState(
            slides=_activate(slides, 0), current_index=0, phase=CarouselPhase.PLAYING
        )
        logger.debug("carousel_loaded", slides=len(slides))
        self._paint()
        self._arm_timer()

    def advance(self, delta: int) -> None:
        """Move ``delta`` slides, wrapping in both directions."""
        count = self._state.total_slides
        if count == 0:
            return
        index = (self._state.current_index + delta + count) % count
        self._state = replace(
            self._state,
            slides=_activate(self._state.slides, index),
            current_index=index,
        )
        self._paint()

    def next(self) -> None:
        """Manual advance; restarts the autoplay interval unless paused."""
        self._manual_advance(1)

    def previous(self) -> None:
        """Manual step back; restarts the autoplay interval unless paused."""
        self._manual_advance(-1)

    def pointer_enter(self) -> None:
        """Pause autoplay while the pointer is over the carousel."""
        if self._state.phase is not CarouselPhase.PLAYING:
            return
        self._cancel_timer()
        self._state = replace(self._state, phase=CarouselPhase.PAUSED)

    def pointer_leave(self) -> None:
        """Resume autoplay with a fresh, full interval."""
        if self._state.phase not in (CarouselPhase.PLAYING, CarouselPhase.PAUSED):
            return
        self._state = replace(self._state, phase=CarouselPhase.PLAYING)
        self._arm_timer()

    def stop(self) -> None:
        """Cancel the autoplay timer without changing the slides."""
        self._cancel_timer()
        if self._state.phase is CarouselPhase.PLAYING:
            self._state = replace(self._state, phase=CarouselPhase.PAUSED)

    def _manual_advance(self, delta: int) -> None:
        self.advance(delta)
        # Stays paused under the pointer, unlike the browser restart on click
        if self._state.phase is CarouselPhase.PLAYING:
            self._arm_timer()

    def _on_autoplay(self) -> None:
        self._handle = None
        if self._state.phase is not CarouselPhase.PLAYING:
            return
        self.advance(1)
        self._arm_timer()

    def _arm_timer(self) -> None:
        self._cancel_timer()
        timer = resolve_timer(self._timer)
        self._handle = timer.call_later(
            self._config.autoplay_interval_ms / 1000, self._on_autoplay
        )

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _paint(self) -> None:
        if self._view is not None:
            self._view.show(self._state.slides, self._state.caption)
