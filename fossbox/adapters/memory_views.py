"""In-memory implementations of the view and navigator protocols.

Each view records what it was last asked to paint, plus a history of calls,
instead of producing markup. The console entry point reads them back, and
tests assert against them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fossbox.ports.ui import DisplayElement

if TYPE_CHECKING:
    from fossbox.core.carousel import Slide
    from fossbox.core.pagination import WindowEntry


class MemoryNavigator:
    """Navigator that records visited URLs."""

    def __init__(self) -> None:
        self.history: list[str] = []

    @property
    def current_url(self) -> str | None:
        return self.history[-1] if self.history else None

    def go_to(self, url: str) -> None:
        self.history.append(url)


class MemoryResultsPanel:
    """Search results panel.

    Attributes:
        visible: Whether the panel is currently shown.
        elements: Elements of the last show_results() call.
        message: Text of the last show_message() call, cleared by results.
        calls: Names of every method invoked, in order.
    """

    def __init__(self) -> None:
        self.visible = False
        self.elements: list[DisplayElement] = []
        self.message: str | None = None
        self.calls: list[str] = []

    @property
    def titles(self) -> list[str]:
        return [element.item.title for element in self.elements]

    def show_results(self, elements: Sequence[DisplayElement]) -> None:
        self.calls.append("show_results")
        self.elements = list(elements)
        self.message = None
        self.visible = True

    def show_message(self, message: str) -> None:
        self.calls.append("show_message")
        self.elements = []
        self.message = message
        self.visible = True

    def hide(self) -> None:
        self.calls.append("hide")
        self.visible = False


class MemoryGridView:
    """Grid area.

    Attributes:
        placeholder: Placeholder text while a load is pending, else None.
        elements: Elements currently shown.
        message: Message currently shown instead of elements.
    """

    def __init__(self) -> None:
        self.placeholder: str | None = None
        self.elements: list[DisplayElement] = []
        self.message: str | None = None
        self.calls: list[str] = []

    @property
    def titles(self) -> list[str]:
        return [element.item.title for element in self.elements]

    def show_placeholder(self, message: str) -> None:
        self.calls.append("show_placeholder")
        self.placeholder = message
        self.elements = []
        self.message = None

    def show_items(self, elements: Sequence[DisplayElement]) -> None:
        self.calls.append("show_items")
        self.placeholder = None
        self.elements = list(elements)
        self.message = None

    def show_message(self, message: str) -> None:
        self.calls.append("show_message")
        self.placeholder = None
        self.elements = []
        self.message = message


class MemoryCarouselView:
    """Carousel surface."""

    def __init__(self) -> None:
        self.slides: list[Slide] = []
        self.caption: str = ""
        self.paint_count = 0

    @property
    def active_indices(self) -> list[int]:
        return [slide.index for slide in self.slides if slide.active]

    def show(self, slides: Sequence[Slide], caption: str) -> None:
        self.slides = list(slides)
        self.caption = caption
        self.paint_count += 1


@dataclass
class MemoryPaginationView:
    """Page buttons surface."""

    window: list[WindowEntry] = field(default_factory=list)
    current_page: int = 0
    total_pages: int = 0
    has_previous: bool = False
    has_next: bool = False
    paint_count: int = 0

    def show(
        self,
        window: Sequence[WindowEntry],
        current_page: int,
        total_pages: int,
        has_previous: bool,
        has_next: bool,
    ) -> None:
        self.window = list(window)
        self.current_page = current_page
        self.total_pages = total_pages
        self.has_previous = has_previous
        self.has_next = has_next
        self.paint_count += 1


class MemoryLinkBoxView:
    """Sidebar link boxes, keyed by box name."""

    def __init__(self) -> None:
        self.boxes: dict[str, list[DisplayElement]] = {}
        self.messages: dict[str, str] = {}

    def titles(self, box: str) -> list[str]:
        return [element.item.title for element in self.boxes.get(box, [])]

    def show_links(self, box: str, elements: Sequence[DisplayElement]) -> None:
        self.boxes[box] = list(elements)
        self.messages.pop(box, None)

    def show_message(self, box: str, message: str) -> None:
        self.boxes[box] = []
        self.messages[box] = message

    def snapshot(self) -> dict[str, Any]:
        return {
            box: self.messages.get(box) or self.titles(box)
            for box in sorted(set(self.boxes) | set(self.messages))
        }
