"""The ``Document`` interface implemented by every page of content."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rink.tui.document.elements import DocumentElement, collect_focusables
from rink.tui.document.focus import FocusablePosition, FocusContext
from rink.tui.navigation import LinkTarget


class Document(ABC):
    """A logical content tree for one page, built fresh every render pass."""

    @abstractmethod
    def build(self, focus: FocusContext) -> list[DocumentElement]:
        """Return the page's elements in document order."""

    @abstractmethod
    def title(self) -> str:
        ...

    @abstractmethod
    def id(self) -> str:
        """Stable identity of the page (``"boxscore_2024020001"``)."""

    def focusable_positions(self, focus: FocusContext | None = None) -> list[FocusablePosition]:
        """Every link and table row, top to bottom and left to right.

        The document is built unfocused against *focus*'s width, so the
        positions match what a render at that width lays out.
        """
        context = (focus or FocusContext()).unfocused()
        return collect_focusables(self.build(context))

    def target_at(self, index: int, focus: FocusContext | None = None) -> LinkTarget | None:
        positions = self.focusable_positions(focus)
        if not 0 <= index < len(positions):
            return None
        return positions[index].target
