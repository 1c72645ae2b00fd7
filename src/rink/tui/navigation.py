"""Drill-down navigation: tabs, stacked documents and link targets.

The document stack is the navigation history below a tab.  Each entry keeps
its own focus index and scroll offset so that going back restores the view
exactly as it was left.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class Tab(Enum):
    SCORES = "scores"
    STANDINGS = "standings"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> Tab:
        tabs = list(Tab)
        return tabs[(tabs.index(self) + 1) % len(tabs)]

    def previous(self) -> Tab:
        tabs = list(Tab)
        return tabs[(tabs.index(self) - 1) % len(tabs)]


class SettingsCategory(Enum):
    LOGGING = "logging"
    DISPLAY = "display"
    DATA = "data"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> SettingsCategory:
        cats = list(SettingsCategory)
        return cats[(cats.index(self) + 1) % len(cats)]


# ---------------------------------------------------------------------------
# Stacked documents
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BoxscoreRef:
    game_id: int
    away_abbrev: str
    home_abbrev: str
    away_score: int
    home_score: int
    game_date: str = ""

    def label(self) -> str:
        return f"{self.away_abbrev}:{self.away_score}-{self.home_abbrev}:{self.home_score}"


@dataclass(frozen=True)
class TeamDetailRef:
    abbrev: str

    def label(self) -> str:
        return self.abbrev


@dataclass(frozen=True)
class PlayerDetailRef:
    player_id: int
    sweater_number: int | None
    last_name: str

    def label(self) -> str:
        if self.sweater_number is not None:
            return f"#{self.sweater_number} {self.last_name}"
        return self.last_name


StackedDocument = Union[BoxscoreRef, TeamDetailRef, PlayerDetailRef]


# ---------------------------------------------------------------------------
# Link targets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DocumentTarget:
    """Activating the link pushes *document* onto the stack."""

    document: StackedDocument


@dataclass(frozen=True)
class ActionTarget:
    """Activating the link runs a named action (``"toggle:use_unicode"``)."""

    action: str


LinkTarget = Union[DocumentTarget, ActionTarget]


# ---------------------------------------------------------------------------
# Document stack
# ---------------------------------------------------------------------------


@dataclass
class DocumentNav:
    focus_index: int | None = None
    scroll_offset: int = 0


@dataclass
class DocumentStackEntry:
    document: StackedDocument
    nav: DocumentNav = field(default_factory=DocumentNav)


class StackState(Enum):
    BROWSING = "browsing"
    VIEWING = "viewing"


class DocumentStack:
    """Ordered drill-down history; the last entry is the active document."""

    def __init__(self) -> None:
        self._entries: list[DocumentStackEntry] = []

    def push(self, document: StackedDocument, focus_index: int | None = None) -> DocumentStackEntry:
        entry = DocumentStackEntry(document, DocumentNav(focus_index=focus_index, scroll_offset=0))
        self._entries.append(entry)
        logger.debug("Pushed %s (depth %d)", document.label(), len(self._entries))
        return entry

    def pop(self) -> DocumentStackEntry | None:
        if not self._entries:
            return None
        entry = self._entries.pop()
        logger.debug("Popped %s (depth %d)", entry.document.label(), len(self._entries))
        return entry

    def clear(self) -> None:
        self._entries.clear()

    @property
    def top(self) -> DocumentStackEntry | None:
        return self._entries[-1] if self._entries else None

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def state(self) -> StackState:
        return StackState.BROWSING if self.is_empty else StackState.VIEWING

    @property
    def entries(self) -> tuple[DocumentStackEntry, ...]:
        return tuple(self._entries)

    def breadcrumb_labels(self, tab: Tab) -> list[str]:
        return [tab.label] + [entry.document.label() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
