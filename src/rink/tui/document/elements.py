"""Document elements: the immutable content tree a document builds.

Every element reports its height, optionally a preferred width (used by
``Row`` to decide between fixed and equal-share layout) and the focusable
units it contains, with line offsets relative to where it is placed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from rink.tui.document.focus import FocusablePosition, LinkId, TableRowId
from rink.tui.navigation import LinkTarget
from rink.tui.table import TableWidget
from rink.tui.widgets.big_score import BigScore
from rink.tui.widgets.score_box import ScoreBox

if TYPE_CHECKING:
    from rink.tui.style import Style

TEAM_BOXSCORE_WIDTH = 85
TEAM_BOXSCORE_GAP = 2
TEAM_BOXSCORE_SIDE_BY_SIDE_WIDTH = TEAM_BOXSCORE_WIDTH * 2 + TEAM_BOXSCORE_GAP

DEFAULT_ROW_GAP = 2


class RowAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    SPREAD = "spread"


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    content: str
    style: Style | None = None

    def lines(self) -> list[str]:
        return self.content.split("\n")

    def height(self) -> int:
        return len(self.lines())

    def preferred_width(self) -> int | None:
        return None

    def focusables(self, y: int) -> list[FocusablePosition]:
        return []


@dataclass(frozen=True)
class Heading:
    level: int
    content: str

    def height(self) -> int:
        return 2 if self.level == 1 else 1

    def preferred_width(self) -> int | None:
        return None

    def focusables(self, y: int) -> list[FocusablePosition]:
        return []


@dataclass(frozen=True)
class SectionTitle:
    content: str
    underline: bool = False

    def height(self) -> int:
        return 2 if self.underline else 1

    def preferred_width(self) -> int | None:
        return None

    def focusables(self, y: int) -> list[FocusablePosition]:
        return []


@dataclass(frozen=True)
class Link:
    key: str
    display: str
    target: LinkTarget
    focused: bool = False

    def height(self) -> int:
        return 1

    def preferred_width(self) -> int | None:
        return None

    def focusables(self, y: int) -> list[FocusablePosition]:
        return [FocusablePosition(LinkId(self.key), y, 1, self.target)]


@dataclass(frozen=True)
class Separator:
    def height(self) -> int:
        return 1

    def preferred_width(self) -> int | None:
        return None

    def focusables(self, y: int) -> list[FocusablePosition]:
        return []


@dataclass(frozen=True)
class Spacer:
    lines: int = 1

    def height(self) -> int:
        return max(0, self.lines)

    def preferred_width(self) -> int | None:
        return None

    def focusables(self, y: int) -> list[FocusablePosition]:
        return []


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Group:
    """Children stacked vertically."""

    children: tuple[DocumentElement, ...] = ()
    style: Style | None = None

    def height(self) -> int:
        return sum(c.height() for c in self.children)

    def preferred_width(self) -> int | None:
        widths = [c.preferred_width() for c in self.children]
        if not widths or any(w is None for w in widths):
            return None
        return max(widths)

    def focusables(self, y: int) -> list[FocusablePosition]:
        out: list[FocusablePosition] = []
        for child in self.children:
            out.extend(child.focusables(y))
            y += child.height()
        return out


@dataclass(frozen=True)
class Row:
    """Children laid out side by side."""

    children: tuple[DocumentElement, ...] = ()
    gap: int = DEFAULT_ROW_GAP
    alignment: RowAlignment = RowAlignment.LEFT

    def height(self) -> int:
        return max((c.height() for c in self.children), default=0)

    def preferred_width(self) -> int | None:
        widths = [c.preferred_width() for c in self.children]
        if not widths or any(w is None for w in widths):
            return None
        return sum(widths) + self.gap * (len(widths) - 1)

    def focusables(self, y: int) -> list[FocusablePosition]:
        out: list[FocusablePosition] = []
        for child in self.children:
            out.extend(child.focusables(y))
        return out


# ---------------------------------------------------------------------------
# Domain widgets
# ---------------------------------------------------------------------------


def _table_focusables(table: TableWidget, y: int) -> list[FocusablePosition]:
    # Rows start below the header line and the rule.
    return [
        FocusablePosition(TableRowId(table.name, row), y + 2 + row, 1, table.row_target(row))
        for row in range(table.row_count())
    ]


@dataclass(frozen=True)
class Table:
    widget: TableWidget

    def height(self) -> int:
        return self.widget.preferred_height()

    def preferred_width(self) -> int | None:
        return self.widget.preferred_width()

    def focusables(self, y: int) -> list[FocusablePosition]:
        return _table_focusables(self.widget, y)


@dataclass(frozen=True)
class ScoreBoxElement:
    key: str
    score_box: ScoreBox
    target: LinkTarget | None = None
    focused: bool = False

    def height(self) -> int:
        return self.score_box.preferred_height()

    def preferred_width(self) -> int | None:
        return self.score_box.preferred_width()

    def focusables(self, y: int) -> list[FocusablePosition]:
        return [FocusablePosition(LinkId(self.key), y, self.height(), self.target)]


@dataclass(frozen=True)
class TeamBoxscore:
    """One team's skaters and goalies in a bordered, sectioned panel."""

    team_name: str
    forwards: TableWidget
    defense: TableWidget
    goalies: TableWidget

    def sections(self) -> list[tuple[str, TableWidget]]:
        named = [("Forwards", self.forwards), ("Defense", self.defense), ("Goalies", self.goalies)]
        return [(name, table) for name, table in named if table.row_count() > 0]

    def height(self) -> int:
        # header + blank + table + blank per section, then the bottom border
        return sum(3 + table.preferred_height() for _, table in self.sections()) + 1

    def preferred_width(self) -> int | None:
        return TEAM_BOXSCORE_WIDTH

    def focusables(self, y: int) -> list[FocusablePosition]:
        out: list[FocusablePosition] = []
        for _, table in self.sections():
            out.extend(_table_focusables(table, y + 2))
            y += 3 + table.preferred_height()
        return out


@dataclass(frozen=True)
class BigScoreElement:
    big_score: BigScore

    def height(self) -> int:
        return self.big_score.preferred_height()

    def preferred_width(self) -> int | None:
        return self.big_score.preferred_width()

    def focusables(self, y: int) -> list[FocusablePosition]:
        return []


DocumentElement = Union[
    Text,
    Heading,
    SectionTitle,
    Link,
    Separator,
    Spacer,
    Group,
    Row,
    Table,
    ScoreBoxElement,
    TeamBoxscore,
    BigScoreElement,
]

ELEMENT_TYPES: tuple[type, ...] = (
    Text,
    Heading,
    SectionTitle,
    Link,
    Separator,
    Spacer,
    Group,
    Row,
    Table,
    ScoreBoxElement,
    TeamBoxscore,
    BigScoreElement,
)


def content_height(elements: list[DocumentElement]) -> int:
    return sum(e.height() for e in elements)


def collect_focusables(elements: list[DocumentElement]) -> list[FocusablePosition]:
    """Focusable units in document order: top to bottom, row contents left to right."""
    out: list[FocusablePosition] = []
    y = 0
    for element in elements:
        out.extend(element.focusables(y))
        y += element.height()
    return out
