"""Fluent construction of document element lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rink.tui.document.elements import (
    DEFAULT_ROW_GAP,
    ELEMENT_TYPES,
    BigScoreElement,
    DocumentElement,
    Group,
    Heading,
    Link,
    Row,
    RowAlignment,
    ScoreBoxElement,
    SectionTitle,
    Separator,
    Spacer,
    Table,
    TeamBoxscore,
    Text,
)
from rink.tui.document.focus import FocusContext
from rink.tui.navigation import LinkTarget
from rink.tui.table import TableWidget
from rink.tui.widgets.big_score import BigScore
from rink.tui.widgets.score_box import ScoreBox

if TYPE_CHECKING:
    from rink.tui.style import Style


def _check(element: object) -> DocumentElement:
    if not isinstance(element, ELEMENT_TYPES):
        raise TypeError(f"not a document element: {element!r}")
    return element  # type: ignore[return-value]


def focused_table(widget: TableWidget, focus: FocusContext) -> TableWidget:
    return widget.with_focused_row(focus.focused_table_row(widget.name))


class DocumentBuilder:
    """Accumulates elements in document order.

    Every method returns the builder so calls chain::

        DocumentBuilder().heading(1, "Standings").spacer(1).table(widget, focus).build()
    """

    def __init__(self) -> None:
        self._elements: list[DocumentElement] = []

    def element(self, element: DocumentElement) -> DocumentBuilder:
        self._elements.append(_check(element))
        return self

    def extend(self, elements: Iterable[DocumentElement]) -> DocumentBuilder:
        for element in elements:
            self.element(element)
        return self

    # --- Text ---

    def text(self, content: str) -> DocumentBuilder:
        return self.element(Text(content))

    def styled_text(self, content: str, style: Style) -> DocumentBuilder:
        return self.element(Text(content, style))

    def heading(self, level: int, content: str) -> DocumentBuilder:
        return self.element(Heading(level, content))

    def section_title(self, content: str, underline: bool = False) -> DocumentBuilder:
        return self.element(SectionTitle(content, underline))

    def separator(self) -> DocumentBuilder:
        return self.element(Separator())

    def spacer(self, lines: int = 1) -> DocumentBuilder:
        return self.element(Spacer(lines))

    # --- Links ---

    def link(self, key: str, display: str, target: LinkTarget, focused: bool = False) -> DocumentBuilder:
        return self.element(Link(key, display, target, focused))

    def link_with_focus(self, key: str, display: str, target: LinkTarget, focus: FocusContext) -> DocumentBuilder:
        return self.link(key, display, target, focus.is_link_focused(key))

    # --- Containers ---

    def group(self, children: Iterable[DocumentElement], style: Style | None = None) -> DocumentBuilder:
        return self.element(Group(tuple(_check(c) for c in children), style))

    def row(
        self,
        children: Iterable[DocumentElement],
        gap: int = DEFAULT_ROW_GAP,
        alignment: RowAlignment = RowAlignment.LEFT,
    ) -> DocumentBuilder:
        return self.element(Row(tuple(_check(c) for c in children), gap, alignment))

    # --- Widgets ---

    def table(self, widget: TableWidget, focus: FocusContext) -> DocumentBuilder:
        return self.element(Table(focused_table(widget, focus)))

    def score_box(
        self,
        key: str,
        score_box: ScoreBox,
        target: LinkTarget | None,
        focus: FocusContext,
    ) -> DocumentBuilder:
        return self.element(ScoreBoxElement(key, score_box, target, focus.is_link_focused(key)))

    def team_boxscore(
        self,
        team_name: str,
        forwards: TableWidget,
        defense: TableWidget,
        goalies: TableWidget,
        focus: FocusContext,
    ) -> DocumentBuilder:
        return self.element(team_boxscore(team_name, forwards, defense, goalies, focus))

    def big_score(self, big_score: BigScore) -> DocumentBuilder:
        return self.element(BigScoreElement(big_score))

    def build(self) -> list[DocumentElement]:
        return list(self._elements)


def team_boxscore(
    team_name: str,
    forwards: TableWidget,
    defense: TableWidget,
    goalies: TableWidget,
    focus: FocusContext,
) -> TeamBoxscore:
    return TeamBoxscore(
        team_name,
        focused_table(forwards, focus),
        focused_table(defense, focus),
        focused_table(goalies, focus),
    )
