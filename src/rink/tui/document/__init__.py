"""Document & focus navigation engine."""

from rink.tui.document.base import Document
from rink.tui.document.builder import DocumentBuilder
from rink.tui.document.elements import (
    TEAM_BOXSCORE_GAP,
    TEAM_BOXSCORE_SIDE_BY_SIDE_WIDTH,
    TEAM_BOXSCORE_WIDTH,
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
    collect_focusables,
    content_height,
)
from rink.tui.document.focus import FocusableId, FocusablePosition, FocusContext, LinkId, TableRowId
from rink.tui.document.render import render_document_element, row_layout
from rink.tui.document.view import DocumentView

__all__ = [
    # Document interface
    "Document",
    "DocumentBuilder",
    "DocumentView",
    # Elements
    "BigScoreElement",
    "DocumentElement",
    "Group",
    "Heading",
    "Link",
    "Row",
    "RowAlignment",
    "ScoreBoxElement",
    "SectionTitle",
    "Separator",
    "Spacer",
    "Table",
    "TeamBoxscore",
    "Text",
    "TEAM_BOXSCORE_GAP",
    "TEAM_BOXSCORE_SIDE_BY_SIDE_WIDTH",
    "TEAM_BOXSCORE_WIDTH",
    "collect_focusables",
    "content_height",
    # Focus
    "FocusableId",
    "FocusablePosition",
    "FocusContext",
    "LinkId",
    "TableRowId",
    # Rendering
    "render_document_element",
    "row_layout",
]
