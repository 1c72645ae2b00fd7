"""Plain message document for empty and error states."""

from __future__ import annotations

from rink.tui.document import Document, DocumentBuilder, DocumentElement, FocusContext


class MessageDocument(Document):
    def __init__(self, title: str, message: str, doc_id: str = "message") -> None:
        self._title = title
        self.message = message
        self._id = doc_id

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        return DocumentBuilder().spacer(1).text(self.message).build()

    def title(self) -> str:
        return self._title

    def id(self) -> str:
        return self._id
