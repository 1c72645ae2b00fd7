"""Persisted per-component state for a rebuild-every-frame UI.

Render functions are called fresh every frame, but a component instance
registered at a path keeps the same state object across frames::

    state = store.get_or_init(ScoresTab(), "app/scores", props)
    state.focus_index = 3           # visible next frame

Paths must be unique per logical component instance.  Entries remember the
component kind they were created for; asking for an existing path with a
different kind replaces the entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from rink.tui.element import Component

logger = logging.getLogger(__name__)


@dataclass
class _StoreEntry:
    kind: type
    state: Any


class ComponentStateStore:
    def __init__(self) -> None:
        self._entries: dict[str, _StoreEntry] = {}
        self._seen: set[str] = set()

    def get_or_init(self, component: Component, path: str, props: Any) -> Any:
        """Return the state stored at *path*, creating it from *props* first.

        The returned object is the stored one, so mutations persist.
        """
        kind = type(component)
        self._seen.add(path)
        entry = self._entries.get(path)
        if entry is not None:
            if entry.kind is kind:
                return entry.state
            logger.warning(
                "Component state at %r belongs to %s, re-initialising for %s",
                path,
                entry.kind.__name__,
                kind.__name__,
            )

        state = component.init_state(props)
        self._entries[path] = _StoreEntry(kind, state)
        logger.debug("Initialised %s state at %r", kind.__name__, path)
        return state

    def get(self, path: str) -> Any | None:
        entry = self._entries.get(path)
        return entry.state if entry is not None else None

    def remove(self, path: str) -> Any | None:
        self._seen.discard(path)
        entry = self._entries.pop(path, None)
        return entry.state if entry is not None else None

    # --- Frame lifecycle ---

    def begin_frame(self) -> None:
        """Start tracking which paths are requested this frame."""
        self._seen = set()

    def prune_unused(self) -> list[str]:
        """Drop entries not requested since :meth:`begin_frame`."""
        stale = [path for path in self._entries if path not in self._seen]
        for path in stale:
            del self._entries[path]
        if stale:
            logger.debug("Pruned component state: %s", ", ".join(stale))
        return stale

    def clear(self) -> None:
        self._entries.clear()
        self._seen.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries
