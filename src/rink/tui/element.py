"""Element tree: leaf widgets and constraint-based containers.

Every frame the application builds a fresh tree of elements and draws it
into a ``Buffer`` with :func:`render_element`.  Containers split their area
between children with :func:`split`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, Union

from rink.tui.buffer import Buffer, Rect

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

__all__ = [
    "Component",
    "Constraint",
    "ContainerElement",
    "Direction",
    "EMPTY",
    "Element",
    "ElementWidget",
    "EmptyElement",
    "Fill",
    "Length",
    "Min",
    "Percentage",
    "WidgetElement",
    "horizontal",
    "render_element",
    "split",
    "vertical",
]


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class ElementWidget(Protocol):
    """An opaque drawable.

    ``preferred_height`` and ``preferred_width`` are optional -- checked at
    call-sites via ``getattr``.
    """

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        """Draw into *buf*, staying inside *area*."""
        ...


class Component(Protocol):
    """A render function with persisted local state.

    ``init_state`` runs once per store path, the first time the component is
    seen; ``view`` runs every frame with the same state object.
    """

    def init_state(self, props: Any) -> Any:
        ...

    def view(self, props: Any, state: Any) -> Element:
        ...


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Length:
    value: int


@dataclass(frozen=True)
class Min:
    value: int


@dataclass(frozen=True)
class Percentage:
    value: int


@dataclass(frozen=True)
class Fill:
    weight: int = 1


Constraint = Union[Length, Min, Percentage, Fill]


class Direction(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _solve(total: int, constraints: list[Constraint]) -> list[int]:
    """Distribute *total* cells across *constraints*.

    Fixed and percentage sizes are granted first (in order, until space runs
    out), then minimums, then whatever remains is shared by ``Min`` (weight 1)
    and ``Fill`` constraints in proportion to their weight.
    """
    sizes = [0] * len(constraints)
    remaining = max(0, total)

    for i, c in enumerate(constraints):
        if isinstance(c, Length):
            want = max(0, c.value)
        elif isinstance(c, Percentage):
            want = max(0, total * c.value // 100)
        else:
            continue
        sizes[i] = min(want, remaining)
        remaining -= sizes[i]

    for i, c in enumerate(constraints):
        if isinstance(c, Min):
            sizes[i] = min(max(0, c.value), remaining)
            remaining -= sizes[i]

    weights = [
        1 if isinstance(c, Min) else (max(0, c.weight) if isinstance(c, Fill) else 0)
        for c in constraints
    ]
    total_weight = sum(weights)
    if remaining > 0 and total_weight > 0:
        flexible = [i for i, w in enumerate(weights) if w > 0]
        granted = 0
        for n, i in enumerate(flexible):
            if n == len(flexible) - 1:
                share = remaining - granted
            else:
                share = remaining * weights[i] // total_weight
            sizes[i] += share
            granted += share

    return sizes


def split(area: Rect, direction: Direction, constraints: list[Constraint]) -> list[Rect]:
    """Split *area* along *direction* into one rect per constraint."""
    if direction is Direction.VERTICAL:
        sizes = _solve(area.height, constraints)
        rects = []
        y = area.y
        for size in sizes:
            rects.append(Rect(area.x, y, area.width, size))
            y += size
        return rects

    sizes = _solve(area.width, constraints)
    rects = []
    x = area.x
    for size in sizes:
        rects.append(Rect(x, area.y, size, area.height))
        x += size
    return rects


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


@dataclass
class WidgetElement:
    widget: ElementWidget


@dataclass
class ContainerElement:
    children: list[Element]
    direction: Direction
    constraints: list[Constraint] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.constraints) != len(self.children):
            raise ValueError(
                f"container has {len(self.children)} children but "
                f"{len(self.constraints)} constraints"
            )


class EmptyElement:
    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyElement()

Element = Union[WidgetElement, ContainerElement, EmptyElement]


def vertical(constraints: list[Constraint], children: list[Element]) -> ContainerElement:
    return ContainerElement(children, Direction.VERTICAL, constraints)


def horizontal(constraints: list[Constraint], children: list[Element]) -> ContainerElement:
    return ContainerElement(children, Direction.HORIZONTAL, constraints)


def render_element(element: Element, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    """Draw *element* into *area* of *buf*.  Empty areas draw nothing."""
    area = area.intersection(buf.area)
    if area.is_empty():
        return
    if isinstance(element, WidgetElement):
        element.widget.render(area, buf, ctx)
    elif isinstance(element, ContainerElement):
        for child, child_area in zip(
            element.children, split(area, element.direction, element.constraints)
        ):
            render_element(child, child_area, buf, ctx)
    elif isinstance(element, EmptyElement):
        return
    else:
        raise TypeError(f"not an element: {element!r}")
