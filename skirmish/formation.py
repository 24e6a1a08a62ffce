"""Two-dimensional vectors and rectangular formation layouts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import islice, product


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def length_sq(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y


@dataclass(frozen=True)
class FormationSlot:
    """A single position inside a formation."""

    position: Vec2 = field(default_factory=Vec2)


@dataclass
class FormationLayout:
    """A grid of slots arranged around a centre point."""

    center: Vec2 = field(default_factory=Vec2)
    spacing: float = 1
    rows: int = 0
    columns: int = 0
    slots: list[FormationSlot] = field(default_factory=list)

    def clear(self) -> None:
        """Reset the layout to its empty state."""
        self.center = Vec2()
        self.spacing = 1
        self.rows = 0
        self.columns = 0
        self.slots.clear()

    def is_empty(self) -> bool:
        return not self.slots

    def slot_count(self) -> int:
        return len(self.slots)


def build_rectangular(center: Vec2, unit_count: int, spacing: float) -> FormationLayout:
    """Lay out ``unit_count`` slots in a near-square grid centred on ``center``.

    The grid has the smallest number of columns whose square holds every unit;
    slots are filled row by row from the top-left corner.
    """
    if unit_count < 0:
        raise ValueError("unit_count must not be negative")

    layout = FormationLayout(center=center, spacing=spacing)
    if unit_count == 0:
        return layout

    columns = math.isqrt(unit_count - 1) + 1
    rows = -(-unit_count // columns)
    layout.rows = rows
    layout.columns = columns

    start_x = center.x - (columns - 1) * spacing / 2
    start_y = center.y - (rows - 1) * spacing / 2

    cells = islice(product(range(rows), range(columns)), unit_count)
    layout.slots = [
        FormationSlot(Vec2(start_x + column * spacing, start_y + row * spacing))
        for row, column in cells
    ]
    return layout