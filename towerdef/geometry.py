"""Integer points on the game field."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A pixel position with an extra tag ``c`` that takes no part in equality."""

    x: int = 0
    y: int = 0
    c: int = field(default=0, compare=False)

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: int) -> Point:
        return Point(self.x * scale, self.y * scale)

    def normalized(self, length: float, speed: int) -> Point:
        """Scale to ``speed`` over ``length``, truncating each non-zero component toward zero."""
        nx = int(self.x / length * speed) if self.x != 0 else self.x
        ny = int(self.y / length * speed) if self.y != 0 else self.y
        return Point(nx, ny)