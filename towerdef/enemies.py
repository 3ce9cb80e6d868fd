"""Enemy models, enemies walking along paths, and their factory."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable, Sequence

from .geometry import Point

_RECORD = struct.Struct("<iiiiii")


class EnemyModel:
    """Shared speed, health and precomputed per-pixel paths."""

    def __init__(self, speed: int = 1, default_health: int = 5):
        self.speed = speed
        self.default_health = default_health
        self.is_moving = True
        self._paths: list[tuple[Point, ...]] = []

    def path(self, n: int) -> tuple[Point, ...]:
        """The ``n``-th computed path, one point per pixel step."""
        return self._paths[n]

    def calculate_path(self, points_list: Iterable[Sequence[Point]]) -> None:
        """Expand each polyline of axis-aligned segments into unit steps and store it."""
        for points in points_list:
            if not points:
                raise ValueError("a path needs at least one point")
            steps: list[Point] = []
            x, y = points[0].x, points[0].y
            for end in points[1:]:
                if x != end.x and y != end.y:
                    raise ValueError("path segments must be horizontal or vertical")
                dx = (end.x > x) - (end.x < x)
                dy = (end.y > y) - (end.y < y)
                while x != end.x or y != end.y:
                    steps.append(Point(x, y))
                    x += dx
                    y += dy
            self._paths.append(tuple(steps))


class Enemy:
    """An enemy advancing along one of its model's paths."""

    def __init__(self, model: EnemyModel, path: int, health: int | None = None):
        self.model = model
        self.path = path
        self.health = model.default_health if health is None else health
        self.position = Point()
        self.index = 0
        self.kind = 0
        self.resource = ""
        self.on_road = False

    @property
    def speed(self) -> int:
        return self.model.speed

    def update(self, delta: float) -> bool:
        """Advance by the model's speed; return True once the end of the path is reached."""
        route = self.model.path(self.path)
        if self.index < len(route) - self.model.speed:
            self.index += self.model.speed
            self.position = route[self.index]
            return False
        return True

    def refresh_on_road(self) -> bool:
        """Recompute and return whether the enemy is alive and inside its path."""
        route = self.model.path(self.path)
        self.on_road = self.health > 0 and 0 < self.index < len(route) - self.model.speed
        return self.on_road

    def hit(self, amount: int) -> None:
        if self.health < amount:
            self.on_road = False
        self.health -= amount

    def write(self, stream: BinaryIO) -> None:
        """Write health, position, index and path as little-endian 32-bit integers."""
        stream.write(
            _RECORD.pack(
                self.health, self.position.x, self.position.y, self.position.c, self.index, self.path
            )
        )

    def read(self, stream: BinaryIO) -> None:
        """Read back what ``write`` produced."""
        data = stream.read(_RECORD.size)
        if len(data) < _RECORD.size:
            raise EOFError("truncated enemy record")
        health, x, y, c, index, path = _RECORD.unpack(data)
        self.health = health
        self.position = Point(x, y, c)
        self.index = index
        self.path = path


# kind -> (resource name, image scale, model index)
_ENEMY_KINDS = {
    1: ("enemy1", 3.0, 0),
    2: ("enemy2", 2.5, 1),
    3: ("enemy3", 2.5, 2),
    4: ("enemy4", 0.6, 0),
    5: ("enemy5", 0.8, 0),
}


class EnemyFactory:
    """Holds enemy models and builds enemies by kind."""

    def __init__(self):
        self.models: list[EnemyModel] = []

    def create_models(self, paths: Sequence[Sequence[Point]]) -> None:
        new = [EnemyModel(3, 25), EnemyModel(4, 50), EnemyModel(1, 75)]
        for model in new:
            model.calculate_path(paths)
        self.models.extend(new)

    def clear(self) -> None:
        self.models.clear()

    def create(self, kind: int, path: int) -> Enemy:
        """Build an enemy of ``kind`` 1 to 5 walking path number ``path``."""
        if kind not in _ENEMY_KINDS:
            raise ValueError("Unknown enemy type")
        resource, scale, model_index = _ENEMY_KINDS[kind]
        enemy = Enemy(self.models[model_index], path)
        enemy.resource = resource
        enemy.scale = scale
        enemy.kind = kind
        return enemy