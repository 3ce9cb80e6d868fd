"""Bullets fired by towers and the factory that builds them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .geometry import Point


@dataclass
class BulletModel:
    """Shared bullet parameters."""

    damage: int = 1
    speed: int = 3


class Bullet:
    """A bullet homing on a target that exposes a ``position`` point."""

    frames: tuple[str, ...] = ()

    def __init__(self, model: BulletModel, position: Point, target: Any = None):
        self.model = model
        self.position = position
        self.target = target
        self.visible = False

    @property
    def damage(self) -> int:
        return self.model.damage

    @property
    def speed(self) -> int:
        return self.model.speed

    def check_collision(self) -> Any:
        """Return the target when it is closer than one step, else None."""
        if self.position.distance(self.target.position) < self.model.speed:
            return self.target
        return None

    def update(self, delta: float) -> None:
        """Move one step toward the target."""
        direction = self.target.position - self.position
        length = math.sqrt(direction.x * direction.x + direction.y * direction.y)
        self.position = self.position + direction.normalized(length, self.model.speed)


_BULLET_FRAMES = {
    0: ("Assets/game/bullet2/bullet2.png", "Assets/game/bullet2/bullet2-2.png"),
    1: ("Assets/game/bullet3/bullet3-1.png", "Assets/game/bullet3/bullet3-2.png"),
    2: ("Assets/game/bullet3/bullet3-1.png", "Assets/game/bullet3/bullet3-2.png"),
}


class BulletFactory:
    """Holds the bullet models and builds bullets by kind."""

    def __init__(self):
        self.models: list[BulletModel] = []

    def create_models(self) -> None:
        self.models.append(BulletModel(1, 7))
        self.models.append(BulletModel(2, 7))
        self.models.append(BulletModel(3, 10))

    def clear(self) -> None:
        self.models.clear()

    def create(self, kind: int, target: Any = None, position: Point | None = None) -> Bullet:
        """Build a bullet of ``kind`` 0, 1 or 2."""
        if kind not in _BULLET_FRAMES:
            raise ValueError("Unknown bullet type")
        bullet = Bullet(self.models[kind], position if position is not None else Point(), target)
        bullet.frames = _BULLET_FRAMES[kind]
        return bullet