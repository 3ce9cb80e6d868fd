"""Tower models, towers that fire one bullet at a time, their factory and manager."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from .bullets import Bullet, BulletFactory, BulletModel
from .enemies import Enemy
from .geometry import Point


@dataclass
class TowerModel:
    """Shared tower parameters: range in pixels and shots per second."""

    range: int = 30
    rate: int = 1000
    bullet_model: BulletModel | None = None


class Tower:
    """A placed tower with its single reusable bullet."""

    def __init__(
        self,
        model: TowerModel | None,
        position: Point,
        bullet: Bullet | None = None,
        kind: int = 0,
        clock: Callable[[], float] | None = None,
    ):
        self._clock = clock or time.monotonic
        self.model = model
        self.position = position
        self.bullet = bullet
        self.kind = kind
        self.image = ""
        self.scale = 1.0
        self.last_shot = self._clock()

    def can_fire(self) -> bool:
        """True when the reload time for the model's rate has passed."""
        reload_ms = 1000 // self.model.rate
        elapsed_ms = int((self._clock() - self.last_shot) * 1000)
        return reload_ms < elapsed_ms

    def in_range(self, target: Enemy) -> bool:
        """True when ``target`` is on the road and within the model's range."""
        distance = self.position.distance(target.position)
        return target.on_road and distance <= self.model.range

    def shoot(self, target: Enemy) -> None:
        """Launch the bullet from the tower toward ``target``."""
        self.last_shot = self._clock()
        self.bullet.position = self.position
        self.bullet.target = target
        self.bullet.visible = True


# kind -> (image, scale)
_TOWER_KINDS = {
    0: ("Assets/game/tower.bmp", 2.0),
    1: ("Assets/game/tower3.png", 1.4),
    2: ("Assets/game/tured.bmp", 1.0),
}


class TowerFactory:
    """Holds tower models and builds towers by kind."""

    def __init__(self, bullet_factory: BulletFactory, clock: Callable[[], float] | None = None):
        self.bullet_factory = bullet_factory
        self._clock = clock or time.monotonic
        self.models: list[TowerModel] = []

    def create_models(self) -> None:
        bullets = self.bullet_factory.models
        self.models.append(TowerModel(100, 5, bullets[0]))
        self.models.append(TowerModel(150, 5, bullets[1]))
        self.models.append(TowerModel(200, 5, bullets[2]))

    def clear(self) -> None:
        self.models.clear()

    def create(self, kind: int, position: Point) -> Tower:
        """Build a tower of ``kind`` 0, 1 or 2 at ``position``."""
        if kind not in _TOWER_KINDS:
            raise ValueError("Unknown tower type")
        bullet = self.bullet_factory.create(kind, None, Point())
        tower = Tower(self.models[kind], position, bullet, kind, self._clock)
        tower.image, tower.scale = _TOWER_KINDS[kind]
        return tower


class TowerManager:
    """Placed towers, with a per-kind limit on how many may be placed."""

    def __init__(self):
        self.towers: list[Tower] = []
        self.max_per_kind: list[int] = [4, 3, 2]
        self.count_per_kind: list[int] = [0, 0, 0]
        self.tower_count = 5

    def add_tower(self, tower: Tower) -> bool:
        """Place ``tower`` if its kind is still below its limit; return whether it was placed."""
        kind = tower.kind
        if 0 <= kind < len(self.max_per_kind) and self.count_per_kind[kind] < self.max_per_kind[kind]:
            self.towers.append(tower)
            self.count_per_kind[kind] += 1
            return True
        return False

    def set_type_limits(self, limits: Sequence[int]) -> None:
        """Set per-kind limits; counts already placed are kept for the kinds that remain."""
        self.max_per_kind = list(limits)
        size = len(self.max_per_kind)
        kept = self.count_per_kind[:size]
        self.count_per_kind = kept + [0] * (size - len(kept))

    def update(self, enemies: Sequence[Enemy], delta: float) -> None:
        """Let each idle tower fire at the first enemy in range, then move and resolve bullets."""
        for tower in self.towers:
            bullet = tower.bullet
            if bullet is None:
                continue
            if tower.can_fire() and not bullet.visible:
                for enemy in enemies:
                    if tower.in_range(enemy):
                        tower.shoot(enemy)
                        break
            if bullet.visible:
                bullet.update(delta)
                hit = bullet.check_collision()
                if hit is not None:
                    hit.hit(bullet.damage)
                    bullet.visible = False

    def bullets(self) -> list[Bullet | None]:
        """The bullet of every tower, in placement order."""
        return [tower.bullet for tower in self.towers]

    def load_positions(self, towers: Iterable[Tower]) -> None:
        """Copy positions from ``towers`` onto the placed towers, pairwise."""
        for placed, restored in zip(self.towers, towers):
            placed.position = restored.position