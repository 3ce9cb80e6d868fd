"""One round of play: enemies, towers, score and status."""

from __future__ import annotations

import math
import random
import time
from typing import Callable, Sequence

from .bullets import BulletFactory
from .enemies import EnemyFactory
from .enemy_manager import EnemyManager, GameStatus
from .geometry import Point
from .towers import TowerFactory, TowerManager

POINTS_PER_KILL = 10


class GamePlay:
    """Ties the enemy and tower managers together and keeps the score."""

    def __init__(
        self,
        code: int = 0,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ):
        clock = clock or time.monotonic
        self.code = code
        self.status = GameStatus.PLAY
        self.point = 0
        self.bullet_factory = BulletFactory()
        self.enemy_factory = EnemyFactory()
        self.tower_factory = TowerFactory(self.bullet_factory, clock)
        self.enemy_manager = EnemyManager(clock, rng)
        self.tower_manager = TowerManager()

    def setup_enemies(self, paths: Sequence[Sequence[Point]]) -> None:
        """Build enemy, bullet and tower models for the map's ``paths``."""
        self.enemy_factory.create_models(paths)
        self.bullet_factory.create_models()
        self.tower_factory.create_models()

    def setup_towers(self) -> None:
        """Build bullet and tower models."""
        self.bullet_factory.create_models()
        self.tower_factory.create_models()

    def update(self, delta: float) -> None:
        """Advance one frame while playing; otherwise take over the enemy manager's status."""
        enemies = self.enemy_manager
        if enemies.status != GameStatus.PLAY:
            self.status = enemies.status
            return
        enemies.update(delta)
        for enemy in enemies.enemies:
            enemy.refresh_on_road()
        self.tower_manager.update(enemies.enemies, delta)

        self.point = POINTS_PER_KILL * sum(1 for e in enemies.enemies if e.health <= 0)
        lost = int(math.fmod(enemies.user_hp, 5))
        if lost > 0:
            self.point -= (5 - lost) * POINTS_PER_KILL

    def destroy(self) -> None:
        """Drop every model."""
        self.enemy_factory.clear()
        self.bullet_factory.clear()
        self.tower_factory.clear()