"""Spawning, phases and the life count for the enemies on a map."""

from __future__ import annotations

import random
import time
from enum import IntEnum
from typing import Callable, Iterable, Sequence

from .enemies import Enemy


class GameStatus(IntEnum):
    """Outcome of a round."""

    PLAY = 0
    WIN = 1
    LOSE = 2
    PAUSE = 3


class EnemyManager:
    """Owns the enemies of a round and decides when the round is won or lost."""

    spawn_interval = 1
    default_user_hp = 5

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ):
        self._clock = clock or time.monotonic
        self._rng = rng or random.Random()
        self.enemies: list[Enemy] = []
        self.phase_count = 3
        self.enemies_per_phase: list[int] = []
        self.phase = 0
        self.remaining = 0
        self.enemy_count = 0
        self.spawned = 0
        self.last_spawn: float | None = None
        self.user_hp = self.default_user_hp
        self.status = GameStatus.PLAY
        self.next_spawn_delay = self.random_interval(50000, 20000000)

    def add_enemy(self, enemy: Enemy) -> None:
        self.enemies.append(enemy)

    def load_enemies(self, enemies: Iterable[Enemy]) -> None:
        """Append restored enemies."""
        self.enemies.extend(enemies)

    def setup(self, config: Sequence[int]) -> None:
        """Read ``[phase count, enemies in phase 1, enemies in phase 2, ...]``."""
        if not config:
            raise ValueError("empty map setup")
        count = config[0]
        per_phase = list(config[1 : 1 + count])
        if len(per_phase) < count:
            raise ValueError("map setup lists fewer phases than it declares")
        self.phase_count = count
        self.enemies_per_phase.extend(per_phase)

    def random_interval(self, low: int, high: int) -> int:
        """A uniform random integer in ``[low, high]``."""
        return self._rng.randint(low, high)

    def update(self, delta: float) -> None:
        """Advance phases, spawn enemies, move them and recount the user's lives."""
        if self.remaining == 0 and self.spawned >= self.enemy_count:
            if self.phase < self.phase_count:
                self.enemy_count += self.enemies_per_phase[self.phase]
                self.phase += 1
            else:
                self.status = GameStatus.WIN

        self.remaining = 0

        now = self._clock()
        due = (
            self.last_spawn is None
            or int((now - self.last_spawn) * 1000) > 1000 * self.spawn_interval
        )
        if due and self.spawned < self.enemy_count:
            self.spawned += 1
            self.last_spawn = now
            self.next_spawn_delay = self.random_interval(50000, 20000000)

        self.user_hp = self.default_user_hp
        for enemy in self.enemies[: self.spawned]:
            if enemy.health > 0:
                if enemy.update(delta):
                    self.user_hp -= 1
                else:
                    self.remaining += 1

        if self.user_hp <= 0:
            self.status = GameStatus.LOSE