"""The four playable maps and how a round is set up on them."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .gameplay import GamePlay
from .geometry import Point

PHASE_COUNT = 3


@dataclass(frozen=True)
class MapDefinition:
    """Static layout of a map: enemy routes, phase sizes, tower limits and artwork."""

    number: int
    paths: tuple[tuple[Point, ...], ...]
    phases: tuple[int, ...]
    tower_limits: tuple[int, ...]
    background: str
    instruction_board: str

    def enemy_kind(self, base_kind: int) -> int:
        """The enemy kind used on this map for the phase enemy ``base_kind``."""
        if base_kind == 1 and self.number == 4:
            return 4
        if base_kind == 3 and self.number == 1:
            return 5
        return base_kind


def _route(*points: tuple[int, int]) -> tuple[Point, ...]:
    return tuple(Point(x, y) for x, y in points)


_MAPS = {
    1: MapDefinition(
        number=1,
        paths=(_route((-100, 150), (390, 150), (390, 490), (1250, 490)),),
        phases=(3, 5, 4, 8),
        tower_limits=(3, 2, 1),
        background="Assets/background/map1.bmp",
        instruction_board="Assets/game/info/board1.png",
    ),
    2: MapDefinition(
        number=2,
        paths=(
            _route(
                (-100, 115),
                (435, 115),
                (435, 330),
                (265, 330),
                (265, 515),
                (1250, 515),
            ),
        ),
        phases=(3, 7, 7, 3),
        tower_limits=(4, 3, 2),
        background="Assets/background/map2.bmp",
        instruction_board="Assets/game/info/board2.png",
    ),
    3: MapDefinition(
        number=3,
        paths=(
            _route((-100, 170), (460, 170), (460, 450), (1200, 450)),
            _route((280, 800), (280, 450), (1200, 450)),
        ),
        phases=(3, 7, 3, 3),
        tower_limits=(5, 4, 3),
        background="Assets/background/map3.bmp",
        instruction_board="Assets/game/info/board3.png",
    ),
    4: MapDefinition(
        number=4,
        paths=(
            _route((-100, 160), (660, 160), (660, 800)),
            _route((290, -100), (290, 400), (1200, 400)),
        ),
        phases=(3, 15, 15, 15),
        tower_limits=(6, 5, 4),
        background="Assets/background/map4.bmp",
        instruction_board="Assets/game/info/board4.png",
    ),
}


def get_map(number: int) -> MapDefinition:
    """The definition of map ``number`` (1 to 4)."""
    try:
        return _MAPS[number]
    except KeyError:
        raise ValueError(f"Unknown map: {number}") from None


def setup_gameplay(
    gameplay: GamePlay,
    definition: MapDefinition,
    rng: random.Random | None = None,
) -> None:
    """Prepare a new round on ``definition``: models, limits, phases and the enemy roster."""
    rng = rng or random.Random()
    gameplay.setup_enemies(definition.paths)
    gameplay.tower_manager.set_type_limits(definition.tower_limits)

    enemies = gameplay.enemy_manager
    enemies.setup(definition.phases)
    enemies.phase_count = PHASE_COUNT

    path_count = len(definition.paths)
    for base_kind in range(1, PHASE_COUNT + 1):
        kind = definition.enemy_kind(base_kind)
        for _ in range(definition.phases[base_kind]):
            enemies.add_enemy(gameplay.enemy_factory.create(kind, rng.randrange(path_count)))