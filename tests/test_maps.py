import random
from collections import Counter

import pytest

from towerdef.gameplay import GamePlay
from towerdef.geometry import Point
from towerdef.maps import MapDefinition, get_map, setup_gameplay


def _prepared(number, seed=0):
    gameplay = GamePlay(number, clock=lambda: 0.0, rng=random.Random(seed))
    definition = get_map(number)
    setup_gameplay(gameplay, definition, random.Random(seed))
    return gameplay, definition


def test_map_one_layout_matches_source():
    definition = get_map(1)
    assert definition.number == 1
    assert definition.paths == (
        (Point(-100, 150), Point(390, 150), Point(390, 490), Point(1250, 490)),
    )
    assert definition.phases == (3, 5, 4, 8)
    assert definition.tower_limits == (3, 2, 1)
    assert definition.background == "Assets/background/map1.bmp"
    assert definition.instruction_board == "Assets/game/info/board1.png"


@pytest.mark.parametrize(
    "number, phases, limits, path_count",
    [
        (2, (3, 7, 7, 3), (4, 3, 2), 1),
        (3, (3, 7, 3, 3), (5, 4, 3), 2),
        (4, (3, 15, 15, 15), (6, 5, 4), 2),
    ],
)
def test_other_maps(number, phases, limits, path_count):
    definition = get_map(number)
    assert isinstance(definition, MapDefinition)
    assert definition.phases == phases
    assert definition.tower_limits == limits
    assert len(definition.paths) == path_count


@pytest.mark.parametrize("number", [0, 5, -1])
def test_unknown_map_raises(number):
    with pytest.raises(ValueError):
        get_map(number)


def test_enemy_kind_substitutions():
    assert get_map(1).enemy_kind(3) == 5
    assert get_map(1).enemy_kind(1) == 1
    assert get_map(4).enemy_kind(1) == 4
    assert get_map(4).enemy_kind(3) == 3
    assert get_map(2).enemy_kind(2) == 2


def test_setup_builds_roster_for_map_one():
    gameplay, definition = _prepared(1)
    kinds = Counter(enemy.kind for enemy in gameplay.enemy_manager.enemies)
    assert kinds == {1: 5, 2: 4, 5: 8}
    assert gameplay.enemy_manager.phase_count == 3
    assert gameplay.enemy_manager.enemies_per_phase == [5, 4, 8]


def test_setup_builds_roster_for_map_four():
    gameplay, _ = _prepared(4)
    kinds = Counter(enemy.kind for enemy in gameplay.enemy_manager.enemies)
    assert kinds == {4: 15, 2: 15, 3: 15}


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_setup_sets_models_and_limits(number):
    gameplay, definition = _prepared(number)
    assert len(gameplay.enemy_factory.models) == 3
    assert len(gameplay.bullet_factory.models) == 3
    assert len(gameplay.tower_factory.models) == 3
    assert gameplay.tower_manager.max_per_kind == list(definition.tower_limits)
    assert gameplay.tower_manager.count_per_kind == [0, 0, 0]
    assert len(gameplay.enemy_manager.enemies) == sum(definition.phases[1:])


@pytest.mark.parametrize("number", [3, 4])
def test_enemy_paths_are_valid_route_indices(number):
    gameplay, definition = _prepared(number, seed=7)
    paths = {enemy.path for enemy in gameplay.enemy_manager.enemies}
    assert paths <= set(range(len(definition.paths)))


def test_enemy_models_follow_map_routes():
    gameplay, definition = _prepared(3)
    model = gameplay.enemy_factory.models[0]
    for n, route in enumerate(definition.paths):
        steps = model.path(n)
        assert steps[0] == route[0]
        assert steps[-1].distance(route[-1]) == 1.0


def test_setup_is_reproducible_with_same_seed():
    first, _ = _prepared(4, seed=3)
    second, _ = _prepared(4, seed=3)
    assert [e.path for e in first.enemy_manager.enemies] == [
        e.path for e in second.enemy_manager.enemies
    ]