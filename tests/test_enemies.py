import io

import pytest

from towerdef.enemies import Enemy, EnemyFactory, EnemyModel
from towerdef.geometry import Point

L_PATH = [Point(0, 0), Point(10, 0), Point(10, 6)]


def _model(speed=2, health=30):
    model = EnemyModel(speed, health)
    model.calculate_path([L_PATH])
    return model


def test_model_defaults():
    model = EnemyModel()
    assert model.speed == 1
    assert model.default_health == 5


def test_calculate_path_unit_steps():
    model = _model()
    route = model.path(0)
    assert route[0] == L_PATH[0]
    assert len(route) == 10 + 6
    assert all(a.distance(b) == 1 for a, b in zip(route, route[1:]))
    assert route[-1].distance(L_PATH[-1]) == 1
    assert L_PATH[1] in route


def test_calculate_path_several_paths():
    model = EnemyModel()
    model.calculate_path([L_PATH, [Point(5, 5), Point(5, 0)]])
    assert model.path(1)[0] == Point(5, 5)
    assert all(p.x == 5 for p in model.path(1))


def test_calculate_path_errors():
    with pytest.raises(ValueError):
        EnemyModel().calculate_path([[Point(0, 0), Point(3, 3)]])
    with pytest.raises(ValueError):
        EnemyModel().calculate_path([[]])


def test_enemy_health_defaults_to_model():
    model = _model()
    assert Enemy(model, 0).health == model.default_health
    assert Enemy(model, 0, 7).health == 7


def test_update_advances_by_speed():
    model = _model()
    enemy = Enemy(model, 0)
    assert enemy.update(0.1) is False
    assert enemy.index == model.speed
    assert enemy.position == model.path(0)[enemy.index]


def test_update_reports_end_of_path():
    model = _model()
    enemy = Enemy(model, 0)
    results = [enemy.update(0.1) for _ in range(20)]
    assert results[-1] is True
    assert enemy.index < len(model.path(0))


def test_on_road_and_hit():
    model = _model()
    enemy = Enemy(model, 0)
    assert enemy.refresh_on_road() is False
    enemy.update(0.1)
    assert enemy.refresh_on_road() is True
    enemy.hit(model.default_health + 1)
    assert enemy.on_road is False
    assert enemy.health < 0
    assert enemy.refresh_on_road() is False


def test_hit_reduces_health():
    enemy = Enemy(_model(), 0, 10)
    enemy.hit(4)
    assert enemy.health == 6


def test_write_read_round_trip():
    model = _model()
    enemy = Enemy(model, 0, 17)
    enemy.update(0.1)
    stream = io.BytesIO()
    enemy.write(stream)
    stream.seek(0)
    copy = Enemy(model, 3)
    copy.read(stream)
    assert (copy.health, copy.position, copy.index, copy.path) == (
        enemy.health,
        enemy.position,
        enemy.index,
        enemy.path,
    )


def test_read_truncated_raises():
    with pytest.raises(EOFError):
        Enemy(_model(), 0).read(io.BytesIO(b"\x01\x02"))


def test_factory_models_and_kinds():
    factory = EnemyFactory()
    factory.create_models([L_PATH])
    assert [(m.speed, m.default_health) for m in factory.models] == [(3, 25), (4, 50), (1, 75)]
    enemy = factory.create(4, 0)
    assert enemy.model is factory.models[0]
    assert enemy.kind == 4
    assert enemy.resource == "enemy4"
    assert factory.create(3, 0).model is factory.models[2]


def test_factory_unknown_kind_and_clear():
    factory = EnemyFactory()
    factory.create_models([L_PATH])
    with pytest.raises(ValueError):
        factory.create(6, 0)
    factory.clear()
    assert factory.models == []