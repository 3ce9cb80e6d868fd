# towerdef

The game logic of a small tower defense game. Enemies walk fixed routes across
a map in waves. The player places towers, and the towers fire homing bullets
at enemies in range. Any enemy that reaches the end of its route costs the
player one of five lives.

There is no drawing code here. The simulation runs headless, so a front end
or a test can drive it.

## Modules

- `towerdef.geometry.Point` is a frozen integer point `(x, y)` with an extra tag
  `c` that is ignored when points are compared. It supports `+` and `-`, `*` by
  an integer, and `distance`. It also has `normalized(length, speed)`, which
  scales a direction to a step of `speed` and truncates each non-zero
  component toward zero.
- `towerdef.bullets`:
  - `BulletModel` holds `damage` and `speed`.
  - `Bullet` moves one step toward its target's `position` on each `update`.
    `check_collision` returns the target once the bullet is closer than one
    step, and `None` otherwise.
  - `BulletFactory` builds bullets of kind 0, 1 or 2 after `create_models()`
    has been called. Any other kind raises `ValueError`.
- `towerdef.enemies`:
  - `EnemyModel.calculate_path` expands routes made of horizontal and vertical
    segments into one-pixel steps. A diagonal segment or an empty route raises
    `ValueError`.
  - `Enemy.update` moves the enemy forward by its model's speed. It returns
    `True` once the enemy can go no further.
  - `Enemy.hit` subtracts health, and `Enemy.refresh_on_road` tells whether
    the enemy is alive and inside its route.
  - `Enemy.write` and `Enemy.read` store and restore an enemy's health,
    position, index and path number. They use a fixed record of little-endian
    32-bit integers.
  - `EnemyFactory` builds enemy kinds 1 to 5. Any other kind raises
    `ValueError`.
- `towerdef.towers`:
  - `TowerModel` holds the range, the rate in shots per second and the bullet
    model.
  - `Tower` has `can_fire`, which checks the reload time, `in_range` and
    `shoot`. Each tower reuses a single bullet.
  - `TowerFactory` builds tower kinds 0, 1 and 2.
  - `TowerManager` keeps a limit on the number of towers of each kind. Its
    `add_tower` returns whether the tower was placed. Its `update` fires each
    idle tower at the first enemy in range, then moves the bullets and applies
    their hits.
- `towerdef.enemy_manager`:
  - `EnemyManager` advances through the phases and spawns one enemy per
    second. It moves the enemies and recounts the player's lives.
  - Its `status` is a `GameStatus`, which is `PLAY`, `WIN`, `LOSE` or `PAUSE`.
- `towerdef.gameplay.GamePlay` ties the factories and managers together.
  - It keeps the score: 10 points for each enemy killed, minus a penalty for
    lost lives.
  - Once the enemy manager's status is no longer `PLAY`, `GamePlay` takes
    that status over.
- `towerdef.maps`:
  - `get_map(number)` returns the `MapDefinition` of one of the four built-in
    maps. Any other number raises `ValueError`.
  - `setup_gameplay(gameplay, definition, rng)` builds the models, sets the
    tower limits and the phases, and adds the map's enemies, each on a
    randomly chosen route.
- `towerdef.session.MapSession` is the play/pause/exit flow of one map:
  - `press_play` starts the round, and later presses toggle pause.
  - `press_exit` asks to leave the map.
  - `answer(yes)` answers the board that is showing. It returns the screen to
    go to next (a map number, or `0` for the main screen), or `None` when
    play continues.
  - `place_tower(kind, x, y)` places a tower.
  - `update(delta)` advances the round.
  - `state` is a `SessionState`.

## Example

```python
import random

from towerdef.session import MapSession

session = MapSession(1, clock=None, rng=random.Random(0))
session.press_play()
session.place_tower(0, 400, 300)
for _ in range(1000):
    session.update(0.016)
print(session.state, session.score)
```

You can pass in the clock (a function that returns seconds) and the random
generator. Runs are then repeatable in tests.

## What it does not do

- It has no window, no graphics and no sound. Image names such as
  `MapDefinition.background` or `Tower.image` are only strings.
- It has no command-line program.
- It does not save or load whole games, and it keeps no leaderboard.

## Installing and testing

```
pip install .[test]
pytest
```