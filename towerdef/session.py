"""The play/pause/exit flow of a round on one map, independent of any window."""

from __future__ import annotations

import random
import time
from enum import IntEnum
from typing import Callable

from .enemy_manager import GameStatus
from .gameplay import GamePlay
from .geometry import Point
from .maps import MapDefinition, get_map, setup_gameplay

MAIN_SCREEN = 0
LAST_MAP = 4


class SessionState(IntEnum):
    """What the map screen is currently showing."""

    PLAY = 0
    WIN = 1
    LOSE = 2
    PAUSE = 3
    EXIT = 4


class MapSession:
    """Drives one round on a map: the play and exit buttons, the yes/no boards and tower drops.

    ``answer`` returns the screen to switch to (a map number, or ``MAIN_SCREEN``)
    when the answer leaves the map, and ``None`` when play goes on.
    """

    def __init__(
        self,
        map_number: int,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ):
        self.definition: MapDefinition = get_map(map_number)
        self.map_number = map_number
        self.gameplay = GamePlay(map_number, clock or time.monotonic, rng)
        self.gameplay.destroy()
        self.gameplay.setup_towers()
        setup_gameplay(self.gameplay, self.definition, rng)

        self.state = SessionState.PAUSE
        self.first_time = True
        self.play_enabled = True
        self.exit_enabled = True
        self.health = 5

        self.pause_board = False
        self.win_board = False
        self.lose_board = False
        self.exit_board = False

    @property
    def score(self) -> int:
        return self.gameplay.point

    def press_play(self) -> None:
        """Start the round on the first press, then toggle between playing and paused."""
        if not self.play_enabled:
            return
        self.exit_enabled = False
        if self.first_time:
            self.state = SessionState.PLAY
            self.first_time = False
            self.exit_enabled = True
        elif self.gameplay.status == GameStatus.PAUSE:
            self.gameplay.status = GameStatus.PLAY
        else:
            self.gameplay.status = GameStatus.PAUSE

    def press_exit(self) -> None:
        """Ask whether to leave the map; the play button is disabled meanwhile."""
        if not self.exit_enabled:
            return
        self.state = SessionState.EXIT
        self.play_enabled = False

    def answer(self, yes: bool) -> int | None:
        """Answer the board shown for the current state."""
        if self.state == SessionState.LOSE:
            return self.map_number if yes else MAIN_SCREEN

        if self.state == SessionState.WIN:
            if yes:
                next_map = self.map_number + 1
                return next_map if next_map <= LAST_MAP else MAIN_SCREEN
            return MAIN_SCREEN

        if self.state == SessionState.PAUSE:
            if not yes:
                return MAIN_SCREEN
            self.gameplay.status = GameStatus.PLAY
            self.state = SessionState.PLAY
            self.exit_enabled = True
            self.pause_board = False
            return None

        if self.state == SessionState.EXIT:
            if not yes:
                return MAIN_SCREEN
            self.gameplay.status = GameStatus.PLAY
            self.state = SessionState.PLAY
            self.first_time = False
            self.play_enabled = True
            self.exit_board = False
            return None

        return None

    def place_tower(self, kind: int, x: int, y: int) -> bool:
        """Drop a tower of ``kind`` at ``(x, y)``; return whether the map's limit allowed it."""
        tower = self.gameplay.tower_factory.create(kind, Point(x, y))
        return self.gameplay.tower_manager.add_tower(tower)

    def update(self, delta: float) -> None:
        """Advance the round while playing and follow the game's status."""
        if self.state == SessionState.EXIT:
            self.exit_board = True
        if self.state != SessionState.PLAY:
            return

        self.health = self.gameplay.enemy_manager.user_hp
        status = self.gameplay.status
        if status == GameStatus.WIN:
            self.state = SessionState.WIN
            self.win_board = True
        elif status == GameStatus.LOSE:
            self.state = SessionState.LOSE
            self.lose_board = True
        elif status == GameStatus.PLAY:
            self.gameplay.update(delta)
            self.state = SessionState.PLAY
        elif status == GameStatus.PAUSE:
            self.state = SessionState.PAUSE
            self.pause_board = True