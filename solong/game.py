"""Player movement and key handling."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO

from .gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

ESC_KEY = 65307
W_KEY = 119
A_KEY = 97
S_KEY = 115
D_KEY = 100

_DIRECTIONS = {
    W_KEY: (0, -1),
    A_KEY: (-1, 0),
    S_KEY: (0, 1),
    D_KEY: (1, 0),
}


class MoveResult(Enum):
    """What a key press or move did."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    EXIT_CLOSED = "exit_closed"
    COMPLETED = "completed"
    QUIT = "quit"


class Game:
    """The state of a running game on a validated map."""

    def __init__(self, game_map: GameMap, output: Optional[TextIO] = None) -> None:
        self.map = game_map
        self.player_x = game_map.player_x
        self.player_y = game_map.player_y
        self.collectibles = game_map.collectibles
        self.steps = 0
        self.finished = False
        self._output = output if output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by one step of ``(dx, dy)``."""
        new_x = self.player_x + dx
        new_y = self.player_y + dy
        if not (0 <= new_x < self.map.width and 0 <= new_y < self.map.height):
            return MoveResult.BLOCKED
        try:
            target = self.map.tile(new_x, new_y)
        except IndexError:
            return MoveResult.BLOCKED
        if target == WALL:
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles -= 1
        if target == EXIT:
            if self.collectibles == 0:
                self._write("Game completed!\n")
                self.finished = True
                return MoveResult.COMPLETED
            return MoveResult.EXIT_CLOSED
        self.map.rows[self.player_y][self.player_x] = FLOOR
        self.map.rows[new_y][new_x] = PLAYER
        self.player_x, self.player_y = new_x, new_y
        self.map.player_x, self.map.player_y = new_x, new_y
        self.steps += 1
        self._write(f"Steps: {self.steps}\n")
        return MoveResult.MOVED

    def handle_key(self, keycode: int) -> MoveResult:
        """React to a key press: Escape quits, W/A/S/D move."""
        if keycode == ESC_KEY:
            self.finished = True
            return MoveResult.QUIT
        direction = _DIRECTIONS.get(keycode)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(*direction)