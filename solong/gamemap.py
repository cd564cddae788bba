"""Loading and validating game maps made of the tiles 0, 1, C, E and P."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
VALID_TILES = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})


class MapError(ValueError):
    """Raised when a map cannot be read or fails validation."""


@dataclass
class GameMap:
    """A validated map; ``rows`` is mutable so the game can move the player."""

    rows: List[List[str]]
    width: int
    height: int
    player_x: int
    player_y: int
    collectibles: int
    exits: int

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        if not (0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[y][x]


@dataclass(frozen=True)
class _Census:
    collectibles: int
    exits: int
    players: int
    player: Optional[Tuple[int, int]]


def read_map_lines(path: Union[str, Path]) -> List[str]:
    """Read a map file into its rows, without line terminators."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc}") from exc
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _census(rows: Sequence[str]) -> Optional[_Census]:
    collectibles = exits = players = 0
    player: Optional[Tuple[int, int]] = None
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile not in VALID_TILES:
                return None
            if tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exits += 1
            elif tile == PLAYER:
                players += 1
                player = (x, y)
    return _Census(collectibles, exits, players, player)


def has_valid_characters(rows: Sequence[str]) -> bool:
    """Check the tiles: exactly one player, at least one exit and collectible."""
    census = _census(rows)
    return (
        census is not None
        and census.players == 1
        and census.exits >= 1
        and census.collectibles >= 1
    )


def _tile_or_none(rows: Sequence[str], x: int, y: int) -> Optional[str]:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return None


def validate_walls(rows: Sequence[str]) -> bool:
    """Check that the border, measured by the first row's width, is all wall."""
    if not rows:
        return False
    width = len(rows[0])
    height = len(rows)
    if width == 0:
        return False
    top, bottom = rows[0], rows[height - 1]
    for x in range(width):
        if _tile_or_none([top], x, 0) != WALL or _tile_or_none([bottom], x, 0) != WALL:
            return False
    return all(
        _tile_or_none(rows, 0, y) == WALL and _tile_or_none(rows, width - 1, y) == WALL
        for y in range(height)
    )


def _find_player(rows: Sequence[str]) -> Optional[Tuple[int, int]]:
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x != -1:
            return x, y
    return None


def validate_paths(rows: Sequence[str], collectibles: int, exits: int) -> bool:
    """Check that every collectible and exit can be reached from the player."""
    start = _find_player(rows)
    if start is None:
        return False
    seen = set()
    found_collectibles = found_exits = 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in seen:
            continue
        tile = _tile_or_none(rows, x, y)
        if tile is None or tile == WALL:
            continue
        seen.add((x, y))
        if tile == COLLECTIBLE:
            found_collectibles += 1
        elif tile == EXIT:
            found_exits += 1
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return found_collectibles == collectibles and found_exits == exits


def validate_map(rows: Sequence[str]) -> bool:
    """Run every check a playable map must pass."""
    if not rows or not rows[0]:
        return False
    if not has_valid_characters(rows):
        return False
    if not validate_walls(rows):
        return False
    census = _census(rows)
    return census is not None and validate_paths(rows, census.collectibles, census.exits)


def load_map(path: Union[str, Path]) -> GameMap:
    """Read and validate a map file."""
    rows = read_map_lines(path)
    if not validate_map(rows):
        raise MapError("Invalid map")
    census = _census(rows)
    assert census is not None and census.player is not None
    player_x, player_y = census.player
    return GameMap(
        rows=[list(row) for row in rows],
        width=len(rows[0]),
        height=len(rows),
        player_x=player_x,
        player_y=player_y,
        collectibles=census.collectibles,
        exits=census.exits,
    )