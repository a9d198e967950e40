"""Tile grid, directions and passability rules."""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from mazechase.config import ADVERSARY_ICONS, FRIGHTENED_ICON, PLAYER_ICONS

Position = Tuple[int, int]  # (row, col)


class Tile(str, Enum):
    EMPTY = " "
    WALL = "#"
    PELLET = "."
    POWER_PELLET = "@"
    PORTAL_A = "]"
    PORTAL_B = "["
    PEN = "~"


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return REVERSE[self]

    @property
    def delta(self) -> Position:
        return DELTAS[self]


# Evaluation order doubles as the tie-break order for adversary moves
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

WALL_SYMBOLS = frozenset("#*|-")
STATIC_SYMBOLS = WALL_SYMBOLS | frozenset(t.value for t in Tile)

PLAYER_OVERLAYS = frozenset(c for pair in PLAYER_ICONS.values() for c in pair)
ADVERSARY_OVERLAYS = frozenset(ADVERSARY_ICONS.values()) | {FRIGHTENED_ICON}

# Agents never block the player
PLAYER_PASSABLE = frozenset((
    Tile.EMPTY.value, Tile.PELLET.value, Tile.POWER_PELLET.value,
    Tile.PORTAL_A.value, Tile.PORTAL_B.value,
)) | ADVERSARY_OVERLAYS

# Adversaries may cross the pen floor but never a portal
ADVERSARY_PASSABLE = frozenset((
    Tile.EMPTY.value, Tile.PELLET.value, Tile.POWER_PELLET.value, Tile.PEN.value,
)) | PLAYER_OVERLAYS


def passable_for_player(symbol: str) -> bool:
    return symbol in PLAYER_PASSABLE


def passable_for_adversary(symbol: str) -> bool:
    return symbol in ADVERSARY_PASSABLE


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def step(pos: Position, direction: Direction) -> Position:
    """Return the neighbouring cell of ``pos`` in ``direction``."""
    if direction not in DELTAS:
        raise ValueError(f"Unknown direction: {direction!r}")
    dr, dc = DELTAS[direction]
    return (pos[0] + dr, pos[1] + dc)


class TileGrid:
    """
    The static layer of the maze plus the pellets still on it.

    Walls, empty cells, portals and the pen never change after load. Pellet
    and power pellet cells are cleared as the player eats them. Agent icons
    are never written here; they only exist on the per-tick snapshot built by
    ``overlay()``.
    """

    def __init__(self, layout: Iterable[str]):
        self.cells: List[List[str]] = [list(row) for row in layout]
        self.rows = len(self.cells)
        self.cols = len(self.cells[0]) if self.cells else 0
        if any(len(row) != self.cols for row in self.cells):
            raise ValueError("tile grid must be rectangular")

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def tile_at(self, pos: Position) -> Optional[str]:
        if not self.in_bounds(pos):
            return None
        return self.cells[pos[0]][pos[1]]

    def player_can_enter(self, pos: Position) -> bool:
        tile = self.tile_at(pos)
        return tile is not None and passable_for_player(tile)

    def adversary_can_enter(self, pos: Position) -> bool:
        tile = self.tile_at(pos)
        return tile is not None and passable_for_adversary(tile)

    def clear(self, pos: Position) -> Optional[str]:
        """Remove a pellet or power pellet at ``pos``; return what was eaten."""
        tile = self.tile_at(pos)
        if tile in (Tile.PELLET.value, Tile.POWER_PELLET.value):
            self.cells[pos[0]][pos[1]] = Tile.EMPTY.value
            return tile
        return None

    def count(self, symbol: str) -> int:
        return sum(row.count(symbol) for row in self.cells)

    def overlay(self) -> List[List[str]]:
        """Fresh copy of the static layer for agents to be stamped onto."""
        return [list(row) for row in self.cells]

    def __repr__(self):
        return f"TileGrid({self.rows}x{self.cols})"
