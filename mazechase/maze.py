"""Maze loading: text layout -> static tile rows, max score and portal pair."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from mazechase.config import MAZE_COLS, MAZE_ROWS, PELLET_POINTS, POWER_PELLET_POINTS
from mazechase.grid import STATIC_SYMBOLS, Position, Tile

logger = logging.getLogger(__name__)


class MazeError(ValueError):
    """Maze data that cannot start a simulation."""


@dataclass
class Maze:
    layout: List[str]
    max_score: int
    portals: Optional[Tuple[Position, Position]] = None  # (A ']', B '[')

    @property
    def rows(self) -> int:
        return len(self.layout)

    @property
    def cols(self) -> int:
        return len(self.layout[0]) if self.layout else 0


def parse_maze(lines: Iterable[str], rows: int = MAZE_ROWS, cols: int = MAZE_COLS,
               pellet_points: int = PELLET_POINTS,
               power_pellet_points: int = POWER_PELLET_POINTS) -> Maze:
    """
    Build a ``Maze`` from raw text lines.

    Characters outside the tile alphabet are dropped. Short lines and missing
    rows are padded with empty tiles so the result is always ``rows`` x ``cols``.
    """
    layout: List[str] = []
    portal_a: List[Position] = []
    portal_b: List[Position] = []
    max_score = 0

    for raw in lines:
        line = "".join(ch for ch in raw.rstrip("\r\n") if ch in STATIC_SYMBOLS)
        if len(layout) >= rows:
            if line.strip():
                raise MazeError(f"maze has more than {rows} rows")
            continue
        if len(line) > cols:
            raise MazeError(f"row {len(layout)} is wider than {cols} columns")

        r = len(layout)
        for c, ch in enumerate(line):
            if ch == Tile.PELLET.value:
                max_score += pellet_points
            elif ch == Tile.POWER_PELLET.value:
                max_score += power_pellet_points
            elif ch == Tile.PORTAL_A.value:
                portal_a.append((r, c))
            elif ch == Tile.PORTAL_B.value:
                portal_b.append((r, c))
        layout.append(line.ljust(cols, Tile.EMPTY.value))

    while len(layout) < rows:
        layout.append(Tile.EMPTY.value * cols)

    if len(portal_a) > 1 or len(portal_b) > 1:
        raise MazeError("a maze holds at most one portal pair")
    if len(portal_a) != len(portal_b):
        raise MazeError("portal marker without its pair")

    portals = (portal_a[0], portal_b[0]) if portal_a else None
    if portals:
        (_, a_col), (_, b_col) = portals
        if a_col < 1 or b_col > cols - 2:
            raise MazeError("portal exits must lie inside the grid")
    logger.debug("Parsed %dx%d maze, max score %d, portals %s", rows, cols, max_score, portals)
    return Maze(layout=layout, max_score=max_score, portals=portals)


def load_maze(path: Union[str, Path], rows: int = MAZE_ROWS, cols: int = MAZE_COLS,
              pellet_points: int = PELLET_POINTS,
              power_pellet_points: int = POWER_PELLET_POINTS) -> Maze:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MazeError(f"cannot read maze file {path}: {e}") from e
    logger.info("Loading maze from %s", path)
    return parse_maze(text.splitlines(), rows, cols, pellet_points, power_pellet_points)
