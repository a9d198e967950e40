"""Grid maze chase: one player, four pursuers with arcade ghost targeting."""

from mazechase.actors import Adversary, AdversaryMode, Identity, Player
from mazechase.config import Settings
from mazechase.grid import Direction, Tile, TileGrid
from mazechase.maze import Maze, MazeError, load_maze, parse_maze
from mazechase.modes import ModeController
from mazechase.simulation import Command, Frame, Simulation, Status, TickResolver

__version__ = "1.0.0"

__all__ = [
    "Adversary", "AdversaryMode", "Command", "Direction", "Frame", "Identity",
    "Maze", "MazeError", "ModeController", "Player", "Settings", "Simulation",
    "Status", "Tile", "TileGrid", "TickResolver", "load_maze", "parse_maze",
]
