"""
Per-tick simulation: mode clock, agent moves, pellets, portals, collisions.

One ``Simulation.tick()`` is one frame. The caller owns the clock that decides
how often ticks happen, feeds at most one ``Command`` per frame through
``steer()``, and renders the ``Frame`` each tick returns.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from mazechase.actors import Adversary, AdversaryMode, Identity, Player
from mazechase.config import DEFAULT_SETTINGS, MAZE_LAYOUT, Settings
from mazechase.grid import Direction, Position, Tile, TileGrid
from mazechase.maze import Maze, MazeError, parse_maze
from mazechase.modes import ModeController
from mazechase.targeting import TargetContext

logger = logging.getLogger(__name__)


class Command(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    QUIT = auto()

    @property
    def direction(self) -> Optional[Direction]:
        return COMMAND_DIRECTIONS.get(self)


COMMAND_DIRECTIONS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}


class Status(Enum):
    RUNNING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class Frame:
    """What a renderer gets each tick."""
    tiles: Tuple[str, ...]
    score: int
    max_score: int
    status: Status

    def as_text(self) -> str:
        return "\n".join(self.tiles) + f"\n\nScore: {self.score}"


class TickResolver:
    """
    Reconciles the grid with the agents after they moved.

    Order: eat what is under the player (or take the portal), stamp the
    agents onto a fresh copy of the static layer, then settle collisions.
    """

    def __init__(self, settings: Settings = DEFAULT_SETTINGS,
                 portals: Optional[Tuple[Position, Position]] = None):
        self.settings = settings
        self.portals = portals

    def resolve(self, grid: TileGrid, player: Player, adversaries: List[Adversary],
                modes: ModeController) -> List[List[str]]:
        self.consume(grid, player, adversaries, modes)
        tiles = self.render(grid, player, adversaries)
        self.collide(player, adversaries)
        return tiles

    def consume(self, grid: TileGrid, player: Player, adversaries: List[Adversary],
                modes: ModeController):
        eaten = grid.clear(player.pos)
        if eaten == Tile.PELLET.value:
            player.score += self.settings.pellet_points
        elif eaten == Tile.POWER_PELLET.value:
            player.score += self.settings.power_pellet_points
            logger.debug("Power pellet eaten at %s", player.pos)
            modes.frighten()
            modes.apply(adversaries)
        else:
            self.teleport(player)

    def teleport(self, player: Player):
        if not self.portals:
            return
        portal_a, portal_b = self.portals
        # Land one tile outward so the exit is not itself a portal
        if player.pos == portal_a:
            player.pos = (portal_b[0], portal_b[1] + 1)
        elif player.pos == portal_b:
            player.pos = (portal_a[0], portal_a[1] - 1)
        else:
            return
        logger.debug("Player teleported to %s", player.pos)

    def render(self, grid: TileGrid, player: Player,
               adversaries: Iterable[Adversary]) -> List[List[str]]:
        tiles = grid.overlay()
        r, c = player.pos
        tiles[r][c] = player.icon
        # Adversaries are stamped last so they cover the player
        for adversary in adversaries:
            r, c = adversary.pos
            tiles[r][c] = adversary.icon
        return tiles

    def collide(self, player: Player, adversaries: Iterable[Adversary]):
        for adversary in adversaries:
            if adversary.pos != player.pos:
                continue
            if adversary.frightened:
                logger.info("%s eaten, respawning at %s", adversary.name, self.settings.respawn)
                adversary.respawn(self.settings.respawn)
            elif not player.is_over:
                logger.info("Player caught by %s at %s", adversary.name, player.pos)
                player.is_over = True


class Simulation:
    """The whole game state and its per-frame update."""

    def __init__(self, maze: Maze, settings: Settings = DEFAULT_SETTINGS,
                 rng: Optional[random.Random] = None):
        if (maze.rows, maze.cols) != (settings.rows, settings.cols):
            raise MazeError(
                f"maze is {maze.rows}x{maze.cols}, expected {settings.rows}x{settings.cols}")
        self.settings = settings
        self.maze = maze
        self.grid = TileGrid(maze.layout)
        self._check_spawns()

        self.rng = rng if rng is not None else random.Random()
        self.player = Player(settings.player_spawn, max_score=maze.max_score)
        self.adversaries = [
            Adversary(identity, spawn)
            for identity, spawn in zip(Identity, settings.adversary_spawns)
        ]
        self.modes = ModeController(settings.fps, settings.step_frames,
                                    settings.scatter_seconds, settings.frightened_seconds)
        self.resolver = TickResolver(settings, maze.portals)
        self.ticks = 0
        self._status = Status.RUNNING
        self.tiles = self.resolver.render(self.grid, self.player, self.adversaries)

    @classmethod
    def from_layout(cls, layout: Iterable[str] = MAZE_LAYOUT,
                    settings: Settings = DEFAULT_SETTINGS,
                    rng: Optional[random.Random] = None) -> "Simulation":
        maze = parse_maze(layout, settings.rows, settings.cols,
                          settings.pellet_points, settings.power_pellet_points)
        return cls(maze, settings, rng)

    def _check_spawns(self):
        if not self.grid.player_can_enter(self.settings.player_spawn):
            raise MazeError(f"player spawn {self.settings.player_spawn} is blocked")
        for spawn in (*self.settings.adversary_spawns, self.settings.respawn):
            if not self.grid.adversary_can_enter(spawn):
                raise MazeError(f"adversary spawn {spawn} is blocked")

    @property
    def blinky(self) -> Adversary:
        return self.adversaries[0]

    @property
    def status(self) -> Status:
        # The first terminal result sticks
        if self._status is not Status.RUNNING:
            return self._status
        if self.player.has_won:
            return Status.WON
        if self.player.is_over:
            return Status.LOST
        return Status.RUNNING

    def steer(self, command: Optional[Command]) -> bool:
        """Apply one input command. Returns False when the player asked to quit."""
        if command is None:
            return True
        if command is Command.QUIT:
            return False
        if self.status is Status.RUNNING:
            self.player.set_direction(command.direction)
        return True

    def tick(self) -> Frame:
        self.ticks += 1
        running = self._status is Status.RUNNING
        moving = self.modes.advance()
        self.modes.apply(self.adversaries)
        if moving:
            self._step(running)
        if running:
            self.tiles = self.resolver.resolve(self.grid, self.player, self.adversaries, self.modes)
        else:
            # Game over: adversaries still wander but nothing is eaten or scored
            self.tiles = self.resolver.render(self.grid, self.player, self.adversaries)

        status = self.status
        if status is not self._status:
            logger.info("Game %s with score %d after %d ticks",
                        status.name.lower(), self.player.score, self.ticks)
            self._status = status
        return self.frame()

    def _step(self, player_moves: bool = True):
        ctx = dict(
            rows=self.grid.rows,
            cols=self.grid.cols,
            player_pos=self.player.pos,
            player_facing=self.player.direction,
            blinky_pos=self.blinky.pos,
            clyde_proximity=self.settings.clyde_proximity,
            clyde_shy_distance=self.settings.clyde_shy_distance,
        )
        # Every adversary decides against the same view before anyone moves
        moves = [
            adversary.decide(self.grid, TargetContext(position=adversary.pos, **ctx), self.rng)
            for adversary in self.adversaries
        ]
        for adversary, move in zip(self.adversaries, moves):
            adversary.commit(move)

        if player_moves:
            self.player.move(self.grid)
            self.player.animate()

    def frame(self) -> Frame:
        return Frame(
            tiles=tuple("".join(row) for row in self.tiles),
            score=self.player.score,
            max_score=self.player.max_score,
            status=self.status,
        )

    @property
    def mode(self) -> AdversaryMode:
        return self.modes.mode
