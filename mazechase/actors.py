"""Player and adversary agents."""

from __future__ import annotations
import random
from typing import List, Optional, Tuple

from mazechase.config import ADVERSARY_ICONS, FRIGHTENED_ICON, PLAYER_ICONS
from mazechase.grid import DIRECTIONS, Direction, Position, TileGrid, manhattan, step
from mazechase.targeting import AdversaryMode, Identity, TargetContext, target_for

__all__ = ["Player", "Adversary", "Identity", "AdversaryMode"]


class Player:
    def __init__(self, pos: Position, direction: Direction = Direction.UP, max_score: int = 0):
        self.pos = pos
        self.direction = direction
        self.last_move: Optional[Direction] = None
        self.score = 0
        self.max_score = max_score
        self.anim_frame = 1
        self.is_over = False

    def set_direction(self, direction: Direction):
        """Change facing; the move itself happens on the next step."""
        if not isinstance(direction, Direction):
            raise ValueError(f"Unknown direction: {direction!r}")
        self.direction = direction

    def move(self, grid: TileGrid) -> bool:
        """Step one tile along the facing if the tile is open, else stay put."""
        nxt = step(self.pos, self.direction)
        if not grid.player_can_enter(nxt):
            return False
        self.pos = nxt
        self.last_move = self.direction
        return True

    def animate(self):
        self.anim_frame = self.anim_frame % 4 + 1

    @property
    def icon(self) -> str:
        mouth_open, mouth_closed = PLAYER_ICONS[self.direction.name]
        return mouth_open if self.anim_frame < 3 else mouth_closed

    @property
    def has_won(self) -> bool:
        return self.score == self.max_score

    def __repr__(self):
        return f"Player(pos={self.pos}, facing={self.direction.name}, score={self.score})"


class Adversary:
    """
    One pursuer. Decisions are split from movement: ``decide()`` reads the
    grid and a frozen ``TargetContext``; ``commit()`` applies the result. This
    lets all four adversaries decide against the same snapshot of a step.
    """

    def __init__(self, identity: Identity, pos: Position,
                 mode: AdversaryMode = AdversaryMode.SCATTER):
        self.identity = identity
        self.pos = pos
        self.mode = mode
        self.prev_move: Optional[Direction] = None
        self.target: Optional[Position] = None
        self.icon = ADVERSARY_ICONS[identity.name]

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def frightened(self) -> bool:
        return self.mode is AdversaryMode.FRIGHTENED

    def set_mode(self, mode: AdversaryMode):
        self.mode = mode
        self.icon = FRIGHTENED_ICON if mode is AdversaryMode.FRIGHTENED else ADVERSARY_ICONS[self.name]

    def respawn(self, pos: Position):
        self.pos = pos
        self.prev_move = None
        self.target = None
        self.set_mode(AdversaryMode.CHASE)

    def can_take(self, grid: TileGrid, direction: Direction) -> bool:
        if self.prev_move is not None and direction is self.prev_move.opposite:
            return False
        return grid.adversary_can_enter(step(self.pos, direction))

    def candidate_moves(self, grid: TileGrid) -> List[Tuple[Direction, Position]]:
        return [(d, step(self.pos, d)) for d in DIRECTIONS if self.can_take(grid, d)]

    def decide(self, grid: TileGrid, ctx: TargetContext,
               rng: random.Random) -> Optional[Direction]:
        """Pick this step's move, or None to hold position."""
        if self.frightened:
            self.target = None
            return self._random_move(grid, rng)

        self.target = target_for(self.identity, self.mode, ctx)
        best = None
        best_dist = None
        # Strict '<' keeps the first minimum, so ties fall to UP, DOWN, LEFT, RIGHT
        for direction, nxt in self.candidate_moves(grid):
            dist = manhattan(nxt, self.target)
            if best_dist is None or dist < best_dist:
                best, best_dist = direction, dist
        return best

    def _random_move(self, grid: TileGrid, rng: random.Random) -> Optional[Direction]:
        tried = set()
        while len(tried) < len(DIRECTIONS):
            direction = rng.choice([d for d in DIRECTIONS if d not in tried])
            tried.add(direction)
            if self.can_take(grid, direction):
                return direction
        return None

    def commit(self, direction: Optional[Direction]):
        if direction is None:
            return
        self.pos = step(self.pos, direction)
        self.prev_move = direction

    def __repr__(self):
        return f"Adversary({self.name}, pos={self.pos}, mode={self.mode.name})"
