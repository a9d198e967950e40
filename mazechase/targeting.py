"""
Target tile selection for the four adversaries.

Each identity gets one pure function ``(ctx) -> Position``; ``target_for``
dispatches on mode and identity. Intermediate arithmetic may leave the grid
(the arcade offsets run past the edges); only the returned target is clamped.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict

from mazechase.config import CLYDE_SHY_DISTANCE
from mazechase.grid import Direction, Position, manhattan


class Identity(Enum):
    BLINKY = auto()
    PINKY = auto()
    INKY = auto()
    CLYDE = auto()


class AdversaryMode(Enum):
    SCATTER = auto()
    CHASE = auto()
    FRIGHTENED = auto()


@dataclass(frozen=True)
class TargetContext:
    """Read-only inputs of one adversary decision."""
    rows: int
    cols: int
    position: Position          # the deciding adversary
    player_pos: Position
    player_facing: Direction
    blinky_pos: Position
    clyde_proximity: bool = False
    clyde_shy_distance: int = CLYDE_SHY_DISTANCE


def clamp(pos, rows: int, cols: int) -> Position:
    r, c = pos
    return (min(max(r, 0), rows - 1), min(max(c, 0), cols - 1))


def ahead_of_player(ctx: TargetContext, tiles: int) -> Position:
    """
    ``tiles`` ahead of the player along its facing.

    Facing up also shifts the point ``tiles`` to the left: the arcade's
    overflow bug, kept on purpose.
    """
    r, c = ctx.player_pos
    if ctx.player_facing is Direction.UP:
        return (r - tiles, c - tiles)
    if ctx.player_facing is Direction.DOWN:
        return (r + tiles, c)
    if ctx.player_facing is Direction.LEFT:
        return (r, c - tiles)
    if ctx.player_facing is Direction.RIGHT:
        return (r, c + tiles)
    raise ValueError(f"Unknown direction: {ctx.player_facing!r}")


def scatter_corner(identity: Identity, rows: int, cols: int) -> Position:
    corners = {
        Identity.BLINKY: (1, cols - 2),         # top right
        Identity.PINKY: (1, 1),                 # top left
        Identity.INKY: (rows - 2, cols - 2),    # bottom right
        Identity.CLYDE: (rows - 2, 1),          # bottom left
    }
    return corners[identity]


def blinky_target(ctx: TargetContext) -> Position:
    return ctx.player_pos


def pinky_target(ctx: TargetContext) -> Position:
    return ahead_of_player(ctx, 4)


def inky_target(ctx: TargetContext) -> Position:
    # Magnitudes only: the offset from the anchor is never negative
    ar, ac = ahead_of_player(ctx, 2)
    br, bc = ctx.blinky_pos
    return (ar + abs(br - ar), ac + abs(bc - ac))


def clyde_target(ctx: TargetContext) -> Position:
    corner = scatter_corner(Identity.CLYDE, ctx.rows, ctx.cols)
    if not ctx.clyde_proximity:
        return corner
    if manhattan(ctx.position, ctx.player_pos) > ctx.clyde_shy_distance:
        return ctx.player_pos
    return corner


CHASE_TARGETS: Dict[Identity, Callable[[TargetContext], Position]] = {
    Identity.BLINKY: blinky_target,
    Identity.PINKY: pinky_target,
    Identity.INKY: inky_target,
    Identity.CLYDE: clyde_target,
}


def target_for(identity: Identity, mode: AdversaryMode, ctx: TargetContext) -> Position:
    """Target tile for a Scatter or Chase decision, clamped into the grid."""
    if mode is AdversaryMode.SCATTER:
        target = scatter_corner(identity, ctx.rows, ctx.cols)
    elif mode is AdversaryMode.CHASE:
        target = CHASE_TARGETS[identity](ctx)
    else:
        raise ValueError(f"no target tile in {mode.name} mode")
    return clamp(target, ctx.rows, ctx.cols)
