#!/usr/bin/env python3
"""
MAZE CHASE
==========
Run with ``python -m mazechase [--maze FILE] [--seed N]``.
"""

from __future__ import annotations
import argparse
import logging
import sys

from mazechase.config import FPS, MAZE_LAYOUT, SCALE, Settings
from mazechase.maze import MazeError, load_maze, parse_maze


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mazechase", description="Grid maze chase with arcade ghost AI")
    p.add_argument("--maze", help="maze text file (default: built-in layout)")
    p.add_argument("--seed", type=int, default=None, help="seed for frightened movement")
    p.add_argument("--fps", type=int, default=FPS, help="frames per second")
    p.add_argument("--scale", type=int, default=SCALE, help="window scale factor")
    p.add_argument("--clyde-proximity", action="store_true",
                   help="let Clyde chase the player while more than 8 tiles away")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings(fps=args.fps, clyde_proximity=args.clyde_proximity)
        if args.maze:
            maze = load_maze(args.maze, settings.rows, settings.cols)
        else:
            maze = parse_maze(MAZE_LAYOUT, settings.rows, settings.cols)
    except (MazeError, ValueError) as e:
        print(f"mazechase: {e}", file=sys.stderr)
        return 2

    print("=" * 40)
    print("              MAZE CHASE")
    print("=" * 40)
    print()
    print("Controls: WASD or Arrow Keys")
    print("P: Pause | R: Restart | Q/Esc: Quit")
    print()

    from mazechase.game import Game

    try:
        Game(maze, settings, seed=args.seed, scale=args.scale).run()
    except MazeError as e:
        print(f"mazechase: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
