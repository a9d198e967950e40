"""pygame front end: keyboard in, clocked ticks, tiles out."""

from __future__ import annotations
import logging
import math
import random
from typing import Iterable, List, Optional

import pygame

from mazechase.config import (
    BLACK, BLUE_FRIGHTENED, CYAN, DEFAULT_SETTINGS, FRIGHTENED_ICON, HUD_HEIGHT,
    ORANGE, PELLET_COLOR, PEN_GREY, PINK, PORTAL_GREEN, RED, SCALE, TILE_SIZE,
    WALL_BLUE, WHITE, YELLOW, Settings,
)
from mazechase.grid import PLAYER_OVERLAYS, WALL_SYMBOLS, Tile
from mazechase.maze import Maze
from mazechase.simulation import Command, Frame, Simulation, Status

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    pygame.K_w: Command.UP, pygame.K_UP: Command.UP,
    pygame.K_s: Command.DOWN, pygame.K_DOWN: Command.DOWN,
    pygame.K_a: Command.LEFT, pygame.K_LEFT: Command.LEFT,
    pygame.K_d: Command.RIGHT, pygame.K_RIGHT: Command.RIGHT,
    pygame.K_q: Command.QUIT, pygame.K_ESCAPE: Command.QUIT,
}

ADVERSARY_COLORS = {
    "B": RED,
    "P": PINK,
    "I": CYAN,
    "C": ORANGE,
    FRIGHTENED_ICON: BLUE_FRIGHTENED,
}


def commands_from_events(events: Iterable[pygame.event.Event]) -> List[Command]:
    """Translate pygame events into simulation commands (window close -> QUIT)."""
    commands = []
    for e in events:
        if e.type == pygame.QUIT:
            commands.append(Command.QUIT)
        elif e.type == pygame.KEYDOWN and e.key in KEY_COMMANDS:
            commands.append(KEY_COMMANDS[e.key])
    return commands


class Renderer:
    def __init__(self, screen: pygame.Surface, scale: int = SCALE):
        self.screen = screen
        self.cell = TILE_SIZE * scale
        pygame.font.init()
        self.font = pygame.font.SysFont("monospace", 9 * scale, bold=True)
        self.big_font = pygame.font.SysFont("monospace", 18 * scale, bold=True)

    def draw(self, frame: Frame):
        self.screen.fill(BLACK)
        for r, row in enumerate(frame.tiles):
            for c, symbol in enumerate(row):
                self.draw_tile(symbol, c * self.cell, r * self.cell + HUD_HEIGHT)
        self.draw_ui(frame)

    def draw_tile(self, symbol: str, x: int, y: int):
        s = self.cell
        center = (x + s // 2, y + s // 2)

        if symbol in WALL_SYMBOLS:
            pygame.draw.rect(self.screen, WALL_BLUE, (x + 1, y + 1, s - 2, s - 2), 1)
        elif symbol == Tile.PEN.value:
            pygame.draw.rect(self.screen, PEN_GREY, (x, y, s, s))
        elif symbol == Tile.PELLET.value:
            pygame.draw.circle(self.screen, PELLET_COLOR, center, max(1, s // 8))
        elif symbol == Tile.POWER_PELLET.value:
            pulse = int(math.sin(pygame.time.get_ticks() * 0.01) * 2)
            pygame.draw.circle(self.screen, PELLET_COLOR, center, max(2, s // 3 + pulse))
        elif symbol in (Tile.PORTAL_A.value, Tile.PORTAL_B.value):
            pygame.draw.rect(self.screen, PORTAL_GREEN, (x + 2, y, s - 4, s), 2)
        elif symbol in PLAYER_OVERLAYS:
            self.draw_player(symbol, center, s // 2 - 1)
        elif symbol in ADVERSARY_COLORS:
            self.draw_adversary(ADVERSARY_COLORS[symbol], center, s // 2 - 1)

    def draw_player(self, symbol: str, center, radius: int):
        pygame.draw.circle(self.screen, YELLOW, center, radius)
        if symbol == "o":
            return
        # Mouth wedge opens toward the icon's point
        angles = {"<": 0, ">": 180, "v": 90, "^": 270}
        base = angles[symbol]
        pts = [center]
        for a in (base + 40, base - 40):
            rad = math.radians(a)
            pts.append((center[0] + math.cos(rad) * (radius + 2),
                        center[1] - math.sin(rad) * (radius + 2)))
        pygame.draw.polygon(self.screen, BLACK, pts)

    def draw_adversary(self, color, center, radius: int):
        x, y = center
        pygame.draw.circle(self.screen, color, (x, y - 1), radius)
        pygame.draw.rect(self.screen, color, (x - radius, y - 1, radius * 2, radius))
        eye = max(1, radius // 3)
        pygame.draw.circle(self.screen, WHITE, (x - radius // 2, y - 2), eye)
        pygame.draw.circle(self.screen, WHITE, (x + radius // 2, y - 2), eye)

    def draw_ui(self, frame: Frame):
        score_txt = self.font.render(f"SCORE: {frame.score:05d} / {frame.max_score}", True, WHITE)
        self.screen.blit(score_txt, (6, 4))

        if frame.status is Status.WON:
            self.draw_banner("YOU WIN!", YELLOW)
        elif frame.status is Status.LOST:
            self.draw_banner("YOU LOST!", RED)

    def draw_banner(self, text: str, color):
        w, h = self.screen.get_size()
        surf = self.big_font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(w // 2, h // 2)))
        hint = self.font.render("Q: QUIT   R: RESTART", True, WHITE)
        self.screen.blit(hint, hint.get_rect(center=(w // 2, h // 2 + surf.get_height())))


class Game:
    def __init__(self, maze: Maze, settings: Settings = DEFAULT_SETTINGS,
                 seed: Optional[int] = None, scale: int = SCALE):
        self.maze = maze
        self.settings = settings
        self.seed = seed
        self.simulation = self.new_simulation()

        pygame.init()
        cell = TILE_SIZE * scale
        self.screen = pygame.display.set_mode(
            (settings.cols * cell, settings.rows * cell + HUD_HEIGHT))
        pygame.display.set_caption("MAZE CHASE")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, scale)
        self.paused = False

    def new_simulation(self) -> Simulation:
        return Simulation(self.maze, self.settings, random.Random(self.seed))

    def restart(self):
        logger.info("Restarting")
        self.simulation = self.new_simulation()
        self.paused = False

    def handle_events(self) -> bool:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                self.restart()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_p:
                self.paused = not self.paused

        # One steering command per frame; the last key pressed wins
        commands = commands_from_events(events)
        if Command.QUIT in commands:
            return False
        if commands:
            self.simulation.steer(commands[-1])
        return True

    def run(self):
        running = True
        frame = self.simulation.frame()
        while running:
            self.clock.tick(self.settings.fps)
            running = self.handle_events()
            if running and not self.paused:
                frame = self.simulation.tick()
            self.renderer.draw(frame)
            pygame.display.flip()
        pygame.quit()
