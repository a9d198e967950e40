import pygame

from mazechase.game import KEY_COMMANDS, commands_from_events
from mazechase.simulation import Command


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_wasd_and_arrows_steer():
    assert KEY_COMMANDS[pygame.K_w] is KEY_COMMANDS[pygame.K_UP] is Command.UP
    assert KEY_COMMANDS[pygame.K_s] is KEY_COMMANDS[pygame.K_DOWN] is Command.DOWN
    assert KEY_COMMANDS[pygame.K_a] is KEY_COMMANDS[pygame.K_LEFT] is Command.LEFT
    assert KEY_COMMANDS[pygame.K_d] is KEY_COMMANDS[pygame.K_RIGHT] is Command.RIGHT


def test_events_to_commands():
    events = [keydown(pygame.K_d), keydown(pygame.K_x), keydown(pygame.K_UP),
              pygame.event.Event(pygame.KEYUP, key=pygame.K_w)]
    assert commands_from_events(events) == [Command.RIGHT, Command.UP]


def test_quit_sources():
    assert commands_from_events([keydown(pygame.K_q)]) == [Command.QUIT]
    assert commands_from_events([keydown(pygame.K_ESCAPE)]) == [Command.QUIT]
    assert commands_from_events([pygame.event.Event(pygame.QUIT)]) == [Command.QUIT]
