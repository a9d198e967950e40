import random

import pytest

from mazechase.config import Settings
from mazechase.grid import TileGrid
from mazechase.simulation import Simulation

# Player corridor on row 1, adversaries sealed in a pen on row 3
PEN_LAYOUT = [
    "#########",
    "#  .  @ #",
    "#########",
    "#~~~~~~~#",
    "#########",
]

PEN_SETTINGS = Settings(
    rows=5,
    cols=9,
    player_spawn=(1, 2),
    adversary_spawns=((3, 1), (3, 2), (3, 3), (3, 4)),
    respawn=(3, 6),
    step_frames=1,
)

OPEN_LAYOUT = [
    "#######",
    "#     #",
    "#     #",
    "#     #",
    "#     #",
    "#     #",
    "#######",
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def open_grid():
    return TileGrid(OPEN_LAYOUT)


@pytest.fixture
def pen_sim(rng):
    return Simulation.from_layout(PEN_LAYOUT, PEN_SETTINGS, rng)


def make_sim(layout, rng=None, **overrides):
    """Simulation over ``layout`` sized to fit it; overrides go to Settings."""
    params = dict(rows=len(layout), cols=len(layout[0]))
    params.update(overrides)
    return Simulation.from_layout(layout, Settings(**params), rng or random.Random(7))
