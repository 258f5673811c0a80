from __future__ import annotations

import os
import random

import pytest

# pygame sem janela/áudio de verdade (CI e máquinas headless)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from stacker.game import Game  # noqa: E402
from stacker.grid import Grid  # noqa: E402


@pytest.fixture()
def grid() -> Grid:
    return Grid(width=7, height=15, grid_size=40)


@pytest.fixture()
def centered_game(grid: Grid) -> Game:
    return Game(grid=grid, spawn_policy="center")


@pytest.fixture()
def random_game(grid: Grid) -> Game:
    return Game(grid=grid, rng=random.Random(1234))
