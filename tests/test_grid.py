from __future__ import annotations

import dataclasses

import pytest

from stacker.grid import ConfigError, FrozenGrid, Grid


def test_default_grid_dimensions() -> None:
    g = Grid()
    assert (g.width, g.height, g.grid_size) == (7, 15, 40.0)
    assert g.pixel_width == 280
    assert g.pixel_height == 600
    assert g.bottom_y == 560


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"width": -3},
        {"height": 0},
        {"grid_size": 0},
        {"grid_size": -10},
        {"width": 2.5},
    ],
)
def test_invalid_grid_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        Grid(**kwargs)


def test_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Grid(width=0)


def test_grid_is_immutable(grid: Grid) -> None:
    with pytest.raises(AttributeError):
        grid.width = 10


def test_cell_of_truncates(grid: Grid) -> None:
    assert grid.cell_of(0, 560) == (0, 14)
    assert grid.cell_of(79.9, 559.0) == (1, 13)
    assert grid.cell_of(170.0, 520.0) == (4, 13)


def test_block_size_check(grid: Grid) -> None:
    grid.check_block_size(1)
    grid.check_block_size(7)
    with pytest.raises(ConfigError):
        grid.check_block_size(8)
    with pytest.raises(ConfigError):
        grid.check_block_size(0)


def test_frozen_grid_keys_by_cell(grid: Grid) -> None:
    frozen = FrozenGrid(grid)
    keys = frozen.freeze([(80.0, 560.0, 40.0, 40.0), (120.0, 560.0, 40.0, 40.0)])

    assert keys == [(2, 14), (3, 14)]
    assert len(frozen) == 2
    assert (2, 14) in frozen
    assert (4, 14) not in frozen
    assert frozen.get((3, 14)) == (120.0, 560.0, 40.0, 40.0)
    assert set(frozen) == {(2, 14), (3, 14)}


def test_frozen_grid_clear(grid: Grid) -> None:
    frozen = FrozenGrid(grid)
    frozen.freeze([(0.0, 0.0, 40.0, 40.0)])
    frozen.clear()
    assert len(frozen) == 0
    assert frozen.squares() == ()


def test_grid_is_a_value_object() -> None:
    assert Grid() == Grid(width=7, height=15, grid_size=40)
    assert hash(Grid()) == hash(Grid(width=7.0, height=15, grid_size=40))
    assert isinstance(Grid(grid_size=40).grid_size, float)
    assert isinstance(Grid(width=7.0).width, int)


def test_grid_rejects_field_assignment(grid: Grid) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        grid.height = 3


def test_square_at_uses_cell_size(grid: Grid) -> None:
    assert grid.square_at(12.5, 520.0) == (12.5, 520.0, 40.0, 40.0)
