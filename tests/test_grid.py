"""Tests for the minefield generator."""

import random

import pytest

from engine.grid import generate_mines_grid
from mines.defaults import GRID_SIZE


@pytest.mark.parametrize("mine_count", range(0, GRID_SIZE + 1))
def test_grid_has_exact_mine_count(mine_count):
    grid = generate_mines_grid(GRID_SIZE, mine_count)
    assert len(grid) == GRID_SIZE
    assert grid.count(1) == mine_count
    assert grid.count(0) == GRID_SIZE - mine_count


def test_no_mines_returns_all_safe():
    assert generate_mines_grid(25, 0) == [0] * 25


def test_full_board_terminates():
    assert generate_mines_grid(25, 25) == [1] * 25


def test_seeded_rng_is_reproducible():
    a = generate_mines_grid(25, 5, rng=random.Random(42))
    b = generate_mines_grid(25, 5, rng=random.Random(42))
    assert a == b


def test_layout_varies_between_draws():
    rng = random.Random(7)
    layouts = {tuple(generate_mines_grid(25, 3, rng=rng)) for _ in range(20)}
    assert len(layouts) > 1


@pytest.mark.parametrize("size, mine_count", [
    (25, 26),
    (25, -1),
    (-1, 0),
])
def test_rejects_impossible_boards(size, mine_count):
    with pytest.raises(ValueError):
        generate_mines_grid(size, mine_count)
