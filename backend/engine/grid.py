import random


def generate_mines_grid(size: int, mine_count: int, rng=None):
    """
    Minefield as a flat list: 1 = mine, 0 = safe.
    Mines are placed by drawing random cells until mine_count distinct cells are hit.
    """
    if size < 0:
        raise ValueError("Grid size must be non-negative")
    if mine_count < 0 or mine_count > size:
        raise ValueError("Mine count must be between 0 and grid size")

    rng = rng or random
    grid = [0] * size
    placed = 0
    while placed < mine_count:
        index = rng.randrange(size)
        if grid[index] == 0:
            grid[index] = 1
            placed += 1
    return grid
