# mines/defaults.py
GRID_SIZE = 25  # 5x5 board
MIN_MINES = 1
MAX_MINES = 24
