"""Shared fixtures for the four-in-a-row test suite."""

import pytest

from fourinarow.debug import debug
from fourinarow.utils import COLS, ROWS, empty_grid


def make_draw_grid():
    # Column pattern that never lines up four equal pieces in any direction
    grid = empty_grid()
    for row in range(ROWS):
        for col in range(COLS):
            grid[row, col] = 1 if (row + 2 * col) % 4 in (0, 1) else 2
    return grid


@pytest.fixture
def draw_grid():
    return make_draw_grid()


@pytest.fixture(autouse=True)
def restore_debug_settings():
    level = debug.level
    yield
    debug.configure(level=level, enabled=True, log_file="", components=[])
