import random

import pytest

from battleship import BattleshipModel


@pytest.fixture
def model():
    game = BattleshipModel(random.Random(1234))
    game.start()
    return game


def ship_cells(game):
    """Every (row, col) holding a ship, read through the test-only accessor."""
    layout = game._ship_grid_for_testing()
    return [(r, c) for r, row in enumerate(layout) for c, kind in enumerate(row) if kind is not None]


def water_cells(game):
    layout = game._ship_grid_for_testing()
    return [(r, c) for r, row in enumerate(layout) for c, kind in enumerate(row) if kind is None]
