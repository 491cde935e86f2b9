"""The Tk window needs a display; only the click mapping is tested."""

import pytest

pytest.importorskip("tkinter")

from battleship.gui import CELL_SIZE, MARGIN, cell_from_point  # noqa: E402


def test_click_inside_grid_maps_to_cell():
    assert cell_from_point(MARGIN, MARGIN) == (0, 0)
    assert cell_from_point(MARGIN + 5 * CELL_SIZE + 1, MARGIN + 2 * CELL_SIZE + 1) == (2, 5)
    assert cell_from_point(MARGIN + 10 * CELL_SIZE - 1, MARGIN + 10 * CELL_SIZE - 1) == (9, 9)


def test_click_on_labels_or_outside_is_ignored():
    assert cell_from_point(MARGIN - 1, MARGIN + 10) is None
    assert cell_from_point(MARGIN + 10, 0) is None
    assert cell_from_point(MARGIN + 10 * CELL_SIZE, MARGIN) is None
