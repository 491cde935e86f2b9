"""Win/loss detection, ship grid gating and restarts."""

import random

import pytest

from battleship import BattleshipModel, CellState, GameStateError, ShipType
from conftest import ship_cells, water_cells


def hit_all_ships(game):
    for r, c in ship_cells(game):
        game.guess(r, c)


def make_50_misses(game):
    for r, c in water_cells(game)[:50]:
        game.guess(r, c)


def test_sinking_every_ship_wins(model):
    hit_all_ships(model)
    assert model.are_all_ships_sunk()
    assert model.is_game_over()
    assert model.get_guess_count() == 17


def test_hit_order_does_not_matter():
    game = BattleshipModel(random.Random(11))
    game.start()
    cells = ship_cells(game)
    random.Random(0).shuffle(cells)
    for r, c in cells:
        game.guess(r, c)
    assert game.are_all_ships_sunk()
    assert game.get_guess_count() == 17


def test_running_out_of_guesses_loses(model):
    make_50_misses(model)
    assert model.get_guess_count() == 50
    assert model.is_game_over()
    assert not model.are_all_ships_sunk()


def test_last_guess_can_still_win(model):
    ships = ship_cells(model)
    for r, c in water_cells(model)[:33]:
        model.guess(r, c)
    for r, c in ships[:-1]:
        model.guess(r, c)
    assert not model.is_game_over()
    model.guess(*ships[-1])
    assert model.get_guess_count() == 50
    assert model.are_all_ships_sunk()


def test_guess_after_game_over_is_rejected(model):
    hit_all_ships(model)
    r, c = water_cells(model)[0]
    with pytest.raises(GameStateError, match="Game is over"):
        model.guess(r, c)
    assert model.get_guess_count() == 17


def test_ship_grid_hidden_while_active(model):
    with pytest.raises(GameStateError):
        model.get_ship_grid()


def test_ship_grid_hidden_before_start():
    with pytest.raises(GameStateError):
        BattleshipModel().get_ship_grid()


@pytest.mark.parametrize("finish", [hit_all_ships, make_50_misses])
def test_ship_grid_revealed_once_over(model, finish):
    finish(model)
    layout = model.get_ship_grid()
    assert layout == model._ship_grid_for_testing()
    assert sum(kind is not None for row in layout for kind in row) == 17


def test_grids_are_defensive_copies(model):
    cells = model.get_cell_grid()
    cells[0][0] = CellState.HIT
    assert model.get_cell_grid()[0][0] == CellState.UNKNOWN

    hit_all_ships(model)
    layout = model.get_ship_grid()
    layout[0][0] = ShipType.CARRIER
    layout[9] = []
    assert len(model.get_ship_grid()[9]) == 10
    assert model.get_ship_grid() == model._ship_grid_for_testing()


def test_sunk_ships_reported_in_fleet_order(model):
    assert model.get_sunk_ships() == []
    patrol = [ship for ship in model.board.ships if ship.kind is ShipType.PATROL_BOAT][0]
    for r, c in patrol.coordinates:
        model.guess(r, c)
    assert model.get_sunk_ships() == [ShipType.PATROL_BOAT]
    remaining = [cell for cell in ship_cells(model) if cell not in patrol.coordinates]
    for r, c in remaining:
        model.guess(r, c)
    assert model.get_sunk_ships() == list(ShipType)


def test_start_resets_a_finished_game(model):
    hit_all_ships(model)
    old_layout = model.get_ship_grid()

    model.start()
    assert model.get_guess_count() == 0
    assert not model.is_game_over()
    assert model.get_guess_history() == []
    assert model.get_sunk_ships() == []
    assert all(state == CellState.UNKNOWN for row in model.get_cell_grid() for state in row)
    layout = model._ship_grid_for_testing()
    assert sum(kind is not None for row in layout for kind in row) == 17
    # The seeded stream moves on, so the next layout is a fresh draw
    assert layout != old_layout


def test_failed_restart_leaves_no_playable_game(model, monkeypatch):
    from battleship import PlacementError

    hit_all_ships(model)
    place_ships = model.board.place_ships

    def place_two_then_fail(ship_types, rng, *args, **kwargs):
        place_ships(ship_types[:2], rng)
        raise PlacementError("no room")

    monkeypatch.setattr(model.board, "place_ships", place_two_then_fail)
    with pytest.raises(PlacementError):
        model.start()

    assert not model.started
    assert not model.is_game_over()
    with pytest.raises(GameStateError, match="not been started"):
        model.guess(0, 0)
    with pytest.raises(GameStateError):
        model.get_ship_grid()

    monkeypatch.undo()
    model.start()
    assert len(model.board.ship_lookup) == 17
    assert not model.is_game_over()
