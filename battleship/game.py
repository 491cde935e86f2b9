"""
Single-player Battleship game model.

The model owns the hidden ship layout, the player-visible grid of
hits and misses, and the guess counter. A game is Active until every ship
cell has been hit (won) or the guess budget is spent (lost); there is no
explicit end-game call. ``start()`` always begins a fresh Active game.

The model has no locking of its own. Front ends that share one model
between threads must serialize access around it.
"""

import logging
import operator
import random

from .board import Board
from .errors import GameStateError, InvalidMoveError
from .settings import GRID_SIZE, MAX_GUESSES
from .ship import FLEET

logger = logging.getLogger(__name__)


def _coordinate(value):
    """Accept Python and numpy integers; reject bools, floats and strings."""
    if isinstance(value, bool):
        raise InvalidMoveError(f"Coordinates must be integers, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidMoveError(f"Coordinates must be integers, got {value!r}") from None


class BattleshipModel:
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.board = Board(GRID_SIZE)
        self.guess_count = 0
        self.history = []  # (row, col, hit) per accepted guess
        self.started = False

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def start(self):
        """Reset both grids and the counter, then place the fleet at random."""
        # Stays False if placement raises, so a half-placed fleet is never playable
        self.started = False
        self.board.clear()
        self.guess_count = 0
        self.history = []
        self.board.place_ships(FLEET, self.rng)
        self.started = True
        logger.info("New game: %d ships on a %dx%d grid, %d guesses allowed",
                    len(self.board.ships), GRID_SIZE, GRID_SIZE, MAX_GUESSES)

    def guess(self, row, col):
        """
        Fire at (row, col).

        Returns:
            bool: True on a hit, False on a miss.

        Raises:
            GameStateError: the game is over or was never started.
            InvalidMoveError: the coordinates are off the grid or already guessed.
        """
        if not self.started:
            raise GameStateError("Game has not been started")
        if self.is_game_over():
            raise GameStateError("Game is over")
        row, col = _coordinate(row), _coordinate(col)
        if not self.board.in_bounds(row, col):
            raise InvalidMoveError(f"Coordinates out of bounds: ({row}, {col})")
        if self.board.is_guessed(row, col):
            raise InvalidMoveError(f"Cell already guessed: ({row}, {col})")

        self.guess_count += 1
        hit = self.board.attack((row, col))
        self.history.append((row, col, hit))
        logger.debug("Guess %d at (%d, %d): %s", self.guess_count, row, col,
                     "hit" if hit else "miss")

        if self.is_game_over():
            logger.info("Game over after %d guesses: %s", self.guess_count,
                        "won" if self.are_all_ships_sunk() else "lost")
        return hit

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def is_game_over(self):
        if not self.started:
            return False
        return self.are_all_ships_sunk() or self.guess_count >= MAX_GUESSES

    def are_all_ships_sunk(self):
        return self.board.all_ships_sunk()

    def get_cell_grid(self):
        """Copy of the player-visible grid as rows of CellState."""
        return self.board.cell_states()

    def get_ship_grid(self):
        """Copy of the ship layout. Only available once the game is over."""
        if not self.started:
            raise GameStateError("Game has not been started")
        if not self.is_game_over():
            raise GameStateError("Ship grid is hidden until the game is over")
        return self.board.ship_grid()

    def _ship_grid_for_testing(self):
        # Same as get_ship_grid without the game-over check.
        return self.board.ship_grid()

    def get_guess_count(self):
        return self.guess_count

    def get_max_guesses(self):
        return MAX_GUESSES

    def get_sunk_ships(self):
        """Kinds of ship sunk so far, in fleet order."""
        return self.board.sunk_ships()

    def get_guess_history(self):
        return list(self.history)
