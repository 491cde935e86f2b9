"""Text front end: reads guesses like ``A5`` and prints the board after each shot."""

import logging
import sys

from .errors import GameStateError, InvalidMoveError
from .settings import GRID_SIZE, ROW_LABELS
from .ship import CellState

logger = logging.getLogger(__name__)

CELL_SYMBOLS = {CellState.UNKNOWN: ".", CellState.MISS: "O", CellState.HIT: "X"}
SHIP_SYMBOL = "S"


def parse_guess(text):
    """
    Turn user input such as ``"a5"`` into zero-based ``(row, col)``.

    Raises:
        InvalidMoveError: the text is not a letter A-J followed by a digit 0-9.
    """
    text = (text or "").strip().upper()
    if len(text) != 2:
        raise InvalidMoveError("Invalid format. Use format like A5")

    row_char, col_char = text
    if row_char not in ROW_LABELS:
        raise InvalidMoveError(f"Row must be {ROW_LABELS[0]}-{ROW_LABELS[-1]}")
    if col_char not in "0123456789":
        raise InvalidMoveError(f"Column must be 0-{GRID_SIZE - 1}")

    return ROW_LABELS.index(row_char), int(col_char)


def render_grid(cell_grid, ship_grid=None):
    """Show the board, ships included when a ship grid is given."""
    lines = ["  " + " ".join(str(c) for c in range(GRID_SIZE))]
    for r, row in enumerate(cell_grid):
        row_display = []
        for c, state in enumerate(row):
            if ship_grid is not None and ship_grid[r][c] is not None and state == CellState.UNKNOWN:
                row_display.append(SHIP_SYMBOL)
            else:
                row_display.append(CELL_SYMBOLS[CellState(state)])
        lines.append(f"{ROW_LABELS[r]} " + " ".join(row_display))
    return "\n".join(lines)


class ConsoleView:
    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout
        self._last_cells = None

    def _write(self, text=""):
        self.out.write(text + "\n")
        self.out.flush()

    def display_welcome_message(self):
        self._write("Welcome to Battleship!")
        self._write("Sink all 5 ships before you run out of guesses.")

    def display_prompt_message(self):
        self.out.write("Enter your guess (e.g. A5): ")
        self.out.flush()

    def display_hit_message(self):
        self._write("Hit!")

    def display_miss_message(self):
        self._write("Miss!")

    def display_sunk_message(self, kind):
        self._write(f"You sank the {kind.label}!")

    def display_guess_count(self, count):
        self._write(f"Guesses made: {count}")

    def display_max_guesses(self, max_guesses):
        self._write(f"Maximum guesses: {max_guesses}")

    def display_cell_grid(self, cell_grid):
        self._last_cells = cell_grid
        self._write(render_grid(cell_grid))

    def display_ship_grid(self, ship_grid):
        # Overlay ships on the last known hits/misses
        cells = self._last_cells
        if cells is None:
            cells = [[CellState.UNKNOWN] * GRID_SIZE for _ in range(GRID_SIZE)]
        self._write("Ship positions:")
        self._write(render_grid(cells, ship_grid))

    def display_error_message(self, message):
        self._write(f"Error: {message}")

    def display_game_over(self, win):
        if win:
            self._write("Game over. You win! All ships destroyed!")
        else:
            self._write("Game over. You lose, out of guesses.")

    def display_abandoned_message(self):
        self._write("Input ended before the game was over. Goodbye!")


class ConsoleController:
    """Drives one model through a game using lines read from ``input_stream``."""

    def __init__(self, input_stream, view):
        if input_stream is None or view is None:
            raise ValueError("Input and view cannot be null")
        self.input_stream = input_stream
        self.view = view

    def _read_line(self):
        line = self.input_stream.readline()
        return line if line else None

    def _show_state(self, model):
        self.view.display_guess_count(model.get_guess_count())
        self.view.display_max_guesses(model.get_max_guesses())
        self.view.display_cell_grid(model.get_cell_grid())

    def play_game(self, model):
        if model is None:
            raise ValueError("Model cannot be null")

        model.start()
        self.view.display_welcome_message()
        self._show_state(model)

        while not model.is_game_over():
            self.view.display_prompt_message()
            line = self._read_line()
            if line is None:
                break

            try:
                row, col = parse_guess(line)
                sunk_before = set(model.get_sunk_ships())
                hit = model.guess(row, col)
            except InvalidMoveError as e:
                # Bad input, ask again
                self.view.display_error_message(str(e))
                continue
            except GameStateError as e:
                self.view.display_error_message(str(e))
                break

            if hit:
                self.view.display_hit_message()
                for kind in model.get_sunk_ships():
                    if kind not in sunk_before:
                        self.view.display_sunk_message(kind)
            else:
                self.view.display_miss_message()
            self._show_state(model)

        if not model.is_game_over():
            logger.info("Console input ended after %d guesses", model.get_guess_count())
            self.view.display_abandoned_message()
            return

        self.view.display_game_over(model.are_all_ships_sunk())
        self.view.display_ship_grid(model.get_ship_grid())
