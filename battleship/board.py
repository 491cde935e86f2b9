"""Board representation: cell grid, ship layout and random placement."""

import logging
import random

import numpy as np

from .errors import PlacementError
from .settings import GRID_SIZE, MAX_PLACEMENT_ATTEMPTS
from .ship import FLEET, CellState, Ship

logger = logging.getLogger(__name__)


class Board:
    def __init__(self, size=GRID_SIZE):
        self.size = size
        self.grid = np.zeros((size, size), dtype=int)  # CellState codes
        self.ships = []
        self.ship_lookup = {}  # Maps coordinates to ship objects

    def clear(self):
        """Remove every ship and forget every attack."""
        self.grid.fill(CellState.UNKNOWN)
        self.ships = []
        self.ship_lookup = {}

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def can_place(self, coords):
        """Check if ship placement is valid."""
        for row, col in coords:
            if not self.in_bounds(row, col):
                return False
            if (row, col) in self.ship_lookup:
                return False
        return True

    def place_ship(self, kind, coords, direction):
        ship = Ship(kind, coords, direction)
        self.ships.append(ship)
        for c in coords:
            self.ship_lookup[c] = ship
        return ship

    def place_ships(self, ship_types=FLEET, rng=None, max_attempts=MAX_PLACEMENT_ATTEMPTS):
        """Randomly places ships on the board, one independent trial loop per ship."""
        rng = rng or random.Random()
        for kind in ship_types:
            placed = False
            attempts = 0
            while not placed:
                if attempts >= max_attempts:
                    raise PlacementError(
                        f"Could not place {kind.label} after {max_attempts} attempts"
                    )
                attempts += 1
                row, col = rng.randrange(self.size), rng.randrange(self.size)
                direction = rng.choice(["H", "V"])

                if direction == "H":
                    coords = [(row, col + i) for i in range(kind.size)]
                else:
                    coords = [(row + i, col) for i in range(kind.size)]

                # Out of bounds or overlapping another ship
                if not self.can_place(coords):
                    continue

                self.place_ship(kind, coords, direction)
                placed = True

            logger.debug("Placed %s at %s (%s) after %d attempt(s)",
                         kind.label, coords[0], direction, attempts)

    def is_guessed(self, row, col):
        return self.grid[row, col] != CellState.UNKNOWN

    def attack(self, coord):
        """Record an attack on an unguessed, in-bounds cell. Returns True on a hit."""
        row, col = coord
        if coord in self.ship_lookup:
            self.grid[row, col] = CellState.HIT
            self.ship_lookup[coord].check_hit(coord)
            return True

        self.grid[row, col] = CellState.MISS
        return False

    def all_ships_sunk(self):
        """Check if all ships are sunk."""
        return bool(self.ships) and all(ship.is_sunk() for ship in self.ships)

    def sunk_ships(self):
        return [ship.kind for ship in self.ships if ship.is_sunk()]

    def cell_states(self):
        return [[CellState(value) for value in row] for row in self.grid.tolist()]

    def ship_grid(self):
        """Ship layout as rows of ShipType (or None for open water)."""
        layout = [[None] * self.size for _ in range(self.size)]
        for (r, c), ship in self.ship_lookup.items():
            layout[r][c] = ship.kind
        return layout
