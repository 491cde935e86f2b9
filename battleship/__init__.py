"""Single-player Battleship: game model plus console, tkinter and web front ends."""

from .ship import FLEET, CellState, Ship, ShipType
from .board import Board
from .errors import BattleshipError, GameStateError, InvalidMoveError, PlacementError
from .game import BattleshipModel

__version__ = "1.0.0"

__all__ = [
    'FLEET', 'CellState', 'Ship', 'ShipType', 'Board',
    'BattleshipError', 'GameStateError', 'InvalidMoveError', 'PlacementError',
    'BattleshipModel',
]
