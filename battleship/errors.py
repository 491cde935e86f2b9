"""Exceptions raised by the game model and its front ends."""


class BattleshipError(Exception):
    """Base class for every game error."""


class InvalidMoveError(BattleshipError, ValueError):
    """A guess the caller can fix: bad coordinates or an already-guessed cell."""


class GameStateError(BattleshipError, RuntimeError):
    """An operation that is not allowed in the current game state."""


class PlacementError(BattleshipError, RuntimeError):
    """Random ship placement ran out of attempts."""
