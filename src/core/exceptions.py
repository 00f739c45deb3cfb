"""
Custom exceptions shared by all layers.

Everything deriving from GameError is an expected failure caused by bad input and can be reported back to a caller.
MissingKingError is deliberately NOT a GameError: it means the board invariant (one king per side) was broken.
"""


class GameError(Exception):
    """Base class for the recoverable errors of the chess application."""


class SquareOutOfRangeError(GameError, ValueError):
    """Coordinates do not lie on the 8x8 board."""


class InvalidFENError(GameError, ValueError):
    """String cannot be interpreted as a FEN position."""


class GameStateError(GameError):
    """Request does not make sense in the current state of the game."""


class InvalidRequestError(GameError):
    """Boundary layer received data it cannot interpret."""


class RepositoryError(GameError):
    """Could not find (or store) the requested game."""


class MissingKingError(RuntimeError):
    """Fatal: a side has no king on the board. Should never be caught by the engine."""
