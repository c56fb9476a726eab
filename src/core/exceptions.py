"""Exceptions raised by the game-state model. Everything derives from ChessModelError so callers can catch the lot."""


class ChessModelError(Exception):
    """Base class for all errors raised in this package."""


class InvalidNotationError(ChessModelError):
    """String (or Position) cannot be read/written as algebraic notation."""


class OutOfBoundsError(ChessModelError):
    """A Position outside the board was used to index the board."""


class InvalidMoveError(ChessModelError):
    """Move record with fields that contradict each other (e.g. promote_to without is_promotion)."""


class PieceBankError(ChessModelError):
    """Piece asked for is not in that color's bank."""


class InvalidFENError(ChessModelError):
    """Text cannot be read as the placement part of a FEN string."""


class GameStateError(ChessModelError):
    """GameState (or its board) breaks one of its invariants."""


class InvalidRequestError(ChessModelError):
    """Incoming wire data could not be validated."""
