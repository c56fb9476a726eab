"""
Type definitions used across layers
"""

from enum import StrEnum

# --- Values double as the wire values used by the UI layer ("white", "king", ...)


class PieceColor(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "PieceColor":
        return PieceColor.BLACK if self == PieceColor.WHITE else PieceColor.WHITE


class PieceType(StrEnum):
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    PAWN = "pawn"
