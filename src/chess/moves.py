"""
The record of a single move, as kept in the move history.

Whether a move is legal is decided by the rules engine; this only makes sure the record itself is consistent.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import PIECE_TO_FEN, Piece
from src.chess.position import Position
from src.core.exceptions import InvalidMoveError
from src.core.shared_types import PieceType


@dataclass
class Move:
    """
    basic definition of a move that was made

    Co-occurrence rules (checked on construction):
    * `promote_to` is set iff `is_promotion`
    * a dropped piece comes from the bank: `from_position` is None iff `is_dropped`
    * a drop lands on an empty square, so never captures
    """

    from_position: Optional[Position]
    to_position: Position
    piece: Piece
    captured_piece: Optional[Piece] = None
    is_promotion: bool = False
    promote_to: Optional[PieceType] = None
    is_check: bool = False
    is_checkmate: bool = False
    is_dropped: bool = False

    def __post_init__(self) -> None:
        if self.is_promotion != (self.promote_to is not None):
            raise InvalidMoveError(
                f"promote_to={self.promote_to!r} does not match is_promotion={self.is_promotion}."
            )
        if self.is_dropped != (self.from_position is None):
            raise InvalidMoveError(
                "A dropped piece has no from_position, and every other move needs one."
            )
        if self.is_dropped and self.captured_piece is not None:
            raise InvalidMoveError("Dropping a piece cannot capture.")

    @classmethod
    def drop(
        cls,
        piece: Piece,
        to_position: Position,
        is_check: bool = False,
        is_checkmate: bool = False,
    ) -> Self:
        """Convenience constructor: place a banked piece on the board."""
        return cls(
            from_position=None,
            to_position=to_position,
            piece=piece,
            is_check=is_check,
            is_checkmate=is_checkmate,
            is_dropped=True,
        )

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    def to_uci(self) -> str:
        """
        Universal Chess Interface notation (with the crazyhouse extension for drops)

        examples:
        * "b1c3": the piece on b1 moved to c3
        * "f5f6q": (pawn) moves from f5 to f6 and promotes to a queen (the q)
        * "N@d4": a knight from the bank was dropped on d4
        """
        if self.from_position is None:
            return f"{PIECE_TO_FEN[self.piece.type].upper()}@{self.to_position.to_algebraic()}"

        piece_char = PIECE_TO_FEN[self.promote_to] if self.promote_to else ""
        return f"{self.from_position.to_algebraic()}{self.to_position.to_algebraic()}{piece_char}"
