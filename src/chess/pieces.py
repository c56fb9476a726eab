"""Defines the chess pieces, and who hands out their ids"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import PieceColor, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass
class Piece:
    """
    A single piece instance.

    The `id` follows the piece around for the whole game (board -> bank -> board again),
    so identity is tracked by id and never by type/color.
    `has_moved` is flipped by the rules engine, never by this package.
    """

    id: str
    type: PieceType
    color: PieceColor
    has_moved: bool = False

    @classmethod
    def from_fen(cls, character: str, piece_id: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = PieceColor.WHITE if character.isupper() else PieceColor.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_id, piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == PieceColor.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def mark_moved(self) -> None:
        self.has_moved = True

    def promote_to(self, new_type: PieceType) -> None:
        # id stays the same: it is still the same piece
        self.type = new_type


class PieceIdIssuer:
    """
    The one place that hands out piece ids. Use a single issuer per game and ids never collide.

    * first piece of a (color, type): "white-rook"; later ones get a suffix: "white-rook-1", "white-rook-2"
    * pawns always get a numeric suffix, starting at 0: "white-pawn-0", "white-pawn-1"
    """

    def __init__(self) -> None:
        self._counters: dict[tuple[PieceColor, PieceType], int] = {}

    def issue(self, color: PieceColor, piece_type: PieceType) -> str:
        count = self._counters.get((color, piece_type), 0)
        self._counters[(color, piece_type)] = count + 1

        if piece_type == PieceType.PAWN or count > 0:
            return f"{color}-{piece_type}-{count}"
        return f"{color}-{piece_type}"

    def create(self, piece_type: PieceType, color: PieceColor) -> Piece:
        return Piece(self.issue(color, piece_type), piece_type, color)

    def create_from_fen(self, character: str) -> Piece:
        color = PieceColor.WHITE if character.isupper() else PieceColor.BLACK
        piece_id = self.issue(color, FEN_TO_PIECE[character.lower()])
        return Piece.from_fen(character, piece_id)
