"""Captured pieces that can be dropped back onto the board (crazyhouse style)"""

import logging
from dataclasses import dataclass, field

from src.chess.pieces import PIECE_TO_FEN, Piece
from src.core.exceptions import PieceBankError
from src.core.shared_types import PieceColor, PieceType

logger = logging.getLogger(__name__)


def _empty_banks() -> dict[PieceColor, list[Piece]]:
    return {color: [] for color in PieceColor}


@dataclass
class PieceBank:
    """
    Per color: the captured pieces, in the order they were captured.

    NOTE: The bank does not decide who owns a captured piece or who may drop it. That is up to the rules engine.
    The order only matters for a stable display / serialization.
    """

    banks: dict[PieceColor, list[Piece]] = field(default_factory=_empty_banks)

    def __post_init__(self) -> None:
        # always keep a (possibly empty) list for both colors
        for color in PieceColor:
            self.banks.setdefault(color, [])

    def __getitem__(self, color: PieceColor) -> list[Piece]:
        return self.banks[color]

    def pieces(self, color: PieceColor) -> list[Piece]:
        return self.banks[color]

    def add(self, color: PieceColor, piece: Piece) -> None:
        logger.debug("Adding %s to the %s bank", piece.id, color)
        self.banks[color].append(piece)

    def take(self, color: PieceColor, piece_id: str) -> Piece:
        """Remove a piece from the bank (to drop it on the board)"""
        for idx, piece in enumerate(self.banks[color]):
            if piece.id == piece_id:
                logger.debug("Taking %s from the %s bank", piece_id, color)
                return self.banks[color].pop(idx)
        raise PieceBankError(f"No piece with id {piece_id!r} in the {color} bank.")

    def count(self, color: PieceColor, piece_type: PieceType) -> int:
        return sum(1 for piece in self.banks[color] if piece.type == piece_type)

    def is_empty(self, color: PieceColor) -> bool:
        return len(self.banks[color]) == 0

    def piece_list(self) -> list[Piece]:
        """White bank first, then black bank"""
        return [piece for color in PieceColor for piece in self.banks[color]]

    def piece_ids(self) -> list[str]:
        return [piece.id for piece in self.piece_list()]

    def to_fen(self) -> str:
        """
        Crazyhouse 'holdings' notation. ex) '[RNp]'

        Letter case follows the bank (upper case: white bank, lower case: black bank), not the color of the piece itself.
        """
        white = "".join(
            PIECE_TO_FEN[piece.type].upper() for piece in self.banks[PieceColor.WHITE]
        )
        black = "".join(
            PIECE_TO_FEN[piece.type] for piece in self.banks[PieceColor.BLACK]
        )
        return f"[{white}{black}]"
