"""Unit tests for /src/chess/bank.py"""

import pytest

from src.chess.bank import PieceBank
from src.chess.pieces import Piece
from src.core.exceptions import PieceBankError
from src.core.shared_types import PieceColor, PieceType


def test_new_bank_is_empty_for_both_colors() -> None:
    bank = PieceBank()
    for color in PieceColor:
        assert bank[color] == []
        assert bank.is_empty(color)
    assert bank.to_fen() == "[]"


def test_banks_are_not_shared_between_instances(white_rook: Piece) -> None:
    """default_factory: a fresh dict (and fresh lists) every time"""
    first = PieceBank()
    second = PieceBank()
    first.add(PieceColor.WHITE, white_rook)
    assert second.is_empty(PieceColor.WHITE)


def test_missing_color_gets_empty_list(white_rook: Piece) -> None:
    bank = PieceBank({PieceColor.WHITE: [white_rook]})
    assert bank[PieceColor.BLACK] == []
    assert bank.pieces(PieceColor.WHITE) == [white_rook]


def test_insertion_order_is_kept() -> None:
    bank = PieceBank()
    pieces = [
        Piece("black-knight", PieceType.KNIGHT, PieceColor.BLACK),
        Piece("black-pawn-0", PieceType.PAWN, PieceColor.BLACK),
        Piece("black-rook", PieceType.ROOK, PieceColor.BLACK),
    ]
    for piece in pieces:
        bank.add(PieceColor.WHITE, piece)
    assert bank[PieceColor.WHITE] == pieces
    assert bank.piece_ids() == ["black-knight", "black-pawn-0", "black-rook"]


def test_take(white_rook: Piece, black_knight: Piece) -> None:
    bank = PieceBank()
    bank.add(PieceColor.BLACK, white_rook)
    bank.add(PieceColor.BLACK, black_knight)

    taken = bank.take(PieceColor.BLACK, "white-rook")
    assert taken is white_rook
    assert bank[PieceColor.BLACK] == [black_knight]


def test_take_unknown_piece(white_rook: Piece) -> None:
    bank = PieceBank()
    bank.add(PieceColor.BLACK, white_rook)
    with pytest.raises(PieceBankError):
        bank.take(PieceColor.BLACK, "white-queen")

    # the piece is in the other bank: still an error
    with pytest.raises(PieceBankError):
        bank.take(PieceColor.WHITE, "white-rook")


def test_count() -> None:
    bank = PieceBank()
    bank.add(PieceColor.WHITE, Piece("black-pawn-0", PieceType.PAWN, PieceColor.BLACK))
    bank.add(PieceColor.WHITE, Piece("black-pawn-1", PieceType.PAWN, PieceColor.BLACK))
    bank.add(PieceColor.WHITE, Piece("black-rook", PieceType.ROOK, PieceColor.BLACK))
    assert bank.count(PieceColor.WHITE, PieceType.PAWN) == 2
    assert bank.count(PieceColor.WHITE, PieceType.ROOK) == 1
    assert bank.count(PieceColor.BLACK, PieceType.PAWN) == 0


def test_to_fen_case_follows_the_bank(white_rook: Piece, black_knight: Piece) -> None:
    """A black knight in the white bank is written as 'N' (white holds it)"""
    bank = PieceBank()
    bank.add(PieceColor.WHITE, black_knight)
    bank.add(PieceColor.BLACK, white_rook)
    assert bank.to_fen() == "[Nr]"
