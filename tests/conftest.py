"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import pytest

from src.chess.board import Board, create_initial_board
from src.chess.game import GameState, create_initial_game_state
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.position import Position
from src.core.shared_types import PieceColor, PieceType


@pytest.fixture
def initial_board() -> Board:
    return create_initial_board()


@pytest.fixture
def initial_state() -> GameState:
    return create_initial_game_state()


@pytest.fixture
def white_rook() -> Piece:
    return Piece("white-rook", PieceType.ROOK, PieceColor.WHITE)


@pytest.fixture
def black_knight() -> Piece:
    return Piece("black-knight", PieceType.KNIGHT, PieceColor.BLACK)


@pytest.fixture
def rook_captures_knight(white_rook: Piece, black_knight: Piece) -> Move:
    """b1 -> b6: the white rook takes the black knight (mock, not necessarily legal)"""
    return Move(
        from_position=Position(0, 1),
        to_position=Position(5, 1),
        piece=white_rook,
        captured_piece=black_knight,
    )
