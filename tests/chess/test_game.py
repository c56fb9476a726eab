"""Unit tests for /src/chess/game.py"""

import pytest

from src.chess.board import Board
from src.chess.game import GameState, create_initial_game_state
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.position import Position
from src.core.exceptions import GameStateError
from src.core.shared_types import PieceColor, PieceType


# -- INITIAL STATE --
def test_initial_state_values(initial_state: GameState) -> None:
    assert initial_state.current_player == PieceColor.WHITE
    assert initial_state.move_history == []
    assert initial_state.selected_piece is None
    assert initial_state.valid_moves == []
    assert initial_state.is_check is False
    assert initial_state.is_checkmate is False
    assert initial_state.is_stalemate is False
    assert initial_state.last_move is None
    assert initial_state.is_dropping_piece is False
    for color in PieceColor:
        assert initial_state.piece_bank[color] == []


def test_initial_state_board(initial_state: GameState) -> None:
    assert initial_state.board[0][0].type == PieceType.KING
    assert initial_state.board[0][0].color == PieceColor.WHITE
    assert initial_state.board[5][0].type == PieceType.KING
    assert initial_state.board[5][0].color == PieceColor.BLACK


def test_initial_state_satisfies_invariants(initial_state: GameState) -> None:
    initial_state.check_invariants()


def test_initial_states_are_independent() -> None:
    """Two games never share anything mutable"""
    first = create_initial_game_state()
    second = create_initial_game_state()
    assert first == second

    assert first.board is not second.board
    assert first.move_history is not second.move_history
    assert first.valid_moves is not second.valid_moves
    assert first.piece_bank is not second.piece_bank
    for color in PieceColor:
        assert first.piece_bank[color] is not second.piece_bank[color]

    king = first.board.remove_piece(Position(0, 0))
    first.piece_bank.add(PieceColor.BLACK, king)
    first.valid_moves.append(Position(1, 1))
    assert second.board[0][0] is not None
    assert second.piece_bank.is_empty(PieceColor.BLACK)
    assert second.valid_moves == []


def test_piece_ids(initial_state: GameState, white_rook: Piece) -> None:
    ids = initial_state.piece_ids()
    assert len(ids) == 10
    assert "white-king" in ids and "black-pawn-0" in ids

    # moving a piece into the bank keeps the id in the game
    rook = initial_state.board.remove_piece(Position(0, 1))
    initial_state.piece_bank.add(PieceColor.BLACK, rook)
    assert sorted(initial_state.piece_ids()) == sorted(ids)


# -- MOVE HISTORY --
def test_record_move(initial_state: GameState, rook_captures_knight: Move) -> None:
    initial_state.record_move(rook_captures_knight)
    assert initial_state.move_history == [rook_captures_knight]
    assert initial_state.last_move is rook_captures_knight

    drop = Move.drop(
        Piece("black-pawn-0", PieceType.PAWN, PieceColor.BLACK), Position(3, 3)
    )
    initial_state.record_move(drop)
    assert initial_state.move_history == [rook_captures_knight, drop]
    assert initial_state.last_move is drop


def test_record_move_does_not_switch_player(
    initial_state: GameState, rook_captures_knight: Move
) -> None:
    """Turn handling belongs to the rules engine"""
    initial_state.record_move(rook_captures_knight)
    assert initial_state.current_player == PieceColor.WHITE
    assert initial_state.board[0][1] is not None


# -- INVARIANTS --
def test_duplicate_id_on_board(initial_state: GameState) -> None:
    initial_state.board.place_piece(
        Piece("white-king", PieceType.KING, PieceColor.WHITE), Position(3, 3)
    )
    with pytest.raises(GameStateError):
        initial_state.check_invariants()


def test_duplicate_id_between_board_and_bank(initial_state: GameState) -> None:
    """The same piece cannot be on the board and in the bank at the same time"""
    rook = initial_state.board.piece(Position(0, 1))
    initial_state.piece_bank.add(PieceColor.BLACK, rook)
    with pytest.raises(GameStateError):
        initial_state.check_invariants()


def test_last_move_without_history(
    initial_state: GameState, rook_captures_knight: Move
) -> None:
    initial_state.last_move = rook_captures_knight
    with pytest.raises(GameStateError):
        initial_state.check_invariants()


def test_last_move_differs_from_history(
    initial_state: GameState, rook_captures_knight: Move, black_knight: Piece
) -> None:
    initial_state.record_move(rook_captures_knight)
    initial_state.last_move = Move.drop(black_knight, Position(2, 2))
    with pytest.raises(GameStateError):
        initial_state.check_invariants()


def test_history_without_last_move(
    initial_state: GameState, rook_captures_knight: Move
) -> None:
    initial_state.move_history.append(rook_captures_knight)
    with pytest.raises(GameStateError):
        initial_state.check_invariants()


def test_board_resized_after_construction(initial_state: GameState) -> None:
    initial_state.board.grid.append([None] * 6)
    with pytest.raises(GameStateError):
        initial_state.check_invariants()


def test_game_state_defaults() -> None:
    state = GameState(board=Board.empty(), current_player=PieceColor.BLACK)
    assert state.move_history == []
    assert state.valid_moves == []
    assert state.piece_bank.is_empty(PieceColor.WHITE)
    state.check_invariants()
