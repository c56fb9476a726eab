"""
The GameState is the shape every collaborator (rules engine, UI controller) reads and writes.

This module only builds the initial state and checks its invariants.
Everything that happens after the first move (whose turn it is, which moves are legal, check(mate) detection)
is the job of the rules engine, which mutates the state in place.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from src.chess.bank import PieceBank
from src.chess.board import Board, create_initial_board
from src.chess.moves import Move
from src.chess.position import BOARD_DIMENSIONS, Position
from src.core.exceptions import GameStateError
from src.core.shared_types import PieceColor

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    board: Board
    current_player: PieceColor
    move_history: list[Move] = field(default_factory=list)  # oldest first
    selected_piece: Optional[Position] = None  # UI selection cursor
    valid_moves: list[Position] = field(default_factory=list)  # UI cache, filled by the rules engine
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    last_move: Optional[Move] = None
    piece_bank: PieceBank = field(default_factory=PieceBank)
    is_dropping_piece: bool = False  # UI mode: placing a banked piece

    def record_move(self, move: Move) -> None:
        """
        Append a move to the history and keep `last_move` in sync with it.

        NOTE: the board, bank and current_player are not touched. Applying the move is up to the rules engine.
        """
        self.move_history.append(move)
        self.last_move = move

    def piece_ids(self) -> list[str]:
        """ids of every piece in the game: on the board and in both banks"""
        return [piece.id for piece in self.board.pieces()] + self.piece_bank.piece_ids()

    def check_invariants(self) -> None:
        """Raise GameStateError if the state is not one any collaborator should ever observe."""
        num_rows, num_cols = BOARD_DIMENSIONS
        if len(self.board) != num_rows or any(len(row) != num_cols for row in self.board):
            raise GameStateError(f"Board is no longer {num_rows}x{num_cols}.")

        duplicates = [
            piece_id for piece_id, count in Counter(self.piece_ids()).items() if count > 1
        ]
        if duplicates:
            raise GameStateError(f"Piece ids used more than once: {duplicates}")

        if not self.move_history and self.last_move is not None:
            raise GameStateError("last_move is set, but no moves were recorded.")
        if self.move_history and self.last_move != self.move_history[-1]:
            raise GameStateError(
                "last_move does not match the last entry of the move history."
            )


def create_initial_game_state() -> GameState:
    """New game: starting board, white to move, nothing captured, nothing selected."""
    state = GameState(
        board=create_initial_board(),
        current_player=PieceColor.WHITE,
        move_history=[],
        selected_piece=None,
        valid_moves=[],
        is_check=False,
        is_checkmate=False,
        is_stalemate=False,
        last_move=None,
        piece_bank=PieceBank(),
    )
    state.check_invariants()
    logger.debug("Created initial game state, %s to move", state.current_player)
    return state
