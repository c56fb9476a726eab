"""The 6x6 board: a grid of (optional) pieces, plus the factory for the starting position"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.fen import is_valid_board_fen, split_ranks
from src.chess.pieces import Piece, PieceIdIssuer
from src.chess.position import BOARD_DIMENSIONS, Position, is_valid_position
from src.core.exceptions import GameStateError, InvalidFENError, OutOfBoundsError
from src.core.shared_types import PieceColor, PieceType

logger = logging.getLogger(__name__)

Grid = list[list[Optional[Piece]]]

# Starting position of the variant. Issued in this order, so every id is the plain "<color>-<type>" (pawns: "-0")
STARTING_LAYOUT: tuple[tuple[Position, PieceColor, PieceType], ...] = (
    (Position(0, 0), PieceColor.WHITE, PieceType.KING),
    (Position(0, 1), PieceColor.WHITE, PieceType.ROOK),
    (Position(0, 2), PieceColor.WHITE, PieceType.KNIGHT),
    (Position(0, 3), PieceColor.WHITE, PieceType.BISHOP),
    (Position(1, 5), PieceColor.WHITE, PieceType.PAWN),
    (Position(5, 0), PieceColor.BLACK, PieceType.KING),
    (Position(5, 1), PieceColor.BLACK, PieceType.ROOK),
    (Position(5, 2), PieceColor.BLACK, PieceType.KNIGHT),
    (Position(5, 3), PieceColor.BLACK, PieceType.BISHOP),
    (Position(4, 0), PieceColor.BLACK, PieceType.PAWN),
)


def empty_grid() -> Grid:
    num_rows, num_cols = BOARD_DIMENSIONS
    # a new list per row: rows must never alias each other
    return [[None for _ in range(num_cols)] for _ in range(num_rows)]


@dataclass
class Board:
    """
    Indexed as board[row][col], like the plain grid it wraps.

    Prefer the accessors (piece / place_piece / remove_piece): they refuse positions outside the board.
    """

    grid: Grid

    def __post_init__(self) -> None:
        num_rows, num_cols = BOARD_DIMENSIONS
        if len(self.grid) != num_rows or any(len(row) != num_cols for row in self.grid):
            raise GameStateError(
                f"Board must be {num_rows}x{num_cols}, got {len(self.grid)} rows of lengths {[len(row) for row in self.grid]}."
            )

    def __getitem__(self, row: int) -> list[Optional[Piece]]:
        return self.grid[row]

    def __iter__(self) -> Iterator[list[Optional[Piece]]]:
        return iter(self.grid)

    def __len__(self) -> int:
        return len(self.grid)

    @classmethod
    def empty(cls) -> Self:
        return cls(empty_grid())

    @classmethod
    def from_fen(cls, fen_str: str, issuer: Optional[PieceIdIssuer] = None) -> Self:
        """
        Construct a board from the placement part of a FEN string (see src/chess/fen.py)

        Piece ids are handed out by `issuer`. Pass the game's issuer if more pieces will be created later on.
        """
        if not is_valid_board_fen(fen_str):
            raise InvalidFENError(f"Cannot interpret supplied string as a board: {fen_str}")

        issuer = issuer or PieceIdIssuer()
        grid = empty_grid()
        for row, fen_one_rank in enumerate(split_ranks(fen_str)):
            col = 0
            for character in fen_one_rank:
                if character.isalpha():
                    grid[row][col] = issuer.create_from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return cls(grid)

    def to_fen(self) -> str:
        """Ranks are separated by slashes, top rank (Black's side) first."""
        return "/".join(self._rank_to_fen(row) for row in reversed(range(len(self.grid))))

    def _rank_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in self.grid[row]:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- bounds checked access ---
    def piece(self, position: Position) -> Optional[Piece]:
        self._check_bounds(position)
        return self.grid[position.row][position.col]

    def place_piece(self, piece: Piece, position: Position) -> None:
        """Put a piece on a square. Whatever was there is overwritten."""
        self._check_bounds(position)
        self.grid[position.row][position.col] = piece

    def remove_piece(self, position: Position) -> Optional[Piece]:
        """Empty the square and hand back what was on it"""
        self._check_bounds(position)
        piece = self.grid[position.row][position.col]
        self.grid[position.row][position.col] = None
        return piece

    def _check_bounds(self, position: Position) -> None:
        if not is_valid_position(position):
            raise OutOfBoundsError(
                f"Position (row={position.row}, col={position.col}) is not on the board."
            )

    # --- queries ---
    def positions(self) -> Iterator[Position]:
        """Every square, row by row"""
        for row in range(len(self.grid)):
            for col in range(len(self.grid[row])):
                yield Position(row, col)

    def occupied_positions(self) -> list[Position]:
        return [pos for pos in self.positions() if self.grid[pos.row][pos.col] is not None]

    def empty_positions(self) -> list[Position]:
        return [pos for pos in self.positions() if self.grid[pos.row][pos.col] is None]

    def pieces(self) -> list[Piece]:
        return [piece for row in self.grid for piece in row if piece is not None]

    def locate(self, piece_id: str) -> Optional[Position]:
        """Find where the piece with the given id stands (None if it is not on the board)"""
        for position in self.occupied_positions():
            piece = self.grid[position.row][position.col]
            if piece is not None and piece.id == piece_id:
                return position
        return None


def create_initial_board() -> Board:
    """
    Fresh board in the starting position.

    Every call builds new Piece objects, so two boards (two games) never share a piece.
    """
    issuer = PieceIdIssuer()
    board = Board.empty()
    for position, color, piece_type in STARTING_LAYOUT:
        board.place_piece(issuer.create(piece_type, color), position)
    logger.debug("Created starting board: %s", board.to_fen())
    return board
