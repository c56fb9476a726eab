"""
A position (square) on the board, and the helpers to convert it from/to algebraic notation.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase, digits

from src.core.exceptions import InvalidNotationError

# (rows, cols). This variant is played on a 6x6 board, not the classical 8x8
BOARD_DIMENSIONS = (6, 6)


@dataclass(frozen=True)
class Position:
    """
    Zero-indexed (row, col). Row 0 is White's back rank, col 0 is the a-file.

    Value type: two positions are equal when their row and col are equal.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, notation: str) -> Position:
        """
        Algebraic notation: 'a1' - 'f6' get converted to (0,0) - (5,5)

        NOTE: No bounds check! A well-formed but off-board square ('g1', 'a0') still parses.
        Call is_within_bounds() on the result before using it to index the board.
        """
        if len(notation) != 2:
            raise InvalidNotationError(
                f"Expected <file><rank> (two characters), got {notation!r}."
            )

        file_char, rank_char = notation[0], notation[1]
        if file_char not in ascii_lowercase:
            raise InvalidNotationError(
                f"File of {notation!r} must be a lower case letter."
            )
        if rank_char not in digits:
            raise InvalidNotationError(f"Rank of {notation!r} must be a digit.")

        col = ord(file_char) - ord("a")
        row = int(rank_char) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        """Only squares the parser can read back: files a-z, ranks 1-9"""
        if not (0 <= self.col < len(ascii_lowercase)) or not (0 <= self.row <= 8):
            raise InvalidNotationError(
                f"No algebraic name exists for (row={self.row}, col={self.col})."
            )
        return f"{ascii_lowercase[self.col]}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        num_rows, num_cols = BOARD_DIMENSIONS
        return (0 <= self.row < num_rows) and (0 <= self.col < num_cols)

    def offset(self, d_row: int, d_col: int) -> Position:
        """Neighbouring position. Can end up off the board, so check bounds after."""
        return Position(self.row + d_row, self.col + d_col)


# --- Function style API (what the rules engine / UI call) ---
def is_valid_position(position: Position) -> bool:
    """The gate to pass before indexing the board with a position."""
    return position.is_within_bounds()


def algebraic_to_position(notation: str) -> Position:
    return Position.from_algebraic(notation)


def position_to_algebraic(position: Position) -> str:
    return position.to_algebraic()
