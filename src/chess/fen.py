"""
Text encoding of the board, following the first (piece placement) field of a FEN string.

For this 6x6 variant the starting board reads
krnb2/p5/6/6/5P/KRNB2
* ranks are listed from the 6th (Black's back rank, row 5) down to the 1st (White's back rank, row 0)
* within a rank, the a-file comes first
* a letter is a piece (upper case: white, lower case: black), a digit counts consecutive empty squares
"""

from src.chess.pieces import FEN_TO_PIECE
from src.chess.position import BOARD_DIMENSIONS

STARTING_BOARD_FEN = "krnb2/p5/6/6/5P/KRNB2"


def is_valid_board_fen(fen: str) -> bool:
    """Only checks the placement part: right number of ranks, and every rank exactly fills the files."""
    num_rows, num_cols = BOARD_DIMENSIONS
    rank_fens = fen.split("/")
    if len(rank_fens) != num_rows:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            if character in "123456789":
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_cols:
            return False
    return True


def split_ranks(fen: str) -> list[str]:
    """Rank strings ordered by row index (row 0 first), i.e. the reverse of the FEN order"""
    return list(reversed(fen.split("/")))
