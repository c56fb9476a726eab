"""
Wire models: the JSON shape the UI layer and rules engine exchange.

Field names are camelCase on the wire (hasMoved, currentPlayer, ...), snake_case in Python.
Each model converts from/to its domain counterpart with `from_domain` / `to_domain`.
"""

from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.chess.bank import PieceBank
from src.chess.board import Board
from src.chess.game import GameState
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.position import BOARD_DIMENSIONS, Position
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PieceColor, PieceType


class WireModel(BaseModel):
    """Shared config: camelCase aliases, but snake_case names are accepted as well"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PositionSchema(WireModel):
    row: int
    col: int

    @field_validator("row", "col")
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        # off-board but non-negative is allowed here: the rules engine bounds-checks.
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value

    @classmethod
    def from_domain(cls, position: Position) -> Self:
        return cls(row=position.row, col=position.col)

    def to_domain(self) -> Position:
        return Position(self.row, self.col)


class PieceSchema(WireModel):
    id: str
    type: PieceType
    color: PieceColor
    has_moved: bool = False

    @classmethod
    def from_domain(cls, piece: Piece) -> Self:
        return cls(
            id=piece.id, type=piece.type, color=piece.color, has_moved=piece.has_moved
        )

    def to_domain(self) -> Piece:
        return Piece(self.id, self.type, self.color, self.has_moved)


class MoveSchema(WireModel):
    from_position: Optional[PositionSchema] = Field(default=None, alias="from")
    to_position: PositionSchema = Field(alias="to")
    piece: PieceSchema
    captured_piece: Optional[PieceSchema] = None
    is_promotion: Optional[bool] = None
    promote_to: Optional[PieceType] = None
    is_check: Optional[bool] = None
    is_checkmate: Optional[bool] = None
    is_dropped: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def ignore_drop_origin(cls, data: Any) -> Any:
        """
        A drop comes from the bank. The UI still sends some `from` (often a placeholder like {-1, -1}),
        which means nothing for a drop: discard it before it gets validated.
        """
        if isinstance(data, dict) and (data.get("isDropped") or data.get("is_dropped")):
            return {
                key: value
                for key, value in data.items()
                if key not in ("from", "from_position")
            }
        return data

    @classmethod
    def from_domain(cls, move: Move) -> Self:
        return cls(
            from_position=(
                PositionSchema.from_domain(move.from_position)
                if move.from_position is not None
                else None
            ),
            to_position=PositionSchema.from_domain(move.to_position),
            piece=PieceSchema.from_domain(move.piece),
            captured_piece=(
                PieceSchema.from_domain(move.captured_piece)
                if move.captured_piece is not None
                else None
            ),
            is_promotion=move.is_promotion,
            promote_to=move.promote_to,
            is_check=move.is_check,
            is_checkmate=move.is_checkmate,
            is_dropped=move.is_dropped,
        )

    def to_domain(self) -> Move:
        """Missing flags are read as False. Raises InvalidMoveError if the flags contradict each other."""
        return Move(
            from_position=(
                self.from_position.to_domain()
                if self.from_position is not None and not self.is_dropped
                else None
            ),
            to_position=self.to_position.to_domain(),
            piece=self.piece.to_domain(),
            captured_piece=(
                self.captured_piece.to_domain() if self.captured_piece is not None else None
            ),
            is_promotion=bool(self.is_promotion),
            promote_to=self.promote_to,
            is_check=bool(self.is_check),
            is_checkmate=bool(self.is_checkmate),
            is_dropped=bool(self.is_dropped),
        )


class PieceBankSchema(WireModel):
    """Keyed by color value, as the UI expects: {"white": [...], "black": [...]}"""

    white: list[PieceSchema] = Field(default_factory=list)
    black: list[PieceSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, bank: PieceBank) -> Self:
        return cls(
            white=[PieceSchema.from_domain(p) for p in bank[PieceColor.WHITE]],
            black=[PieceSchema.from_domain(p) for p in bank[PieceColor.BLACK]],
        )

    def to_domain(self) -> PieceBank:
        return PieceBank(
            {
                PieceColor.WHITE: [p.to_domain() for p in self.white],
                PieceColor.BLACK: [p.to_domain() for p in self.black],
            }
        )


class GameStateSchema(WireModel):
    board: list[list[Optional[PieceSchema]]]
    current_player: PieceColor
    move_history: list[MoveSchema] = Field(default_factory=list)
    selected_piece: Optional[PositionSchema] = None
    valid_moves: list[PositionSchema] = Field(default_factory=list)
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    last_move: Optional[MoveSchema] = None
    piece_bank: PieceBankSchema = Field(default_factory=PieceBankSchema)
    is_dropping_piece: Optional[bool] = None

    @field_validator("board")
    @classmethod
    def validate_board_dimensions(
        cls, value: list[list[Optional[PieceSchema]]]
    ) -> list[list[Optional[PieceSchema]]]:
        num_rows, num_cols = BOARD_DIMENSIONS
        if len(value) != num_rows or any(len(row) != num_cols for row in value):
            raise InvalidRequestError(
                f"Board must be {num_rows}x{num_cols} (rows x columns)."
            )
        return value

    @classmethod
    def from_domain(cls, state: GameState) -> Self:
        return cls(
            board=[
                [PieceSchema.from_domain(p) if p is not None else None for p in row]
                for row in state.board
            ],
            current_player=state.current_player,
            move_history=[MoveSchema.from_domain(m) for m in state.move_history],
            selected_piece=(
                PositionSchema.from_domain(state.selected_piece)
                if state.selected_piece is not None
                else None
            ),
            valid_moves=[PositionSchema.from_domain(p) for p in state.valid_moves],
            is_check=state.is_check,
            is_checkmate=state.is_checkmate,
            is_stalemate=state.is_stalemate,
            last_move=(
                MoveSchema.from_domain(state.last_move)
                if state.last_move is not None
                else None
            ),
            piece_bank=PieceBankSchema.from_domain(state.piece_bank),
            is_dropping_piece=state.is_dropping_piece,
        )

    def to_domain(self) -> GameState:
        """Build the GameState and check its invariants (raises GameStateError)."""
        move_history = [m.to_domain() for m in self.move_history]
        last_move = self.last_move.to_domain() if self.last_move is not None else None
        # last_move is the same object as the last history entry, not a copy of it
        if move_history and last_move == move_history[-1]:
            last_move = move_history[-1]

        state = GameState(
            board=Board(
                [[p.to_domain() if p is not None else None for p in row] for row in self.board]
            ),
            current_player=self.current_player,
            move_history=move_history,
            selected_piece=(
                self.selected_piece.to_domain() if self.selected_piece is not None else None
            ),
            valid_moves=[p.to_domain() for p in self.valid_moves],
            is_check=self.is_check,
            is_checkmate=self.is_checkmate,
            is_stalemate=self.is_stalemate,
            last_move=last_move,
            piece_bank=self.piece_bank.to_domain(),
            is_dropping_piece=bool(self.is_dropping_piece),
        )
        state.check_invariants()
        return state

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
