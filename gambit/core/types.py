"""Value types shared by every layer: colors, pieces, squares, moves and game state."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Color(str, Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceType(str, Enum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"

    @property
    def letter(self) -> str:
        """Uppercase first letter of the type name (pawns included)."""
        return self.value[0].upper()


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    EXPERT = "expert"
    MASTER = "master"


PROMOTION_TYPES = (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)


class Position(NamedTuple):
    """A square. Row 0 is black's back rank, row 7 is white's."""

    row: int
    col: int


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color
    has_moved: bool = False

    def moved(self) -> "Piece":
        return self if self.has_moved else replace(self, has_moved=True)

    def promoted(self, to: PieceType) -> "Piece":
        return replace(self, type=to, has_moved=True)


# 8 rows of 8 optional pieces; never mutated once built.
Board = Tuple[Tuple[Optional[Piece], ...], ...]


@dataclass(frozen=True)
class Move:
    from_pos: Position
    to_pos: Position
    piece: Piece  # value before the move
    captured: Optional[Piece] = None
    is_en_passant: bool = False
    is_castling: bool = False
    is_promotion: bool = False
    promoted_to: Optional[PieceType] = None
    notation: Optional[str] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True)
class GameState:
    board: Board
    current_player: Color = Color.WHITE
    move_history: Tuple[Move, ...] = field(default_factory=tuple)
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    is_draw: bool = False
    half_move_clock: int = 0
    full_move_number: int = 1
    en_passant_target: Optional[Position] = None

    @classmethod
    def initial(cls) -> "GameState":
        from gambit.core.board import initialize_board

        return cls(board=initialize_board())

    @property
    def outcome(self) -> Optional[str]:
        if self.is_checkmate:
            return "checkmate"
        if self.is_stalemate:
            return "stalemate"
        if self.is_draw:
            return "draw"
        return None
