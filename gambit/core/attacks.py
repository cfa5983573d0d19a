"""Attack and check detection, built only on the unfiltered generator."""

from typing import Optional

from gambit.core.board import iter_pieces
from gambit.core.movegen import attack_reach
from gambit.core.types import Board, Color, PieceType, Position


def find_king(board: Board, color: Color) -> Optional[Position]:
    for pos, piece in iter_pieces(board, color):
        if piece.type is PieceType.KING:
            return pos
    return None


def is_square_attacked(board: Board, square: Position, by_color: Color) -> bool:
    """True if any ``by_color`` piece can geometrically land on ``square``."""
    for pos, _ in iter_pieces(board, by_color):
        if square in attack_reach(board, pos):
            return True
    return False


def is_in_check(board: Board, color: Color) -> bool:
    # A board without that king is malformed input; report "not in check".
    king = find_king(board, color)
    if king is None:
        return False
    return is_square_attacked(board, king, color.opponent)
