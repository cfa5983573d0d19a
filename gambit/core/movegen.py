"""Pseudo-move generation.

Everything here is pure geometry: a destination is offered when the piece can
physically get there, whether or not that exposes its own king. Two entry
points exist on purpose:

- ``pseudo_moves``: what the side to move may try, castling and en passant
  included. The legality filter consumes this.
- ``attack_reach``: what a piece threatens, without castling or en passant.
  Attack detection consumes this and must never touch the legality filter.
"""

from typing import List, Optional, Sequence, Tuple

from gambit.core.board import in_bounds, piece_at
from gambit.core.types import Board, Color, Piece, PieceType, Position

KNIGHT_OFFSETS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
KING_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)
BISHOP_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRECTIONS = BISHOP_DIRECTIONS + ROOK_DIRECTIONS


def pawn_direction(color: Color) -> int:
    return -1 if color is Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color is Color.WHITE else 1


def promotion_row(color: Color) -> int:
    return 0 if color is Color.WHITE else 7


def _pawn_moves(board: Board, from_pos: Position, piece: Piece,
                en_passant_target: Optional[Position]) -> List[Position]:
    moves = []
    direction = pawn_direction(piece.color)

    one = Position(from_pos.row + direction, from_pos.col)
    if in_bounds(*one) and board[one.row][one.col] is None:
        moves.append(one)
        if from_pos.row == pawn_start_row(piece.color):
            two = Position(from_pos.row + 2 * direction, from_pos.col)
            if board[two.row][two.col] is None:
                moves.append(two)

    for col_offset in (-1, 1):
        target = Position(from_pos.row + direction, from_pos.col + col_offset)
        if not in_bounds(*target):
            continue
        occupant = board[target.row][target.col]
        if occupant is not None and occupant.color != piece.color:
            moves.append(target)
        elif en_passant_target is not None and target == en_passant_target:
            moves.append(target)
    return moves


def _step_moves(board: Board, from_pos: Position, piece: Piece,
                offsets: Sequence[Tuple[int, int]]) -> List[Position]:
    moves = []
    for dr, dc in offsets:
        row, col = from_pos.row + dr, from_pos.col + dc
        if not in_bounds(row, col):
            continue
        occupant = board[row][col]
        if occupant is None or occupant.color != piece.color:
            moves.append(Position(row, col))
    return moves


def _sliding_moves(board: Board, from_pos: Position, piece: Piece,
                   directions: Sequence[Tuple[int, int]]) -> List[Position]:
    moves = []
    for dr, dc in directions:
        row, col = from_pos.row + dr, from_pos.col + dc
        while in_bounds(row, col):
            occupant = board[row][col]
            if occupant is None:
                moves.append(Position(row, col))
            else:
                if occupant.color != piece.color:
                    moves.append(Position(row, col))
                break
            row += dr
            col += dc
    return moves


def _castling_moves(board: Board, from_pos: Position, piece: Piece) -> List[Position]:
    # Only geometry and move flags; attacked transit squares are not examined here.
    if piece.has_moved:
        return []
    moves = []
    row = from_pos.row
    rank = board[row]

    kingside_rook = rank[7]
    if (kingside_rook is not None and kingside_rook.type is PieceType.ROOK
            and kingside_rook.color == piece.color and not kingside_rook.has_moved
            and rank[5] is None and rank[6] is None):
        moves.append(Position(row, 6))

    queenside_rook = rank[0]
    if (queenside_rook is not None and queenside_rook.type is PieceType.ROOK
            and queenside_rook.color == piece.color and not queenside_rook.has_moved
            and rank[1] is None and rank[2] is None and rank[3] is None):
        moves.append(Position(row, 2))
    return moves


def _geometric_moves(board: Board, from_pos: Position, piece: Piece,
                     en_passant_target: Optional[Position]) -> List[Position]:
    pt = piece.type
    if pt is PieceType.PAWN:
        return _pawn_moves(board, from_pos, piece, en_passant_target)
    if pt is PieceType.KNIGHT:
        return _step_moves(board, from_pos, piece, KNIGHT_OFFSETS)
    if pt is PieceType.BISHOP:
        return _sliding_moves(board, from_pos, piece, BISHOP_DIRECTIONS)
    if pt is PieceType.ROOK:
        return _sliding_moves(board, from_pos, piece, ROOK_DIRECTIONS)
    if pt is PieceType.QUEEN:
        return _sliding_moves(board, from_pos, piece, QUEEN_DIRECTIONS)
    return _step_moves(board, from_pos, piece, KING_OFFSETS)


def pseudo_moves(board: Board, from_pos: Position, color: Color,
                 en_passant_target: Optional[Position] = None) -> List[Position]:
    """Candidate destinations for the piece on ``from_pos`` if it belongs to ``color``.

    Includes castling for an unmoved king and the en passant capture square.
    Empty or foreign origins and off-board queries give an empty list.
    """
    piece = piece_at(board, from_pos)
    if piece is None or piece.color != color:
        return []
    moves = _geometric_moves(board, from_pos, piece, en_passant_target)
    if piece.type is PieceType.KING:
        moves.extend(_castling_moves(board, from_pos, piece))
    return moves


def attack_reach(board: Board, from_pos: Position) -> List[Position]:
    """Squares the piece on ``from_pos`` could land on, minus castling and en passant."""
    piece = piece_at(board, from_pos)
    if piece is None:
        return []
    return _geometric_moves(board, from_pos, piece, None)
