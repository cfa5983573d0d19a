"""Board model: an immutable 8x8 grid of optional pieces.

Boards are tuples of row tuples, so a board handed to another component can
never be changed behind its back. Every "modification" goes through
``place`` and yields a fresh board.
"""

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from gambit.core.types import Board, Color, Piece, PieceType, Position

BOARD_SIZE = 8

BACK_RANK = (
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
)


def empty_board() -> Board:
    return tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def initialize_board() -> Board:
    """Standard starting position (black on rows 0-1, white on rows 6-7)."""
    rows = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for col in range(BOARD_SIZE):
        rows[0][col] = Piece(BACK_RANK[col], Color.BLACK)
        rows[1][col] = Piece(PieceType.PAWN, Color.BLACK)
        rows[6][col] = Piece(PieceType.PAWN, Color.WHITE)
        rows[7][col] = Piece(BACK_RANK[col], Color.WHITE)
    return tuple(tuple(row) for row in rows)


def board_from_pieces(pieces: Mapping[Position, Piece]) -> Board:
    """Build a board holding exactly the given pieces."""
    return place(empty_board(), pieces)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def piece_at(board: Board, pos: Position) -> Optional[Piece]:
    if not in_bounds(pos.row, pos.col):
        return None
    return board[pos.row][pos.col]


def iter_pieces(board: Board, color: Optional[Color] = None) -> Iterator[Tuple[Position, Piece]]:
    """Yield (position, piece) in row-major order, optionally for one color."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            piece = board[row][col]
            if piece is not None and (color is None or piece.color == color):
                yield Position(row, col), piece


def place(board: Board, changes: Mapping[Position, Optional[Piece]]) -> Board:
    """Return a copy of ``board`` with the given squares set (None clears)."""
    if not changes:
        return board
    rows = [list(row) for row in board]
    for pos, piece in changes.items():
        rows[pos.row][pos.col] = piece
    return tuple(tuple(row) for row in rows)


def relocate(board: Board, from_pos: Position, to_pos: Position) -> Board:
    """Plain relocation of whatever stands on ``from_pos``; used for legality probes."""
    return place(board, {to_pos: board[from_pos.row][from_pos.col], from_pos: None})


def material(board: Board, values: Dict[str, int]) -> Dict[Color, int]:
    """Per-colour material totals, kings excluded."""
    totals = {Color.WHITE: 0, Color.BLACK: 0}
    for _, piece in iter_pieces(board):
        if piece.type is PieceType.KING:
            continue
        totals[piece.color] += values[piece.type.value]
    return totals


def non_king_pieces(board: Board) -> List[Tuple[Position, Piece]]:
    return [(pos, p) for pos, p in iter_pieces(board) if p.type is not PieceType.KING]
