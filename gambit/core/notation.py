"""Text forms of squares, pieces and moves, plus the FEN bridge through python-chess."""

from typing import Dict, List, Optional, Tuple

import chess

from gambit.core.board import BOARD_SIZE, board_from_pieces, iter_pieces
from gambit.core.types import Board, Color, GameState, Move, Piece, PieceType, Position

FILES = "abcdefgh"

PIECE_SYMBOLS = {
    Color.WHITE: {
        PieceType.KING: "♔",
        PieceType.QUEEN: "♕",
        PieceType.ROOK: "♖",
        PieceType.BISHOP: "♗",
        PieceType.KNIGHT: "♘",
        PieceType.PAWN: "♙",
    },
    Color.BLACK: {
        PieceType.KING: "♚",
        PieceType.QUEEN: "♛",
        PieceType.ROOK: "♜",
        PieceType.BISHOP: "♝",
        PieceType.KNIGHT: "♞",
        PieceType.PAWN: "♟",
    },
}

_CHESS_TYPES = {
    PieceType.PAWN: chess.PAWN,
    PieceType.KNIGHT: chess.KNIGHT,
    PieceType.BISHOP: chess.BISHOP,
    PieceType.ROOK: chess.ROOK,
    PieceType.QUEEN: chess.QUEEN,
    PieceType.KING: chess.KING,
}
_FROM_CHESS_TYPES = {v: k for k, v in _CHESS_TYPES.items()}


def get_piece_symbol(piece: Piece) -> str:
    return PIECE_SYMBOLS[piece.color][piece.type]


def square_name(pos: Position) -> str:
    return f"{FILES[pos.col]}{BOARD_SIZE - pos.row}"


def parse_square(text: str) -> Optional[Position]:
    """'e4' -> Position(4, 4); anything malformed gives None."""
    if len(text) != 2 or text[0] not in FILES or text[1] not in "12345678":
        return None
    return Position(BOARD_SIZE - int(text[1]), FILES.index(text[0]))


def to_chess_square(pos: Position) -> int:
    return chess.square(pos.col, BOARD_SIZE - 1 - pos.row)


def from_chess_square(square: int) -> Position:
    return Position(BOARD_SIZE - 1 - chess.square_rank(square), chess.square_file(square))


def move_to_notation(move: Move, board: Optional[Board] = None) -> str:
    """Short algebraic notation, without check or disambiguation suffixes.

    ``board`` is the position before the move; it is accepted for callers that
    pass it but the move record already carries everything needed.
    """
    if move.is_castling:
        return "O-O" if move.to_pos.col > move.from_pos.col else "O-O-O"

    piece = move.piece
    notation = ""
    if piece.type is not PieceType.PAWN:
        notation += piece.type.letter

    if move.captured is not None or move.is_en_passant:
        if piece.type is PieceType.PAWN:
            notation += FILES[move.from_pos.col]
        notation += "x"

    notation += square_name(move.to_pos)

    if move.is_promotion and move.promoted_to is not None:
        notation += "=" + move.promoted_to.letter
    return notation


def move_to_uci(move: Move) -> str:
    uci = square_name(move.from_pos) + square_name(move.to_pos)
    if move.is_promotion and move.promoted_to is not None:
        uci += chess.piece_symbol(_CHESS_TYPES[move.promoted_to])
    return uci


def parse_uci(text: str) -> Optional[Tuple[Position, Position, Optional[PieceType]]]:
    """Split a UCI string into (from, to, promotion); None if it is not valid UCI."""
    try:
        parsed = chess.Move.from_uci(text.strip())
    except ValueError:
        return None
    if not parsed:  # null move "0000"
        return None
    promotion = _FROM_CHESS_TYPES.get(parsed.promotion) if parsed.promotion else None
    return from_chess_square(parsed.from_square), from_chess_square(parsed.to_square), promotion


def render_board(board: Board) -> str:
    """Text diagram with rank/file labels, white at the bottom."""
    lines: List[str] = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board[row][col]
            cells.append(get_piece_symbol(piece) if piece else "·")
        lines.append(f"{BOARD_SIZE - row} " + " ".join(cells))
    lines.append("  " + " ".join(FILES))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# FEN bridge
# ---------------------------------------------------------------------------

def state_from_fen(fen: str) -> GameState:
    """Parse a FEN into a GameState. Raises ValueError on malformed FEN.

    The model has no castling-rights field, so rights are folded into
    ``has_moved``: a king or corner rook keeps ``has_moved=False`` only when a
    matching right is present.
    """
    cb = chess.Board(fen)
    pieces: Dict[Position, Piece] = {}
    for square, cp in cb.piece_map().items():
        color = Color.WHITE if cp.color == chess.WHITE else Color.BLACK
        piece_type = _FROM_CHESS_TYPES[cp.piece_type]
        has_moved = False
        if piece_type is PieceType.KING:
            has_moved = not cb.has_castling_rights(cp.color)
        elif piece_type is PieceType.ROOK:
            has_moved = not (cb.castling_rights & chess.BB_SQUARES[square])
        elif piece_type is PieceType.PAWN:
            has_moved = from_chess_square(square).row != (6 if color is Color.WHITE else 1)
        pieces[from_chess_square(square)] = Piece(piece_type, color, has_moved)

    ep = from_chess_square(cb.ep_square) if cb.ep_square is not None else None
    return GameState(
        board=board_from_pieces(pieces),
        current_player=Color.WHITE if cb.turn == chess.WHITE else Color.BLACK,
        half_move_clock=cb.halfmove_clock,
        full_move_number=cb.fullmove_number,
        en_passant_target=ep,
    )


def to_chess_board(state: GameState) -> chess.Board:
    cb = chess.Board(None)
    for pos, piece in iter_pieces(state.board):
        color = chess.WHITE if piece.color is Color.WHITE else chess.BLACK
        cb.set_piece_at(to_chess_square(pos), chess.Piece(_CHESS_TYPES[piece.type], color))
    cb.turn = chess.WHITE if state.current_player is Color.WHITE else chess.BLACK

    rights = 0
    for color, row in ((Color.WHITE, 7), (Color.BLACK, 0)):
        king = state.board[row][4]
        if king is None or king.type is not PieceType.KING or king.color != color or king.has_moved:
            continue
        for col in (0, 7):
            rook = state.board[row][col]
            if rook is not None and rook.type is PieceType.ROOK and rook.color == color and not rook.has_moved:
                rights |= chess.BB_SQUARES[to_chess_square(Position(row, col))]
    cb.castling_rights = rights

    if state.en_passant_target is not None:
        cb.ep_square = to_chess_square(state.en_passant_target)
    cb.halfmove_clock = state.half_move_clock
    cb.fullmove_number = state.full_move_number
    return cb


def state_to_fen(state: GameState) -> str:
    return to_chess_board(state).fen()
