"""Legal-move filtering and move application.

Legality is decided by relocating the piece on a copied board and asking
whether the mover's king is attacked afterwards. Besides the relocation only
the en passant victim is removed; castling rook hops and promotions cannot
change the answer and are not simulated.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from gambit.config import CONFIG
from gambit.core.attacks import find_king, is_in_check, is_square_attacked
from gambit.core.board import iter_pieces, piece_at, place, relocate
from gambit.core.movegen import pawn_direction, promotion_row, pseudo_moves
from gambit.core.notation import move_to_notation
from gambit.core.types import (
    PROMOTION_TYPES, Board, Color, GameState, Move, PieceType, Position,
)

logger = logging.getLogger(__name__)


def _leaves_king_attacked(board: Board, from_pos: Position, to_pos: Position, color: Color,
                          en_passant_target: Optional[Position] = None) -> bool:
    after = relocate(board, from_pos, to_pos)
    mover = board[from_pos.row][from_pos.col]
    if (mover.type is PieceType.PAWN and to_pos == en_passant_target
            and board[to_pos.row][to_pos.col] is None):
        # the pawn taken en passant leaves the board too
        after = place(after, {Position(from_pos.row, to_pos.col): None})
    king = find_king(after, color)
    if king is None:
        return True
    return is_square_attacked(after, king, color.opponent)


def _castles_through_check(board: Board, from_pos: Position, to_pos: Position, color: Color) -> bool:
    if is_in_check(board, color):
        return True
    step = 1 if to_pos.col > from_pos.col else -1
    transit = Position(from_pos.row, from_pos.col + step)
    return _leaves_king_attacked(board, from_pos, transit, color)


def get_legal_moves(board: Board, from_pos: Position, color: Color,
                    en_passant_target: Optional[Position] = None) -> List[Position]:
    """Destinations for the piece on ``from_pos`` that keep ``color``'s king safe."""
    piece = piece_at(board, from_pos)
    if piece is None or piece.color != color:
        return []

    legal = []
    for to_pos in pseudo_moves(board, from_pos, color, en_passant_target):
        if _leaves_king_attacked(board, from_pos, to_pos, color, en_passant_target):
            continue
        if (CONFIG.rules.strict_castling and piece.type is PieceType.KING
                and abs(to_pos.col - from_pos.col) == 2
                and _castles_through_check(board, from_pos, to_pos, color)):
            continue
        legal.append(to_pos)
    return legal


def build_move(state: GameState, from_pos: Position, to_pos: Position,
               promote_to: PieceType = PieceType.QUEEN) -> Move:
    """Describe moving the piece on ``from_pos`` to ``to_pos`` in ``state``.

    Does not check legality; callers pass destinations from ``get_legal_moves``.
    """
    board = state.board
    piece = board[from_pos.row][from_pos.col]
    captured = board[to_pos.row][to_pos.col]

    is_en_passant = (piece.type is PieceType.PAWN
                     and state.en_passant_target is not None
                     and to_pos == state.en_passant_target
                     and captured is None)
    if is_en_passant:
        captured = board[to_pos.row - pawn_direction(piece.color)][to_pos.col]

    is_castling = piece.type is PieceType.KING and abs(to_pos.col - from_pos.col) == 2
    is_promotion = piece.type is PieceType.PAWN and to_pos.row == promotion_row(piece.color)

    return Move(
        from_pos=from_pos,
        to_pos=to_pos,
        piece=piece,
        captured=captured,
        is_en_passant=is_en_passant,
        is_castling=is_castling,
        is_promotion=is_promotion,
        promoted_to=promote_to if is_promotion else None,
    )


def all_legal_moves(state: GameState, color: Optional[Color] = None) -> List[Move]:
    """Every legal move for ``color`` (default: side to move), promotions to queen only."""
    color = color or state.current_player
    moves = []
    for pos, _ in iter_pieces(state.board, color):
        for to_pos in get_legal_moves(state.board, pos, color, state.en_passant_target):
            moves.append(build_move(state, pos, to_pos))
    return moves


def apply_move(state: GameState, move: Move) -> GameState:
    """Return the state after ``move``; status flags are reset, see rules.refresh_status."""
    board = state.board
    piece = move.piece
    changes = {move.from_pos: None}

    if move.is_en_passant:
        changes[Position(move.to_pos.row - pawn_direction(piece.color), move.to_pos.col)] = None

    if move.is_castling:
        kingside = move.to_pos.col > move.from_pos.col
        rook_from = Position(move.from_pos.row, 7 if kingside else 0)
        rook_to = Position(move.from_pos.row, 5 if kingside else 3)
        rook = board[rook_from.row][rook_from.col]
        if rook is not None:
            changes[rook_from] = None
            changes[rook_to] = rook.moved()

    if move.is_promotion:
        changes[move.to_pos] = piece.promoted(move.promoted_to or PieceType.QUEEN)
    else:
        changes[move.to_pos] = piece.moved()

    en_passant_target = None
    if piece.type is PieceType.PAWN and abs(move.to_pos.row - move.from_pos.row) == 2:
        en_passant_target = Position(move.from_pos.row + pawn_direction(piece.color), move.from_pos.col)

    if move.notation is None:
        move = replace(move, notation=move_to_notation(move, board))

    resets_clock = move.captured is not None or piece.type is PieceType.PAWN
    return GameState(
        board=place(board, changes),
        current_player=state.current_player.opponent,
        move_history=state.move_history + (move,),
        half_move_clock=0 if resets_clock else state.half_move_clock + 1,
        full_move_number=state.full_move_number + (1 if state.current_player is Color.BLACK else 0),
        en_passant_target=en_passant_target,
    )


def make_move(state: GameState, from_pos: Position, to_pos: Position,
              promote_to: PieceType = PieceType.QUEEN) -> Optional[GameState]:
    """Guarded move entry point.

    Accepts only a destination drawn from ``get_legal_moves`` for the side to
    move; anything else returns None and leaves ``state`` untouched. The
    returned state has its check/mate/draw flags recomputed.
    """
    from gambit.core.rules import refresh_status

    if promote_to not in PROMOTION_TYPES:
        return None
    if to_pos not in get_legal_moves(state.board, from_pos, state.current_player, state.en_passant_target):
        logger.debug("rejected move %s -> %s for %s", from_pos, to_pos, state.current_player.value)
        return None
    move = build_move(state, from_pos, to_pos, promote_to)
    return refresh_status(apply_move(state, move))
