"""Terminal-state detection: checkmate, stalemate and the draw rules."""

from dataclasses import replace

from gambit.config import CONFIG
from gambit.core.attacks import is_in_check
from gambit.core.board import iter_pieces, non_king_pieces
from gambit.core.legality import get_legal_moves
from gambit.core.types import Board, GameState, PieceType


def has_legal_move(state: GameState) -> bool:
    player = state.current_player
    for pos, _ in iter_pieces(state.board, player):
        if get_legal_moves(state.board, pos, player, state.en_passant_target):
            return True
    return False


def is_checkmate(state: GameState) -> bool:
    return is_in_check(state.board, state.current_player) and not has_legal_move(state)


def is_stalemate(state: GameState) -> bool:
    return not is_in_check(state.board, state.current_player) and not has_legal_move(state)


def _light_square(row: int, col: int) -> bool:
    return (row + col) % 2 == 0


def has_insufficient_material(board: Board) -> bool:
    pieces = non_king_pieces(board)
    if not pieces:
        return True
    if len(pieces) == 1:
        return pieces[0][1].type in (PieceType.BISHOP, PieceType.KNIGHT)
    if len(pieces) == 2 and all(p.type is PieceType.BISHOP for _, p in pieces):
        if CONFIG.rules.strict_bishop_draw:
            (a, _), (b, _) = pieces
            return _light_square(*a) == _light_square(*b)
        return True
    return False


def is_fifty_move_draw(state: GameState) -> bool:
    return state.half_move_clock >= CONFIG.rules.fifty_move_limit


def is_draw(state: GameState) -> bool:
    return is_fifty_move_draw(state) or has_insufficient_material(state.board)


def refresh_status(state: GameState) -> GameState:
    """Recompute is_check / is_checkmate / is_stalemate / is_draw for ``state``."""
    check = is_in_check(state.board, state.current_player)
    stuck = not has_legal_move(state)
    return replace(
        state,
        is_check=check,
        is_checkmate=check and stuck,
        is_stalemate=not check and stuck,
        is_draw=is_draw(state),
    )


def is_game_over(state: GameState) -> bool:
    return state.is_checkmate or state.is_stalemate or state.is_draw
