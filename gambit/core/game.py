"""Game session wrapper providing move history tracking and undo."""

from typing import List, Optional, Union

from gambit.core.legality import all_legal_moves, make_move
from gambit.core.notation import move_to_uci, parse_uci, render_board, state_from_fen, state_to_fen
from gambit.core.rules import is_game_over, refresh_status
from gambit.core.types import GameState, Move, PieceType, Position


class ChessBoard:
    def __init__(self, fen: str = None):
        """Initialize from FEN or the standard starting position."""
        self.state = refresh_status(state_from_fen(fen)) if fen else GameState.initial()
        self._undo_stack: List[GameState] = []

    @property
    def move_history(self) -> List[str]:
        """UCI strings of the moves played in this session."""
        return [move_to_uci(m) for m in self.state.move_history]

    def reset(self):
        """Reset to the initial position."""
        self.state = GameState.initial()
        self._undo_stack.clear()

    def set_fen(self, fen: str):
        """Set state from a FEN string. Raises ValueError for bad FEN."""
        self.state = refresh_status(state_from_fen(fen))
        self._undo_stack.clear()

    def get_fen(self) -> str:
        """Return the current FEN."""
        return state_to_fen(self.state)

    def make_move(self, move: Union[str, Position], to: Optional[Position] = None,
                  promote_to: PieceType = PieceType.QUEEN) -> bool:
        """Play a UCI string ('e2e4') or a (from, to) pair. Returns True if legal."""
        if isinstance(move, str):
            parsed = parse_uci(move)
            if parsed is None:
                return False
            from_pos, to, promotion = parsed
            if promotion is not None:
                promote_to = promotion
        else:
            from_pos = move
        if to is None:
            return False

        new_state = make_move(self.state, from_pos, to, promote_to)
        if new_state is None:
            return False
        self._undo_stack.append(self.state)
        self.state = new_state
        return True

    def push(self, move: Move) -> bool:
        """Play a Move produced by the engine."""
        promote_to = move.promoted_to or PieceType.QUEEN
        return self.make_move(move.from_pos, move.to_pos, promote_to)

    def undo_move(self):
        """Restore the position before the last move."""
        if self._undo_stack:
            self.state = self._undo_stack.pop()

    def get_legal_moves(self) -> List[str]:
        """Return legal moves as UCI strings."""
        return [move_to_uci(m) for m in all_legal_moves(self.state)]

    def is_game_over(self) -> bool:
        """Check if the game has ended."""
        return is_game_over(self.state)

    def print_board(self):
        """Print a text diagram."""
        print(render_board(self.state.board))
