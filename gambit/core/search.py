import logging
import math
import random
import time
from typing import List, Optional, Tuple

from gambit.config import CONFIG
from gambit.core.evaluator import Evaluator
from gambit.core.legality import all_legal_moves, apply_move
from gambit.core.notation import move_to_uci
from gambit.core.types import Color, Difficulty, GameState, Move
from gambit.core.utils import format_info

logger = logging.getLogger(__name__)

INF = math.inf

PROMOTION_BONUS = 900
CENTER_WEIGHT = 5
BASE_ORDERING_SCORE = 200


class SearchEngine:
    """Difficulty-tiered move selection over a plain fixed-depth alpha-beta search.

    The search has no notion of mate or stalemate at inner nodes: a side
    without moves is scored by the static evaluator like any leaf.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, rng: Optional[random.Random] = None, cfg=None):
        self.evaluator = evaluator or Evaluator()
        self.cfg = cfg or CONFIG.search
        self.rng = rng or random.Random(self.cfg.seed)
        self.values = self.evaluator.cfg.piece_values
        self.nodes = 0
        self.last_score: Optional[float] = None

    # Public API
    def get_ai_move(self, state: GameState, difficulty=None) -> Optional[Move]:
        """Pick a move for the side to move, or None when it has no legal move."""
        difficulty = Difficulty(difficulty or self.cfg.difficulty)
        self.last_score = None
        moves = all_legal_moves(state)
        if not moves:
            return None

        if difficulty is Difficulty.BEGINNER:
            move = self.rng.choice(moves)
            logger.debug("beginner picked %s at random from %d moves", move_to_uci(move), len(moves))
            return move

        if difficulty is Difficulty.EASY:
            captures = [m for m in moves if m.is_capture]
            if captures and self.rng.random() < self.cfg.easy_capture_probability:
                move = self.rng.choice(captures)
            else:
                move = self.rng.choice(moves)
            logger.debug("easy picked %s (%d captures available)", move_to_uci(move), len(captures))
            return move

        depth = self.cfg.depths[difficulty.value]
        return self.get_best_move_with_minimax(state, moves, depth)

    def search_best_move(self, state: GameState, depth: int) -> Tuple[Optional[Move], Optional[float]]:
        moves = all_legal_moves(state)
        if not moves:
            return None, None
        move = self.get_best_move_with_minimax(state, moves, depth)
        return move, self.last_score

    def get_best_move_with_minimax(self, state: GameState, moves: List[Move], depth: int) -> Move:
        """Root search: the side to move maximizes, ties keep the earlier ordered move."""
        ai_color = state.current_player
        ordered = self.order_moves(moves)
        best_move = ordered[0]
        best_value = -INF

        self.nodes = 0
        start_time = time.time()
        for move in ordered:
            value = self.minimax(apply_move(state, move), depth, -INF, INF, False, ai_color)
            if value > best_value:
                best_value = value
                best_move = move

        self.last_score = best_value
        elapsed = time.time() - start_time
        logger.info(format_info(depth, best_value, self.nodes, elapsed, move_to_uci(best_move)))
        return best_move

    def minimax(self, state: GameState, depth: int, alpha: float, beta: float,
                maximizing: bool, ai_color: Color = Color.BLACK) -> float:
        """Alpha-beta minimax scored from ``ai_color``'s point of view.

        ``ai_color`` is the maximizing side; the side to move at this node is
        derived from ``maximizing``. Leaves return ``evaluate_board`` as is for
        a white AI and negated for a black AI, so larger is always better for
        ``ai_color`` rather than for white.
        """
        self.nodes += 1
        if depth == 0:
            return self.score(state, ai_color)

        color = ai_color if maximizing else ai_color.opponent
        moves = all_legal_moves(state, color)
        if not moves:
            return self.score(state, ai_color)

        moves = self.order_moves(moves)

        if maximizing:
            max_eval = -INF
            for move in moves:
                evaluation = self.minimax(apply_move(state, move), depth - 1, alpha, beta, False, ai_color)
                max_eval = max(max_eval, evaluation)
                alpha = max(alpha, evaluation)
                if beta <= alpha:
                    break
            return max_eval

        min_eval = INF
        for move in moves:
            evaluation = self.minimax(apply_move(state, move), depth - 1, alpha, beta, True, ai_color)
            min_eval = min(min_eval, evaluation)
            beta = min(beta, evaluation)
            if beta <= alpha:
                break
        return min_eval

    def score(self, state: GameState, ai_color: Color) -> int:
        value = self.evaluator.evaluate(state)
        return value if ai_color is Color.WHITE else -value

    # Move ordering
    def score_move_for_ordering(self, move: Move) -> float:
        score = 0
        if move.captured is not None:
            score += self.values[move.captured.type.value] * 10
            score -= self.values[move.piece.type.value]

        if move.is_promotion:
            score += PROMOTION_BONUS

        distance = abs(move.to_pos.col - 3.5) + abs(move.to_pos.row - 3.5)
        score += (7 - distance) * CENTER_WEIGHT

        # flat for every move, ordering is unaffected
        score += BASE_ORDERING_SCORE
        return score

    def order_moves(self, moves: List[Move]) -> List[Move]:
        # sorted() is stable, equal scores keep generation order
        return sorted(moves, key=self.score_move_for_ordering, reverse=True)


def get_ai_move(state: GameState, difficulty=None, rng: Optional[random.Random] = None) -> Optional[Move]:
    return SearchEngine(rng=rng).get_ai_move(state, difficulty)
