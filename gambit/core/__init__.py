"""Core engine components: board model, move generation, rules, evaluation and search."""

from .board import initialize_board
from .attacks import is_in_check, is_square_attacked
from .evaluator import Evaluator, evaluate_board
from .game import ChessBoard
from .legality import apply_move, get_legal_moves, make_move
from .notation import get_piece_symbol, move_to_notation
from .rules import has_insufficient_material, is_checkmate, is_stalemate
from .search import SearchEngine, get_ai_move
from .types import Color, Difficulty, GameState, Move, Piece, PieceType, Position
