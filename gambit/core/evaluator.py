"""Static evaluator: material plus piece-square tables, positive favors white."""

from gambit.config import CONFIG
from gambit.core.board import iter_pieces, material
from gambit.core.types import Color, GameState, PieceType

# Tables are written from black's side of the board: table[0] is black's back rank.
PAWN_TABLE = (
    (0,  0,  0,  0,  0,  0,  0,  0),
    (50, 50, 50, 50, 50, 50, 50, 50),
    (10, 10, 20, 30, 30, 20, 10, 10),
    (5,  5, 10, 25, 25, 10,  5,  5),
    (0,  0,  0, 20, 20,  0,  0,  0),
    (5, -5, -10,  0,  0, -10, -5,  5),
    (5, 10, 10, -20, -20, 10, 10,  5),
    (0,  0,  0,  0,  0,  0,  0,  0),
)

KNIGHT_TABLE = (
    (-50, -40, -30, -30, -30, -30, -40, -50),
    (-40, -20,  0,  0,  0,  0, -20, -40),
    (-30,  0, 10, 15, 15, 10,  0, -30),
    (-30,  5, 15, 20, 20, 15,  5, -30),
    (-30,  0, 15, 20, 20, 15,  0, -30),
    (-30,  5, 10, 15, 15, 10,  5, -30),
    (-40, -20,  0,  5,  5,  0, -20, -40),
    (-50, -40, -30, -30, -30, -30, -40, -50),
)

BISHOP_TABLE = (
    (-20, -10, -10, -10, -10, -10, -10, -20),
    (-10,  0,  0,  0,  0,  0,  0, -10),
    (-10,  0,  5, 10, 10,  5,  0, -10),
    (-10,  5,  5, 10, 10,  5,  5, -10),
    (-10,  0, 10, 10, 10, 10,  0, -10),
    (-10, 10, 10, 10, 10, 10, 10, -10),
    (-10,  5,  0,  0,  0,  0,  5, -10),
    (-20, -10, -10, -10, -10, -10, -10, -20),
)

ROOK_TABLE = (
    (0,  0,  0,  0,  0,  0,  0,  0),
    (5, 10, 10, 10, 10, 10, 10,  5),
    (-5,  0,  0,  0,  0,  0,  0, -5),
    (-5,  0,  0,  0,  0,  0,  0, -5),
    (-5,  0,  0,  0,  0,  0,  0, -5),
    (-5,  0,  0,  0,  0,  0,  0, -5),
    (-5,  0,  0,  0,  0,  0,  0, -5),
    (0,  0,  0,  5,  5,  0,  0,  0),
)

QUEEN_TABLE = (
    (-20, -10, -10, -5, -5, -10, -10, -20),
    (-10,  0,  0,  0,  0,  0,  0, -10),
    (-10,  0,  5,  5,  5,  5,  0, -10),
    (-5,  0,  5,  5,  5,  5,  0, -5),
    (0,  0,  5,  5,  5,  5,  0, -5),
    (-10,  5,  5,  5,  5,  5,  0, -10),
    (-10,  0,  5,  0,  0,  0,  0, -10),
    (-20, -10, -10, -5, -5, -10, -10, -20),
)

KING_TABLE_OPENING = (
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-20, -30, -30, -40, -40, -30, -30, -20),
    (-10, -20, -20, -20, -20, -20, -20, -10),
    (20, 30, 10,  0,  0, 10, 30, 20),
    (20, 30, 10,  0,  0, 10, 30, 20),
)

KING_TABLE_ENDGAME = (
    (-50, -40, -30, -20, -20, -30, -40, -50),
    (-30, -20, -10,  0,  0, -10, -20, -30),
    (-30, -10, 20, 30, 30, 20, -10, -30),
    (-30, -10, 30, 40, 40, 30, -10, -30),
    (-30, -10, 30, 40, 40, 30, -10, -30),
    (-30, -10, 20, 30, 30, 20, -10, -30),
    (-30, -30,  0,  0,  0,  0, -30, -30),
    (-50, -30, -30, -30, -30, -30, -30, -50),
)

PIECE_SQUARE_TABLES = {
    PieceType.PAWN: PAWN_TABLE,
    PieceType.KNIGHT: KNIGHT_TABLE,
    PieceType.BISHOP: BISHOP_TABLE,
    PieceType.ROOK: ROOK_TABLE,
    PieceType.QUEEN: QUEEN_TABLE,
}


class Evaluator:
    def __init__(self, cfg=None):
        self.cfg = cfg or CONFIG.eval

    def is_endgame(self, board) -> bool:
        totals = material(board, self.cfg.piece_values)
        return totals[Color.WHITE] + totals[Color.BLACK] < self.cfg.endgame_threshold

    def piece_square_value(self, piece, row: int, col: int, endgame: bool) -> int:
        if piece.type is PieceType.KING:
            table = KING_TABLE_ENDGAME if endgame else KING_TABLE_OPENING
        else:
            table = PIECE_SQUARE_TABLES[piece.type]
        # white reads the table upside down
        table_row = 7 - row if piece.color is Color.WHITE else row
        return table[table_row][col]

    def evaluate(self, state: GameState) -> int:
        """Return static eval in centipawns, positive favors white."""
        board = state.board
        endgame = self.is_endgame(board)
        values = self.cfg.piece_values

        score = 0
        for pos, piece in iter_pieces(board):
            total = values[piece.type.value] + self.piece_square_value(piece, pos.row, pos.col, endgame)
            if piece.color is Color.WHITE:
                score += total
            else:
                score -= total
        return score


def evaluate_board(state: GameState) -> int:
    return Evaluator().evaluate(state)
