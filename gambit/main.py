from gambit.core.game import ChessBoard
from gambit.core.notation import move_to_uci
from gambit.core.search import SearchEngine


class Engine:
    def __init__(self, difficulty=None, rng=None):
        self.board = ChessBoard()
        self.search = SearchEngine(rng=rng)
        self.difficulty = difficulty

    def get_best_move(self):
        """UCI string and search score for the side to move; (None, None) if it has no move."""
        move = self.search.get_ai_move(self.board.state, self.difficulty)
        if move is None:
            return None, None
        return move_to_uci(move), self.search.last_score

    def play_ai_move(self):
        move = self.search.get_ai_move(self.board.state, self.difficulty)
        if move is None:
            return None
        self.board.push(move)
        return move

    def make_move(self, move_uci: str):
        return self.board.make_move(move_uci)

    def print_board(self):
        self.board.print_board()
