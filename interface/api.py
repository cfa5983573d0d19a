"""FastAPI REST interface for the engine."""

import logging
import threading
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from gambit.config import CONFIG
from gambit.core.game import ChessBoard
from gambit.core.notation import move_to_uci
from gambit.core.search import SearchEngine
from gambit.core.types import Difficulty

logging.basicConfig(level=CONFIG.log_level)
_log = logging.getLogger(__name__)

app = FastAPI(title=CONFIG.api.engine_name, version="1.0.0")

# Shared session; requests are serialized by the lock.
engine = SearchEngine()
board = ChessBoard()
_board_lock = threading.Lock()


class FenRequest(BaseModel):
    fen: str


class MoveRequest(BaseModel):
    move: str  # UCI format e.g. "e2e4"


class AIMoveRequest(BaseModel):
    difficulty: Optional[Difficulty] = None


def _snapshot() -> dict:
    state = board.state
    return {
        "fen": board.get_fen(),
        "turn": state.current_player.value,
        "legal_moves": board.get_legal_moves(),
        "history": [m.notation for m in state.move_history],
        "is_check": state.is_check,
        "is_checkmate": state.is_checkmate,
        "is_stalemate": state.is_stalemate,
        "is_draw": state.is_draw,
        "is_game_over": board.is_game_over(),
        "result": state.outcome,
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _snapshot()


@app.post("/position")
def set_position(req: FenRequest):
    with _board_lock:
        try:
            board.set_fen(req.fen)
        except ValueError as e:
            _log.warning("rejected FEN %r: %s", req.fen, e)
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
        return {"fen": board.get_fen()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        if board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if not board.make_move(req.move):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        last = board.state.move_history[-1]
        return {"fen": board.get_fen(), "move": req.move, "notation": last.notation}


@app.post("/ai-move")
def ai_move(req: AIMoveRequest = AIMoveRequest()):
    with _board_lock:
        if board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        difficulty = req.difficulty or Difficulty(CONFIG.search.difficulty)
        move = engine.get_ai_move(board.state, difficulty)
        if move is None:
            raise HTTPException(status_code=400, detail="No legal move available")
        board.push(move)
        last = board.state.move_history[-1]
        return {
            "move": move_to_uci(move),
            "notation": last.notation,
            "difficulty": difficulty.value,
            "score": engine.last_score,
            "fen": board.get_fen(),
        }


@app.post("/undo")
def undo_move():
    with _board_lock:
        board.undo_move()
        return {"fen": board.get_fen()}


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return {"fen": board.get_fen()}
