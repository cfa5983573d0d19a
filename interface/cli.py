import argparse
import logging

from gambit.config import CONFIG
from gambit.core.notation import move_to_uci
from gambit.core.types import Color, Difficulty
from gambit.main import Engine


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play chess against the Gambit engine.")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=CONFIG.search.difficulty)
    parser.add_argument("--self-play", action="store_true", help="let the engine play both sides")
    parser.add_argument("--max-moves", type=int, default=200, help="half-move cap for self-play")
    args = parser.parse_args(argv)

    logging.basicConfig(level=CONFIG.log_level)
    engine = Engine(difficulty=args.difficulty)
    plies = 0

    while not engine.board.is_game_over():
        engine.print_board()
        print("----------------------------")
        state = engine.board.state

        if state.current_player is Color.WHITE and not args.self_play:
            user_move = input("Enter your move (uci format, e2e4; 'undo' to take back): ").strip()
            if user_move == "undo":
                engine.board.undo_move()
                engine.board.undo_move()
                continue
            if not engine.make_move(user_move):
                print("Illegal move, try again.")
            continue

        if args.self_play and plies >= args.max_moves:
            print("Move cap reached.")
            break
        move = engine.play_ai_move()
        if move is None:
            break
        plies += 1
        print(f"Engine plays: {move_to_uci(move)} ({engine.board.state.move_history[-1].notation})")

    engine.print_board()
    print("Game Over")
    state = engine.board.state
    if state.is_checkmate:
        print(f"Result: checkmate, {state.current_player.opponent.value} wins")
    else:
        print(f"Result: {state.outcome or 'unfinished'}")


if __name__ == "__main__":
    main()
