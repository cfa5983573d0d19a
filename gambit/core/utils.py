def format_info(depth, score, nodes, elapsed, best_move_uci):
    """Engine-style info line; ``elapsed`` in seconds."""
    elapsed_ms = int(elapsed * 1000)
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    best = best_move_uci or "-"
    return f"info depth {depth} score cp {score} nodes {nodes} nps {nps} time {elapsed_ms} bestmove {best}"
