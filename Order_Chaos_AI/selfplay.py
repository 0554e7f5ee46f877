"""Computer-vs-computer matches for evaluating the move policy."""

from __future__ import annotations

import argparse
import json
import random
import statistics
from collections import Counter
from pathlib import Path
from typing import List, Tuple

from .Board import symbol_char
from .Match import MatchState
from .Player import ComputerPlayer
from .engine.roles import COMPUTER, HUMAN, ORDER, ORDER_WINS
from .utils.logger import log_event


def play_game(board_size: int, rng: random.Random) -> Tuple[str, List[dict], dict]:
    """
    Play one match with the move policy on both seats. The "human" seat is
    driven by a second ComputerPlayer sharing the same random source.
    """
    match = MatchState.initialize(board_size, rng=rng)
    players = {HUMAN: ComputerPlayer(rng=rng), COMPUTER: ComputerPlayer(rng=rng)}
    info = {
        "board_size": board_size,
        "order_side": match.side_of(ORDER),
        "first_turn": match.turn,
    }
    movers = []

    while not match.is_over:
        side = match.turn
        role = match.role_of(side)
        move = players[side].next_move(match.board_view, role)
        if move is None:
            match.declare_board_exhausted()
            break
        match.apply_move(side, *move)
        movers.append((side, role))

    moves: List[dict] = [
        {"side": side, "role": role, "row": row, "col": col, "symbol": symbol_char(symbol)}
        for (side, role), (row, col, symbol) in zip(movers, match.board_view.history)
    ]

    info["winning_line"] = [list(rc) for rc in match.winning_line] if match.winning_line else None
    info["first_mover_role"] = match.role_of(info["first_turn"])
    return match.status, moves, info


def summarize(results: List[Tuple[str, List[dict], dict]]) -> dict:
    statuses = Counter(status for status, _, _ in results)
    lengths = [len(moves) for _, moves, _ in results]
    first_mover_wins = sum(
        1
        for status, _, info in results
        if (status == ORDER_WINS) == (info["first_mover_role"] == ORDER)
    )
    return {
        "games": len(results),
        "order_wins": statuses.get(ORDER_WINS, 0),
        "chaos_wins": len(results) - statuses.get(ORDER_WINS, 0),
        "mean_length": statistics.mean(lengths) if lengths else 0.0,
        "first_mover_wins": first_mover_wins,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Order & Chaos self-play evaluator")
    parser.add_argument("--games", type=int, default=20, help="Number of games to play")
    parser.add_argument("--board-size", type=int, default=6, help="Board size")
    parser.add_argument("--seed", type=int, default=None, help="Seed for self-play randomness (optional)")
    parser.add_argument("--output", default=None, help="Optional JSONL path for per-game records")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    results = [play_game(args.board_size, rng) for _ in range(args.games)]

    if args.output:
        out_path = Path(args.output)
        with open(out_path, "w", encoding="utf-8") as f:
            for status, moves, info in results:
                f.write(json.dumps({"status": status, "moves": moves, **info}) + "\n")
        log_event(f"Wrote {len(results)} games to {out_path}", tag="selfplay")

    summary = summarize(results)
    log_event(
        f"games={summary['games']} order_wins={summary['order_wins']} chaos_wins={summary['chaos_wins']} "
        f"mean_length={summary['mean_length']:.1f} first_mover_wins={summary['first_mover_wins']}",
        tag="selfplay",
    )


if __name__ == "__main__":
    main()
