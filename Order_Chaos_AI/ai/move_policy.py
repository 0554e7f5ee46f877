"""
One-ply move policy for the computer opponent.

Priority order over empty cells (row-major):
  1. Order: take any placement that completes a five-line (X tried before O).
  2. Chaos: block a cell where exactly one of the two symbols would complete
     a line, by playing the other symbol there.
  3. Either role: a random cell among the three closest to the centre, with a
     random symbol.

Every speculative placement goes through `win_detector.simulate`, so the board
is returned untouched; the chosen move is not applied here.
"""

import random
from typing import NamedTuple, Optional

from ..Board import O, X, Board
from ..engine import win_detector
from ..engine.roles import CHAOS, ORDER, ROLES
from . import move_selector


class Move(NamedTuple):
    row: int
    col: int
    symbol: int


def _completes_line(board: Board, row: int, col: int, symbol: int) -> bool:
    """Would placing `symbol` at (row, col) give either symbol a five-line?"""
    with win_detector.simulate(board, row, col, symbol):
        return win_detector.any_five_in_a_row(board)


def find_immediate_win(board: Board, cells=None) -> Optional[Move]:
    for row, col in board.empty_cells() if cells is None else cells:
        for symbol in (X, O):
            if _completes_line(board, row, col, symbol):
                return Move(row, col, symbol)
    return None


def find_forced_block(board: Board, cells=None) -> Optional[Move]:
    for row, col in board.empty_cells() if cells is None else cells:
        x_wins = _completes_line(board, row, col, X)
        o_wins = _completes_line(board, row, col, O)
        if x_wins and not o_wins:
            return Move(row, col, O)
        if o_wins and not x_wins:
            return Move(row, col, X)
        # Both or neither: nothing forced here.
    return None


def positional_move(board: Board, rng=None) -> Optional[Move]:
    rng = rng or random
    candidates = move_selector.closest_to_center(board)
    if not candidates:
        return None
    row, col = candidates[rng.randrange(len(candidates))]
    return Move(row, col, rng.choice((X, O)))


def choose_move(board: Board, role: str, rng=None) -> Optional[Move]:
    """Return the computer's (row, col, symbol), or None when the board is full."""
    if role not in ROLES:
        raise ValueError(f"role must be one of {ROLES}, got {role!r}")
    empties = board.empty_cells()
    if not empties:
        return None

    if role == ORDER:
        move = find_immediate_win(board, empties)
        if move is not None:
            return move

    if role == CHAOS:
        move = find_forced_block(board, empties)
        if move is not None:
            return move

    return positional_move(board, rng)
