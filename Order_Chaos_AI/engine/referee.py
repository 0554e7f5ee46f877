"""Move validation for a running match. Never mutates; raises on illegal moves."""

from ..Board import SYMBOLS
from .errors import GameOverError, IllegalMoveError
from .roles import IN_PROGRESS


def check_move(match, mover, row, col, symbol):
    """
    Validate a move against match status, symbol, turn owner, bounds and occupancy.
    Raises GameOverError / IllegalMoveError; returns True when the move is legal.
    """
    if match.status != IN_PROGRESS:
        raise GameOverError(f"match is over ({match.status})")

    if symbol not in SYMBOLS:
        raise IllegalMoveError("symbol must be X or O")

    if mover != match.turn:
        raise IllegalMoveError(f"not {mover}'s turn (turn: {match.turn})")

    board = match.board_view
    if not board.in_bounds(row, col):
        raise IllegalMoveError(f"({row}, {col}) is off the {board.size}x{board.size} board")
    if not board.is_empty(row, col):
        raise IllegalMoveError(f"cell ({row}, {col}) is already occupied")

    return True
