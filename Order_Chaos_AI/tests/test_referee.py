"""Referee ordering of move checks."""

import pytest

from Order_Chaos_AI.Board import EMPTY, O, X
from Order_Chaos_AI.Match import MatchState
from Order_Chaos_AI.engine import referee
from Order_Chaos_AI.engine.errors import GameOverError, IllegalMoveError
from Order_Chaos_AI.engine.roles import COMPUTER, HUMAN


def test_valid_move_passes():
    m = MatchState(6, first_turn=HUMAN)
    assert referee.check_move(m, HUMAN, 3, 3, X) is True
    assert m.board.is_empty(3, 3)


@pytest.mark.parametrize(
    "mover, row, col, symbol",
    [
        (COMPUTER, 0, 0, X),
        (HUMAN, -1, 0, X),
        (HUMAN, 0, 6, X),
        (HUMAN, 0, 0, EMPTY),
        (HUMAN, 0, 0, "X"),
    ],
)
def test_illegal_moves(mover, row, col, symbol):
    m = MatchState(6, first_turn=HUMAN)
    with pytest.raises(IllegalMoveError):
        referee.check_move(m, mover, row, col, symbol)


def test_game_over_checked_first():
    m = MatchState(6, first_turn=HUMAN)
    for c in range(4):
        m.apply_move(HUMAN, 0, c, X)
        m.apply_move(COMPUTER, 5, c, O if c % 2 else X)
    m.apply_move(HUMAN, 0, 4, X)
    # Wrong mover and occupied cell, but the terminal status wins.
    with pytest.raises(GameOverError):
        referee.check_move(m, COMPUTER, 0, 0, X)
