"""Move policy: Order greed, Chaos blocks, positional fallback, no side effects."""

import random

import pytest

from Order_Chaos_AI.Board import EMPTY, O, X, Board
from Order_Chaos_AI.ai import move_policy, move_selector
from Order_Chaos_AI.engine.roles import CHAOS, ORDER


def test_order_takes_immediate_win_with_o():
    b = Board(6)
    for r in range(1, 5):
        b.set(r, 2, O)
    assert move_policy.choose_move(b, ORDER) == (0, 2, O)


def test_order_tries_x_before_o_at_same_cell():
    b = Board(9)
    for c in range(4):
        b.set(0, c, X)
    for r in range(1, 5):
        b.set(r, 4, O)
    assert move_policy.choose_move(b, ORDER) == (0, 4, X)


def test_chaos_blocks_x_threat_with_o():
    b = Board(6)
    for c in range(4):
        b.set(0, c, X)
    assert move_policy.choose_move(b, CHAOS) == (0, 4, O)


def test_chaos_blocks_o_threat_with_x():
    b = Board(6)
    for r in range(4):
        b.set(r, 0, O)
    assert move_policy.choose_move(b, CHAOS) == (4, 0, X)


def test_chaos_skips_cell_where_both_symbols_win():
    b = Board(9)
    for c in range(4):
        b.set(0, c, X)
    for r in range(1, 5):
        b.set(r, 4, O)
    # (0, 4) completes a line with either symbol, so no forced action there;
    # the O column can also be finished at (5, 4), which is blockable.
    assert move_policy.find_forced_block(b) == (5, 4, X)
    assert move_policy.choose_move(b, CHAOS) == (5, 4, X)


def test_order_does_not_block():
    b = Board(6)
    for c in range(4):
        b.set(0, c, X)
    b.set(0, 4, O)
    b.set(5, 0, O)
    # No completing placement exists, so Order falls back to the centre.
    mv = move_policy.choose_move(b, ORDER, rng=random.Random(3))
    assert (mv.row, mv.col) in move_selector.closest_to_center(b)


def test_chaos_does_not_take_wins():
    b = Board(6)
    for c in range(1, 5):
        b.set(5, c, X)
    b.set(5, 0, O)
    # Only (5, 5) completes, and only with X -> Chaos plays O there.
    assert move_policy.choose_move(b, CHAOS) == (5, 5, O)


def test_closest_to_center_ordering():
    assert move_selector.closest_to_center(Board(6)) == [(3, 3), (2, 3), (3, 2)]
    assert move_selector.closest_to_center(Board(7)) == [(3, 3), (3, 4), (4, 3)]


def test_fallback_uses_rng_for_cell_and_symbol(scripted_random):
    b = Board(6)
    rng = scripted_random(index=2, symbol=O)
    assert move_policy.choose_move(b, CHAOS, rng=rng) == (3, 2, O)
    rng = scripted_random(index=0, symbol=X)
    assert move_policy.choose_move(b, ORDER, rng=rng) == (3, 3, X)


def test_fallback_with_fewer_than_three_empty_cells(no_line_symbol):
    b = Board(6)
    for r in range(6):
        for c in range(6):
            b.set(r, c, no_line_symbol(r, c))
    b.set(0, 0, EMPTY)
    b.set(5, 5, EMPTY)
    for seed in range(10):
        mv = move_policy.choose_move(b, CHAOS, rng=random.Random(seed))
        assert (mv.row, mv.col) in {(0, 0), (5, 5)}
        assert mv.symbol in (X, O)


def test_full_board_returns_none(no_line_symbol):
    b = Board(5)
    for r in range(5):
        for c in range(5):
            b.set(r, c, no_line_symbol(r, c))
    assert move_policy.choose_move(b, ORDER) is None
    assert move_policy.choose_move(b, CHAOS) is None


@pytest.mark.parametrize("role", [ORDER, CHAOS])
def test_choose_move_does_not_mutate_board(role):
    b = Board(7)
    for r, c, s in [(0, 0, X), (0, 1, X), (0, 2, X), (3, 3, O), (4, 4, O), (6, 1, X)]:
        b.place(r, c, s)
    before_cells = [row[:] for row in b.cells]
    before_count = b.move_count

    first = move_policy.choose_move(b, role, rng=random.Random(42))
    assert b.cells == before_cells
    second = move_policy.choose_move(b, role, rng=random.Random(42))

    assert first == second
    assert b.cells == before_cells
    assert b.move_count == before_count
    assert b.is_empty(first.row, first.col)


def test_unknown_role_rejected():
    with pytest.raises(ValueError):
        move_policy.choose_move(Board(6), "Neutral")
