"""Shared fixtures for the Order & Chaos test suite."""

import pytest

from Order_Chaos_AI.Board import O, X


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, randoms=(), index=0, symbol=X):
        self._randoms = list(randoms)
        self.index = index
        self.symbol = symbol

    def random(self):
        return self._randoms.pop(0)

    def randrange(self, n):
        return min(self.index, n - 1)

    def choice(self, seq):
        return self.symbol if self.symbol in seq else seq[0]


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def no_line_symbol():
    """
    Fill pattern with no five-line in any direction: runs along rows,
    columns and both diagonals never exceed two.
    """

    def symbol_at(r, c):
        return X if (c // 2 + r) % 2 == 0 else O

    return symbol_at
