"""Player interface for the human and computer seats."""

from .Board import parse_symbol
from .ai import move_policy


class Player:
    def next_move(self, board, role):
        """Return (row, col, symbol) for the next move, or None if no move exists."""
        raise NotImplementedError


def parse_move(raw):
    """Parse 'row col symbol' (e.g. '2 3 X') into (row, col, symbol)."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 3:
        raise ValueError("expected 'row col symbol', e.g. '2 3 X'")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError("row and col must be integers") from exc
    return row, col, parse_symbol(parts[2])


class HumanPlayer(Player):
    prompt = "Enter move as 'row col X|O' (0-indexed): "

    def __init__(self, input_fn=None):
        self.input_fn = input_fn or input

    def next_move(self, board, role):
        """Text-input player; raises ValueError on malformed input."""
        return parse_move(self.input_fn(self.prompt).strip())


class ComputerPlayer(Player):
    def __init__(self, rng=None):
        self.rng = rng

    def next_move(self, board, role):
        return move_policy.choose_move(board, role, rng=self.rng)
