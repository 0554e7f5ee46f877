"""Match state machine: role assignment, turn ownership and terminal status."""

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .Board import SYMBOLS, Board
from .engine import referee, win_detector
from .engine.errors import GameOverError, IllegalMoveError
from .engine.roles import (
    CHAOS,
    CHAOS_WINS,
    COMPUTER,
    HUMAN,
    IN_PROGRESS,
    ORDER,
    ORDER_WINS,
    ROLES,
    SIDES,
    other_role,
    other_side,
    winning_role,
)

Coord = Tuple[int, int]


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only projection of a match for rendering."""

    size: int
    cells: Tuple[Tuple[int, ...], ...]
    turn: str
    human_role: str
    computer_role: str
    status: str
    winning_line: Optional[Tuple[Coord, ...]]
    message: str
    move_count: int
    last_move: Optional[Coord] = None


class MatchState:
    def __init__(self, size=6, human_role=ORDER, first_turn=HUMAN, board=None):
        if human_role not in ROLES:
            raise ValueError(f"human_role must be one of {ROLES}, got {human_role!r}")
        if first_turn not in SIDES:
            raise ValueError(f"first_turn must be one of {SIDES}, got {first_turn!r}")
        if board is not None and board.size != size:
            raise ValueError("board size does not match match size")
        self._board = board.clone() if board is not None else Board(size)
        self._roles = {HUMAN: human_role, COMPUTER: other_role(human_role)}
        self._turn = first_turn
        self._status = IN_PROGRESS
        self._winning_line = None
        self._settle()

    @classmethod
    def initialize(cls, size, rng=None):
        """New match with random roles and a random first mover (two independent coin flips)."""
        rng = rng or random
        board = Board(size)
        human_role = ORDER if rng.random() < 0.5 else CHAOS
        first_turn = HUMAN if rng.random() < 0.5 else COMPUTER
        return cls(size, human_role=human_role, first_turn=first_turn, board=board)

    def reset(self, size=None, rng=None):
        """Discard the board and roles and start over, optionally at a new size."""
        fresh = MatchState.initialize(self.size if size is None else size, rng=rng)
        self._board = fresh._board
        self._roles = fresh._roles
        self._turn = fresh._turn
        self._status = fresh._status
        self._winning_line = fresh._winning_line
        return self

    # --- read-only projections -------------------------------------------------

    @property
    def size(self):
        return self._board.size

    @property
    def board(self):
        """Independent copy of the board."""
        return self._board.clone()

    @property
    def board_view(self):
        """The live board. Callers may only simulate on it (see win_detector.simulate)."""
        return self._board

    @property
    def turn(self):
        return self._turn

    @property
    def status(self):
        return self._status

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def last_move(self):
        """(row, col) of the most recent placement, from the board history."""
        history = self._board.history
        return history[-1][:2] if history else None

    @property
    def human_role(self):
        return self._roles[HUMAN]

    @property
    def computer_role(self):
        return self._roles[COMPUTER]

    def role_of(self, side):
        return self._roles[side]

    def side_of(self, role):
        return HUMAN if self._roles[HUMAN] == role else COMPUTER

    @property
    def is_over(self):
        return self._status != IN_PROGRESS

    @property
    def winner(self):
        """Side (human/computer) that won, or None while in progress."""
        role = winning_role(self._status)
        return None if role is None else self.side_of(role)

    @property
    def human_won(self):
        return self.winner == HUMAN

    @property
    def status_message(self):
        if self.is_over:
            return "You win." if self.human_won else "Computer wins."
        return "Your turn" if self._turn == HUMAN else "Computer is thinking..."

    def legal_moves(self):
        if self.is_over:
            return []
        return [(r, c, s) for r, c in self._board.empty_cells() for s in SYMBOLS]

    def snapshot(self):
        return MatchSnapshot(
            size=self.size,
            cells=self._board.as_tuple(),
            turn=self._turn,
            human_role=self.human_role,
            computer_role=self.computer_role,
            status=self._status,
            winning_line=self._winning_line,
            message=self.status_message,
            move_count=self._board.move_count,
            last_move=self.last_move,
        )

    # --- transitions -----------------------------------------------------------

    def apply_move(self, mover, row, col, symbol):
        """
        Apply `mover`'s move. Validation happens before any write, so a rejected
        move leaves the match untouched.
        """
        referee.check_move(self, mover, row, col, symbol)
        self._board.place(row, col, symbol)
        if not self._settle():
            self._turn = other_side(self._turn)
        return self

    def _settle(self):
        """Set a terminal status if the board has a five-line or is full; True if terminal."""
        found = win_detector.find_winning_line(self._board)
        if found is not None:
            _, line = found
            self._status = ORDER_WINS
            self._winning_line = line
        elif self._board.is_full():
            self._status = CHAOS_WINS
        return self.is_over

    def declare_board_exhausted(self):
        """Chaos wins when no empty cell is left for the side to move."""
        if self.is_over:
            raise GameOverError(f"match is over ({self._status})")
        if not self._board.is_full():
            raise IllegalMoveError("board still has empty cells")
        self._status = CHAOS_WINS
        return self
