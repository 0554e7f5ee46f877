"""Game loop and turn management for Order & Chaos."""

import random
import time

from .Board import symbol_char
from .Match import MatchState
from .Player import ComputerPlayer, HumanPlayer
from .engine.errors import GameOverError, IllegalMoveError
from .engine.roles import COMPUTER, HUMAN


class OrderChaosGame:
    def __init__(
        self,
        board_size=6,
        human_player=None,
        computer_player=None,
        logger=print,
        renderer=None,
        rng=None,
        think_delay=0.0,
        match=None,
    ):
        self.rng = rng or random.Random()
        self.match = match if match is not None else MatchState.initialize(board_size, rng=self.rng)
        self.players = {
            HUMAN: human_player or HumanPlayer(),
            COMPUTER: computer_player or ComputerPlayer(rng=self.rng),
        }
        self.logger = logger
        self.renderer = renderer
        self.think_delay = think_delay

    @property
    def last_move(self):
        return self.match.last_move

    def reset(self, board_size=None):
        self.match.reset(size=board_size, rng=self.rng)
        self.logger(
            f"New match {self.match.size}x{self.match.size}: you are {self.match.human_role}, "
            f"computer is {self.match.computer_role}, {self.match.turn} moves first"
        )

    def _render(self):
        if self.renderer:
            snapshot = self.match.snapshot()
            self.renderer(snapshot, snapshot.last_move)

    def play_turn(self):
        """Play one move for whoever owns the turn. Returns the applied move or None."""
        match = self.match
        if match.is_over:
            raise GameOverError(f"match is over ({match.status})")
        side = match.turn
        role = match.role_of(side)
        player = self.players[side]

        if side == COMPUTER:
            if self.think_delay:
                time.sleep(self.think_delay)
            move = player.next_move(match.board_view, role)
            if move is None:
                match.declare_board_exhausted()
                self.logger("No empty cell left for the computer")
                return None
            match.apply_move(side, *move)
        else:
            while True:
                try:
                    move = player.next_move(match.board, role)
                    match.apply_move(side, *move)
                    break
                except (IllegalMoveError, ValueError) as exc:
                    self.logger(f"Rejected move: {exc}")

        row, col, symbol = move
        self.logger(f"Move {match.board_view.move_count}: {side} ({role}) {symbol_char(symbol)} at ({row}, {col})")
        return move

    def play(self):
        """Run the match to completion. Returns the final status."""
        while not self.match.is_over:
            self._render()
            self.play_turn()

        self._render()
        match = self.match
        if match.winning_line:
            self.logger(f"Winner: Order, line {list(match.winning_line)}")
        elif match.winner is not None:
            self.logger("Winner: Chaos (board full)")
        self.logger(match.status_message)
        return match.status
