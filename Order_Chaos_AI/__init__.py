"""Order_Chaos_AI package exports."""

from .Board import Board, EMPTY, X, O
from .Match import MatchState, MatchSnapshot
from .OrderChaosGame import OrderChaosGame
from .Player import Player, HumanPlayer, ComputerPlayer
from .engine.errors import (
    GameOverError,
    IllegalMoveError,
    InvalidSizeError,
    OrderChaosError,
    OutOfBoundsError,
)
from .engine.roles import CHAOS, CHAOS_WINS, COMPUTER, HUMAN, IN_PROGRESS, ORDER, ORDER_WINS

# Subpackages for rule engine, computer opponent, text UI, and helpers
from . import ai, engine, ui, utils

__all__ = [
    "Board",
    "EMPTY",
    "X",
    "O",
    "MatchState",
    "MatchSnapshot",
    "OrderChaosGame",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "OrderChaosError",
    "InvalidSizeError",
    "OutOfBoundsError",
    "IllegalMoveError",
    "GameOverError",
    "ORDER",
    "CHAOS",
    "HUMAN",
    "COMPUTER",
    "IN_PROGRESS",
    "ORDER_WINS",
    "CHAOS_WINS",
    "ai",
    "engine",
    "ui",
    "utils",
]
