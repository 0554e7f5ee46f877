"""Error types raised by the Order & Chaos engine."""


class OrderChaosError(Exception):
    """Base class for engine errors."""


class InvalidSizeError(OrderChaosError, ValueError):
    """Board size too small to hold a five-line."""


class OutOfBoundsError(OrderChaosError, IndexError):
    """Coordinate outside [0, size)."""


class IllegalMoveError(OrderChaosError, ValueError):
    """Move rejected: occupied cell, wrong turn, bad symbol, or off the board."""


class GameOverError(IllegalMoveError):
    """Mutating call after the match reached a terminal status."""
