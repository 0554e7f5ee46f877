"""Five-in-a-row detection with a fixed, reproducible scan order."""

from contextlib import contextmanager
from typing import NamedTuple, Optional, Tuple

from ..Board import Board, EMPTY, SYMBOLS

LINE_LENGTH = 5

Coord = Tuple[int, int]


class WinResult(NamedTuple):
    found: bool
    line: Tuple[Coord, ...] = ()


NO_WIN = WinResult(False, ())


@contextmanager
def simulate(board: Board, row: int, col: int, symbol: int):
    """Write `symbol` at (row, col) for the duration of the block, then restore."""
    previous = board.get(row, col)
    board.set(row, col, symbol)
    try:
        yield board
    finally:
        board.set(row, col, previous)


def _window(cells, symbol, coords) -> Optional[Tuple[Coord, ...]]:
    for r, c in coords:
        if cells[r][c] != symbol:
            return None
    return tuple(coords)


def detect(board: Board, symbol: int) -> WinResult:
    """
    Return the first five-line of `symbol`, scanning rows, columns,
    descending diagonals, then ascending diagonals.
    """
    if symbol == EMPTY:
        return NO_WIN
    cells = board.cells
    size = board.size
    last = size - LINE_LENGTH
    steps = range(LINE_LENGTH)

    # Rows
    for r in range(size):
        for c in range(last + 1):
            line = _window(cells, symbol, [(r, c + k) for k in steps])
            if line:
                return WinResult(True, line)

    # Columns
    for c in range(size):
        for r in range(last + 1):
            line = _window(cells, symbol, [(r + k, c) for k in steps])
            if line:
                return WinResult(True, line)

    # Descending diagonals, top-left cell first
    for r in range(last + 1):
        for c in range(last + 1):
            line = _window(cells, symbol, [(r + k, c + k) for k in steps])
            if line:
                return WinResult(True, line)

    # Ascending diagonals, bottom-left cell first
    for r in range(LINE_LENGTH - 1, size):
        for c in range(last + 1):
            line = _window(cells, symbol, [(r - k, c + k) for k in steps])
            if line:
                return WinResult(True, line)

    return NO_WIN


def has_five_in_a_row(board: Board, symbol: int) -> bool:
    return detect(board, symbol).found


def any_five_in_a_row(board: Board) -> bool:
    """True if either symbol forms a five-line (the Order victory condition)."""
    return any(has_five_in_a_row(board, symbol) for symbol in SYMBOLS)


def find_winning_line(board: Board):
    """Return (symbol, line) for the first symbol with a five-line, X checked before O."""
    for symbol in SYMBOLS:
        result = detect(board, symbol)
        if result.found:
            return symbol, result.line
    return None
