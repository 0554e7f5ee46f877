"""Board state container for Order & Chaos (N x N grid of EMPTY / X / O)."""

from .engine.errors import InvalidSizeError, OutOfBoundsError

EMPTY = 0
X = 1
O = -1

# Scan order for symbols everywhere in the engine: X before O.
SYMBOLS = (X, O)

MIN_SIZE = 5

_CHARS = {EMPTY: ".", X: "X", O: "O"}


def symbol_char(value):
    return _CHARS[value]


def parse_symbol(text):
    """Parse 'X' / 'O' (case-insensitive) into a symbol constant."""
    key = str(text).strip().upper()
    if key == "X":
        return X
    if key == "O":
        return O
    raise ValueError(f"unknown symbol {text!r}; expected X or O")


class Board:
    def __init__(self, size=6):
        if not isinstance(size, int) or size < MIN_SIZE:
            raise InvalidSizeError(f"board size must be an integer >= {MIN_SIZE}, got {size!r}")
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"({row}, {col}) is outside a {self.size}x{self.size} board")

    def get(self, row, col):
        self._check_bounds(row, col)
        return self.cells[row][col]

    def set(self, row, col, value):
        """Raw cell write; does not touch move history."""
        self._check_bounds(row, col)
        if value not in (EMPTY, X, O):
            raise ValueError(f"illegal cell value {value!r}")
        self.cells[row][col] = value

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def place(self, row, col, symbol):
        """Place a symbol permanently; raise if out of bounds, occupied or EMPTY."""
        if symbol not in SYMBOLS:
            raise ValueError("symbol must be X or O")
        self._check_bounds(row, col)
        if self.cells[row][col] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[row][col] = symbol
        self.move_count += 1
        self.history.append((row, col, symbol))

    def empty_cells(self):
        """Empty coordinates in row-major order."""
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] == EMPTY]

    def is_full(self):
        return all(cell != EMPTY for row in self.cells for cell in row)

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def as_tuple(self):
        return tuple(tuple(row) for row in self.cells)

    def __str__(self):
        return "\n".join(" ".join(symbol_char(v) for v in row) for row in self.cells)
