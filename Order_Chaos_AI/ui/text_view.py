"""Plain-text board renderer."""

from ..Board import symbol_char


def render_board(snapshot):
    """Grid with row/column indices; winning-line cells are bracketed."""
    highlight = set(snapshot.winning_line or ())
    header = "    " + "".join(f"{c:^3}" for c in range(snapshot.size))
    lines = [header]
    for r, row in enumerate(snapshot.cells):
        cells = []
        for c, value in enumerate(row):
            ch = symbol_char(value)
            cells.append(f"[{ch}]" if (r, c) in highlight else f" {ch} ")
        lines.append(f"{r:>3} " + "".join(cells))
    return "\n".join(lines)


class TextView:
    def __init__(self, out=print):
        self.out = out

    def render(self, snapshot, last_move=None):
        self.out("")
        self.out(render_board(snapshot))
        self.out(f"You: {snapshot.human_role} | Computer: {snapshot.computer_role}")
        if last_move is not None:
            self.out(f"Last move: {last_move}")
        self.out(snapshot.message)
