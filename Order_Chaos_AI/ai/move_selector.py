"""Candidate ranking for the positional fallback (closest-to-centre, top-N)."""

FALLBACK_CANDIDATES = 3


def center_distance(size, row, col):
    """Manhattan distance from (row, col) to the point (size/2, size/2)."""
    center = size / 2
    return abs(row - center) + abs(col - center)


def rank_by_center(board, cells=None):
    """
    Sort cells (default: every empty cell, row-major) by distance to the centre.
    The sort is stable, so equal distances keep their row-major order.
    """
    if cells is None:
        cells = board.empty_cells()
    return sorted(cells, key=lambda rc: center_distance(board.size, rc[0], rc[1]))


def closest_to_center(board, limit=FALLBACK_CANDIDATES):
    return rank_by_center(board)[:limit]
