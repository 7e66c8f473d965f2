"""Breadth-first spreading over a grid."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

EMPTY = 0
FRESH = 1
ROTTEN = 2

_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Each minute, every fresh orange next to a rotten one (up, down, left,
    right) becomes rotten. The grid is not modified.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")

    rows, cols = len(grid), len(grid[0])
    rotten: set[tuple[int, int]] = set()
    queue: deque[tuple[int, int, int]] = deque()
    fresh = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == FRESH:
                fresh += 1
            elif cell == ROTTEN:
                rotten.add((r, c))
                queue.append((r, c, 0))

    elapsed = 0
    while queue:
        r, c, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and grid[nr][nc] == FRESH
                and (nr, nc) not in rotten
            ):
                rotten.add((nr, nc))
                queue.append((nr, nc, minute + 1))
                fresh -= 1

    return -1 if fresh else elapsed