"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, MutableSequence, Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """In-bounds cells above, right of, below and left of ``(row, col)``."""
    for d_row, d_col in _STEPS:
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < rows and 0 <= n_col < cols:
            yield n_row, n_col


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def _border(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Every cell on the outer edge of the grid (corners may repeat)."""
    for row in range(rows):
        yield row, 0
        yield row, cols - 1
    for col in range(cols):
        yield 0, col
        yield rows - 1, col


def nearest_zero_distances(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from every cell to the nearest cell holding 0.

    Cells with no zero reachable keep a distance of 0.
    """
    rows, cols = _shape(mat)
    dist = [[0] * cols for _ in range(rows)]
    visited = [[cell == 0 for cell in row] for row in mat]
    queue = deque(
        (r, c, 0) for r, row in enumerate(mat) for c, cell in enumerate(row) if cell == 0
    )
    while queue:
        r, c, steps = queue.popleft()
        dist[r][c] = steps
        for nr, nc in _neighbours(r, c, rows, cols):
            if not visited[nr][nc]:
                visited[nr][nc] = True
                queue.append((nr, nc, steps + 1))
    return dist


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """Copy of ``image`` with the region connected to ``(sr, sc)`` repainted."""
    rows, cols = _shape(image)
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError(f"start cell ({sr}, {sc}) is out of range")
    initial = image[sr][sc]
    result = [list(row) for row in image]
    result[sr][sc] = color
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        for nr, nc in _neighbours(r, c, rows, cols):
            if image[nr][nc] == initial and result[nr][nc] != color:
                result[nr][nc] = color
                stack.append((nr, nc))
    return result


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (1) from which the grid's edge cannot be reached."""
    rows, cols = _shape(grid)
    if not rows or not cols:
        return 0
    visited = [[False] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, c in _border(rows, cols):
        if grid[r][c] == 1 and not visited[r][c]:
            visited[r][c] = True
            queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if grid[nr][nc] == 1 and not visited[nr][nc]:
                visited[nr][nc] = True
                queue.append((nr, nc))
    return sum(
        1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == 1 and not visited[r][c]
    )


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left, or -1 if some never rot.

    Rotten oranges (2) spread to adjacent fresh ones each minute.
    """
    rows, cols = _shape(grid)
    rotten = [[cell == 2 for cell in row] for row in grid]
    fresh = sum(cell == 1 for row in grid for cell in row)
    queue = deque(
        (r, c, 0) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == 2
    )
    elapsed = 0
    converted = 0
    while queue:
        r, c, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for nr, nc in _neighbours(r, c, rows, cols):
            if not rotten[nr][nc] and grid[nr][nc] == 1:
                rotten[nr][nc] = True
                queue.append((nr, nc, minute + 1))
                converted += 1
    return elapsed if converted == fresh else -1


def capture_surrounded(board: MutableSequence[MutableSequence[str]]) -> None:
    """Turn every 'O' region that does not touch the edge into 'X', in place."""
    rows, cols = _shape(board)
    if not rows or not cols:
        return
    safe = [[False] * cols for _ in range(rows)]
    for start in _border(rows, cols):
        r, c = start
        if board[r][c] != "O" or safe[r][c]:
            continue
        safe[r][c] = True
        stack = [start]
        while stack:
            r, c = stack.pop()
            for nr, nc in _neighbours(r, c, rows, cols):
                if board[nr][nc] == "O" and not safe[nr][nc]:
                    safe[nr][nc] = True
                    stack.append((nr, nc))
    for r in range(rows):
        for c in range(cols):
            if board[r][c] == "O" and not safe[r][c]:
                board[r][c] = "X"


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Smallest possible largest height step on a path from top-left to bottom-right."""
    rows, cols = _shape(heights)
    if not rows or not cols:
        return 0
    best = [[None] * cols for _ in range(rows)]
    best[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        effort, r, c = heapq.heappop(heap)
        if (r, c) == (rows - 1, cols - 1):
            return effort
        for nr, nc in _neighbours(r, c, rows, cols):
            step = max(abs(heights[nr][nc] - heights[r][c]), effort)
            current = best[nr][nc]
            if current is None or step < current:
                best[nr][nc] = step
                heapq.heappush(heap, (step, nr, nc))
    return 0