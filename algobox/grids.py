"""Searches over rectangular grids and adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))

#: Distance reported by :func:`update_matrix` for a cell no zero can reach.
UNREACHABLE = 100_000


def _neighbours(r: int, c: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        rr, cc = r + dr, c + dc
        if 0 <= rr < rows and 0 <= cc < cols:
            yield rr, cc


def shortest_bridge(grid: Sequence[Sequence[int]]) -> int:
    """Fewest water cells to fill so that two islands of 1s become joined.

    The input is left unchanged. Raises ValueError when the grid does not
    hold two separate islands.
    """
    if not grid:
        return 0
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])

    seed = next(
        ((r, c) for r in range(rows) for c in range(cols) if cells[r][c]), None
    )
    if seed is None:
        raise ValueError("grid holds no island")

    # Mark the first island with 2 and start the search from all of it.
    queue: deque[tuple[int, int]] = deque()
    stack = [seed]
    cells[seed[0]][seed[1]] = 2
    while stack:
        r, c = stack.pop()
        queue.append((r, c))
        for rr, cc in _neighbours(r, c, rows, cols):
            if cells[rr][cc] == 1:
                cells[rr][cc] = 2
                stack.append((rr, cc))

    distance = 0
    while queue:
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for rr, cc in _neighbours(r, c, rows, cols):
                if cells[rr][cc] == 1:
                    return distance
                if cells[rr][cc] == 0:
                    cells[rr][cc] = 2
                    queue.append((rr, cc))
        distance += 1
    raise ValueError("grid holds only one island")


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from each cell to the nearest 0, by two sweeps of dynamic programming.

    Cells that no 0 can reach keep the value :data:`UNREACHABLE`.
    """
    if not mat:
        return []
    rows, cols = len(mat), len(mat[0])
    dp = [[UNREACHABLE if value else 0 for value in row] for row in mat]

    for i in range(rows):
        for j in range(cols):
            if mat[i][j]:
                if i:
                    dp[i][j] = min(dp[i][j], dp[i - 1][j] + 1)
                if j:
                    dp[i][j] = min(dp[i][j], dp[i][j - 1] + 1)

    for i in reversed(range(rows)):
        for j in reversed(range(cols)):
            if mat[i][j]:
                if i != rows - 1:
                    dp[i][j] = min(dp[i][j], dp[i + 1][j] + 1)
                if j != cols - 1:
                    dp[i][j] = min(dp[i][j], dp[i][j + 1] + 1)
    return dp


def update_matrix_bfs(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from each cell to the nearest 0, by a search from every 0 at once.

    Cells that no 0 can reach are reported as 0.
    """
    if not mat:
        return []
    rows, cols = len(mat), len(mat[0])
    distance = [[0] * cols for _ in range(rows)]
    visited = [[not value for value in row] for row in mat]
    queue = deque((r, c) for r in range(rows) for c in range(cols) if not mat[r][c])

    while queue:
        r, c = queue.popleft()
        for rr, cc in _neighbours(r, c, rows, cols):
            if not visited[rr][cc]:
                distance[rr][cc] = distance[r][c] + 1
                visited[rr][cc] = True
                queue.append((rr, cc))
    return distance


def _flood_uphill(
    heights: Sequence[Sequence[int]], seeds: Iterator[tuple[int, int]]
) -> set[tuple[int, int]]:
    rows, cols = len(heights), len(heights[0])
    reached: set[tuple[int, int]] = set()
    stack = list(seeds)
    while stack:
        r, c = stack.pop()
        if (r, c) in reached:
            continue
        reached.add((r, c))
        for rr, cc in _neighbours(r, c, rows, cols):
            if (rr, cc) not in reached and heights[r][c] <= heights[rr][cc]:
                stack.append((rr, cc))
    return reached


def pacific_atlantic(heights: Sequence[Sequence[int]]) -> list[list[int]]:
    """Cells from which water can flow to both the top/left and bottom/right edges.

    Water moves to neighbours of equal or lower height. Cells are returned as
    ``[row, column]`` pairs in row-major order.
    """
    if not heights or not heights[0]:
        return []
    rows, cols = len(heights), len(heights[0])

    def edge(row_fixed: int, col_fixed: int) -> Iterator[tuple[int, int]]:
        yield from ((r, col_fixed) for r in range(rows))
        yield from ((row_fixed, c) for c in range(cols))

    pacific = _flood_uphill(heights, edge(0, 0))
    atlantic = _flood_uphill(heights, edge(rows - 1, cols - 1))
    return [
        [r, c]
        for r in range(rows)
        for c in range(cols)
        if (r, c) in pacific and (r, c) in atlantic
    ]


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in a graph given as an adjacency matrix."""
    size = len(is_connected)
    visited = [False] * size
    groups = 0
    for first in range(size):
        if visited[first]:
            continue
        groups += 1
        stack = [first]
        while stack:
            u = stack.pop()
            if visited[u]:
                continue
            visited[u] = True
            stack.extend(
                v for v, linked in enumerate(is_connected[u]) if linked and not visited[v]
            )
    return groups


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Number of cells in the largest 4-connected island of non-zero cells."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    best = 0
    for r in range(rows):
        for c in range(cols):
            if not grid[r][c] or (r, c) in visited:
                continue
            area = 0
            stack = [(r, c)]
            while stack:
                cell = stack.pop()
                if cell in visited:
                    continue
                visited.add(cell)
                area += 1
                stack.extend(
                    (rr, cc)
                    for rr, cc in _neighbours(*cell, rows, cols)
                    if grid[rr][cc] and (rr, cc) not in visited
                )
            best = max(best, area)
    return best


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, each used once."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    used: set[tuple[int, int]] = set()

    def search(index: int, r: int, c: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if (r, c) in used or board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(search(index + 1, r + dr, c + dc) for dr, dc in _STEPS)
        used.discard((r, c))
        return found

    return any(search(0, r, c) for r in range(rows) for c in range(cols))