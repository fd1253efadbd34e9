"""Graph problems: traversal of road networks, mazes, equations and grids."""

from __future__ import annotations

from collections.abc import Sequence

_WALL = "+"
_EMPTY = 0
_FRESH = 1
_ROTTEN = 2
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def min_reorder(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Fewest one-way roads to reverse so every city can reach city 0.

    ``connections`` holds directed roads ``[from, to]`` forming a tree over
    cities ``0`` to ``n - 1``. Raises ValueError when ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError("there must be at least one city")
    roads: list[list[tuple[int, bool]]] = [[] for _ in range(n)]
    for start, end in connections:
        roads[start].append((end, True))
        roads[end].append((start, False))

    visited = {0}
    pending = [0]
    changes = 0
    while pending:
        city = pending.pop()
        for neighbour, points_away in roads[city]:
            if neighbour in visited:
                continue
            visited.add(neighbour)
            changes += points_away
            pending.append(neighbour)
    return changes


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Steps from ``entrance`` to the closest open border cell, or -1.

    Cells marked ``+`` are walls. The entrance itself never counts as an
    exit. The maze is not modified.
    """
    rows = len(maze)
    cols = len(maze[0]) if rows else 0
    start = (entrance[0], entrance[1])
    seen = {start}
    frontier = [start]
    steps = 0
    while frontier:
        following: list[tuple[int, int]] = []
        for row, col in frontier:
            on_border = row in (0, rows - 1) or col in (0, cols - 1)
            if on_border and (row, col) != start:
                return steps
            for d_row, d_col in _STEPS:
                cell = (row + d_row, col + d_col)
                if cell in seen:
                    continue
                if 0 <= cell[0] < rows and 0 <= cell[1] < cols and maze[cell[0]][cell[1]] != _WALL:
                    seen.add(cell)
                    following.append(cell)
        frontier = following
        steps += 1
    return -1


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Sequence[Sequence[str]],
) -> list[float]:
    """Answer each ``[a, b]`` query with ``a / b`` derived from the equations.

    Each equation ``[a, b]`` with value ``v`` states ``a / b == v``. A query
    that cannot be answered, including one naming an unknown variable,
    gives -1.0.
    """
    graph: dict[str, list[tuple[str, float]]] = {}
    for (numerator, denominator), value in zip(equations, values, strict=True):
        graph.setdefault(numerator, []).append((denominator, value))
        graph.setdefault(denominator, []).append((numerator, 1 / value))

    def solve(begin: str, end: str, visited: set[str]) -> float:
        if begin not in graph:
            return -1.0
        if begin == end:
            return 1.0
        visited.add(begin)
        for node, weight in graph[begin]:
            if node == end:
                return weight
            if node in visited:
                continue
            rest = solve(node, end, visited)
            if rest != -1.0:
                return weight * rest
        return -1.0

    return [solve(begin, end, set()) for begin, end in queries]


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of provinces: groups of cities joined directly or indirectly."""
    parent = list(range(len(is_connected)))

    def find(city: int) -> int:
        root = city
        while parent[root] != root:
            root = parent[root]
        while parent[city] != root:
            parent[city], city = root, parent[city]
        return root

    for x, row in enumerate(is_connected):
        for y, linked in enumerate(row):
            if y > x and linked == 1:
                parent[find(y)] = find(x)
    return len({find(city) for city in range(len(parent))})


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Whether starting in room 0 the keys found open every room.

    Raises ValueError when there are no rooms.
    """
    if not rooms:
        raise ValueError("there must be at least one room")
    opened = {0}
    pending = [0]
    while pending:
        for key in rooms[pending.pop()]:
            if key not in opened:
                opened.add(key)
                pending.append(key)
    return len(opened) == len(rooms)


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange remains, or -1 if some never rot.

    ``0`` is an empty cell, ``1`` a fresh orange and ``2`` a rotten one;
    each minute rot spreads to adjacent fresh oranges. The grid is not
    modified.
    """
    cells = [list(row) for row in grid]
    rows = len(cells)
    frontier = [
        (r, c) for r, row in enumerate(cells) for c, value in enumerate(row) if value == _ROTTEN
    ]
    minutes = 0
    while True:
        following: list[tuple[int, int]] = []
        for row, col in frontier:
            for d_row, d_col in _STEPS:
                r, c = row + d_row, col + d_col
                if 0 <= r < rows and 0 <= c < len(cells[r]) and cells[r][c] == _FRESH:
                    cells[r][c] = _ROTTEN
                    following.append((r, c))
        if not following:
            break
        minutes += 1
        frontier = following
    if any(value == _FRESH for row in cells for value in row):
        return -1
    return minutes