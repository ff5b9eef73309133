"""Graph and grid search algorithms."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Sequence
from string import ascii_lowercase

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[int]:
    """An order in which all courses can be taken, or ``[]`` if none exists.

    Each prerequisite is a pair ``(course, required)``.
    """
    followers: list[list[int]] = [[] for _ in range(num_courses)]
    pending = [0] * num_courses
    for course, required in prerequisites:
        followers[required].append(course)
        pending[course] += 1
    queue = deque(course for course, count in enumerate(pending) if count == 0)
    order: list[int] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for follower in followers[current]:
            pending[follower] -= 1
            if pending[follower] == 0:
                queue.append(follower)
    return order if len(order) == num_courses else []


def _board_cells(size: int) -> list[tuple[int, int]]:
    cells = [(-1, -1)]  # squares are numbered from 1
    columns = list(range(size))
    for row in range(size - 1, -1, -1):
        cells.extend((row, column) for column in columns)
        columns.reverse()
    return cells


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int | None:
    """Fewest die rolls from square 1 to the last square, or ``None`` if unreachable.

    Squares are numbered boustrophedon from the bottom-left; a cell holding
    ``-1`` is plain, any other value is the square a snake or ladder leads to.
    """
    size = len(board)
    last = size * size
    cells = _board_cells(size)
    moves = {1: 0}
    queue = deque([1])
    while queue:
        current = queue.popleft()
        for square in range(current + 1, min(current + 6, last) + 1):
            row, column = cells[square]
            target = board[row][column]
            destination = square if target == -1 else target
            if destination not in moves:
                moves[destination] = moves[current] + 1
                queue.append(destination)
    return moves.get(last)


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int | None:
    """Steps from ``entrance`` to the nearest open border cell other than itself.

    Open cells are ``"."``; returns ``None`` when no exit can be reached.
    """
    rows, cols = len(maze), len(maze[0])
    start = (entrance[0], entrance[1])
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        (i, j), distance = queue.popleft()
        if (i, j) != start and (i in (0, rows - 1) or j in (0, cols - 1)):
            return distance
        for di, dj in _STEPS:
            cell = (i + di, j + dj)
            ni, nj = cell
            if 0 <= ni < rows and 0 <= nj < cols and cell not in seen and maze[ni][nj] == ".":
                seen.add(cell)
                queue.append((cell, distance + 1))
    return None


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int | None:
    """Minutes until no fresh orange (1) remains next to rot (2), or ``None`` if some never rot.

    The grid is left unchanged.
    """
    rotten = deque(
        (i, j, 0) for i, row in enumerate(grid) for j, value in enumerate(row) if value == 2
    )
    fresh = {(i, j) for i, row in enumerate(grid) for j, value in enumerate(row) if value == 1}
    elapsed = 0
    while rotten:
        i, j, minute = rotten.popleft()
        elapsed = max(elapsed, minute)
        for di, dj in _STEPS:
            cell = (i + di, j + dj)
            if cell in fresh:
                fresh.remove(cell)
                rotten.append((*cell, minute + 1))
    return None if fresh else elapsed


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Whether every room can be entered starting from room 0 with the keys found."""
    if not rooms:
        return True
    visited = {0}
    stack = [0]
    while stack:
        for key in rooms[stack.pop()]:
            if key not in visited:
                visited.add(key)
                stack.append(key)
    return len(visited) == len(rooms)


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    visited: set[int] = set()
    groups = 0
    for start in range(len(is_connected)):
        if start in visited:
            continue
        groups += 1
        visited.add(start)
        stack = [start]
        while stack:
            city = stack.pop()
            for other, linked in enumerate(is_connected[city]):
                if linked == 1 and other not in visited:
                    visited.add(other)
                    stack.append(other)
    return groups


def _ratio(graph: dict[str, dict[str, float]], start: str, end: str) -> float | None:
    if start not in graph or end not in graph:
        return None
    if start == end:
        return 1.0
    seen = {start}
    queue = deque([(start, 1.0)])
    while queue:
        node, product = queue.popleft()
        if node == end:
            return product
        for neighbour, weight in graph[node].items():
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append((neighbour, product * weight))
    return None


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Sequence[Sequence[str]],
) -> list[float | None]:
    """Answer ``a / b`` queries from known ratios; ``None`` where it cannot be derived."""
    graph: dict[str, dict[str, float]] = defaultdict(dict)
    for (numerator, denominator), value in zip(equations, values, strict=True):
        graph[numerator][denominator] = value
        graph[denominator][numerator] = 1.0 / value
    return [_ratio(graph, start, end) for start, end in queries]


def min_reorder(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Fewest one-way roads to reverse so every city can reach city 0."""
    roads: dict[int, list[tuple[int, bool]]] = defaultdict(list)
    for origin, target in connections:
        if not (0 <= origin < n and 0 <= target < n):
            raise ValueError(f"road {origin} -> {target} leaves the {n} cities")
        roads[origin].append((target, True))
        roads[target].append((origin, False))
    visited = {0}
    stack = [0]
    changes = 0
    while stack:
        city = stack.pop()
        for other, outward in roads[city]:
            if other not in visited:
                visited.add(other)
                changes += outward
                stack.append(other)
    return changes


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Words in the shortest one-letter-at-a-time chain to ``end_word``, or 0."""
    remaining = set(word_list)
    remaining.discard(begin_word)
    queue = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == end_word:
            return steps
        for i, original in enumerate(word):
            for letter in ascii_lowercase:
                if letter == original:
                    continue
                candidate = word[:i] + letter + word[i + 1 :]
                if candidate in remaining:
                    remaining.remove(candidate)
                    queue.append((candidate, steps + 1))
    return 0


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells, each used once."""
    if not word:
        return True
    available = Counter(ch for row in board for ch in row)
    if any(available[ch] < needed for ch, needed in Counter(word).items()):
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def trace(i: int, j: int, k: int) -> bool:
        if k == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols) or (i, j) in used or board[i][j] != word[k]:
            return False
        used.add((i, j))
        found = any(trace(i + di, j + dj, k + 1) for di, dj in _STEPS)
        used.discard((i, j))
        return found

    return any(trace(i, j, 0) for i in range(rows) for j in range(cols))