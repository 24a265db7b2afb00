"""Unweighted graph traversal: BFS, DFS, components, bipartiteness, distances."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class Graph:
    """Undirected graph over vertices ``0..n-1`` stored as adjacency lists."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adj[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first (preorder) order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self._adj[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adj[neighbour]))
                    break
            else:
                stack.pop()
        return order


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix of 0/1 values."""
    n = len(is_connected)
    adj: list[list[int]] = [[] for _ in range(n)]
    for i, row in enumerate(is_connected):
        for j, cell in enumerate(row):
            if cell == 1:
                adj[i].append(j)
                adj[j].append(i)

    visited = [False] * n
    count = 0
    for root in range(n):
        if visited[root]:
            continue
        count += 1
        visited[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in adj[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return count


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether the graph's vertices can be two-coloured."""
    colour: dict[int, int] = {}
    for root in range(len(graph)):
        if root in colour:
            continue
        colour[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if neighbour not in colour:
                    colour[neighbour] = 1 - colour[node]
                    stack.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def unit_shortest_distances(adj: Sequence[Sequence[int]], src: int) -> list[int]:
    """Edge-count distances from ``src``; unreachable vertices get -1."""
    if not 0 <= src < len(adj):
        raise IndexError(f"source {src} is out of range")
    distance: list[int | None] = [None] * len(adj)
    distance[src] = 0
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if distance[neighbour] is None:
                distance[neighbour] = distance[node] + 1
                queue.append(neighbour)
    return [-1 if d is None else d for d in distance]