"""Ordering of directed graphs: topological sorts, cycle checks, safe states."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Build adjacency lists from ``(u, v)`` pairs, each meaning ``u -> v``."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adj: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v, *_ in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is out of range")
        adj[u].append(v)
    return adj


def _kahn(adj: Sequence[Sequence[int]], candidates: Iterable[int] | None = None) -> list[int]:
    """Kahn's algorithm; returns the vertices it could order.

    Vertices caught in a cycle, or depending on one, are left out.
    ``candidates`` restricts which zero-indegree vertices start the queue.
    """
    indegree = [0] * len(adj)
    for targets in adj:
        for target in targets:
            indegree[target] += 1
    starts = range(len(adj)) if candidates is None else candidates
    queue = deque(node for node in starts if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adj[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def course_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order to take every course, or ``[]`` if the prerequisites form a cycle.

    Each prerequisite ``[a, b]`` means course ``b`` must come before ``a``.
    """
    adj = _adjacency(num_courses, ((b, a) for a, b, *_ in prerequisites))
    order = _kahn(adj)
    return order if len(order) == num_courses else []


def has_cycle(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether the directed graph holds a cycle."""
    adj = _adjacency(vertex_count, edges)
    return len(_kahn(adj)) != vertex_count


def can_finish_all(task_count: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether every task can be scheduled given ``(u, v)`` dependency edges."""
    adj = _adjacency(task_count, prerequisites)
    return len(_kahn(adj)) == task_count


def topological_sort(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Depth-first topological order: reverse of the order in which vertices finish."""
    adj = _adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    finished: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Sorted list of nodes from which every path ends at a terminal node."""
    n = len(graph)
    reversed_adj: list[list[int]] = [[] for _ in range(n)]
    for node, targets in enumerate(graph):
        for target in targets:
            if not 0 <= target < n:
                raise IndexError(f"vertex {target} is out of range")
            reversed_adj[target].append(node)
    return sorted(_kahn(reversed_adj))


def alien_order(words: Sequence[str]) -> str:
    """Letter order of an alien alphabet implied by a sorted dictionary.

    Returns ``""`` when the dictionary is inconsistent: a word followed by its
    own proper prefix, or contradictory letter precedences.
    """
    letters = string.ascii_lowercase
    index = {ch: i for i, ch in enumerate(letters)}
    present = [False] * len(letters)
    for word in words:
        for ch in word:
            if ch not in index:
                raise ValueError(f"unsupported character {ch!r}")
            present[index[ch]] = True

    adj: list[list[int]] = [[] for _ in letters]
    for first, second in zip(words, words[1:]):
        if len(first) > len(second) and first.startswith(second):
            return ""
        for a, b in zip(first, second):
            if a != b:
                adj[index[a]].append(index[b])
                break

    order = _kahn(adj, (i for i, seen in enumerate(present) if seen))
    if len(order) != sum(present):
        return ""
    return "".join(letters[i] for i in order)