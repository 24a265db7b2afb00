"""Single-source and all-pairs shortest paths on weighted and implicit graphs."""

from __future__ import annotations

import heapq
import string
from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence

from graphkit.ordering import topological_sort

UNREACHABLE = 10**8
"""Distance used by :func:`bellman_ford` and :func:`floyd_warshall` for "no path"."""

MOD = 10**9 + 7
"""Modulus applied to path counts in :func:`count_shortest_paths`."""

_RESIDUES = 100_000


class NegativeCycleError(ValueError):
    """Raised when a reachable negative-weight cycle makes distances undefined."""


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"vertex {vertex} is out of range")


def bellman_ford(
    vertex_count: int, edges: Sequence[Sequence[int]], src: int
) -> list[int]:
    """Distances from ``src`` over directed ``(u, v, w)`` edges.

    Unreachable vertices keep :data:`UNREACHABLE`. Raises
    :class:`NegativeCycleError` if a negative cycle is reachable from ``src``.
    """
    _check_vertex(src, vertex_count)
    for u, v, _w in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
    distance = [UNREACHABLE] * vertex_count
    distance[src] = 0
    for _ in range(vertex_count - 1):
        for u, v, w in edges:
            if distance[u] != UNREACHABLE and distance[u] + w < distance[v]:
                distance[v] = distance[u] + w
    for u, v, w in edges:
        if distance[u] != UNREACHABLE and distance[u] + w < distance[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")
    return distance


def cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    _check_vertex(src, n)
    _check_vertex(dst, n)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for origin, target, price in flights:
        _check_vertex(origin, n)
        _check_vertex(target, n)
        adj[origin].append((target, price))

    best: list[int | None] = [None] * n
    best[src] = 0
    queue = deque([(0, src, 0)])
    while queue:
        hops, node, cost = queue.popleft()
        if hops > k:
            continue
        for target, price in adj[node]:
            total = cost + price
            current = best[target]
            if current is None or total < current:
                best[target] = total
                queue.append((hops + 1, target, total))
    result = best[dst]
    return -1 if result is None else result


def floyd_warshall(dist: MutableSequence[MutableSequence[int]]) -> None:
    """Replace ``dist`` in place with all-pairs shortest distances.

    Entries equal to :data:`UNREACHABLE` mean "no edge" and are never used
    as intermediate hops.
    """
    n = len(dist)
    for via in range(n):
        via_row = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == UNREACHABLE:
                continue
            for j in range(n):
                onward = via_row[j]
                if onward == UNREACHABLE:
                    continue
                if to_via + onward < row[j]:
                    row[j] = to_via + onward


def minimum_multiplications(arr: Sequence[int], start: int, end: int) -> int:
    """Fewest multiplications by members of ``arr`` (mod 100000) from ``start`` to ``end``.

    Returns -1 if ``end`` cannot be reached.
    """
    if start == end:
        return 0
    steps_to: dict[int, int] = {start: 0}
    queue = deque([(start, 0)])
    while queue:
        node, steps = queue.popleft()
        for factor in arr:
            target = (node * factor) % _RESIDUES
            if target not in steps_to or steps + 1 < steps_to[target]:
                steps_to[target] = steps + 1
                if target == end:
                    return steps + 1
                queue.append((target, steps + 1))
    return -1


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from node ``k`` to reach all nodes ``1..n``, or -1."""
    _check_vertex(k - 1, n)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in times:
        _check_vertex(u - 1, n)
        _check_vertex(v - 1, n)
        adj[u - 1].append((v - 1, w))

    distance: list[int | None] = [None] * n
    distance[k - 1] = 0
    heap = [(0, k - 1)]
    while heap:
        time, node = heapq.heappop(heap)
        if time != distance[node]:
            continue
        for target, delay in adj[node]:
            arrival = time + delay
            current = distance[target]
            if current is None or arrival < current:
                distance[target] = arrival
                heapq.heappush(heap, (arrival, target))
    if any(d is None for d in distance):
        return -1
    return max(distance, default=0)


def count_shortest_paths(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Number of shortest paths from 0 to ``n - 1`` over undirected roads, mod :data:`MOD`."""
    _check_vertex(n - 1, n)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in roads:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adj[u].append((v, w))
        adj[v].append((u, w))

    distance: list[int | None] = [None] * n
    ways = [0] * n
    distance[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist != distance[node]:
            continue
        for target, weight in adj[node]:
            total = dist + weight
            current = distance[target]
            if current is None or total < current:
                distance[target] = total
                ways[target] = ways[node]
                heapq.heappush(heap, (total, target))
            elif total == current:
                ways[target] = (ways[target] + ways[node]) % MOD
    return ways[n - 1] % MOD


def dag_shortest_paths(
    vertex_count: int, edges: Sequence[Sequence[int]]
) -> list[int]:
    """Distances from vertex 0 in a weighted DAG; unreachable vertices get -1."""
    if vertex_count == 0:
        return []
    adj: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adj[u].append((v, w))

    distance: list[int | None] = [None] * vertex_count
    distance[0] = 0
    for node in topological_sort(vertex_count, edges):
        base = distance[node]
        if base is None:
            continue
        for target, weight in adj[node]:
            current = distance[target]
            if current is None or base + weight < current:
                distance[target] = base + weight
    return [-1 if d is None else d for d in distance]


def weighted_shortest_path(
    n: int, edges: Iterable[Sequence[int]]
) -> tuple[int, list[int]] | None:
    """Shortest path from vertex 1 to vertex ``n`` over undirected ``(a, b, w)`` edges.

    Vertices are numbered ``1..n``. Returns ``(distance, path)`` with the path
    running from 1 to ``n``, or ``None`` when ``n`` cannot be reached.
    """
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        for vertex in (a, b):
            if not 1 <= vertex <= n:
                raise IndexError(f"vertex {vertex} is out of range")
        adj[a].append((b, w))
        adj[b].append((a, w))

    distance: list[int | None] = [None] * (n + 1)
    parent = list(range(n + 1))
    distance[1] = 0
    heap = [(0, 1)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist != distance[node]:
            continue
        for target, weight in adj[node]:
            total = dist + weight
            current = distance[target]
            if current is None or total < current:
                distance[target] = total
                parent[target] = node
                heapq.heappush(heap, (total, target))

    total = distance[n]
    if total is None:
        return None
    path = [n]
    while parent[path[-1]] != path[-1]:
        path.append(parent[path[-1]])
    if path[-1] != 1:
        path.append(1)
    path.reverse()
    return total, path


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Words in the shortest one-letter-change chain from ``begin_word`` to ``end_word``.

    Every intermediate word must come from ``word_list``. Returns 0 if no
    chain exists.
    """
    remaining = set(word_list)
    remaining.discard(begin_word)
    queue = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if begin_word and word == end_word:
            return steps
        for i in range(len(begin_word)):
            prefix, suffix = word[:i], word[i + 1:]
            for letter in string.ascii_lowercase:
                candidate = prefix + letter + suffix
                if candidate in remaining:
                    remaining.remove(candidate)
                    queue.append((candidate, steps + 1))
    return 0