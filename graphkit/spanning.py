"""Minimum spanning tree weight by Prim's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def spanning_tree_weight(
    vertex_count: int, adj: Sequence[Sequence[Sequence[int]]]
) -> int:
    """Total weight of a minimum spanning tree grown from vertex 0.

    ``adj[node]`` lists ``(neighbour, weight)`` pairs. Only the component
    holding vertex 0 is spanned.
    """
    if vertex_count <= 0:
        return 0
    visited = [False] * vertex_count
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight, *_ in adj[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total