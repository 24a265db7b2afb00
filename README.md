# graphkit

A small library of classic graph algorithms in plain Python. It has no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `graphkit.disjoint_set`

- `DisjointSet(n)`: union-find over the integers `0..n` inclusive, with path
  compression. Methods: `find(node)`, `union_by_rank(u, v)`,
  `union_by_size(u, v)`, `connected(u, v)` and `set_size(node)` (the size
  kept by `union_by_size`). `len()` gives the number of elements. A node out
  of range raises `IndexError`.
- `merge_accounts(accounts)`: each account is `[name, mail, ...]`. Accounts
  that share a mail are merged; each result is the name followed by its
  distinct mails in sorted order.

### `graphkit.traversal`

- `Graph(n)`: undirected graph over vertices `0..n-1`. `add_edge(u, v)`,
  `bfs(start)` and `dfs(start)`; the searches return the list of reachable
  vertices in visit order.
- `count_provinces(is_connected)`: number of connected groups in a 0/1
  adjacency matrix.
- `is_bipartite(graph)`: whether an adjacency-list graph can be two-coloured.
- `unit_shortest_distances(adj, src)`: edge-count distances from `src`, with
  `-1` for unreachable vertices.

### `graphkit.spanning`

- `spanning_tree_weight(vertex_count, adj)`: total weight of a minimum
  spanning tree grown from vertex 0 by Prim's algorithm. `adj[node]` lists
  `(neighbour, weight)` pairs; only the component of vertex 0 is spanned.

### `graphkit.ordering`

- `topological_sort(vertex_count, edges)`: depth-first topological order.
- `course_order(num_courses, prerequisites)`: a valid course order, where
  `[a, b]` means `b` comes before `a`; `[]` if there is a cycle.
- `has_cycle(vertex_count, edges)` and `can_finish_all(task_count,
  prerequisites)`: cycle checks by Kahn's algorithm.
- `eventual_safe_nodes(graph)`: sorted nodes from which every path ends at a
  terminal node.
- `alien_order(words)`: letter order implied by a sorted dictionary of
  lowercase words, or `""` when the dictionary is inconsistent. Other
  characters raise `ValueError`.

### `graphkit.grid`

- `nearest_zero_distances(mat)`: distance from each cell to the nearest 0.
- `flood_fill(image, sr, sc, color)`: returns a repainted copy of the image.
- `count_enclaves(grid)`: land cells (1) that cannot reach the edge.
- `oranges_rotting(grid)`: minutes until no fresh orange is left, or `-1`.
- `capture_surrounded(board)`: turns enclosed `'O'` regions into `'X'` in
  place.
- `minimum_effort_path(heights)`: smallest possible largest height step from
  the top-left to the bottom-right cell.

### `graphkit.shortest_paths`

- `bellman_ford(vertex_count, edges, src)`: distances over directed
  `(u, v, w)` edges. Unreachable vertices keep `UNREACHABLE` (`10**8`); a
  reachable negative cycle raises `NegativeCycleError` (a `ValueError`).
- `floyd_warshall(dist)`: replaces a distance matrix in place with all-pairs
  shortest distances; `UNREACHABLE` entries mean "no edge".
- `network_delay_time(times, n, k)`: time for a signal from node `k` to reach
  all nodes `1..n`, or `-1`.
- `cheapest_price(n, flights, src, dst, k)`: cheapest fare with at most `k`
  stops, or `-1`.
- `count_shortest_paths(n, roads)`: number of shortest paths from `0` to
  `n - 1`, modulo `MOD` (`10**9 + 7`).
- `dag_shortest_paths(vertex_count, edges)`: distances from vertex 0 in a
  weighted DAG, `-1` for unreachable vertices.
- `weighted_shortest_path(n, edges)`: shortest path from vertex 1 to `n`
  (vertices numbered `1..n`) as `(distance, path)`, or `None` if `n` is
  unreachable.
- `minimum_multiplications(arr, start, end)`: fewest multiplications by
  members of `arr`, modulo 100000, to get from `start` to `end`, or `-1`.
- `ladder_length(begin_word, end_word, word_list)`: number of words in the
  shortest one-letter-change chain, or `0`.

## Example

```python
from graphkit.traversal import Graph
from graphkit.disjoint_set import DisjointSet
from graphkit.shortest_paths import network_delay_time

g = Graph(7)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)]:
    g.add_edge(u, v)
print(g.bfs(0))  # [0, 1, 2, 3, 4, 5, 6]

ds = DisjointSet(7)
ds.union_by_rank(1, 2)
ds.union_by_rank(2, 3)
print(ds.connected(1, 3))  # True

print(network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2))  # 2
```

## What it does not do

graphkit is a library only. It has no command-line program and does not read
graphs from files or standard input. Build the inputs in Python and call the
functions directly.