"""Classic graph algorithms: disjoint sets, traversal, spanning trees, ordering, grids and shortest paths."""

__version__ = "0.1.0"
__all__ = ["disjoint_set", "traversal", "spanning", "ordering", "grid", "shortest_paths"]