"""Disjoint-set (union-find) structure and account merging built on it."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence


class DisjointSet:
    """Union-find over the integers ``0..n`` inclusive, with path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is out of range")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v`` using rank bookkeeping."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_v] = root_u
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_u] = root_v
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the smaller under the larger."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] > self._size[root_v]:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        else:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]

    def connected(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` belong to the same set."""
        return self.find(u) == self.find(v)

    def set_size(self, node: int) -> int:
        """Number of members in the set of ``node`` as tracked by size unions."""
        return self._size[self.find(node)]


def merge_accounts(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an e-mail address.

    Each account is ``[name, mail, mail, ...]``. The result holds one entry per
    merged account: the name followed by its distinct mails in sorted order.
    """
    ds = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, (_name, *mails) in enumerate(accounts):
        for mail in mails:
            if mail in owner:
                ds.union_by_size(index, owner[mail])
            else:
                owner[mail] = index

    grouped: dict[int, list[str]] = defaultdict(list)
    for mail, index in owner.items():
        grouped[ds.find(index)].append(mail)

    return [
        [accounts[root][0], *sorted(grouped[root])]
        for root in sorted(grouped)
    ]