"""Lowest common ancestor via Euler tour + range-minimum over depths."""

from __future__ import annotations

from typing import Dict, Hashable, List, Mapping, Sequence, Tuple

from sparse_rmq.sparse_table import SparseTable

__all__ = ["EulerTourLCA"]

_DONE = object()


class EulerTourLCA:
    """
    Constant-time LCA queries on a rooted tree.

    ``children`` maps each node to its children; leaves may be omitted.  The
    Euler tour visits ``2 * nodes - 1`` positions and the LCA of ``u`` and
    ``v`` is the shallowest tour entry between their first occurrences.
    """

    def __init__(self, children: Mapping[Hashable, Sequence[Hashable]], root: Hashable) -> None:
        tour: List[Hashable] = [root]
        depths: List[int] = [0]
        first: Dict[Hashable, int] = {root: 0}

        stack = [(root, 0, iter(children.get(root, ())))]
        while stack:
            node, depth, it = stack[-1]
            child = next(it, _DONE)
            if child is _DONE:
                stack.pop()
                if stack:
                    tour.append(stack[-1][0])
                    depths.append(depth - 1)
                continue
            if child in first:
                raise ValueError(f"Node {child!r} reached twice; input is not a tree")
            first[child] = len(tour)
            tour.append(child)
            depths.append(depth + 1)
            stack.append((child, depth + 1, iter(children.get(child, ()))))

        self.root = root
        self.tour: Tuple[Hashable, ...] = tuple(tour)
        self._depths = tuple(depths)
        self._first = first
        # Positions break depth ties so nodes never need to be comparable.
        self._table: SparseTable[Tuple[int, int]] = SparseTable(
            (d, pos) for pos, d in enumerate(depths)
        )

    def __contains__(self, node: Hashable) -> bool:
        return node in self._first

    def __len__(self) -> int:
        return len(self._first)

    def depth(self, node: Hashable) -> int:
        return self._depths[self._first[node]]

    def lca(self, u: Hashable, v: Hashable) -> Hashable:
        """Return the lowest common ancestor of ``u`` and ``v`` (``KeyError`` if unknown)."""
        i, j = self._first[u], self._first[v]
        if i > j:
            i, j = j, i
        _, pos = self._table.smallest(i, j + 1)
        return self.tour[pos]

    def distance(self, u: Hashable, v: Hashable) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        return self.depth(u) + self.depth(v) - 2 * self.depth(self.lca(u, v))
