from __future__ import annotations

import random
from typing import Dict, List

import pytest

from sparse_rmq.lca import EulerTourLCA


TREE: Dict[str, List[str]] = {
    "root": ["a", "b"],
    "a": ["c", "d"],
    "b": ["e"],
    "d": ["f", "g"],
}


def _naive_lca(parent: Dict[int, int], u: int, v: int) -> int:
    ancestors = set()
    while True:
        ancestors.add(u)
        if u not in parent:
            break
        u = parent[u]
    while v not in ancestors:
        v = parent[v]
    return v


def test_small_tree() -> None:
    lca = EulerTourLCA(TREE, "root")
    assert len(lca) == 8
    assert len(lca.tour) == 2 * 8 - 1
    assert lca.lca("f", "g") == "d"
    assert lca.lca("c", "g") == "a"
    assert lca.lca("g", "e") == "root"
    assert lca.lca("d", "f") == "d"
    assert lca.lca("e", "e") == "e"
    assert lca.depth("g") == 3
    assert lca.distance("c", "g") == 3


def test_single_node() -> None:
    lca = EulerTourLCA({}, 0)
    assert lca.tour == (0,)
    assert lca.lca(0, 0) == 0
    assert 0 in lca


def test_unknown_node() -> None:
    lca = EulerTourLCA(TREE, "root")
    assert "zzz" not in lca
    with pytest.raises(KeyError):
        lca.lca("a", "zzz")


def test_rejects_non_tree() -> None:
    with pytest.raises(ValueError) as exc_info:
        EulerTourLCA({0: [1, 2], 1: [2]}, 0)
    assert "tree" in str(exc_info.value).lower()


def test_unorderable_nodes() -> None:
    x, y, z = object(), object(), object()
    lca = EulerTourLCA({x: [y, z]}, x)
    assert lca.lca(y, z) is x


@pytest.mark.slow
def test_random_tree_against_naive(seed: int) -> None:
    rnd = random.Random(seed)
    n = 300
    parent = {v: rnd.randrange(v) for v in range(1, n)}
    children: Dict[int, List[int]] = {}
    for v, p in parent.items():
        children.setdefault(p, []).append(v)
    lca = EulerTourLCA(children, 0)
    for _ in range(500):
        u, v = rnd.randrange(n), rnd.randrange(n)
        assert lca.lca(u, v) == _naive_lca(parent, u, v)
