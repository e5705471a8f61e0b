#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for the sparse table and its applications.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It prints small, illustrative outputs for:

  1. Exact and defaulted range-minimum queries
  2. Sliding window minima
  3. Lowest common ancestors via an Euler tour
"""

from __future__ import annotations

import time

import sparse_rmq.common.trace as trace
from sparse_rmq import EulerTourLCA, SparseTable, window_minima

# Activate verbose internal logging so the user can see the construction traces.
trace.VERBOSE = True

SEP = "=" * 80

def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def run_query_example() -> None:
    _hdr("1 – Range-minimum queries")
    values = [5, 2, 8, 6, 3, 7, 4, 1]
    t0 = time.perf_counter()
    table = SparseTable(values)
    dt = (time.perf_counter() - t0) * 1e3
    print(f"values = {values}  ({table!r}, built in {dt:.3f} ms)")
    for l, r in [(0, 3), (2, 5), (4, 8), (0, 8)]:
        print(f"smallest({l}, {r}) = {table.smallest(l, r)}")
    print(f"smallest_or_default(3, 3, -1) = {table.smallest_or_default(3, 3, -1)}")
    print(f"smallest_or_default(6, 99, -1) = {table.smallest_or_default(6, 99, -1)}")


def run_window_example() -> None:
    _hdr("2 – Window minima (width 3)")
    prices = [101.5, 99.0, 100.2, 98.7, 102.3, 97.9, 99.4]
    print(f"prices = {prices}")
    print(f"minima = {window_minima(prices, 3)}")


def run_lca_example() -> None:
    _hdr("3 – Lowest common ancestor")
    tree = {"root": ["a", "b"], "a": ["c", "d"], "d": ["e", "f"]}
    lca = EulerTourLCA(tree, "root")
    print(f"tour = {lca.tour}")
    for u, v in [("e", "f"), ("c", "f"), ("b", "e")]:
        print(f"lca({u}, {v}) = {lca.lca(u, v)}  distance = {lca.distance(u, v)}")


if __name__ == "__main__":
    run_query_example()
    run_window_example()
    run_lca_example()
