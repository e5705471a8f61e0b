"""Linear-scan oracle with the same contract as :meth:`SparseTable.smallest`."""

from __future__ import annotations

from typing import Sequence, TypeVar

from sparse_rmq.errors import EmptyRangeError, OutOfBoundsError

__all__ = ["naive_smallest"]

T = TypeVar("T")


def naive_smallest(values: Sequence[T], l: int, r: int) -> T:
    if l >= r:
        raise EmptyRangeError("No smallest element in an empty range")
    if r > len(values):
        raise OutOfBoundsError("Right bound is out of bounds")
    if l < 0:
        raise OutOfBoundsError("Left bound is out of bounds")
    best = values[l]
    for idx in range(l + 1, r):
        if values[idx] < best:
            best = values[idx]
    return best
