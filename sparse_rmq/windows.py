"""Fixed-width window minima over a static sequence."""

from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from sparse_rmq.sparse_table import SparseTable

__all__ = ["window_minima"]

T = TypeVar("T")


def window_minima(
    values: Iterable[T],
    width: int,
    default: Optional[T] = None,
    *,
    partial: bool = True,
    starts: Optional[Iterable[int]] = None,
) -> List[Optional[T]]:
    """
    Return ``min(values[i:i + width])`` for each start ``i``.

    With ``partial=True`` every start in ``range(n)`` is reported and windows
    running past the end are truncated; otherwise only full windows are kept.
    Explicit ``starts`` override both; a start outside the sequence yields
    ``default``.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    table = SparseTable(values)
    n = len(table)
    if starts is None:
        starts = range(n) if partial else range(max(0, n - width + 1))
    return [table.smallest_or_default(i, i + width, default) for i in starts]
