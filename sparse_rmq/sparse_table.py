"""Static sparse table answering range-minimum queries in constant time."""

from __future__ import annotations

import operator
from typing import Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from sparse_rmq.bits import floor_log_table
from sparse_rmq.common import trace
from sparse_rmq.errors import EmptyRangeError, OutOfBoundsError

__all__ = ["SparseTable"]

T = TypeVar("T")


class SparseTable(Generic[T]):
    """
    Doubling table over a fixed sequence.

    Row ``k`` holds the minimum of every window of length ``2**k``, so any
    half-open range ``[l, r)`` is covered by two (possibly overlapping)
    windows of the largest power of two not exceeding ``r - l``.  Overlap is
    harmless because ``min`` is idempotent; the same trick works for max, gcd,
    bitwise and/or, but not for sums.

    Building costs O(n log n) time and space, every query is O(1).  Elements
    only need to support ``<``; ties resolve to the leftmost window.
    """

    __slots__ = ("_rows", "_log")

    def __init__(
        self,
        values: Iterable[T],
        *,
        debug: Optional[Dict[str, object]] = None,
    ) -> None:
        rows: List[Tuple[T, ...]] = [tuple(values)]
        size = len(rows[0])

        k = 1
        while (1 << k) <= size:
            half = 1 << (k - 1)
            prev = rows[-1]
            rows.append(tuple(min(a, b) for a, b in zip(prev, prev[half:])))
            k += 1

        cells = sum(len(row) for row in rows)
        trace.log(f"[sparse_table] n={size} rows={len(rows)} cells={cells}")
        if debug is not None:
            debug["size"] = size
            debug["rows"] = len(rows)
            debug["cells"] = cells

        object.__setattr__(self, "_rows", tuple(rows))
        object.__setattr__(self, "_log", floor_log_table(size))

    @classmethod
    def from_iterable(cls, values: Iterable[T], **kwargs) -> "SparseTable[T]":
        """Build from any iterable or container (list, tuple, range, generator, ...)."""
        return cls(values, **kwargs)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._rows[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)}, levels={self.levels})"

    @property
    def levels(self) -> int:
        """Number of stored rows (``floor(log2(n)) + 1`` for n >= 1)."""
        return len(self._rows)

    @property
    def values(self) -> Tuple[T, ...]:
        """Copy of the sequence the table was built from."""
        return self._rows[0]

    def smallest(self, l: int, r: int) -> T:
        """
        Return the minimum of ``values[l:r]``.

        Raises :class:`EmptyRangeError` if ``l >= r`` and
        :class:`OutOfBoundsError` if ``r > len(self)`` or ``l < 0``.
        """
        l = operator.index(l)
        r = operator.index(r)
        if l >= r:
            raise EmptyRangeError("No smallest element in an empty range")
        if r > len(self):
            raise OutOfBoundsError("Right bound is out of bounds")
        if l < 0:
            raise OutOfBoundsError("Left bound is out of bounds")

        row = self._log[r - l]
        span = 1 << row
        level = self._rows[row]
        return min(level[l], level[r - span])

    def smallest_or_default(self, l: int, r: int, default: T) -> T:
        """
        Like :meth:`smallest` but never raises on a degenerate range.

        Returns ``default`` when the range is empty or starts outside the
        sequence; a right bound past the end is clamped to ``len(self)``.
        """
        l = operator.index(l)
        r = operator.index(r)
        size = len(self)
        if l >= r or l >= size or l < 0:
            return default
        return self.smallest(l, min(r, size))

    smallest_with_default = smallest_or_default
