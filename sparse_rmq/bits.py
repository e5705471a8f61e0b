# sparse_rmq/bits.py
"""
Bit-scan helpers used to bucket window lengths by powers of two.
"""

from __future__ import annotations

import operator
from typing import Tuple

from sparse_rmq.common.constants import WORD_BITS
from sparse_rmq.errors import OutOfBoundsError

__all__ = ["highest_bit", "floor_log_table"]


def highest_bit(x: int) -> int:
    """
    Return the position of the highest set bit of an unsigned 64-bit ``x``.

    The scan halves the probed window (32, 16, ..., 1 bits) and shifts the
    upper half down whenever it is non-zero, so it takes six steps for any
    word.  ``x == 0`` has no set bit and raises :class:`OutOfBoundsError`.
    """
    x = operator.index(x)
    if x == 0:
        raise OutOfBoundsError("Zero has no bits set")
    if x < 0 or x >> WORD_BITS:
        raise ValueError(f"{x} does not fit in an unsigned {WORD_BITS}-bit word")

    ans = 0
    sz = WORD_BITS // 2
    while sz:
        # x < 2**(2*sz) holds here, so any bit above sz lives in the upper half
        if x >> sz:
            ans += sz
            x >>= sz
        sz >>= 1
    return ans


def floor_log_table(n: int) -> Tuple[int, ...]:
    """Return ``floor(log2(x))`` for ``x`` in ``0..n``; entry 0 is 0 by convention."""
    n = operator.index(n)
    if n < 0:
        raise ValueError("n must be non-negative")
    return (0,) + tuple(highest_bit(x) for x in range(1, n + 1))
