from __future__ import annotations

import pytest

from sparse_rmq.errors import EmptyRangeError, OutOfBoundsError
from sparse_rmq.reference import naive_smallest


def test_naive_smallest_basic() -> None:
    assert naive_smallest([4, 2, 9, 1], 0, 3) == 2
    assert naive_smallest([4, 2, 9, 1], 3, 4) == 1


def test_naive_smallest_errors() -> None:
    with pytest.raises(EmptyRangeError):
        naive_smallest([], 0, 0)
    with pytest.raises(OutOfBoundsError):
        naive_smallest([], 0, 1)
    with pytest.raises(OutOfBoundsError):
        naive_smallest([1, 2], -1, 1)
