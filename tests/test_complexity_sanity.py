from __future__ import annotations

import math
import random
from typing import Dict

import pytest

from sparse_rmq.common.constants import RNG_SEEDS, seed_everywhere
from sparse_rmq.sparse_table import SparseTable


seed_everywhere(RNG_SEEDS["tests"])


@pytest.mark.parametrize("n", [1, 2, 5, 64, 1000, 4097])
def test_table_size_envelope(n: int) -> None:
    rng = random.Random(10_123)
    values = [rng.random() for _ in range(n)]
    debug: Dict[str, object] = {}
    SparseTable(values, debug=debug)
    assert debug["size"] == n
    assert debug["rows"] == int(math.log2(n)) + 1
    assert debug["cells"] <= n * (int(math.log2(n)) + 1)
