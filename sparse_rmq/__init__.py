# Core structure – default export
from .sparse_table import SparseTable

# Helpers & errors
from .bits import highest_bit, floor_log_table
from .errors import EmptyRangeError, OutOfBoundsError, RangeQueryError
from .common.constants import (
    DEFAULT_SEED,
    RNG_SEEDS,
    WORD_BITS,
    seed_everywhere,
)

# Applications built on the table
from .lca import EulerTourLCA
from .windows import window_minima
from .reference import naive_smallest

__all__ = [
    # structure
    "SparseTable",
    # bit-scan
    "highest_bit",
    "floor_log_table",
    "WORD_BITS",
    # errors
    "RangeQueryError",
    "EmptyRangeError",
    "OutOfBoundsError",
    # config
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    # applications
    "EulerTourLCA",
    "window_minima",
    # oracle
    "naive_smallest",
]
