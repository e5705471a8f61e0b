from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

# Bit-scan operates on unsigned machine words of this width.
WORD_BITS: int = 64

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
}


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "WORD_BITS",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
