# sparse_rmq/common/trace.py
"""Opt-in console tracing for table construction."""

from __future__ import annotations

# Global debug switch
VERBOSE: bool = False


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)
