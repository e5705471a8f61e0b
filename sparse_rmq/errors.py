"""Contract-violation errors raised by range-minimum queries."""

from __future__ import annotations

__all__ = ["RangeQueryError", "EmptyRangeError", "OutOfBoundsError"]


class RangeQueryError(ValueError):
    """Base class for misuse of the range-query API."""


class EmptyRangeError(RangeQueryError):
    """Raised when an exact query is asked for the minimum of ``[l, r)`` with ``l >= r``."""


class OutOfBoundsError(RangeQueryError, IndexError):
    """Raised when a bound falls outside the sequence (or a bit-scan is asked about zero)."""
