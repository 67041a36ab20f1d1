"""Error kinds raised by the generators."""

from __future__ import annotations

import numbers


class BenchDataError(Exception):
    """Base class for bench_data errors."""


class InvalidArgument(BenchDataError, ValueError):
    """Raised when a caller passes an argument outside its domain."""


def require_non_negative_int(value: object, name: str) -> int:
    # bool is an Integral, but a length of True is always a caller bug.
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
    return int(value)
