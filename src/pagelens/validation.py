"""Checks applied to caller-supplied numeric parameters."""

import math
from numbers import Real


def require_finite(name: str, value) -> float:
    """Return value as a float, raising ValueError if it is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


def require_count(name: str, value) -> int:
    """Return value if it is a non-negative int, else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value
