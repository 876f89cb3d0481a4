"""Input validation and rounding shared by the estimation functions."""

from __future__ import annotations

import math


class InvalidInputError(ValueError):
    """Raised when an estimator receives physically meaningless input."""


def require_finite(value: float, name: str) -> float:
    """Return *value* as float, rejecting NaN and infinities."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return number


def require_non_negative(value: float, name: str) -> float:
    """Return *value* as float, rejecting non-finite and negative numbers.

    Depth and distance are never clamped: a negative value means the
    caller mixed up a sign, and hiding that would misreport severity.
    """
    number = require_finite(value, name)
    if number < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value!r}")
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)
