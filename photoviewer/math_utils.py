"""Pure math utilities - no external dependencies."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    if b < a:
        raise ValueError(f"clamp: min {a} must be <= max {b}")
    return a if v < a else b if v > b else v


def split_camel_case(name: str) -> str:
    """Insert a space before every inner capital: 'NearestNeighbor' -> 'Nearest Neighbor'."""
    return _CAMEL_BOUNDARY.sub(" ", name)
