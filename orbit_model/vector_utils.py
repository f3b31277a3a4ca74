#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

These are small, fast functions for the tuple vectors used by diagnostics and
the controller.
"""
from typing import Iterable, Tuple


def vec_add(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Tuple[float, float], s: float) -> Tuple[float, float]:
    return (a[0] * s, a[1] * s)


def vec_sum(vectors: Iterable[Tuple[float, float]]) -> Tuple[float, float]:
    """Component-wise sum; (0, 0) for an empty iterable."""
    total = (0.0, 0.0)
    for v in vectors:
        total = vec_add(total, v)
    return total
