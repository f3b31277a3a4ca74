#!/usr/bin/env python3
"""
Read-only diagnostics over a set of bodies.

These helpers never mutate their input. They exist so a driver (or a test) can
watch conserved quantities along a projection chain.

Notes
- Momentum and energy are mass-weighted in the usual way even though the
  gravity model ignores mass. With the default unit masses the two agree.
- net_acceleration sums the ax/ay accumulators. Right after a projection every
  pairwise term has been added once and subtracted once, so the result is zero
  up to floating-point rounding.
"""
import math
from typing import Iterable, Sequence, Tuple

from .constants import GRAVITY
from .data_models import Body
from .vector_utils import vec_scale, vec_sum


def linear_momentum(bodies: Iterable[Body]) -> Tuple[float, float]:
    return vec_sum((b.mass * b.vx, b.mass * b.vy) for b in bodies)


def angular_momentum(bodies: Iterable[Body]) -> float:
    """Angular momentum about the origin (z component)."""
    total = 0.0
    for b in bodies:
        total += b.mass * (b.x * b.vy - b.y * b.vx)
    return total


def kinetic_energy(bodies: Iterable[Body]) -> float:
    total = 0.0
    for b in bodies:
        total += 0.5 * b.mass * (b.vx * b.vx + b.vy * b.vy)
    return total


def center_of_mass(bodies: Sequence[Body]) -> Tuple[float, float]:
    """Mass-weighted mean position; the origin when there is no mass."""
    total_mass = sum(b.mass for b in bodies)
    if total_mass == 0.0:
        return (0.0, 0.0)
    weighted = vec_sum((b.mass * b.x, b.mass * b.y) for b in bodies)
    return vec_scale(weighted, 1.0 / total_mass)


def net_acceleration(bodies: Iterable[Body]) -> Tuple[float, float]:
    """Sum of the acceleration accumulators of `bodies`."""
    return vec_sum((b.ax, b.ay) for b in bodies)


def circular_orbit_speed(separation: float, gravity: float = GRAVITY) -> float:
    """
    Speed for two bodies to circle their midpoint at a fixed separation.

    Each body feels G / d^2 toward the other and moves on a circle of radius
    d / 2, so v^2 / (d / 2) = G / d^2 and v = sqrt(G / (2 d)). The engine's
    unit-step Euler integrator only approximates this orbit.

    Args:
        separation: Distance between the bodies (> 0)
        gravity: Gravitational constant of the model

    Returns:
        Speed of each body, or 0.0 for a non-positive separation
    """
    if separation <= 0:
        return 0.0
    return math.sqrt(gravity / (2.0 * separation))
