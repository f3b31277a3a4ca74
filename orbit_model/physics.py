#!/usr/bin/env python3
"""
Gravity model for the orbit simulator.

Responsibilities
- Hold the tunable gravitational constant G and the coincident-body threshold.
- Accumulate pairwise gravitational accelerations over the upper triangle of the
  body-to-body table, applying each pair once with opposite signs.

Units and conventions
- Toy units; G defaults to 1000 and is a tuning knob, not a physical constant.
- The force of body j on body i is G * (r_j - r_i) / |r_j - r_i|^3.
- Mass is carried on every body but is not part of the formula. Physically the
  contribution should be scaled by the partner's mass; the unscaled behaviour is
  kept so trajectories match the reference model.

Numerical notes
- Complexity is O(N^2 / 2) per step: every unordered pair is visited once.
- No softening. Pairs closer than min_distance (default: exactly coincident)
  raise CoincidentBodiesError instead of producing inf/nan accelerations.

Threading
- A GravityModel is immutable after construction and holds no per-step state,
  so one instance can be shared by concurrent projection chains.
"""

import math
from typing import Sequence, Tuple

from .constants import GRAVITY, MIN_DISTANCE
from .data_models import Body
from .errors import CoincidentBodiesError, InvariantViolation


class GravityModel:
    """
    Pairwise inverse-square gravity without mass scaling.

    For every pair (i, j) with i < j:

        f = G * (r_j - r_i) / d^3
        a_i += f
        a_j -= f
    """

    __slots__ = ("_gravity", "_min_distance")

    def __init__(self, gravity: float = GRAVITY, min_distance: float = MIN_DISTANCE):
        """
        Args:
            gravity: Gravitational constant of the toy universe (finite, > 0)
            min_distance: Separation at or below which a pair is rejected (>= 0)
        """
        gravity = float(gravity)
        min_distance = float(min_distance)
        if not math.isfinite(gravity) or gravity <= 0.0:
            raise ValueError(f"gravity must be a positive finite number, got {gravity!r}")
        if not math.isfinite(min_distance) or min_distance < 0.0:
            raise ValueError(f"min_distance must be >= 0, got {min_distance!r}")
        self._gravity = gravity
        self._min_distance = min_distance

    @property
    def gravity(self) -> float:
        return self._gravity

    @property
    def min_distance(self) -> float:
        return self._min_distance

    def __repr__(self) -> str:
        return f"GravityModel(gravity={self._gravity!r}, min_distance={self._min_distance!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, GravityModel):
            return NotImplemented
        return (self._gravity, self._min_distance) == (other._gravity, other._min_distance)

    def __hash__(self) -> int:
        return hash((self._gravity, self._min_distance))

    def pair_acceleration(self, body: Body, other: Body) -> Tuple[float, float]:
        """
        Acceleration contributed to `body` by `other`.

        The reaction on `other` is exactly the negation of the returned vector.

        Raises:
            CoincidentBodiesError: if the bodies are within min_distance
                or so close that d^3 underflows
        """
        distance = body.distance_to(other)
        distance_cubed = distance * distance * distance
        # Separations below ~1e-108 are positive but their cube underflows to 0.
        if distance <= self._min_distance or distance_cubed == 0.0:
            raise CoincidentBodiesError(body.index, other.index, distance)
        x_force = self._gravity * (other.x - body.x) / distance_cubed
        y_force = self._gravity * (other.y - body.y) / distance_cubed
        return (x_force, y_force)

    def accumulate(self, sources: Sequence[Body], targets: Sequence[Body]) -> None:
        """
        Fill the acceleration accumulators of `targets` from the positions of `sources`.

        targets[i] receives the net acceleration acting on sources[i]. The
        accumulators are zeroed first; sources are only read.

        Args:
            sources: Bodies whose positions define the field.
            targets: Bodies whose ax/ay are overwritten, same length and order.

        Raises:
            InvariantViolation: if the two sequences differ in length
            CoincidentBodiesError: if any pair is within min_distance
        """
        n = len(sources)
        if len(targets) != n:
            raise InvariantViolation(
                f"cannot accumulate {n} source bodies into {len(targets)} targets"
            )

        for target in targets:
            target.reset_acceleration()

        # Upper triangle only; the lower triangle is the same vector negated.
        for i in range(n):
            source = sources[i]
            target = targets[i]
            for j in range(i + 1, n):
                x_force, y_force = self.pair_acceleration(source, sources[j])
                target.ax += x_force
                target.ay += y_force
                other_target = targets[j]
                other_target.ax -= x_force
                other_target.ay -= y_force


DEFAULT_GRAVITY_MODEL = GravityModel()
