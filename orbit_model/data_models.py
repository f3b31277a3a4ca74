#!/usr/bin/env python3
"""
Data models for the orbit model.

This module defines the Body dataclass shared by the engine, diagnostics and the
controller.

Units and usage
- Units are arbitrary toy units; one unit of time is one projection tick.
- ax/ay are a transient accumulator. They are zeroed at the start of every
  projection and hold no meaning once the projection is built.
- mass and diameter are carried but not used by any algorithm.
- index is the body's identity and cannot be reassigned after construction.
"""
import math
from dataclasses import dataclass, replace

from .constants import DEFAULT_DIAMETER, DEFAULT_MASS


@dataclass
class Body:
    """
    State of one massive point body.

    Fields:
    - index: Stable identity, equal to the body's position in its simulation
    - x, y: Position
    - vx, vy: Velocity
    - ax, ay: Acceleration accumulator used while a projection is computed
    - mass: Always 1 by default; not applied in the force calculation
    - diameter: Reserved for collision detection
    """
    index: int
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    mass: float = DEFAULT_MASS
    diameter: float = DEFAULT_DIAMETER

    def __setattr__(self, name, value):
        if name == "index" and "index" in self.__dict__:
            raise AttributeError("Body.index is immutable")
        super().__setattr__(name, value)

    def distance_to(self, other: "Body") -> float:
        """Euclidean distance between the positions of two bodies."""
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def reset_acceleration(self) -> None:
        self.ax = 0.0
        self.ay = 0.0

    def copy(self) -> "Body":
        """Independent copy with the same index."""
        return replace(self)


def create_body(index: int) -> Body:
    """Return a body at rest at the origin with unit mass and zero diameter."""
    return Body(index=index)
