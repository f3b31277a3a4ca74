#!/usr/bin/env python3
"""
Shared constants for the orbit model (toy units unless stated otherwise).

Keeping defaults in one place makes it easy to tune the toy universe without
touching the engine. None of these are read as process-wide mutable state:
the engine receives its gravitational constant through a GravityModel.
"""

# Physics controls
GRAVITY = 1000.0  # gravitational constant of the toy universe, not a physical G
MIN_DISTANCE = 0.0  # pairs at or below this separation abort a projection
TIME_STEP = 1  # logical ticks advanced by one projection

# Body defaults
DEFAULT_MASS = 1.0
DEFAULT_DIAMETER = 0.0  # reserved for collision detection

# Driver defaults
DEFAULT_BODY_COUNT = 3
TRAIL_LENGTH = 100  # projections per predictive trail
DRAG_VELOCITY_DIVISOR = 20.0  # drag vector (pixels) -> velocity (units per tick)
