#!/usr/bin/env python3
"""
Simulation state and single-step projection.

A Simulation is the authoritative, mutable state of every body at one logical
time. A Projection is the state one tick later, computed without touching its
source. Projections can be projected again, so a caller walks into the future by
repeated single-step extrapolation, and a Simulation can commit a projection to
advance its own clock.

Integration
- Euler step with an implicit unit time step:
      v' = v + a(x)
      x' = x + v        (old velocity, not v')
  Both updates read only the old state. Advancing x by v' instead would give
  symplectic Euler and different trajectories. The reference model calls this
  ordering semi-implicit; it is the old-velocity form described here.

Commit
- Only time and positions are copied into the live state. Velocities are left
  as they were. This mirrors the reference model and is probably unintended,
  since project always extrapolates both.

Threading
- project reads one complete snapshot and allocates its result, so unrelated
  chains never interfere. commit mutates field by field and must not overlap a
  project or another commit on the same Simulation; SimulationController
  provides that exclusion.
"""

import logging
from typing import Iterator, List, Optional

from .constants import TIME_STEP
from .data_models import Body, create_body
from .errors import InvariantViolation
from .physics import DEFAULT_GRAVITY_MODEL, GravityModel

logger = logging.getLogger(__name__)


class Simulation:
    """
    Ordered bodies sharing one simulation time.

    Attributes:
        time: Logical timestamp; one projection advances it by one tick.
        bodies: Bodies in index order; the length never changes.
        gravity: GravityModel used when no model is passed to project.
    """

    def __init__(self, bodies: List[Body], time=0, gravity: Optional[GravityModel] = None):
        for position, body in enumerate(bodies):
            if body.index != position:
                raise InvariantViolation(
                    f"body at position {position} has index {body.index}"
                )
        self.time = time
        self.bodies = bodies
        self.gravity = gravity if gravity is not None else DEFAULT_GRAVITY_MODEL

    def __len__(self) -> int:
        return len(self.bodies)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(time={self.time!r}, bodies={len(self.bodies)})"

    def projected(self, gravity: Optional[GravityModel] = None) -> "Projection":
        """Projection of this state one tick ahead."""
        return project(self, gravity)

    def become(self, projection: "Simulation") -> None:
        """Adopt the time and positions of `projection`."""
        commit(self, projection)


class Projection(Simulation):
    """
    Predicted state one tick after the state it was derived from.

    A projection owns its bodies outright; it keeps only the time of its
    source, never a reference to it. It should be treated as read-only unless
    it is itself used as the live state.
    """

    def __init__(self, bodies: List[Body], time, source_time, gravity: Optional[GravityModel] = None):
        super().__init__(bodies, time, gravity)
        self.source_time = source_time


def create_simulation(body_count: int, time=0, gravity: Optional[GravityModel] = None) -> Simulation:
    """
    Create a simulation of `body_count` bodies at rest at the origin.

    Args:
        body_count: Number of bodies (non-negative integer)
        time: Initial logical time
        gravity: Model used by projections of this simulation

    Raises:
        ValueError: if body_count is negative or not an integer
    """
    if isinstance(body_count, bool) or not isinstance(body_count, int):
        raise ValueError(f"body_count must be an integer, got {body_count!r}")
    if body_count < 0:
        raise ValueError(f"body_count must be >= 0, got {body_count}")
    simulation = Simulation([create_body(index) for index in range(body_count)], time, gravity)
    logger.debug("created simulation with %d bodies at time %r", body_count, time)
    return simulation


def project(simulation: Simulation, gravity: Optional[GravityModel] = None) -> Projection:
    """
    Compute the state of `simulation` one tick ahead.

    The source is only read. The result shares no mutable state with it.

    Args:
        simulation: Source state (a Simulation or another Projection)
        gravity: Overrides the source's GravityModel for this step

    Returns:
        A new Projection at simulation.time + 1

    Raises:
        CoincidentBodiesError: if two bodies are within the model's min_distance
    """
    model = gravity if gravity is not None else simulation.gravity
    sources = simulation.bodies

    # Each new body reads its antecedent as sources[body.index].
    bodies = [create_body(source.index) for source in sources]
    model.accumulate(sources, bodies)

    for body in bodies:
        source = sources[body.index]
        # Project velocity
        body.vx = source.vx + body.ax
        body.vy = source.vy + body.ay
        # Project position
        body.x = source.x + source.vx
        body.y = source.y + source.vy
        body.mass = source.mass
        body.diameter = source.diameter

    return Projection(bodies, simulation.time + TIME_STEP, simulation.time, model)


def commit(simulation: Simulation, projection: Simulation) -> None:
    """
    Advance `simulation` to the time and positions of `projection`.

    Velocity and acceleration are not copied.

    Raises:
        InvariantViolation: if the body counts differ (nothing is written)
    """
    if len(projection.bodies) != len(simulation.bodies):
        raise InvariantViolation(
            f"cannot commit a projection of {len(projection.bodies)} bodies "
            f"into a simulation of {len(simulation.bodies)}"
        )
    simulation.time = projection.time
    for body, projected_body in zip(simulation.bodies, projection.bodies):
        body.x = projected_body.x
        body.y = projected_body.y
    logger.debug("committed projection; time is now %r", simulation.time)


def project_chain(simulation: Simulation, steps: int,
                  gravity: Optional[GravityModel] = None) -> Iterator[Projection]:
    """
    Yield `steps` successive projections, each derived from the previous one.

    The root is read once, for the first step; later steps depend only on the
    preceding projection.

    Raises:
        ValueError: if steps is negative or not an integer
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"steps must be an integer, got {steps!r}")
    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")
    logger.debug("projecting %d steps ahead of time %r", steps, simulation.time)
    return _chain(simulation, steps, gravity)


def _chain(previous: Simulation, steps: int, gravity: Optional[GravityModel]) -> Iterator[Projection]:
    for _ in range(steps):
        previous = project(previous, gravity)
        yield previous
