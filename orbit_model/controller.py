#!/usr/bin/env python3
"""
Thread-safe controller around one live simulation.

What this module does
- Owns the authoritative Simulation and the GravityModel it projects with.
- Exposes the entry points a presentation layer needs: reading bodies, moving a
  body while it is dragged, asking for a predictive trail and ticking the clock.

Threading model
- Every read or write of the live state happens under a re-entrant lock, so a
  commit never interleaves with a project or a drag on the same simulation.
- predict_trail copies the live state under the lock and walks the chain
  outside it. A slow trail never blocks a tick, and a tick never disturbs a
  trail in progress.
"""

import logging
import threading
from typing import List, Optional, Tuple

from .constants import DEFAULT_BODY_COUNT, DRAG_VELOCITY_DIVISOR, TRAIL_LENGTH
from .data_models import Body
from .errors import CoincidentBodiesError
from .physics import GravityModel
from .simulation import Projection, Simulation, commit, create_simulation, project, project_chain
from .vector_utils import vec_scale, vec_sub

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Shared live state between a tick driver and a rendering/input layer.
    Includes thread-safe operations guarded by a lock.
    """
    def __init__(self, body_count: int = DEFAULT_BODY_COUNT, time=0,
                 gravity: Optional[GravityModel] = None):
        self.lock = threading.RLock()
        self.simulation: Simulation = create_simulation(body_count, time, gravity)

    @property
    def time(self):
        with self.lock:
            return self.simulation.time

    @property
    def gravity(self) -> GravityModel:
        with self.lock:
            return self.simulation.gravity

    def set_gravity(self, gravity) -> None:
        """Replace the gravity model; a bare number is taken as G."""
        if not isinstance(gravity, GravityModel):
            gravity = GravityModel(gravity)
        with self.lock:
            self.simulation.gravity = gravity

    def bodies_snapshot(self) -> List[Body]:
        """Copies of the live bodies in index order."""
        with self.lock:
            return [b.copy() for b in self.simulation.bodies]

    def get_body(self, index: int) -> Body:
        """The live body at `index`; mutate it only while holding `lock`."""
        with self.lock:
            if not 0 <= index < len(self.simulation.bodies):
                raise IndexError(f"no body with index {index}")
            return self.simulation.bodies[index]

    def set_body_state(self, index: int, x: Optional[float] = None, y: Optional[float] = None,
                       vx: Optional[float] = None, vy: Optional[float] = None) -> None:
        """Overwrite any of a body's position/velocity fields. Values are not validated."""
        with self.lock:
            b = self.get_body(index)
            if x is not None:
                b.x = x
            if y is not None:
                b.y = y
            if vx is not None:
                b.vx = vx
            if vy is not None:
                b.vy = vy

    def begin_drag(self, index: int, x: float, y: float) -> None:
        """Pick a body up: place it at (x, y) and stop it."""
        self.set_body_state(index, x=x, y=y, vx=0.0, vy=0.0)

    def drag_to(self, index: int, start: Tuple[float, float], stop: Tuple[float, float]) -> None:
        """Aim a picked-up body: velocity follows the drag vector, scaled down."""
        vx, vy = vec_scale(vec_sub(stop, start), 1.0 / DRAG_VELOCITY_DIVISOR)
        self.set_body_state(index, vx=vx, vy=vy)

    def _detached_state(self) -> Simulation:
        with self.lock:
            live = self.simulation
            return Simulation([b.copy() for b in live.bodies], live.time, live.gravity)

    def predict_trail(self, steps: int = TRAIL_LENGTH) -> List[Projection]:
        """
        Future states for a predictive trail, nearest first.

        Raises:
            CoincidentBodiesError: if the chain reaches a coincident pair
        """
        state = self._detached_state()
        try:
            return list(project_chain(state, steps))
        except CoincidentBodiesError as e:
            logger.warning("trail from time %r stopped: %s", state.time, e)
            raise

    def tick(self) -> Projection:
        """
        Project the live state one step and commit it.

        Raises:
            CoincidentBodiesError: if two live bodies coincide; nothing is committed
        """
        with self.lock:
            try:
                projection = project(self.simulation)
            except CoincidentBodiesError as e:
                logger.warning("tick at time %r failed: %s", self.simulation.time, e)
                raise
            commit(self.simulation, projection)
            return projection
