import pytest

from orbit_model.diagnostics import circular_orbit_speed
from orbit_model.simulation import create_simulation


@pytest.fixture
def pair_at_rest():
    """Two bodies ten units apart on the x axis, at rest, at time 7."""
    sim = create_simulation(2, time=7)
    sim.bodies[1].x = 10.0
    return sim


@pytest.fixture
def orbiting_system():
    """A near-circular pair around the origin plus a distant, slowly falling third body."""
    sim = create_simulation(3)
    speed = circular_orbit_speed(100.0)
    a, b, c = sim.bodies
    a.x, a.vy = -50.0, -speed
    b.x, b.vy = 50.0, speed
    c.y = 400.0
    return sim
