"""
Tests for the read-only diagnostics helpers.
"""

import math

import pytest

from orbit_model.data_models import Body
from orbit_model.diagnostics import (
    angular_momentum,
    center_of_mass,
    circular_orbit_speed,
    kinetic_energy,
    linear_momentum,
    net_acceleration,
)


@pytest.fixture
def bodies():
    return [
        Body(index=0, x=1.0, y=0.0, vx=0.0, vy=2.0, ax=0.5, ay=-1.0),
        Body(index=1, x=-3.0, y=4.0, vx=1.0, vy=0.0, ax=-0.5, ay=1.0, mass=3.0),
    ]


def test_linear_momentum(bodies):
    assert linear_momentum(bodies) == (3.0, 2.0)


def test_angular_momentum(bodies):
    # 1 * (1*2 - 0*0) + 3 * (-3*0 - 4*1)
    assert angular_momentum(bodies) == 2.0 - 12.0


def test_kinetic_energy(bodies):
    assert kinetic_energy(bodies) == 0.5 * 4.0 + 0.5 * 3.0 * 1.0


def test_center_of_mass(bodies):
    assert center_of_mass(bodies) == pytest.approx((-2.0, 3.0))


def test_center_of_mass_without_bodies():
    assert center_of_mass([]) == (0.0, 0.0)


def test_net_acceleration(bodies):
    assert net_acceleration(bodies) == (0.0, 0.0)


def test_diagnostics_do_not_mutate(bodies):
    before = [b.copy() for b in bodies]
    linear_momentum(bodies)
    center_of_mass(bodies)
    kinetic_energy(bodies)
    assert bodies == before


def test_circular_orbit_speed():
    assert circular_orbit_speed(100.0) == pytest.approx(math.sqrt(5.0))
    assert circular_orbit_speed(10.0, gravity=20.0) == 1.0
    assert circular_orbit_speed(0.0) == 0.0
