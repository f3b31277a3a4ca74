"""
Tests for the Body record.
"""

import pytest

from orbit_model.data_models import Body, create_body


def test_create_body_is_at_rest_at_origin():
    body = create_body(3)
    assert body.index == 3
    assert (body.x, body.y) == (0.0, 0.0)
    assert (body.vx, body.vy) == (0.0, 0.0)
    assert (body.ax, body.ay) == (0.0, 0.0)
    assert body.mass == 1.0
    assert body.diameter == 0.0


def test_distance_to():
    a = create_body(0)
    b = Body(index=1, x=3.0, y=4.0)
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0


def test_distance_to_same_position_is_zero():
    a = Body(index=0, x=2.5, y=-1.0)
    b = Body(index=1, x=2.5, y=-1.0)
    assert a.distance_to(b) == 0.0


def test_index_is_immutable():
    body = create_body(0)
    with pytest.raises(AttributeError):
        body.index = 5
    assert body.index == 0


def test_kinematic_fields_accept_any_value():
    body = create_body(0)
    body.x, body.y, body.vx, body.vy = -1e12, 3.5, float("inf"), -0.0
    assert body.x == -1e12
    assert body.vx == float("inf")


def test_copy_is_independent():
    body = Body(index=2, x=1.0, y=2.0, vx=3.0, vy=4.0, ax=5.0, ay=6.0)
    clone = body.copy()
    assert clone == body
    assert clone is not body

    clone.x = 100.0
    assert body.x == 1.0


def test_reset_acceleration():
    body = Body(index=0, ax=1.5, ay=-2.5)
    body.reset_acceleration()
    assert (body.ax, body.ay) == (0.0, 0.0)
