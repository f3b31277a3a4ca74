#!/usr/bin/env python3
"""
Exceptions raised by the orbit model.

All failures are local and synchronous: a failed projection is simply not
produced and the caller decides how to present that.
"""


class OrbitModelError(Exception):
    """Base class for orbit model failures."""


class CoincidentBodiesError(OrbitModelError, ZeroDivisionError):
    """Two bodies are too close for the inverse-cube force to be evaluated."""

    def __init__(self, first: int, second: int, distance: float):
        self.first = first
        self.second = second
        self.distance = distance
        super().__init__(
            f"bodies {first} and {second} are {distance!r} apart; "
            f"gravity between them is undefined"
        )


class InvariantViolation(OrbitModelError, AssertionError):
    """A structural invariant was broken by the caller (programming error)."""
