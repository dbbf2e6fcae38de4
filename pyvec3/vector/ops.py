"""
Function-style spellings of the Vector3 operators.

Each function is exactly the corresponding operator or method, so results are
bit-identical. Handy where a callable is needed, e.g. ``functools.reduce(add, vs)``.
"""
from __future__ import annotations

from pyvec3.vector.vector3 import Vector3
from pyvec3.utils.types import Scalar


def add(a: Vector3, b: Vector3) -> Vector3:
    return a + b


def sub(a: Vector3, b: Vector3) -> Vector3:
    return a - b


def scale(v: Vector3, s: Scalar) -> Vector3:
    """Multiply every component of `v` by the scalar `s`."""
    return v * s


def hadamard(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise product (a.x*b.x, a.y*b.y, a.z*b.z)."""
    return a * b


def divide_by_scalar(v: Vector3, s: Scalar) -> Vector3:
    """Divide every component of `v` by `s`. Zero `s` gives +/-inf or NaN."""
    return v / s


def scalar_divide(s: Scalar, v: Vector3) -> Vector3:
    """Divide `s` by each component of `v`: (s/v.x, s/v.y, s/v.z)."""
    return s / v


def divide_elementwise(a: Vector3, b: Vector3) -> Vector3:
    """
    Component-wise quotient, computed as ``a * (1 / b)``.

    A zero component of `b` reciprocates to +/-inf; multiplied by a zero
    component of `a` that gives NaN, matching direct 0/0.
    """
    return a / b


def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def length(v: Vector3) -> float:
    return v.length()


def normalized(v: Vector3) -> Vector3:
    return v.normalized()
