from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

import numpy as np

from pyvec3.utils.linalg import vec3, ieee_divide
from pyvec3.utils.types import ArrayLike, Scalar, SCALAR_TYPES, Vec3


@dataclass(frozen=True, slots=True, eq=False)
class Vector3:
    """
    Immutable 3D vector of double-precision components.

    Parameters
    ----------
    x, y, z : float
        Components. Any real number is accepted and stored as a Python float;
        NaN and +/-inf are valid values and are never rejected.

    Notes
    -----
    Every operation returns a new instance. Arithmetic is total over the
    IEEE 754 domain: nothing raises on numeric input, exceptional results
    (NaN, +/-inf) propagate like they would for bare float64 arithmetic.
    In particular, division by zero gives +/-inf or NaN instead of
    ZeroDivisionError.

    Operators
    ---------
    - ``a + b``, ``a - b`` : component-wise sum / difference
    - ``v * s``, ``s * v`` : scale every component by the scalar ``s``
    - ``a * b``            : Hadamard (component-wise) product, NOT dot/cross
    - ``v / s``            : divide every component by ``s``
    - ``s / v``            : ``s`` divided by each component
    - ``a / b``            : ``a * (1 / b)``
    - ``-v``               : component-wise negation

    Equality is exact float equality on each component (NaN != NaN).
    """
    x: float
    y: float
    z: float

    ZERO: ClassVar["Vector3"]
    ONE: ClassVar["Vector3"]

    # numpy scalars on the left of an operator must defer to our reflected ops
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    ############################
    # construction / conversion
    ############################

    @classmethod
    def from_array(cls, v: ArrayLike) -> "Vector3":
        """
        Build a vector from any array-like of shape (3,).

        Raises
        ------
        ValueError
            If `v` does not have shape (3,). Component values are not checked.
        """
        x, y, z = vec3(v).tolist()
        return cls(x, y, z)

    def to_array(self) -> Vec3:
        """Return the components as a float64 ndarray of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    ############################
    # geometry
    ############################

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Right-handed cross product ``self × other``.

        Anti-commutative; the result is the zero vector when the operands are
        parallel (or either one is zero).
        """
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        """
        Euclidean length ``sqrt(v·v)``.

        Returns NaN if any component is NaN, +inf if any component is infinite.
        """
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vector3":
        """
        Return ``self / self.length()``.

        There is no zero-length guard: normalizing the zero vector divides
        0 by 0 and every component of the result is NaN. No exception is
        raised. Check the result with `is_finite` when that matters.
        """
        return self / self.length()

    def is_finite(self) -> bool:
        """True when no component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def isclose(self, other: "Vector3", *, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """
        Component-wise `math.isclose`. The ``==`` operator stays exact.
        """
        return (
            math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self.z, other.z, rel_tol=rel_tol, abs_tol=abs_tol)
        )

    ############################
    # arithmetic
    ############################

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            # Hadamard product
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, SCALAR_TYPES):
            s = float(other)
            return Vector3(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Vector3":
        if isinstance(other, SCALAR_TYPES):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            # reciprocal first, then Hadamard
            return self * (1.0 / other)
        if isinstance(other, SCALAR_TYPES):
            return Vector3.from_array(ieee_divide(self.to_array(), float(other)))
        return NotImplemented

    def __rtruediv__(self, other: Scalar) -> "Vector3":
        if isinstance(other, SCALAR_TYPES):
            return Vector3.from_array(ieee_divide(float(other), self.to_array()))
        return NotImplemented

    ############################
    # comparison
    ############################

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        # plain float comparisons: NaN never equals anything, 0.0 == -0.0
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
