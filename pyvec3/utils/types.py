from __future__ import annotations

import numbers
from typing import Union

import numpy as np
from numpy.typing import NDArray, ArrayLike

FloatArray = NDArray[np.floating]

Vec3 = NDArray[np.floating]  # intended shape (3,)

# Anything accepted as the scalar operand of a Vector3 operator
Scalar = Union[float, int, np.floating, np.integer]
SCALAR_TYPES = (numbers.Real,)

__all__ = [
    "ArrayLike",
    "FloatArray",
    "Vec3",
    "Scalar", "SCALAR_TYPES",
]
