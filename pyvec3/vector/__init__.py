from .vector3 import Vector3
from .ops import (
    add,
    sub,
    scale,
    hadamard,
    divide_by_scalar,
    scalar_divide,
    divide_elementwise,
    dot,
    cross,
    length,
    normalized,
)
