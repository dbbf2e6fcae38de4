from .vector import (
    Vector3,
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
from .utils import vec3, ensure_finite

__version__ = "0.1.0"
