from .linalg import vec3, ensure_finite, ieee_divide
