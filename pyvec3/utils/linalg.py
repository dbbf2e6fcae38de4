import numpy as np

from pyvec3.utils.types import FloatArray

############################
# LINEAR ALGEBRA UTILITIES
############################

def vec3(v) -> np.ndarray:
    v = np.asarray(v, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-vector with shape (3,), got {v.shape}")
    return v

def ensure_finite(v, name="vector") -> np.ndarray:
    v = np.asarray(v, dtype=float)
    if not np.all(np.isfinite(v)):
        raise ValueError(f"{name} must be finite.")
    return v

def ieee_divide(num, den) -> FloatArray:
    """
    Element-wise float64 division with plain IEEE 754 semantics.

    Python floats raise ZeroDivisionError on `x / 0.0`; numpy float64 does not.
    Division by zero yields +/-inf, and 0/0 (or inf/inf) yields NaN. The
    corresponding numpy RuntimeWarnings are silenced for this call only.

    Parameters
    ----------
    num, den : float or array_like
        Numerator and denominator; broadcast against each other.

    Returns
    -------
    out : np.ndarray
        float64 quotient with the broadcast shape of the inputs.
    """
    num = np.asarray(num, dtype=np.float64)
    den = np.asarray(den, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(num, den)
