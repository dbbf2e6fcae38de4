import warnings

import numpy as np
import pytest

from pyvec3.utils.linalg import vec3, ensure_finite, ieee_divide


def test_vec3_accepts_shape_3():
    v = vec3([1, 2, 3])
    assert isinstance(v, np.ndarray)
    assert v.shape == (3,)
    assert v.dtype == float


def test_vec3_rejects_wrong_shape():
    with pytest.raises(ValueError):
        vec3([1, 2])
    with pytest.raises(ValueError):
        vec3([[1, 2, 3]])
    with pytest.raises(ValueError):
        vec3(np.zeros((3, 1)))


def test_ensure_finite_passes_finite():
    v = ensure_finite([1.0, 2.0, 3.0], name="v")
    assert np.all(np.isfinite(v))


def test_ensure_finite_raises_on_nan_inf():
    with pytest.raises(ValueError, match="v must be finite"):
        ensure_finite([1.0, np.nan], name="v")
    with pytest.raises(ValueError):
        ensure_finite([1.0, np.inf])


def test_ieee_divide_regular_values():
    q = ieee_divide([2.0, 4.0, 6.0], 2.0)
    assert q.tolist() == [1.0, 2.0, 3.0]


def test_ieee_divide_by_zero_does_not_raise_or_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        q = ieee_divide([1.0, 0.0, -1.0], 0.0)
    assert q[0] == np.inf
    assert np.isnan(q[1])
    assert q[2] == -np.inf


def test_ieee_divide_respects_signed_zero():
    q = ieee_divide(1.0, [0.0, -0.0])
    assert q.tolist() == [np.inf, -np.inf]
