"""Numeric primitives for the scalar transforms.

Thin wrappers over numpy and scipy.special ufuncs. None of these raise on
out-of-domain input: they return NaN (or ±inf at a boundary, e.g. log(0))
and numpy may emit a RuntimeWarning, which callers control with
``numpy.errstate``.
"""

from typing import Any

import numpy as np
from scipy import special


def logistic(x):
    """Standard logistic (sigmoid) function, mapping ℝ → (0, 1)."""
    return special.expit(x)


def logit(y):
    """Inverse of :func:`logistic`, mapping (0, 1) → ℝ."""
    return special.logit(y)


def logistic_log_derivative(x):
    """log σ'(x) = log σ(x) + log σ(-x), stable for large |x|."""
    return special.log_expit(x) + special.log_expit(-x)


def logit_log_derivative(y):
    """log |logit'(y)| = -log(y (1 - y))."""
    return -(np.log(y) + np.log1p(-y))


def zero_logjac(dtype: Any):
    """Zero log-Jacobian in the floating precision of ``dtype``.

    Integer types are promoted to a float so that log-Jacobians can be
    accumulated on top of the returned value.

    Args:
        dtype: A Python or numpy scalar type (e.g. ``float``, ``np.float32``)

    Returns:
        A numpy floating scalar equal to zero
    """
    return np.promote_types(np.dtype(dtype), np.float16).type(0)
