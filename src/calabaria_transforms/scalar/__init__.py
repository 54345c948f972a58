"""Scalar transforms for inference coordinates.

This module provides the bijections between the unconstrained real line and
constrained supports, together with their log-Jacobians.
"""

from .base import Transform, ScalarTransform
from .elementary import (
    Identity,
    Exponential,
    Logistic,
    Shift,
    Scale,
    Negate,
)
from .composite import CompositeTransform, compose
from .intervals import (
    Infinity,
    INFINITY,
    interval_transform,
    as_real,
    as_positive_real,
    as_negative_real,
    as_unit_interval,
    REAL_LINE,
    POSITIVE_REAL,
    NEGATIVE_REAL,
    UNIT_INTERVAL,
)

__all__ = [
    # Contract
    "Transform",
    "ScalarTransform",
    # Elementary
    "Identity",
    "Exponential",
    "Logistic",
    "Shift",
    "Scale",
    "Negate",
    # Composition
    "CompositeTransform",
    "compose",
    # Intervals
    "Infinity",
    "INFINITY",
    "interval_transform",
    "as_real",
    "as_positive_real",
    "as_negative_real",
    "as_unit_interval",
    "REAL_LINE",
    "POSITIVE_REAL",
    "NEGATIVE_REAL",
    "UNIT_INTERVAL",
]
