"""Transforms onto open intervals.

``interval_transform(left, right)`` picks the elementary chain that maps the
real line onto ``(left, right)``. Either boundary may be infinite, written
with the :data:`INFINITY` sentinel:

    interval_transform(0.0, INFINITY)     # (0, ∞):  Shift(0.0) @ Exponential()
    interval_transform(-INFINITY, 1.0)    # (-∞, 1): Shift(1.0) @ Negate() @ Exponential()
    interval_transform(2.0, 5.0)          # (2, 5):  Shift(2.0) @ Scale(3.0) @ Logistic()

The most common supports are predefined as constants (as_real,
as_positive_real, as_negative_real, as_unit_interval), each with an
upper-case alias.
"""

import logging
import math
from enum import Enum
from numbers import Real

import numpy as np

from ..errors import EmptyIntervalError, InvalidIntervalError
from .base import ScalarTransform
from .elementary import Identity, Exponential, Logistic, Shift, Scale, Negate

logger = logging.getLogger(__name__)


class Infinity(Enum):
    """Signed infinity marker for interval boundaries.

    Not a number: it only selects the dispatch case in
    :func:`interval_transform`. Supports negation, so ``-INFINITY`` is the
    negative sentinel.
    """
    POSITIVE = "∞"
    NEGATIVE = "-∞"

    def __neg__(self) -> "Infinity":
        if self is Infinity.POSITIVE:
            return Infinity.NEGATIVE
        return Infinity.POSITIVE

    def __repr__(self) -> str:
        return self.value

    __str__ = __repr__


INFINITY = Infinity.POSITIVE


def _is_finite_real(value) -> bool:
    # bool is an int subclass but never a boundary
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        return False
    # ints beyond the numpy integer range have no numeric dtype
    if np.asarray(value).dtype.kind not in "iuf":
        return False
    return math.isfinite(value)


def _promote(*values):
    """Convert values to numpy scalars of their common dtype."""
    dtype = np.result_type(*(np.asarray(v) for v in values))
    return tuple(dtype.type(v) for v in values)


# Transform to the real line (identity)
as_real = Identity()
REAL_LINE = as_real


def interval_transform(left, right) -> ScalarTransform:
    """Return a transform from the real line onto the open interval (left, right).

    Args:
        left: Finite real lower boundary, or ``-INFINITY``
        right: Finite real upper boundary, or ``INFINITY``

    Returns:
        Transform whose range is (left, right)

    Raises:
        EmptyIntervalError: If left == right
        InvalidIntervalError: If left > right, or the boundaries are not a
            supported combination of finite reals and sentinels

    Note:
        Finite boundaries are converted to numpy scalars (two of them to a
        common dtype), which in turn sets the precision of the output:
        ``interval_transform(0.0, INFINITY)`` returns float64 even for
        float32 input.
    """
    left_finite = _is_finite_real(left)
    right_finite = _is_finite_real(right)

    if left is Infinity.NEGATIVE and right is Infinity.POSITIVE:
        result = as_real
    elif left_finite and right is Infinity.POSITIVE:
        (shift,) = _promote(left)
        result = Shift(shift) @ Exponential()
    elif left is Infinity.NEGATIVE and right_finite:
        (shift,) = _promote(right)
        result = Shift(shift) @ Negate() @ Exponential()
    elif left_finite and right_finite:
        if left == right:
            raise EmptyIntervalError(f"the interval ({left}, {right}) is empty")
        if not left < right:
            raise InvalidIntervalError(
                f"the interval ({left}, {right}) requires left < right"
            )
        shift, upper = _promote(left, right)
        result = Shift(shift) @ Scale(upper - shift) @ Logistic()
    else:
        raise InvalidIntervalError(f"({left!r}, {right!r}) must be an interval")

    logger.debug(f"Interval ({left}, {right}) -> {result!r}")
    return result


# Transform to a positive real number
as_positive_real = Exponential()
POSITIVE_REAL = as_positive_real

# Transform to a negative real number
as_negative_real = Negate() @ Exponential()
NEGATIVE_REAL = as_negative_real

# Transform to the unit interval (0, 1)
as_unit_interval = Logistic()
UNIT_INTERVAL = as_unit_interval
