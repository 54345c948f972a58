"""Public API for calabaria-transforms.

This module collects the transform types, the interval dispatcher, the
canonical constants and the error types.
"""

# Transforms
from .scalar import (
    Transform,
    ScalarTransform,
    Identity,
    Exponential,
    Logistic,
    Shift,
    Scale,
    Negate,
    CompositeTransform,
    compose,
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

# Numeric primitives
from .scalar.numeric import (
    logistic,
    logit,
    logistic_log_derivative,
    logit_log_derivative,
    zero_logjac,
)

# Errors
from .errors import (
    TransformDomainError,
    InvalidIntervalError,
    EmptyIntervalError,
)

# Version
try:
    from importlib.metadata import version
    __version__ = version("calabaria-transforms")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Contract
    "Transform",
    "ScalarTransform",

    # Elementary transforms
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

    # Numeric primitives
    "logistic",
    "logit",
    "logistic_log_derivative",
    "logit_log_derivative",
    "zero_logjac",

    # Errors
    "TransformDomainError",
    "InvalidIntervalError",
    "EmptyIntervalError",

    # Version
    "__version__",
]
