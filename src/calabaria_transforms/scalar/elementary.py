"""Elementary scalar transforms.

The closed set of building blocks from which every interval transform is
assembled:

- Identity:    x ↦ x,             ℝ → ℝ
- Exponential: x ↦ eˣ,            ℝ → (0, ∞)
- Logistic:    x ↦ 1/(1 + e⁻ˣ),   ℝ → (0, 1)
- Shift:       x ↦ x + shift,     ℝ → ℝ
- Scale:       x ↦ scale·x,       ℝ → ℝ  (scale > 0)
- Negate:      x ↦ -x,            ℝ → ℝ

Out-of-domain inverses (e.g. Exponential at y <= 0) return NaN/±inf from
the underlying numpy ufuncs rather than raising.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..errors import TransformDomainError
from .base import ScalarTransform
from .numeric import (
    logistic,
    logit,
    logistic_log_derivative,
    logit_log_derivative,
    zero_logjac,
)


@dataclass(frozen=True)
class Identity(ScalarTransform):
    """Identity transform (no-op), the transform onto the whole real line."""

    def transform(self, x):
        return x

    def transform_and_logjac(self, x):
        return x, zero_logjac(type(x))

    def inverse(self, y):
        return y

    def inverse_and_logjac(self, y):
        return y, zero_logjac(type(y))


@dataclass(frozen=True)
class Exponential(ScalarTransform):
    """Exponential transform x ↦ eˣ onto the positive reals.

    The log-Jacobian of the forward map is x itself.
    """

    def transform(self, x):
        return np.exp(x)

    def transform_and_logjac(self, x):
        return self.transform(x), x + zero_logjac(type(x))

    def inverse(self, y):
        return np.log(y)

    def inverse_and_logjac(self, y):
        x = self.inverse(y)
        return x, -x


@dataclass(frozen=True)
class Logistic(ScalarTransform):
    """Logistic transform onto the unit interval (0, 1)."""

    def transform(self, x):
        return logistic(x)

    def transform_and_logjac(self, x):
        return self.transform(x), logistic_log_derivative(x)

    def inverse(self, y):
        return logit(y)

    def inverse_and_logjac(self, y):
        return self.inverse(y), logit_log_derivative(y)


@dataclass(frozen=True)
class Shift(ScalarTransform):
    """Translation x ↦ x + shift.

    Attributes:
        shift: Offset added in the forward direction
    """
    shift: Any

    def transform(self, x):
        return x + self.shift

    def transform_and_logjac(self, x):
        return self.transform(x), zero_logjac(type(x))

    def inverse(self, y):
        return y - self.shift

    def inverse_and_logjac(self, y):
        return self.inverse(y), zero_logjac(type(y))


@dataclass(frozen=True)
class Scale(ScalarTransform):
    """Multiplication x ↦ scale·x by a strictly positive factor.

    Attributes:
        scale: Positive multiplier

    Raises:
        TransformDomainError: If scale is not > 0
    """
    scale: Any

    def __post_init__(self):
        """Validate scale parameter."""
        if isinstance(self.scale, bool) or not self.scale > 0:
            raise TransformDomainError(f"Scale requires scale > 0, got {self.scale}")

    def transform(self, x):
        return self.scale * x

    def transform_and_logjac(self, x):
        return self.transform(x), np.log(self.scale)

    def inverse(self, y):
        return y / self.scale

    def inverse_and_logjac(self, y):
        return self.inverse(y), -np.log(self.scale)


@dataclass(frozen=True)
class Negate(ScalarTransform):
    """Reflection x ↦ -x."""

    def transform(self, x):
        return -x

    def transform_and_logjac(self, x):
        return -x, zero_logjac(type(x))

    def inverse(self, y):
        return -y

    def inverse_and_logjac(self, y):
        return -y, zero_logjac(type(y))
