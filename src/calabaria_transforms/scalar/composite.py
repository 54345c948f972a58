"""Composition of scalar transforms.

A CompositeTransform holds an ordered chain ``(t1, t2, ..., tn)`` and
evaluates as the mathematical composition ``t1 ∘ t2 ∘ ... ∘ tn``:

- forward: tn is applied first, t1 last (right to left)
- inverse: t1⁻¹ is applied first, tn⁻¹ last (left to right)

Log-Jacobians are summed along the way, each evaluated at its own
intermediate input (chain rule). Chains are always flat: composing a
composite with anything splices its members in place.
"""

from dataclasses import dataclass
from typing import Tuple

from .base import ScalarTransform
from .numeric import zero_logjac


@dataclass(frozen=True)
class CompositeTransform(ScalarTransform):
    """Flat, non-empty chain of scalar transforms.

    Attributes:
        transforms: Members in composition order (leftmost applied last)

    Example:
        >>> t = CompositeTransform((Shift(1.0), Exponential()))
        >>> float(t.transform(0.0))  # 1.0 + exp(0.0)
        2.0
    """
    transforms: Tuple[ScalarTransform, ...]

    def __post_init__(self):
        """Validate members and flatten nested composites."""
        members = []
        for t in self.transforms:
            if isinstance(t, CompositeTransform):
                members.extend(t.transforms)
            elif isinstance(t, ScalarTransform):
                members.append(t)
            else:
                raise TypeError(
                    f"CompositeTransform members must be ScalarTransform, "
                    f"got {type(t).__name__}"
                )
        if not members:
            raise ValueError("CompositeTransform requires at least one transform")

        object.__setattr__(self, 'transforms', tuple(members))

    def transform(self, x):
        for t in reversed(self.transforms):
            x = t.transform(x)
        return x

    def transform_and_logjac(self, x):
        logjac = zero_logjac(type(x))
        for t in reversed(self.transforms):
            x, step = t.transform_and_logjac(x)
            logjac = logjac + step
        return x, logjac

    def inverse(self, y):
        for t in self.transforms:
            y = t.inverse(y)
        return y

    def inverse_and_logjac(self, y):
        logjac = zero_logjac(type(y))
        for t in self.transforms:
            y, step = t.inverse_and_logjac(y)
            logjac = logjac + step
        return y, logjac

    def __len__(self) -> int:
        return len(self.transforms)

    def __repr__(self) -> str:
        return " @ ".join(repr(t) for t in self.transforms)


def compose(*transforms: ScalarTransform) -> CompositeTransform:
    """Compose transforms into one flat chain.

    ``compose(f, g, h)`` evaluates as ``f(g(h(x)))`` and equals
    ``(f @ g) @ h`` and ``f @ (g @ h)``.

    Args:
        *transforms: One or more scalar transforms (elementary or composite)

    Returns:
        A single CompositeTransform whose chain concatenates the arguments'

    Raises:
        ValueError: If no transforms are given
    """
    return CompositeTransform(tuple(transforms))
