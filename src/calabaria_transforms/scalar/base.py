"""Capability contract shared by all scalar transforms.

A scalar transform is a bijection ℝ → support, where the support is an open
interval (possibly unbounded). Besides the forward and inverse maps, every
transform reports the log of the absolute derivative ("log-Jacobian") so that
densities can be corrected under change of variables:

- ``transform_and_logjac(x) == (transform(x), log|f'(x)|)``
- ``inverse_and_logjac(y) == (inverse(y), -log|f'(inverse(y))|)``

Transforms are immutable values. They compose with ``@`` in mathematical
order: ``(f @ g).transform(x) == f.transform(g.transform(x))``.
"""

from abc import ABC, abstractmethod
from typing import Any, MutableSequence, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np


@runtime_checkable
class Transform(Protocol):
    """Protocol for scalar transforms.

    Anything implementing these operations can be evaluated by consumers
    such as optimizers or samplers working in unconstrained space.
    """

    @property
    def dimension(self) -> int:
        """Number of unconstrained reals consumed (always 1 for scalars)."""
        ...

    def transform(self, x: Any) -> Any:
        """Map an unconstrained value into the support."""
        ...

    def transform_and_logjac(self, x: Any) -> Tuple[Any, Any]:
        """Map ``x`` and return ``(y, log|dy/dx|)``."""
        ...

    def inverse(self, y: Any) -> Any:
        """Map a value in the support back to the real line."""
        ...

    def inverse_and_logjac(self, y: Any) -> Tuple[Any, Any]:
        """Map ``y`` back and return ``(x, log|dx/dy|)``."""
        ...


class ScalarTransform(ABC):
    """Base class for elementary and composite scalar transforms.

    Subclasses define the four evaluation methods; the buffer interface and
    composition operator are shared.
    """

    @property
    def dimension(self) -> int:
        return 1

    @abstractmethod
    def transform(self, x):
        ...

    @abstractmethod
    def transform_and_logjac(self, x):
        ...

    @abstractmethod
    def inverse(self, y):
        ...

    @abstractmethod
    def inverse_and_logjac(self, y):
        ...

    def transform_at(self, buffer: Sequence, index: int) -> Tuple[Any, int]:
        """Transform ``buffer[index]`` without computing the log-Jacobian.

        Args:
            buffer: Flat sequence of unconstrained values
            index: Read position

        Returns:
            ``(value, next_index)`` where ``next_index == index + 1``
        """
        return self.transform(buffer[index]), index + 1

    def transform_and_logjac_at(self, buffer: Sequence, index: int) -> Tuple[Any, Any, int]:
        """Transform ``buffer[index]`` and compute its log-Jacobian.

        Returns:
            ``(value, logjac, next_index)`` where ``next_index == index + 1``
        """
        y, logjac = self.transform_and_logjac(buffer[index])
        return y, logjac, index + 1

    def inverse_at(self, buffer: MutableSequence, index: int, y) -> int:
        """Write ``inverse(y)`` into ``buffer[index]`` and return ``index + 1``."""
        buffer[index] = self.inverse(y)
        return index + 1

    def inverse_dtype(self, dtype) -> np.dtype:
        """Numpy dtype produced by :meth:`inverse` for inputs of ``dtype``.

        Used to allocate buffers before calling :meth:`inverse_at`.
        """
        dtype = np.dtype(dtype)
        with np.errstate(all="ignore"):
            probe = dtype.type(self.transform(dtype.type(0)))
            return np.result_type(self.inverse(probe))

    def __matmul__(self, other: "ScalarTransform") -> "ScalarTransform":
        """Compose: ``(self @ other)(x) == self(other(x))``."""
        if not isinstance(other, ScalarTransform):
            return NotImplemented
        from .composite import compose
        return compose(self, other)
