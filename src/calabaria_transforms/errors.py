"""Exceptions raised when building transforms.

All errors derive from ValueError so that code validating parameters with
``except ValueError`` keeps working.
"""


class TransformDomainError(ValueError):
    """A transform parameter lies outside its valid domain (e.g. Scale(0))."""


class InvalidIntervalError(TransformDomainError):
    """Interval boundaries do not describe an open interval."""


class EmptyIntervalError(InvalidIntervalError):
    """Interval boundaries are equal, so the interval has no interior."""
