"""Calabaria-Transforms: scalar bijections with log-Jacobians.

This package maps unconstrained reals onto bounded and half-bounded supports
and back, reporting the log-Jacobian needed for change-of-variables
corrections in samplers and optimizers.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
