"""Shared fixtures for transform tests."""

import pytest

from calabaria_transforms import (
    Identity,
    Exponential,
    Logistic,
    Shift,
    Scale,
    Negate,
    INFINITY,
    interval_transform,
    as_negative_real,
)


# Every elementary transform plus the chains the dispatcher builds
TRANSFORM_CASES = {
    "identity": Identity(),
    "exponential": Exponential(),
    "logistic": Logistic(),
    "shift": Shift(1.5),
    "scale": Scale(2.5),
    "negate": Negate(),
    "negative_real": as_negative_real,
    "lower_bounded": interval_transform(-3.0, INFINITY),
    "upper_bounded": interval_transform(-INFINITY, 4.0),
    "bounded": interval_transform(2.0, 5.0),
}


@pytest.fixture(scope="session", params=sorted(TRANSFORM_CASES), ids=sorted(TRANSFORM_CASES))
def any_transform(request):
    """Each elementary and composite transform in turn."""
    return TRANSFORM_CASES[request.param]
