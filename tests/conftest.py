"""Shared fixtures for StringUI tests."""

import numpy as np
import pytest

from params import Params


@pytest.fixture()
def params():
    """Default knobs with a fixed seed so layouts repeat."""
    p = Params()
    p.seed = 1234
    return p


@pytest.fixture()
def rng():
    return np.random.default_rng(0)
