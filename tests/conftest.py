import numpy as np
import pytest


@pytest.fixture
def two_blobs():
    """Two well separated Gaussian clusters labelled 1 and 2."""
    rng = np.random.default_rng(0)
    X = np.vstack([rng.normal(-2.0, 0.5, (20, 2)), rng.normal(2.0, 0.5, (20, 2))])
    Y = np.repeat([1.0, 2.0], 20)
    return X, Y


@pytest.fixture
def three_blobs():
    rng = np.random.default_rng(1)
    centers = [(-3.0, 0.0), (3.0, 0.0), (0.0, 4.0)]
    X = np.vstack([rng.normal(c, 0.5, (15, 2)) for c in centers])
    Y = np.repeat([1.0, 2.0, 3.0], 15)
    return X, Y


@pytest.fixture
def ones_data():
    return np.ones((10, 2)), np.ones((10, 1))
