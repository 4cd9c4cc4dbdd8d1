import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def unit_steps():
    return [[0, 0, 0], [1, 0, 0], [1, 1, 0], [2, 1, 0]]


@pytest.fixture
def helix():
    # noisy 3D helix, 200 samples
    rng = np.random.default_rng(42)
    s = np.linspace(0, 4 * np.pi, 200)
    points = np.column_stack([10 * np.cos(s), 10 * np.sin(s), 2 * s])
    return points + rng.normal(0.0, 0.05, size=points.shape)


@pytest.fixture
def circle():
    rng = np.random.default_rng(1)
    s = np.linspace(0, 1.5 * np.pi, 300)
    points = np.column_stack([10 * np.cos(s), 10 * np.sin(s)])
    return points + rng.normal(0.0, 0.05, size=points.shape)
