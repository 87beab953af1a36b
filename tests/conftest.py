"""Shared test fixtures for tetradie."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from tetradie.construction import DieAssembly


@pytest.fixture
def regular_vertices():
    """A regular tetrahedron centred on the origin, alternate cube corners."""
    return np.array([
        [1.0, 1.0, 1.0],
        [1.0, -1.0, -1.0],
        [-1.0, 1.0, -1.0],
        [-1.0, -1.0, 1.0],
    ])


@pytest.fixture
def irregular_vertices():
    """A lopsided tetrahedron whose centroid is off the origin."""
    return np.array([
        [0.0, 0.0, 0.0],
        [2.0, 0.0, 0.0],
        [0.3, 3.0, 0.0],
        [0.5, 0.4, 1.5],
    ])


@pytest.fixture
def built_die(regular_vertices):
    """A die built with default style from the regular tetrahedron."""
    die = DieAssembly()
    die.build(regular_vertices)
    return die
