"""Shared pytest fixtures for the vectormath test-suite."""
import numpy as np
import pytest


@pytest.fixture
def rng():
    """Deterministic generator so randomized geometry tests are reproducible."""
    return np.random.default_rng(20260306)
