"""
Pytest configuration and fixtures for the coherent_noise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker("integration")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def random_points():
    """Provide reproducible random coordinates, one column per axis."""
    rng = np.random.default_rng(42)
    return rng.uniform(-64.0, 64.0, size=(4000, 4))


@pytest.fixture(scope="session")
def large_random_points():
    """Provide a larger coordinate sample for range checks."""
    rng = np.random.default_rng(1337)
    return rng.uniform(-256.0, 256.0, size=(20000, 4))


@pytest.fixture
def simplex():
    from coherent_noise import Simplex
    return Simplex(seed=1337)


@pytest.fixture
def perlin():
    from coherent_noise import Perlin
    return Perlin(seed=1337)


@pytest.fixture
def checkerboard():
    from coherent_noise import Checkerboard
    return Checkerboard()


@pytest.fixture(params=["simplex", "perlin"])
def gradient_generator(request):
    """Each seeded gradient-noise generator in turn."""
    return request.getfixturevalue(request.param)


@pytest.fixture(params=["simplex", "perlin", "checkerboard"])
def any_generator(request):
    """Each generator variant in turn."""
    return request.getfixturevalue(request.param)
