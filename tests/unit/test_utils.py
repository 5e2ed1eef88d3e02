"""
Tests for the scalar interpolation helpers.
"""

import math

import pytest

from coherent_noise.utils import fade, lattice_index, lerp


@pytest.mark.parametrize("cell,expected", [
    (0.0, 0), (1.0, 1), (255.0, 255), (256.0, 0), (-1.0, 255), (-256.0, 0), (-257.0, 255),
    (1e19, 0), (2.0**70 + 2.0**18, 0), (-1e300, int(math.fmod(-1e300, 256.0)) & 255),
])
def test_lattice_index_wraps_into_table(cell, expected):
    assert lattice_index(cell, 255) == expected


def test_lattice_index_small_table():
    assert lattice_index(-3.0, 15) == 13
    assert lattice_index(17.0, 15) == 1
    assert 0 <= lattice_index(-9.3e18, 15) <= 15


def test_fade_endpoints_and_midpoint():
    assert fade(0.0) == 0.0
    assert fade(1.0) == pytest.approx(1.0)
    assert fade(0.5) == pytest.approx(0.5)


def test_fade_has_flat_ends():
    """First derivative vanishes at both ends."""
    h = 1e-6
    assert (fade(h) - fade(0.0)) / h == pytest.approx(0.0, abs=1e-6)
    assert (fade(1.0) - fade(1.0 - h)) / h == pytest.approx(0.0, abs=1e-6)


def test_lerp():
    assert lerp(0.0, 2.0, 6.0) == 2.0
    assert lerp(1.0, 2.0, 6.0) == 6.0
    assert lerp(0.25, 2.0, 6.0) == 3.0
