"""
Tests for the Checkerboard generator.
"""

import numpy as np
import pytest

from coherent_noise import Checkerboard


def test_adjacent_cells_alternate(checkerboard):
    assert checkerboard.noise2d(0.0, 0.0) != checkerboard.noise2d(1.0, 0.0)
    assert checkerboard.noise2d(0.0, 0.0) != checkerboard.noise2d(0.0, 1.0)
    assert checkerboard.noise2d(0.0, 0.0) == checkerboard.noise2d(1.0, 1.0)


def test_period_two(checkerboard):
    assert checkerboard.noise2d(0.0, 0.0) == checkerboard.noise2d(2.0, 0.0)
    assert checkerboard.noise2d(0.25, 0.75) == checkerboard.noise2d(4.25, -1.25)


def test_default_values(checkerboard):
    assert checkerboard.noise2d(0.5, 0.5) == 1.0
    assert checkerboard.noise2d(1.5, 0.5) == -1.0


def test_negative_coordinates_floor_downward(checkerboard):
    # floor(-0.5) is -1, so (-0.5, 0.5) sits in an odd cell.
    assert checkerboard.noise2d(-0.5, 0.5) == -1.0
    assert checkerboard.noise2d(-0.5, -0.5) == 1.0
    assert checkerboard.noise2d(-1.0, 0.0) == -1.0


@pytest.mark.parametrize("coords, expected", [
    ((0.5,), 1.0),
    ((1.5,), -1.0),
    ((-0.1,), -1.0),
    ((0.5, 1.5, 0.5), -1.0),
    ((1.5, 1.5, 0.5), 1.0),
    ((0.1, 0.1, 0.1, 0.1), 1.0),
    ((0.1, 0.1, 0.1, 1.1), -1.0),
    ((3.9, -2.1, 7.0, 1.5), 1.0),
])
def test_all_dimensions(checkerboard, coords, expected):
    assert checkerboard.noise(*coords) == expected


def test_custom_values():
    gen = Checkerboard(config={'on_value': 0.75, 'off_value': 0.25})
    assert gen.noise2d(0.0, 0.0) == 0.75
    assert gen.noise2d(1.0, 0.0) == 0.25
    assert gen.settings['on_value'] == 0.75


def test_seed_is_ignored():
    assert Checkerboard(seed=1) == Checkerboard(seed=2)
    assert Checkerboard(seed=1).noise2d(3.5, 0.5) == Checkerboard(seed=2).noise2d(3.5, 0.5)


def test_equality_uses_values():
    assert Checkerboard() != Checkerboard(config={'off_value': 0.0})


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_non_finite_input_gives_nan(checkerboard, bad):
    assert np.isnan(checkerboard.noise2d(bad, 0.0))
    assert np.isnan(checkerboard.noise4d(0.0, 0.0, 0.0, bad))


def test_sample_matches_scalar(checkerboard, random_points):
    for dimension in range(1, 5):
        pts = random_points[:, :dimension]
        expected = [checkerboard.noise(*p) for p in pts]
        np.testing.assert_array_equal(checkerboard.sample(*pts.T), expected)


def test_sample_handles_nan(checkerboard):
    values = checkerboard.sample([0.5, np.nan, 1.5], [0.5, 0.5, np.inf])
    assert values[0] == 1.0
    assert np.isnan(values[1])
    assert np.isnan(values[2])


def test_sample_grid_shape(checkerboard):
    xv, yv = np.meshgrid(np.arange(4) + 0.5, np.arange(3) + 0.5)
    grid = checkerboard.sample(xv, yv)
    assert grid.shape == (3, 4)
    np.testing.assert_array_equal(grid[0], [1.0, -1.0, 1.0, -1.0])
    np.testing.assert_array_equal(grid[1], [-1.0, 1.0, -1.0, 1.0])
