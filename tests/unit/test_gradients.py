"""
Tests for the constant gradient tables and the hashed dot-product kernels.
"""

import numpy as np
import pytest

from coherent_noise.errors import UnsupportedDimensionError
from coherent_noise.gradients import (
    GRADIENT_TABLES,
    GRADIENTS_1D,
    GRADIENTS_2D,
    GRADIENTS_3D,
    GRADIENTS_4D,
    dot,
    grad1,
    grad2,
    grad3,
    grad4,
    gradient,
)


def test_table_shapes():
    assert GRADIENTS_1D.shape == (16,)
    assert GRADIENTS_2D.shape == (8, 2)
    assert GRADIENTS_3D.shape == (12, 3)
    assert GRADIENTS_4D.shape == (32, 4)


def test_tables_are_unique_and_symmetric():
    """Every table holds distinct vectors and is closed under negation."""
    for dimension in (2, 3, 4):
        table = GRADIENT_TABLES[dimension]
        rows = {tuple(v) for v in table}
        assert len(rows) == len(table)
        assert {tuple(-v) for v in table} == rows


def test_3d_and_4d_gradients_are_edge_midpoints():
    assert np.allclose(np.linalg.norm(GRADIENTS_3D, axis=1), np.sqrt(2.0))
    assert np.allclose(np.linalg.norm(GRADIENTS_4D, axis=1), np.sqrt(3.0))
    assert np.all(np.sum(GRADIENTS_3D == 0, axis=1) == 1)
    assert np.all(np.sum(GRADIENTS_4D == 0, axis=1) == 1)


def test_tables_are_read_only():
    with pytest.raises(ValueError):
        GRADIENTS_2D[0, 0] = 5.0


def test_gradient_wraps_hash():
    assert np.array_equal(gradient(3, 0), GRADIENTS_3D[0])
    assert np.array_equal(gradient(3, 12), GRADIENTS_3D[0])
    assert np.array_equal(gradient(2, 13), GRADIENTS_2D[5])
    assert np.array_equal(gradient(4, 33), GRADIENTS_4D[1])


@pytest.mark.parametrize("dimension", [0, 5])
def test_gradient_unsupported_dimension(dimension):
    with pytest.raises(UnsupportedDimensionError):
        gradient(dimension, 0)


def test_dot():
    assert dot([1, 1, 0], [0.5, 0.25, 9.0]) == pytest.approx(0.75)
    assert dot(3.0, 0.5) == pytest.approx(1.5)
    with pytest.raises(ValueError):
        dot([1, 0], [1, 2, 3])


def test_grad_kernels_match_tables():
    """The compiled kernels pick the same gradient the lookup helper does."""
    offsets = (0.3, -0.7, 0.11, 0.9)
    for h in range(256):
        assert grad1(h, offsets[0]) == pytest.approx(dot(gradient(1, h & 15), offsets[:1]))
        assert grad2(h, *offsets[:2]) == pytest.approx(dot(gradient(2, h & 7), offsets[:2]))
        assert grad3(h, *offsets[:3]) == pytest.approx(dot(gradient(3, h), offsets[:3]))
        assert grad4(h, *offsets) == pytest.approx(dot(gradient(4, h), offsets))
