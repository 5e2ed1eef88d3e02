# coherent_noise/gradients.py

"""
================================================================================
GRADIENT TABLES
================================================================================
Constant gradient directions for the lattice noise generators, plus the
hashed gradient-dot-offset kernels used in the inner loops.

Data Contract:
---------------
- Inputs:
    - hash_val: A non-negative int produced by permutation table lookups.
    - x, y, z, w: Offsets from a lattice corner to the sample point.
- Outputs:
    - The dot product of the selected gradient and the offset.
- Side Effects: None. The tables are module constants and are read-only.
================================================================================
"""

import numpy as np
from numba import njit

from .errors import UnsupportedDimensionError

# 1D "gradients" are slopes 1..8 with either sign.
GRADIENTS_1D = np.array(
    [1, 2, 3, 4, 5, 6, 7, 8, -1, -2, -3, -4, -5, -6, -7, -8],
    dtype=np.float64,
)

# 8-direction 2D gradient vectors
GRADIENTS_2D = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],  # Diagonal gradients
    [1, 0], [-1, 0], [0, 1], [0, -1]      # Axis-aligned gradients
], dtype=np.float64)

# Midpoints of the 12 cube edges
GRADIENTS_3D = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.float64)

# Midpoints of the 32 edges of a tesseract
GRADIENTS_4D = np.array([
    [0, 1, 1, 1], [0, 1, 1, -1], [0, 1, -1, 1], [0, 1, -1, -1],
    [0, -1, 1, 1], [0, -1, 1, -1], [0, -1, -1, 1], [0, -1, -1, -1],
    [1, 0, 1, 1], [1, 0, 1, -1], [1, 0, -1, 1], [1, 0, -1, -1],
    [-1, 0, 1, 1], [-1, 0, 1, -1], [-1, 0, -1, 1], [-1, 0, -1, -1],
    [1, 1, 0, 1], [1, 1, 0, -1], [1, -1, 0, 1], [1, -1, 0, -1],
    [-1, 1, 0, 1], [-1, 1, 0, -1], [-1, -1, 0, 1], [-1, -1, 0, -1],
    [1, 1, 1, 0], [1, 1, -1, 0], [1, -1, 1, 0], [1, -1, -1, 0],
    [-1, 1, 1, 0], [-1, 1, -1, 0], [-1, -1, 1, 0], [-1, -1, -1, 0],
], dtype=np.float64)

for _table in (GRADIENTS_1D, GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D):
    _table.flags.writeable = False

GRADIENT_TABLES = {
    1: GRADIENTS_1D,
    2: GRADIENTS_2D,
    3: GRADIENTS_3D,
    4: GRADIENTS_4D,
}


def gradient(dimension: int, hash_index: int) -> np.ndarray:
    """
    Returns the gradient a hash selects for the given dimensionality.

    Raises:
        UnsupportedDimensionError: If no table exists for `dimension`.
    """
    table = GRADIENT_TABLES.get(dimension)
    if table is None:
        raise UnsupportedDimensionError("gradient table", dimension)
    return table[int(hash_index) % len(table)]


def dot(gradient_vector, offsets) -> float:
    """Dot product between a gradient and a corner-to-sample offset."""
    g = np.atleast_1d(np.asarray(gradient_vector, dtype=np.float64))
    d = np.atleast_1d(np.asarray(offsets, dtype=np.float64))
    if g.shape != d.shape:
        raise ValueError(f"Gradient {g.shape} and offset {d.shape} have different dimensions")
    return float(np.dot(g, d))


@njit
def grad1(hash_val, x):
    """Computes gradient * offset for 1D noise."""
    return GRADIENTS_1D[hash_val & 15] * x

@njit
def grad2(hash_val, x, y):
    """Computes the dot product between a 2D gradient and the offset."""
    g = GRADIENTS_2D[hash_val & 7]
    # Use explicit indexing for Numba compatibility
    return g[0] * x + g[1] * y

@njit
def grad3(hash_val, x, y, z):
    """Computes the dot product between a 3D gradient and the offset."""
    g = GRADIENTS_3D[hash_val % 12]
    return g[0] * x + g[1] * y + g[2] * z

@njit
def grad4(hash_val, x, y, z, w):
    """Computes the dot product between a 4D gradient and the offset."""
    g = GRADIENTS_4D[hash_val & 31]
    return g[0] * x + g[1] * y + g[2] * z + g[3] * w
