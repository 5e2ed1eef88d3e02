# coherent_noise/utils.py

"""
Small scalar helpers shared by the lattice kernels. All of them are
JIT-compiled with Numba so they inline into the callers.
"""

import numpy as np
from numba import njit


@njit
def lattice_index(cell, mask):
    """
    Wraps a floored coordinate (still a float) into [0, mask].

    The remainder is taken in float space before the int cast, so any finite
    coordinate maps to a valid table index. mask + 1 must be a power of two.
    """
    return np.int64(np.fmod(cell, mask + 1.0)) & mask

@njit
def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)

@njit
def lerp(t, a, b):
    "Linear interpolation."
    return a + t * (b - a)
