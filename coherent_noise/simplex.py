# coherent_noise/simplex.py

"""
================================================================================
SIMPLEX NOISE
================================================================================
Gradient noise on a simplex lattice (Ken Perlin, 2001), in the formulation
popularised by Stefan Gustavson with rank-ordered corner selection.

The input point is skewed so that the simplex lattice becomes a hypercube
lattice, the enclosing hypercube is split into simplices by sorting the
fractional offsets, and each of the dimension + 1 corners contributes
(r^2 - d^2)^4 * dot(gradient, offset) inside its radius of influence.

Data Contract:
---------------
- Inputs:
    - perm: A doubled permutation table (int64 array of length 2N).
    - x, y, z, w: Coordinates (floats, or 1D float64 arrays for *_array).
- Outputs:
    - Noise values, empirically within [-1, 1]. Non-finite input gives nan.
- Side Effects: None.
- Invariants: Corner selection is exhaustive and mutually exclusive, so
  points on simplex boundaries resolve to exactly one simplex.
================================================================================
"""

import logging
import math

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .base import NoiseGenerator
from .gradients import grad1, grad2, grad3, grad4
from .permutation import PermutationTable, resolve_permutation
from .utils import lattice_index

_F2 = DEFAULTS.SIMPLEX_SKEW_2D
_G2 = DEFAULTS.SIMPLEX_UNSKEW_2D
_F3 = DEFAULTS.SIMPLEX_SKEW_3D
_G3 = DEFAULTS.SIMPLEX_UNSKEW_3D
_F4 = DEFAULTS.SIMPLEX_SKEW_4D
_G4 = DEFAULTS.SIMPLEX_UNSKEW_4D
_R1 = DEFAULTS.SIMPLEX_RADIUS_SQ_1D
_R = DEFAULTS.SIMPLEX_RADIUS_SQ
_SCALE_1D = DEFAULTS.SIMPLEX_SCALE_1D
_SCALE_2D = DEFAULTS.SIMPLEX_SCALE_2D
_SCALE_3D = DEFAULTS.SIMPLEX_SCALE_3D
_SCALE_4D = DEFAULTS.SIMPLEX_SCALE_4D


@njit
def _falloff(t):
    "t^4 for t > 0, else 0."
    if t < 0.0:
        return 0.0
    t *= t
    return t * t


@njit
def simplex_1d(perm, x):
    if not math.isfinite(x):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    i0 = np.floor(x)
    x0 = x - i0
    x1 = x0 - 1.0

    ii = lattice_index(i0, mask)
    n0 = _falloff(_R1 - x0 * x0) * grad1(perm[ii], x0)
    n1 = _falloff(_R1 - x1 * x1) * grad1(perm[(ii + 1) & mask], x1)

    return _SCALE_1D * (n0 + n1)


@njit
def simplex_2d(perm, x, y):
    if not (math.isfinite(x) and math.isfinite(y)):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    # Skew the input space to find the simplex cell
    s = (x + y) * _F2
    i = np.floor(x + s)
    j = np.floor(y + s)
    t = (i + j) * _G2

    # Distances from the unskewed cell origin
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower triangle (0,0)->(1,0)->(1,1) or upper triangle (0,0)->(0,1)->(1,1)
    if x0 > y0:
        i1 = 1
        j1 = 0
    else:
        i1 = 0
        j1 = 1

    x1 = x0 - i1 + _G2
    y1 = y0 - j1 + _G2
    x2 = x0 - 1.0 + 2.0 * _G2
    y2 = y0 - 1.0 + 2.0 * _G2

    ii = lattice_index(i, mask)
    jj = lattice_index(j, mask)
    gi0 = perm[ii + perm[jj]]
    gi1 = perm[ii + i1 + perm[jj + j1]]
    gi2 = perm[ii + 1 + perm[jj + 1]]

    n0 = _falloff(_R - x0 * x0 - y0 * y0) * grad2(gi0, x0, y0)
    n1 = _falloff(_R - x1 * x1 - y1 * y1) * grad2(gi1, x1, y1)
    n2 = _falloff(_R - x2 * x2 - y2 * y2) * grad2(gi2, x2, y2)

    return _SCALE_2D * (n0 + n1 + n2)


@njit
def simplex_3d(perm, x, y, z):
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    s = (x + y + z) * _F3
    i = np.floor(x + s)
    j = np.floor(y + s)
    k = np.floor(z + s)
    t = (i + j + k) * _G3

    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Second and third corners, from the ordering of x0, y0, z0
    if x0 >= y0:
        if y0 >= z0:    # X Y Z
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
        elif x0 >= z0:  # X Z Y
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
        else:           # Z X Y
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
    else:
        if y0 < z0:     # Z Y X
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
        elif x0 < z0:   # Y Z X
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
        else:           # Y X Z
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

    x1 = x0 - i1 + _G3
    y1 = y0 - j1 + _G3
    z1 = z0 - k1 + _G3
    x2 = x0 - i2 + 2.0 * _G3
    y2 = y0 - j2 + 2.0 * _G3
    z2 = z0 - k2 + 2.0 * _G3
    x3 = x0 - 1.0 + 3.0 * _G3
    y3 = y0 - 1.0 + 3.0 * _G3
    z3 = z0 - 1.0 + 3.0 * _G3

    ii = lattice_index(i, mask)
    jj = lattice_index(j, mask)
    kk = lattice_index(k, mask)
    gi0 = perm[ii + perm[jj + perm[kk]]]
    gi1 = perm[ii + i1 + perm[jj + j1 + perm[kk + k1]]]
    gi2 = perm[ii + i2 + perm[jj + j2 + perm[kk + k2]]]
    gi3 = perm[ii + 1 + perm[jj + 1 + perm[kk + 1]]]

    n0 = _falloff(_R - x0 * x0 - y0 * y0 - z0 * z0) * grad3(gi0, x0, y0, z0)
    n1 = _falloff(_R - x1 * x1 - y1 * y1 - z1 * z1) * grad3(gi1, x1, y1, z1)
    n2 = _falloff(_R - x2 * x2 - y2 * y2 - z2 * z2) * grad3(gi2, x2, y2, z2)
    n3 = _falloff(_R - x3 * x3 - y3 * y3 - z3 * z3) * grad3(gi3, x3, y3, z3)

    return _SCALE_3D * (n0 + n1 + n2 + n3)


@njit
def simplex_4d(perm, x, y, z, w):
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z) and math.isfinite(w)):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    s = (x + y + z + w) * _F4
    i = np.floor(x + s)
    j = np.floor(y + s)
    k = np.floor(z + s)
    l = np.floor(w + s)
    t = (i + j + k + l) * _G4

    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    # Rank each axis by how many other offsets it exceeds. Ties go to the
    # later axis, so the ranks are always a permutation of 0..3.
    rank_x = 0
    rank_y = 0
    rank_z = 0
    rank_w = 0
    if x0 > y0:
        rank_x += 1
    else:
        rank_y += 1
    if x0 > z0:
        rank_x += 1
    else:
        rank_z += 1
    if x0 > w0:
        rank_x += 1
    else:
        rank_w += 1
    if y0 > z0:
        rank_y += 1
    else:
        rank_z += 1
    if y0 > w0:
        rank_y += 1
    else:
        rank_w += 1
    if z0 > w0:
        rank_z += 1
    else:
        rank_w += 1

    # Corner n steps along every axis whose rank is >= 4 - n
    i1 = 1 if rank_x >= 3 else 0
    j1 = 1 if rank_y >= 3 else 0
    k1 = 1 if rank_z >= 3 else 0
    l1 = 1 if rank_w >= 3 else 0
    i2 = 1 if rank_x >= 2 else 0
    j2 = 1 if rank_y >= 2 else 0
    k2 = 1 if rank_z >= 2 else 0
    l2 = 1 if rank_w >= 2 else 0
    i3 = 1 if rank_x >= 1 else 0
    j3 = 1 if rank_y >= 1 else 0
    k3 = 1 if rank_z >= 1 else 0
    l3 = 1 if rank_w >= 1 else 0

    x1 = x0 - i1 + _G4
    y1 = y0 - j1 + _G4
    z1 = z0 - k1 + _G4
    w1 = w0 - l1 + _G4
    x2 = x0 - i2 + 2.0 * _G4
    y2 = y0 - j2 + 2.0 * _G4
    z2 = z0 - k2 + 2.0 * _G4
    w2 = w0 - l2 + 2.0 * _G4
    x3 = x0 - i3 + 3.0 * _G4
    y3 = y0 - j3 + 3.0 * _G4
    z3 = z0 - k3 + 3.0 * _G4
    w3 = w0 - l3 + 3.0 * _G4
    x4 = x0 - 1.0 + 4.0 * _G4
    y4 = y0 - 1.0 + 4.0 * _G4
    z4 = z0 - 1.0 + 4.0 * _G4
    w4 = w0 - 1.0 + 4.0 * _G4

    ii = lattice_index(i, mask)
    jj = lattice_index(j, mask)
    kk = lattice_index(k, mask)
    ll = lattice_index(l, mask)
    gi0 = perm[ii + perm[jj + perm[kk + perm[ll]]]]
    gi1 = perm[ii + i1 + perm[jj + j1 + perm[kk + k1 + perm[ll + l1]]]]
    gi2 = perm[ii + i2 + perm[jj + j2 + perm[kk + k2 + perm[ll + l2]]]]
    gi3 = perm[ii + i3 + perm[jj + j3 + perm[kk + k3 + perm[ll + l3]]]]
    gi4 = perm[ii + 1 + perm[jj + 1 + perm[kk + 1 + perm[ll + 1]]]]

    n0 = _falloff(_R - x0 * x0 - y0 * y0 - z0 * z0 - w0 * w0) * grad4(gi0, x0, y0, z0, w0)
    n1 = _falloff(_R - x1 * x1 - y1 * y1 - z1 * z1 - w1 * w1) * grad4(gi1, x1, y1, z1, w1)
    n2 = _falloff(_R - x2 * x2 - y2 * y2 - z2 * z2 - w2 * w2) * grad4(gi2, x2, y2, z2, w2)
    n3 = _falloff(_R - x3 * x3 - y3 * y3 - z3 * z3 - w3 * w3) * grad4(gi3, x3, y3, z3, w3)
    n4 = _falloff(_R - x4 * x4 - y4 * y4 - z4 * z4 - w4 * w4) * grad4(gi4, x4, y4, z4, w4)

    return _SCALE_4D * (n0 + n1 + n2 + n3 + n4)


@njit
def simplex_1d_array(perm, x):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = simplex_1d(perm, x[n])
    return out

@njit
def simplex_2d_array(perm, x, y):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = simplex_2d(perm, x[n], y[n])
    return out

@njit
def simplex_3d_array(perm, x, y, z):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = simplex_3d(perm, x[n], y[n], z[n])
    return out

@njit
def simplex_4d_array(perm, x, y, z, w):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = simplex_4d(perm, x[n], y[n], z[n], w[n])
    return out


class Simplex(NoiseGenerator):
    """
    Simplex noise generator for 1D to 4D input.

    Cheaper than Perlin noise in higher dimensions (dimension + 1 corners
    instead of 2^dimension) and free of axis-aligned artifacts.
    """
    dimensions = (1, 2, 3, 4)

    _ARRAY_KERNELS = {
        1: simplex_1d_array,
        2: simplex_2d_array,
        3: simplex_3d_array,
        4: simplex_4d_array,
    }

    def __init__(self, seed=None, config: dict = None, logger: logging.Logger = None,
                 permutation_table: PermutationTable = None):
        """
        Initializes the generator and its permutation table.

        Args:
            seed: None (entropy), an int, a SeedSequence or a numpy Generator.
                Falls back to config['seed'] when None.
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.
            permutation_table (PermutationTable, optional): A pre-computed
                table. If given, `seed` is ignored.
        """
        super().__init__(config, logger)
        if seed is None:
            seed = self.user_config.get('seed')
        self.seed = seed
        self.settings['permutation_size'] = self.user_config.get(
            'permutation_size', DEFAULTS.DEFAULT_PERMUTATION_SIZE)

        self.permutation = resolve_permutation(seed, self.settings, permutation_table, self.logger)
        self._perm = self.permutation.table
        self.logger.debug(f"Simplex initialized (table size {self.permutation.size}).")

    @classmethod
    def from_rng(cls, rng: np.random.Generator, config: dict = None,
                 logger: logging.Logger = None) -> "Simplex":
        """Initializes a new instance by drawing the shuffle from `rng`."""
        return cls(seed=rng, config=config, logger=logger)

    def noise1d(self, x: float) -> float:
        return simplex_1d(self._perm, float(x))

    def noise2d(self, x: float, y: float) -> float:
        """Returns the 2D simplex noise value at (x, y), within [-1, 1]."""
        return simplex_2d(self._perm, float(x), float(y))

    def noise3d(self, x: float, y: float, z: float) -> float:
        """Returns the 3D simplex noise value at (x, y, z), within [-1, 1]."""
        return simplex_3d(self._perm, float(x), float(y), float(z))

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        """Returns the 4D simplex noise value at (x, y, z, w), within [-1, 1]."""
        return simplex_4d(self._perm, float(x), float(y), float(z), float(w))

    def _sample_flat(self, dimension: int, flat: list) -> np.ndarray:
        return self._ARRAY_KERNELS[dimension](self._perm, *flat)

    def __eq__(self, other):
        if not isinstance(other, Simplex):
            return NotImplemented
        return self.permutation == other.permutation

    __hash__ = None
