# coherent_noise/perlin.py

"""
================================================================================
PERLIN NOISE
================================================================================
Improved Perlin noise (Ken Perlin, 2002) on the axis-aligned integer lattice.

Each of the 2^dimension corners of the cell around the sample point hashes
its integer coordinates through the permutation table to pick a gradient,
and the gradient-dot-offset values are blended with the quintic fade curve.

Data Contract:
---------------
- Inputs:
    - perm: A doubled permutation table (int64 array of length 2N).
    - x, y, z, w: Coordinates (floats, or 1D float64 arrays for *_array).
- Outputs:
    - Noise values in [-1, 1]. Non-finite input gives nan.
- Side Effects: None.
- Invariants: The value at every integer lattice point is exactly 0.
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
from .utils import fade, lattice_index, lerp

_SCALE_1D = DEFAULTS.PERLIN_SCALE_1D
_SCALE_2D = DEFAULTS.PERLIN_SCALE_2D
_SCALE_3D = DEFAULTS.PERLIN_SCALE_3D
_SCALE_4D = DEFAULTS.PERLIN_SCALE_4D


@njit
def perlin_1d(perm, x):
    if not math.isfinite(x):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    cx = np.floor(x)
    xf = x - cx
    xi = lattice_index(cx, mask)
    u = fade(xf)

    g0 = grad1(perm[xi], xf)
    g1 = grad1(perm[(xi + 1) & mask], xf - 1.0)

    return _SCALE_1D * lerp(u, g0, g1)


@njit
def perlin_2d(perm, x, y):
    if not (math.isfinite(x) and math.isfinite(y)):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    cx = np.floor(x)
    cy = np.floor(y)
    xf = x - cx
    xi = lattice_index(cx, mask)
    yf = y - cy
    yi = lattice_index(cy, mask)

    u = fade(xf)
    v = fade(yf)

    px0 = xi
    px1 = (xi + 1) & mask
    py0 = yi
    py1 = (yi + 1) & mask

    idx00 = perm[perm[px0] + py0]
    idx01 = perm[perm[px0] + py1]
    idx10 = perm[perm[px1] + py0]
    idx11 = perm[perm[px1] + py1]

    g00 = grad2(idx00, xf, yf)
    g01 = grad2(idx01, xf, yf - 1.0)
    g10 = grad2(idx10, xf - 1.0, yf)
    g11 = grad2(idx11, xf - 1.0, yf - 1.0)

    x1 = lerp(u, g00, g10)
    x2 = lerp(u, g01, g11)
    return _SCALE_2D * lerp(v, x1, x2)


@njit
def perlin_3d(perm, x, y, z):
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    cx = np.floor(x)
    cy = np.floor(y)
    cz = np.floor(z)
    xf = x - cx
    xi = lattice_index(cx, mask)
    yf = y - cy
    yi = lattice_index(cy, mask)
    zf = z - cz
    zi = lattice_index(cz, mask)

    u = fade(xf)
    v = fade(yf)
    s = fade(zf)

    px0 = xi
    px1 = (xi + 1) & mask
    py0 = yi
    py1 = (yi + 1) & mask
    pz0 = zi
    pz1 = (zi + 1) & mask

    a0 = perm[px0] + py0
    a1 = perm[px0] + py1
    b0 = perm[px1] + py0
    b1 = perm[px1] + py1

    g000 = grad3(perm[perm[a0] + pz0], xf, yf, zf)
    g001 = grad3(perm[perm[a0] + pz1], xf, yf, zf - 1.0)
    g010 = grad3(perm[perm[a1] + pz0], xf, yf - 1.0, zf)
    g011 = grad3(perm[perm[a1] + pz1], xf, yf - 1.0, zf - 1.0)
    g100 = grad3(perm[perm[b0] + pz0], xf - 1.0, yf, zf)
    g101 = grad3(perm[perm[b0] + pz1], xf - 1.0, yf, zf - 1.0)
    g110 = grad3(perm[perm[b1] + pz0], xf - 1.0, yf - 1.0, zf)
    g111 = grad3(perm[perm[b1] + pz1], xf - 1.0, yf - 1.0, zf - 1.0)

    # Blend along x, then y, then z
    x00 = lerp(u, g000, g100)
    x10 = lerp(u, g010, g110)
    x01 = lerp(u, g001, g101)
    x11 = lerp(u, g011, g111)
    y0 = lerp(v, x00, x10)
    y1 = lerp(v, x01, x11)
    return _SCALE_3D * lerp(s, y0, y1)


@njit
def perlin_4d(perm, x, y, z, w):
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z) and math.isfinite(w)):
        return np.nan
    mask = perm.shape[0] // 2 - 1

    cx = np.floor(x)
    cy = np.floor(y)
    cz = np.floor(z)
    cw = np.floor(w)
    xf = x - cx
    xi = lattice_index(cx, mask)
    yf = y - cy
    yi = lattice_index(cy, mask)
    zf = z - cz
    zi = lattice_index(cz, mask)
    wf = w - cw
    wi = lattice_index(cw, mask)

    fx = fade(xf)
    fy = fade(yf)
    fz = fade(zf)
    fw = fade(wf)

    # 16 corners, blended one axis at a time. Bit 0 of the corner index is
    # the x step, bit 1 the y step, bit 2 the z step, bit 3 the w step.
    corners = np.empty(16)
    for c in range(16):
        dx = c & 1
        dy = (c >> 1) & 1
        dz = (c >> 2) & 1
        dw = (c >> 3) & 1
        h = perm[perm[perm[perm[(xi + dx) & mask] + ((yi + dy) & mask)] + ((zi + dz) & mask)] + ((wi + dw) & mask)]
        corners[c] = grad4(h, xf - dx, yf - dy, zf - dz, wf - dw)

    for c in range(8):
        corners[c] = lerp(fx, corners[2 * c], corners[2 * c + 1])
    for c in range(4):
        corners[c] = lerp(fy, corners[2 * c], corners[2 * c + 1])
    for c in range(2):
        corners[c] = lerp(fz, corners[2 * c], corners[2 * c + 1])
    return _SCALE_4D * lerp(fw, corners[0], corners[1])


@njit
def perlin_1d_array(perm, x):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = perlin_1d(perm, x[n])
    return out

@njit
def perlin_2d_array(perm, x, y):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = perlin_2d(perm, x[n], y[n])
    return out

@njit
def perlin_3d_array(perm, x, y, z):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = perlin_3d(perm, x[n], y[n], z[n])
    return out

@njit
def perlin_4d_array(perm, x, y, z, w):
    out = np.empty(x.shape[0])
    for n in range(x.shape[0]):
        out[n] = perlin_4d(perm, x[n], y[n], z[n], w[n])
    return out


class Perlin(NoiseGenerator):
    """
    Improved Perlin noise generator for 1D to 4D input.
    """
    dimensions = (1, 2, 3, 4)

    _ARRAY_KERNELS = {
        1: perlin_1d_array,
        2: perlin_2d_array,
        3: perlin_3d_array,
        4: perlin_4d_array,
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
        self.logger.debug(f"Perlin initialized (table size {self.permutation.size}).")

    @classmethod
    def from_rng(cls, rng: np.random.Generator, config: dict = None,
                 logger: logging.Logger = None) -> "Perlin":
        """Initializes a new instance by drawing the shuffle from `rng`."""
        return cls(seed=rng, config=config, logger=logger)

    def noise1d(self, x: float) -> float:
        return perlin_1d(self._perm, float(x))

    def noise2d(self, x: float, y: float) -> float:
        """Returns the 2D Perlin noise value at (x, y), within [-1, 1]."""
        return perlin_2d(self._perm, float(x), float(y))

    def noise3d(self, x: float, y: float, z: float) -> float:
        return perlin_3d(self._perm, float(x), float(y), float(z))

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        return perlin_4d(self._perm, float(x), float(y), float(z), float(w))

    def _sample_flat(self, dimension: int, flat: list) -> np.ndarray:
        return self._ARRAY_KERNELS[dimension](self._perm, *flat)

    def __eq__(self, other):
        if not isinstance(other, Perlin):
            return NotImplemented
        return self.permutation == other.permutation

    __hash__ = None
