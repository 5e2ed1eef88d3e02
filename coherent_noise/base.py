# coherent_noise/base.py

"""
================================================================================
NOISE GENERATOR INTERFACE
================================================================================
The uniform contract every generator variant implements, plus the shared
plumbing built on top of it: dimension dispatch, array sampling and fractal
(multi-octave) sums.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): Parameters that override the internal defaults.
    - logger: A Python logging object. Defaults to the module logger.
- Inputs (per call):
    - 1 to 4 coordinates, as floats (noiseNd) or broadcastable arrays
      (sample, fractal).
- Outputs:
    - A float, or a float64 array of the broadcast input shape.
- Side Effects: None after construction.
- Invariants: Given the same instance and coordinates, the output is
  identical on every call.
================================================================================
"""

import logging
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

import numpy as np

from . import config as DEFAULTS
from .errors import UnsupportedDimensionError


@runtime_checkable
class NoiseSource(Protocol):
    """
    Protocol for noise generators.

    Any object with noise2d/noise3d/noise4d methods satisfies it, so callers
    can plug in their own sources without subclassing NoiseGenerator.
    """

    def noise2d(self, x: float, y: float) -> float: ...
    def noise3d(self, x: float, y: float, z: float) -> float: ...
    def noise4d(self, x: float, y: float, z: float, w: float) -> float: ...


class NoiseGenerator(ABC):
    """
    Abstract base class for noise generators.

    Subclasses implement noiseNd for each dimensionality they list in
    `dimensions`. The defaults raise UnsupportedDimensionError.
    """
    dimensions: tuple = (2,)

    def __init__(self, config: dict = None, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(type(self).__module__)
        self.user_config = dict(config or {})

        self.settings = {
            'octaves': self.user_config.get('octaves', DEFAULTS.FRACTAL_OCTAVES),
            'persistence': self.user_config.get('persistence', DEFAULTS.FRACTAL_PERSISTENCE),
            'lacunarity': self.user_config.get('lacunarity', DEFAULTS.FRACTAL_LACUNARITY),
        }
        _check_octaves(self.settings['octaves'])

    # --- Scalar evaluation ---

    def noise1d(self, x: float) -> float:
        raise UnsupportedDimensionError(type(self).__name__, 1)

    @abstractmethod
    def noise2d(self, x: float, y: float) -> float:
        """
        Returns the noise value at (x, y).

        Returns:
            A float, nominally in [-1, 1].
        """
        pass

    def noise3d(self, x: float, y: float, z: float) -> float:
        raise UnsupportedDimensionError(type(self).__name__, 3)

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        raise UnsupportedDimensionError(type(self).__name__, 4)

    def noise(self, *coords: float) -> float:
        """Dispatches to noise1d..noise4d based on the number of coordinates."""
        return self._scalar_method(len(coords))(*coords)

    def supports(self, dimension: int) -> bool:
        return dimension in self.dimensions

    def _check_dimension(self, dimension: int):
        if not self.supports(dimension):
            raise UnsupportedDimensionError(type(self).__name__, dimension)

    def _scalar_method(self, dimension: int):
        self._check_dimension(dimension)
        return (self.noise1d, self.noise2d, self.noise3d, self.noise4d)[dimension - 1]

    # --- Array evaluation ---

    def sample(self, *coords) -> np.ndarray:
        """
        Evaluates the noise for every point of a coordinate grid.

        Args:
            *coords: One array (or scalar) per axis. They are broadcast
                together, e.g. the two outputs of np.meshgrid.

        Returns:
            np.ndarray: float64 noise values with the broadcast shape.
        """
        dimension = len(coords)
        self._check_dimension(dimension)
        arrays = np.broadcast_arrays(*(np.asarray(c, dtype=np.float64) for c in coords))
        shape = arrays[0].shape
        flat = [np.ascontiguousarray(a).ravel() for a in arrays]
        return self._sample_flat(dimension, flat).reshape(shape)

    def _sample_flat(self, dimension: int, flat: list) -> np.ndarray:
        """
        Evaluates 1D coordinate arrays of equal length. Subclasses replace
        this with a compiled loop; the fallback calls the scalar method.
        """
        method = self._scalar_method(dimension)
        count = flat[0].size
        return np.fromiter((method(*point) for point in zip(*flat)), dtype=np.float64, count=count)

    def fractal(self, *coords, octaves: int = None, persistence: float = None, lacunarity: float = None):
        """
        Sums several octaves of noise, each at a higher frequency and lower
        amplitude than the last, normalized back to the single-octave range.

        Args:
            *coords: Scalars or broadcastable arrays, one per axis.
            octaves (int): Number of layers. Defaults to settings['octaves'].
            persistence (float): Amplitude ratio between octaves.
            lacunarity (float): Frequency ratio between octaves.

        Returns:
            A float for scalar input, otherwise an np.ndarray.
        """
        octaves = self.settings['octaves'] if octaves is None else octaves
        persistence = self.settings['persistence'] if persistence is None else persistence
        lacunarity = self.settings['lacunarity'] if lacunarity is None else lacunarity
        _check_octaves(octaves)

        total = None
        max_value = 0.0
        amplitude = 1.0
        frequency = 1.0
        for _ in range(int(octaves)):
            layer = self.sample(*(np.multiply(c, frequency) for c in coords)) * amplitude
            total = layer if total is None else total + layer
            max_value += amplitude
            amplitude *= persistence
            frequency *= lacunarity

        result = total / max_value if max_value > 0.0 else np.zeros_like(total)
        if result.ndim == 0:
            return float(result)
        return result

    def __repr__(self):
        return f"{type(self).__name__}(dimensions={self.dimensions})"


def _check_octaves(octaves):
    if int(octaves) != octaves or octaves < 1:
        raise ValueError(f"octaves must be a positive integer, got {octaves!r}")
