# coherent_noise/checkerboard.py

"""
================================================================================
CHECKERBOARD
================================================================================
A degenerate, non-random generator: unit cells alternate between two fixed
values by the parity of the sum of their floored coordinates. Useful as a
cheap placeholder source and as a known pattern to test callers against.

Data Contract:
---------------
- Inputs:
    - config (dict): Optional 'on_value' / 'off_value' overrides.
- Outputs:
    - on_value where floor(x) + floor(y) + ... is even, off_value where it
      is odd. Non-finite input gives nan.
- Side Effects: None.
================================================================================
"""

import logging
import math

import numpy as np

from . import config as DEFAULTS
from .base import NoiseGenerator


class Checkerboard(NoiseGenerator):
    """
    Outputs a check pattern for 1D to 4D input.
    """
    dimensions = (1, 2, 3, 4)

    def __init__(self, seed=None, config: dict = None, logger: logging.Logger = None):
        """
        Initializes the generator.

        Args:
            seed: Accepted for interface parity with the other generators.
                The pattern does not depend on it.
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.
        """
        super().__init__(config, logger)
        self.seed = seed
        self.settings['on_value'] = float(self.user_config.get('on_value', DEFAULTS.CHECKERBOARD_ON_VALUE))
        self.settings['off_value'] = float(self.user_config.get('off_value', DEFAULTS.CHECKERBOARD_OFF_VALUE))
        self.on_value = self.settings['on_value']
        self.off_value = self.settings['off_value']
        self.logger.debug(f"Checkerboard initialized with values on={self.on_value}, off={self.off_value}.")

    def _cell(self, *coords: float) -> float:
        if not all(math.isfinite(c) for c in coords):
            return math.nan
        parity = sum(math.floor(c) for c in coords) & 1
        return self.off_value if parity else self.on_value

    def noise1d(self, x: float) -> float:
        return self._cell(x)

    def noise2d(self, x: float, y: float) -> float:
        """Returns on_value if floor(x) + floor(y) is even, else off_value."""
        return self._cell(x, y)

    def noise3d(self, x: float, y: float, z: float) -> float:
        return self._cell(x, y, z)

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        return self._cell(x, y, z, w)

    def _sample_flat(self, dimension: int, flat: list) -> np.ndarray:
        finite = np.ones(flat[0].shape, dtype=bool)
        parity = np.zeros(flat[0].shape, dtype=np.int64)
        for c in flat:
            finite &= np.isfinite(c)
        for c in flat:
            # Floor in float space: cell parity only needs the low bit.
            cells = np.floor(np.where(finite, c, 0.0))
            parity += np.mod(cells, 2.0).astype(np.int64)
        result = np.where(parity & 1, self.off_value, self.on_value)
        return np.where(finite, result, np.nan)

    def __eq__(self, other):
        if not isinstance(other, Checkerboard):
            return NotImplemented
        return (self.on_value, self.off_value) == (other.on_value, other.off_value)

    __hash__ = None
