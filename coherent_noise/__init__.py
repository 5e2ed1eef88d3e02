# coherent_noise/__init__.py

# This file makes the 'coherent_noise' directory a Python package.
# We can also use it to define the public API of the package.

from .base import NoiseGenerator, NoiseSource
from .checkerboard import Checkerboard
from .errors import UnsupportedDimensionError
from .gradients import GRADIENT_TABLES, dot, gradient
from .perlin import Perlin
from .permutation import PermutationTable, is_permutation
from .simplex import Simplex

__version__ = "0.1.0"

__all__ = [
    "NoiseGenerator", "NoiseSource",
    "Simplex", "Perlin", "Checkerboard",
    "PermutationTable", "is_permutation",
    "GRADIENT_TABLES", "gradient", "dot",
    "UnsupportedDimensionError",
]
