# coherent_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
generators. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC APPLICATION.
Instead, pass a configuration dictionary to the generator instance.
================================================================================
"""

import math

# --- Permutation Table ---
# Number of distinct lattice hashes. Must be a power of two so that lattice
# indices can be wrapped with a bit mask.
DEFAULT_PERMUTATION_SIZE = 256

# --- Simplex Skew / Unskew Factors ---
# F skews (x, y, ...) into the simplex lattice, G skews back.
# F_n = (sqrt(n + 1) - 1) / n,  G_n = (1 - 1 / sqrt(n + 1)) / n
SIMPLEX_SKEW_2D = 0.5 * (math.sqrt(3.0) - 1.0)
SIMPLEX_UNSKEW_2D = (3.0 - math.sqrt(3.0)) / 6.0
SIMPLEX_SKEW_3D = 1.0 / 3.0
SIMPLEX_UNSKEW_3D = 1.0 / 6.0
SIMPLEX_SKEW_4D = (math.sqrt(5.0) - 1.0) / 4.0
SIMPLEX_UNSKEW_4D = (5.0 - math.sqrt(5.0)) / 20.0

# --- Simplex Falloff ---
# Squared radius of influence of each simplex corner. 0.5 keeps the kernel
# inside the neighbouring simplices, so the noise is continuous.
SIMPLEX_RADIUS_SQ_1D = 1.0
SIMPLEX_RADIUS_SQ = 0.5

# --- Simplex Normalisation ---
# Scales the summed corner contributions into [-1, 1]. Only 1D and 2D come
# close to the bound; see OBSERVED_PEAK below.
# The 1D maximum is 8 * (3/4)^4 = 2.53125 before scaling.
SIMPLEX_SCALE_1D = 0.395
SIMPLEX_SCALE_2D = 70.0
SIMPLEX_SCALE_3D = 70.0
SIMPLEX_SCALE_4D = 54.0

# --- Perlin Normalisation ---
# In 1D, 2D and 4D these factors map the aligned cell centre, where every
# corner gradient points at the sample, to +/-1. With the 12 edge gradients
# the 3D peak lies off the centre, above 1.015 before scaling, so 3D divides
# by 1.04 instead.
PERLIN_SCALE_1D = 0.25        # |g| <= 8, offset 0.5
PERLIN_SCALE_2D = 1.0         # g = (1, 1), offset (0.5, 0.5)
PERLIN_SCALE_3D = 1.0 / 1.04  # off-centre peak, see above
PERLIN_SCALE_4D = 2.0 / 3.0   # g = (0, 1, 1, 1), offset (0.5, ...)

# --- Checkerboard ---
CHECKERBOARD_ON_VALUE = 1.0   # cells with an even coordinate sum
CHECKERBOARD_OFF_VALUE = -1.0  # cells with an odd coordinate sum

# --- Fractal (octave) Sums ---
FRACTAL_OCTAVES = 4
FRACTAL_PERSISTENCE = 0.5
FRACTAL_LACUNARITY = 2.0

# --- Documented Empirical Output Ranges ---
# Bounds every output stays within, for every dimension.
EMPIRICAL_RANGE = {
    "simplex": (-1.0, 1.0),
    "perlin": (-1.0, 1.0),
}

# Largest |value| found by local maximisation from many random starts
# (seeds 1 and 2), after scaling.
OBSERVED_PEAK = {
    "simplex": {1: 0.940, 2: 0.998, 3: 0.911, 4: 0.860},
    "perlin": {1: 0.938, 2: 1.0, 3: 0.976, 4: 0.794},
}
