# coherent_noise/permutation.py

"""
================================================================================
PERMUTATION TABLE
================================================================================
This module builds the shuffled index table that decorrelates lattice hashes
for the gradient noise generators.

Data Contract:
---------------
- Inputs:
    - seed: None (OS entropy), an int, a numpy SeedSequence, or an existing
      numpy Generator (consumed as an entropy source).
    - size: The number of distinct hashes, a power of two.
- Outputs:
    - A PermutationTable holding `values` (a bijection over [0, size)) and
      `table` (`values` repeated twice, for wrap-free nested lookups).
- Side Effects: None. Both arrays are read-only after construction.
- Invariants: `sorted(values) == range(size)`.
================================================================================
"""

import logging

import numpy as np

from . import config as DEFAULTS


def is_permutation(values) -> bool:
    """True if `values` holds every integer in [0, len(values)) exactly once."""
    arr = np.asarray(values)
    if arr.ndim != 1 or arr.size == 0:
        return False
    if not np.issubdtype(arr.dtype, np.integer):
        return False
    return bool(np.array_equal(np.sort(arr), np.arange(arr.size)))


def _check_size(size: int) -> int:
    size = int(size)
    if size < 2 or size & (size - 1):
        raise ValueError(f"Permutation size must be a power of two >= 2, got {size}")
    return size


class PermutationTable:
    """
    A fixed, shuffled ordering of the integers [0, size).

    The table is built once and never mutated, so a single instance can be
    shared between generators and threads.
    """
    def __init__(self, seed=None, size: int = DEFAULTS.DEFAULT_PERMUTATION_SIZE):
        """
        Shuffles [0, size) with numpy's default bit generator.

        Args:
            seed: None for a fresh entropy-based shuffle, an int (or
                SeedSequence) for a deterministic one, or a numpy Generator
                to draw from.
            size (int): Table length. Must be a power of two.
        """
        size = _check_size(size)
        rng = np.random.default_rng(seed)
        p = np.arange(size, dtype=np.int64)
        rng.shuffle(p)
        self._set_values(p)

    @classmethod
    def from_values(cls, values) -> "PermutationTable":
        """
        Wraps an explicit ordering, e.g. Ken Perlin's reference table.

        Raises:
            ValueError: If `values` is not a bijection over [0, len(values))
                or its length is not a power of two.
        """
        if not is_permutation(values):
            raise ValueError("Permutation table must contain each index in [0, N) exactly once")
        arr = np.array(values, dtype=np.int64)
        _check_size(arr.size)
        table = cls.__new__(cls)
        table._set_values(arr)
        return table

    def _set_values(self, p: np.ndarray):
        self._values = p
        self._values.flags.writeable = False
        # Duplicated so table[i + table[j]] never needs a second wrap.
        self._table = np.concatenate([p, p])
        self._table.flags.writeable = False

    @property
    def size(self) -> int:
        return self._values.size

    @property
    def mask(self) -> int:
        return self._values.size - 1

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def table(self) -> np.ndarray:
        return self._table

    def lookup(self, index: int) -> int:
        """Returns values[index mod size] for any integer, including negatives."""
        return int(self._values[int(index) % self._values.size])

    def __len__(self):
        return self._values.size

    def __eq__(self, other):
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None

    def __repr__(self):
        head = ", ".join(str(v) for v in self._values[:4])
        return f"PermutationTable(size={self.size}, values=[{head}, ...])"


def resolve_permutation(seed, settings: dict, permutation_table, logger: logging.Logger) -> PermutationTable:
    """
    Returns the table a generator should use: the injected one if given,
    otherwise a fresh shuffle from `seed`.
    """
    if permutation_table is not None:
        if not isinstance(permutation_table, PermutationTable):
            permutation_table = PermutationTable.from_values(permutation_table)
        logger.debug(f"Initialized with injected permutation table (size {permutation_table.size}).")
        return permutation_table

    if seed is None:
        logger.debug("No seed provided, shuffling permutation table from OS entropy.")
    else:
        logger.debug(f"Shuffling permutation table from seed: {seed!r}")
    return PermutationTable(seed, size=settings['permutation_size'])
