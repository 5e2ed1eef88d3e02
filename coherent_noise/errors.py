# coherent_noise/errors.py

"""Exceptions raised by the noise generators."""


class UnsupportedDimensionError(NotImplementedError):
    """
    Raised when a generator is asked for a dimensionality it does not
    implement. This is a caller error, never a runtime fault.
    """

    def __init__(self, generator: str, dimension: int):
        self.generator = generator
        self.dimension = dimension
        super().__init__(f"{generator} does not support {dimension}D noise")
