"""Dense 2D grids of elevation values.

The first index is always the row (height axis) and the second the column
(width axis), for every stage of the pipeline.
"""

import numpy as np


class InvalidDimension(ValueError):
    """A grid dimension is zero, negative or mismatched."""


class InvalidConfig(ValueError):
    """A generation parameter is outside its valid range."""


def check_dimensions(width, height):
    """Raise InvalidDimension unless both dimensions are at least 1."""
    if width < 1 or height < 1:
        raise InvalidDimension(
            f"grid dimensions must be positive, got {width}x{height}"
        )


class Grid:
    """Fixed-size row-major grid backed by a read-only float64 array."""

    __slots__ = ("_values",)

    def __init__(self, values):
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 2:
            raise InvalidDimension(f"expected a 2D grid, got {arr.ndim}D")
        check_dimensions(arr.shape[1], arr.shape[0])
        arr.setflags(write=False)
        self._values = arr

    @classmethod
    def with_dimensions(cls, width, height, fill=0.0):
        check_dimensions(width, height)
        return cls(np.full((height, width), fill, dtype=np.float64))

    @property
    def width(self):
        return self._values.shape[1]

    @property
    def height(self):
        return self._values.shape[0]

    @property
    def shape(self):
        return self._values.shape

    @property
    def values(self):
        return self._values

    def at(self, row, col):
        return float(self._values[row, col])

    def to_array(self):
        return self._values.copy()

    def __getitem__(self, key):
        return self._values[key]

    def __len__(self):
        return self.height

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"


# Role names for the pipeline stages
WhiteNoise = Grid
Octave = Grid
HeightMap = Grid
