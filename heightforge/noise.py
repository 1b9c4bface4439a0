"""Value noise synthesis: seeded white noise, octave smoothing and blending."""

import math

import numpy as np

from .grid import Grid, InvalidConfig, InvalidDimension, check_dimensions

DEFAULT_SEED = (0, 0, 0, 0)
DEFAULT_PERSISTENCE = 0.5

# Largest octave whose period 2**octave still fits in an int64 index
MAX_OCTAVE = 62


def _lerp(a, b, t):
    """Linear interpolation; equal endpoints come back unchanged."""
    return a + t * (b - a)


def check_persistence(persistence):
    """Raise InvalidConfig unless persistence is finite and positive."""
    if not (math.isfinite(persistence) and persistence > 0):
        raise InvalidConfig(
            f"persistence must be finite and > 0, got {persistence}"
        )


def check_octave(octave):
    """Raise InvalidConfig unless 0 <= octave <= MAX_OCTAVE."""
    if not 0 <= octave <= MAX_OCTAVE:
        raise InvalidConfig(
            f"octave index must be in [0, {MAX_OCTAVE}], got {octave}"
        )


def check_seed(seed):
    """Raise InvalidConfig unless seed is four unsigned 32-bit words."""
    words = tuple(seed)
    if len(words) != 4 or any(
            isinstance(w, bool)
            or not isinstance(w, (int, np.integer))
            or not 0 <= w < 2**32
            for w in words):
        raise InvalidConfig(
            f"seed must be four unsigned 32-bit integers, got {seed!r}"
        )
    return words


def white_noise(width, height, seed=DEFAULT_SEED):
    """Generate a reproducible grid of uniform random values.

    Args:
        width: Number of columns, at least 1.
        height: Number of rows, at least 1.
        seed: Four 32-bit words seeding a generator owned by this call.

    Returns:
        Grid of shape (height, width) with values in [0, 1), drawn
        row by row.
    """
    check_dimensions(width, height)
    rng = np.random.RandomState(np.array(check_seed(seed), dtype=np.uint32))

    # random_sample fills in C order, i.e. rows outer, columns inner
    return Grid(rng.random_sample((height, width)))


def _sample_axis(length, period):
    """Block anchors, wrapped neighbours and blend factors along one axis."""
    idx = np.arange(length)
    anchor = (idx // period) * period
    neighbour = (anchor + period) % length
    blend = (idx - anchor) * (1.0 / period)
    return anchor, neighbour, blend


def smooth_noise(base, octave):
    """Block-sample the base noise and bilinearly interpolate between blocks.

    Octave ``k`` samples every ``2**k``-th cell and interpolates the cells in
    between. Block neighbours past the edge wrap around to the start of the
    axis, so the result tiles seamlessly.
    """
    check_octave(octave)
    period = 1 << octave
    values = base.values

    i0, i1, h = _sample_axis(base.height, period)
    j0, j1, v = _sample_axis(base.width, period)

    i0, i1, h = i0[:, None], i1[:, None], h[:, None]
    j0, j1, v = j0[None, :], j1[None, :], v[None, :]

    top = _lerp(values[i0, j0], values[i1, j0], h)
    bottom = _lerp(values[i0, j1], values[i1, j1], h)

    return Grid(_lerp(top, bottom, v))


def blend_octaves(base, octaves, persistence=DEFAULT_PERSISTENCE):
    """Combine octaves into one height map with decaying amplitudes.

    Args:
        base: The white noise the octaves were smoothed from; fixes the
            output dimensions.
        octaves: Octaves in blend order. Each one is weighted by
            ``persistence`` times the weight of the one before it,
            starting at ``persistence``.
        persistence: Amplitude decay per octave, greater than 0.

    Returns:
        Grid holding the weighted average of the octaves.
    """
    check_persistence(persistence)
    if not octaves:
        raise InvalidConfig("at least one octave is required")

    result = np.zeros(base.shape, dtype=np.float64)
    amp = 1.0
    total_amp = 0.0

    for octave in octaves:
        if octave.shape != base.shape:
            raise InvalidDimension(
                f"octave {octave.width}x{octave.height} does not match "
                f"base {base.width}x{base.height}"
            )
        amp *= persistence
        total_amp += amp
        result += octave.values * amp

    return Grid(result / total_amp)
