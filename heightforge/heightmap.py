"""Height map generation pipeline.

White noise is smoothed once per octave, the octaves are reversed so the
coarsest comes first, and the blender folds them into a single height map
with values in [0, 1].
"""

import logging
from dataclasses import dataclass

from .grid import InvalidConfig
from .noise import (DEFAULT_PERSISTENCE, DEFAULT_SEED, MAX_OCTAVE,
                    blend_octaves, check_persistence, check_seed,
                    smooth_noise, white_noise)

logger = logging.getLogger(__name__)


@dataclass
class NoiseConfig:
    """Configuration for height map generation."""

    # Number of frequency bands
    octave_count: int = 7

    # Amplitude decay per octave
    persistence: float = DEFAULT_PERSISTENCE

    # Four 32-bit words for the white noise generator
    seed: tuple = DEFAULT_SEED

    def validate(self):
        if not 1 <= self.octave_count <= MAX_OCTAVE + 1:
            raise InvalidConfig(
                f"octave_count must be in [1, {MAX_OCTAVE + 1}], "
                f"got {self.octave_count}"
            )
        check_persistence(self.persistence)
        check_seed(self.seed)
        return self


def _smooth_all(noise, octave_count):
    octaves = [smooth_noise(noise, i) for i in range(octave_count)]

    # Coarsest octave first, so it receives the largest weight
    octaves.reverse()
    return octaves


def random_octaves(width, height, config=None):
    """Smooth fresh white noise at every octave, coarsest octave first.

    Args:
        width: Grid width in cells.
        height: Grid height in cells.
        config: NoiseConfig instance (defaults used if None).

    Returns:
        List of ``config.octave_count`` grids of shape (height, width).
    """
    if config is None:
        config = NoiseConfig()
    config.validate()

    noise = white_noise(width, height, seed=config.seed)
    return _smooth_all(noise, config.octave_count)


def random_height_map(width, height, config=None):
    """Generate a height map of the given size.

    Args:
        width: Grid width in cells, at least 1.
        height: Grid height in cells, at least 1.
        config: NoiseConfig instance (defaults used if None).

    Returns:
        Grid of shape (height, width) with values in [0, 1].

    Raises:
        InvalidDimension: width or height is less than 1.
        InvalidConfig: config holds an out-of-range value.
    """
    if config is None:
        config = NoiseConfig()
    config.validate()

    logger.debug("generating %dx%d height map: %d octaves, persistence %s, "
                 "seed %s", width, height, config.octave_count,
                 config.persistence, config.seed)

    noise = white_noise(width, height, seed=config.seed)
    octaves = _smooth_all(noise, config.octave_count)

    height_map = blend_octaves(noise, octaves, persistence=config.persistence)
    logger.debug("height map range [%.4f, %.4f]",
                 height_map.values.min(), height_map.values.max())
    return height_map
