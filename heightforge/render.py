"""Turn height maps into images.

Heights are quantized to 0-255 and sorted into four terrain bands:
water, sand, land and mountain.
"""

from dataclasses import dataclass

import numpy as np
from PIL import Image

from .grid import InvalidConfig


@dataclass
class ColorBands:
    """Quantized height thresholds and the colour of each band."""

    water_below: int = 110
    sand_below: int = 115
    mountain_above: int = 180

    water: tuple = (163, 204, 255)
    sand: tuple = (255, 242, 186)
    land: tuple = (204, 232, 164)
    mountain: tuple = (235, 219, 200)

    def validate(self):
        if not (0 <= self.water_below <= self.sand_below
                <= self.mountain_above <= 255):
            raise InvalidConfig(
                "thresholds must satisfy 0 <= water_below <= sand_below "
                f"<= mountain_above <= 255, got {self.water_below}, "
                f"{self.sand_below}, {self.mountain_above}"
            )
        return self


def quantize(height_map):
    """Scale heights by 256 and saturate to uint8 (1.0 maps to 255)."""
    scaled = np.floor(height_map.values * 256.0)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def colorize(height_map, bands=None):
    """Map each cell to its band colour.

    Returns:
        numpy array of shape (height, width, 3), dtype uint8.
    """
    if bands is None:
        bands = ColorBands()
    bands.validate()

    level = quantize(height_map)
    rgb = np.empty(level.shape + (3,), dtype=np.uint8)
    rgb[:] = bands.land
    # Later assignments win, so water takes precedence over sand
    rgb[level > bands.mountain_above] = bands.mountain
    rgb[level < bands.sand_below] = bands.sand
    rgb[level < bands.water_below] = bands.water

    return rgb


def render(height_map, bands=None):
    """Render a height map as an RGB image, one pixel per cell."""
    return Image.fromarray(colorize(height_map, bands))


def render_grayscale(height_map):
    """Render the raw heights as an 8-bit grayscale image."""
    return Image.fromarray(quantize(height_map))
