"""HeightForge - Generate terrain height maps from blended value noise."""

from .grid import Grid, InvalidConfig, InvalidDimension
from .heightmap import NoiseConfig, random_height_map, random_octaves
from .render import ColorBands, render

__version__ = "0.1.0"
__all__ = [
    "generate", "render", "random_height_map", "random_octaves",
    "Grid", "NoiseConfig", "ColorBands", "InvalidDimension", "InvalidConfig",
]


def generate(width=512, height=512, bands=None, **kwargs):
    """Generate a terrain image.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        bands: ColorBands for the terrain colours (defaults used if None).
        **kwargs: Additional NoiseConfig parameters (octave_count,
            persistence, seed).

    Returns:
        PIL Image in RGB mode.
    """
    config = NoiseConfig(**kwargs)
    return render(random_height_map(width, height, config), bands)
