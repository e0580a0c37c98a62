"""
Content-aware image shrinking by seam carving.

Dual-gradient energy with wrap-around neighbours, dynamic programming seam
search in either orientation, and in-place seam removal.

Example:
    from PIL import Image
    from seam_carver import PixelGrid, carve_image

    grid = PixelGrid.from_pil(Image.open("input.png"))
    carve_image(grid, target_width=200).to_pil().save("output.png")

For debug logging:

    import logging
    logging.basicConfig(level=logging.DEBUG)
    logging.getLogger("seam_carver").setLevel(logging.DEBUG)
"""

import logging

__version__ = "0.1.0"

logger = logging.getLogger("seam_carver")
logger.addHandler(logging.NullHandler())

from .config import (
    CarveConfig,
    SeamCarverError,
    InvalidDimensionError,
    SeamLengthMismatchError,
    SeamOutOfBoundsError,
)
from .grid import Pixel, PixelGrid
from .energy import pixel_energy, energy_map
from .seam import (cumulative_energy, find_seam, seam_energy,
                   find_vertical_seam, find_horizontal_seam)
from .carving import (
    SeamCarver,
    validate_seam,
    remove_seam,
    remove_vertical_seam,
    remove_horizontal_seam,
    mark_seam,
    carve_image,
)

__all__ = [
    'CarveConfig',
    'SeamCarverError',
    'InvalidDimensionError',
    'SeamLengthMismatchError',
    'SeamOutOfBoundsError',
    'Pixel',
    'PixelGrid',
    'pixel_energy',
    'energy_map',
    'cumulative_energy',
    'find_seam',
    'seam_energy',
    'find_vertical_seam',
    'find_horizontal_seam',
    'SeamCarver',
    'validate_seam',
    'remove_seam',
    'remove_vertical_seam',
    'remove_horizontal_seam',
    'mark_seam',
    'carve_image',
]
