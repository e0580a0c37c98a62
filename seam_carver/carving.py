"""
Seam removal and the high-level carving loop.
"""

import logging
import torch
from typing import Optional, Sequence, Tuple

from .config import (InvalidDimensionError, SeamLengthMismatchError,
                     SeamOutOfBoundsError, validate_target)
from .energy import pixel_energy
from .grid import PixelGrid
from .seam import find_horizontal_seam, find_vertical_seam

logger = logging.getLogger(__name__)


def validate_seam(grid: PixelGrid, seam: Sequence[int],
                  direction: str = 'vertical') -> torch.Tensor:
    """
    Check that a seam can be removed from the grid.

    Args:
        grid: Pixel grid the seam belongs to
        seam: Column per row (vertical) or row per column (horizontal)
        direction: 'vertical' or 'horizontal'

    Returns:
        The seam as a 1D long tensor

    Raises:
        InvalidDimensionError: Removal would leave a zero dimension
        SeamLengthMismatchError: Seam length differs from the spanned dimension
        SeamOutOfBoundsError: An index is outside the grid, or adjacent
            indices differ by more than 1
    """
    if direction == 'vertical':
        length, span = grid.height, grid.width
    elif direction == 'horizontal':
        length, span = grid.width, grid.height
    else:
        raise ValueError(f"Invalid direction: {direction}")

    if span <= 1:
        raise InvalidDimensionError(
            f"Cannot remove a {direction} seam from a {grid.width}x{grid.height} grid")

    return _check_seam(seam, length, span, direction)


def _check_seam(seam: Sequence[int], length: int, span: int,
                direction: str) -> torch.Tensor:
    seam = torch.as_tensor(seam)
    if seam.dim() != 1 or seam.shape[0] != length:
        raise SeamLengthMismatchError(
            f"{direction.capitalize()} seam has shape {tuple(seam.shape)}, "
            f"expected ({length},)")
    if seam.is_floating_point() or seam.is_complex() or seam.dtype == torch.bool:
        raise SeamOutOfBoundsError(f"Seam indices must be integers, got {seam.dtype}")
    seam = seam.to(torch.long)

    if seam.min() < 0 or seam.max() >= span:
        raise SeamOutOfBoundsError(
            f"Seam indices must lie in [0, {span}), got [{seam.min().item()}, {seam.max().item()}]")
    if length > 1 and torch.abs(seam[1:] - seam[:-1]).max() > 1:
        raise SeamOutOfBoundsError("Adjacent seam indices differ by more than 1")

    return seam


def remove_seam(grid: PixelGrid, seam: Sequence[int], direction: str = 'vertical'):
    """
    Remove a seam from the grid in place.

    Every pixel after the seam in its row (vertical) or column (horizontal)
    shifts back by one, then the last column or row is dropped. The shifted
    data is built on the side and committed in one step, so a failure leaves
    the grid as it was.

    Args:
        grid: Pixel grid, mutated in place
        seam: Seam indices
        direction: 'vertical' or 'horizontal'
    """
    seam = validate_seam(grid, seam, direction)
    image = grid.tensor
    C, H, W = image.shape

    if direction == 'vertical':
        # Remove one pixel from each row
        carved = torch.empty((C, H, W - 1), dtype=image.dtype)

        for i, col in enumerate(seam.tolist()):
            carved[:, i, :col] = image[:, i, :col]
            carved[:, i, col:] = image[:, i, col + 1:]

    else:
        # Remove one pixel from each column
        carved = torch.empty((C, H - 1, W), dtype=image.dtype)

        for j, row in enumerate(seam.tolist()):
            carved[:, :row, j] = image[:, :row, j]
            carved[:, row:, j] = image[:, row + 1:, j]

    grid._replace(carved)
    logger.debug("Removed %s seam, grid now %dx%d", direction, grid.width, grid.height)


def remove_vertical_seam(grid: PixelGrid, seam: Sequence[int]):
    """Delete one pixel per row, shrinking the width by 1."""
    remove_seam(grid, seam, direction='vertical')


def remove_horizontal_seam(grid: PixelGrid, seam: Sequence[int]):
    """Delete one pixel per column, shrinking the height by 1."""
    remove_seam(grid, seam, direction='horizontal')


def mark_seam(grid: PixelGrid, seam: Sequence[int], direction: str = 'vertical',
              color: Tuple[int, int, int] = (255, 0, 0)) -> PixelGrid:
    """Copy of the grid with the seam painted in a solid colour."""
    if direction == 'vertical':
        seam = _check_seam(seam, grid.height, grid.width, direction)
    elif direction == 'horizontal':
        seam = _check_seam(seam, grid.width, grid.height, direction)
    else:
        raise ValueError(f"Invalid direction: {direction}")
    marked = grid.copy()
    for i, idx in enumerate(seam.tolist()):
        if direction == 'vertical':
            marked.set_pixel(idx, i, color)
        else:
            marked.set_pixel(i, idx, color)
    return marked


class SeamCarver:
    """
    Owns a pixel grid and shrinks it one seam at a time.

    The grid passed in belongs to the carver until carving is done; the
    image property hands out copies so callers cannot mutate it mid-carve.
    """

    def __init__(self, grid: PixelGrid):
        self._grid = grid

    @property
    def image(self) -> PixelGrid:
        return self._grid.copy()

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def energy(self, column: int, row: int) -> float:
        return pixel_energy(self._grid, column, row)

    def find_vertical_seam(self) -> torch.Tensor:
        return find_vertical_seam(self._grid)

    def find_horizontal_seam(self) -> torch.Tensor:
        return find_horizontal_seam(self._grid)

    def remove_vertical_seam(self, seam: Sequence[int]):
        remove_vertical_seam(self._grid, seam)

    def remove_horizontal_seam(self, seam: Sequence[int]):
        remove_horizontal_seam(self._grid, seam)

    def carve(self, target_width: Optional[int] = None,
              target_height: Optional[int] = None) -> PixelGrid:
        """
        Remove vertical seams down to target_width, then horizontal seams
        down to target_height. None leaves that dimension unchanged.

        Returns:
            Copy of the carved grid
        """
        target_width, target_height = validate_target(
            self.width, self.height, target_width, target_height)
        logger.debug("Carving %dx%d -> %dx%d", self.width, self.height,
                     target_width, target_height)

        while self.width > target_width:
            self.remove_vertical_seam(self.find_vertical_seam())
        while self.height > target_height:
            self.remove_horizontal_seam(self.find_horizontal_seam())

        return self.image


def carve_image(grid: PixelGrid, target_width: Optional[int] = None,
                target_height: Optional[int] = None) -> PixelGrid:
    """
    Seam carve a grid to a smaller size.

    Args:
        grid: Pixel grid (left untouched)
        target_width: Width to shrink to, or None to keep the width
        target_height: Height to shrink to, or None to keep the height

    Returns:
        New carved grid
    """
    carver = SeamCarver(grid.copy())
    return carver.carve(target_width, target_height)
