"""
Dual-gradient energy for seam carving.

The energy of a pixel is sqrt(dx + dy), where dx is the squared RGB
difference between its left and right neighbours and dy the same for its
upper and lower neighbours. Neighbours wrap around the grid edges, so
column -1 is the last column and row -1 is the last row. Note this differs
from the zero-padding or edge-replication used by some seam carving
references: border pixels are compared against the opposite border.
"""

import math
import torch

from .grid import Pixel, PixelGrid


def _delta(a: Pixel, b: Pixel) -> int:
    return sum((x - y) ** 2 for x, y in zip(a, b))


def pixel_energy(grid: PixelGrid, column: int, row: int) -> float:
    """
    Energy of a single pixel.

    Args:
        grid: Pixel grid
        column: Column of the pixel, in [0, width)
        row: Row of the pixel, in [0, height)

    Returns:
        Non-negative energy; 0 only when both neighbour pairs are identical
    """
    left = grid.neighbor(column, row, -1, 0)
    right = grid.neighbor(column, row, 1, 0)
    up = grid.neighbor(column, row, 0, -1)
    down = grid.neighbor(column, row, 0, 1)
    return math.sqrt(_delta(left, right) + _delta(up, down))


def energy_map(grid: PixelGrid) -> torch.Tensor:
    """
    Energy of every pixel in the grid.

    Gives exactly the values pixel_energy() would for each coordinate:
    the squared differences are integers, so the float64 sums are exact.

    Args:
        grid: Pixel grid

    Returns:
        Energy map (H, W), float64
    """
    image = grid.tensor.to(torch.float64)

    # torch.roll wraps, so shift=1 along a dim brings index i-1 to position i
    left = torch.roll(image, shifts=1, dims=2)
    right = torch.roll(image, shifts=-1, dims=2)
    up = torch.roll(image, shifts=1, dims=1)
    down = torch.roll(image, shifts=-1, dims=1)

    dx = ((left - right) ** 2).sum(dim=0)
    dy = ((up - down) ** 2).sum(dim=0)
    return torch.sqrt(dx + dy)
