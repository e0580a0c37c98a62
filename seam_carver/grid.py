"""
Mutable RGB pixel grid that seam carving operates on.

Pixels are stored in a uint8 tensor of shape (3, H, W), the same channel-first
layout the rest of the package uses. Coordinates are always (column, row).
"""

import numbers

import numpy as np
import torch
from PIL import Image
from typing import List, NamedTuple, Sequence

from .config import validate_grid_dimensions


class Pixel(NamedTuple):
    """Immutable 8-bit RGB value."""

    red: int
    green: int
    blue: int


def _check_pixel(pixel: Sequence[int]) -> Pixel:
    if len(pixel) != 3:
        raise ValueError(f"Pixel needs 3 channels, got {len(pixel)}")
    for value in pixel:
        if not isinstance(value, numbers.Integral):
            raise ValueError(f"Channel value must be an integer: {value!r}")
        if not 0 <= value <= 255:
            raise ValueError(f"Channel value out of range [0, 255]: {value}")
    return Pixel(*(int(v) for v in pixel))


class PixelGrid:
    """
    Rectangular 2D grid of RGB pixels addressed by (column, row).

    Width and height are always at least 1. Seam removal shrinks the grid
    in place through _replace(), which is the only way its shape changes.
    """

    def __init__(self, width: int, height: int, fill: Sequence[int] = Pixel(0, 0, 0)):
        validate_grid_dimensions(width, height)
        fill = _check_pixel(fill)
        self._data = (torch.tensor(fill, dtype=torch.uint8)
                      .view(3, 1, 1).expand(3, height, width).clone())

    @classmethod
    def _wrap(cls, data: torch.Tensor) -> 'PixelGrid':
        grid = cls.__new__(cls)
        grid._data = data
        return grid

    @classmethod
    def from_tensor(cls, tensor: torch.Tensor) -> 'PixelGrid':
        """
        Build a grid from a channel-first tensor.

        Args:
            tensor: Integer tensor (3, H, W) with values in [0, 255]

        Returns:
            New grid owning a copy of the data
        """
        if tensor.dim() != 3 or tensor.shape[0] != 3:
            raise ValueError(f"Expected tensor of shape (3, H, W), got {tuple(tensor.shape)}")
        if tensor.is_floating_point():
            raise ValueError("Expected integer pixel values, got a floating point tensor")
        _, H, W = tensor.shape
        validate_grid_dimensions(W, H)
        if tensor.min() < 0 or tensor.max() > 255:
            raise ValueError("Channel values must lie in [0, 255]")
        return cls._wrap(tensor.to(torch.uint8).clone())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> 'PixelGrid':
        """Build a grid from row-major nested sequences of RGB triples."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        validate_grid_dimensions(width, height)
        checked = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} pixels, expected {width}")
            checked.append([list(_check_pixel(p)) for p in row])
        data = torch.tensor(checked, dtype=torch.uint8)  # (H, W, 3)
        return cls._wrap(data.permute(2, 0, 1).contiguous())

    @classmethod
    def from_pil(cls, image: Image.Image) -> 'PixelGrid':
        """Build a grid from a Pillow image, dropping any alpha channel."""
        arr = np.array(image.convert('RGB'), dtype=np.uint8)
        return cls.from_tensor(torch.from_numpy(arr).permute(2, 0, 1))

    def to_pil(self) -> Image.Image:
        arr = self._data.permute(1, 2, 0).contiguous().numpy()
        return Image.fromarray(arr)

    def to_rows(self) -> List[List[Pixel]]:
        rows = self._data.permute(1, 2, 0).tolist()
        return [[Pixel(*p) for p in row] for row in rows]

    @property
    def width(self) -> int:
        return self._data.shape[2]

    @property
    def height(self) -> int:
        return self._data.shape[1]

    @property
    def tensor(self) -> torch.Tensor:
        """Copy of the underlying (3, H, W) uint8 tensor."""
        return self._data.clone()

    def _check_coords(self, column: int, row: int):
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(
                f"Pixel ({column}, {row}) outside {self.width}x{self.height} grid")

    def get_pixel(self, column: int, row: int) -> Pixel:
        self._check_coords(column, row)
        return Pixel(*self._data[:, row, column].tolist())

    def set_pixel(self, column: int, row: int, pixel: Sequence[int]):
        self._check_coords(column, row)
        pixel = _check_pixel(pixel)
        self._data[:, row, column] = torch.tensor(pixel, dtype=torch.uint8)

    def neighbor(self, column: int, row: int, d_column: int, d_row: int) -> Pixel:
        """
        Pixel offset from (column, row), wrapping around the grid edges.

        Column -1 maps to width - 1 and column width maps to 0; rows likewise.
        """
        self._check_coords(column, row)
        return self.get_pixel((column + d_column) % self.width,
                              (row + d_row) % self.height)

    def copy(self) -> 'PixelGrid':
        return PixelGrid._wrap(self._data.clone())

    def transposed(self) -> 'PixelGrid':
        """New grid with columns and rows swapped."""
        return PixelGrid._wrap(self._data.transpose(1, 2).contiguous())

    def _replace(self, data: torch.Tensor):
        # Commit point for seam removal; the old data stays intact until here.
        if data.dim() != 3 or data.shape[0] != 3:
            raise ValueError(f"Expected tensor of shape (3, H, W), got {tuple(data.shape)}")
        validate_grid_dimensions(data.shape[2], data.shape[1])
        self._data = data

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self._data.shape == other._data.shape and torch.equal(self._data, other._data)

    def __repr__(self):
        return f"PixelGrid(width={self.width}, height={self.height})"
