"""
Minimum-energy seam search.

One dynamic programming routine handles both orientations: a horizontal
seam is the vertical seam of the transposed energy map.
"""

import logging
import torch
from typing import Sequence, Tuple

from .energy import energy_map
from .grid import PixelGrid

logger = logging.getLogger(__name__)


def cumulative_energy(energy: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Top-to-bottom cumulative minimum energy with predecessor offsets.

    cost[i, j] = energy[i, j] + min(cost[i-1, j-1], cost[i-1, j], cost[i-1, j+1]),
    using only the in-bounds predecessors. The offset table records which
    predecessor was taken (-1, 0 or +1 columns). Ties prefer straight up,
    then left, then right: a side predecessor only wins if strictly smaller.

    Args:
        energy: Energy map (H, W)

    Returns:
        cost: (H, W) float64 cumulative energy
        offsets: (H, W) long predecessor column offsets (row 0 is all zero)
    """
    energy = energy.to(torch.float64)
    H, W = energy.shape

    cost = torch.empty((H, W), dtype=torch.float64, device=energy.device)
    offsets = torch.zeros((H, W), dtype=torch.long, device=energy.device)
    cost[0] = energy[0]

    for i in range(1, H):
        prev = cost[i - 1]
        from_left = torch.full((W,), float('inf'), dtype=prev.dtype, device=prev.device)
        from_left[1:] = prev[:-1]
        from_right = torch.full((W,), float('inf'), dtype=prev.dtype, device=prev.device)
        from_right[:-1] = prev[1:]

        best = prev
        step = torch.zeros(W, dtype=torch.long, device=energy.device)

        take_left = from_left < best
        best = torch.where(take_left, from_left, best)
        step[take_left] = -1

        take_right = from_right < best
        best = torch.where(take_right, from_right, best)
        step[take_right] = 1

        cost[i] = energy[i] + best
        offsets[i] = step

    return cost, offsets


def _first_minimum(values: Sequence[float]) -> int:
    # Scan left to right; only a strictly smaller value replaces the best.
    best_index = 0
    for index in range(1, len(values)):
        if values[index] < values[best_index]:
            best_index = index
    return best_index


def find_seam(energy: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """
    Find the minimum total-energy seam of an energy map.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    if direction == 'horizontal':
        energy = energy.t()
    elif direction != 'vertical':
        raise ValueError(f"Invalid direction: {direction}")

    cost, offsets = cumulative_energy(energy)
    H = cost.shape[0]
    steps = offsets.tolist()

    seam = [0] * H
    col = _first_minimum(cost[-1].tolist())
    seam[H - 1] = col
    for i in range(H - 1, 0, -1):
        col += steps[i][col]
        seam[i - 1] = col

    return torch.tensor(seam, dtype=torch.long)


def seam_energy(energy: torch.Tensor, seam: Sequence[int],
                direction: str = 'vertical') -> float:
    """Total energy along a seam, summed in seam order."""
    if direction == 'horizontal':
        energy = energy.t()
    elif direction != 'vertical':
        raise ValueError(f"Invalid direction: {direction}")

    rows = energy.to(torch.float64).tolist()
    total = 0.0
    for i, col in enumerate(torch.as_tensor(seam).tolist()):
        total += rows[i][col]
    return total


def _find_grid_seam(grid: PixelGrid, direction: str) -> torch.Tensor:
    energy = energy_map(grid)
    seam = find_seam(energy, direction=direction)
    logger.debug("%s seam on %dx%d grid, energy %.3f", direction,
                 grid.width, grid.height, seam_energy(energy, seam, direction))
    return seam


def find_vertical_seam(grid: PixelGrid) -> torch.Tensor:
    """Column index per row of the minimum-energy top-to-bottom seam."""
    return _find_grid_seam(grid, 'vertical')


def find_horizontal_seam(grid: PixelGrid) -> torch.Tensor:
    """Row index per column of the minimum-energy left-to-right seam."""
    return _find_grid_seam(grid, 'horizontal')

