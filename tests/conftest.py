"""Shared test fixtures for the seam carving test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seam_carver.grid import PixelGrid

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def black_center_grid():
    """3x3 grid: white outer columns, black center column."""
    return PixelGrid.from_rows([[WHITE, BLACK, WHITE] for _ in range(3)])


def make_random_grid(W, H, seed=0):
    """Random RGB grid of the given size."""
    gen = torch.Generator().manual_seed(seed)
    return PixelGrid.from_tensor(torch.randint(0, 256, (3, H, W), generator=gen))


def make_index_grid(W, H):
    """Grid whose pixel at (c, r) is (c, r, 0), so positions are traceable."""
    return PixelGrid.from_rows([[(c, r, 0) for c in range(W)] for r in range(H)])


def brute_force_min_seam_energy(energy):
    """Minimum vertical seam energy over all connected paths of an (H, W) map."""
    rows = energy.to(torch.float64).tolist()
    H, W = len(rows), len(rows[0])
    best = float('inf')
    for start in range(W):
        for steps in itertools.product((-1, 0, 1), repeat=H - 1):
            col = start
            total = rows[0][col]
            valid = True
            for i, step in enumerate(steps, start=1):
                col += step
                if not 0 <= col < W:
                    valid = False
                    break
                total += rows[i][col]
            if valid:
                best = min(best, total)
    return best
