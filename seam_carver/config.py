"""
Configuration, errors and dimension checks for seam carving.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


class SeamCarverError(Exception):
    """Base exception for seam carving errors."""

    pass


class InvalidDimensionError(SeamCarverError):
    """Grid dimension is zero, or an operation would drop it below 1."""

    pass


class SeamLengthMismatchError(SeamCarverError):
    """Seam length differs from the grid dimension it spans."""

    pass


class SeamOutOfBoundsError(SeamCarverError):
    """Seam index lies outside the grid, or the seam is not connected."""

    pass


@dataclass
class CarveConfig:
    """Settings for a carving run driven from the command line."""

    input_path: str = ""
    output_path: str = ""
    target_width: Optional[int] = None
    target_height: Optional[int] = None
    mark_seams: bool = False
    seam_color: Tuple[int, int, int] = (255, 0, 0)
    debug: bool = False


def validate_grid_dimensions(width: int, height: int) -> None:
    """Reject grids with a zero or negative dimension.

    Raises:
        InvalidDimensionError: If either dimension is below 1.
    """
    if width < 1 or height < 1:
        raise InvalidDimensionError(
            f"Grid dimensions must be at least 1x1, got {width}x{height}")


def validate_target(width: int, height: int,
                    target_width: Optional[int],
                    target_height: Optional[int]) -> Tuple[int, int]:
    """
    Resolve a target size against the current one.

    A target of None keeps that dimension. Targets must lie in
    [1, current] since carving only shrinks.

    Returns:
        (target_width, target_height) with None replaced by the current size
    """
    validate_grid_dimensions(width, height)
    resolved = []
    for name, current, target in (('width', width, target_width),
                                  ('height', height, target_height)):
        if target is None:
            target = current
        if target < 1:
            raise InvalidDimensionError(f"Target {name} must be at least 1, got {target}")
        if target > current:
            raise InvalidDimensionError(
                f"Target {name} {target} exceeds current {name} {current}; "
                "seam insertion is not supported")
        resolved.append(target)
    return resolved[0], resolved[1]
