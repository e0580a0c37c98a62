"""
Command-line driver: load an image, carve it to a target size, save it.

    seam-carver input.png output.png --width 200 --height 150
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from PIL import Image

from .carving import carve_image, mark_seam
from .config import CarveConfig, SeamCarverError
from .grid import PixelGrid
from .seam import find_horizontal_seam, find_vertical_seam

logger = logging.getLogger("seam_carver")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seam-carver',
        description="Content-aware image shrinking by seam carving"
    )
    parser.add_argument('input', help='Input image path')
    parser.add_argument('output', help='Output image path')
    parser.add_argument(
        '--width', type=int, default=None,
        help='Target width in pixels (default: keep current width)'
    )
    parser.add_argument(
        '--height', type=int, default=None,
        help='Target height in pixels (default: keep current height)'
    )
    parser.add_argument(
        '--mark-seams', action='store_true',
        help='Paint the next seam that would be removed onto the output'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='Enable debug logging'
    )
    return parser


def parse_args(argv: Sequence[str]) -> CarveConfig:
    """
    Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name)

    Returns:
        CarveConfig for the run
    """
    args = _build_parser().parse_args(list(argv[1:]))
    return CarveConfig(
        input_path=args.input,
        output_path=args.output,
        target_width=args.width,
        target_height=args.height,
        mark_seams=args.mark_seams,
        debug=args.debug,
    )


def process_image(config: CarveConfig) -> PixelGrid:
    """Carve the configured input image and write the result."""
    with Image.open(config.input_path) as img:
        grid = PixelGrid.from_pil(img)
    logger.debug("Loaded %s (%dx%d)", config.input_path, grid.width, grid.height)

    carved = carve_image(grid, config.target_width, config.target_height)

    if config.mark_seams:
        if carved.width > 1:
            carved = mark_seam(carved, find_vertical_seam(carved), 'vertical',
                               config.seam_color)
        elif carved.height > 1:
            carved = mark_seam(carved, find_horizontal_seam(carved), 'horizontal',
                               config.seam_color)

    carved.to_pil().save(config.output_path)
    logger.debug("Saved %s (%dx%d)", config.output_path, carved.width, carved.height)
    return carved


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        argv = sys.argv
    config = parse_args(argv)

    if config.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logger.setLevel(logging.DEBUG)

    try:
        process_image(config)
        return 0
    except SeamCarverError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Processing error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
