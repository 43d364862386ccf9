"""Command line entry point.

Usage::

    tileview INPUT_DIR OUTPUT_DIR [--scale S] [--x X --y Y] [--tile-tree]

then open ``OUTPUT_DIR/index.html``. Some viewer features are blocked by
browsers for ``file://`` pages; serve the directory instead, e.g.
``python -m http.server -d OUTPUT_DIR 8000``. Every file in ``INPUT_DIR`` is
read as a frame, so do not write the viewer into it.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tileview.config import ConvertConfig, SvgSettings
from tileview.errors import TileviewError
from tileview.pipeline import convert

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tileview",
        description="Convert logged tile cache frames into an SVG/HTML viewer.",
        epilog=(
            "Keep OUTPUT_DIR outside INPUT_DIR: every file in INPUT_DIR is read as a frame. "
            "Serve OUTPUT_DIR over HTTP; some features fail on file:// pages."
        ),
    )
    parser.add_argument("input_dir", type=Path, help="directory of frame files")
    parser.add_argument("output_dir", type=Path, help="directory to write the viewer to")
    parser.add_argument(
        "--scale", type=float, default=1.0, help="SVG scale factor (default: 1.0)"
    )
    parser.add_argument("--x", type=float, default=0.0, help="SVG x offset after scaling")
    parser.add_argument("--y", type=float, default=0.0, help="SVG y offset after scaling")
    parser.add_argument(
        "--tile-tree",
        action="store_true",
        help="also draw each tile's subdivision tree",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ConvertConfig:
    return ConvertConfig(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        svg=SvgSettings(scale=args.scale, x=args.x, y=args.y, tile_tree=args.tile_tree),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the converter; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        summary = convert(config_from_args(args))
    except TileviewError as exc:
        logger.error("%s", exc)
        return 1
    logger.info(
        "Wrote %d frames (slices 0..%d) to %s",
        len(summary.frame_stems),
        summary.max_slice_index,
        args.output_dir,
    )
    return 0
