"""Batch conversion of a capture directory.

Frames are processed strictly in order because each one is diffed against its
predecessor and the item display map only ever grows. Output names are checked
for collisions before anything is written; then, per frame:

1. Load the frame (fails the run on malformed input).
2. Fold its interning insertions into the display map.
3. Render slices against the previous frame's slices.
4. Write the SVG and the report page.

After the last frame the index page, generated CSS and static assets are
written. :func:`convert` is the only entry point with side effects.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pyrsistent import PMap, PVector, pmap

from tileview.config import ConvertConfig
from tileview.loading.files import discover_frame_files, iter_frames, update_display_map
from tileview.model.slice import Slice
from tileview.output import (
    copy_assets,
    frame_output_stems,
    write_css,
    write_frame,
    write_index,
)
from tileview.renderer.interning import updatelist_to_html
from tileview.renderer.svg import SvgExtents, slices_to_svg
from tileview.types import ItemUid

logger = logging.getLogger(__name__)


@dataclass
class ConversionSummary:
    """What a conversion produced.

    Attributes:
        frame_stems: Output base name per frame, in order.
        max_slice_index: Highest slice index seen in any frame.
        width: Largest SVG width drawn.
        height: Largest SVG height drawn.
    """

    frame_stems: List[str] = field(default_factory=list)
    max_slice_index: int = 0
    width: int = 0
    height: int = 0


def convert(config: ConvertConfig) -> ConversionSummary:
    """Convert every frame of ``config.input_dir`` into ``config.output_dir``."""
    paths = discover_frame_files(config.input_dir)
    summary = ConversionSummary(frame_stems=frame_output_stems([p.name for p in paths]))
    config.output_dir.mkdir(parents=True, exist_ok=True)

    extents = SvgExtents()
    display_map: PMap[ItemUid, str] = pmap()
    prev_slices: Optional[PVector[Slice]] = None

    for frame in iter_frames(paths):
        display_map = update_display_map(display_map, frame.update_lists)
        svg, invalidation_report = slices_to_svg(
            frame.slices, prev_slices, display_map, config.svg, extents
        )
        report_html = updatelist_to_html(frame.update_lists, invalidation_report)
        write_frame(config.output_dir, frame.name, svg, report_html)
        logger.info("Processed %s (%d slices)", frame.name, len(frame.slices))
        prev_slices = frame.slices

    if not summary.frame_stems:
        logger.warning("No frame files found in %s", config.input_dir)

    summary.max_slice_index = extents.max_slice_index
    summary.width = extents.width
    summary.height = extents.height

    write_index(config.output_dir, summary.frame_stems, summary.max_slice_index)
    write_css(config.output_dir, summary.max_slice_index)
    copy_assets(config.output_dir)
    return summary
