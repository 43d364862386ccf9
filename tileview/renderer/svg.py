"""Slice rendering: SVG document plus invalidation report.

For every slice of a frame, each tile is drawn twice: once filled with its
classification style, and once nearly transparent on top to carry the hover
tooltip. Tiles are compared against the same-keyed tile of the same slice index
in the previous frame; when there is such a tile and the current one has an
invalidation reason, the tooltip and a report entry explain the reason. A tile
with no predecessor is a first appearance and has nothing to explain.

``SvgExtents`` accumulates document size and the highest slice index across
calls so a whole capture can share one viewport.
"""

import html
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pyrsistent import pmap

from tileview.config import STYLESHEETS, SvgSettings
from tileview.errors import ProjectionError
from tileview.model.slice import Slice
from tileview.model.tile import Tile, TileOffset
from tileview.renderer.classify import classify, describe_reason
from tileview.renderer.styles import CSS_NO_STROKE
from tileview.renderer.tree import flatten_tile_tree, svg_rect_attrs
from tileview.types import DisplayMap
from tileview.utils.format import format_number
from tileview.utils.projection import project_rect

logger = logging.getLogger(__name__)

HIT_TEST_STYLE = "fill-opacity:0.001;"

_EMPTY_DISPLAY_MAP: DisplayMap = pmap()


@dataclass
class SvgExtents:
    """Running document bounds shared across frames.

    Attributes:
        width: Largest right edge drawn so far (SVG units).
        height: Largest bottom edge drawn so far.
        max_slice_index: Highest slice index seen.
    """

    width: int = 0
    height: int = 0
    max_slice_index: int = 0

    def include(self, x: float, y: float, w: float, h: float) -> None:
        self.width = max(self.width, math.ceil(x + w))
        self.height = max(self.height, math.ceil(y + h))


def find_previous_slice(
    slice: Slice, prev_slices: Optional[Sequence[Slice]]
) -> Optional[Slice]:
    """Return the first previous slice with the same index, if any."""
    if prev_slices is None:
        return None
    for candidate in prev_slices:
        if candidate.index == slice.index:
            return candidate
    return None


def tile_to_svg(
    key: TileOffset,
    tile: Tile,
    slice: Slice,
    prev_tile: Optional[Tile],
    display_map: DisplayMap,
    settings: SvgSettings,
    extents: SvgExtents,
) -> Tuple[str, str]:
    """Render one tile.

    Args:
        key: Tile offset within the slice.
        tile: Tile to render.
        slice: Owning slice (transform, background, index).
        prev_tile: Same-keyed tile in the previous frame, if any.
        display_map: Item id -> display string.
        settings: SVG scale/offset parameters.
        extents: Updated in place with the drawn bounds.

    Returns:
        Tuple[str, str]: ``(svg_fragment, report_entry)``. Either may be empty:
        the fragment when the tile cannot be projected, the entry when there is
        nothing to explain.
    """
    tile_cache = slice.tile_cache
    reason = tile.invalidation_reason
    style, explanation = classify(
        reason, tile.background_color, tile_cache.background_color, display_map
    )
    explained = reason is not None and prev_tile is not None

    try:
        rect_world = project_rect(tile.rect, slice.transform)
    except ProjectionError as exc:
        logger.warning(
            "Skipping tile (%d,%d) of slice %d: %s", key.x, key.y, tile_cache.slice, exc
        )
        return "", ""
    x, y, w, h = svg_rect_attrs(rect_world, settings)
    extents.include(x, y, w, h)
    geometry = (
        f'x="{format_number(x)}" y="{format_number(y)}" '
        f'width="{format_number(w)}" height="{format_number(h)}"'
    )

    title = ""
    report = ""
    if explained:
        title = "<title>{}</title>".format(
            html.escape(
                f"slice {tile_cache.slice} tile ({key.x},{key.y}) - "
                f"{describe_reason(reason)}"
            )
        )
        report = (
            f'<div class="subheader">slice {tile_cache.slice} key ({key.x},{key.y})</div>'
            f'<div class="data">{explanation}</div>\n'
        )

    svg = f"\n<!-- tile key {key.x},{key.y} ; -->\n"
    svg += f'<rect {geometry} style="{style}{CSS_NO_STROKE}" ></rect>'
    # Nearly invisible; only here to carry the tooltip.
    svg += f'<rect {geometry} style="{HIT_TEST_STYLE}{CSS_NO_STROKE}" >{title}</rect>'
    if settings.tile_tree and tile.root is not None:
        svg += '\n<g class="svg_quadtree">\n{}</g>'.format(
            "".join(
                flatten_tile_tree(tile.root, slice.transform, settings, extents.include)
            )
        )
    return svg, report


def svg_document(body: str, extents: SvgExtents) -> str:
    """Wrap slice groups in the SVG root with stylesheets and a black backdrop."""
    stylesheets = "".join(
        f'<?xml-stylesheet type="text/css" href="{href}" ?>\n' for href in STYLESHEETS
    )
    return (
        f"{stylesheets}"
        f'<svg version="1.1" baseProfile="full" xmlns="http://www.w3.org/2000/svg" '
        f'width="{extents.width}" height="{extents.height}" >\n'
        '<rect fill="black" width="100%" height="100%"/>\n'
        f"{body}\n</svg>\n"
    )


def slices_to_svg(
    slices: Sequence[Slice],
    prev_slices: Optional[Sequence[Slice]],
    display_map: DisplayMap = _EMPTY_DISPLAY_MAP,
    settings: Optional[SvgSettings] = None,
    extents: Optional[SvgExtents] = None,
) -> Tuple[str, str]:
    """Render a frame's slices.

    Args:
        slices: Slices of the current frame, in logged order.
        prev_slices: Slices of the previous frame, or None for the first frame.
        display_map: Item id -> display string.
        settings: SVG scale/offset parameters (defaults to identity).
        extents: Running bounds to grow; a fresh one is used if omitted.

    Returns:
        Tuple[str, str]: ``(svg_document, invalidation_report_html)``.
    """
    settings = settings or SvgSettings()
    extents = extents if extents is not None else SvgExtents()

    groups: List[str] = []
    report: List[str] = ['<div class="header">Invalidation</div>\n']

    for slice in slices:
        index = slice.index
        extents.max_slice_index = max(extents.max_slice_index, index)
        prev_slice = find_previous_slice(slice, prev_slices)

        group: List[str] = [
            f'\n<g id="tile_slice{index}_everything">',
            f"\n<!-- tile_cache slice {index} -->\n",
        ]
        report.append(f'<div id="invalidation_slice{index}">\n')

        explained_count = 0
        for key, tile in slice.tile_cache.items():
            prev_tile = prev_slice.tile_cache.get(key) if prev_slice else None
            fragment, entry = tile_to_svg(
                key, tile, slice, prev_tile, display_map, settings, extents
            )
            group.append(fragment)
            if entry:
                report.append(entry)
                explained_count += 1

        group.append("\n</g>")
        report.append("</div>\n")
        groups.append("".join(group))
        logger.debug(
            "Slice %d: %d tiles, %d explained, predecessor %s",
            index,
            len(slice.tile_cache),
            explained_count,
            "found" if prev_slice else "missing",
        )

    return svg_document("".join(groups), extents), "".join(report)
