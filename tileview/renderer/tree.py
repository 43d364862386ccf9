"""Tile subdivision tree to SVG.

Each leaf becomes one ``<rect>`` in device space; interior nodes just
concatenate their children in order, so later children draw on top.
"""

import logging
from typing import Callable, List, Optional, Tuple

from tileview.config import SvgSettings
from tileview.errors import ProjectionError
from tileview.model.geometry import Rect, Transform3D
from tileview.model.tile import TileNode
from tileview.utils.format import format_fixed
from tileview.utils.projection import project_rect

logger = logging.getLogger(__name__)

RectSink = Callable[[float, float, float, float], None]


def svg_rect_attrs(rect: Rect, settings: SvgSettings) -> Tuple[float, float, float, float]:
    """Apply the SVG scale/offset to a device-space rect: ``(x, y, width, height)``."""
    return (
        rect.origin.x * settings.scale + settings.x,
        rect.origin.y * settings.scale + settings.y,
        rect.size.width * settings.scale,
        rect.size.height * settings.scale,
    )


def flatten_tile_tree(
    node: TileNode,
    transform: Transform3D,
    settings: SvgSettings,
    on_rect: Optional[RectSink] = None,
) -> List[str]:
    """Return one SVG ``<rect>`` fragment per leaf of ``node``, depth-first.

    Leaves whose rectangle cannot be projected are left out. ``on_rect``, if
    given, receives ``(x, y, width, height)`` of every emitted rect.
    """
    fragments: List[str] = []
    for leaf in node.leaves():
        try:
            rect_world = project_rect(leaf.rect.to_rect(), transform)
        except ProjectionError as exc:
            logger.warning("Skipping tile tree leaf: %s", exc)
            continue
        x, y, w, h = svg_rect_attrs(rect_world, settings)
        if on_rect is not None:
            on_rect(x, y, w, h)
        fragments.append(
            f'<rect x="{format_fixed(x)}" y="{format_fixed(y)}" '
            f'width="{format_fixed(w)}" height="{format_fixed(h)}" />\n'
        )
    return fragments
