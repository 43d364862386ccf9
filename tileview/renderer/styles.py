"""Tile fill styles.

Every invalidation kind gets its own faint fill so changed tiles can be told
apart at a glance. Tiles that were not invalidated show their background color
(tile override first, then the slice's), or nothing at all.
"""

from typing import Dict, Optional

from tileview.model.color import ColorF
from tileview.types import InvalidationKind

CSS_FRACTIONAL_OFFSET = "fill:#4040c0;fill-opacity:0.1;"
CSS_BACKGROUND_COLOR = "fill:#10c070;fill-opacity:0.1;"
CSS_SURFACE_OPACITY_CHANGED = "fill:#c040c0;fill-opacity:0.1;"
CSS_NO_TEXTURE = "fill:#c04040;fill-opacity:0.1;"
CSS_NO_SURFACE = "fill:#40c040;fill-opacity:0.1;"
CSS_PRIM_COUNT = "fill:#40f0f0;fill-opacity:0.1;"
CSS_CONTENT = "fill:#f04040;fill-opacity:0.1;"
CSS_COMPOSITOR_KIND_CHANGED = "fill:#f0c070;fill-opacity:0.1;"
CSS_VALID_RECT_CHANGED = "fill:#ff00ff;fill-opacity:0.1;"
CSS_SCALE_CHANGED = "fill:#ff80ff;fill-opacity:0.1;"

CSS_NO_FILL = "fill:none;"
CSS_NO_STROKE = "stroke:none;"
BACKGROUND_FILL_OPACITY = 0.3

STYLE_BY_KIND: Dict[InvalidationKind, str] = {
    InvalidationKind.FRACTIONAL_OFFSET: CSS_FRACTIONAL_OFFSET,
    InvalidationKind.BACKGROUND_COLOR: CSS_BACKGROUND_COLOR,
    InvalidationKind.SURFACE_OPACITY_CHANGED: CSS_SURFACE_OPACITY_CHANGED,
    InvalidationKind.NO_TEXTURE: CSS_NO_TEXTURE,
    InvalidationKind.NO_SURFACE: CSS_NO_SURFACE,
    InvalidationKind.PRIM_COUNT: CSS_PRIM_COUNT,
    InvalidationKind.COMPOSITOR_KIND_CHANGED: CSS_COMPOSITOR_KIND_CHANGED,
    InvalidationKind.CONTENT: CSS_CONTENT,
    InvalidationKind.VALID_RECT_CHANGED: CSS_VALID_RECT_CHANGED,
    InvalidationKind.SCALE_CHANGED: CSS_SCALE_CHANGED,
}


def style_for_kind(kind: InvalidationKind) -> str:
    """Return the fill for an invalidation kind. Fails fast on unknown kinds."""
    try:
        return STYLE_BY_KIND[kind]
    except KeyError:
        raise ValueError(f"No style for invalidation kind: {kind!r}") from None


def background_fill(
    current: Optional[ColorF], fallback: Optional[ColorF]
) -> str:
    """Fill for a tile without an invalidation reason."""
    color = current if current is not None else fallback
    if color is None:
        return CSS_NO_FILL
    r, g, b = color.to_rgb8()
    return f"fill:rgb({r},{g},{b});fill-opacity:{BACKGROUND_FILL_OPACITY};"
