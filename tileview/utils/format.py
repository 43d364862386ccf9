"""Text formatting helpers shared by the SVG and HTML renderers."""

import math
from typing import Any, Optional

from pyrsistent import thaw

from tileview.model.color import ColorF
from tileview.model.geometry import Box2D, Point


def format_number(value: float) -> str:
    """Shortest plain rendering of a coordinate: ``10``, ``10.5``, ``0.125``."""
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_fixed(value: float) -> str:
    """Two-decimal rendering used for tile tree rectangles."""
    return f"{value:.2f}"


def format_point(point: Point) -> str:
    return f"({format_number(point.x)},{format_number(point.y)})"


def format_box(box: Box2D) -> str:
    """``x0,y0 -> x1,y1``"""
    return (
        f"{format_number(box.min.x)},{format_number(box.min.y)} -> "
        f"{format_number(box.max.x)},{format_number(box.max.y)}"
    )


def format_color(color: Optional[ColorF]) -> str:
    """``(r,g,b,a)`` with float channels, or ``none``."""
    if color is None:
        return "none"
    return "({},{},{},{})".format(
        *(format_number(c) for c in (color.r, color.g, color.b, color.a))
    )


def debug_value(value: Any) -> str:
    """Debug form of a decoded value; persistent containers print as plain ones."""
    return repr(thaw(value))
