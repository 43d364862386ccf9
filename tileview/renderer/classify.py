"""Invalidation classification.

Turns a tile's invalidation reason into the two things the viewer shows: a fill
style for the SVG and an HTML explanation for the report. Most reasons are
printed field by field; list-valued and content reasons get diffed so the
report says *what* changed rather than dumping both sides.

Everything here is pure. Item ids are resolved through a display map purely for
presentation; unknown ids resolve to an empty string.
"""

import dataclasses
import html
from typing import Any, Callable, Dict, List, Optional, Tuple

from pyrsistent import pmap

from tileview.model.color import ColorF
from tileview.model.geometry import Box2D, Point
from tileview.model.invalidation import (
    BackgroundColor,
    ClipDetail,
    Content,
    CountResult,
    DescriptorDetail,
    FractionalOffset,
    InvalidationReason,
    NotEqualResult,
    PrimCount,
    SurfaceOpacityChanged,
)
from tileview.renderer.styles import background_fill, style_for_kind
from tileview.types import DisplayMap, InvalidationKind, ItemUid
from tileview.utils.diff import removed_and_added
from tileview.utils.format import (
    format_box,
    format_color,
    format_number,
    format_point,
)

Explainer = Callable[[Any, DisplayMap], str]

_EMPTY_DISPLAY_MAP: DisplayMap = pmap()


def display_name(display_map: DisplayMap, uid: ItemUid) -> str:
    """Escaped display string for ``uid`` (empty if unknown)."""
    return html.escape(display_map.get(uid, ""))


def _dump(value: Any) -> str:
    return html.escape(repr(value))


def _explain_unit(reason: Any, display_map: DisplayMap) -> str:
    return f"<b>{reason.kind}</b>"


def _explain_fractional_offset(reason: FractionalOffset, display_map: DisplayMap) -> str:
    return (
        f"<b>{reason.kind}</b> changed from "
        f"{format_point(reason.old)} to {format_point(reason.new)}"
    )


def _explain_background_color(reason: BackgroundColor, display_map: DisplayMap) -> str:
    return (
        f"<b>{reason.kind}</b> changed from "
        f"{format_color(reason.old)} to {format_color(reason.new)}"
    )


def _explain_surface_opacity(
    reason: SurfaceOpacityChanged, display_map: DisplayMap
) -> str:
    before = str(not reason.became_opaque).lower()
    after = str(reason.became_opaque).lower()
    return f"<b>{reason.kind}</b> changed from {before} to {after}"


def _uid_list_items(uids: List[ItemUid], display_map: DisplayMap) -> str:
    return "".join(
        f"<li>{uid}...{display_name(display_map, uid)}</li>\n" for uid in uids
    )


def _explain_prim_count(reason: PrimCount, display_map: DisplayMap) -> str:
    removed, added = removed_and_added(reason.old, reason.new)
    return (
        f"<b>{reason.kind}</b> changed from {len(reason.old)} to {len(reason.new)}:<br/>"
        f"removed:<ul>{_uid_list_items(removed, display_map)}</ul>\n"
        f"added:<ul>{_uid_list_items(added, display_map)}</ul>"
    )


def _explain_descriptor(detail: DescriptorDetail, display_map: DisplayMap) -> str:
    old, new = detail.old, detail.new
    if old.prim_uid == new.prim_uid:
        # Same primitive: list only the fields that moved.
        changes = ""
        if old.prim_clip_box != new.prim_clip_box:
            changes += (
                f"<li><b>prim_clip_rect</b> changed from "
                f"{html.escape(format_box(old.prim_clip_box))} to "
                f"{html.escape(format_box(new.prim_clip_box))}</li>"
            )
        return (
            f"<b>Content: Descriptor</b> changed for uid {old.prim_uid}<br/>"
            f"<ul>{changes}<li>Item: {display_name(display_map, old.prim_uid)}</li></ul>"
        )
    return (
        f"<b>Content: Descriptor</b> changed; old uid {old.prim_uid}, "
        f"new uid {new.prim_uid}:<br/>"
        f"old:<ul><li>Desc: {_dump(old)}</li>"
        f"<li>Item: {display_name(display_map, old.prim_uid)}</li></ul>"
        f"new:<ul><li>Desc: {_dump(new)}</li>"
        f"<li>Item: {display_name(display_map, new.prim_uid)}</li></ul>"
    )


def _explain_clip(detail: ClipDetail, display_map: DisplayMap) -> str:
    result = detail.detail
    if isinstance(result, CountResult):
        return (
            f"<b>Content: Clip</b> count changed from "
            f"{result.prev_count} to {result.curr_count}<br/>"
        )
    if isinstance(result, NotEqualResult):
        return (
            f"<b>Content: Clip</b> ItemUids changed from "
            f"{result.prev} to {result.curr}:<br/>"
            f"old:<ul><li>{display_name(display_map, result.prev)}</li></ul>"
            f"new:<ul><li>{display_name(display_map, result.curr)}</li></ul>"
        )
    return _dump(result)


def _explain_content(reason: Content, display_map: DisplayMap) -> str:
    detail = reason.prim_compare_result_detail
    if isinstance(detail, DescriptorDetail):
        return _explain_descriptor(detail, display_map)
    if isinstance(detail, ClipDetail):
        return _explain_clip(detail, display_map)
    return _dump(detail)


EXPLAINERS: Dict[InvalidationKind, Explainer] = {
    InvalidationKind.FRACTIONAL_OFFSET: _explain_fractional_offset,
    InvalidationKind.BACKGROUND_COLOR: _explain_background_color,
    InvalidationKind.SURFACE_OPACITY_CHANGED: _explain_surface_opacity,
    InvalidationKind.NO_TEXTURE: _explain_unit,
    InvalidationKind.NO_SURFACE: _explain_unit,
    InvalidationKind.PRIM_COUNT: _explain_prim_count,
    InvalidationKind.COMPOSITOR_KIND_CHANGED: _explain_unit,
    InvalidationKind.CONTENT: _explain_content,
    InvalidationKind.VALID_RECT_CHANGED: _explain_unit,
    InvalidationKind.SCALE_CHANGED: _explain_unit,
}


def explain(
    reason: InvalidationReason, display_map: DisplayMap = _EMPTY_DISPLAY_MAP
) -> str:
    """Return the HTML explanation for ``reason``. Fails fast on unknown kinds."""
    explainer = EXPLAINERS.get(reason.kind)
    if explainer is None:
        raise ValueError(f"No explanation for invalidation kind: {reason.kind!r}")
    return explainer(reason, display_map)


def classify(
    reason: Optional[InvalidationReason],
    current_background: Optional[ColorF],
    fallback_background: Optional[ColorF],
    display_map: DisplayMap = _EMPTY_DISPLAY_MAP,
) -> Tuple[str, str]:
    """Pick a fill style and build an explanation for one tile.

    Args:
        reason: The tile's invalidation reason, or None if it was not invalidated.
        current_background: The tile's own background color.
        fallback_background: The slice background, used when the tile has none.
        display_map: Item id -> display string.

    Returns:
        Tuple[str, str]: ``(style, explanation_html)``. The explanation is empty
        when there is no reason.
    """
    if reason is None:
        return background_fill(current_background, fallback_background), ""
    return style_for_kind(reason.kind), explain(reason, display_map)


def _describe_value(value: Any) -> str:
    if isinstance(value, Point):
        return format_point(value)
    if isinstance(value, ColorF):
        return format_color(value)
    if isinstance(value, Box2D):
        return format_box(value)
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (list, tuple)) or hasattr(value, "tolist"):
        return "[" + ", ".join(_describe_value(v) for v in value) + "]"
    if dataclasses.is_dataclass(value):
        return getattr(value, "name", type(value).__name__)
    return str(value)


def describe_reason(reason: InvalidationReason) -> str:
    """One-line plain-text form of a reason, e.g. ``FractionalOffset(old=(0,0), new=(0.5,0))``."""
    fields = dataclasses.fields(reason)
    if not fields:
        return str(reason.kind)
    args = ", ".join(
        f"{f.name}={_describe_value(getattr(reason, f.name))}" for f in fields
    )
    return f"{reason.kind}({args})"
