"""Decoded JSON -> immutable snapshot model.

Frame files follow serde's default JSON shapes:

* Enums are externally tagged: unit variants are bare strings (``"NoTexture"``),
  data variants are single-key objects (``{"PrimCount": {"old": [], "new": []}}``).
* Points and sizes are ``[x, y]`` / ``[w, h]``; rects ``[origin, size]``; boxes
  ``[min, max]``. Object forms (``{"x": .., "y": ..}`` etc.) are accepted too.
* Colors are ``{"r", "g", "b", "a"}`` or ``[r, g, b, a]``.
* Item ids are ints or ``{"uid": n}``.
* A slice's tiles are a list of ``[[x, y], tile]`` pairs (logged order), or an
  object keyed by ``"x,y"``.
* Transforms are 16 numbers, row-major, or an object with ``m11`` .. ``m44``.

Anything that does not fit raises :class:`~tileview.errors.SnapshotFormatError`.
"""

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from pyrsistent import PVector, freeze, pvector

from tileview.errors import SnapshotFormatError
from tileview.model.color import ColorF
from tileview.model.frame import Frame
from tileview.model.geometry import Box2D, Point, Rect, Size, Transform3D
from tileview.model.intern import Insertion, Removal, UpdateList, UpdateListsByCategory
from tileview.model.invalidation import (
    BackgroundColor,
    ClipDetail,
    CompareHelperResult,
    CompositorKindChanged,
    Content,
    CountResult,
    DescriptorDetail,
    EqualResult,
    FractionalOffset,
    InvalidationReason,
    NoSurface,
    NoTexture,
    NotEqualResult,
    OtherDetail,
    PredicateTrueResult,
    PrimCount,
    PrimitiveCompareResultDetail,
    PrimitiveDescriptor,
    ScaleChanged,
    SentinelResult,
    SurfaceOpacityChanged,
    ValidRectChanged,
)
from tileview.model.slice import Slice, TileCacheInstance
from tileview.model.tile import LeafKind, NodeKind, Tile, TileNode, TileOffset
from tileview.types import InvalidationKind, ItemUid

_MATRIX_KEYS = [f"m{row}{col}" for row in range(1, 5) for col in range(1, 5)]


def _variant(value: Any) -> Tuple[str, Any]:
    """Split an externally tagged enum value into ``(tag, payload)``."""
    if isinstance(value, str):
        return value, None
    if isinstance(value, Mapping) and len(value) == 1:
        ((tag, payload),) = value.items()
        return tag, payload
    raise SnapshotFormatError(f"Expected an enum variant, got {value!r}")


def _pair(value: Any, first: str, second: str) -> Tuple[float, float]:
    if isinstance(value, Mapping):
        return float(value[first]), float(value[second])
    a, b = value
    return float(a), float(b)


def to_point(value: Any) -> Point:
    return Point(*_pair(value, "x", "y"))


def to_size(value: Any) -> Size:
    return Size(*_pair(value, "width", "height"))


def to_rect(value: Any) -> Rect:
    if isinstance(value, Mapping):
        return Rect(to_point(value["origin"]), to_size(value["size"]))
    origin, size = value
    return Rect(to_point(origin), to_size(size))


def to_box(value: Any) -> Box2D:
    if isinstance(value, Mapping):
        return Box2D(to_point(value["min"]), to_point(value["max"]))
    lo, hi = value
    return Box2D(to_point(lo), to_point(hi))


def to_color(value: Any) -> Optional[ColorF]:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return ColorF(
            float(value["r"]), float(value["g"]), float(value["b"]), float(value.get("a", 1.0))
        )
    return ColorF(*(float(c) for c in value))


def to_uid(value: Any) -> ItemUid:
    if isinstance(value, Mapping):
        return int(value["uid"])
    return int(value)


def to_transform(value: Any) -> Transform3D:
    if isinstance(value, Mapping):
        return Transform3D(tuple(float(value[k]) for k in _MATRIX_KEYS))
    flat: List[float] = []
    for entry in value:
        # Tolerate a nested 4x4 form as well as the flat one.
        if isinstance(entry, (list, tuple)):
            flat.extend(float(e) for e in entry)
        else:
            flat.append(float(entry))
    return Transform3D(tuple(flat))


# --- Invalidation reasons ------------------------------------------------------


def to_compare_helper_result(value: Any) -> CompareHelperResult:
    tag, payload = _variant(value)
    if tag == EqualResult.name:
        return EqualResult()
    if tag == SentinelResult.name:
        return SentinelResult()
    if tag == CountResult.name:
        return CountResult(int(payload["prev_count"]), int(payload["curr_count"]))
    if tag == NotEqualResult.name:
        return NotEqualResult(to_uid(payload["prev"]), to_uid(payload["curr"]))
    if tag == PredicateTrueResult.name:
        return PredicateTrueResult(to_uid(payload["curr"]))
    raise SnapshotFormatError(f"Unknown compare helper result: {tag!r}")


def to_descriptor(value: Mapping[str, Any]) -> PrimitiveDescriptor:
    origin = value.get("origin")
    return PrimitiveDescriptor(
        prim_uid=to_uid(value["prim_uid"]),
        prim_clip_box=to_box(value["prim_clip_box"]),
        origin=to_point(origin) if origin is not None else None,
    )


def to_compare_detail(value: Any) -> Optional[PrimitiveCompareResultDetail]:
    if value is None:
        return None
    tag, payload = _variant(value)
    if tag == DescriptorDetail.name:
        return DescriptorDetail(to_descriptor(payload["old"]), to_descriptor(payload["new"]))
    if tag == ClipDetail.name:
        return ClipDetail(to_compare_helper_result(payload["detail"]))
    nested = payload.get("detail") if isinstance(payload, Mapping) else None
    return OtherDetail(
        name=tag,
        detail=to_compare_helper_result(nested) if nested is not None else None,
    )


def _uid_list(value: Any) -> PVector[ItemUid]:
    return pvector(to_uid(v) for v in (value or ()))


_REASON_DECODERS: Dict[InvalidationKind, Callable[[Any], InvalidationReason]] = {
    InvalidationKind.FRACTIONAL_OFFSET: lambda p: FractionalOffset(
        old=to_point(p["old"]), new=to_point(p["new"])
    ),
    InvalidationKind.BACKGROUND_COLOR: lambda p: BackgroundColor(
        old=to_color(p.get("old")), new=to_color(p.get("new"))
    ),
    InvalidationKind.SURFACE_OPACITY_CHANGED: lambda p: SurfaceOpacityChanged(
        became_opaque=bool(p["became_opaque"])
    ),
    InvalidationKind.NO_TEXTURE: lambda p: NoTexture(),
    InvalidationKind.NO_SURFACE: lambda p: NoSurface(),
    InvalidationKind.PRIM_COUNT: lambda p: PrimCount(
        old=_uid_list(p.get("old")), new=_uid_list(p.get("new"))
    ),
    InvalidationKind.COMPOSITOR_KIND_CHANGED: lambda p: CompositorKindChanged(),
    InvalidationKind.CONTENT: lambda p: Content(
        prim_compare_result=_variant(p.get("prim_compare_result") or "")[0],
        prim_compare_result_detail=to_compare_detail(p.get("prim_compare_result_detail")),
    ),
    InvalidationKind.VALID_RECT_CHANGED: lambda p: ValidRectChanged(),
    InvalidationKind.SCALE_CHANGED: lambda p: ScaleChanged(),
}


def to_reason(value: Any) -> Optional[InvalidationReason]:
    if value is None:
        return None
    tag, payload = _variant(value)
    try:
        kind = InvalidationKind(tag)
    except ValueError:
        raise SnapshotFormatError(f"Unknown invalidation reason: {tag!r}") from None
    return _REASON_DECODERS[kind](payload if payload is not None else {})


# --- Tiles and slices ----------------------------------------------------------


def to_tile_node(value: Mapping[str, Any]) -> TileNode:
    tag, payload = _variant(value.get("kind", "Leaf"))
    if tag == "Leaf":
        return TileNode(rect=to_box(value["rect"]), kind=LeafKind())
    if tag == "Node":
        children = pvector(to_tile_node(c) for c in payload["children"])
        return TileNode(rect=to_box(value["rect"]), kind=NodeKind(children))
    raise SnapshotFormatError(f"Unknown tile node kind: {tag!r}")


def to_tile(value: Mapping[str, Any]) -> Tile:
    root = value.get("root")
    return Tile(
        rect=to_rect(value["rect"]),
        invalidation_reason=to_reason(value.get("invalidation_reason")),
        background_color=to_color(value.get("background_color")),
        root=to_tile_node(root) if root is not None else None,
    )


def to_tile_offset(value: Any) -> TileOffset:
    if isinstance(value, str):
        x, y = value.split(",")
        return TileOffset(int(x), int(y))
    if isinstance(value, Mapping):
        return TileOffset(int(value["x"]), int(value["y"]))
    x, y = value
    return TileOffset(int(x), int(y))


def _tile_items(value: Any) -> Iterator[Tuple[TileOffset, Tile]]:
    pairs = value.items() if isinstance(value, Mapping) else value
    for key, tile in pairs:
        yield to_tile_offset(key), to_tile(tile)


def to_slice(value: Mapping[str, Any]) -> Slice:
    cache = value["tile_cache"]
    return Slice(
        transform=to_transform(value["transform"]),
        tile_cache=TileCacheInstance.from_items(
            slice=int(cache["slice"]),
            items=_tile_items(cache.get("tiles") or []),
            background_color=to_color(cache.get("background_color")),
        ),
    )


# --- Interning -----------------------------------------------------------------


def to_update_list(value: Mapping[str, Any]) -> UpdateList:
    return UpdateList(
        insertions=pvector(
            Insertion(uid=to_uid(i["uid"]), value=freeze(i.get("value")))
            for i in value.get("insertions") or ()
        ),
        removals=pvector(
            Removal(uid=to_uid(r["uid"])) for r in value.get("removals") or ()
        ),
    )


def to_update_lists(value: Any) -> UpdateListsByCategory:
    if value is None:
        return UpdateListsByCategory()
    if not isinstance(value, Mapping):
        raise SnapshotFormatError("update_lists must be an object keyed by category")
    return UpdateListsByCategory.from_items(
        (str(name), (to_update_list(batch) for batch in batches or ()))
        for name, batches in value.items()
    )


def frame_from_dict(name: str, data: Any) -> Frame:
    """Convert one decoded frame document to a :class:`Frame`.

    A bare list is read as the slice list of a frame without interning data.
    """
    if isinstance(data, list):
        data = {"slices": data}
    if not isinstance(data, Mapping):
        raise SnapshotFormatError(f"{name}: expected an object or a list of slices")
    try:
        return Frame(
            name=name,
            slices=pvector(to_slice(s) for s in data.get("slices") or ()),
            update_lists=to_update_lists(data.get("update_lists")),
        )
    except SnapshotFormatError as exc:
        raise SnapshotFormatError(f"{name}: {exc}") from exc
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise SnapshotFormatError(
            f"{name}: malformed frame ({type(exc).__name__}: {exc})"
        ) from exc
