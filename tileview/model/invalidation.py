"""Invalidation causes.

A tile records at most one reason for having been invalidated in its frame.
Each variant is its own frozen dataclass carrying a ``kind`` class attribute;
``InvalidationReason`` is the union of all of them. The ``Content`` variant
nests a second-level variant (:data:`PrimitiveCompareResultDetail`) saying
which part of a primitive comparison failed, which for clip comparisons nests
a third (:data:`CompareHelperResult`).

Renderers dispatch on ``kind`` through lookup tables keyed by
:class:`tileview.types.InvalidationKind`, so adding a variant here means adding
an entry there too.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from pyrsistent import PVector, pvector

from tileview.model.color import ColorF
from tileview.model.geometry import Box2D, Point
from tileview.types import InvalidationKind, ItemUid


# --- Comparison helper results -------------------------------------------------


@dataclass(frozen=True)
class EqualResult:
    name: ClassVar[str] = "Equal"


@dataclass(frozen=True)
class CountResult:
    """The number of compared items differs."""

    name: ClassVar[str] = "Count"

    prev_count: int
    curr_count: int


@dataclass(frozen=True)
class SentinelResult:
    name: ClassVar[str] = "Sentinel"


@dataclass(frozen=True)
class NotEqualResult:
    """One item id was replaced by another."""

    name: ClassVar[str] = "NotEqual"

    prev: ItemUid
    curr: ItemUid


@dataclass(frozen=True)
class PredicateTrueResult:
    name: ClassVar[str] = "PredicateTrue"

    curr: ItemUid


CompareHelperResult = Union[
    EqualResult, CountResult, SentinelResult, NotEqualResult, PredicateTrueResult
]


# --- Primitive comparison detail -----------------------------------------------


@dataclass(frozen=True)
class PrimitiveDescriptor:
    """Per-primitive record compared between frames.

    Attributes:
        prim_uid: Interned id of the primitive.
        prim_clip_box: Clipped primitive bounds in picture space.
        origin: Primitive origin, if recorded.
    """

    prim_uid: ItemUid
    prim_clip_box: Box2D
    origin: Optional[Point] = None


@dataclass(frozen=True)
class DescriptorDetail:
    """The primitive descriptors differ."""

    name: ClassVar[str] = "Descriptor"

    old: PrimitiveDescriptor
    new: PrimitiveDescriptor


@dataclass(frozen=True)
class ClipDetail:
    """The primitive's clip chain differs."""

    name: ClassVar[str] = "Clip"

    detail: CompareHelperResult


@dataclass(frozen=True)
class OtherDetail:
    """Any other comparison outcome (Equal, Transform, Image, bindings...).

    Attributes:
        name: Serialized variant tag.
        detail: Nested helper result, when the variant carries one.
    """

    name: str
    detail: Optional[CompareHelperResult] = None


PrimitiveCompareResultDetail = Union[DescriptorDetail, ClipDetail, OtherDetail]


# --- Invalidation reasons ------------------------------------------------------


@dataclass(frozen=True)
class FractionalOffset:
    kind: ClassVar[InvalidationKind] = InvalidationKind.FRACTIONAL_OFFSET

    old: Point
    new: Point


@dataclass(frozen=True)
class BackgroundColor:
    kind: ClassVar[InvalidationKind] = InvalidationKind.BACKGROUND_COLOR

    old: Optional[ColorF] = None
    new: Optional[ColorF] = None


@dataclass(frozen=True)
class SurfaceOpacityChanged:
    kind: ClassVar[InvalidationKind] = InvalidationKind.SURFACE_OPACITY_CHANGED

    became_opaque: bool


@dataclass(frozen=True)
class NoTexture:
    kind: ClassVar[InvalidationKind] = InvalidationKind.NO_TEXTURE


@dataclass(frozen=True)
class NoSurface:
    kind: ClassVar[InvalidationKind] = InvalidationKind.NO_SURFACE


@dataclass(frozen=True)
class PrimCount:
    """The set of primitives covering the tile changed.

    Attributes:
        old: Primitive ids in the previous frame, in recorded order.
        new: Primitive ids in this frame, in recorded order.
    """

    kind: ClassVar[InvalidationKind] = InvalidationKind.PRIM_COUNT

    old: PVector[ItemUid] = pvector()
    new: PVector[ItemUid] = pvector()


@dataclass(frozen=True)
class CompositorKindChanged:
    kind: ClassVar[InvalidationKind] = InvalidationKind.COMPOSITOR_KIND_CHANGED


@dataclass(frozen=True)
class Content:
    """A primitive's content changed.

    Attributes:
        prim_compare_result: Tag of the comparison outcome (e.g. ``"Descriptor"``).
        prim_compare_result_detail: Structured detail, when it was logged.
    """

    kind: ClassVar[InvalidationKind] = InvalidationKind.CONTENT

    prim_compare_result: str = ""
    prim_compare_result_detail: Optional[PrimitiveCompareResultDetail] = None


@dataclass(frozen=True)
class ValidRectChanged:
    kind: ClassVar[InvalidationKind] = InvalidationKind.VALID_RECT_CHANGED


@dataclass(frozen=True)
class ScaleChanged:
    kind: ClassVar[InvalidationKind] = InvalidationKind.SCALE_CHANGED


InvalidationReason = Union[
    FractionalOffset,
    BackgroundColor,
    SurfaceOpacityChanged,
    NoTexture,
    NoSurface,
    PrimCount,
    CompositorKindChanged,
    Content,
    ValidRectChanged,
    ScaleChanged,
]

REASON_TYPES = (
    FractionalOffset,
    BackgroundColor,
    SurfaceOpacityChanged,
    NoTexture,
    NoSurface,
    PrimCount,
    CompositorKindChanged,
    Content,
    ValidRectChanged,
    ScaleChanged,
)
