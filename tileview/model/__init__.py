"""Snapshot model.

Immutable value types for everything a tile cache log frame records. All
classes are frozen dataclasses; collections are ``pyrsistent`` persistent
vectors and maps so a loaded frame can be shared freely between the renderer
and the next frame's diff without copying::

    from tileview.model import Slice, Tile, TileOffset, ScaleChanged
"""

from .color import ColorF
from .frame import Frame
from .geometry import Box2D, Point, Rect, Size, Transform3D
from .intern import Insertion, Removal, UpdateList, UpdateListsByCategory
from .invalidation import (
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
    REASON_TYPES,
    ScaleChanged,
    SentinelResult,
    SurfaceOpacityChanged,
    ValidRectChanged,
)
from .slice import Slice, TileCacheInstance
from .tile import LeafKind, NodeKind, Tile, TileNode, TileNodeKind, TileOffset

__all__ = [
    "BackgroundColor",
    "Box2D",
    "ClipDetail",
    "ColorF",
    "CompareHelperResult",
    "CompositorKindChanged",
    "Content",
    "CountResult",
    "DescriptorDetail",
    "EqualResult",
    "FractionalOffset",
    "Frame",
    "Insertion",
    "InvalidationReason",
    "LeafKind",
    "NoSurface",
    "NoTexture",
    "NodeKind",
    "NotEqualResult",
    "OtherDetail",
    "Point",
    "PredicateTrueResult",
    "PrimCount",
    "PrimitiveCompareResultDetail",
    "PrimitiveDescriptor",
    "REASON_TYPES",
    "Rect",
    "Removal",
    "ScaleChanged",
    "SentinelResult",
    "Size",
    "Slice",
    "SurfaceOpacityChanged",
    "Tile",
    "TileCacheInstance",
    "TileNode",
    "TileNodeKind",
    "TileOffset",
    "Transform3D",
    "UpdateList",
    "UpdateListsByCategory",
    "ValidRectChanged",
]
