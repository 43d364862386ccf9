"""Common type aliases and enumerations.

``ItemUid`` identifies an interned item across frames; ``DisplayMap`` resolves
those ids to a printable description for the reports. ``InvalidationKind``
names every invalidation cause a tile can carry and is the key used by the
style and explanation tables in :mod:`tileview.renderer`.
"""

from enum import StrEnum
from typing import Mapping, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from tileview.model.intern import UpdateList

ItemUid = int

DisplayMap = Mapping[ItemUid, str]

# Interning category name -> time-ordered update batches.
UpdateLists = Mapping[str, Sequence["UpdateList"]]


class InvalidationKind(StrEnum):
    """Invalidation cause variants (values match the serialized tag names)."""

    FRACTIONAL_OFFSET = "FractionalOffset"
    BACKGROUND_COLOR = "BackgroundColor"
    SURFACE_OPACITY_CHANGED = "SurfaceOpacityChanged"
    NO_TEXTURE = "NoTexture"
    NO_SURFACE = "NoSurface"
    PRIM_COUNT = "PrimCount"
    COMPOSITOR_KIND_CHANGED = "CompositorKindChanged"
    CONTENT = "Content"
    VALID_RECT_CHANGED = "ValidRectChanged"
    SCALE_CHANGED = "ScaleChanged"
