"""Tiles and the tile subdivision tree."""

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from pyrsistent import PVector, pvector

from tileview.model.color import ColorF
from tileview.model.geometry import Box2D, Rect
from tileview.model.invalidation import InvalidationReason


@dataclass(frozen=True)
class TileOffset:
    """Tile grid coordinate, the key of a tile within its slice.

    Attributes:
        x: Column index.
        y: Row index.
    """

    x: int
    y: int


@dataclass(frozen=True)
class LeafKind:
    pass


@dataclass(frozen=True)
class NodeKind:
    children: PVector["TileNode"] = pvector()


TileNodeKind = Union[LeafKind, NodeKind]


@dataclass(frozen=True)
class TileNode:
    """One node of a tile's spatial subdivision.

    Leaves carry the region they cover; interior nodes own their children in
    drawing order. The tree is acyclic by construction.
    """

    rect: Box2D
    kind: TileNodeKind = LeafKind()

    def leaves(self) -> Iterator["TileNode"]:
        """Yield leaf nodes depth-first, in child order."""
        if isinstance(self.kind, NodeKind):
            for child in self.kind.children:
                yield from child.leaves()
        else:
            yield self


@dataclass(frozen=True)
class Tile:
    """One cached rectangular region of a slice.

    Attributes:
        rect: Tile bounds in picture (pre-transform) space.
        invalidation_reason: Why the tile was invalidated this frame, if it was.
        background_color: Tile-specific background override.
        root: Subdivision tree, when it was logged.
    """

    rect: Rect
    invalidation_reason: Optional[InvalidationReason] = None
    background_color: Optional[ColorF] = None
    root: Optional[TileNode] = None
