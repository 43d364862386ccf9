"""Slices: one tile cache instance plus its transform, per frame.

A frame logs one ``Slice`` per picture cache slice. Slices are matched to the
previous frame's slices by ``tile_cache.slice`` and tiles by ``TileOffset``.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from tileview.model.color import ColorF
from tileview.model.geometry import Transform3D
from tileview.model.tile import Tile, TileOffset


@dataclass(frozen=True)
class TileCacheInstance:
    """Tile cache state of one slice.

    ``tiles`` is the lookup store; ``tile_order`` records the logged order and
    is what iteration follows. Use :meth:`from_items` to keep both in sync.

    Attributes:
        slice: Slice index.
        tiles: Tiles keyed by grid offset.
        tile_order: Keys in logged order (unique).
        background_color: Slice-wide background, used when a tile has none.
    """

    slice: int
    tiles: PMap[TileOffset, Tile] = pmap()
    tile_order: PVector[TileOffset] = pvector()
    background_color: Optional[ColorF] = None

    @classmethod
    def from_items(
        cls,
        slice: int,
        items: Iterable[Tuple[TileOffset, Tile]],
        background_color: Optional[ColorF] = None,
    ) -> "TileCacheInstance":
        """Build from ``(key, tile)`` pairs; a repeated key keeps its first position and last tile."""
        tiles: Dict[TileOffset, Tile] = {}
        for key, tile in items:
            tiles[key] = tile
        return cls(
            slice=slice,
            tiles=pmap(tiles),
            tile_order=pvector(tiles.keys()),
            background_color=background_color,
        )

    def items(self) -> Iterator[Tuple[TileOffset, Tile]]:
        """Yield ``(key, tile)`` pairs in logged order."""
        for key in self.tile_order:
            yield key, self.tiles[key]

    def get(self, key: TileOffset) -> Optional[Tile]:
        return self.tiles.get(key)

    def __len__(self) -> int:
        return len(self.tile_order)


@dataclass(frozen=True)
class Slice:
    """Snapshot of one picture cache slice in one frame.

    Attributes:
        transform: Picture-to-world transform for the slice.
        tile_cache: The slice's tiles.
    """

    transform: Transform3D
    tile_cache: TileCacheInstance

    @property
    def index(self) -> int:
        return self.tile_cache.slice
