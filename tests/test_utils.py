from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pyrsistent import pvector

from tileview.model import (
    ColorF,
    Frame,
    Insertion,
    InvalidationReason,
    Rect,
    Removal,
    Slice,
    Tile,
    TileCacheInstance,
    TileNode,
    TileOffset,
    Transform3D,
    UpdateList,
    UpdateListsByCategory,
)


def make_tile(
    x: float = 0.0,
    y: float = 0.0,
    size: float = 256.0,
    reason: Optional[InvalidationReason] = None,
    background_color: Optional[ColorF] = None,
    root: Optional[TileNode] = None,
) -> Tile:
    """Square tile at ``(x, y)`` in picture space."""
    return Tile(
        rect=Rect.from_xywh(x, y, size, size),
        invalidation_reason=reason,
        background_color=background_color,
        root=root,
    )


def make_slice(
    index: int,
    tiles: Iterable[Tuple[Tuple[int, int], Tile]],
    transform: Optional[Transform3D] = None,
    background_color: Optional[ColorF] = None,
) -> Slice:
    """Slice from ``((x, y), tile)`` pairs, kept in the given order."""
    return Slice(
        transform=transform or Transform3D.identity(),
        tile_cache=TileCacheInstance.from_items(
            slice=index,
            items=[(TileOffset(*key), tile) for key, tile in tiles],
            background_color=background_color,
        ),
    )


def make_grid_slice(
    index: int,
    columns: int,
    rows: int,
    reason: Optional[InvalidationReason] = None,
    size: float = 256.0,
) -> Slice:
    """``columns x rows`` grid of tiles, all sharing the same reason."""
    return make_slice(
        index,
        [
            ((cx, cy), make_tile(cx * size, cy * size, size, reason=reason))
            for cy in range(rows)
            for cx in range(columns)
        ],
    )


def make_update_list(
    insertions: Sequence[Tuple[int, Any]] = (),
    removals: Sequence[int] = (),
) -> UpdateList:
    return UpdateList(
        insertions=pvector(Insertion(uid, value) for uid, value in insertions),
        removals=pvector(Removal(uid) for uid in removals),
    )


def make_frame(
    name: str,
    slices: Sequence[Slice] = (),
    update_lists: Optional[Dict[str, List[UpdateList]]] = None,
) -> Frame:
    return Frame(
        name=name,
        slices=pvector(slices),
        update_lists=UpdateListsByCategory.from_items((update_lists or {}).items()),
    )


def tile_json(
    x: float,
    y: float,
    size: float = 256.0,
    reason: Any = None,
    background_color: Any = None,
) -> Dict[str, Any]:
    """A tile as it appears in a frame file."""
    data: Dict[str, Any] = {"rect": [[x, y], [size, size]]}
    if reason is not None:
        data["invalidation_reason"] = reason
    if background_color is not None:
        data["background_color"] = background_color
    return data


IDENTITY_JSON: List[float] = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


def slice_json(
    index: int,
    tiles: Sequence[Tuple[Tuple[int, int], Dict[str, Any]]],
    transform: Optional[List[float]] = None,
    background_color: Any = None,
) -> Dict[str, Any]:
    """A slice as it appears in a frame file (tiles as ``[[x, y], tile]`` pairs)."""
    cache: Dict[str, Any] = {
        "slice": index,
        "tiles": [[list(key), tile] for key, tile in tiles],
    }
    if background_color is not None:
        cache["background_color"] = background_color
    return {"transform": transform or IDENTITY_JSON, "tile_cache": cache}
