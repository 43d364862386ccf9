"""Rendering subpackage.

Turns immutable slice snapshots into the viewer's markup:

* :mod:`~tileview.renderer.classify` picks a fill and writes the explanation
  for a tile's invalidation reason.
* :mod:`~tileview.renderer.tree` flattens a tile's subdivision tree into SVG
  rectangles.
* :mod:`~tileview.renderer.svg` walks slices and tiles and assembles the SVG
  document and the invalidation report.
* :mod:`~tileview.renderer.interning` wraps the report together with the
  interning ledger into the per-frame HTML page.
"""

from .classify import classify, describe_reason, explain
from .interning import updatelist_to_html
from .svg import SvgExtents, slices_to_svg, tile_to_svg
from .tree import flatten_tile_tree

__all__ = [
    "SvgExtents",
    "classify",
    "describe_reason",
    "explain",
    "flatten_tile_tree",
    "slices_to_svg",
    "tile_to_svg",
    "updatelist_to_html",
]
