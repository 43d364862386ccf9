"""Run configuration.

``SvgSettings`` tweaks the SVG generation (uniform scale, then offset, applied
to every device-space coordinate). ``ConvertConfig`` bundles everything a batch
conversion needs and is built by :mod:`tileview.cli`.
"""

from dataclasses import dataclass, field
from pathlib import Path

BASE_CSS_FILENAME = "tilecache_base.css"
CSS_FILENAME = "tilecache.css"
JS_FILENAME = "tilecache.js"
INDEX_FILENAME = "index.html"

STYLESHEETS = (BASE_CSS_FILENAME, CSS_FILENAME)


@dataclass(frozen=True)
class SvgSettings:
    """SVG output parameters.

    Attributes:
        scale: Multiplier applied to device-space coordinates and sizes.
        x: Horizontal offset added after scaling.
        y: Vertical offset added after scaling.
        tile_tree: If True each tile also draws its subdivision tree.
    """

    scale: float = 1.0
    x: float = 0.0
    y: float = 0.0
    tile_tree: bool = False


@dataclass(frozen=True)
class ConvertConfig:
    """Inputs and outputs of one batch conversion.

    Attributes:
        input_dir: Directory holding one serialized frame per file.
        output_dir: Directory receiving the SVG/HTML files (created if missing).
        svg: SVG generation parameters.
    """

    input_dir: Path
    output_dir: Path
    svg: SvgSettings = field(default_factory=SvgSettings)
