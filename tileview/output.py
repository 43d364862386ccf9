"""Writing the viewer to an output directory.

Per frame an ``.svg`` and an ``.html`` are written next to each other; once all
frames are done, ``index.html`` (frame stepper), ``tilecache.css`` (per-slice
rules) and the bundled static assets are added.
"""

import html
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Dict, List, Sequence

from tileview.config import (
    BASE_CSS_FILENAME,
    CSS_FILENAME,
    INDEX_FILENAME,
    JS_FILENAME,
    STYLESHEETS,
)
from tileview.errors import OutputNameError
from tileview.renderer.styles import STYLE_BY_KIND

logger = logging.getLogger(__name__)

ASSET_FILENAMES = (BASE_CSS_FILENAME, JS_FILENAME)


def frame_output_stem(frame_name: str) -> str:
    return Path(frame_name).stem


def frame_output_stems(frame_names: Sequence[str]) -> List[str]:
    """Output stem per frame, in order.

    Raises:
        OutputNameError: If two frames share a stem (e.g. ``a.json`` and
            ``a.ron``).
    """
    owners: Dict[str, str] = {}
    for name in frame_names:
        stem = frame_output_stem(name)
        if stem in owners:
            raise OutputNameError(
                f"{owners[stem]} and {name} would both be written as {stem}.svg/{stem}.html"
            )
        owners[stem] = name
    return list(owners)


def write_frame(output_dir: Path, frame_name: str, svg: str, report_html: str) -> Path:
    """Write one frame's SVG and report; return the SVG path."""
    stem = frame_output_stem(frame_name)
    svg_path = output_dir / f"{stem}.svg"
    svg_path.write_text(svg, encoding="utf-8")
    (output_dir / f"{stem}.html").write_text(report_html, encoding="utf-8")
    return svg_path


def _legend() -> str:
    items = "".join(
        f'<div class="legend_item"><svg width="14" height="14">'
        f'<rect width="14" height="14" style="{style}stroke:white;"/></svg> '
        f"{html.escape(str(kind))}</div>\n"
        for kind, style in STYLE_BY_KIND.items()
    )
    return f'<div class="legend">\n{items}</div>\n'


def index_html(frame_stems: Sequence[str], max_slice_index: int) -> str:
    """Frame stepper page: slider, slice toggles, legend, SVG and report panes."""
    links = "".join(
        f'<link rel="stylesheet" type="text/css" href="{href}"></link>\n'
        for href in STYLESHEETS
    )
    toggles = "".join(
        f'<label><input type="checkbox" id="slice_toggle{i}" checked '
        f'onchange="update_slice_visibility({max_slice_index})"/> {i}</label>\n'
        for i in range(max_slice_index + 1)
    )
    last = max(len(frame_stems) - 1, 0)
    return (
        "<!DOCTYPE html>\n"
        '<html> <head> <meta charset="UTF-8">\n'
        f"{links}"
        f'<script src="{JS_FILENAME}" type="text/javascript"></script>\n'
        f"<script>var frame_names = {json.dumps(list(frame_stems))};</script>\n"
        "</head>\n"
        f'<body onload="init({max_slice_index})">\n'
        '<div class="buttons">\n'
        f'<div class="slicecontrols">slices:\n{toggles}</div>\n'
        f'<input type="range" id="frame_slider" min="0" max="{last}" value="0" '
        'oninput="go_to_frame(this.value)"/>\n'
        '<span id="text_frame_counter"></span>\n'
        "</div>\n"
        f"{_legend()}"
        '<div id="svg_container"><object id="svg_frame" type="image/svg+xml"></object></div>\n'
        '<div id="report_container"><iframe id="report_frame"></iframe></div>\n'
        "</body> </html>\n"
    )


def tilecache_css(max_slice_index: int) -> str:
    """Generated stylesheet: tree outlines plus one visibility rule per slice."""
    rules = [".svg_quadtree { fill: none; stroke: white; stroke-width: 0.5; }\n"]
    rules.extend(
        f"#tile_slice{i}_everything {{ display: inline; }}\n"
        for i in range(max_slice_index + 1)
    )
    return "".join(rules)


def write_index(output_dir: Path, frame_stems: Sequence[str], max_slice_index: int) -> Path:
    path = output_dir / INDEX_FILENAME
    path.write_text(index_html(frame_stems, max_slice_index), encoding="utf-8")
    return path


def write_css(output_dir: Path, max_slice_index: int) -> Path:
    path = output_dir / CSS_FILENAME
    path.write_text(tilecache_css(max_slice_index), encoding="utf-8")
    return path


def copy_assets(output_dir: Path) -> None:
    """Copy the bundled base stylesheet and script."""
    assets = resources.files("tileview").joinpath("assets")
    for name in ASSET_FILENAMES:
        (output_dir / name).write_text(
            assets.joinpath(name).read_text(encoding="utf-8"), encoding="utf-8"
        )
    logger.debug("Copied assets %s", ", ".join(ASSET_FILENAMES))
