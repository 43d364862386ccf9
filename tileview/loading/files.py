"""Frame file discovery and loading.

A capture directory holds one serialized frame per file; sorting by path gives
frame order. Loading is strict: a file that cannot be decoded stops the run
before anything is rendered for it.
"""

import json
import logging
from pathlib import Path
from typing import Iterator, List, Sequence

from pyrsistent import PMap

from tileview.errors import SnapshotFormatError
from tileview.loading.convert import frame_from_dict
from tileview.model.frame import Frame
from tileview.types import ItemUid, UpdateLists
from tileview.utils.format import debug_value

logger = logging.getLogger(__name__)


def discover_frame_files(input_dir: Path) -> List[Path]:
    """Return the regular files of ``input_dir`` sorted by path."""
    if not input_dir.is_dir():
        raise SnapshotFormatError(f"Input is not a directory: {input_dir}")
    return sorted(p for p in input_dir.iterdir() if p.is_file())


def load_frame(path: Path) -> Frame:
    """Read and decode one frame file.

    Raises:
        SnapshotFormatError: If the file is unreadable, not JSON, or not a frame.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotFormatError(f"{path}: cannot read frame ({exc})") from exc
    frame = frame_from_dict(path.name, data)
    logger.debug("Loaded %s: %d slices", path.name, len(frame.slices))
    return frame


def iter_frames(paths: Sequence[Path]) -> Iterator[Frame]:
    """Yield the frames of ``paths`` in order, loading lazily."""
    for path in paths:
        yield load_frame(path)


def update_display_map(
    display_map: PMap[ItemUid, str], update_lists: UpdateLists
) -> PMap[ItemUid, str]:
    """Add every interned insertion's debug form to ``display_map``.

    Entries are never dropped on removal, so ids retired in this frame still
    resolve when the report explains why they went away.
    """
    evolver = display_map.evolver()
    for batches in update_lists.values():
        for batch in batches:
            for insertion in batch.insertions:
                evolver[insertion.uid] = debug_value(insertion.value)
    return evolver.persistent()
