"""Loading of captured frames from disk into the snapshot model."""

from .convert import frame_from_dict
from .files import discover_frame_files, iter_frames, load_frame, update_display_map

__all__ = [
    "discover_frame_files",
    "frame_from_dict",
    "iter_frames",
    "load_frame",
    "update_display_map",
]
