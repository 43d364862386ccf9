"""Exception types.

Both concrete errors derive from ``ValueError`` so callers that only care about
bad input can keep catching that.
"""


class TileviewError(Exception):
    """Base class for errors raised by tileview."""


class ProjectionError(TileviewError, ValueError):
    """A rectangle could not be mapped to a finite device-space rectangle."""


class SnapshotFormatError(TileviewError, ValueError):
    """A frame file could not be decoded into the snapshot model."""


class OutputNameError(TileviewError, ValueError):
    """Two frame files would write to the same output files."""
