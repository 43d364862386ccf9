"""tileview: tile cache log visualizer.

Reads a directory of logged picture-cache frames and produces, per frame, an
SVG of the tiles colored by invalidation reason and an HTML page explaining
each change plus the interning ledger. See :mod:`tileview.pipeline` for the
batch flow and :mod:`tileview.renderer` for the markup generation.
"""

__version__ = "0.1.0"
