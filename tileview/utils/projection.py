"""Rectangle projection through a picture-to-world transform.

Corners are mapped as homogeneous row vectors ``(x, y, 0, 1) * M`` and divided
by ``w``; the result is the axis-aligned box around the four mapped corners.
A corner that lands behind the eye (``w <= 0``) or produces a non-finite
coordinate has no device-space position, so the whole rectangle is rejected.
"""

import numpy as np
import numpy.typing as npt

from tileview.errors import ProjectionError
from tileview.model.geometry import Rect, Transform3D

FloatArray = npt.NDArray[np.float64]


def transform_matrix(transform: Transform3D) -> FloatArray:
    """Return the transform as a 4x4 float64 array (row-major)."""
    return np.asarray(transform.m, dtype=np.float64).reshape(4, 4)


def project_rect(rect: Rect, transform: Transform3D) -> Rect:
    """Map ``rect`` through ``transform`` and return its device-space bounds.

    Args:
        rect: Axis-aligned rectangle in picture space.
        transform: Picture-to-world transform.

    Returns:
        Rect: Smallest axis-aligned rectangle containing the mapped corners.

    Raises:
        ProjectionError: If any corner has no finite projection.
    """
    corners: FloatArray = np.array(
        [[p.x, p.y, 0.0, 1.0] for p in rect.corners()], dtype=np.float64
    )
    with np.errstate(all="ignore"):
        mapped: FloatArray = corners @ transform_matrix(transform)
        w: FloatArray = mapped[:, 3]
        if not np.all(w > 0.0):
            raise ProjectionError(f"{rect} projects behind the view (w={w.tolist()})")
        xy: FloatArray = mapped[:, :2] / w[:, np.newaxis]
    if not np.all(np.isfinite(xy)):
        raise ProjectionError(f"{rect} projects to a non-finite rectangle")

    min_x, min_y = xy.min(axis=0)
    max_x, max_y = xy.max(axis=0)
    return Rect.from_xywh(
        float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y)
    )
