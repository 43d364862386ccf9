# tests/unit/test_projection.py

import math

import pytest

from tileview.errors import ProjectionError
from tileview.model.geometry import Rect, Transform3D
from tileview.utils.projection import project_rect, transform_matrix


def _rect_tuple(rect: Rect) -> tuple[float, float, float, float]:
    return (rect.origin.x, rect.origin.y, rect.size.width, rect.size.height)


def test_identity_keeps_rect() -> None:
    rect = Rect.from_xywh(10, 20, 30, 40)
    assert project_rect(rect, Transform3D.identity()) == rect


def test_scale_then_translate() -> None:
    rect = Rect.from_xywh(10, 20, 30, 40)
    projected = project_rect(rect, Transform3D.scale_translate(2, 3, 5, 7))
    assert _rect_tuple(projected) == pytest.approx((25, 67, 60, 120))


def test_negative_scale_gives_positive_size() -> None:
    rect = Rect.from_xywh(10, 0, 20, 10)
    projected = project_rect(rect, Transform3D.scale_translate(-1, 1))
    assert _rect_tuple(projected) == pytest.approx((-30, 0, 20, 10))


def test_rotation_gives_bounding_box() -> None:
    c = math.cos(math.pi / 4)
    rotate = Transform3D((c, c, 0, 0,
                          -c, c, 0, 0,
                          0, 0, 1, 0,
                          0, 0, 0, 1))
    projected = project_rect(Rect.from_xywh(0, 0, 1, 1), rotate)
    assert _rect_tuple(projected) == pytest.approx((-c, 0, 2 * c, 2 * c))


def test_zero_w_raises() -> None:
    flat = Transform3D((1, 0, 0, 0,
                        0, 1, 0, 0,
                        0, 0, 1, 0,
                        0, 0, 0, 0))
    with pytest.raises(ProjectionError):
        project_rect(Rect.from_xywh(0, 0, 10, 10), flat)


def test_corner_behind_view_raises() -> None:
    # w = 1 - x, negative for the right edge of the rect.
    perspective = Transform3D((1, 0, 0, -1,
                               0, 1, 0, 0,
                               0, 0, 1, 0,
                               0, 0, 0, 1))
    with pytest.raises(ProjectionError):
        project_rect(Rect.from_xywh(0, 0, 10, 10), perspective)


def test_non_finite_raises() -> None:
    broken = Transform3D((math.inf, 0, 0, 0,
                          0, 1, 0, 0,
                          0, 0, 1, 0,
                          0, 0, 0, 1))
    with pytest.raises(ProjectionError):
        project_rect(Rect.from_xywh(0, 0, 10, 10), broken)


def test_projection_error_is_value_error() -> None:
    assert issubclass(ProjectionError, ValueError)


def test_transform_matrix_is_row_major() -> None:
    m = transform_matrix(Transform3D.scale_translate(2, 3, 5, 7))
    assert m.shape == (4, 4)
    assert m[3, 0] == 5 and m[3, 1] == 7
    assert m[0, 0] == 2 and m[1, 1] == 3
