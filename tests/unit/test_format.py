# tests/unit/test_format.py

import pytest
from pyrsistent import freeze

from tileview.model.color import ColorF
from tileview.model.geometry import Box2D, Point
from tileview.utils.format import (
    debug_value,
    format_box,
    format_color,
    format_fixed,
    format_number,
    format_point,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (10.0, "10"),
        (-3.0, "-3"),
        (0.0, "0"),
        (10.5, "10.5"),
        (0.125, "0.125"),
        (7, "7"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_format_fixed() -> None:
    assert format_fixed(3.0) == "3.00"
    assert format_fixed(0.125) == "0.12"


def test_format_point_and_box() -> None:
    assert format_point(Point(0, 0.5)) == "(0,0.5)"
    assert format_box(Box2D(Point(0, 0), Point(10, 20.5))) == "0,0 -> 10,20.5"


def test_format_color() -> None:
    assert format_color(None) == "none"
    assert format_color(ColorF(1.0, 0.0, 0.5, 1.0)) == "(1,0,0.5,1)"


def test_debug_value_thaws_persistent_values() -> None:
    assert debug_value(freeze({"a": [1, 2]})) == "{'a': [1, 2]}"
    assert debug_value("text") == "'text'"
