# tests/renderer/test_classify.py

import html
from dataclasses import dataclass
from typing import ClassVar

import pytest
from pyrsistent import pmap, pvector

from tileview.model import (
    REASON_TYPES,
    BackgroundColor,
    Box2D,
    ClipDetail,
    ColorF,
    CompositorKindChanged,
    Content,
    CountResult,
    DescriptorDetail,
    FractionalOffset,
    InvalidationReason,
    NoSurface,
    NoTexture,
    NotEqualResult,
    OtherDetail,
    Point,
    PrimCount,
    PrimitiveDescriptor,
    ScaleChanged,
    SurfaceOpacityChanged,
    ValidRectChanged,
)
from tileview.renderer.classify import (
    EXPLAINERS,
    classify,
    describe_reason,
    display_name,
    explain,
)
from tileview.renderer.styles import (
    CSS_NO_FILL,
    STYLE_BY_KIND,
    style_for_kind,
)
from tileview.types import InvalidationKind

ALL_REASONS: list[InvalidationReason] = [
    FractionalOffset(Point(0, 0), Point(0.5, 0)),
    BackgroundColor(None, ColorF(1, 0, 0, 1)),
    SurfaceOpacityChanged(became_opaque=True),
    NoTexture(),
    NoSurface(),
    PrimCount(pvector([1]), pvector([2])),
    CompositorKindChanged(),
    Content("Image", OtherDetail("Image")),
    ValidRectChanged(),
    ScaleChanged(),
]

DISPLAY = pmap({1: "A", 2: "B", 3: "C", 4: "D", 7: "prim <x>"})


@dataclass(frozen=True)
class BogusReason:
    kind: ClassVar[str] = "Bogus"


def _box(x0: float, y0: float, x1: float, y1: float) -> Box2D:
    return Box2D(Point(x0, y0), Point(x1, y1))


def test_every_kind_has_style_and_explainer() -> None:
    kinds = set(InvalidationKind)
    assert set(STYLE_BY_KIND) == kinds
    assert set(EXPLAINERS) == kinds
    assert {t.kind for t in REASON_TYPES} == kinds
    assert {r.kind for r in ALL_REASONS} == kinds


def test_styles_are_distinct() -> None:
    assert len(set(STYLE_BY_KIND.values())) == len(STYLE_BY_KIND)


@pytest.mark.parametrize("reason", ALL_REASONS, ids=lambda r: str(r.kind))
def test_reason_selects_kind_style(reason: InvalidationReason) -> None:
    style, explanation = classify(reason, ColorF(1, 1, 1), ColorF(0, 0, 0))
    assert style == STYLE_BY_KIND[reason.kind]
    assert explanation


def test_cause_colors() -> None:
    assert STYLE_BY_KIND[InvalidationKind.SCALE_CHANGED] == "fill:#ff80ff;fill-opacity:0.1;"
    assert STYLE_BY_KIND[InvalidationKind.CONTENT] == "fill:#f04040;fill-opacity:0.1;"
    assert STYLE_BY_KIND[InvalidationKind.NO_TEXTURE] == "fill:#c04040;fill-opacity:0.1;"


def test_unknown_kind_fails_fast() -> None:
    with pytest.raises(ValueError):
        style_for_kind("Bogus")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        explain(BogusReason())  # type: ignore[arg-type]


def test_no_reason_uses_tile_background() -> None:
    style, explanation = classify(None, ColorF(1, 0, 0, 1), ColorF(0, 1, 0, 1))
    assert style == "fill:rgb(255,0,0);fill-opacity:0.3;"
    assert explanation == ""


def test_no_reason_falls_back_to_slice_background() -> None:
    style, _ = classify(None, None, ColorF(0, 1, 0, 1))
    assert style == "fill:rgb(0,255,0);fill-opacity:0.3;"


def test_no_reason_no_background() -> None:
    assert classify(None, None, None) == (CSS_NO_FILL, "")


def test_classify_is_pure() -> None:
    reason = PrimCount(pvector([1, 2, 3]), pvector([2, 3, 4]))
    assert classify(reason, None, None, DISPLAY) == classify(reason, None, None, DISPLAY)


def test_unit_reason_explanation() -> None:
    assert explain(NoTexture()) == "<b>NoTexture</b>"
    assert explain(ScaleChanged()) == "<b>ScaleChanged</b>"


def test_fractional_offset_explanation() -> None:
    text = explain(FractionalOffset(Point(0, 0), Point(0.5, 0)))
    assert text == "<b>FractionalOffset</b> changed from (0,0) to (0.5,0)"


def test_background_color_explanation() -> None:
    text = explain(BackgroundColor(None, ColorF(1, 0, 0, 1)))
    assert text == "<b>BackgroundColor</b> changed from none to (1,0,0,1)"


def test_surface_opacity_explanation() -> None:
    text = explain(SurfaceOpacityChanged(became_opaque=True))
    assert "changed from false to true" in text


def test_prim_count_lists_removed_and_added() -> None:
    reason = PrimCount(pvector([1, 2, 3]), pvector([2, 3, 4]))
    text = explain(reason, DISPLAY)
    assert text.startswith("<b>PrimCount</b> changed from 3 to 3:<br/>")
    assert "removed:<ul><li>1...A</li>\n</ul>" in text
    assert "added:<ul><li>4...D</li>\n</ul>" in text
    assert "2...B" not in text


def test_prim_count_unknown_uid_shows_empty_name() -> None:
    text = explain(PrimCount(pvector(), pvector([99])), DISPLAY)
    assert "<li>99...</li>" in text


def test_descriptor_same_uid_lists_clip_change() -> None:
    detail = DescriptorDetail(
        old=PrimitiveDescriptor(7, _box(0, 0, 10, 10)),
        new=PrimitiveDescriptor(7, _box(0, 0, 20, 10)),
    )
    text = explain(Content("Descriptor", detail), DISPLAY)
    assert "<b>Content: Descriptor</b> changed for uid 7" in text
    assert "<b>prim_clip_rect</b> changed from 0,0 -&gt; 10,10 to 0,0 -&gt; 20,10" in text
    assert "Item: prim &lt;x&gt;" in text


def test_descriptor_same_uid_unchanged_clip() -> None:
    desc = PrimitiveDescriptor(7, _box(0, 0, 10, 10))
    text = explain(Content("Descriptor", DescriptorDetail(desc, desc)), DISPLAY)
    assert "prim_clip_rect" not in text


def test_descriptor_different_uid_dumps_both() -> None:
    detail = DescriptorDetail(
        old=PrimitiveDescriptor(7, _box(0, 0, 10, 10)),
        new=PrimitiveDescriptor(3, _box(0, 0, 10, 10)),
    )
    text = explain(Content("Descriptor", detail), DISPLAY)
    assert "old uid 7, new uid 3" in text
    assert text.count("Desc: ") == 2
    assert "Item: C" in text


def test_clip_count_explanation() -> None:
    text = explain(Content("Clip", ClipDetail(CountResult(1, 2))))
    assert text == "<b>Content: Clip</b> count changed from 1 to 2<br/>"


def test_clip_not_equal_explanation() -> None:
    text = explain(Content("Clip", ClipDetail(NotEqualResult(3, 4))), DISPLAY)
    assert "ItemUids changed from 3 to 4" in text
    assert "old:<ul><li>C</li></ul>" in text
    assert "new:<ul><li>D</li></ul>" in text


def test_other_content_detail_is_dumped() -> None:
    detail = OtherDetail("Image")
    assert explain(Content("Image", detail)) == html.escape(repr(detail))


def test_display_name_unknown_is_empty() -> None:
    assert display_name(pmap(), 5) == ""
    assert display_name(DISPLAY, 7) == "prim &lt;x&gt;"


def test_describe_reason() -> None:
    assert describe_reason(ScaleChanged()) == "ScaleChanged"
    assert (
        describe_reason(FractionalOffset(Point(0, 0), Point(0.5, 0)))
        == "FractionalOffset(old=(0,0), new=(0.5,0))"
    )
    assert (
        describe_reason(PrimCount(pvector([1, 2]), pvector([3])))
        == "PrimCount(old=[1, 2], new=[3])"
    )
