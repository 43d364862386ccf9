# tests/renderer/test_interning.py

from tileview.renderer.interning import category_to_html, updatelist_to_html
from tests.test_utils import make_update_list


def test_insertions_then_removals_in_order() -> None:
    lists = {"prim": [make_update_list([(1, "a"), (2, "b")], [3])]}
    page = updatelist_to_html(lists, "<!--report-->")

    assert page.count('<div class="insert">') == 2
    assert page.count('<div class="remove">') == 1
    first = page.index('<div class="insert"><b>1</b>')
    second = page.index('<div class="insert"><b>2</b>')
    removal = page.index('<div class="remove"><b>3</b></div>')
    assert first < second < removal


def test_batches_keep_order() -> None:
    lists = {"prim": [make_update_list([(1, "a")], [9]), make_update_list([(2, "b")])]}
    section = category_to_html("prim", lists)
    assert section.index("<b>1</b>") < section.index("<b>9</b>") < section.index("<b>2</b>")
    assert section.startswith('<div class="subheader">prim</div>\n<div class="intern data">\n')
    assert section.endswith("</div><br/>\n")


def test_page_shell() -> None:
    page = updatelist_to_html({}, "<!--report-->")
    assert page.startswith("<!DOCTYPE html>\n")
    assert '<link rel="stylesheet" type="text/css" href="tilecache_base.css"></link>' in page
    assert '<link rel="stylesheet" type="text/css" href="tilecache.css"></link>' in page
    assert page.index("<!--report-->") < page.index('<div class="header">Interning</div>')
    assert '<div class="intern data">' not in page


def test_categories_keep_mapping_order() -> None:
    lists = {"text_run": [make_update_list([(1, "t")])], "image": [make_update_list([(2, "i")])]}
    page = updatelist_to_html(lists, "")
    assert page.index(">text_run<") < page.index(">image<")


def test_values_are_escaped() -> None:
    page = updatelist_to_html({"prim": [make_update_list([(1, "<x>")])]}, "")
    assert "&lt;x&gt;" in page
    assert "<x>" not in page


def test_separate_insert_and_remove_batches() -> None:
    lists = {"prim": [make_update_list([(1, "a"), (2, "b")]), make_update_list(removals=[3])]}
    section = category_to_html("prim", lists)
    assert section.count('<div class="insert">') == 2
    assert section.count('<div class="remove">') == 1
    assert section.index("<b>1</b>") < section.index("<b>2</b>") < section.index("<b>3</b>")
