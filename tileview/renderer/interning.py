"""Interning ledger and the per-frame HTML report.

The report page starts with the invalidation report produced by
:func:`tileview.renderer.svg.slices_to_svg` and then lists, for every interning
category, each batch's insertions (id plus value) followed by its removals
(id only). Categories are whatever the update lists mapping contains, in its
order; nothing here knows their names.
"""

import html
from typing import List

from tileview.config import STYLESHEETS
from tileview.types import UpdateLists
from tileview.utils.format import debug_value


def _document_head() -> str:
    links = "".join(
        f'<link rel="stylesheet" type="text/css" href="{href}"></link>\n'
        for href in STYLESHEETS
    )
    return (
        "<!DOCTYPE html>\n"
        '<html> <head> <meta charset="UTF-8">\n'
        f"{links}"
        "</head> <body>\n"
        '<div class="datasheet">\n'
    )


def category_to_html(name: str, update_lists: UpdateLists) -> str:
    """Ledger section for a single category."""
    parts: List[str] = [
        f'<div class="subheader">{html.escape(name)}</div>\n<div class="intern data">\n'
    ]
    for batch in update_lists[name]:
        for insertion in batch.insertions:
            parts.append(
                f'<div class="insert"><b>{insertion.uid}</b> '
                f"({html.escape(debug_value(insertion.value))})</div>\n"
            )
        for removal in batch.removals:
            parts.append(f'<div class="remove"><b>{removal.uid}</b></div>\n')
    parts.append("</div><br/>\n")
    return "".join(parts)


def updatelist_to_html(update_lists: UpdateLists, invalidation_report: str) -> str:
    """Build the full report page for one frame.

    Args:
        update_lists: Category name -> time-ordered update batches.
        invalidation_report: HTML fragment from ``slices_to_svg``.

    Returns:
        str: Complete HTML document.
    """
    parts: List[str] = [_document_head(), invalidation_report]
    parts.append('<div class="header">Interning</div>\n')
    for name in update_lists:
        parts.append(category_to_html(name, update_lists))
    parts.append("</div> </body> </html>\n")
    return "".join(parts)
