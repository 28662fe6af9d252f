"""Helpers that add built fragments and layouts to a document body."""

from __future__ import annotations

import copy

from docx.enum.section import WD_SECTION_START
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.table import Table

from .exceptions import InvalidArgumentError
from .layout import PageLayout

TABLE_ALIGNMENTS = {
    "left": WD_TABLE_ALIGNMENT.LEFT,
    "center": WD_TABLE_ALIGNMENT.CENTER,
    "right": WD_TABLE_ALIGNMENT.RIGHT,
}


def append_blank_lines(doc, n: int = 1):
    """Append ``n`` empty paragraphs to ``doc`` and return it."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidArgumentError(f"'n' must be a non-negative integer, got {n!r}")
    for _ in range(n):
        doc.add_paragraph("")
    return doc


def body_add_paragraph(doc, paragraph):
    """Append a copy of a built paragraph to the end of the document body."""
    doc.element.body._insert_p(copy.deepcopy(paragraph._p))
    return doc


def body_add_table(doc, table, align: str = "left"):
    """Append a copy of a built table to the end of the document body."""
    if align not in TABLE_ALIGNMENTS:
        raise InvalidArgumentError(f"'align' must be one of {', '.join(TABLE_ALIGNMENTS)}, got {align!r}")
    tbl = copy.deepcopy(table._tbl)
    doc.element.body._insert_tbl(tbl)
    Table(tbl, doc._body).alignment = TABLE_ALIGNMENTS[align]
    return doc


def body_set_default_section(doc, layout: PageLayout):
    """Apply a layout to the last section of the document."""
    layout.apply(doc.sections[-1])
    return doc


def body_end_section(doc, layout: PageLayout, next_start: WD_SECTION_START = WD_SECTION_START.NEW_PAGE):
    """End the current section with ``layout`` and start a new one.

    The new section inherits the previous page settings.
    """
    doc.add_section(next_start)
    layout.apply(doc.sections[-2])
    return doc
