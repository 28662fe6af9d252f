"""Banner and two-column information table builders."""

from __future__ import annotations

from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT, WD_ROW_HEIGHT_RULE
from docx.oxml.table import CT_Tbl
from docx.shared import Emu
from docx.table import Table

from .exceptions import InvalidArgumentError
from .fonts import resolve_font_size
from .oxml import remove_table_borders, set_cell_bottom_border, set_cell_margins, set_cell_shading
from .paragraph import ParagraphStyle, TextStyle, apply_paragraph_style, apply_text_style
from .units import inches_from_cm, length
from .utils import expand_to_length


def new_table(rows: int, cols: int, widths: list[float], unit: str = "in") -> Table:
    """Create a borderless fixed-layout table not attached to any document."""
    col_lengths = [length(width, unit) for width in widths]
    tbl = CT_Tbl.new_tbl(rows, cols, Emu(sum(col_lengths)))
    table = Table(tbl, None)
    table.autofit = False
    remove_table_borders(table)
    for column, width in zip(table.columns, col_lengths):
        column.width = width
    for row in table.rows:
        for cell, width in zip(row.cells, col_lengths):
            cell.width = width
    return table


def _set_row_height(row, height: float, unit: str) -> None:
    row.height = length(height, unit)
    row.height_rule = WD_ROW_HEIGHT_RULE.AT_LEAST


def _fill_cell(cell, lines: list[str], text_style: TextStyle, paragraph_style: ParagraphStyle) -> None:
    paragraph = cell.paragraphs[0]
    for i, line in enumerate(lines):
        if i > 0:
            paragraph = cell.add_paragraph()
        run = paragraph.add_run(line)
        apply_text_style(run, text_style)
        apply_paragraph_style(paragraph, paragraph_style)
    cell.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER


def build_banner_table(
    text: str | list[str],
    text_color: str = "white",
    bg_color: str = "#006699",
    font_name_ch: str = "宋体",
    font_name_en: str = "Times New Roman",
    font_size=12,
    bar_width: float = inches_from_cm(16),
    bar_height: float = inches_from_cm(2),
    unit: str = "in",
    padding_top: float = 0,
    padding_bottom: float = 0,
    padding_left: float = 0,
    padding_right: float = 0,
) -> Table:
    """
    Build a one-cell color bar holding one or more lines of text.

    Args:
        text: Text line or lines displayed in the bar
        text_color: Text color
        bg_color: Background color of the bar
        font_name_ch: East-Asian font
        font_name_en: Western font
        font_size: Points or named size
        bar_width: Width of the bar in ``unit``
        bar_height: Minimum height of the bar in ``unit``
        unit: in, cm, mm or pt
        padding_top: Space before each line, in points
        padding_bottom: Space after each line, in points
        padding_left: Left cell margin, in points
        padding_right: Right cell margin, in points

    Returns:
        A table not attached to any document; add it with ``body_add_table``.
    """
    lines = [str(line) for line in text] if isinstance(text, (list, tuple)) else [str(text)]
    if not lines:
        raise InvalidArgumentError("'text' must contain at least one line")

    text_style = TextStyle(
        font_size=resolve_font_size(font_size),
        font_family_en=font_name_en,
        font_family_ch=font_name_ch,
        color=text_color,
    )
    paragraph_style = ParagraphStyle(
        text_align="left",
        padding_top=padding_top,
        padding_bottom=padding_bottom,
        line_spacing=1,
    )

    table = new_table(1, 1, [bar_width], unit)
    _set_row_height(table.rows[0], bar_height, unit)
    cell = table.cell(0, 0)
    set_cell_shading(cell, bg_color)
    set_cell_margins(cell, left=padding_left, right=padding_right)
    _fill_cell(cell, lines, text_style, paragraph_style)
    return table


def build_info_table(
    x: list[str],
    y: list[str],
    y_border_color: str = "black",
    y_border_style: str = "solid",
    y_border_width: float = 1,
    x_align: str = "center",
    y_align: str = "center",
    x_fontsize=14,
    y_fontsize=None,
    font_family_ch: str = "宋体",
    font_family_en: str = "Times New Roman",
    font_family_cs: str | None = None,
    cell_height: float | list[float] = inches_from_cm(1),
    cell_width: float | list[float] = tuple(inches_from_cm([2, 5])),
    cell_unit: str = "in",
    padding_top: float = 0,
    padding_bottom: float = 0,
    padding_left: float = 0,
    padding_right: float = 0,
) -> Table:
    """
    Build a two-column "label / value" table.

    The first column holds the labels ``x`` and the second the values ``y``.
    Only the value column gets a bottom border, so each value sits on a line.

    Args:
        x: Labels for the first column
        y: Values for the second column, same length as ``x``
        y_border_color: Color of the line under each value
        y_border_style: solid, dashed, dotted, double or none
        y_border_width: Line width in points
        x_align: Alignment of the first column
        y_align: Alignment of the second column
        x_fontsize: Font size of the first column
        y_fontsize: Font size of the second column (defaults to ``x_fontsize``)
        font_family_ch: East-Asian font
        font_family_en: Western font
        font_family_cs: Complex-script font (defaults to ``font_family_en``)
        cell_height: Minimum row height(s) in ``cell_unit``
        cell_width: Column width(s) in ``cell_unit``
        cell_unit: in, cm, mm or pt
        padding_top: Space before cell text, in points
        padding_bottom: Space after cell text, in points
        padding_left: Left cell margin, in points
        padding_right: Right cell margin, in points

    Returns:
        A table not attached to any document; add it with ``body_add_table``.
    """
    x = [x] if isinstance(x, str) else [str(item) for item in x]
    y = [y] if isinstance(y, str) else [str(item) for item in y]
    if len(x) != len(y):
        raise InvalidArgumentError(f"'x' and 'y' must have the same length, got {len(x)} and {len(y)}")
    n_rows = len(x)
    if n_rows == 0:
        raise InvalidArgumentError("'x' and 'y' must not be empty")

    heights = expand_to_length(cell_height, n_rows, "cell_height")
    widths = expand_to_length(cell_width, 2, "cell_width")
    if y_fontsize is None:
        y_fontsize = x_fontsize
    if font_family_cs is None:
        font_family_cs = font_family_en

    column_text_styles = [
        TextStyle(
            font_size=resolve_font_size(size),
            font_family_en=font_family_en,
            font_family_ch=font_family_ch,
            font_family_cs=font_family_cs,
        )
        for size in (x_fontsize, y_fontsize)
    ]
    column_paragraph_styles = [
        ParagraphStyle(text_align=align, padding_top=padding_top, padding_bottom=padding_bottom, line_spacing=1)
        for align in (x_align, y_align)
    ]

    table = new_table(n_rows, 2, widths, cell_unit)
    for i, (label, value) in enumerate(zip(x, y)):
        row = table.rows[i]
        _set_row_height(row, heights[i], cell_unit)
        for j, content in enumerate((label, value)):
            cell = table.cell(i, j)
            set_cell_margins(cell, left=padding_left, right=padding_right)
            _fill_cell(cell, [content], column_text_styles[j], column_paragraph_styles[j])
        set_cell_bottom_border(table.cell(i, 1), y_border_style, y_border_width, y_border_color)
    return table
