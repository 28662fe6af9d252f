"""Low-level WordprocessingML helpers for properties python-docx does not expose."""

from __future__ import annotations

from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls, qn

from .exceptions import InvalidArgumentError
from .units import points_to_twips
from .utils import color_to_hex

BORDER_STYLES = {
    "solid": "single",
    "dashed": "dashed",
    "dotted": "dotted",
    "double": "double",
    "none": "none",
}

# Elements that follow w:shd inside w:rPr
_RPR_AFTER_SHD = (
    "w:fitText",
    "w:vertAlign",
    "w:rtl",
    "w:cs",
    "w:em",
    "w:lang",
    "w:eastAsianLayout",
    "w:specVanish",
    "w:oMath",
)

# Elements that follow w:tcMar inside w:tcPr
_TCPR_AFTER_TCMAR = (
    "w:textDirection",
    "w:tcFitText",
    "w:vAlign",
    "w:hideMark",
    "w:headers",
    "w:cellIns",
    "w:cellDel",
    "w:cellMerge",
    "w:tcPrChange",
)

_TCPR_AFTER_SHD = ("w:noWrap", "w:tcMar") + _TCPR_AFTER_TCMAR

_TCPR_AFTER_BORDERS = ("w:shd",) + _TCPR_AFTER_SHD

# Elements that follow w:tblBorders inside w:tblPr
_TBLPR_AFTER_BORDERS = (
    "w:shd",
    "w:tblLayout",
    "w:tblCellMar",
    "w:tblLook",
    "w:tblCaption",
    "w:tblDescription",
    "w:tblPrChange",
)


def _replace_child(parent, child, *successors) -> None:
    existing = parent.find(child.tag)
    if existing is not None:
        parent.remove(existing)
    parent.insert_element_before(child, *successors)


def set_run_fonts(run, en: str | None, ch: str | None, cs: str | None = None) -> None:
    """Set the ascii, hAnsi/eastAsia and complex-script font slots of a run."""
    rFonts = run._r.get_or_add_rPr().get_or_add_rFonts()
    if en:
        rFonts.set(qn("w:ascii"), en)
    if ch:
        rFonts.set(qn("w:hAnsi"), ch)
        rFonts.set(qn("w:eastAsia"), ch)
    if cs:
        rFonts.set(qn("w:cs"), cs)


def _shading(fill: str):
    return parse_xml(f'<w:shd {nsdecls("w")} w:val="clear" w:color="auto" w:fill="{fill}"/>')


def set_run_shading(run, color: str) -> None:
    """Shade the background of a run; ``"transparent"`` leaves it unshaded."""
    fill = color_to_hex(color)
    if fill is None:
        return
    _replace_child(run._r.get_or_add_rPr(), _shading(fill), *_RPR_AFTER_SHD)


def set_cell_shading(cell, color: str) -> None:
    """Fill a table cell with a background color."""
    fill = color_to_hex(color)
    if fill is None:
        return
    _replace_child(cell._tc.get_or_add_tcPr(), _shading(fill), *_TCPR_AFTER_SHD)


def set_cell_margins(cell, top: float = 0, left: float = 0, bottom: float = 0, right: float = 0) -> None:
    """Set cell margins given in points."""
    tcMar = parse_xml(
        f'<w:tcMar {nsdecls("w")}>'
        f'  <w:top w:w="{points_to_twips(top)}" w:type="dxa"/>'
        f'  <w:left w:w="{points_to_twips(left)}" w:type="dxa"/>'
        f'  <w:bottom w:w="{points_to_twips(bottom)}" w:type="dxa"/>'
        f'  <w:right w:w="{points_to_twips(right)}" w:type="dxa"/>'
        f'</w:tcMar>'
    )
    _replace_child(cell._tc.get_or_add_tcPr(), tcMar, *_TCPR_AFTER_TCMAR)


def border_xml(side: str, style: str = "solid", width: float = 1, color: str = "black") -> str:
    """Return one border element, ``width`` in points."""
    if style not in BORDER_STYLES:
        raise InvalidArgumentError(f"border style must be one of {', '.join(BORDER_STYLES)}, got {style!r}")
    val = BORDER_STYLES[style]
    if val == "none" or width <= 0:
        return f'<w:{side} w:val="none" w:sz="0" w:space="0" w:color="auto"/>'
    hex_color = color_to_hex(color) or "auto"
    size = max(int(round(width * 8)), 2)
    return f'<w:{side} w:val="{val}" w:sz="{size}" w:space="0" w:color="{hex_color}"/>'


def remove_table_borders(table) -> None:
    """Remove all borders from a table."""
    tblPr = table._tbl.tblPr
    sides = ("top", "left", "bottom", "right", "insideH", "insideV")
    borders = parse_xml(
        f'<w:tblBorders {nsdecls("w")}>' + "".join(border_xml(side, "none") for side in sides) + "</w:tblBorders>"
    )
    _replace_child(tblPr, borders, *_TBLPR_AFTER_BORDERS)


def set_cell_bottom_border(cell, style: str = "solid", width: float = 1, color: str = "black") -> None:
    """Draw a border under a single cell."""
    tcBorders = parse_xml(f'<w:tcBorders {nsdecls("w")}>{border_xml("bottom", style, width, color)}</w:tcBorders>')
    _replace_child(cell._tc.get_or_add_tcPr(), tcBorders, *_TCPR_AFTER_BORDERS)
