"""Formatted paragraph builders."""

from __future__ import annotations

from dataclasses import dataclass

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.shared import Pt
from docx.text.paragraph import Paragraph

from .exceptions import InvalidArgumentError
from .fonts import resolve_font_size
from .oxml import set_run_fonts, set_run_shading
from .utils import TRANSPARENT, color_to_rgb, expand_to_length, flags_from_indices

ALIGNMENTS = {
    "left": WD_ALIGN_PARAGRAPH.LEFT,
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "right": WD_ALIGN_PARAGRAPH.RIGHT,
    "justify": WD_ALIGN_PARAGRAPH.JUSTIFY,
    "distributed": WD_ALIGN_PARAGRAPH.DISTRIBUTE,
}

VERTICAL_ALIGNMENTS = ("baseline", "subscript", "superscript")


@dataclass(frozen=True)
class TextStyle:
    """Formatting of one run of text."""

    font_size: float = 12
    font_family_en: str = "Times New Roman"
    font_family_ch: str = "宋体"
    font_family_cs: str | None = None
    bold: bool = False
    italic: bool = False
    underlined: bool = False
    color: str = "black"
    vertical_align: str = "baseline"
    shading_color: str = TRANSPARENT

    def __post_init__(self):
        if self.vertical_align not in VERTICAL_ALIGNMENTS:
            raise InvalidArgumentError(
                f"'vertical_align' must be one of {', '.join(VERTICAL_ALIGNMENTS)}, got {self.vertical_align!r}"
            )
        # Fail on bad colors before any run is created
        color_to_rgb(self.color)
        color_to_rgb(self.shading_color)


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph-level formatting; paddings are in points."""

    text_align: str = "justify"
    padding_left: float = 0
    padding_right: float = 0
    padding_top: float = 0
    padding_bottom: float = 0
    line_spacing: float = 1.25

    def __post_init__(self):
        if self.text_align not in ALIGNMENTS:
            raise InvalidArgumentError(
                f"'text_align' must be one of {', '.join(ALIGNMENTS)}, got {self.text_align!r}"
            )


def apply_text_style(run, style: TextStyle) -> None:
    """Apply a TextStyle to a python-docx run."""
    font = run.font
    font.size = Pt(style.font_size)
    font.bold = style.bold
    font.italic = style.italic
    font.underline = style.underlined
    font.color.rgb = color_to_rgb(style.color)
    if style.vertical_align == "subscript":
        font.subscript = True
    elif style.vertical_align == "superscript":
        font.superscript = True
    set_run_fonts(run, style.font_family_en, style.font_family_ch, style.font_family_cs)
    set_run_shading(run, style.shading_color)


def apply_paragraph_style(paragraph, style: ParagraphStyle) -> None:
    """Apply a ParagraphStyle to a python-docx paragraph."""
    pf = paragraph.paragraph_format
    pf.alignment = ALIGNMENTS[style.text_align]
    pf.left_indent = Pt(style.padding_left)
    pf.right_indent = Pt(style.padding_right)
    pf.space_before = Pt(style.padding_top)
    pf.space_after = Pt(style.padding_bottom)
    pf.line_spacing = style.line_spacing


def new_paragraph() -> Paragraph:
    """Create an empty paragraph that does not belong to any document yet."""
    return Paragraph(OxmlElement("w:p"), None)


def _flatten_texts(texts) -> list[str]:
    segments = []
    for text in texts:
        if isinstance(text, (list, tuple)):
            segments.extend(str(item) for item in text)
        else:
            segments.append(str(text))
    return segments


def text_style_runs(
    n: int,
    font_size=12,
    font_family_ch="宋体",
    font_family_en="Times New Roman",
    font_family_cs=None,
    bold=None,
    italic=None,
    underlined=None,
    color="black",
    vertical_align="baseline",
    shading_color=TRANSPARENT,
) -> list[TextStyle]:
    """Normalize per-run parameters into ``n`` TextStyle objects.

    Every parameter is either a single value shared by all runs or a sequence
    with one value per run. ``bold``, ``italic`` and ``underlined`` take
    1-based run positions instead.
    """
    columns = {
        "font_size": expand_to_length(resolve_font_size(font_size), n, "font_size"),
        "font_family_ch": expand_to_length(font_family_ch, n, "font_family_ch"),
        "font_family_en": expand_to_length(font_family_en, n, "font_family_en"),
        "font_family_cs": expand_to_length(font_family_cs, n, "font_family_cs"),
        "bold": flags_from_indices(bold, n, "bold"),
        "italic": flags_from_indices(italic, n, "italic"),
        "underlined": flags_from_indices(underlined, n, "underlined"),
        "color": expand_to_length(color, n, "color"),
        "vertical_align": expand_to_length(vertical_align, n, "vertical_align"),
        "shading_color": expand_to_length(shading_color, n, "shading_color"),
    }
    return [TextStyle(**{key: values[i] for key, values in columns.items()}) for i in range(n)]


def build_paragraph(
    *texts: str | list[str],
    tab: str = "\t",
    n_tab: int = 1,
    font_size=12,
    font_family_ch="宋体",
    font_family_en="Times New Roman",
    font_family_cs=None,
    bold=None,
    italic=None,
    underlined=None,
    color="black",
    vertical_align="baseline",
    shading_color=TRANSPARENT,
    text_align: str = "justify",
    padding_left: float = 0,
    padding_right: float = 0,
    padding_top: float = 0,
    padding_bottom: float = 0,
    line_spacing: float = 1.25,
) -> Paragraph:
    """
    Build a paragraph made of one run per text segment.

    Except for ``tab`` and ``n_tab``, every run parameter accepts a single
    value or a sequence with one value per segment. ``bold``, ``italic`` and
    ``underlined`` take 1-based segment positions, e.g. ``bold=[2, 4]``.

    Args:
        texts: Text segments (lists are flattened)
        tab: String prepended ``n_tab`` times to the first segment
        n_tab: Number of tabs
        font_size: Points or named sizes such as "小四"
        font_family_ch: East-Asian font
        font_family_en: Western font
        font_family_cs: Complex-script font
        text_align: left, right, center, justify or distributed
        padding_left: Left indent in points
        padding_right: Right indent in points
        padding_top: Space before in points
        padding_bottom: Space after in points
        line_spacing: Line spacing as a multiple of single spacing

    Returns:
        A paragraph not attached to any document; add it with
        ``body_add_paragraph``.
    """
    segments = _flatten_texts(texts)
    if not segments:
        raise InvalidArgumentError("at least one text segment is required")
    if isinstance(n_tab, bool) or not isinstance(n_tab, int) or n_tab < 0:
        raise InvalidArgumentError(f"'n_tab' must be a non-negative integer, got {n_tab!r}")

    styles = text_style_runs(
        len(segments),
        font_size=font_size,
        font_family_ch=font_family_ch,
        font_family_en=font_family_en,
        font_family_cs=font_family_cs,
        bold=bold,
        italic=italic,
        underlined=underlined,
        color=color,
        vertical_align=vertical_align,
        shading_color=shading_color,
    )
    paragraph_style = ParagraphStyle(
        text_align=text_align,
        padding_left=padding_left,
        padding_right=padding_right,
        padding_top=padding_top,
        padding_bottom=padding_bottom,
        line_spacing=line_spacing,
    )

    segments[0] = tab * n_tab + segments[0]

    paragraph = new_paragraph()
    for text, style in zip(segments, styles):
        run = paragraph.add_run(text)
        apply_text_style(run, style)
    apply_paragraph_style(paragraph, paragraph_style)
    return paragraph


def build_simple_paragraph(
    text: str,
    tab: str = "\t",
    n_tab: int = 1,
    font_size=12,
    font_family_ch: str = "宋体",
    font_family_en: str = "Times New Roman",
    font_family_cs: str | None = None,
    bold: bool = False,
    italic: bool = False,
    color: str = "black",
    vertical_align: str = "baseline",
    underlined: bool = False,
    shading_color: str = TRANSPARENT,
    text_align: str = "left",
    padding_left: float = 0,
    padding_right: float = 0,
    padding_top: float = 0,
    padding_bottom: float = 0,
    line_spacing: float = 1.25,
) -> Paragraph:
    """Build a single-run paragraph with boolean bold/italic/underline."""
    return build_paragraph(
        text,
        tab=tab,
        n_tab=n_tab,
        font_size=font_size,
        font_family_ch=font_family_ch,
        font_family_en=font_family_en,
        font_family_cs=font_family_cs,
        bold=bool(bold),
        italic=bool(italic),
        underlined=bool(underlined),
        color=color,
        vertical_align=vertical_align,
        shading_color=shading_color,
        text_align=text_align,
        padding_left=padding_left,
        padding_right=padding_right,
        padding_top=padding_top,
        padding_bottom=padding_bottom,
        line_spacing=line_spacing,
    )
