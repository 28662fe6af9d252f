"""Cover page composition."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from docx import Document

from .body import append_blank_lines, body_add_paragraph, body_add_table, body_end_section, body_set_default_section
from .config import Config
from .layout import PAPER_SIZES, cover_layout, page_layout
from .paragraph import build_paragraph
from .tables import build_banner_table, build_info_table
from .units import inches_from_cm


def build_cover_document(
    title: str | list[str],
    info: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    config: Config | None = None,
    paper: str | None = None,
    subtitle: str | None = None,
):
    """
    Create a document that starts with a cover page.

    The cover holds a color bar with the title, an optional subtitle and an
    optional label/value table. It is its own section, so the pages that
    follow keep ordinary margins on the same paper size.

    Args:
        title: Title line or lines shown in the color bar
        info: Labels and values, as a mapping or pairs
        config: Configuration object (uses defaults if None)
        paper: A3, A4 or B5 (defaults to ``config.paper``)
        subtitle: Text centered under the title

    Returns:
        python-docx Document, ready for more content or ``save``
    """
    if config is None:
        config = Config()
    paper = paper or config.paper

    cover = cover_layout(paper, top=1, bottom=1, left=1, right=1)
    width, height = PAPER_SIZES[paper]
    body = page_layout(width, height, top=1, bottom=1, left=1.25, right=1.25, header=0.5, footer=0.5)

    document = Document()
    append_blank_lines(document, 6)

    banner = build_banner_table(
        title,
        text_color=config.banner_text_color,
        bg_color=config.banner_bg_color,
        font_name_ch=config.font_family_ch,
        font_name_en=config.font_family_en,
        font_size=config.banner_font_size,
        bar_width=inches_from_cm(config.banner_width_cm),
        bar_height=inches_from_cm(config.banner_height_cm),
        padding_left=12,
        padding_right=12,
    )
    body_add_table(document, banner, align="center")

    if subtitle:
        append_blank_lines(document, 1)
        body_add_paragraph(
            document,
            build_paragraph(
                subtitle,
                n_tab=0,
                font_size=config.font_size,
                font_family_ch=config.font_family_ch,
                font_family_en=config.font_family_en,
                font_family_cs=config.font_family_cs,
                color=config.color,
                text_align="center",
                line_spacing=config.line_spacing,
            ),
        )

    if info:
        pairs = list(info.items()) if isinstance(info, Mapping) else list(info)
        append_blank_lines(document, 4)
        table = build_info_table(
            [label for label, _ in pairs],
            [value for _, value in pairs],
            y_border_color=config.info_border_color,
            x_fontsize=config.info_font_size,
            font_family_ch=config.font_family_ch,
            font_family_en=config.font_family_en,
            font_family_cs=config.font_family_cs,
        )
        body_add_table(document, table, align="center")

    body_end_section(document, cover)
    body_set_default_section(document, body)
    return document
