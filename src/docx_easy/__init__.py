"""
docx-easy - Build formatted Word document fragments.

Helpers on top of python-docx for formatted paragraphs, color bars,
label/value tables, page layouts and named (Chinese) font sizes.
"""

from .body import (
    append_blank_lines,
    body_add_paragraph,
    body_add_table,
    body_end_section,
    body_set_default_section,
)
from .config import DEFAULT_CONFIG, Config
from .cover import build_cover_document
from .exceptions import DocxEasyError, InvalidArgumentError, LengthMismatchError, TypeMismatchError
from .fonts import CHINESE_FONT_SIZE_MAP, parse_font_size, resolve_font_size
from .layout import (
    PAPER_SIZES,
    PageLayout,
    a3_cover_layout,
    a4_cover_layout,
    b5_cover_layout,
    cover_layout,
    page_layout,
)
from .paragraph import ParagraphStyle, TextStyle, build_paragraph, build_simple_paragraph
from .tables import build_banner_table, build_info_table
from .units import inches_from_cm

__version__ = "0.1.0"
__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "CHINESE_FONT_SIZE_MAP",
    "PAPER_SIZES",
    "DocxEasyError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "TypeMismatchError",
    "PageLayout",
    "ParagraphStyle",
    "TextStyle",
    "inches_from_cm",
    "parse_font_size",
    "resolve_font_size",
    "build_paragraph",
    "build_simple_paragraph",
    "build_banner_table",
    "build_info_table",
    "page_layout",
    "cover_layout",
    "a3_cover_layout",
    "a4_cover_layout",
    "b5_cover_layout",
    "append_blank_lines",
    "body_add_paragraph",
    "body_add_table",
    "body_set_default_section",
    "body_end_section",
    "build_cover_document",
]
