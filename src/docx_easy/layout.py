"""Page-section layouts for cover pages and custom paper sizes."""

from __future__ import annotations

from dataclasses import dataclass

from docx.enum.section import WD_ORIENT, WD_SECTION_START
from docx.shared import Inches

from .exceptions import InvalidArgumentError

ORIENTATIONS = {
    "portrait": WD_ORIENT.PORTRAIT,
    "landscape": WD_ORIENT.LANDSCAPE,
}

SECTION_TYPES = {
    "continuous": WD_SECTION_START.CONTINUOUS,
    "evenPage": WD_SECTION_START.EVEN_PAGE,
    "nextColumn": WD_SECTION_START.NEW_COLUMN,
    "nextPage": WD_SECTION_START.NEW_PAGE,
    "oddPage": WD_SECTION_START.ODD_PAGE,
}

# Paper sizes in inches (width, height), portrait
PAPER_SIZES: dict[str, tuple[float, float]] = {
    "A3": (11.7, 16.5),
    "A4": (8.27, 11.69),
    "B5": (6.93, 9.84),
}


@dataclass(frozen=True)
class PageLayout:
    """Page geometry of a document section; all lengths are in inches.

    ``page_width`` and ``page_height`` of None keep the size already set on
    the section the layout is applied to.
    """

    page_width: float | None = None
    page_height: float | None = None
    page_orient: str = "portrait"
    section_type: str = "nextPage"
    top: float = 0
    bottom: float = 0
    left: float = 0
    right: float = 0
    header: float = 0
    footer: float = 0
    gutter: float = 0

    def __post_init__(self):
        if self.page_orient not in ORIENTATIONS:
            raise InvalidArgumentError(
                f"'page_orient' must be one of {', '.join(ORIENTATIONS)}, got {self.page_orient!r}"
            )
        if self.section_type not in SECTION_TYPES:
            raise InvalidArgumentError(
                f"'section_type' must be one of {', '.join(SECTION_TYPES)}, got {self.section_type!r}"
            )

    def apply(self, section) -> None:
        """Write this layout onto a python-docx section."""
        section.start_type = SECTION_TYPES[self.section_type]
        section.orientation = ORIENTATIONS[self.page_orient]

        width = Inches(self.page_width) if self.page_width is not None else section.page_width
        height = Inches(self.page_height) if self.page_height is not None else section.page_height
        if width is not None and height is not None and self.page_orient == "landscape":
            width, height = max(width, height), min(width, height)
        if width is not None:
            section.page_width = width
        if height is not None:
            section.page_height = height

        section.top_margin = Inches(self.top)
        section.bottom_margin = Inches(self.bottom)
        section.left_margin = Inches(self.left)
        section.right_margin = Inches(self.right)
        section.header_distance = Inches(self.header)
        section.footer_distance = Inches(self.footer)
        section.gutter = Inches(self.gutter)


def page_layout(
    page_width: float | None = None,
    page_height: float | None = None,
    page_orient: str = "portrait",
    section_type: str = "nextPage",
    top: float = 0,
    bottom: float = 0,
    left: float = 0,
    right: float = 0,
    header: float = 0,
    footer: float = 0,
    gutter: float = 0,
) -> PageLayout:
    """
    Create the layout of a section.

    Args:
        page_width: Page width in inches, None keeps the document's width
        page_height: Page height in inches, None keeps the document's height
        page_orient: portrait or landscape
        section_type: continuous, evenPage, nextColumn, nextPage or oddPage
        top: Top margin in inches
        bottom: Bottom margin in inches
        left: Left margin in inches
        right: Right margin in inches
        header: Header distance in inches
        footer: Footer distance in inches
        gutter: Gutter in inches

    Returns:
        PageLayout to pass to ``body_set_default_section`` or ``body_end_section``
    """
    return PageLayout(
        page_width=page_width,
        page_height=page_height,
        page_orient=page_orient,
        section_type=section_type,
        top=top,
        bottom=bottom,
        left=left,
        right=right,
        header=header,
        footer=footer,
        gutter=gutter,
    )


def cover_layout(paper: str, **overrides) -> PageLayout:
    """Create a layout for a named paper size; keyword arguments override defaults."""
    if paper not in PAPER_SIZES:
        raise InvalidArgumentError(f"'paper' must be one of {', '.join(PAPER_SIZES)}, got {paper!r}")
    width, height = PAPER_SIZES[paper]
    overrides.setdefault("page_width", width)
    overrides.setdefault("page_height", height)
    return page_layout(**overrides)


def a3_cover_layout(
    page_width: float = PAPER_SIZES["A3"][0],
    page_height: float = PAPER_SIZES["A3"][1],
    **kwargs,
) -> PageLayout:
    """A3 page (11.7 x 16.5 inches) with zero margins by default."""
    return page_layout(page_width=page_width, page_height=page_height, **kwargs)


def a4_cover_layout(
    page_width: float = PAPER_SIZES["A4"][0],
    page_height: float = PAPER_SIZES["A4"][1],
    **kwargs,
) -> PageLayout:
    """A4 page (8.27 x 11.69 inches) with zero margins by default."""
    return page_layout(page_width=page_width, page_height=page_height, **kwargs)


def b5_cover_layout(
    page_width: float = PAPER_SIZES["B5"][0],
    page_height: float = PAPER_SIZES["B5"][1],
    **kwargs,
) -> PageLayout:
    """B5 page (6.93 x 9.84 inches) with zero margins by default."""
    return page_layout(page_width=page_width, page_height=page_height, **kwargs)
